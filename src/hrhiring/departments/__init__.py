"""Departments notified while onboarding a new employee."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..core.candidate import Employee
from .accounting import AccountingDepartment
from .it import ITDepartment


@runtime_checkable
class Onboarding(Protocol):
    """Creates accounts and equipment for new employees.

    A production implementation would call out to the IT provisioning service;
    the orchestrator calls it at most once per hire.
    """

    label: str

    def onboard(self, employee: Employee) -> None:
        """Provision the employee."""


@runtime_checkable
class Payroll(Protocol):
    """Registers new employees for salary payments."""

    label: str

    def add_to_payroll(self, employee: Employee) -> None:
        """Add the employee to the payroll."""


__all__ = ["Onboarding", "Payroll", "ITDepartment", "AccountingDepartment"]
