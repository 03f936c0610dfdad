"""Accounting department stub."""

from __future__ import annotations

import structlog

from ..core.candidate import Employee


class AccountingDepartment:
    """Records payroll additions in memory."""

    def __init__(self, *, label: str = "Accounting") -> None:
        self.label = label
        self.payroll_added = False
        self.payroll: list[Employee] = []
        self._logger = structlog.get_logger(__name__)

    def add_to_payroll(self, employee: Employee) -> None:
        self.payroll.append(employee)
        self.payroll_added = True
        self._logger.debug(
            "accounting.payroll_added",
            department=self.label,
            email=employee.email,
            salary=str(employee.salary),
        )
