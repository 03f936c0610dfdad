"""Hiring orchestration."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

import structlog

from .budget import Sponsor
from .candidate import Candidate, Employee
from .errors import InsufficientBudgetError

if TYPE_CHECKING:
    from ..departments import Onboarding, Payroll


@dataclass(slots=True, frozen=True)
class NotificationRecord:
    """One collaborator call made during a hire."""

    department: str
    action: str
    email: str


class HRDepartment:
    """Coordinates affordability, validation, notifications and spending.

    Checks happen before any side effect: an unaffordable hire raises
    ``InsufficientBudgetError`` and invalid candidate data raises
    ``ValidationError`` with the sponsor and collaborators untouched. Once
    collaborators are notified the spend follows; there is no compensation
    step because ``spend`` cannot fail.

    ``can_afford`` followed by ``spend`` is not atomic. Callers sharing a
    sponsor across threads must serialize hires against it.
    """

    def __init__(self, accounting: "Payroll", it: "Onboarding") -> None:
        self._accounting = accounting
        self._it = it
        self._notifications: list[NotificationRecord] = []
        self._logger = structlog.get_logger(__name__)

    @property
    def notifications(self) -> list[NotificationRecord]:
        return list(self._notifications)

    def hire(self, candidate: Candidate, sponsor: Sponsor) -> Employee:
        if not sponsor.can_afford(candidate.annual_salary):
            self._logger.warning(
                "hire.insufficient_budget",
                sponsor=sponsor.owner,
                requested=str(candidate.annual_salary),
                available=str(sponsor.available),
            )
            raise InsufficientBudgetError(
                sponsor.owner, candidate.annual_salary, sponsor.available
            )

        employee = candidate.hire_for(sponsor)

        self._it.onboard(employee)
        self._record(self._it.label, "onboard", employee)
        self._accounting.add_to_payroll(employee)
        self._record(self._accounting.label, "add_to_payroll", employee)

        sponsor.spend(employee.salary)

        self._logger.info(
            "hire.completed",
            email=employee.email,
            sponsor=employee.sponsor,
            salary=str(employee.salary),
            remaining=str(sponsor.available),
        )
        return employee

    def hire_employee(
        self,
        sponsor: Sponsor,
        *,
        name: str,
        email: str,
        annual_salary: Decimal | int | str,
    ) -> Employee:
        """Hire straight from raw request fields."""
        return self.hire(Candidate(name=name, email=email, annual_salary=annual_salary), sponsor)

    def _record(self, department: str, action: str, employee: Employee) -> None:
        self._notifications.append(
            NotificationRecord(department=department, action=action, email=employee.email)
        )
