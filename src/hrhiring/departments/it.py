"""IT department stub."""

from __future__ import annotations

import structlog

from ..core.candidate import Employee


class ITDepartment:
    """Records onboarded employees in memory."""

    def __init__(self, *, label: str = "IT") -> None:
        self.label = label
        self.account_created = False
        self.accounts: list[Employee] = []
        self._logger = structlog.get_logger(__name__)

    def onboard(self, employee: Employee) -> None:
        self.accounts.append(employee)
        self.account_created = True
        self._logger.debug("it.account_created", department=self.label, email=employee.email)
