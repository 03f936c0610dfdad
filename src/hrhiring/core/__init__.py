"""Hiring domain core."""

from __future__ import annotations

from .budget import Budget, SharedBudget, Sponsor
from .candidate import Candidate, Employee
from .errors import HiringError, InsufficientBudgetError, ValidationError
from .hiring import HRDepartment, NotificationRecord

__all__ = [
    "Sponsor",
    "Budget",
    "SharedBudget",
    "Candidate",
    "Employee",
    "HiringError",
    "ValidationError",
    "InsufficientBudgetError",
    "HRDepartment",
    "NotificationRecord",
]
