"""Hiring failures surfaced to callers."""

from __future__ import annotations

from decimal import Decimal


class HiringError(Exception):
    """Base class for every error that aborts a hire."""

    kind: str = "HiringError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(HiringError):
    """Candidate data failed validation."""

    SALARY_MESSAGE = "AnnualSalary must be greater than 0"
    NAME_MESSAGE = "Name must be set"
    EMAIL_MESSAGE = "Invalid Email"

    def __init__(self, kind: str, message: str):
        super().__init__(message)
        self.kind = kind

    @classmethod
    def invalid_salary(cls) -> "ValidationError":
        return cls("salary", cls.SALARY_MESSAGE)

    @classmethod
    def missing_name(cls) -> "ValidationError":
        return cls("name", cls.NAME_MESSAGE)

    @classmethod
    def invalid_email(cls) -> "ValidationError":
        return cls("email", cls.EMAIL_MESSAGE)


class InsufficientBudgetError(HiringError):
    """The sponsor cannot afford the candidate's salary."""

    kind = "InsufficientBudget"
    MESSAGE = "Not enough budget."

    def __init__(self, owner: str, requested: Decimal, available: Decimal):
        super().__init__(self.MESSAGE)
        self.owner = owner
        self.requested = requested
        self.available = available
