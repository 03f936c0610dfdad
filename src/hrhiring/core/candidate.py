"""Candidate and employee entities."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .budget import Sponsor, to_decimal
from .errors import ValidationError


@dataclass(slots=True, frozen=True)
class Employee:
    """Record produced by a successful hire."""

    name: str
    salary: Decimal
    email: str
    sponsor: str


@dataclass(slots=True)
class Candidate:
    """Raw hire request data. Validation is explicit, never at construction."""

    name: str
    email: str
    annual_salary: Decimal

    def __post_init__(self) -> None:
        self.annual_salary = to_decimal(self.annual_salary)

    def validate(self) -> None:
        """Raise the first failing check: salary, then name, then email."""
        if not self.annual_salary.is_finite() or self.annual_salary <= 0:
            raise ValidationError.invalid_salary()
        if _is_blank(self.name):
            raise ValidationError.missing_name()
        if _is_blank(self.email):
            raise ValidationError.invalid_email()

    def hire_for(self, sponsor: Sponsor) -> Employee:
        self.validate()
        return Employee(
            name=self.name,
            salary=self.annual_salary,
            email=self.email,
            sponsor=sponsor.owner,
        )


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()
