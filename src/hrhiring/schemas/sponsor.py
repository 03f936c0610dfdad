from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from ..core import Budget, SharedBudget, Sponsor


class SponsorBookError(ValueError):
    """Raised when a sponsor book cannot be assembled."""


class BudgetSpec(BaseModel):
    """A stand-alone budget."""

    owner: str = Field(..., min_length=1)
    amount: Decimal

    model_config = ConfigDict(extra="forbid")


class SharedBudgetSpec(BaseModel):
    """A budget funded by other budgets, referenced by owner."""

    owner: str = Field(..., min_length=1)
    members: list[str] = Field(..., min_length=1)

    model_config = ConfigDict(extra="forbid")


class SponsorBook(BaseModel):
    """All sponsors available to a hiring run."""

    budgets: list[BudgetSpec] = Field(default_factory=list)
    shared: list[SharedBudgetSpec] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    def build(self) -> dict[str, Sponsor]:
        """Instantiate sponsors keyed by owner.

        Shared budgets hold the same ``Budget`` objects as the stand-alone
        entries, so spending through either is reflected in both.
        """
        budgets: dict[str, Budget] = {}
        for spec in self.budgets:
            if spec.owner in budgets:
                raise SponsorBookError(f"Duplicate sponsor owner: {spec.owner!r}")
            budgets[spec.owner] = Budget(spec.owner, spec.amount)

        sponsors: dict[str, Sponsor] = dict(budgets)
        for spec in self.shared:
            if spec.owner in sponsors:
                raise SponsorBookError(f"Duplicate sponsor owner: {spec.owner!r}")
            missing = [member for member in spec.members if member not in budgets]
            if missing:
                raise SponsorBookError(
                    f"Shared budget {spec.owner!r} references unknown budgets: {missing}"
                )
            sponsors[spec.owner] = SharedBudget(
                spec.owner, [budgets[member] for member in spec.members]
            )
        return sponsors
