"""Sponsoring budgets: a single budget and a budget shared by several owners."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Protocol, runtime_checkable


@runtime_checkable
class Sponsor(Protocol):
    """Anything that can fund a hire."""

    @property
    def owner(self) -> str:
        """Label stamped on employees hired against this sponsor."""

    @property
    def available(self) -> Decimal:
        """Funds currently available."""

    def can_afford(self, amount: Decimal) -> bool:
        """Return True when ``amount`` fits in the available funds."""

    def spend(self, amount: Decimal) -> None:
        """Debit ``amount``; callers check ``can_afford`` first."""


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Coerce a money amount to Decimal."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


class Budget:
    """Funds owned by a single department or project."""

    def __init__(self, owner: str, amount: Decimal | int | float | str):
        self._owner = owner
        self._available = to_decimal(amount)
        if not self._available.is_finite():
            raise ValueError(f"Budget {owner!r} needs a finite amount, got {amount!r}")

    @property
    def owner(self) -> str:
        return self._owner

    @property
    def available(self) -> Decimal:
        return self._available

    def can_afford(self, amount: Decimal | int | float | str) -> bool:
        amount = to_decimal(amount)
        return amount.is_finite() and amount <= self._available

    def spend(self, amount: Decimal | int | float | str) -> None:
        # Not re-checked here; an unchecked overspend goes negative.
        self._available -= to_decimal(amount)

    def __repr__(self) -> str:
        return f"Budget(owner={self._owner!r}, available={self._available})"


class SharedBudget:
    """A sponsor funded jointly by several budgets.

    The available amount is always the live sum of the members. Spending splits
    the charge evenly across members without looking at what each member can
    cover on its own, so a poorer member can end up below zero while the total
    was sufficient.
    """

    def __init__(self, owner: str, budgets: Iterable[Budget]):
        self._owner = owner
        self._budgets = list(budgets)
        if not self._budgets:
            raise ValueError(f"Shared budget {owner!r} needs at least one member budget")

    @property
    def owner(self) -> str:
        return self._owner

    @property
    def budgets(self) -> list[Budget]:
        return list(self._budgets)

    @property
    def available(self) -> Decimal:
        return sum((budget.available for budget in self._budgets), Decimal(0))

    def can_afford(self, amount: Decimal | int | float | str) -> bool:
        amount = to_decimal(amount)
        return amount.is_finite() and self.available >= amount

    def spend(self, amount: Decimal | int | float | str) -> None:
        charge = to_decimal(amount) / len(self._budgets)
        for budget in self._budgets:
            budget.spend(charge)

    def __repr__(self) -> str:
        members = ", ".join(budget.owner for budget in self._budgets)
        return f"SharedBudget(owner={self._owner!r}, members=[{members}], available={self.available})"
