from __future__ import annotations

from decimal import Decimal

import pytest

from hrhiring.core import Budget, SharedBudget
from hrhiring.schemas import SponsorBook, SponsorBookError


def test_sponsor_book_builds_budgets_and_shared_budgets():
    book = SponsorBook.model_validate(
        {
            "budgets": [
                {"owner": "R&D", "amount": 300_000},
                {"owner": "Marketing", "amount": "50000"},
            ],
            "shared": [{"owner": "Organic 3D printer", "members": ["R&D", "Marketing"]}],
        }
    )

    sponsors = book.build()

    assert isinstance(sponsors["R&D"], Budget)
    assert isinstance(sponsors["Organic 3D printer"], SharedBudget)
    assert sponsors["Organic 3D printer"].available == Decimal("350000")


def test_shared_members_are_the_standalone_budgets():
    book = SponsorBook.model_validate(
        {
            "budgets": [{"owner": "R&D", "amount": 100}, {"owner": "Ops", "amount": 100}],
            "shared": [{"owner": "Joint", "members": ["R&D", "Ops"]}],
        }
    )
    sponsors = book.build()

    sponsors["Joint"].spend(50)

    assert sponsors["R&D"].available == Decimal("75")
    assert sponsors["Ops"].available == Decimal("75")


def test_duplicate_owner_rejected():
    book = SponsorBook.model_validate(
        {"budgets": [{"owner": "R&D", "amount": 1}, {"owner": "R&D", "amount": 2}]}
    )

    with pytest.raises(SponsorBookError):
        book.build()


def test_shared_owner_clashing_with_budget_rejected():
    book = SponsorBook.model_validate(
        {
            "budgets": [{"owner": "R&D", "amount": 1}],
            "shared": [{"owner": "R&D", "members": ["R&D"]}],
        }
    )

    with pytest.raises(SponsorBookError):
        book.build()


def test_unknown_member_rejected():
    book = SponsorBook.model_validate(
        {
            "budgets": [{"owner": "R&D", "amount": 1}],
            "shared": [{"owner": "Joint", "members": ["R&D", "Sales"]}],
        }
    )

    with pytest.raises(SponsorBookError) as exc:
        book.build()
    assert "Sales" in str(exc.value)
