"""Pydantic schema definitions for hiring input files."""

from __future__ import annotations

from .hire import HireRequest
from .sponsor import BudgetSpec, SharedBudgetSpec, SponsorBook, SponsorBookError

__all__ = [
    "HireRequest",
    "BudgetSpec",
    "SharedBudgetSpec",
    "SponsorBook",
    "SponsorBookError",
]
