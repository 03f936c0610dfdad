"""Hiring workflow: candidates, sponsoring budgets and onboarding."""

__version__ = "0.1.0"
