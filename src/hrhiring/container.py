"""Dependency injection container for the hiring workflow."""

from __future__ import annotations

from dependency_injector import containers, providers

from .core import HRDepartment
from .departments import AccountingDepartment, ITDepartment
from .pipeline import CandidateLoader, HiringPipeline, SponsorLoader


class HiringContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    # Factories: every pipeline gets its own departments and notification log.
    it_department = providers.Factory(ITDepartment)
    accounting_department = providers.Factory(AccountingDepartment)

    hr_department = providers.Factory(
        HRDepartment,
        accounting=accounting_department,
        it=it_department,
    )

    candidate_loader = providers.Singleton(CandidateLoader)
    sponsor_loader = providers.Singleton(SponsorLoader)

    pipeline = providers.Factory(
        HiringPipeline,
        hr=hr_department,
        candidate_loader=candidate_loader,
        sponsor_loader=sponsor_loader,
    )


def create_container(*, settings: dict | None = None) -> HiringContainer:
    """Instantiate container with optional overrides."""

    container = HiringContainer()

    if not settings:
        return container

    department_settings = settings.get("departments", {}) if isinstance(settings, dict) else {}

    it_label = (department_settings.get("it") or {}).get("label")
    if it_label:
        container.it_department.override(providers.Factory(ITDepartment, label=it_label))

    accounting_label = (department_settings.get("accounting") or {}).get("label")
    if accounting_label:
        container.accounting_department.override(
            providers.Factory(AccountingDepartment, label=accounting_label)
        )

    return container
