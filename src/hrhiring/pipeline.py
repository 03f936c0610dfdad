"""Batch hiring pipeline assembly and execution."""

from __future__ import annotations

import json
from dataclasses import asdict
from decimal import Decimal
from pathlib import Path
from typing import Any

import pendulum
import structlog
import yaml

from . import __version__
from .core import HiringError, HRDepartment, Sponsor
from .schemas import HireRequest, SponsorBook


class HireRequestLoadError(ValueError):
    """Raised when hire request loading encounters invalid records."""

    def __init__(self, errors: list[str], partial: list[HireRequest]):
        super().__init__("Hire request loading failed")
        self.errors = errors
        self.partial = partial

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Hire request loading failed: {self.errors}"


class CandidateLoader:
    """Load hire requests from a JSONL file."""

    def load(self, path: Path) -> list[HireRequest]:
        requests: list[HireRequest] = []
        errors: list[str] = []
        with path.open("rb") as handle:
            for idx, chunk in enumerate(handle, start=1):
                try:
                    raw = chunk.decode("utf-8").strip()
                except UnicodeDecodeError as exc:
                    errors.append(f"line {idx}: invalid UTF-8 ({exc})")
                    continue
                if not raw:
                    continue
                try:
                    record = json.loads(raw)
                except json.JSONDecodeError as exc:
                    errors.append(f"line {idx}: invalid JSON ({exc})")
                    continue
                if not isinstance(record, dict):
                    errors.append(f"line {idx}: expected a JSON object")
                    continue
                if not record.get("sponsor"):
                    errors.append(f"line {idx}: missing sponsor field")
                    continue
                try:
                    requests.append(HireRequest.model_validate(record))
                except Exception as exc:  # noqa: BLE001
                    errors.append(f"line {idx}: {exc}")
        if errors:
            raise HireRequestLoadError(errors, requests)
        return requests


class SponsorLoadError(ValueError):
    """Raised when the sponsor book file cannot be turned into sponsors."""


class SponsorLoader:
    """Load the sponsor book from YAML (or JSON, a YAML subset)."""

    def load(self, path: Path) -> dict[str, Sponsor]:
        try:
            with path.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
        except (yaml.YAMLError, UnicodeDecodeError) as exc:
            raise SponsorLoadError(f"Invalid sponsors file: {exc}") from exc
        if not isinstance(data, dict):
            raise SponsorLoadError("Sponsors file must contain a mapping")
        try:
            return SponsorBook.model_validate(data).build()
        except ValueError as exc:
            raise SponsorLoadError(f"Invalid sponsors file: {exc}") from exc


class OutputWriter:
    """Persist hiring results."""

    def write(self, path: Path, payload: dict | list[dict]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2, default=_json_default),
            encoding="utf-8",
        )


class HiringPipeline:
    """Hire every request in a file against its named sponsor."""

    def __init__(
        self,
        *,
        hr: HRDepartment,
        candidate_loader: CandidateLoader | None = None,
        sponsor_loader: SponsorLoader | None = None,
        writer: OutputWriter | None = None,
    ) -> None:
        self._hr = hr
        self._candidates = candidate_loader or CandidateLoader()
        self._sponsors = sponsor_loader or SponsorLoader()
        self._writer = writer or OutputWriter()
        self._logger = structlog.get_logger(__name__)

    def run(
        self,
        *,
        candidates_path: Path,
        sponsors_path: Path,
        output_path: Path,
        audit_logger: "AuditLogger | None" = None,
    ) -> list[dict]:
        sponsors = self._sponsors.load(sponsors_path)
        load_errors: list[str] = []
        try:
            requests = self._candidates.load(candidates_path)
        except HireRequestLoadError as exc:
            requests = exc.partial
            load_errors.extend(exc.errors)
            self._logger.warning("requests.partial_load", errors=exc.errors)

        results: list[dict] = []
        for index, request in enumerate(requests):
            with structlog.contextvars.bound_contextvars(request_index=index):
                entry = self._hire_one(request, sponsors)
            entry["index"] = index
            results.append(entry)

            if audit_logger:
                audit_logger.append(
                    {
                        "index": index,
                        "email": request.email,
                        "sponsor": request.sponsor,
                        "annual_salary": request.annual_salary,
                        "status": entry["status"],
                        "error": entry.get("error"),
                        "sponsor_available": entry.get("sponsor_available"),
                        "timestamp": pendulum.now().to_iso8601_string(),
                    }
                )

        hired = sum(1 for entry in results if entry["status"] == "hired")
        metadata = {
            "request_count": len(requests),
            "hired": hired,
            "rejected": len(results) - hired,
            "errors": load_errors,
            "sponsors": {owner: sponsor.available for owner, sponsor in sponsors.items()},
            "timestamp": pendulum.now().to_iso8601_string(),
            "app_version": __version__,
        }
        serialized = json.loads(json.dumps(results, default=_json_default, ensure_ascii=False))
        self._writer.write(output_path, {"metadata": metadata, "results": serialized})
        return serialized

    def _hire_one(self, request: HireRequest, sponsors: dict[str, Sponsor]) -> dict[str, Any]:
        sponsor = sponsors.get(request.sponsor)
        if sponsor is None:
            self._logger.warning("hire.unknown_sponsor", sponsor=request.sponsor, email=request.email)
            return {
                "status": "rejected",
                "sponsor": request.sponsor,
                "error": {
                    "kind": "UnknownSponsor",
                    "message": f"Unknown sponsor: {request.sponsor!r}",
                },
            }

        try:
            employee = self._hr.hire(request.to_candidate(), sponsor)
        except HiringError as exc:
            self._logger.warning(
                "hire.rejected",
                sponsor=sponsor.owner,
                email=request.email,
                kind=exc.kind,
                message=exc.message,
            )
            return {
                "status": "rejected",
                "sponsor": sponsor.owner,
                "sponsor_available": sponsor.available,
                "error": {"kind": exc.kind, "message": exc.message},
            }

        return {
            "status": "hired",
            "sponsor": sponsor.owner,
            "sponsor_available": sponsor.available,
            "employee": asdict(employee),
        }


def _json_default(value):  # type: ignore[override]
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, pendulum.DateTime):
        return value.to_iso8601_string()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class AuditLogger:
    """Append-only audit logger writing JSON lines."""

    def __init__(self, path: Path):
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def append(self, record: dict) -> None:
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(record, ensure_ascii=False, default=_json_default))
            handle.write("\n")
