"""Typer CLI entrypoint for the hiring pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from pydantic import ValidationError

from .container import create_container
from .logging import configure_logging
from .pipeline import AuditLogger, SponsorLoadError
from .schemas.config import load_config

app = typer.Typer(help="Batch hiring CLI.")


@app.command()
def run(
    candidates: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Hire requests JSONL path."),
    sponsors: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Sponsor book YAML/JSON path."),
    output: Path = typer.Option(
        ...,
        exists=False,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        help="Output JSON path.",
    ),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
    log_json: bool = typer.Option(True, "--log-json/--log-console", help="Render logs as JSON lines or console text."),
    audit_log: Optional[Path] = typer.Option(None, dir_okay=False, help="Audit log output (JSONL)."),
) -> None:
    """Run the hiring pipeline."""
    settings: dict[str, Any] = {}
    if config:
        try:
            with config.open("r", encoding="utf-8") as handle:
                loaded = yaml.safe_load(handle) or {}
        except (yaml.YAMLError, UnicodeDecodeError) as exc:
            raise typer.BadParameter(f"Invalid config file: {exc}", param_hint="--config") from exc
        try:
            settings = load_config(loaded).to_settings()
        except ValidationError as exc:
            raise typer.BadParameter(f"Invalid config file: {exc}", param_hint="--config") from exc

    configure_logging(log_level, json_output=log_json)

    container = create_container(settings=settings)
    pipeline = container.pipeline()
    audit_logger = AuditLogger(audit_log) if audit_log else None

    try:
        results = pipeline.run(
            candidates_path=candidates,
            sponsors_path=sponsors,
            output_path=output,
            audit_logger=audit_logger,
        )
    except SponsorLoadError as exc:
        raise typer.BadParameter(str(exc), param_hint="--sponsors") from exc

    hired = sum(1 for entry in results if entry["status"] == "hired")
    typer.echo(
        f"Processed {len(results)} requests ({hired} hired, {len(results) - hired} rejected). "
        f"Results saved to {output}."
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
