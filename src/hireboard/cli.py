"""Typer CLI entrypoint for the candidate dashboard."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import load_config_file
from .container import create_container
from .logging import configure_logging
from .schemas import CandidateFilters
from .schemas.config import AppConfig

app = typer.Typer(help="Candidate scoring and shortlisting CLI.")


def _parse_weight_overrides(values: list[str]) -> dict[str, float]:
    overrides: dict[str, float] = {}
    for item in values:
        name, sep, raw = item.partition("=")
        if not sep or not name.strip():
            raise typer.BadParameter(f"Expected NAME=VALUE, got {item!r}", param_hint="--weight")
        try:
            overrides[name.strip()] = float(raw)
        except ValueError as exc:
            raise typer.BadParameter(
                f"Weight {name.strip()!r} must be numeric, got {raw!r}", param_hint="--weight"
            ) from exc
    return overrides


@app.command()
def run(
    candidates: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Candidates JSON or JSONL path."),
    output: Path = typer.Option(
        ...,
        exists=False,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        help="Output report JSON path.",
    ),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    query: Optional[str] = typer.Option(None, help="Free-text search over name, location and skills."),
    location: Optional[str] = typer.Option(None, help="Location substring filter."),
    min_salary: Optional[str] = typer.Option(None, help="Minimum full-time salary (inclusive)."),
    max_salary: Optional[str] = typer.Option(None, help="Maximum full-time salary (inclusive)."),
    skills: Optional[str] = typer.Option(None, help="Skill substring filter."),
    weight: Optional[List[str]] = typer.Option(None, help="Weight override NAME=VALUE, repeatable."),
    select: Optional[List[str]] = typer.Option(None, help="Email of a candidate to add to the team, repeatable."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
    log_json: bool = typer.Option(True, help="Render logs as JSON lines."),
) -> None:
    """Score candidates and write the dashboard report."""
    configure_logging(log_level, json_output=log_json)

    app_config = AppConfig()
    if config:
        try:
            app_config = load_config_file(config)
        except yaml.YAMLError as exc:
            raise typer.BadParameter(f"Invalid YAML: {exc}", param_hint="--config") from exc
        except ValidationError as exc:
            raise typer.BadParameter(f"Invalid config: {exc}", param_hint="--config") from exc

    weights = app_config.core.weights
    if weight:
        try:
            weights = weights.with_overrides(_parse_weight_overrides(weight))
        except ValidationError as exc:
            raise typer.BadParameter(str(exc), param_hint="--weight") from exc

    base_filters = app_config.core.filters.model_dump()
    cli_filters = {
        "location": location,
        "min_salary": min_salary,
        "max_salary": max_salary,
        "skills": skills,
    }
    base_filters.update({key: value for key, value in cli_filters.items() if value is not None})
    filters = CandidateFilters.model_validate(base_filters)

    try:
        container = create_container(settings=app_config.to_settings())
    except TypeError as exc:
        raise typer.BadParameter(f"Invalid config: {exc}", param_hint="--config") from exc
    pipeline = container.pipeline()

    try:
        report = pipeline.run(
            candidates_path=candidates,
            output_path=output,
            weights=weights,
            filters=filters,
            query=query if query is not None else app_config.core.query,
            selected_emails=select or [],
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--candidates") from exc
    typer.echo(
        f"Scored {report['metadata']['candidate_count']} candidates "
        f"({report['metadata']['visible_count']} shown). Report saved to {output}."
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
