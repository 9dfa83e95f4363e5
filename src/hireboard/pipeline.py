"""Dataset loading, dashboard assembly and report output."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Sequence

import pendulum
import structlog
from pydantic import ValidationError

from . import __version__
from .core import (
    RecommendationSelector,
    ScoredCandidate,
    ScoringEngine,
    TeamSelection,
    filter_candidates,
    location_counts,
    rank_candidates,
    salary_histogram,
    summarize,
)
from .schemas import DEFAULT_WEIGHTS, CandidateFilters, CandidateRecord, WeightConfig


class CandidateLoadError(ValueError):
    """Raised when candidate loading encounters invalid records."""

    def __init__(self, errors: list[str], partial: list[CandidateRecord]):
        super().__init__("Candidate loading failed")
        self.errors = errors
        self.partial = partial

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Candidate loading failed: {self.errors}"


class CandidateLoader:
    """Load candidate records from a JSON array or a JSON Lines file."""

    def load(self, path: Path) -> list[CandidateRecord]:
        if path.suffix.lower() == ".jsonl":
            entries = self._read_lines(path)
        else:
            entries = self._read_array(path)

        candidates: list[CandidateRecord] = []
        errors: list[str] = []
        for label, entry in entries:
            if isinstance(entry, Exception):
                errors.append(f"{label}: invalid JSON ({entry})")
                continue
            if not isinstance(entry, dict):
                errors.append(f"{label}: expected an object, got {type(entry).__name__}")
                continue
            try:
                candidates.append(CandidateRecord.model_validate(entry))
            except ValidationError as exc:
                errors.append(f"{label}: {exc}")
        if errors:
            raise CandidateLoadError(errors, candidates)
        return candidates

    @staticmethod
    def _read_lines(path: Path) -> list[tuple[str, Any]]:
        entries: list[tuple[str, Any]] = []
        with path.open("r", encoding="utf-8") as handle:
            for idx, line in enumerate(handle, start=1):
                raw = line.strip()
                if not raw:
                    continue
                try:
                    entries.append((f"line {idx}", json.loads(raw)))
                except json.JSONDecodeError as exc:
                    entries.append((f"line {idx}", exc))
        return entries

    @staticmethod
    def _read_array(path: Path) -> list[tuple[str, Any]]:
        with path.open("r", encoding="utf-8") as handle:
            try:
                data = json.load(handle)
            except json.JSONDecodeError as exc:
                raise ValueError(f"Invalid candidates JSON: {exc}") from exc
        if not isinstance(data, list):
            raise ValueError("Candidates JSON must be an array of objects")
        return [(f"record {idx}", item) for idx, item in enumerate(data)]


class ReportWriter:
    """Persist dashboard reports."""

    def write(self, path: Path, payload: dict) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


class DashboardPipeline:
    """Score a dataset under one weight snapshot and assemble every view."""

    def __init__(
        self,
        *,
        engine: ScoringEngine,
        selector: RecommendationSelector,
        loader: CandidateLoader | None = None,
        writer: ReportWriter | None = None,
    ) -> None:
        self._engine = engine
        self._selector = selector
        self._loader = loader or CandidateLoader()
        self._writer = writer or ReportWriter()
        self._logger = structlog.get_logger(__name__)

    def build(
        self,
        records: Sequence[CandidateRecord],
        *,
        weights: WeightConfig = DEFAULT_WEIGHTS,
        filters: CandidateFilters | None = None,
        query: str | None = None,
        selected_emails: Iterable[str] = (),
        load_errors: Sequence[str] = (),
    ) -> dict[str, Any]:
        scored = self._engine.score_all(records, weights)
        visible = rank_candidates(filter_candidates(scored, filters, query))
        recommendations = self._selector.select(scored)
        selection = TeamSelection.from_emails(scored, selected_emails)
        summary = summarize(scored)

        self._logger.info(
            "dashboard.built",
            candidate_count=len(scored),
            visible_count=len(visible),
            weights_total=weights.total,
            selected=len(selection.members),
        )

        return {
            "metadata": {
                "candidate_count": len(scored),
                "visible_count": len(visible),
                "errors": list(load_errors),
                "weights": weights.model_dump(by_alias=True),
                "weights_total": weights.total,
                "weights_balanced": weights.is_balanced,
                "query": query or "",
                "filters": (filters or CandidateFilters()).model_dump(),
                "timestamp": pendulum.now().to_iso8601_string(),
                "app_version": __version__,
            },
            "summary": {
                "total_candidates": summary.total_candidates,
                "average_salary": summary.average_salary,
                "average_score": summary.average_score,
            },
            "candidates": [candidate.to_dict() for candidate in visible],
            "recommendations": {
                "top_performers": _serialize(recommendations.top_performers),
                "best_value": [
                    {**candidate.to_dict(), "value_score": self._selector.value_score(candidate)}
                    for candidate in recommendations.best_value
                ],
                "diverse_team": _serialize(recommendations.diverse_team),
                "diverse_team_budget": sum(c.salary_num for c in recommendations.diverse_team),
            },
            "aggregates": {
                "locations": [
                    {"location": location, "count": count}
                    for location, count in location_counts(scored).items()
                ],
                "salary_ranges": [
                    {"range": label, "count": count}
                    for label, count in salary_histogram(scored).items()
                ],
            },
            "selection": {
                "members": _serialize(selection.members),
                "count": len(selection.members),
                "limit": selection.limit,
                "budget": selection.budget,
            },
        }

    def run(
        self,
        *,
        candidates_path: Path,
        output_path: Path,
        weights: WeightConfig = DEFAULT_WEIGHTS,
        filters: CandidateFilters | None = None,
        query: str | None = None,
        selected_emails: Iterable[str] = (),
    ) -> dict[str, Any]:
        load_errors: list[str] = []
        try:
            records = self._loader.load(candidates_path)
        except CandidateLoadError as exc:
            records = exc.partial
            load_errors.extend(exc.errors)
            self._logger.warning("candidates.partial_load", errors=exc.errors)

        report = self.build(
            records,
            weights=weights,
            filters=filters,
            query=query,
            selected_emails=selected_emails,
            load_errors=load_errors,
        )
        self._writer.write(output_path, report)
        return report


def _serialize(candidates: Iterable[ScoredCandidate]) -> list[dict[str, Any]]:
    return [candidate.to_dict() for candidate in candidates]
