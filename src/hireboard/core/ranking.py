"""Search, attribute filters, ranking and chart aggregates over scored candidates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from ..schemas import CandidateFilters
from .scoring import ScoredCandidate, round_half_up

UNKNOWN_LOCATION = "Unknown"

# (exclusive upper bound, label); ``None`` closes the last bucket.
SALARY_BUCKETS: tuple[tuple[int | None, str], ...] = (
    (50_000, "0-50k"),
    (75_000, "50k-75k"),
    (100_000, "75k-100k"),
    (125_000, "100k-125k"),
    (None, "125k+"),
)


@dataclass(frozen=True, slots=True)
class DashboardSummary:
    """Headline figures for the whole population."""

    total_candidates: int
    average_salary: int
    average_score: int


def matches_search(candidate: ScoredCandidate, query: str | None) -> bool:
    """Case-insensitive substring match on name, location or any skill."""
    needle = (query or "").lower()
    if not needle:
        return True
    normalized = candidate.candidate
    if needle in (normalized.record.name or "").lower():
        return True
    if needle in (normalized.location or "").lower():
        return True
    return any(needle in skill.lower() for skill in normalized.skills)


def matches_filters(candidate: ScoredCandidate, filters: CandidateFilters) -> bool:
    normalized = candidate.candidate
    if filters.location and filters.location.lower() not in (normalized.location or "").lower():
        return False
    if filters.min_salary is not None and candidate.salary_num < filters.min_salary:
        return False
    if filters.max_salary is not None and candidate.salary_num > filters.max_salary:
        return False
    if filters.skills:
        wanted = filters.skills.lower()
        if not any(wanted in skill.lower() for skill in normalized.skills):
            return False
    return True


def filter_candidates(
    candidates: Iterable[ScoredCandidate],
    filters: CandidateFilters | None = None,
    query: str | None = None,
) -> list[ScoredCandidate]:
    """Candidates passing the search query and every filter, in input order."""
    filters = filters or CandidateFilters()
    return [
        candidate
        for candidate in candidates
        if matches_search(candidate, query) and matches_filters(candidate, filters)
    ]


def rank_candidates(candidates: Iterable[ScoredCandidate]) -> list[ScoredCandidate]:
    """Score-descending order; ties keep input order."""
    return sorted(candidates, key=lambda candidate: candidate.score, reverse=True)


def location_counts(candidates: Iterable[ScoredCandidate]) -> dict[str, int]:
    counts: dict[str, int] = {}
    for candidate in candidates:
        location = candidate.location or UNKNOWN_LOCATION
        counts[location] = counts.get(location, 0) + 1
    return counts


def salary_bucket(salary: int) -> str:
    for upper_bound, label in SALARY_BUCKETS:
        if upper_bound is None or salary < upper_bound:
            return label
    return SALARY_BUCKETS[-1][1]


def salary_histogram(candidates: Iterable[ScoredCandidate]) -> dict[str, int]:
    histogram = {label: 0 for _, label in SALARY_BUCKETS}
    for candidate in candidates:
        histogram[salary_bucket(candidate.salary_num)] += 1
    return histogram


def summarize(candidates: Sequence[ScoredCandidate]) -> DashboardSummary:
    salaries = [candidate.salary_num for candidate in candidates if candidate.salary_num > 0]
    average_salary = round_half_up(sum(salaries) / len(salaries)) if salaries else 0
    average_score = (
        round_half_up(sum(candidate.score for candidate in candidates) / len(candidates))
        if candidates
        else 0
    )
    return DashboardSummary(
        total_candidates=len(candidates),
        average_salary=average_salary,
        average_score=average_score,
    )
