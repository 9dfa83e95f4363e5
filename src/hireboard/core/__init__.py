"""Core scoring, ranking and recommendation components."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from ..schemas import WeightConfig
from .normalizer import NormalizedCandidate, normalize, parse_salary
from .ranking import (
    DashboardSummary,
    filter_candidates,
    location_counts,
    matches_search,
    rank_candidates,
    salary_histogram,
    summarize,
)
from .recommendations import (
    RecommendationConfig,
    Recommendations,
    RecommendationSelector,
    value_score,
)
from .scoring import ScoreBreakdown, ScoredCandidate, ScoringEngine, score
from .selection import TeamSelection


@runtime_checkable
class Evaluator(Protocol):
    """Evaluator contract for computing one capped sub-score."""

    method: str
    factor: str

    def evaluate(self, candidate: NormalizedCandidate, weights: WeightConfig) -> dict[str, Any]:
        """Return the sub-score for a candidate under the given weights."""


__all__ = [
    "DashboardSummary",
    "Evaluator",
    "NormalizedCandidate",
    "RecommendationConfig",
    "RecommendationSelector",
    "Recommendations",
    "ScoreBreakdown",
    "ScoredCandidate",
    "ScoringEngine",
    "TeamSelection",
    "filter_candidates",
    "location_counts",
    "matches_search",
    "normalize",
    "parse_salary",
    "rank_candidates",
    "salary_histogram",
    "score",
    "summarize",
    "value_score",
]
