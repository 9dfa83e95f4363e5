"""Curated shortlists derived from the scored population."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import structlog

from .ranking import UNKNOWN_LOCATION, rank_candidates
from .scoring import ScoredCandidate, round_half_up

UNKNOWN_ROLE = "Unknown"


@dataclass
class RecommendationConfig:
    """Shortlist sizes and the best-value salary ceiling."""

    limit: int = 5
    value_salary_ceiling: int = 100_000
    value_unit: int = 100_000
    diverse_seed_size: int = 3


@dataclass(frozen=True, slots=True)
class Recommendations:
    top_performers: list[ScoredCandidate]
    best_value: list[ScoredCandidate]
    diverse_team: list[ScoredCandidate]


def value_score(candidate: ScoredCandidate, *, unit: int = 100_000) -> int:
    """Score per ``unit`` of salary; 0 when the salary is unknown."""
    if candidate.salary_num <= 0:
        return 0
    return round_half_up(candidate.score / candidate.salary_num * unit)


class RecommendationSelector:
    """Build the top-performer, best-value and diverse-team shortlists."""

    def __init__(self, *, config: RecommendationConfig | None = None) -> None:
        self._config = config or RecommendationConfig()
        self._logger = structlog.get_logger(__name__)

    def top_performers(self, candidates: Sequence[ScoredCandidate]) -> list[ScoredCandidate]:
        return rank_candidates(candidates)[: self._config.limit]

    def best_value(self, candidates: Sequence[ScoredCandidate]) -> list[ScoredCandidate]:
        eligible = [
            candidate
            for candidate in candidates
            if 0 < candidate.salary_num < self._config.value_salary_ceiling
        ]
        eligible.sort(
            key=lambda candidate: candidate.score / candidate.salary_num,
            reverse=True,
        )
        return eligible[: self._config.limit]

    def diverse_team(self, candidates: Sequence[ScoredCandidate]) -> list[ScoredCandidate]:
        """Greedy pick over the ranking; after the seed picks, each member must
        bring a new location or a new most-recent role."""
        team: list[ScoredCandidate] = []
        seen_locations: set[str] = set()
        seen_roles: set[str] = set()

        for candidate in rank_candidates(candidates):
            if len(team) >= self._config.limit:
                break
            location = candidate.location or UNKNOWN_LOCATION
            role = candidate.most_recent_role or UNKNOWN_ROLE
            if (
                location not in seen_locations
                or role not in seen_roles
                or len(team) < self._config.diverse_seed_size
            ):
                team.append(candidate)
                seen_locations.add(location)
                seen_roles.add(role)

        return team

    def select(self, candidates: Sequence[ScoredCandidate]) -> Recommendations:
        recommendations = Recommendations(
            top_performers=self.top_performers(candidates),
            best_value=self.best_value(candidates),
            diverse_team=self.diverse_team(candidates),
        )
        self._logger.debug(
            "recommendations.selected",
            top_performers=len(recommendations.top_performers),
            best_value=len(recommendations.best_value),
            diverse_team=len(recommendations.diverse_team),
        )
        return recommendations

    def value_score(self, candidate: ScoredCandidate) -> int:
        return value_score(candidate, unit=self._config.value_unit)
