"""Work history evaluation: role relevance and breadth."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ...schemas import WeightConfig
from ..normalizer import NormalizedCandidate
from .rules import DEFAULT_ROLE_BUCKETS, OTHER_ROLE_BUCKET, RoleBucket, coerce_rules, first_match


@dataclass
class RelevanceConfig:
    """Role buckets and scaling for relevant experience."""

    buckets: tuple[RoleBucket, ...] = field(default=DEFAULT_ROLE_BUCKETS)
    fallback_relevance: float = OTHER_ROLE_BUCKET.primary
    recent_multiplier: float = 2.0
    scale_divisor: float = 6.0

    def __post_init__(self) -> None:
        self.buckets = coerce_rules(self.buckets, RoleBucket)


class RelevantExperienceEvaluator:
    """Sum role relevance across the history, doubling the most recent role."""

    method = "relevant_experience"
    factor = "relevant_experience"

    def __init__(self, *, config: RelevanceConfig | None = None) -> None:
        self._config = config or RelevanceConfig()

    def evaluate(self, candidate: NormalizedCandidate, weights: WeightConfig) -> dict[str, Any]:
        weight = weights.weight_for(self.factor)
        per_role: list[dict[str, Any]] = []
        raw_points = 0.0

        for index, experience in enumerate(candidate.experiences):
            if not experience.role_name:
                continue
            bucket = first_match(experience.role_name, self._config.buckets)
            if bucket is None:
                bucket_name, relevance = OTHER_ROLE_BUCKET.name, self._config.fallback_relevance
            else:
                bucket_name, relevance = bucket.name, bucket.relevance(index)
            multiplier = self._config.recent_multiplier if index == 0 else 1.0
            raw_points += relevance * multiplier
            per_role.append(
                {
                    "index": index,
                    "role": experience.role_name,
                    "bucket": bucket_name,
                    "relevance": relevance,
                    "multiplier": multiplier,
                }
            )

        points = min(raw_points * (weight / self._config.scale_divisor), weight)
        return {
            "method": self.method,
            "scores": {self.factor: points},
            "metadata": {"raw_points": raw_points, "per_role": per_role, "weight": weight},
        }


@dataclass
class BreadthConfig:
    """Number of positions that earns the full breadth weight."""

    saturation_count: float = 7.0


class ExperienceBreadthEvaluator:
    """Reward the number of positions held, saturating at the weight."""

    method = "experience_breadth"
    factor = "experience_breadth"

    def __init__(self, *, config: BreadthConfig | None = None) -> None:
        self._config = config or BreadthConfig()

    def evaluate(self, candidate: NormalizedCandidate, weights: WeightConfig) -> dict[str, Any]:
        weight = weights.weight_for(self.factor)
        count = len(candidate.experiences)
        points = min(count * (weight / self._config.saturation_count), weight)
        return {
            "method": self.method,
            "scores": {self.factor: points},
            "metadata": {"experience_count": count, "weight": weight},
        }
