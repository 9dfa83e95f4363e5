"""Skill inventory evaluation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ...schemas import WeightConfig
from ..normalizer import NormalizedCandidate
from .rules import DEFAULT_SKILL_TIERS, SkillTier, coerce_rules, first_match


@dataclass
class SkillsConfig:
    """Skill tiers in priority order and the points for unmatched skills."""

    tiers: tuple[SkillTier, ...] = field(default=DEFAULT_SKILL_TIERS)
    fallback_points: float = 0.5
    scale_divisor: float = 10.0

    def __post_init__(self) -> None:
        self.tiers = coerce_rules(self.tiers, SkillTier)


class SkillsEvaluator:
    """Sum per-skill tier points."""

    method = "skills"
    factor = "skills"

    def __init__(self, *, config: SkillsConfig | None = None) -> None:
        self._config = config or SkillsConfig()

    def evaluate(self, candidate: NormalizedCandidate, weights: WeightConfig) -> dict[str, Any]:
        weight = weights.weight_for(self.factor)
        raw_points = 0.0
        tier_counts: dict[str, int] = {}

        for skill in candidate.skills:
            tier = first_match(skill, self._config.tiers)
            name = tier.name if tier else "other"
            raw_points += tier.points if tier else self._config.fallback_points
            tier_counts[name] = tier_counts.get(name, 0) + 1

        points = min(raw_points * (weight / self._config.scale_divisor), weight)
        return {
            "method": self.method,
            "scores": {self.factor: points},
            "metadata": {"raw_points": raw_points, "tier_counts": tier_counts, "weight": weight},
        }
