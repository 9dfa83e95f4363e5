"""Education evaluation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ...schemas import WeightConfig
from ..normalizer import NormalizedCandidate


def _default_level_points() -> dict[str, float]:
    return {
        "High School Diploma": 3.0,
        "Associate's Degree": 6.0,
        "Bachelor's Degree": 10.0,
        "Master's Degree": 16.0,
        "Juris Doctor (J.D)": 18.0,
        "PhD": 20.0,
    }


@dataclass
class EducationConfig:
    """Level table plus GPA and school-ranking bonuses."""

    level_points: dict[str, float] = field(default_factory=_default_level_points)
    high_gpa_band: str = "GPA 3.5-3.9"
    high_gpa_bonus: float = 3.0
    medium_gpa_band: str = "GPA 3.0-3.4"
    medium_gpa_bonus: float = 1.5
    top25_bonus: float = 5.0
    top50_bonus: float = 3.0
    scale_divisor: float = 25.0


class EducationEvaluator:
    """Score highest level, best GPA band and best school ranking."""

    method = "education"
    factor = "education"

    def __init__(self, *, config: EducationConfig | None = None) -> None:
        self._config = config or EducationConfig()

    def evaluate(self, candidate: NormalizedCandidate, weights: WeightConfig) -> dict[str, Any]:
        weight = weights.weight_for(self.factor)
        base = self._config.level_points.get(candidate.highest_level, 0.0)
        gpa_bonus = self._gpa_bonus(candidate)
        prestige_bonus = self._prestige_bonus(candidate)
        raw_points = base + gpa_bonus + prestige_bonus

        points = min(raw_points * (weight / self._config.scale_divisor), weight)
        return {
            "method": self.method,
            "scores": {self.factor: points},
            "metadata": {
                "highest_level": candidate.highest_level,
                "level_points": base,
                "gpa_bonus": gpa_bonus,
                "prestige_bonus": prestige_bonus,
                "raw_points": raw_points,
                "weight": weight,
            },
        }

    def _gpa_bonus(self, candidate: NormalizedCandidate) -> float:
        bands = {degree.gpa for degree in candidate.degrees}
        if self._config.high_gpa_band in bands:
            return self._config.high_gpa_bonus
        if self._config.medium_gpa_band in bands:
            return self._config.medium_gpa_bonus
        return 0.0

    def _prestige_bonus(self, candidate: NormalizedCandidate) -> float:
        if any(degree.is_top25 for degree in candidate.degrees):
            return self._config.top25_bonus
        if any(degree.is_top50 for degree in candidate.degrees):
            return self._config.top50_bonus
        return 0.0
