"""Work availability evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...schemas import WeightConfig
from ..normalizer import NormalizedCandidate


@dataclass
class AvailabilityConfig:
    """Availability modes and the share of the weight each one earns."""

    full_time_mode: str = "full-time"
    part_time_mode: str = "part-time"
    part_time_ratio: float = 0.5


class AvailabilityEvaluator:
    """Full weight for full-time availability, a fraction for part-time."""

    method = "availability"
    factor = "work_availability"

    def __init__(self, *, config: AvailabilityConfig | None = None) -> None:
        self._config = config or AvailabilityConfig()

    def evaluate(self, candidate: NormalizedCandidate, weights: WeightConfig) -> dict[str, Any]:
        weight = weights.weight_for(self.factor)
        modes = set(candidate.availability)

        if self._config.full_time_mode in modes:
            matched, points = self._config.full_time_mode, weight
        elif self._config.part_time_mode in modes:
            matched, points = self._config.part_time_mode, weight * self._config.part_time_ratio
        else:
            matched, points = None, 0.0

        return {
            "method": self.method,
            "scores": {self.factor: points},
            "metadata": {"matched_mode": matched, "weight": weight},
        }
