"""Leadership evaluation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ...schemas import WeightConfig
from ..normalizer import NormalizedCandidate
from .rules import DEFAULT_LEADERSHIP_KEYWORDS, contains_any


@dataclass
class LeadershipConfig:
    """Title keywords that signal leadership, matched case-sensitively."""

    keywords: tuple[str, ...] = field(default=DEFAULT_LEADERSHIP_KEYWORDS)

    def __post_init__(self) -> None:
        self.keywords = tuple(self.keywords)


class LeadershipEvaluator:
    """All-or-nothing bonus for any leadership title in the history."""

    method = "leadership"
    factor = "leadership"

    def __init__(self, *, config: LeadershipConfig | None = None) -> None:
        self._config = config or LeadershipConfig()

    def evaluate(self, candidate: NormalizedCandidate, weights: WeightConfig) -> dict[str, Any]:
        weight = weights.weight_for(self.factor)
        leading_roles = [
            role
            for role in candidate.role_names
            if contains_any(role, self._config.keywords, case_sensitive=True)
        ]
        return {
            "method": self.method,
            "scores": {self.factor: weight if leading_roles else 0.0},
            "metadata": {"leadership_roles": leading_roles, "weight": weight},
        }
