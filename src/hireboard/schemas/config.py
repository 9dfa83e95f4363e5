"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, ValidationError

from .filters import CandidateFilters
from .weights import WeightConfig


class CoreConfig(BaseModel):
    weights: WeightConfig = Field(default_factory=WeightConfig)
    filters: CandidateFilters = Field(default_factory=CandidateFilters)
    query: str = ""


class EvaluatorConfig(BaseModel):
    availability: dict[str, Any] | None = None
    relevance: dict[str, Any] | None = None
    breadth: dict[str, Any] | None = None
    education: dict[str, Any] | None = None
    skills: dict[str, Any] | None = None
    leadership: dict[str, Any] | None = None


class AppConfig(BaseModel):
    core: CoreConfig = Field(default_factory=CoreConfig)
    evaluators: EvaluatorConfig = Field(default_factory=EvaluatorConfig)
    recommendations: dict[str, Any] | None = None

    def to_settings(self) -> dict[str, Any]:
        """Container settings; weights and filters travel per run instead."""
        settings: dict[str, Any] = {}
        evaluator_settings = self.evaluators.model_dump(exclude_none=True)
        if evaluator_settings:
            settings["evaluators"] = evaluator_settings
        if self.recommendations:
            settings["recommendations"] = dict(self.recommendations)
        return settings


def load_config(raw: Any) -> AppConfig:
    if raw is None:
        return AppConfig()
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
