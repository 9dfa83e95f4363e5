"""Pydantic schema definitions for candidate data and scoring policy."""

from __future__ import annotations

from .candidate import CandidateRecord, Degree, Education, WorkExperience
from .filters import CandidateFilters, parse_amount
from .weights import DEFAULT_WEIGHTS, WEIGHT_FACTORS, WeightConfig

__all__ = [
    "CandidateRecord",
    "CandidateFilters",
    "DEFAULT_WEIGHTS",
    "Degree",
    "Education",
    "WEIGHT_FACTORS",
    "WeightConfig",
    "WorkExperience",
    "parse_amount",
]
