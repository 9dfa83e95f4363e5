"""Attribute filter snapshot for the candidate list."""

from __future__ import annotations

import math
import re
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, field_validator

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")

logger = structlog.get_logger(__name__)


def parse_amount(value: Any) -> int | None:
    """Parse a currency-ish string the way the dashboard inputs are read.

    ``$`` and ``,`` are stripped, then the leading integer is taken; trailing
    text is ignored. Returns ``None`` when no integer can be read.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value)
    if not isinstance(value, str):
        return None
    match = _LEADING_INT.match(value.replace("$", "").replace(",", ""))
    if match is None:
        return None
    return int(match.group(1))


class CandidateFilters(BaseModel):
    """Independent attribute filters; empty values impose no constraint."""

    location: str | None = None
    min_salary: int | None = None
    max_salary: int | None = None
    skills: str | None = None

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("location", "skills", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> str | None:
        if value is None:
            return None
        text = str(value)
        return text if text.strip() else None

    @field_validator("min_salary", "max_salary", mode="before")
    @classmethod
    def _parse_bound(cls, value: Any) -> int | None:
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        parsed = parse_amount(value)
        if parsed is None:
            logger.warning("filters.invalid_salary_bound", value=value)
        return parsed
