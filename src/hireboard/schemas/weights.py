"""Scoring weight configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

WEIGHT_FACTORS: tuple[str, ...] = (
    "work_availability",
    "relevant_experience",
    "experience_breadth",
    "education",
    "skills",
    "leadership",
)


class WeightConfig(BaseModel):
    """Six-factor scoring policy.

    Values are used as given: the sum is conventionally 100 but neither the
    sum nor the sign of a weight is validated.
    """

    work_availability: float = Field(default=25.0, alias="workAvailability")
    relevant_experience: float = Field(default=30.0, alias="relevantExperience")
    experience_breadth: float = Field(default=10.0, alias="experienceBreadth")
    education: float = 20.0
    skills: float = 10.0
    leadership: float = 5.0

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="forbid")

    def weight_for(self, factor: str) -> float:
        if factor not in WEIGHT_FACTORS:
            raise KeyError(f"Unknown scoring factor: {factor!r}")
        return float(getattr(self, factor))

    @property
    def total(self) -> float:
        return sum(self.weight_for(factor) for factor in WEIGHT_FACTORS)

    @property
    def is_balanced(self) -> bool:
        return self.total == 100

    def with_overrides(self, overrides: dict[str, float]) -> "WeightConfig":
        """Return a copy with the given factors replaced (snake_case or camelCase keys)."""
        merged = self.model_dump()
        aliases = {
            field.alias: name
            for name, field in type(self).model_fields.items()
            if field.alias
        }
        for key, value in overrides.items():
            merged[aliases.get(key, key)] = value
        return type(self).model_validate(merged)


DEFAULT_WEIGHTS = WeightConfig()
