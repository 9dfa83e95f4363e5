from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _optional_text(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _as_list(value: Any) -> list[Any]:
    return list(value) if isinstance(value, (list, tuple)) else []


class WorkExperience(BaseModel):
    """Single employment history entry."""

    company: str | None = None
    role_name: str | None = Field(default=None, alias="roleName")

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    @field_validator("company", "role_name", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str | None:
        return _optional_text(value)


class Degree(BaseModel):
    """Degree entry with GPA band and school ranking flags."""

    degree: str | None = None
    subject: str | None = None
    school: str | None = None
    gpa: str | None = None
    is_top25: bool = Field(default=False, alias="isTop25")
    is_top50: bool = Field(default=False, alias="isTop50")

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    @field_validator("degree", "subject", "school", "gpa", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str | None:
        return _optional_text(value)

    @field_validator("is_top25", "is_top50", mode="before")
    @classmethod
    def _coerce_flag(cls, value: Any) -> bool:
        return bool(value)


class Education(BaseModel):
    """Highest attained level plus individual degrees."""

    highest_level: str | None = None
    degrees: list[Degree] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow", frozen=True)

    @field_validator("highest_level", mode="before")
    @classmethod
    def _coerce_level(cls, value: Any) -> str | None:
        return _optional_text(value)

    @field_validator("degrees", mode="before")
    @classmethod
    def _drop_malformed_degrees(cls, value: Any) -> list[Any]:
        return [item for item in _as_list(value) if isinstance(item, (dict, Degree))]


class CandidateRecord(BaseModel):
    """Applicant profile as ingested.

    Validation never rejects a record because of a missing or malformed field:
    wrong-typed scalars become ``None``, wrong-typed collections become empty.
    Keys unknown to the model are preserved.
    """

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    submitted_at: str | None = None
    work_availability: list[str] = Field(default_factory=list)
    annual_salary_expectation: dict[str, Any] | None = None
    work_experiences: list[WorkExperience] = Field(default_factory=list)
    education: Education | None = None
    skills: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow", frozen=True)

    @field_validator("name", "email", "phone", "location", "submitted_at", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str | None:
        return _optional_text(value)

    @field_validator("work_availability", mode="before")
    @classmethod
    def _coerce_availability(cls, value: Any) -> list[str]:
        if isinstance(value, str):
            return [mode.strip() for mode in value.split(",") if mode.strip()]
        return [mode for mode in _as_list(value) if isinstance(mode, str)]

    @field_validator("annual_salary_expectation", mode="before")
    @classmethod
    def _coerce_salary(cls, value: Any) -> dict[str, Any] | None:
        return value if isinstance(value, dict) else None

    @field_validator("work_experiences", mode="before")
    @classmethod
    def _coerce_experiences(cls, value: Any) -> list[Any]:
        # Malformed entries still occupy a position and count toward breadth.
        return [
            item if isinstance(item, (dict, WorkExperience)) else {}
            for item in _as_list(value)
        ]

    @field_validator("education", mode="before")
    @classmethod
    def _coerce_education(cls, value: Any) -> Any:
        return value if isinstance(value, (dict, Education)) else None

    @field_validator("skills", mode="before")
    @classmethod
    def _coerce_skills(cls, value: Any) -> list[str]:
        return [skill for skill in _as_list(value) if isinstance(skill, str) and skill]
