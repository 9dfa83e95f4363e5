"""Single place where candidate defaults are decided."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

import structlog

from ..schemas import CandidateRecord, Degree, WorkExperience, parse_amount

UNKNOWN_NAME = "Unknown"
UNKNOWN_IDENTIFIER = "unknown"
UNKNOWN_PHONE_ENDING = "0000"
NOT_SPECIFIED = "Not specified"
FULL_TIME = "full-time"

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class NormalizedCandidate:
    """Default-filled view over a ``CandidateRecord``."""

    record: CandidateRecord
    display_name: str
    identifier: str
    phone_ending: str
    location: str | None
    availability: tuple[str, ...]
    experiences: tuple[WorkExperience, ...]
    skills: tuple[str, ...]
    highest_level: str
    degrees: tuple[Degree, ...]
    salary_num: int

    @property
    def email(self) -> str | None:
        return self.record.email

    @property
    def most_recent_role(self) -> str | None:
        if not self.experiences:
            return None
        return self.experiences[0].role_name or None

    @property
    def role_names(self) -> tuple[str, ...]:
        return tuple(exp.role_name for exp in self.experiences if exp.role_name)


def normalize(record: CandidateRecord | Mapping[str, Any]) -> NormalizedCandidate:
    """Build the normalized view; never raises on missing or malformed data."""
    if not isinstance(record, CandidateRecord):
        record = CandidateRecord.model_validate(dict(record))

    education = record.education
    return NormalizedCandidate(
        record=record,
        display_name=record.name or UNKNOWN_NAME,
        identifier=email_identifier(record.email),
        phone_ending=phone_ending(record.phone),
        location=record.location or None,
        availability=tuple(record.work_availability),
        experiences=tuple(record.work_experiences),
        skills=tuple(record.skills),
        highest_level=(education.highest_level if education else None) or NOT_SPECIFIED,
        degrees=tuple(education.degrees) if education else (),
        salary_num=parse_salary(record),
    )


def email_identifier(email: str | None) -> str:
    if not email:
        return UNKNOWN_IDENTIFIER
    return email.split("@", 1)[0]


def phone_ending(phone: str | None) -> str:
    if phone and len(phone) >= 4:
        return phone[-4:]
    return UNKNOWN_PHONE_ENDING


def parse_salary(record: CandidateRecord) -> int:
    """Return the full-time salary expectation as a non-negative integer.

    A missing expectation is 0. Values that cannot be read are logged and
    also count as 0.
    """
    expectations = record.annual_salary_expectation or {}
    raw = expectations.get(FULL_TIME)
    if raw is None or raw == "":
        return 0
    if not isinstance(raw, str):
        logger.warning(
            "salary.parse_failed",
            candidate=record.name,
            value=raw,
            reason="not_a_string",
        )
        return 0
    amount = parse_amount(raw)
    if amount is None:
        logger.warning(
            "salary.parse_failed",
            candidate=record.name,
            value=raw,
            reason="not_numeric",
        )
        return 0
    return max(amount, 0)
