from __future__ import annotations

from typing import Any, Callable

import pytest

from hireboard.core import ScoredCandidate, normalize


@pytest.fixture
def make_scored() -> Callable[..., ScoredCandidate]:
    """Build a scored candidate with a fixed score, bypassing the engine."""

    def _make(
        score: int,
        *,
        salary: int | None = None,
        name: str | None = None,
        email: str | None = None,
        location: str | None = None,
        role: str | None = None,
        skills: list[str] | None = None,
    ) -> ScoredCandidate:
        record: dict[str, Any] = {
            "name": name,
            "email": email,
            "location": location,
            "skills": skills or [],
        }
        if salary is not None:
            record["annual_salary_expectation"] = {"full-time": f"${salary:,}"}
        if role is not None:
            record["work_experiences"] = [{"roleName": role}]
        candidate = normalize(record)
        return ScoredCandidate(candidate=candidate, score=score, salary_num=candidate.salary_num)

    return _make
