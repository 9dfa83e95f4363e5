"""Immutable shortlist of candidates picked for the team."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable

import structlog

from .scoring import ScoredCandidate

DEFAULT_TEAM_LIMIT = 5

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class TeamSelection:
    """Snapshot of selected candidates keyed by email.

    Every change returns a new snapshot; a pick beyond ``limit`` leaves the
    selection unchanged.
    """

    members: tuple[ScoredCandidate, ...] = ()
    limit: int = DEFAULT_TEAM_LIMIT

    @classmethod
    def from_emails(
        cls,
        candidates: Iterable[ScoredCandidate],
        emails: Iterable[str],
        *,
        limit: int = DEFAULT_TEAM_LIMIT,
    ) -> "TeamSelection":
        by_email: dict[str, ScoredCandidate] = {}
        for candidate in candidates:
            if candidate.email and candidate.email not in by_email:
                by_email[candidate.email] = candidate

        selection = cls(limit=limit)
        for email in emails:
            candidate = by_email.get(email)
            if candidate is None:
                logger.warning("selection.unknown_candidate", email=email)
                continue
            if not selection.contains(candidate):
                selection = selection.toggle(candidate)
        return selection

    def contains(self, candidate: ScoredCandidate) -> bool:
        return any(member.email == candidate.email for member in self.members)

    def toggle(self, candidate: ScoredCandidate) -> "TeamSelection":
        if self.contains(candidate):
            remaining = tuple(m for m in self.members if m.email != candidate.email)
            return replace(self, members=remaining)
        if self.is_full:
            logger.warning("selection.limit_reached", limit=self.limit, email=candidate.email)
            return self
        return replace(self, members=self.members + (candidate,))

    @property
    def is_full(self) -> bool:
        return len(self.members) >= self.limit

    @property
    def budget(self) -> int:
        return sum(member.salary_num for member in self.members)

    @property
    def emails(self) -> list[str | None]:
        return [member.email for member in self.members]
