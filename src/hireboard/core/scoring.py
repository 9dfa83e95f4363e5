"""Scoring engine: runs evaluators and folds sub-scores into a 0-100 score."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Union

import structlog

from ..schemas import DEFAULT_WEIGHTS, CandidateRecord, WeightConfig
from .evaluators import default_evaluators
from .normalizer import NormalizedCandidate, normalize

CandidateInput = Union[NormalizedCandidate, CandidateRecord, Mapping[str, Any]]


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


@dataclass(slots=True)
class EvaluationResult:
    """Normalized evaluator output."""

    method: str
    scores: dict[str, float]
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class ScoreBreakdown:
    """Per-factor view of a single score computation."""

    evaluations: list[EvaluationResult]
    sub_scores: dict[str, float]
    raw_total: float
    score: int


@dataclass(frozen=True, slots=True)
class ScoredCandidate:
    """Candidate with the score and salary derived under one weight snapshot."""

    candidate: NormalizedCandidate
    score: int
    salary_num: int
    sub_scores: Mapping[str, float] = field(default_factory=dict)

    @property
    def record(self) -> CandidateRecord:
        return self.candidate.record

    @property
    def email(self) -> str | None:
        return self.candidate.email

    @property
    def location(self) -> str | None:
        return self.candidate.location

    @property
    def most_recent_role(self) -> str | None:
        return self.candidate.most_recent_role

    def to_dict(self) -> dict[str, Any]:
        payload = self.record.model_dump(mode="json", by_alias=True)
        payload.update(
            {
                "display_name": self.candidate.display_name,
                "identifier": self.candidate.identifier,
                "score": self.score,
                "salaryNum": self.salary_num,
                "sub_scores": dict(self.sub_scores),
            }
        )
        return payload


class ScoringEngine:
    """Coordinates evaluators and aggregates their capped sub-scores."""

    def __init__(
        self,
        evaluators: Iterable[Any] | None = None,
        *,
        max_score: float = 100.0,
    ) -> None:
        self._evaluators = list(evaluators) if evaluators is not None else default_evaluators()
        self._max_score = max_score
        self._logger = structlog.get_logger(__name__)

    def evaluate(
        self,
        candidate: CandidateInput,
        weights: WeightConfig = DEFAULT_WEIGHTS,
    ) -> ScoreBreakdown:
        normalized = self._normalize_candidate(candidate)
        evaluations: list[EvaluationResult] = []
        sub_scores: dict[str, float] = {}

        for evaluator in self._evaluators:
            result = self._normalize_evaluation_result(evaluator.evaluate(normalized, weights))
            evaluations.append(result)
            for key, value in result.scores.items():
                sub_scores[key] = sub_scores.get(key, 0.0) + value

        raw_total = sum(sub_scores.values(), 0.0)

        return ScoreBreakdown(
            evaluations=evaluations,
            sub_scores=sub_scores,
            raw_total=raw_total,
            score=self._finalize(raw_total),
        )

    def score(self, candidate: CandidateInput, weights: WeightConfig = DEFAULT_WEIGHTS) -> int:
        return self.evaluate(candidate, weights).score

    def score_candidate(
        self,
        candidate: CandidateInput,
        weights: WeightConfig = DEFAULT_WEIGHTS,
    ) -> ScoredCandidate:
        normalized = self._normalize_candidate(candidate)
        breakdown = self.evaluate(normalized, weights)
        return ScoredCandidate(
            candidate=normalized,
            score=breakdown.score,
            salary_num=normalized.salary_num,
            sub_scores=dict(breakdown.sub_scores),
        )

    def score_all(
        self,
        candidates: Iterable[CandidateInput],
        weights: WeightConfig = DEFAULT_WEIGHTS,
    ) -> list[ScoredCandidate]:
        """Score every candidate, keeping input order."""
        if not weights.is_balanced:
            self._logger.warning("weights.unbalanced", total=weights.total)
        scored = [self.score_candidate(candidate, weights) for candidate in candidates]
        self._logger.debug("scoring.completed", candidate_count=len(scored))
        return scored

    def _finalize(self, raw_total: float) -> int:
        if math.isnan(raw_total):
            return 0
        bounded = min(max(raw_total, 0.0), self._max_score)
        return round_half_up(bounded)

    @staticmethod
    def _normalize_candidate(candidate: CandidateInput) -> NormalizedCandidate:
        if isinstance(candidate, NormalizedCandidate):
            return candidate
        return normalize(candidate)

    @staticmethod
    def _normalize_evaluation_result(payload: dict[str, Any]) -> EvaluationResult:
        method = payload.get("method")
        scores = payload.get("scores") or {}
        metadata = payload.get("metadata") or {}
        if method is None:
            raise ValueError("Evaluator result must include 'method'.")
        if not isinstance(scores, dict):
            raise ValueError("Evaluator result 'scores' must be a mapping.")
        return EvaluationResult(
            method=str(method),
            scores={k: float(v) for k, v in scores.items()},
            metadata=dict(metadata),
        )


_DEFAULT_ENGINE = ScoringEngine()


def score(candidate: CandidateInput, weights: WeightConfig = DEFAULT_WEIGHTS) -> int:
    """Score with the default rule tables."""
    return _DEFAULT_ENGINE.score(candidate, weights)
