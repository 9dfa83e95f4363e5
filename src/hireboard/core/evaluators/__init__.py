"""Evaluator implementations for the scoring engine."""

from .availability import AvailabilityEvaluator
from .education import EducationEvaluator
from .experience import ExperienceBreadthEvaluator, RelevantExperienceEvaluator
from .leadership import LeadershipEvaluator
from .skills import SkillsEvaluator


def default_evaluators() -> list:
    """Evaluators in the order their sub-scores are summed."""
    return [
        AvailabilityEvaluator(),
        RelevantExperienceEvaluator(),
        ExperienceBreadthEvaluator(),
        EducationEvaluator(),
        SkillsEvaluator(),
        LeadershipEvaluator(),
    ]


__all__ = [
    "AvailabilityEvaluator",
    "EducationEvaluator",
    "ExperienceBreadthEvaluator",
    "LeadershipEvaluator",
    "RelevantExperienceEvaluator",
    "SkillsEvaluator",
    "default_evaluators",
]
