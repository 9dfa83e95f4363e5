"""Dependency injection container for the dashboard engine."""

from __future__ import annotations

from dependency_injector import containers, providers

from .core import RecommendationConfig, RecommendationSelector, ScoringEngine
from .core.evaluators import (
    AvailabilityEvaluator,
    EducationEvaluator,
    ExperienceBreadthEvaluator,
    LeadershipEvaluator,
    RelevantExperienceEvaluator,
    SkillsEvaluator,
)
from .core.evaluators.availability import AvailabilityConfig
from .core.evaluators.education import EducationConfig
from .core.evaluators.experience import BreadthConfig, RelevanceConfig
from .core.evaluators.leadership import LeadershipConfig
from .core.evaluators.skills import SkillsConfig
from .pipeline import CandidateLoader, DashboardPipeline, ReportWriter


class DashboardContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    availability_evaluator = providers.Singleton(AvailabilityEvaluator)
    relevance_evaluator = providers.Singleton(RelevantExperienceEvaluator)
    breadth_evaluator = providers.Singleton(ExperienceBreadthEvaluator)
    education_evaluator = providers.Singleton(EducationEvaluator)
    skills_evaluator = providers.Singleton(SkillsEvaluator)
    leadership_evaluator = providers.Singleton(LeadershipEvaluator)

    # Summation order of the sub-scores.
    evaluators = providers.List(
        availability_evaluator,
        relevance_evaluator,
        breadth_evaluator,
        education_evaluator,
        skills_evaluator,
        leadership_evaluator,
    )

    scoring_engine = providers.Singleton(ScoringEngine, evaluators=evaluators)

    recommendation_selector = providers.Singleton(RecommendationSelector)

    candidate_loader = providers.Singleton(CandidateLoader)
    report_writer = providers.Singleton(ReportWriter)

    pipeline = providers.Factory(
        DashboardPipeline,
        engine=scoring_engine,
        selector=recommendation_selector,
        loader=candidate_loader,
        writer=report_writer,
    )


_EVALUATOR_OVERRIDES = {
    "availability": ("availability_evaluator", AvailabilityEvaluator, AvailabilityConfig),
    "relevance": ("relevance_evaluator", RelevantExperienceEvaluator, RelevanceConfig),
    "breadth": ("breadth_evaluator", ExperienceBreadthEvaluator, BreadthConfig),
    "education": ("education_evaluator", EducationEvaluator, EducationConfig),
    "skills": ("skills_evaluator", SkillsEvaluator, SkillsConfig),
    "leadership": ("leadership_evaluator", LeadershipEvaluator, LeadershipConfig),
}


def create_container(*, settings: dict | None = None) -> DashboardContainer:
    """Instantiate container with optional overrides."""

    container = DashboardContainer()

    if not settings or not isinstance(settings, dict):
        return container

    evaluator_settings = settings.get("evaluators") or {}
    for key, (provider_name, evaluator_cls, config_cls) in _EVALUATOR_OVERRIDES.items():
        if key not in evaluator_settings:
            continue
        evaluator_config = config_cls(**evaluator_settings[key])
        getattr(container, provider_name).override(
            providers.Singleton(evaluator_cls, config=evaluator_config)
        )

    recommendation_settings = settings.get("recommendations") or {}
    if recommendation_settings:
        container.recommendation_selector.override(
            providers.Singleton(
                RecommendationSelector,
                config=RecommendationConfig(**recommendation_settings),
            )
        )

    return container
