from __future__ import annotations

from pathlib import Path

import pytest

from hireboard.config import ConfigManager, load_config_file
from hireboard.container import create_container
from hireboard.core import ScoringEngine


def test_create_container_defaults_match_engine():
    container = create_container()
    engine = container.scoring_engine()
    record = {
        "work_availability": ["full-time"],
        "work_experiences": [{"roleName": "Software Engineer"}],
        "skills": ["Python"],
    }

    assert engine.score(record) == ScoringEngine().score(record)
    assert container.pipeline() is not container.pipeline()


def test_create_container_with_overrides():
    container = create_container(
        settings={
            "evaluators": {
                "availability": {"part_time_ratio": 0.75},
                "relevance": {"scale_divisor": 3.0},
                "breadth": {"saturation_count": 2},
                "education": {"top25_bonus": 10.0},
                "skills": {
                    "fallback_points": 0.0,
                    "tiers": [{"name": "data", "keywords": ["Pandas"], "points": 3.0}],
                },
                "leadership": {"keywords": ["Captain"]},
            },
            "recommendations": {"limit": 3, "diverse_seed_size": 2},
        }
    )

    assert container.availability_evaluator()._config.part_time_ratio == 0.75
    assert container.relevance_evaluator()._config.scale_divisor == 3.0
    assert container.breadth_evaluator()._config.saturation_count == 2
    assert container.education_evaluator()._config.top25_bonus == 10.0
    assert container.skills_evaluator()._config.tiers[0].name == "data"
    assert container.leadership_evaluator()._config.keywords == ("Captain",)
    assert container.recommendation_selector()._config.limit == 3

    engine = container.scoring_engine()
    breakdown = engine.evaluate(
        {
            "work_experiences": [{"roleName": "Captain"}],
            "skills": ["pandas", "Excel"],
        }
    )
    assert breakdown.sub_scores["skills"] == pytest.approx(3.0)
    assert breakdown.sub_scores["leadership"] == pytest.approx(5.0)
    assert breakdown.sub_scores["experience_breadth"] == pytest.approx(5.0)


def test_config_manager_loads_named_yaml(tmp_path: Path):
    (tmp_path / "dashboard.yaml").write_text(
        "core:\n"
        "  weights:\n"
        "    workAvailability: 40\n"
        "    leadership: 0\n"
        "  filters:\n"
        "    min_salary: '$50,000'\n"
        "recommendations:\n"
        "  limit: 2\n",
        encoding="utf-8",
    )
    manager = ConfigManager(tmp_path)

    raw = manager.load("dashboard")
    app_config = manager.load_app_config("dashboard")

    assert raw["core"]["weights"]["workAvailability"] == 40
    assert app_config.core.weights.work_availability == 40
    assert app_config.core.weights.leadership == 0
    assert app_config.core.filters.min_salary == 50_000
    assert app_config.to_settings() == {"recommendations": {"limit": 2}}
    assert load_config_file(tmp_path / "dashboard.yaml") == app_config
