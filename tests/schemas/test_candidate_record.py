from __future__ import annotations

import pytest
import yaml
from pydantic import ValidationError

from hireboard.schemas import CandidateFilters, CandidateRecord, WeightConfig
from hireboard.schemas.config import AppConfig, load_config


def test_candidate_record_defaults():
    record = CandidateRecord()

    assert record.name is None
    assert record.email is None
    assert record.work_availability == []
    assert record.work_experiences == []
    assert record.skills == []
    assert record.education is None
    assert record.annual_salary_expectation is None


def test_candidate_record_reads_dataset_aliases():
    record = CandidateRecord.model_validate(
        {
            "name": "Ada",
            "work_experiences": [{"company": "Acme", "roleName": "Backend Developer"}],
            "education": {
                "highest_level": "PhD",
                "degrees": [{"degree": "PhD", "gpa": "GPA 3.5-3.9", "isTop25": True}],
            },
        }
    )

    assert record.work_experiences[0].role_name == "Backend Developer"
    assert record.education is not None
    assert record.education.degrees[0].is_top25 is True
    assert record.education.degrees[0].is_top50 is False

    dumped = record.model_dump(by_alias=True)
    assert dumped["work_experiences"][0]["roleName"] == "Backend Developer"


def test_candidate_record_tolerates_malformed_fields():
    record = CandidateRecord.model_validate(
        {
            "name": 42,
            "location": None,
            "work_availability": "full-time, part-time",
            "work_experiences": [None, "junk", {"roleName": 7}],
            "education": "PhD",
            "skills": ["Python", None, "", 3],
            "annual_salary_expectation": ["$100"],
        }
    )

    assert record.name is None
    assert record.work_availability == ["full-time", "part-time"]
    assert len(record.work_experiences) == 3
    assert all(exp.role_name is None for exp in record.work_experiences)
    assert record.education is None
    assert record.skills == ["Python"]
    assert record.annual_salary_expectation is None


def test_candidate_record_preserves_unknown_keys():
    record = CandidateRecord.model_validate({"name": "Ada", "portfolio": "https://ada.dev"})

    assert record.model_dump()["portfolio"] == "https://ada.dev"


def test_degrees_drop_non_mapping_entries():
    record = CandidateRecord.model_validate(
        {"education": {"highest_level": "PhD", "degrees": [None, {"isTop50": 1}]}}
    )

    assert record.education is not None
    assert len(record.education.degrees) == 1
    assert record.education.degrees[0].is_top50 is True


def test_weight_config_defaults_and_totals():
    weights = WeightConfig()

    assert weights.work_availability == 25
    assert weights.relevant_experience == 30
    assert weights.total == pytest.approx(100)
    assert weights.is_balanced is True


def test_weight_config_accepts_camel_case_and_unbalanced_values():
    weights = WeightConfig.model_validate({"workAvailability": 50, "leadership": 0})

    assert weights.work_availability == 50
    assert weights.total == pytest.approx(120)
    assert weights.is_balanced is False


def test_weight_config_overrides_return_new_snapshot():
    weights = WeightConfig()
    updated = weights.with_overrides({"relevantExperience": 40, "skills": 0})

    assert weights.relevant_experience == 30
    assert updated.relevant_experience == 40
    assert updated.skills == 0


def test_weight_config_rejects_unknown_factor():
    with pytest.raises(ValidationError):
        WeightConfig().with_overrides({"charisma": 10})

    with pytest.raises(KeyError):
        WeightConfig().weight_for("charisma")


def test_candidate_filters_parse_salary_bounds():
    filters = CandidateFilters(min_salary="$80,000", max_salary="120000", location="  ")

    assert filters.min_salary == 80_000
    assert filters.max_salary == 120_000
    assert filters.location is None


def test_candidate_filters_ignore_unparseable_bound():
    filters = CandidateFilters(min_salary="lots", max_salary="")

    assert filters.min_salary is None
    assert filters.max_salary is None


@pytest.mark.parametrize("bound", [float("inf"), float("-inf"), float("nan")])
def test_candidate_filters_ignore_non_finite_bound(bound: float):
    filters = CandidateFilters(min_salary=bound, max_salary=bound)

    assert filters.min_salary is None
    assert filters.max_salary is None


def test_load_config_ignores_infinite_yaml_bound():
    app_config = load_config(yaml.safe_load("core:\n  filters:\n    min_salary: .inf\n"))

    assert app_config.core.filters.min_salary is None


def test_load_config_validation():
    app_config = load_config(
        {
            "core": {"weights": {"leadership": 15}, "query": "python"},
            "evaluators": {"skills": {"fallback_points": 1.0}},
            "recommendations": {"limit": 3},
        }
    )

    assert isinstance(app_config, AppConfig)
    assert app_config.core.weights.leadership == 15
    settings = app_config.to_settings()
    assert settings["evaluators"] == {"skills": {"fallback_points": 1.0}}
    assert settings["recommendations"] == {"limit": 3}


def test_load_config_rejects_non_mapping():
    with pytest.raises(ValidationError):
        load_config(["not", "a", "mapping"])


def test_load_config_empty_document_uses_defaults():
    app_config = load_config(None)

    assert app_config.core.weights == WeightConfig()
    assert app_config.to_settings() == {}
