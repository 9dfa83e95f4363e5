from __future__ import annotations

import json
from pathlib import Path

import pytest

from hireboard.pipeline import CandidateLoadError, CandidateLoader


def test_candidate_loader_reads_json_array(tmp_path: Path):
    path = tmp_path / "candidates.json"
    path.write_text(
        json.dumps([{"name": "Ada", "skills": ["Python"]}, {"name": "Linus"}]),
        encoding="utf-8",
    )

    records = CandidateLoader().load(path)

    assert [record.name for record in records] == ["Ada", "Linus"]


def test_candidate_loader_raises_on_invalid_json_line(tmp_path: Path):
    path = tmp_path / "candidates.jsonl"
    path.write_text('{"name": "Ada"}\n{invalid}', encoding="utf-8")

    with pytest.raises(CandidateLoadError) as exc:
        CandidateLoader().load(path)
    assert "invalid JSON" in str(exc.value)
    assert [record.name for record in exc.value.partial] == ["Ada"]


def test_candidate_loader_skips_non_objects_and_reports(tmp_path: Path):
    path = tmp_path / "candidates.json"
    path.write_text(json.dumps([{"name": "Ada"}, "oops", None]), encoding="utf-8")

    with pytest.raises(CandidateLoadError) as exc:
        CandidateLoader().load(path)
    error = exc.value
    assert len(error.errors) == 2
    assert "record 1" in error.errors[0]
    assert len(error.partial) == 1


def test_candidate_loader_tolerates_malformed_fields(tmp_path: Path):
    path = tmp_path / "candidates.jsonl"
    path.write_text(
        json.dumps({"name": None, "skills": "Python", "work_experiences": {"roleName": "x"}}) + "\n\n",
        encoding="utf-8",
    )

    records = CandidateLoader().load(path)

    assert len(records) == 1
    assert records[0].skills == []
    assert records[0].work_experiences == []


@pytest.mark.parametrize("content", ["{invalid", '{"name": "not a list"}'])
def test_candidate_loader_rejects_unreadable_array_file(tmp_path: Path, content: str):
    path = tmp_path / "candidates.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ValueError):
        CandidateLoader().load(path)
