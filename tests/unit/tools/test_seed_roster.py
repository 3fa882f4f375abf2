"""Tests for the roster seed file parser."""

import json

import pytest

from leadflow.domain.value_objects.enums import Qualification
from leadflow.tools.seed_roster import load_roster_file


def test_load_plain_list(tmp_path):
    path = tmp_path / "roster.json"
    path.write_text(json.dumps([
        {"id": "a", "name": "Ana", "isAvailable": True, "qualification": "Líder", "leadCount": 0},
        {"id": "b", "name": "Bia", "isAvailable": False, "qualification": "Expert", "leadCount": 4},
    ]), encoding="utf-8")

    agents = load_roster_file(path)

    assert [a.id for a in agents] == ["a", "b"]
    assert agents[0].qualification == Qualification.LIDER
    assert agents[1].lead_count == 4


def test_load_wrapped_object(tmp_path):
    path = tmp_path / "roster.json"
    path.write_text(json.dumps({"agents": [{"id": "a", "name": "Ana", "distributionPercentage": 100}]}))
    [agent] = load_roster_file(path)
    assert agent.distribution_percentage == 100


def test_duplicate_ids_rejected(tmp_path):
    path = tmp_path / "roster.json"
    path.write_text(json.dumps([{"id": "a", "name": "A"}, {"id": "a", "name": "B"}]))
    with pytest.raises(ValueError, match="duplicate agent id 'a'"):
        load_roster_file(path)


def test_non_list_payload_rejected(tmp_path):
    path = tmp_path / "roster.json"
    path.write_text(json.dumps({"agents": {"id": "a"}}))
    with pytest.raises(ValueError, match="expected a list"):
        load_roster_file(path)
