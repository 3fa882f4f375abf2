"""Tests for the DistributionPolicy dispatcher."""

import pytest

from leadflow.domain.entities.agent import Agent
from leadflow.domain.policies.distribution import select_agent
from leadflow.domain.value_objects.enums import PolicyMode, Qualification


@pytest.fixture
def mixed_roster():
    return [
        Agent(id="a", name="A", qualification=Qualification.EXPERT,
              distribution_percentage=10, score=90, lead_count=4),
        Agent(id="b", name="B", qualification=Qualification.LIDER,
              distribution_percentage=90, score=60, lead_count=1),
    ]


def test_score_mode(mixed_roster):
    assert select_agent(mixed_roster, PolicyMode.SCORE).agent.id == "a"


def test_least_loaded_mode(mixed_roster):
    assert select_agent(mixed_roster, PolicyMode.LEAST_LOADED).agent.id == "b"


def test_percentage_mode(mixed_roster, fixed_rng):
    assert select_agent(mixed_roster, PolicyMode.PERCENTAGE, fixed_rng(0.05)).agent.id == "a"
    assert select_agent(mixed_roster, PolicyMode.PERCENTAGE, fixed_rng(0.50)).agent.id == "b"


def test_qualification_mode(mixed_roster, fixed_rng):
    selection = select_agent(mixed_roster, PolicyMode.QUALIFICATION, fixed_rng(0.45))
    assert selection.drawn_tier == Qualification.EXPERT
    assert selection.agent.id == "a"


@pytest.mark.parametrize("mode", list(PolicyMode))
def test_all_unavailable_yields_none_in_every_mode(mode, mixed_roster):
    for agent in mixed_roster:
        agent.is_available = False
    assert select_agent(mixed_roster, mode).agent is None


@pytest.mark.parametrize("mode", list(PolicyMode))
def test_empty_roster_yields_none_in_every_mode(mode):
    assert select_agent([], mode).agent is None


@pytest.mark.parametrize("mode", list(PolicyMode))
def test_selection_leaves_counters_untouched(mode, mixed_roster):
    select_agent(mixed_roster, mode)
    assert [a.lead_count for a in mixed_roster] == [4, 1]
