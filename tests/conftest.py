"""Pytest configuration and shared fixtures."""

import random

import pytest

from leadflow.domain.entities.agent import Agent
from leadflow.domain.value_objects.enums import Qualification


class FixedRandom(random.Random):
    """Random source with a forced draw: ``random()`` always returns ``value``
    and ``choice`` always picks index ``pick``."""

    def __init__(self, value: float = 0.0, pick: int = 0):
        super().__init__(0)
        self._value = value
        self._pick = pick

    def random(self):
        return self._value

    def choice(self, seq):
        return seq[self._pick % len(seq)]


@pytest.fixture
def fixed_rng():
    return FixedRandom


@pytest.fixture
def example_roster():
    """Two agents splitting leads 70/30."""
    return [
        Agent(id="a1", name="Ana", is_available=True, distribution_percentage=70, lead_count=0),
        Agent(id="a2", name="Bruno", is_available=True, distribution_percentage=30, lead_count=5),
    ]


@pytest.fixture
def tiered_roster():
    return [
        Agent(id="l1", name="Lia", qualification=Qualification.LIDER),
        Agent(id="e1", name="Edu", qualification=Qualification.EXPERT),
        Agent(id="e2", name="Eva", qualification=Qualification.EXPERT),
        Agent(id="r1", name="Rui", qualification=Qualification.RAZOAVEL),
        Agent(id="i1", name="Ivo", qualification=Qualification.INICIANTE, is_available=False),
    ]
