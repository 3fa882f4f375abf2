"""DistributionPolicy — dispatch a roster snapshot to the configured mode."""

from __future__ import annotations

import random

from leadflow.domain.entities.agent import Agent
from leadflow.domain.policies.least_loaded import pick_least_loaded
from leadflow.domain.policies.qualification_tier import pick_by_qualification
from leadflow.domain.policies.score import pick_highest_score
from leadflow.domain.policies.selection import Selection
from leadflow.domain.policies.weighted_percentage import pick_by_percentage
from leadflow.domain.value_objects.enums import PolicyMode


def select_agent(
    agents: list[Agent],
    mode: PolicyMode,
    rng: random.Random | None = None,
) -> Selection:
    """Pick at most one agent from ``agents`` according to ``mode``.

    Never mutates the roster and never raises on an empty or fully
    unavailable roster; those yield ``Selection.none()``.
    """
    rng = rng or random.Random()

    if mode == PolicyMode.SCORE:
        return pick_highest_score(agents)
    if mode == PolicyMode.QUALIFICATION:
        return pick_by_qualification(agents, rng)
    if mode == PolicyMode.PERCENTAGE:
        return pick_by_percentage(agents, rng)
    if mode == PolicyMode.LEAST_LOADED:
        return pick_least_loaded(agents)
    raise ValueError(f"Unknown distribution mode: {mode!r}")
