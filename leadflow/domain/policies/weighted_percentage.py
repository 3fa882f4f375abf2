"""WeightedPercentagePolicy — roulette selection on distribution percentages."""

from __future__ import annotations

import random

from leadflow.domain.entities.agent import Agent
from leadflow.domain.policies.selection import Selection


def percentage_candidates(agents: list[Agent]) -> list[Agent]:
    return [
        a for a in agents
        if a.is_available and (a.distribution_percentage or 0) > 0
    ]


def pick_by_percentage(agents: list[Agent], rng: random.Random) -> Selection:
    """Weighted roulette over available agents with a positive percentage.

    The percentages need not sum to 100: a draw ``r`` in [0, total) is walked
    down the candidates in roster order, subtracting each weight, and the
    first agent that brings the remainder to ``<= 0`` is selected.
    """
    candidates = percentage_candidates(agents)
    if not candidates:
        return Selection.none()

    total = sum(a.distribution_percentage or 0 for a in candidates)
    if total <= 0:
        return Selection(agent=rng.choice(candidates))

    remainder = rng.random() * total
    for agent in candidates:
        remainder -= agent.distribution_percentage or 0
        if remainder <= 0:
            return Selection(agent=agent)

    # Float rounding can leave a tiny positive remainder after the last weight
    return Selection(agent=candidates[-1])
