"""QualificationTierPolicy — draw a tier, then pick uniformly inside it."""

from __future__ import annotations

import random

from leadflow.domain.entities.agent import Agent
from leadflow.domain.policies.selection import Selection, available_agents
from leadflow.domain.value_objects.enums import Qualification

# Cumulative upper bounds (exclusive) on a [0, 100) draw.
TIER_BANDS: tuple[tuple[float, Qualification], ...] = (
    (40, Qualification.LIDER),
    (70, Qualification.EXPERT),
    (90, Qualification.RAZOAVEL),
    (100, Qualification.INICIANTE),
)


def tier_for_draw(r: float) -> Qualification:
    """Map a draw in [0, 100) to its qualification band."""
    for upper, tier in TIER_BANDS:
        if r < upper:
            return tier
    return TIER_BANDS[-1][1]


def pick_by_qualification(agents: list[Agent], rng: random.Random) -> Selection:
    """Tier-weighted random selection.

    1. Draw ``r`` uniformly in [0, 100) and map it to a tier
       (40% LIDER, 30% EXPERT, 20% RAZOAVEL, 10% INICIANTE).
    2. Candidates are the available agents of that tier.
    3. If the tier has no available agent, fall back to every available agent.
    4. Pick one candidate uniformly at random.
    """
    available = available_agents(agents)
    tier = tier_for_draw(rng.random() * 100)
    if not available:
        return Selection.none(drawn_tier=tier)

    candidates = [a for a in available if a.qualification == tier]
    fallback_used = not candidates
    if fallback_used:
        candidates = available

    return Selection(
        agent=rng.choice(candidates),
        drawn_tier=tier,
        fallback_used=fallback_used,
    )
