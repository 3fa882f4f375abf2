"""ScorePolicy — highest-score agent wins, no randomness."""

from __future__ import annotations

from leadflow.domain.entities.agent import Agent
from leadflow.domain.policies.selection import Selection, available_agents


def pick_highest_score(agents: list[Agent]) -> Selection:
    """Select the available agent with the maximal score.

    A missing score counts as 0. ``sorted`` is stable, so among equal scores
    the agent that comes first in the roster wins.
    """
    eligible = available_agents(agents)
    if not eligible:
        return Selection.none()

    ranked = sorted(eligible, key=lambda a: -(a.score or 0))
    return Selection(agent=ranked[0])
