"""LeastLoadedPolicy — plain load balancing on the lead counter."""

from __future__ import annotations

from leadflow.domain.entities.agent import Agent
from leadflow.domain.policies.selection import Selection, available_agents


def pick_least_loaded(agents: list[Agent]) -> Selection:
    """Select the available agent with the fewest leads.

    Ties go to the agent listed first in the roster.
    """
    eligible = available_agents(agents)
    if not eligible:
        return Selection.none()

    return Selection(agent=min(eligible, key=lambda a: a.lead_count))
