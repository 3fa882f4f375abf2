"""Selection — the read-only decision returned by every distribution policy."""

from __future__ import annotations

from dataclasses import dataclass

from leadflow.domain.entities.agent import Agent
from leadflow.domain.value_objects.enums import Qualification, UnassignedReason


@dataclass(frozen=True)
class Selection:
    agent: Agent | None
    reason: UnassignedReason | None = None
    drawn_tier: Qualification | None = None
    fallback_used: bool = False

    @classmethod
    def none(
        cls,
        drawn_tier: Qualification | None = None,
        fallback_used: bool = False,
    ) -> Selection:
        return cls(
            agent=None,
            reason=UnassignedReason.NO_ELIGIBLE_AGENTS,
            drawn_tier=drawn_tier,
            fallback_used=fallback_used,
        )


def available_agents(agents: list[Agent]) -> list[Agent]:
    return [a for a in agents if a.is_available]
