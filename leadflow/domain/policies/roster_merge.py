"""RosterMerge — combine a fresh CRM fetch with locally owned agent fields."""

from __future__ import annotations

from dataclasses import replace

from leadflow.domain.entities.agent import Agent


def merge_roster(fetched: list[Agent], local: list[Agent]) -> list[Agent]:
    """Return the refreshed roster.

    - Order and membership follow ``fetched``; agents missing upstream are dropped.
    - The CRM owns identity fields (name, email, role, location).
    - Local state owns availability, qualification, percentage, score and
      lead count for agents that were already known.
    """
    known = {a.id: a for a in local}
    merged: list[Agent] = []
    for remote in fetched:
        existing = known.get(remote.id)
        if existing is None:
            merged.append(replace(remote, lead_count=0))
            continue
        merged.append(
            replace(
                existing,
                name=remote.name,
                email=remote.email,
                role=remote.role,
                location_id=remote.location_id,
            )
        )
    return merged
