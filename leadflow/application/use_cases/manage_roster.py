"""Roster maintenance: CRM refresh, operator replacement and load summary."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from leadflow.application.errors import ConfigurationError
from leadflow.application.ports.crm_port import CrmPort
from leadflow.application.ports.roster_store import RosterStore
from leadflow.domain.entities.agent import Agent
from leadflow.domain.policies.roster_merge import merge_roster

logger = logging.getLogger(__name__)


class SyncRosterUseCase:
    """Refresh the roster from the CRM, keeping locally owned fields."""

    def __init__(
        self,
        roster: RosterStore,
        crm: CrmPort,
        roster_lock: asyncio.Lock,
        default_api_key: str | None = None,
    ):
        self._roster = roster
        self._crm = crm
        self._lock = roster_lock
        self._default_api_key = default_api_key or None

    async def execute(self, api_key: str | None = None) -> list[Agent]:
        """Fetch, merge and persist the roster.

        Args:
            api_key: explicit CRM key; stored for later calls on success.
                Falls back to the stored key, then to the configured default.

        Raises:
            ConfigurationError: no usable key, or the CRM rejected it.
            UpstreamError: the CRM fetch failed.
        """
        key = api_key or await self._roster.get_api_key() or self._default_api_key
        if not key:
            raise ConfigurationError("No CRM API key configured")

        # Network fetch stays outside the lock; only the merge+write is critical.
        fetched = await self._crm.fetch_agents(key)

        async with self._lock:
            local = await self._roster.load()
            merged = merge_roster(fetched, local)
            await self._roster.save(merged)

        if api_key:
            await self._roster.save_api_key(api_key)

        logger.info(
            "Roster synced: %d fetched, %d previously known, %d stored",
            len(fetched), len(local), len(merged),
        )
        return merged


class ReplaceRosterUseCase:
    """Operator edit: overwrite the roster (availability, weights, counters)."""

    def __init__(self, roster: RosterStore, roster_lock: asyncio.Lock):
        self._roster = roster
        self._lock = roster_lock

    async def execute(self, agents: list[Agent]) -> list[Agent]:
        ids = [a.id for a in agents]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate agent ids: {', '.join(duplicates)}")

        async with self._lock:
            await self._roster.save(agents)
        logger.info("Roster replaced by operator: %d agents", len(agents))
        return agents


@dataclass(frozen=True)
class RosterSummary:
    total_agents: int
    available_agents: int
    total_leads: int
    available_percentage_sum: int
    lead_counts: dict[str, int]

    @property
    def percentage_warning(self) -> bool:
        """The UI warns when available percentages do not add up to 100."""
        return self.available_percentage_sum != 100


def summarize_roster(agents: list[Agent]) -> RosterSummary:
    available = [a for a in agents if a.is_available]
    return RosterSummary(
        total_agents=len(agents),
        available_agents=len(available),
        total_leads=sum(a.lead_count for a in agents),
        available_percentage_sum=sum(a.distribution_percentage or 0 for a in available),
        lead_counts={a.id: a.lead_count for a in agents},
    )
