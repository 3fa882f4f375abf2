"""AssignLeadUseCase — one webhook event: select → increment → callback → store."""

from __future__ import annotations

import asyncio
import logging
import random
from typing import Any

from leadflow.application.errors import ConfigurationError, UpstreamError
from leadflow.application.ports.crm_port import CrmPort
from leadflow.application.ports.roster_store import RosterStore
from leadflow.application.ports.webhook_event_repo import WebhookEventRepository
from leadflow.domain.entities.agent import Agent
from leadflow.domain.entities.assignment import AssignmentResult
from leadflow.domain.entities.settings import CallbackConfig
from leadflow.domain.entities.webhook_event import WebhookEvent
from leadflow.domain.policies.distribution import select_agent
from leadflow.domain.value_objects.enums import (
    AssignmentStatus,
    PolicyMode,
    UnassignedReason,
)

logger = logging.getLogger(__name__)


class AssignLeadUseCase:
    """Orchestrates the assignment of a single inbound lead.

    The roster read and the roster write happen under ``roster_lock``, which
    must be the same lock every other roster writer uses. The CRM callback
    runs after the lock is released and can never undo the local increment.
    """

    def __init__(
        self,
        roster: RosterStore,
        events: WebhookEventRepository,
        roster_lock: asyncio.Lock,
        mode: PolicyMode,
        crm: CrmPort | None = None,
        default_api_key: str | None = None,
        rng: random.Random | None = None,
    ):
        self._roster = roster
        self._events = events
        self._lock = roster_lock
        self._mode = mode
        self._crm = crm
        self._default_api_key = default_api_key or None
        self._rng = rng or random.Random()

    async def execute(self, lead_data: dict[str, Any]) -> AssignmentResult:
        """Assign ``lead_data`` to an agent and record the event.

        Pipeline:
        1. Check distribution settings (disabled → unassigned, no policy call)
        2. Load roster snapshot and evaluate the policy
        3. Increment the chosen agent's lead count and persist the roster
        4. Optional CRM callback (best effort)
        5. Store the raw payload with the result

        StorageError propagates; nothing is retried.
        """
        # Callback settings are read before the increment is committed.
        api_key = callback = None
        if self._crm is not None:
            api_key = await self._roster.get_api_key() or self._default_api_key
            callback = await self._roster.get_callback_config()

        result, agent = await self._assign()

        if agent is not None and self._crm is not None:
            result.callback_status = await self._notify_crm(
                lead_data, agent, api_key, callback
            )

        await self._events.save(
            WebhookEvent(
                id=None,
                lead_data=lead_data,
                status=result.message,
                assignment=result.to_dict(),
            )
        )
        return result

    async def _assign(self) -> tuple[AssignmentResult, Agent | None]:
        async with self._lock:
            settings = await self._roster.get_settings()
            if not settings.is_distribution_enabled:
                logger.info("Distribution disabled → lead left unassigned")
                return (
                    AssignmentResult(
                        status=AssignmentStatus.UNASSIGNED,
                        reason=UnassignedReason.DISTRIBUTION_DISABLED,
                    ),
                    None,
                )

            snapshot = await self._roster.load()
            selection = select_agent(snapshot, self._mode, self._rng)

            if selection.agent is None:
                logger.info(
                    "No eligible agent (mode=%s, roster=%d, tier=%s)",
                    self._mode.value, len(snapshot),
                    selection.drawn_tier.value if selection.drawn_tier else None,
                )
                return (
                    AssignmentResult(
                        status=AssignmentStatus.UNASSIGNED,
                        mode=self._mode,
                        reason=selection.reason,
                        drawn_tier=selection.drawn_tier,
                        fallback_used=selection.fallback_used,
                    ),
                    None,
                )

            chosen = selection.agent.with_one_more_lead()
            updated = [chosen if a.id == chosen.id else a for a in snapshot]
            await self._roster.save(updated)

        logger.info(
            "Lead assigned to %s (%s), lead count now %d [mode=%s, tier=%s, fallback=%s]",
            chosen.name, chosen.id, chosen.lead_count, self._mode.value,
            selection.drawn_tier.value if selection.drawn_tier else None,
            selection.fallback_used,
        )
        return (
            AssignmentResult(
                status=AssignmentStatus.ASSIGNED,
                mode=self._mode,
                agent_id=chosen.id,
                agent_name=chosen.name,
                drawn_tier=selection.drawn_tier,
                fallback_used=selection.fallback_used,
            ),
            chosen,
        )

    async def _notify_crm(
        self,
        lead_data: dict[str, Any],
        agent: Agent,
        api_key: str | None,
        callback: CallbackConfig | None,
    ) -> str:
        """Fire the CRM callback once; failures become status text."""
        try:
            await self._crm.push_assignment(lead_data, agent, api_key, callback)
        except (ConfigurationError, UpstreamError) as e:
            logger.warning("CRM callback failed for agent %s: %s", agent.id, e)
            return f"CRM callback failed: {e}"
        return "CRM callback succeeded."
