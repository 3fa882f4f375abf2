"""SQLAlchemy implementations of the roster store and event log."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from leadflow.adapters.persistence.models import (
    AgentModel,
    SettingModel,
    WebhookEventModel,
)
from leadflow.application.errors import StorageError
from leadflow.application.ports.roster_store import RosterStore
from leadflow.application.ports.webhook_event_repo import WebhookEventRepository
from leadflow.domain.entities.agent import Agent
from leadflow.domain.entities.settings import CallbackConfig, DistributionSettings
from leadflow.domain.entities.webhook_event import WebhookEvent
from leadflow.domain.value_objects.enums import Qualification

logger = logging.getLogger(__name__)

DISTRIBUTION_KEY = "distribution"
API_KEY_KEY = "apiKey"
CALLBACK_KEY = "callback"

# ─── Mappers ─────────────────────────────────────────────────────────


def _agent_to_domain(m: AgentModel) -> Agent:
    return Agent(
        id=m.id,
        name=m.name,
        is_available=m.is_available,
        qualification=Qualification(m.qualification) if m.qualification else None,
        distribution_percentage=m.distribution_percentage,
        score=m.score,
        lead_count=m.lead_count,
        email=m.email,
        role=m.role,
        location_id=m.location_id,
    )


def _agent_to_model(agent: Agent, position: int) -> AgentModel:
    return AgentModel(
        id=agent.id,
        position=position,
        name=agent.name,
        is_available=agent.is_available,
        qualification=agent.qualification.value if agent.qualification else None,
        distribution_percentage=agent.distribution_percentage,
        score=agent.score,
        lead_count=agent.lead_count,
        email=agent.email,
        role=agent.role,
        location_id=agent.location_id,
    )


def _event_to_domain(m: WebhookEventModel) -> WebhookEvent:
    return WebhookEvent(
        id=m.id,
        lead_data=m.lead_data,
        status=m.status,
        assignment=m.assignment,
        received_at=m.received_at,
    )


# ─── Repositories ────────────────────────────────────────────────────


class _SqlStore:
    """Each call runs in its own session and transaction."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._sf = session_factory

    @asynccontextmanager
    async def _transaction(self, action: str) -> AsyncIterator[AsyncSession]:
        try:
            async with self._sf() as session, session.begin():
                yield session
        except SQLAlchemyError as e:
            logger.exception("Storage failure while %s", action)
            raise StorageError(f"Storage failure while {action}: {e}") from e


class SqlRosterStore(_SqlStore, RosterStore):
    async def load(self) -> list[Agent]:
        async with self._transaction("loading roster") as s:
            result = await s.execute(select(AgentModel).order_by(AgentModel.position))
            return [_agent_to_domain(m) for m in result.scalars()]

    async def save(self, agents: list[Agent]) -> None:
        async with self._transaction("saving roster") as s:
            await s.execute(delete(AgentModel))
            s.add_all([_agent_to_model(a, i) for i, a in enumerate(agents)])

    async def get_settings(self) -> DistributionSettings:
        return DistributionSettings.from_dict(await self._get_value(DISTRIBUTION_KEY))

    async def save_settings(self, settings: DistributionSettings) -> None:
        await self._put_value(DISTRIBUTION_KEY, settings.to_dict())

    async def get_api_key(self) -> str | None:
        value = await self._get_value(API_KEY_KEY)
        return value.get("value") if value else None

    async def save_api_key(self, api_key: str) -> None:
        await self._put_value(API_KEY_KEY, {"value": api_key})

    async def get_callback_config(self) -> CallbackConfig | None:
        value = await self._get_value(CALLBACK_KEY)
        return CallbackConfig.from_dict(value) if value else None

    async def save_callback_config(self, config: CallbackConfig | None) -> None:
        if config is None:
            async with self._transaction("clearing callback config") as s:
                await s.execute(delete(SettingModel).where(SettingModel.key == CALLBACK_KEY))
            return
        await self._put_value(CALLBACK_KEY, config.to_dict())

    async def _get_value(self, key: str) -> dict | None:
        async with self._transaction(f"reading setting '{key}'") as s:
            m = await s.get(SettingModel, key)
            return m.value if m else None

    async def _put_value(self, key: str, value: dict) -> None:
        async with self._transaction(f"writing setting '{key}'") as s:
            m = await s.get(SettingModel, key)
            if m is None:
                s.add(SettingModel(key=key, value=value))
            else:
                m.value = value


class SqlWebhookEventRepository(_SqlStore, WebhookEventRepository):
    async def save(self, event: WebhookEvent) -> WebhookEvent:
        async with self._transaction("storing webhook event") as s:
            m = WebhookEventModel(
                lead_data=event.lead_data,
                status=event.status,
                assignment=event.assignment,
                received_at=event.received_at,
            )
            s.add(m)
            await s.flush()
            event.id = m.id
        return event

    async def get_latest(self) -> WebhookEvent | None:
        events = await self.get_recent(limit=1)
        return events[0] if events else None

    async def get_recent(self, limit: int = 50) -> list[WebhookEvent]:
        async with self._transaction("reading webhook events") as s:
            result = await s.execute(
                select(WebhookEventModel)
                .order_by(WebhookEventModel.received_at.desc(), WebhookEventModel.id.desc())
                .limit(limit)
            )
            return [_event_to_domain(m) for m in result.scalars()]
