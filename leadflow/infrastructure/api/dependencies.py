"""FastAPI dependency injection — wires adapters into use cases."""

from __future__ import annotations

import asyncio

from fastapi import Depends

from leadflow.adapters.crm.gohighlevel_adapter import GoHighLevelAdapter
from leadflow.adapters.persistence.database import async_session_factory
from leadflow.adapters.persistence.repositories import (
    SqlRosterStore,
    SqlWebhookEventRepository,
)
from leadflow.application.ports.crm_port import CrmPort
from leadflow.application.ports.roster_store import RosterStore
from leadflow.application.ports.webhook_event_repo import WebhookEventRepository
from leadflow.application.use_cases.assign_lead import AssignLeadUseCase
from leadflow.application.use_cases.manage_roster import (
    ReplaceRosterUseCase,
    SyncRosterUseCase,
)
from leadflow.config import settings

# Process-wide singletons. Every roster read-modify-write goes through _roster_lock.
_roster_lock = asyncio.Lock()
_roster_store = SqlRosterStore(async_session_factory)
_event_repo = SqlWebhookEventRepository(async_session_factory)
_crm_adapter = GoHighLevelAdapter()


def get_roster_lock() -> asyncio.Lock:
    return _roster_lock


def get_roster_store() -> RosterStore:
    return _roster_store


def get_event_repo() -> WebhookEventRepository:
    return _event_repo


def get_crm() -> CrmPort:
    return _crm_adapter


def get_assign_lead_uc(
    roster: RosterStore = Depends(get_roster_store),
    events: WebhookEventRepository = Depends(get_event_repo),
    crm: CrmPort = Depends(get_crm),
    lock: asyncio.Lock = Depends(get_roster_lock),
) -> AssignLeadUseCase:
    return AssignLeadUseCase(
        roster=roster,
        events=events,
        roster_lock=lock,
        mode=settings.distribution_mode,
        crm=crm if settings.crm_callback_enabled else None,
        default_api_key=settings.gohighlevel_api_key,
    )


def get_sync_roster_uc(
    roster: RosterStore = Depends(get_roster_store),
    crm: CrmPort = Depends(get_crm),
    lock: asyncio.Lock = Depends(get_roster_lock),
) -> SyncRosterUseCase:
    return SyncRosterUseCase(
        roster=roster,
        crm=crm,
        roster_lock=lock,
        default_api_key=settings.gohighlevel_api_key,
    )


def get_replace_roster_uc(
    roster: RosterStore = Depends(get_roster_store),
    lock: asyncio.Lock = Depends(get_roster_lock),
) -> ReplaceRosterUseCase:
    return ReplaceRosterUseCase(roster=roster, roster_lock=lock)
