"""Roster endpoints — list, operator edits, CRM sync and load summary."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from leadflow.application.errors import ConfigurationError, UpstreamError
from leadflow.application.ports.roster_store import RosterStore
from leadflow.application.use_cases.manage_roster import (
    ReplaceRosterUseCase,
    SyncRosterUseCase,
    summarize_roster,
)
from leadflow.domain.entities.agent import Agent
from leadflow.infrastructure.api.dependencies import (
    get_replace_roster_uc,
    get_roster_store,
    get_sync_roster_uc,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/agents", tags=["agents"])


class SyncRequest(BaseModel):
    apiKey: str | None = None


@router.get("")
async def list_agents(roster: RosterStore = Depends(get_roster_store)):
    agents = await roster.load()
    return {"total": len(agents), "agents": [a.to_dict() for a in agents]}


@router.put("")
async def replace_agents(
    payload: list[dict[str, Any]],
    replace_uc: ReplaceRosterUseCase = Depends(get_replace_roster_uc),
):
    """Overwrite the roster with operator-edited records."""
    try:
        agents = [Agent.from_dict(item) for item in payload]
        saved = await replace_uc.execute(agents)
    except (ValueError, TypeError) as e:
        raise HTTPException(status_code=422, detail=str(e))
    return {"total": len(saved), "agents": [a.to_dict() for a in saved]}


@router.post("/sync")
async def sync_agents(
    body: SyncRequest | None = None,
    sync_uc: SyncRosterUseCase = Depends(get_sync_roster_uc),
):
    """Refresh the roster from the CRM, keeping local weights and counters."""
    try:
        agents = await sync_uc.execute(api_key=body.apiKey if body else None)
    except ConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except UpstreamError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return {"total": len(agents), "agents": [a.to_dict() for a in agents]}


@router.get("/summary")
async def roster_summary(roster: RosterStore = Depends(get_roster_store)):
    """Per-agent load and the advisory percentage check."""
    summary = summarize_roster(await roster.load())
    return {
        "totalAgents": summary.total_agents,
        "availableAgents": summary.available_agents,
        "totalLeads": summary.total_leads,
        "availablePercentageSum": summary.available_percentage_sum,
        "percentageWarning": summary.percentage_warning,
        "leadCounts": summary.lead_counts,
    }
