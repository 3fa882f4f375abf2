"""Health check endpoint."""

from fastapi import APIRouter, Depends

from leadflow.application.errors import StorageError
from leadflow.application.ports.roster_store import RosterStore
from leadflow.application.use_cases.manage_roster import summarize_roster
from leadflow.config import settings
from leadflow.infrastructure.api.dependencies import get_roster_store

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(roster: RosterStore = Depends(get_roster_store)):
    """Check that the roster can be read and report how much of it can take leads."""
    body = {
        "service": "Leadflow - lead distribution engine",
        "mode": settings.distribution_mode.value,
    }
    try:
        agents = await roster.load()
        distribution = await roster.get_settings()
    except StorageError as e:
        return {**body, "status": "degraded", "database": f"error: {e}"}

    summary = summarize_roster(agents)
    return {
        **body,
        "status": "ok",
        "database": "connected",
        "isDistributionEnabled": distribution.is_distribution_enabled,
        "agents": summary.total_agents,
        "availableAgents": summary.available_agents,
    }
