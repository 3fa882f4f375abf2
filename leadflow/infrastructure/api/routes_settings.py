"""Settings endpoints — distribution toggle, CRM key and custom callback."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from leadflow.application.ports.roster_store import RosterStore
from leadflow.config import settings as app_settings
from leadflow.domain.entities.settings import CallbackConfig, DistributionSettings
from leadflow.infrastructure.api.dependencies import get_roster_store

router = APIRouter(prefix="/settings", tags=["settings"])


# ── Request schemas ─────────────────────────────────────────────────

class DistributionSettingsRequest(BaseModel):
    isDistributionEnabled: bool


class ApiKeyRequest(BaseModel):
    apiKey: str = Field(min_length=1)


class CallbackConfigRequest(BaseModel):
    method: str = "POST"
    url: str = Field(min_length=1)
    headers: dict[str, str] = Field(default_factory=dict)
    body: str = ""


# ── Endpoints ───────────────────────────────────────────────────────

@router.get("")
async def get_settings(roster: RosterStore = Depends(get_roster_store)):
    current = await roster.get_settings()
    api_key = await roster.get_api_key() or app_settings.gohighlevel_api_key
    return {
        **current.to_dict(),
        "mode": app_settings.distribution_mode.value,
        "hasApiKey": bool(api_key),
        "crmCallbackEnabled": app_settings.crm_callback_enabled,
    }


@router.put("")
async def update_settings(
    body: DistributionSettingsRequest,
    roster: RosterStore = Depends(get_roster_store),
):
    new = DistributionSettings(is_distribution_enabled=body.isDistributionEnabled)
    await roster.save_settings(new)
    return new.to_dict()


@router.put("/api-key")
async def store_api_key(body: ApiKeyRequest, roster: RosterStore = Depends(get_roster_store)):
    await roster.save_api_key(body.apiKey)
    return {"status": "ok"}


@router.get("/callback")
async def get_callback(roster: RosterStore = Depends(get_roster_store)):
    config = await roster.get_callback_config()
    return {"callback": config.to_dict() if config else None}


@router.put("/callback")
async def update_callback(
    body: CallbackConfigRequest,
    roster: RosterStore = Depends(get_roster_store),
):
    method = body.method.upper()
    if method not in {"GET", "POST", "PUT", "PATCH", "DELETE"}:
        raise HTTPException(status_code=422, detail=f"Unsupported HTTP method: {body.method}")
    config = CallbackConfig(method=method, url=body.url, headers=body.headers, body=body.body)
    await roster.save_callback_config(config)
    return {"callback": config.to_dict()}


@router.delete("/callback")
async def clear_callback(roster: RosterStore = Depends(get_roster_store)):
    await roster.save_callback_config(None)
    return {"callback": None}
