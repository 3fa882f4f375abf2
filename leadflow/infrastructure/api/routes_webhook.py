"""Webhook endpoint — receives CRM lead events and assigns them."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from leadflow.application.errors import StorageError
from leadflow.application.ports.webhook_event_repo import WebhookEventRepository
from leadflow.application.use_cases.assign_lead import AssignLeadUseCase
from leadflow.infrastructure.api.dependencies import get_assign_lead_uc, get_event_repo

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/webhook", tags=["webhook"])


def _failure(details: str) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={"error": "Failed to process webhook", "details": details},
    )


@router.post("")
async def receive_webhook(
    request: Request,
    assign_uc: AssignLeadUseCase = Depends(get_assign_lead_uc),
):
    """Assign the inbound lead. Always 200 unless the body or storage is broken."""
    try:
        lead_data = await request.json()
    except ValueError as e:
        logger.warning("Malformed webhook body: %s", e)
        return _failure(f"Malformed JSON body: {e}")
    if not isinstance(lead_data, dict):
        return _failure("Lead payload must be a JSON object")

    logger.info("Webhook received: %s", lead_data)
    try:
        result = await assign_uc.execute(lead_data)
    except StorageError as e:
        return _failure(str(e))

    response = {"message": "Webhook processed", "status": result.message}
    if result.is_assigned:
        response["assignment"] = result.to_dict()
    else:
        response["reason"] = result.reason.value if result.reason else None
    return response


@router.get("")
async def webhook_ready():
    return {"message": "Webhook endpoint ready to receive POST requests."}


@router.get("/latest")
async def latest_webhook(events: WebhookEventRepository = Depends(get_event_repo)):
    """Most recent inbound payload with its assignment outcome."""
    event = await events.get_latest()
    return {"event": event.to_dict() if event else None}


@router.get("/events")
async def list_webhook_events(
    limit: int = 50,
    events: WebhookEventRepository = Depends(get_event_repo),
):
    recent = await events.get_recent(limit=max(1, min(limit, 500)))
    return {"total": len(recent), "events": [e.to_dict() for e in recent]}
