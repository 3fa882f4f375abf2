"""GoHighLevel adapter — implements CrmPort over the REST v1 API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from leadflow.adapters.crm.templating import render_callback
from leadflow.application.errors import ConfigurationError, UpstreamError
from leadflow.application.ports.crm_port import CrmPort
from leadflow.config import settings
from leadflow.domain.entities.agent import Agent
from leadflow.domain.entities.settings import CallbackConfig

logger = logging.getLogger(__name__)

CONTACT_ID_FIELDS = ("contact_id", "contactId", "id")


class GoHighLevelAdapter(CrmPort):
    """Single-shot REST client: no retries, every call bounded by ``timeout``."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = (base_url or settings.gohighlevel_base_url).rstrip("/")
        self._timeout = timeout if timeout is not None else settings.crm_timeout_seconds
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self._timeout, transport=self._transport)

    @staticmethod
    def _auth_headers(api_key: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

    async def fetch_agents(self, api_key: str) -> list[Agent]:
        if not api_key:
            raise ConfigurationError("No CRM API key configured")

        url = f"{self._base_url}/users/"
        try:
            async with self._client() as client:
                response = await client.get(url, headers=self._auth_headers(api_key))
        except httpx.HTTPError as e:
            logger.exception("CRM user fetch failed")
            raise UpstreamError(f"Could not reach CRM: {e}") from e

        if response.status_code == 401:
            raise ConfigurationError("Invalid or unauthorized CRM API key")
        if not response.is_success:
            raise UpstreamError(
                f"Error fetching agents: {response.status_code} "
                f"{response.reason_phrase} - {response.text}"
            )

        try:
            users = response.json().get("users") or []
            agents = [self._user_to_agent(u) for u in users]
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            raise UpstreamError(f"Malformed CRM user list: {e!r}") from e
        logger.info("Fetched %d users from CRM", len(agents))
        return agents

    @staticmethod
    def _user_to_agent(user: dict[str, Any]) -> Agent:
        name = " ".join(
            p for p in (user.get("firstName"), user.get("lastName")) if p
        ) or user.get("name") or ""
        availability = user.get("availability")
        return Agent(
            id=str(user["id"]),
            name=name,
            is_available=True if availability is None else bool(availability),
            email=user.get("email"),
            role=user.get("role"),
            location_id=user.get("locationId"),
        )

    async def push_assignment(
        self,
        lead_data: dict[str, Any],
        agent: Agent,
        api_key: str | None,
        callback: CallbackConfig | None = None,
    ) -> None:
        if callback is not None:
            request = render_callback(callback, lead_data, agent)
            await self._send(
                request.method, request.url, request.headers,
                content=request.body.encode() if request.body else None,
            )
            return

        if not api_key:
            raise ConfigurationError("No CRM API key configured")
        contact_id = self._contact_id(lead_data)
        if not contact_id:
            raise UpstreamError("Lead payload carries no contact id")

        await self._send(
            "PUT",
            f"{self._base_url}/contacts/{contact_id}",
            self._auth_headers(api_key),
            json={"assignedTo": agent.id},
        )

    @staticmethod
    def _contact_id(lead_data: dict[str, Any]) -> str | None:
        for field in CONTACT_ID_FIELDS:
            value = lead_data.get(field)
            if isinstance(value, (str, int)) and str(value):
                return str(value)
        return None

    async def _send(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        **kwargs: Any,
    ) -> httpx.Response:
        try:
            async with self._client() as client:
                response = await client.request(method, url, headers=headers, **kwargs)
        except httpx.TimeoutException as e:
            raise UpstreamError(f"CRM request timed out after {self._timeout}s") from e
        except httpx.HTTPError as e:
            raise UpstreamError(f"Could not reach CRM: {e}") from e
        except (httpx.InvalidURL, ValueError) as e:
            # Rendered URLs and header values come from lead payloads.
            raise UpstreamError(f"Invalid CRM request: {e}") from e

        if not response.is_success:
            raise UpstreamError(
                f"CRM answered {response.status_code}: {response.text[:200]}"
            )
        logger.info("CRM callback %s %s → %d", method, url, response.status_code)
        return response
