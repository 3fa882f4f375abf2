"""Tests for GoHighLevelAdapter — network calls go through httpx.MockTransport."""

import json

import httpx
import pytest

from leadflow.adapters.crm.gohighlevel_adapter import GoHighLevelAdapter
from leadflow.application.errors import ConfigurationError, UpstreamError
from leadflow.domain.entities.agent import Agent
from leadflow.domain.entities.settings import CallbackConfig

BASE_URL = "https://crm.test/v1"


def _adapter(handler) -> tuple[GoHighLevelAdapter, list[httpx.Request]]:
    seen: list[httpx.Request] = []

    def record(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    adapter = GoHighLevelAdapter(
        base_url=BASE_URL, timeout=2.0, transport=httpx.MockTransport(record),
    )
    return adapter, seen


# ─── Roster fetch ───────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_fetch_agents_maps_users():
    payload = {"users": [
        {"id": "u1", "firstName": "Ana", "lastName": "Silva", "email": "ana@example.com",
         "role": "admin", "locationId": "loc-1"},
        {"id": "u2", "firstName": "Bia", "availability": False},
    ]}
    adapter, seen = _adapter(lambda r: httpx.Response(200, json=payload))

    agents = await adapter.fetch_agents("key-1")

    assert seen[0].url == f"{BASE_URL}/users/"
    assert seen[0].headers["Authorization"] == "Bearer key-1"
    assert agents[0] == Agent(
        id="u1", name="Ana Silva", email="ana@example.com", role="admin", location_id="loc-1",
    )
    assert agents[1].name == "Bia"
    assert agents[1].is_available is False
    assert agents[1].lead_count == 0


@pytest.mark.asyncio
async def test_fetch_agents_unauthorized_is_configuration_error():
    adapter, _ = _adapter(lambda r: httpx.Response(401, json={"msg": "bad key"}))
    with pytest.raises(ConfigurationError, match="Invalid or unauthorized"):
        await adapter.fetch_agents("bad")


@pytest.mark.asyncio
async def test_fetch_agents_server_error_is_upstream_error():
    adapter, _ = _adapter(lambda r: httpx.Response(503, text="maintenance"))
    with pytest.raises(UpstreamError, match="503"):
        await adapter.fetch_agents("key")


@pytest.mark.asyncio
async def test_fetch_agents_requires_key():
    adapter, seen = _adapter(lambda r: httpx.Response(200, json={"users": []}))
    with pytest.raises(ConfigurationError):
        await adapter.fetch_agents("")
    assert seen == []


# ─── Assignment push ────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_default_push_updates_contact_owner():
    adapter, seen = _adapter(lambda r: httpx.Response(200, json={"contact": {}}))

    await adapter.push_assignment({"contact_id": "c-1"}, Agent(id="u1", name="Ana"), "key-1")

    [request] = seen
    assert request.method == "PUT"
    assert request.url == f"{BASE_URL}/contacts/c-1"
    assert request.headers["Authorization"] == "Bearer key-1"
    assert json.loads(request.content) == {"assignedTo": "u1"}


@pytest.mark.asyncio
async def test_push_without_contact_id_fails_without_request():
    adapter, seen = _adapter(lambda r: httpx.Response(200))
    with pytest.raises(UpstreamError, match="no contact id"):
        await adapter.push_assignment({"email": "x"}, Agent(id="u1", name="Ana"), "key")
    assert seen == []


@pytest.mark.asyncio
async def test_push_without_key_is_configuration_error():
    adapter, _ = _adapter(lambda r: httpx.Response(200))
    with pytest.raises(ConfigurationError):
        await adapter.push_assignment({"contact_id": "c-1"}, Agent(id="u1", name="Ana"), None)


@pytest.mark.asyncio
async def test_non_2xx_push_is_upstream_error():
    adapter, _ = _adapter(lambda r: httpx.Response(422, text="invalid owner"))
    with pytest.raises(UpstreamError, match="422"):
        await adapter.push_assignment({"contact_id": "c-1"}, Agent(id="u1", name="Ana"), "key")


@pytest.mark.asyncio
async def test_timeout_is_upstream_error():
    def slow(request):
        raise httpx.ReadTimeout("timed out", request=request)

    adapter, _ = _adapter(slow)
    with pytest.raises(UpstreamError, match="timed out"):
        await adapter.push_assignment({"contact_id": "c-1"}, Agent(id="u1", name="Ana"), "key")


@pytest.mark.asyncio
async def test_custom_callback_is_rendered_and_sent():
    adapter, seen = _adapter(lambda r: httpx.Response(204))
    callback = CallbackConfig(
        method="POST",
        url="https://hooks.test/lead/{{leadData.id}}",
        headers={"X-Owner": "{{agent.id}}"},
        body='{"owner": "{{agent.name}}"}',
    )

    await adapter.push_assignment({"id": "L-5"}, Agent(id="u1", name="Ana"), None, callback)

    [request] = seen
    assert request.method == "POST"
    assert request.url == "https://hooks.test/lead/L-5"
    assert request.headers["X-Owner"] == "u1"
    assert request.content == b'{"owner": "Ana"}'


@pytest.mark.asyncio
async def test_fetch_agents_non_json_body_is_upstream_error():
    adapter, _ = _adapter(lambda r: httpx.Response(200, text="<html>maintenance</html>"))
    with pytest.raises(UpstreamError, match="Malformed CRM user list"):
        await adapter.fetch_agents("key")


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [
    {"users": [{"firstName": "No id"}]},
    [{"id": "u1"}],
])
async def test_fetch_agents_unexpected_shape_is_upstream_error(payload):
    adapter, _ = _adapter(lambda r: httpx.Response(200, json=payload))
    with pytest.raises(UpstreamError, match="Malformed CRM user list"):
        await adapter.fetch_agents("key")


@pytest.mark.asyncio
async def test_non_ascii_header_value_is_upstream_error():
    adapter, seen = _adapter(lambda r: httpx.Response(200))
    callback = CallbackConfig(
        method="POST", url="https://hooks.test/lead", headers={"X-Lead": "{{leadData.name}}"},
    )
    with pytest.raises(UpstreamError, match="Invalid CRM request"):
        await adapter.push_assignment({"name": "José"}, Agent(id="u1", name="Ana"), None, callback)
    assert seen == []


@pytest.mark.asyncio
async def test_unparseable_rendered_url_is_upstream_error():
    adapter, seen = _adapter(lambda r: httpx.Response(200))
    callback = CallbackConfig(method="POST", url="http://[{{leadData.name}}/x")
    with pytest.raises(UpstreamError):
        await adapter.push_assignment({"name": "José"}, Agent(id="u1", name="Ana"), None, callback)
    assert seen == []
