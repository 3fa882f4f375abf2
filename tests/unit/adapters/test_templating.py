"""Tests for callback placeholder templating."""

from leadflow.adapters.crm.templating import render, render_callback
from leadflow.domain.entities.agent import Agent
from leadflow.domain.entities.settings import CallbackConfig


def test_replaces_scalar_lead_fields():
    out = render(
        "Hi {{leadData.first_name}}, ref {{leadData.id}}",
        {"leadData": {"first_name": "Ana", "id": 42}},
    )
    assert out == "Hi Ana, ref 42"


def test_booleans_render_as_json_literals():
    assert render("{{leadData.vip}}", {"leadData": {"vip": True}}) == "true"


def test_non_scalar_values_and_unknown_placeholders_are_left_alone():
    out = render(
        "{{leadData.tags}} {{leadData.missing}} {{other.x}}",
        {"leadData": {"tags": ["a", "b"]}},
    )
    assert out == "{{leadData.tags}} {{leadData.missing}} {{other.x}}"


def test_template_without_placeholders_is_returned_as_is():
    assert render("plain", {"leadData": {"a": 1}}) == "plain"


def test_render_callback_fills_url_headers_and_body():
    config = CallbackConfig(
        method="PUT",
        url="https://crm.test/contacts/{{leadData.contact_id}}",
        headers={"X-Agent": "{{agent.name}}", "Authorization": "Bearer static"},
        body='{"assignedTo": "{{agent.id}}", "email": "{{leadData.email}}"}',
    )
    agent = Agent(id="u-9", name="Bruno")

    rendered = render_callback(config, {"contact_id": "c-1", "email": "x@example.com"}, agent)

    assert rendered.method == "PUT"
    assert rendered.url == "https://crm.test/contacts/c-1"
    assert rendered.headers == {"X-Agent": "Bruno", "Authorization": "Bearer static"}
    assert rendered.body == '{"assignedTo": "u-9", "email": "x@example.com"}'
    assert config.url.endswith("{{leadData.contact_id}}")
