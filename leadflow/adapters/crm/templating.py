"""Placeholder substitution for custom outbound callbacks.

``{{leadData.email}}`` is replaced by ``lead_data["email"]`` and
``{{agent.name}}`` by the agent's ``name`` field (wire naming). Only scalar
values substitute; anything else, and unknown placeholders, stay as written.
"""

from __future__ import annotations

from typing import Any

from leadflow.domain.entities.agent import Agent
from leadflow.domain.entities.settings import CallbackConfig

_SCALARS = (str, int, float, bool)


def _scalar_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def render(template: str, namespaces: dict[str, dict[str, Any]]) -> str:
    """Find/replace ``{{namespace.key}}`` over flat key-value maps."""
    if "{{" not in template:
        return template
    for namespace, values in namespaces.items():
        for key, value in values.items():
            if not isinstance(value, _SCALARS):
                continue
            template = template.replace(
                "{{" + f"{namespace}.{key}" + "}}", _scalar_text(value)
            )
    return template


def render_callback(
    config: CallbackConfig,
    lead_data: dict[str, Any],
    agent: Agent,
) -> CallbackConfig:
    namespaces = {"leadData": lead_data, "agent": agent.to_dict()}
    return CallbackConfig(
        method=config.method,
        url=render(config.url, namespaces),
        headers={k: render(v, namespaces) for k, v in config.headers.items()},
        body=render(config.body, namespaces),
    )
