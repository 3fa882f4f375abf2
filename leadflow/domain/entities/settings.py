"""Operator-controlled settings stored next to the roster."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class DistributionSettings:
    is_distribution_enabled: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {"isDistributionEnabled": self.is_distribution_enabled}

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> DistributionSettings:
        if not data:
            return cls()
        return cls(is_distribution_enabled=bool(data.get("isDistributionEnabled", True)))


@dataclass
class CallbackConfig:
    """Custom outbound request fired after an assignment.

    ``url``, header values and ``body`` may carry ``{{leadData.<field>}}``
    and ``{{agent.<field>}}`` placeholders.
    """

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "method": self.method,
            "url": self.url,
            "headers": dict(self.headers),
            "body": self.body,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CallbackConfig:
        return cls(
            method=str(data.get("method") or "POST").upper(),
            url=str(data["url"]),
            headers={str(k): str(v) for k, v in (data.get("headers") or {}).items()},
            body=str(data.get("body") or ""),
        )
