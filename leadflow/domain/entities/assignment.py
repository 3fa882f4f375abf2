"""AssignmentResult — the outcome of routing one lead to an agent."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from leadflow.domain.value_objects.enums import (
    AssignmentStatus,
    PolicyMode,
    Qualification,
    UnassignedReason,
)


@dataclass
class AssignmentResult:
    status: AssignmentStatus
    mode: PolicyMode | None = None
    agent_id: str | None = None
    agent_name: str | None = None
    reason: UnassignedReason | None = None
    drawn_tier: Qualification | None = None
    fallback_used: bool = False
    callback_status: str | None = None

    @property
    def is_assigned(self) -> bool:
        return self.status == AssignmentStatus.ASSIGNED

    @property
    def message(self) -> str:
        """Human-readable status text, including the callback outcome."""
        if self.is_assigned:
            text = f"Lead assigned to {self.agent_name}."
        else:
            text = f"Lead not assigned: {self.reason.value if self.reason else 'unknown'}."
        if self.callback_status:
            text += f" {self.callback_status}"
        return text

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"status": self.status.value}
        if self.is_assigned:
            data["agentId"] = self.agent_id
            data["agentName"] = self.agent_name
        else:
            data["reason"] = self.reason.value if self.reason else None
        if self.mode is not None:
            data["mode"] = self.mode.value
        if self.drawn_tier is not None:
            data["drawnTier"] = self.drawn_tier.value
        data["fallbackUsed"] = self.fallback_used
        if self.callback_status is not None:
            data["callbackStatus"] = self.callback_status
        return data
