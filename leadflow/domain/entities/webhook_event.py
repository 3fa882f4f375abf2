"""WebhookEvent — one inbound lead payload and what happened to it."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


@dataclass
class WebhookEvent:
    id: int | None
    lead_data: Any
    status: str
    assignment: dict[str, Any] | None = None
    received_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "leadData": self.lead_data,
            "status": self.status,
            "assignment": self.assignment,
            "timestamp": self.received_at.isoformat(),
        }
