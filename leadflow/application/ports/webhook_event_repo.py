"""Port interface for the inbound webhook event log."""

from abc import ABC, abstractmethod

from leadflow.domain.entities.webhook_event import WebhookEvent


class WebhookEventRepository(ABC):
    @abstractmethod
    async def save(self, event: WebhookEvent) -> WebhookEvent:
        ...

    @abstractmethod
    async def get_latest(self) -> WebhookEvent | None:
        ...

    @abstractmethod
    async def get_recent(self, limit: int = 50) -> list[WebhookEvent]:
        """Return up to ``limit`` events, newest first."""
        ...
