"""Port interface for roster and settings persistence."""

from abc import ABC, abstractmethod

from leadflow.domain.entities.agent import Agent
from leadflow.domain.entities.settings import CallbackConfig, DistributionSettings


class RosterStore(ABC):
    """Key-value style surface over the persisted roster.

    Implementations raise ``StorageError`` on any backend failure. ``save``
    replaces the whole roster atomically: either every agent is written or
    nothing is.
    """

    @abstractmethod
    async def load(self) -> list[Agent]:
        """Return the full roster in its persisted order."""
        ...

    @abstractmethod
    async def save(self, agents: list[Agent]) -> None:
        ...

    @abstractmethod
    async def get_settings(self) -> DistributionSettings:
        """Return the distribution settings, defaults when never saved."""
        ...

    @abstractmethod
    async def save_settings(self, settings: DistributionSettings) -> None:
        ...

    @abstractmethod
    async def get_api_key(self) -> str | None:
        ...

    @abstractmethod
    async def save_api_key(self, api_key: str) -> None:
        ...

    @abstractmethod
    async def get_callback_config(self) -> CallbackConfig | None:
        ...

    @abstractmethod
    async def save_callback_config(self, config: CallbackConfig | None) -> None:
        """Store the custom callback, or clear it when ``config`` is None."""
        ...
