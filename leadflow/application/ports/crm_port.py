"""Port interface for the external CRM (roster source and callback target)."""

from abc import ABC, abstractmethod
from typing import Any

from leadflow.domain.entities.agent import Agent
from leadflow.domain.entities.settings import CallbackConfig


class CrmPort(ABC):
    @abstractmethod
    async def fetch_agents(self, api_key: str) -> list[Agent]:
        """Fetch the CRM user list as agents.

        Raises ConfigurationError when the key is rejected and UpstreamError
        on any other failure.
        """
        ...

    @abstractmethod
    async def push_assignment(
        self,
        lead_data: dict[str, Any],
        agent: Agent,
        api_key: str | None,
        callback: CallbackConfig | None = None,
    ) -> None:
        """Report the chosen agent back to the CRM. Single attempt, no retry.

        When ``callback`` is given it is rendered and sent instead of the
        default contact update.
        """
        ...
