"""Completion client interface."""
from abc import ABC, abstractmethod

from soil_advisor.clients.schemas import CompletionResponse


class CompletionClient(ABC):
    @abstractmethod
    async def complete(self, prompt: str) -> CompletionResponse:
        """Send one prompt upstream. Raises UpstreamError on any failure."""
        ...
