"""Base LLM client interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass
class LLMResponse:
    """Response from LLM."""

    text: str
    stop_reason: str
    usage: Optional[dict] = None


class LLMTransportError(Exception):
    """Exception raised when a provider reply carries no usable text."""

    pass


class LLMClient(ABC):
    """Abstract base class for LLM clients.

    Clients send a single user turn with no system prompt and pinned
    temperature 0. They never retry; failures propagate to the caller.
    """

    provider: str = ""

    @abstractmethod
    async def create_message(self, prompt: str) -> LLMResponse:
        """Send one prompt and return the raw response."""
        pass

    async def complete(self, prompt: str) -> str:
        """Send one prompt and return the trimmed reply text."""
        response = await self.create_message(prompt)
        return response.text.strip()

    async def close(self) -> None:
        """Release any underlying connections."""
        pass
