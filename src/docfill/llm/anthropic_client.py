"""Anthropic LLM client (primary provider)."""

import logging

from anthropic import AsyncAnthropic

from .base import LLMClient, LLMResponse, LLMTransportError

logger = logging.getLogger(__name__)


class AnthropicClient(LLMClient):
    """Anthropic Claude client authenticated with an API key."""

    provider = "primary"

    def __init__(
        self,
        api_key: str,
        model: str,
        max_tokens: int = 2048,
        timeout: float = 60.0,
    ):
        self.model = model
        self.max_tokens = max_tokens
        self.client = AsyncAnthropic(api_key=api_key, timeout=timeout, max_retries=0)

    async def create_message(self, prompt: str) -> LLMResponse:
        """Create a single-turn message with Claude."""
        response = await self.client.messages.create(
            model=self.model,
            max_tokens=self.max_tokens,
            temperature=0,
            messages=[{"role": "user", "content": prompt}],
        )

        text_parts = [
            block.text for block in response.content if getattr(block, "type", None) == "text"
        ]
        if not text_parts:
            raise LLMTransportError(
                f"Anthropic response contained no text (stop_reason={response.stop_reason})"
            )

        usage = {
            "input_tokens": response.usage.input_tokens,
            "output_tokens": response.usage.output_tokens,
        }
        logger.debug(f"Anthropic call usage: {usage}")

        return LLMResponse(
            text="".join(text_parts),
            stop_reason=response.stop_reason,
            usage=usage,
        )

    async def close(self) -> None:
        await self.client.close()
