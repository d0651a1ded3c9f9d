"""Azure OpenAI deployment client (enterprise provider)."""

import logging
from typing import Optional

import httpx

from .base import LLMClient, LLMResponse, LLMTransportError

logger = logging.getLogger(__name__)


class EnterpriseClient(LLMClient):
    """Chat-completions client for an Azure OpenAI deployment.

    Authenticates with an Entra ID access token when one is given, otherwise
    with the deployment's api key.
    """

    provider = "enterprise"

    def __init__(
        self,
        endpoint: str,
        deployment: str,
        api_version: str,
        ad_token: Optional[str] = None,
        api_key: Optional[str] = None,
        max_tokens: int = 2048,
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not ad_token and not api_key:
            raise ValueError("EnterpriseClient requires an ad_token or an api_key")
        self.endpoint = endpoint.rstrip("/")
        self.deployment = deployment
        self.api_version = api_version
        self.ad_token = ad_token
        self.api_key = api_key
        self.max_tokens = max_tokens
        self.timeout = timeout
        self._transport = transport

    @property
    def url(self) -> str:
        return f"{self.endpoint}/openai/deployments/{self.deployment}/chat/completions"

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.ad_token:
            headers["Authorization"] = f"Bearer {self.ad_token}"
        else:
            headers["api-key"] = self.api_key
        return headers

    async def create_message(self, prompt: str) -> LLMResponse:
        """Create a single-turn chat completion on the deployment."""
        payload = {
            "messages": [{"role": "user", "content": prompt}],
            "temperature": 0,
            "max_tokens": self.max_tokens,
        }

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.post(
                self.url,
                params={"api-version": self.api_version},
                headers=self._headers(),
                json=payload,
            )
            response.raise_for_status()
            data = response.json()

        return self._convert_response(data)

    def _convert_response(self, data: dict) -> LLMResponse:
        """Convert a chat-completions payload to our format."""
        choices = data.get("choices") or []
        if not choices:
            raise LLMTransportError("Enterprise response contained no choices")

        choice = choices[0]
        content = (choice.get("message") or {}).get("content")
        if content is None:
            raise LLMTransportError(
                f"Enterprise response contained no text (finish_reason={choice.get('finish_reason')})"
            )

        usage = None
        if "usage" in data:
            usage = {
                "input_tokens": data["usage"].get("prompt_tokens", 0),
                "output_tokens": data["usage"].get("completion_tokens", 0),
            }
            logger.debug(f"Enterprise call usage: {usage}")

        return LLMResponse(
            text=content,
            stop_reason=choice.get("finish_reason", "stop"),
            usage=usage,
        )
