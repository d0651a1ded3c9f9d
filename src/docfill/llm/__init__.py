"""LLM client module."""

from ..config import Settings
from .base import LLMClient, LLMResponse, LLMTransportError
from .anthropic_client import AnthropicClient
from .enterprise_client import EnterpriseClient

PROVIDERS = ("primary", "enterprise")


def create_llm_client(settings: Settings) -> LLMClient:
    """Create the appropriate LLM client based on configuration."""
    provider = settings.llm_provider.lower()

    if provider == "enterprise":
        if not settings.azure_openai_endpoint or not settings.azure_openai_deployment:
            raise ValueError(
                "AZURE_OPENAI_ENDPOINT and AZURE_OPENAI_DEPLOYMENT are required "
                "when LLM_PROVIDER is 'enterprise'"
            )
        if not settings.azure_openai_ad_token and not settings.azure_openai_api_key:
            raise ValueError(
                "AZURE_OPENAI_AD_TOKEN or AZURE_OPENAI_API_KEY is required "
                "when LLM_PROVIDER is 'enterprise'"
            )
        return EnterpriseClient(
            endpoint=settings.azure_openai_endpoint,
            deployment=settings.azure_openai_deployment,
            api_version=settings.azure_openai_api_version,
            ad_token=settings.azure_openai_ad_token,
            api_key=settings.azure_openai_api_key,
            max_tokens=settings.max_tokens,
            timeout=settings.llm_timeout_seconds,
        )

    if provider == "primary":
        if not settings.anthropic_api_key:
            raise ValueError("ANTHROPIC_API_KEY is required when LLM_PROVIDER is 'primary'")
        return AnthropicClient(
            api_key=settings.anthropic_api_key,
            model=settings.model_name,
            max_tokens=settings.max_tokens,
            timeout=settings.llm_timeout_seconds,
        )

    raise ValueError(f"Unknown LLM provider: {settings.llm_provider!r} (expected one of {PROVIDERS})")


__all__ = [
    "LLMClient",
    "LLMResponse",
    "LLMTransportError",
    "AnthropicClient",
    "EnterpriseClient",
    "PROVIDERS",
    "create_llm_client",
]
