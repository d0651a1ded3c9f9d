"""Configuration management for docfill."""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()


class Settings(BaseModel):
    """Application settings."""

    # LLM provider ('primary' = Anthropic API key, 'enterprise' = Azure OpenAI deployment)
    llm_provider: str = os.getenv("LLM_PROVIDER", "primary")

    # Anthropic API key (required when LLM_PROVIDER=primary)
    anthropic_api_key: Optional[str] = os.getenv("ANTHROPIC_API_KEY")
    model_name: str = os.getenv("MODEL_NAME", "claude-sonnet-4-20250514")
    max_tokens: int = int(os.getenv("MAX_TOKENS", "2048"))
    llm_timeout_seconds: float = float(os.getenv("LLM_TIMEOUT_SECONDS", "60"))

    # Azure OpenAI deployment (required when LLM_PROVIDER=enterprise)
    azure_openai_endpoint: Optional[str] = os.getenv("AZURE_OPENAI_ENDPOINT")
    azure_openai_deployment: Optional[str] = os.getenv("AZURE_OPENAI_DEPLOYMENT")
    azure_openai_api_version: str = os.getenv("AZURE_OPENAI_API_VERSION", "2024-06-01")
    azure_openai_api_key: Optional[str] = os.getenv("AZURE_OPENAI_API_KEY")
    # Entra ID access token; takes precedence over the api key when both are set
    azure_openai_ad_token: Optional[str] = os.getenv("AZURE_OPENAI_AD_TOKEN")

    # Resolution settings
    fill_strategy: str = os.getenv("FILL_STRATEGY", "batch")  # 'batch' or 'sequential'
    context_window_size: int = int(os.getenv("CONTEXT_WINDOW_SIZE", "200"))
    value_preview_chars: int = int(os.getenv("VALUE_PREVIEW_CHARS", "60"))
    sentence_terminators: str = os.getenv("SENTENCE_TERMINATORS", ".。")

    # Document container
    document_entry: str = os.getenv("DOCUMENT_ENTRY", "word/document.xml")

    # CLI fallbacks
    template_path: Optional[str] = os.getenv("TEMPLATE_PATH")
    output_path: str = os.getenv("OUTPUT_PATH", "output.docx")
    value_map_path: Optional[str] = os.getenv("VALUE_MAP_PATH")

    log_level: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
