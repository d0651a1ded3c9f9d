"""Pytest configuration and shared fixtures."""

import io
import zipfile
from typing import Callable
from unittest.mock import AsyncMock, Mock

import pytest

from docfill.config import Settings
from docfill.llm import LLMClient

CONTENT_TYPES_XML = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    '<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">'
    '<Default Extension="xml" ContentType="application/xml"/>'
    "</Types>"
)

STYLES_XML = '<?xml version="1.0" encoding="UTF-8"?><w:styles>[NotAPlaceholder]</w:styles>'


def wrap_body(*paragraphs: str) -> str:
    """Wrap paragraph texts in minimal WordprocessingML."""
    body = "".join(f"<w:p><w:r><w:t>{text}</w:t></w:r></w:p>" for text in paragraphs)
    return (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        '<w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">'
        f"<w:body>{body}</w:body></w:document>"
    )


def build_docx(document_xml: str) -> bytes:
    """Build an in-memory .docx archive around a document.xml string."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        archive.writestr("[Content_Types].xml", CONTENT_TYPES_XML)
        archive.writestr("word/document.xml", document_xml)
        archive.writestr("word/styles.xml", STYLES_XML)
    return buffer.getvalue()


@pytest.fixture
def make_docx() -> Callable[[str], bytes]:
    """Factory building a .docx from a document.xml string."""
    return build_docx


@pytest.fixture
def letter_markup() -> str:
    """Markup of the reference letter with two placeholders."""
    return wrap_body("Dear [CompanyName], total is [Amount].")


@pytest.fixture
def test_settings() -> Settings:
    """Create settings with test values."""
    return Settings(
        llm_provider="primary",
        anthropic_api_key="test-key-123",
        model_name="claude-sonnet-4-20250514",
        max_tokens=1024,
        llm_timeout_seconds=5.0,
        azure_openai_endpoint=None,
        azure_openai_deployment=None,
        azure_openai_api_key=None,
        azure_openai_ad_token=None,
        fill_strategy="batch",
        context_window_size=200,
        value_preview_chars=60,
        sentence_terminators=".。",
        document_entry="word/document.xml",
        template_path=None,
        output_path="output.docx",
        value_map_path=None,
    )


@pytest.fixture
def mock_llm_client() -> Mock:
    """Create a mocked LLM client whose replies are set per test."""
    client = Mock(spec=LLMClient)
    client.complete = AsyncMock(return_value="{}")
    client.close = AsyncMock()
    return client
