"""Document filler orchestrating extraction, resolution and substitution."""

import logging
from enum import Enum
from typing import Any, Optional, Sequence

from pydantic import BaseModel, Field

from ..config import Settings
from ..document import DOCUMENT_ENTRY, read_entry, write_entry
from ..llm import LLMClient, create_llm_client
from ..placeholders import (
    ContextBuilder,
    ExtractionResult,
    Placeholder,
    PlaceholderContext,
    PlaceholderExtractor,
    strip_markup,
)
from ..placeholders.syntax import parse_terminators
from .formatting import DEFAULT_PREVIEW_CHARS
from .prompts import build_batch_prompt, build_sequential_prompt
from .response import clean_sequential_reply, parse_resolution
from .substitute import substitute

logger = logging.getLogger(__name__)


class FillStrategy(str, Enum):
    """How placeholders are sent to the model."""

    BATCH = "batch"  # One call resolves every placeholder
    SEQUENTIAL = "sequential"  # One call per placeholder, in order


class FillResult(BaseModel):
    """Result of filling a document's markup."""

    markup: str  # Final markup with values substituted
    placeholders: list[Placeholder] = Field(default_factory=list)
    contexts: list[PlaceholderContext] = Field(default_factory=list)
    resolution: dict[str, str] = Field(default_factory=dict)
    strategy: FillStrategy = FillStrategy.BATCH
    model_calls: int = 0


class DocumentFiller:
    """Fills bracketed placeholders in document markup using an LLM."""

    def __init__(
        self,
        client: Optional[LLMClient],
        strategy: FillStrategy = FillStrategy.BATCH,
        context_builder: Optional[ContextBuilder] = None,
        preview_chars: int = DEFAULT_PREVIEW_CHARS,
    ):
        self.client = client
        self.strategy = FillStrategy(strategy)
        self.extractor = PlaceholderExtractor()
        self.context_builder = context_builder or ContextBuilder()
        self.preview_chars = preview_chars

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        client: Optional[LLMClient] = None,
        offline: bool = False,
    ) -> "DocumentFiller":
        """
        Build a filler from an explicit configuration object.

        Args:
            settings: Configuration to read provider, strategy and context options from
            client: Pre-built LLM client; created from settings when omitted
            offline: Build without an LLM client (only prepare() is usable)
        """
        if client is None and not offline:
            client = create_llm_client(settings)
        return cls(
            client=client,
            strategy=FillStrategy(settings.fill_strategy.lower()),
            context_builder=ContextBuilder(
                window_size=settings.context_window_size,
                terminators=parse_terminators(settings.sentence_terminators),
            ),
            preview_chars=settings.value_preview_chars,
        )

    def prepare(self, markup: str) -> tuple[ExtractionResult, list[PlaceholderContext]]:
        """Extract placeholders and build their contexts. No model call."""
        extraction = self.extractor.extract(markup)
        plain_text = strip_markup(extraction.markup)
        contexts = self.context_builder.build(plain_text, extraction.placeholders)
        return extraction, contexts

    async def resolve(self, contexts: Sequence[PlaceholderContext], value_map: Any) -> dict[str, str]:
        """
        Resolve every placeholder to a value using the configured strategy.

        Args:
            contexts: Placeholder contexts in extraction order
            value_map: Free text or a flat key/value mapping

        Returns:
            Placeholder id -> value, one entry per placeholder

        Raises:
            MalformedResponseError: If a batch reply holds no valid JSON object
        """
        if not contexts:
            return {}
        if self.client is None:
            raise ValueError("DocumentFiller has no LLM client; it was built offline")

        if self.strategy == FillStrategy.BATCH:
            return await self._resolve_batch(contexts, value_map)
        return await self._resolve_sequential(contexts, value_map)

    async def _resolve_batch(
        self, contexts: Sequence[PlaceholderContext], value_map: Any
    ) -> dict[str, str]:
        prompt = build_batch_prompt(contexts, value_map, self.preview_chars)
        logger.info(f"Resolving {len(contexts)} placeholders in one call ({len(prompt)} chars)")

        reply = await self.client.complete(prompt)
        return parse_resolution(reply, [context.placeholder for context in contexts])

    async def _resolve_sequential(
        self, contexts: Sequence[PlaceholderContext], value_map: Any
    ) -> dict[str, str]:
        resolution = {}
        for context in contexts:
            placeholder = context.placeholder
            prompt = build_sequential_prompt(context, value_map, self.preview_chars)
            logger.info(f"Resolving {placeholder.id} ({placeholder.name!r})")

            reply = await self.client.complete(prompt)
            resolution[placeholder.id] = clean_sequential_reply(reply)
        return resolution

    async def fill_markup(self, markup: str, value_map: Any) -> FillResult:
        """Run the full pipeline on a markup string."""
        extraction, contexts = self.prepare(markup)

        if not extraction.placeholders:
            logger.info("No placeholders found; markup left unchanged")
            return FillResult(markup=markup, strategy=self.strategy)

        resolution = await self.resolve(contexts, value_map)
        filled = substitute(extraction.markup, resolution)

        empty = [pid for pid, value in resolution.items() if not value]
        if empty:
            logger.info(f"Placeholders resolved to empty: {', '.join(empty)}")

        return FillResult(
            markup=filled,
            placeholders=extraction.placeholders,
            contexts=contexts,
            resolution=resolution,
            strategy=self.strategy,
            model_calls=1 if self.strategy == FillStrategy.BATCH else len(contexts),
        )

    async def fill_document(
        self,
        container: bytes,
        value_map: Any,
        entry: str = DOCUMENT_ENTRY,
    ) -> bytes:
        """
        Fill a .docx container and return the new container bytes.

        The container is only rewritten once every placeholder is resolved.
        """
        markup = read_entry(container, entry)
        result = await self.fill_markup(markup, value_map)
        return write_entry(container, entry, result.markup)


async def fill_docx(
    template: bytes,
    value_map: Any,
    settings: Optional[Settings] = None,
    client: Optional[LLMClient] = None,
) -> bytes:
    """
    Fill a .docx template with values chosen by the configured LLM.

    Args:
        template: Raw bytes of the .docx template
        value_map: Free text or a flat key/value mapping
        settings: Configuration (defaults to the environment-derived settings)
        client: Optional pre-built LLM client (overrides the configured provider)

    Returns:
        Raw bytes of the filled document
    """
    if settings is None:
        from ..config import settings as default_settings

        settings = default_settings

    filler = DocumentFiller.from_settings(settings, client=client)
    try:
        return await filler.fill_document(template, value_map, entry=settings.document_entry)
    finally:
        if client is None:
            await filler.client.close()
