"""Parser for extracting bracketed placeholders from document markup."""

import logging

from .models import ExtractionResult, Placeholder
from .syntax import (
    CLOSE_BRACKET,
    OPEN_BRACKET,
    format_id,
    strip_markup,
)

logger = logging.getLogger(__name__)


class PlaceholderExtractor:
    """Find bracketed tokens and rewrite them as numbered markers."""

    def extract(self, markup: str) -> ExtractionResult:
        """
        Extract all placeholders from markup.

        Scans left to right tracking whether a bracket is open. A span is an
        opening bracket, one or more non-bracket characters and a closing
        bracket. Nested brackets are not supported: when a second opening
        bracket appears inside an open span, the outer bracket is kept as
        literal text, a warning is recorded and the scan restarts at the inner
        bracket. Empty brackets and stray closing brackets are literal text.

        Args:
            markup: The markup to scan

        Returns:
            ExtractionResult with rewritten markup, placeholders in order of
            first appearance, and any nesting warnings
        """
        placeholders: list[Placeholder] = []
        warnings: list[str] = []
        parts: list[str] = []

        copied_to = 0  # markup[:copied_to] has been emitted to parts
        open_at = -1  # index of the currently open bracket, or -1

        for index, char in enumerate(markup):
            if char == OPEN_BRACKET:
                if open_at != -1:
                    message = (
                        f"Nested bracket at offset {index} inside span opened at "
                        f"offset {open_at}; outer bracket left as text"
                    )
                    logger.warning(message)
                    warnings.append(message)
                open_at = index
            elif char == CLOSE_BRACKET and open_at != -1:
                raw = markup[open_at + 1 : index]
                if raw:
                    placeholder = Placeholder(
                        id=format_id(len(placeholders) + 1),
                        raw=raw,
                        name=strip_markup(raw),
                        start=open_at,
                    )
                    placeholders.append(placeholder)
                    parts.append(markup[copied_to:open_at])
                    parts.append(placeholder.marker)
                    copied_to = index + 1
                    logger.debug(f"Found placeholder: {placeholder.id} ({placeholder.name!r})")
                open_at = -1

        if open_at != -1:
            message = f"Unclosed bracket at offset {open_at}; left as text"
            logger.warning(message)
            warnings.append(message)

        parts.append(markup[copied_to:])

        logger.info(f"Extracted {len(placeholders)} placeholders")
        return ExtractionResult(
            markup="".join(parts),
            placeholders=placeholders,
            warnings=warnings,
        )


def extract_placeholders(markup: str) -> ExtractionResult:
    """Module-level shortcut for PlaceholderExtractor().extract()."""
    return PlaceholderExtractor().extract(markup)
