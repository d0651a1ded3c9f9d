"""Sentence and context-window extraction around placeholder markers."""

import logging
from typing import Iterable, Sequence

from .models import Placeholder, PlaceholderContext
from .syntax import DEFAULT_TERMINATORS, collapse_whitespace

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_SIZE = 200


class ContextBuilder:
    """Derive a sentence and a symmetric context window for each marker."""

    def __init__(
        self,
        window_size: int = DEFAULT_WINDOW_SIZE,
        terminators: Sequence[str] = DEFAULT_TERMINATORS,
    ):
        """
        Initialize the context builder.

        Args:
            window_size: Characters taken on each side of a marker
            terminators: Sentence terminator characters (mixed scripts allowed)
        """
        if window_size < 0:
            raise ValueError("window_size must not be negative")
        self.window_size = window_size
        self.terminators = tuple(terminators)

    def extract_sentence(self, text: str, marker: str) -> str:
        """
        Return the terminator-delimited span of text containing the marker.

        The sentence starts just after the nearest terminator at or before the
        marker (or at the start of text) and ends just after the nearest
        terminator following the marker (or at the end of text).
        """
        idx = text.find(marker)
        if idx == -1:
            return ""

        left = max(text.rfind(t, 0, idx + 1) for t in self.terminators)
        start = left + 1 if left != -1 else 0

        after = idx + len(marker)
        ends = [pos for pos in (text.find(t, after) for t in self.terminators) if pos != -1]
        end = min(ends) + 1 if ends else len(text)

        return text[start:end].strip()

    def extract_window(self, text: str, marker: str) -> str:
        """Return window_size characters either side of the marker, whitespace-collapsed."""
        idx = text.find(marker)
        if idx == -1:
            return ""

        start = max(0, idx - self.window_size)
        end = min(len(text), idx + len(marker) + self.window_size)
        return collapse_whitespace(text[start:end])

    def build_one(self, text: str, placeholder: Placeholder) -> PlaceholderContext:
        marker = placeholder.marker
        if marker not in text:
            logger.warning(f"Marker {marker} not found in plain text")
        return PlaceholderContext(
            placeholder=placeholder,
            sentence=self.extract_sentence(text, marker),
            context_window=self.extract_window(text, marker),
        )

    def build(self, text: str, placeholders: Iterable[Placeholder]) -> list[PlaceholderContext]:
        """
        Build contexts for every placeholder.

        Args:
            text: Plain text that already contains markers, not the original tokens
            placeholders: Placeholders in extraction order

        Returns:
            One PlaceholderContext per placeholder, in the same order
        """
        return [self.build_one(text, placeholder) for placeholder in placeholders]
