"""Placeholder extraction and context building.

This module finds bracketed tokens (like [CompanyName]) in document markup,
rewrites them as numbered markers ([PH_1], [PH_2], ...) and derives the
sentence and surrounding text each marker appears in.
"""

from .models import Placeholder, PlaceholderContext, ExtractionResult
from .parser import PlaceholderExtractor, extract_placeholders
from .context import ContextBuilder, DEFAULT_WINDOW_SIZE
from .syntax import strip_markup, format_marker

__all__ = [
    "Placeholder",
    "PlaceholderContext",
    "ExtractionResult",
    "PlaceholderExtractor",
    "extract_placeholders",
    "ContextBuilder",
    "DEFAULT_WINDOW_SIZE",
    "strip_markup",
    "format_marker",
]
