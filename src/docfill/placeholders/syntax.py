"""Placeholder syntax definitions and text helpers."""

import re
from typing import Pattern

OPEN_BRACKET = "["
CLOSE_BRACKET = "]"

ID_PREFIX = "PH_"

# Any angle-bracket-delimited tag, e.g. <w:t xml:space="preserve">
TAG_PATTERN: Pattern = re.compile(r"<[^>]+>")

WHITESPACE_PATTERN: Pattern = re.compile(r"\s+")

# A numbered marker, e.g. [PH_3]; group 1 is the identifier
MARKER_PATTERN: Pattern = re.compile(r"\[(PH_\d+)\]")

# ASCII period and the ideographic full stop
DEFAULT_TERMINATORS = (".", "。")


def format_id(index: int) -> str:
    """Format the synthetic identifier for the n-th placeholder (1-based)."""
    return f"{ID_PREFIX}{index}"


def format_marker(placeholder_id: str) -> str:
    """Wrap an identifier in brackets, e.g. PH_1 -> [PH_1]."""
    return f"{OPEN_BRACKET}{placeholder_id}{CLOSE_BRACKET}"


def collapse_whitespace(text: str) -> str:
    """Collapse whitespace runs to a single space and trim."""
    return WHITESPACE_PATTERN.sub(" ", text).strip()


def strip_markup(markup: str) -> str:
    """
    Produce a plain-text view of markup.

    Removes every tag, then collapses whitespace (including newlines) and
    trims. Idempotent: stripping already plain text only collapses whitespace.

    Args:
        markup: Markup string (e.g., the contents of word/document.xml)

    Returns:
        Plain text
    """
    return collapse_whitespace(TAG_PATTERN.sub("", markup))


def parse_terminators(value: str) -> tuple[str, ...]:
    """Turn a string of terminator characters into a tuple, ignoring whitespace."""
    terminators = tuple(dict.fromkeys(ch for ch in value if not ch.isspace()))
    return terminators or DEFAULT_TERMINATORS
