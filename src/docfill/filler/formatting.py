"""Serialization of placeholder contexts and value maps for prompts."""

import json
from typing import Any, Iterable, Union

from ..placeholders import PlaceholderContext

ValueMap = Union[str, dict[str, Any]]

EMPTY_DATA = "(empty)"
DEFAULT_PREVIEW_CHARS = 60


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False, default=str)


def render_value_map(value_map: Any, preview_chars: int = DEFAULT_PREVIEW_CHARS) -> str:
    """
    Render caller data for a prompt.

    Free text is passed through trimmed. A flat mapping becomes one
    "- key: value" line per entry with each value truncated to
    preview_chars. Blank text, an empty mapping or any other type renders
    as "(empty)".
    """
    if isinstance(value_map, str):
        return value_map.strip() or EMPTY_DATA

    if isinstance(value_map, dict) and value_map:
        return "\n".join(
            f"- {key}: {_stringify(value)[:preview_chars]}" for key, value in value_map.items()
        )

    return EMPTY_DATA


def render_placeholder_block(context: PlaceholderContext) -> str:
    """Render one placeholder with its sentence and context window."""
    placeholder = context.placeholder
    return (
        f"- id: {placeholder.id}\n"
        f"  marker: {placeholder.marker}\n"
        f"  name: {placeholder.name}\n"
        f'  sentence: "{context.sentence}"\n'
        f'  context: "{context.context_window}"'
    )


def render_placeholder_blocks(contexts: Iterable[PlaceholderContext]) -> str:
    return "\n\n".join(render_placeholder_block(context) for context in contexts)
