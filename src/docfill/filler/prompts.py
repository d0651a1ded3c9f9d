"""Prompts for placeholder resolution."""

from typing import Any, Sequence

from ..placeholders import PlaceholderContext
from .formatting import (
    DEFAULT_PREVIEW_CHARS,
    render_placeholder_blocks,
    render_value_map,
)

# Batch Prompt - every placeholder of the document resolved in one call
BATCH_INSTRUCTIONS = """You are filling placeholders in a Word document with the best matching data.
Each placeholder has been replaced in the text by a marker like [PH_1].

RULES:
1. Resolve each placeholder independently, using only its own sentence and context.
2. Never infer one placeholder's value from another placeholder's value.
3. Prefer values that appear verbatim in the available data.
4. For date-like placeholders, copy a date found in the data exactly as given. Do not reformat it.
5. If nothing in the data fits, use an empty string. Never invent content.

OUTPUT FORMAT:
Reply with a single JSON object mapping every placeholder id to a string value, for example:
{"PH_1": "Acme Corp", "PH_2": ""}
Do not add any other text."""

# Sequential Prompt - one placeholder per call, bare text reply
SEQUENTIAL_INSTRUCTIONS = """Return ONLY the final replacement value for {marker}.
Do not wrap it in quotes, JSON or markdown.
If nothing is appropriate, return an empty string."""


def build_batch_prompt(
    contexts: Sequence[PlaceholderContext],
    value_map: Any,
    preview_chars: int = DEFAULT_PREVIEW_CHARS,
) -> str:
    """Build the single prompt that resolves every placeholder of a document."""
    ids = ", ".join(context.placeholder.id for context in contexts)
    return (
        f"{BATCH_INSTRUCTIONS}\n\n"
        f"PLACEHOLDERS:\n{render_placeholder_blocks(contexts)}\n\n"
        f"AVAILABLE DATA (key: value preview):\n{render_value_map(value_map, preview_chars)}\n\n"
        f"Return a JSON object with exactly these keys: {ids}"
    )


def build_sequential_prompt(
    context: PlaceholderContext,
    value_map: Any,
    preview_chars: int = DEFAULT_PREVIEW_CHARS,
) -> str:
    """Build the prompt that resolves a single placeholder."""
    placeholder = context.placeholder
    return (
        "You are filling placeholders in a Word document with the best matching data.\n\n"
        f"Placeholder name:\n{placeholder.name}\n\n"
        f"Placeholder marker in text:\n{placeholder.marker}\n\n"
        f'Sentence from Word:\n"{context.sentence}"\n\n'
        f"Available data fields (key: value preview):\n{render_value_map(value_map, preview_chars)}\n\n"
        f"{SEQUENTIAL_INSTRUCTIONS.format(marker=placeholder.marker)}"
    )
