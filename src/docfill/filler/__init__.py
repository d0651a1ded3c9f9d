"""LLM-driven placeholder filling."""

from .orchestrator import DocumentFiller, FillResult, FillStrategy, fill_docx
from .prompts import build_batch_prompt, build_sequential_prompt
from .formatting import render_value_map, EMPTY_DATA
from .response import (
    MalformedResponseError,
    clean_sequential_reply,
    extract_json_object,
    parse_resolution,
)
from .substitute import substitute

__all__ = [
    "DocumentFiller",
    "FillResult",
    "FillStrategy",
    "fill_docx",
    "build_batch_prompt",
    "build_sequential_prompt",
    "render_value_map",
    "EMPTY_DATA",
    "MalformedResponseError",
    "clean_sequential_reply",
    "extract_json_object",
    "parse_resolution",
    "substitute",
]
