"""docfill - fill [placeholders] in Word documents with values chosen by an LLM."""

from .filler import DocumentFiller, FillResult, FillStrategy, MalformedResponseError, fill_docx

__version__ = "0.1.0"

__all__ = [
    "DocumentFiller",
    "FillResult",
    "FillStrategy",
    "MalformedResponseError",
    "fill_docx",
]
