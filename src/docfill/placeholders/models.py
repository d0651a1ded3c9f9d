"""Data models for placeholder extraction."""

from pydantic import BaseModel, ConfigDict, Field

from .syntax import format_marker


class Placeholder(BaseModel):
    """Represents one bracketed token found in the document markup."""

    model_config = ConfigDict(frozen=True)

    id: str  # Synthetic identifier (e.g., "PH_1")
    raw: str  # Original bracket contents, possibly spanning markup tags
    name: str  # raw with tags stripped, shown to the model
    start: int = 0  # Offset of the original token in the source markup

    @property
    def marker(self) -> str:
        """Bracketed identifier injected into the markup in place of the token."""
        return format_marker(self.id)


class PlaceholderContext(BaseModel):
    """Sentence and surrounding text for a placeholder."""

    model_config = ConfigDict(frozen=True)

    placeholder: Placeholder
    sentence: str = ""
    context_window: str = ""


class ExtractionResult(BaseModel):
    """Result of extracting placeholders from markup."""

    markup: str  # Markup with every placeholder rewritten as its marker
    placeholders: list[Placeholder] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)  # Nested bracket diagnostics
