"""Tests for the config module."""

from docfill.config import Settings


class TestSettings:
    """Test Settings configuration."""

    def test_explicit_values(self, test_settings):
        """Test Settings built from explicit parameters."""
        assert test_settings.llm_provider == "primary"
        assert test_settings.anthropic_api_key == "test-key-123"
        assert test_settings.fill_strategy == "batch"
        assert test_settings.context_window_size == 200
        assert test_settings.value_preview_chars == 60
        assert test_settings.document_entry == "word/document.xml"

    def test_type_coercion(self):
        """Test string inputs are coerced to the declared types."""
        settings = Settings(context_window_size="150", llm_timeout_seconds="2.5", max_tokens="10")

        assert settings.context_window_size == 150
        assert settings.llm_timeout_seconds == 2.5
        assert settings.max_tokens == 10

    def test_model_copy_overrides(self, test_settings):
        """Test overrides produce a new object and leave the original unchanged."""
        updated = test_settings.model_copy(update={"llm_provider": "enterprise"})

        assert updated.llm_provider == "enterprise"
        assert test_settings.llm_provider == "primary"

    def test_terminators_default_includes_ideographic_stop(self):
        """Test the default terminator set covers both scripts."""
        settings = Settings(sentence_terminators=".。")
        assert "." in settings.sentence_terminators
        assert "。" in settings.sentence_terminators
