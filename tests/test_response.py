"""Tests for model reply parsing."""

import pytest

from docfill.filler.response import (
    MalformedResponseError,
    clean_sequential_reply,
    extract_json_object,
    parse_resolution,
)
from docfill.placeholders import Placeholder


@pytest.fixture
def placeholders():
    """Three known placeholders."""
    return [Placeholder(id=f"PH_{i}", raw=f"p{i}", name=f"p{i}") for i in (1, 2, 3)]


class TestExtractJsonObject:
    """Test locating the first top-level object."""

    def test_object_surrounded_by_prose(self):
        """Test prose before and after the object is ignored."""
        reply = 'Sure! Here you go:\n{"PH_1": "a"}\nLet me know.'
        assert extract_json_object(reply) == '{"PH_1": "a"}'

    def test_nested_object(self):
        """Test nesting depth is tracked."""
        reply = 'x {"a": {"b": {}}, "c": "d"} {"second": 1}'
        assert extract_json_object(reply) == '{"a": {"b": {}}, "c": "d"}'

    def test_braces_inside_strings(self):
        """Test braces inside string values do not end the object."""
        reply = '{"PH_1": "a } b", "PH_2": "{x\\"}"}'
        assert extract_json_object(reply) == reply

    def test_fenced_code_block(self):
        """Test an object inside a markdown fence is found."""
        reply = '```json\n{"PH_1": "a"}\n```'
        assert extract_json_object(reply) == '{"PH_1": "a"}'

    def test_no_opening_brace(self):
        """Test a reply without { fails."""
        with pytest.raises(MalformedResponseError) as exc_info:
            extract_json_object("I could not find anything.")
        assert exc_info.value.reply == "I could not find anything."

    def test_unterminated_object(self):
        """Test an object that never closes fails."""
        with pytest.raises(MalformedResponseError):
            extract_json_object('{"PH_1": {"a": 1}')


class TestParseResolution:
    """Test mapping replies back to placeholder ids."""

    def test_complete_reply(self, placeholders):
        """Test all values are taken from the reply."""
        reply = '{"PH_1": "a", "PH_2": "b", "PH_3": "c"}'
        assert parse_resolution(reply, placeholders) == {"PH_1": "a", "PH_2": "b", "PH_3": "c"}

    def test_missing_keys_default_to_empty(self, placeholders):
        """Test a partial reply still yields one entry per placeholder."""
        resolution = parse_resolution('{"PH_2": "b"}', placeholders)

        assert len(resolution) == 3
        assert resolution == {"PH_1": "", "PH_2": "b", "PH_3": ""}

    def test_non_string_values_default_to_empty(self, placeholders):
        """Test numbers, nulls and objects become empty strings."""
        reply = '{"PH_1": 5, "PH_2": null, "PH_3": {"x": "y"}}'
        assert parse_resolution(reply, placeholders) == {"PH_1": "", "PH_2": "", "PH_3": ""}

    def test_unknown_keys_ignored(self, placeholders):
        """Test extra keys never appear in the result."""
        reply = '{"PH_1": "a", "PH_99": "zz", "note": "hi"}'
        resolution = parse_resolution(reply, placeholders)

        assert set(resolution) == {"PH_1", "PH_2", "PH_3"}

    def test_empty_string_kept(self, placeholders):
        """Test an explicit empty string is kept as is."""
        assert parse_resolution('{"PH_1": ""}', placeholders)["PH_1"] == ""

    def test_invalid_json(self, placeholders):
        """Test a balanced but invalid object fails with the raw reply."""
        reply = "{PH_1: 'a'}"
        with pytest.raises(MalformedResponseError) as exc_info:
            parse_resolution(reply, placeholders)
        assert exc_info.value.reply == reply

    def test_no_placeholders(self):
        """Test an empty placeholder list yields an empty result."""
        assert parse_resolution('{"PH_1": "a"}', []) == {}


class TestCleanSequentialReply:
    """Test bare-text reply cleanup."""

    def test_trims_whitespace(self):
        """Test surrounding whitespace is removed."""
        assert clean_sequential_reply("  Acme Corp \n") == "Acme Corp"

    def test_strips_wrapping_quotes(self):
        """Test one pair of wrapping quotes is removed."""
        assert clean_sequential_reply('"Acme Corp"') == "Acme Corp"
        assert clean_sequential_reply("`Acme`") == "Acme"

    def test_keeps_inner_quotes(self):
        """Test quotes that do not wrap the whole reply are kept."""
        assert clean_sequential_reply('The "Acme" group') == 'The "Acme" group'

    def test_keeps_separately_quoted_parts(self):
        """Test a reply made of several quoted parts is only trimmed."""
        assert clean_sequential_reply('  "Acme" "Corp" ') == '"Acme" "Corp"'
        assert clean_sequential_reply("'a' and 'b'") == "'a' and 'b'"

    def test_empty_reply(self):
        """Test an empty reply stays empty."""
        assert clean_sequential_reply("") == ""
        assert clean_sequential_reply('""') == ""
