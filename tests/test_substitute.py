"""Tests for marker substitution."""

import logging

from docfill.filler.substitute import substitute


class TestSubstitute:
    """Test replacing markers with resolved values."""

    def test_replaces_every_marker(self):
        """Test all resolved markers are replaced."""
        markup = "Dear [PH_1], total is [PH_2]."
        result = substitute(markup, {"PH_1": "Acme Corp", "PH_2": "1,200,000 JPY"})

        assert result == "Dear Acme Corp, total is 1,200,000 JPY."
        assert "[PH_1]" not in result
        assert "[PH_2]" not in result

    def test_empty_value_removes_marker(self):
        """Test an empty value leaves no marker behind."""
        assert substitute("a [PH_1] b", {"PH_1": ""}) == "a  b"

    def test_only_first_occurrence_replaced(self):
        """Test a duplicated marker is only replaced once."""
        assert substitute("[PH_1] and [PH_1]", {"PH_1": "x"}) == "x and [PH_1]"

    def test_marker_inside_value_not_substituted(self):
        """Test a value echoing a later marker does not capture its replacement."""
        markup = "Dear [PH_1], total is [PH_2]."
        result = substitute(markup, {"PH_1": "see [PH_2]", "PH_2": "X"})

        assert result == "Dear see [PH_2], total is X."

    def test_duplicate_warning_counts_input_only(self, caplog):
        """Test occurrence warnings reflect the input markup, not inserted values."""
        with caplog.at_level(logging.WARNING, logger="docfill.filler.substitute"):
            substitute("[PH_1] [PH_2]", {"PH_1": "[PH_2]", "PH_2": "y"})

        assert "occurs" not in caplog.text

    def test_similar_ids_not_confused(self):
        """Test PH_1 does not match inside PH_10."""
        markup = "[PH_10] [PH_1]"
        assert substitute(markup, {"PH_1": "one", "PH_10": "ten"}) == "ten one"

    def test_values_are_xml_escaped(self):
        """Test markup-significant characters are escaped."""
        result = substitute("<w:t>[PH_1]</w:t>", {"PH_1": "Smith & Sons <Ltd>"})
        assert result == "<w:t>Smith &amp; Sons &lt;Ltd&gt;</w:t>"

    def test_escape_disabled(self):
        """Test raw insertion when escaping is off."""
        assert substitute("[PH_1]", {"PH_1": "a & b"}, escape=False) == "a & b"

    def test_unknown_marker_skipped(self):
        """Test ids without a marker leave the markup untouched."""
        assert substitute("no markers", {"PH_1": "x"}) == "no markers"
