"""Unit tests for line parsing."""

import pytest

from zettel.errors import EmptyLineError, MissingNameError, ParseError
from zettel.normalize.lines import RawEntry, parse_line, parse_lines
from zettel.normalize.units import ONE, Amount


class TestParseLine:
    """Tests for parse_line function."""

    def test_amount_and_name(self):
        """Test a line with a leading amount."""
        entry = parse_line("500g Zucker")
        assert entry == RawEntry(name="Zucker", amount=Amount.grams(500))

    def test_name_only(self):
        """Test a line without a parseable amount."""
        entry = parse_line("abc")
        assert entry.name == "abc"
        assert entry.amount is None
        assert entry.effective_amount == ONE

    def test_multi_word_name(self):
        """Test that the whole remainder is the name."""
        entry = parse_line("2 rote Zwiebeln")
        assert entry.name == "rote Zwiebeln"
        assert entry.amount == Amount.count(2)

    def test_name_starting_with_non_amount(self):
        """Test a multi-word line whose first word is not an amount."""
        entry = parse_line("Olivenöl extra vergine")
        assert entry.name == "Olivenöl extra vergine"
        assert entry.amount is None

    def test_surrounding_whitespace(self):
        """Test that leading and trailing whitespace is trimmed."""
        entry = parse_line("   1l\tMilch  \n")
        assert entry == RawEntry(name="Milch", amount=Amount.millis(1000))

    def test_name_keeps_case(self):
        """Test that names are not case-folded."""
        assert parse_line("milch").name == "milch"
        assert parse_line("Milch").name == "Milch"

    def test_empty_line(self):
        """Test that a blank line raises EmptyLineError."""
        with pytest.raises(EmptyLineError):
            parse_line("")
        with pytest.raises(EmptyLineError):
            parse_line("   \t ")

    def test_amount_without_name(self):
        """Test that a bare amount raises MissingNameError."""
        with pytest.raises(MissingNameError):
            parse_line("500g")
        with pytest.raises(MissingNameError):
            parse_line("  3  ")

    def test_errors_are_parse_errors(self):
        """Test the error hierarchy."""
        assert issubclass(EmptyLineError, ParseError)
        assert issubclass(MissingNameError, ParseError)


class TestParseLines:
    """Tests for parse_lines function."""

    def test_skips_blank_lines(self, sample_text):
        """Test parsing a text with a blank line."""
        entries = parse_lines(sample_text)
        assert [entry.name for entry in entries] == ["Zucker", "Milch", "Eier", "Milch"]
        assert entries[3].amount == Amount.millis(500)

    def test_whitespace_only_lines_are_blank(self):
        """Test that lines with only spaces are skipped."""
        entries = parse_lines("Brot\n   \n\t\nButter\n")
        assert [entry.name for entry in entries] == ["Brot", "Butter"]

    def test_windows_line_endings(self):
        """Test that CRLF input is handled."""
        entries = parse_lines("1 Brot\r\n2 Butter\r\n")
        assert [entry.amount for entry in entries] == [Amount.count(1), Amount.count(2)]

    def test_splits_on_newlines_only(self):
        """Test that other line separator characters stay inside the name."""
        entries = parse_lines("2 Brot\x0cButter\n1 Tee\u2028Kanne\n")
        assert [entry.name for entry in entries] == ["Brot\x0cButter", "Tee\u2028Kanne"]
        assert entries[0].amount == Amount.count(2)

    def test_empty_text(self):
        """Test that an empty text has no entries."""
        assert parse_lines("") == []
        assert parse_lines("\n\n") == []

    def test_error_reports_line_number(self):
        """Test that errors carry the 1-based line number."""
        with pytest.raises(MissingNameError) as exc_info:
            parse_lines("Brot\n\n2kg\nButter")
        assert exc_info.value.line_number == 3
        assert str(exc_info.value).startswith("line 3:")
