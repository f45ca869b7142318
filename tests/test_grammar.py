"""Tests for notation grammars and line classification."""

import pytest

from recipeparse.parse.grammar import (
    COUNT_GRAMMAR,
    DECIMAL_GRAMMAR,
    FRACTION_GRAMMAR,
    classify_notation,
    grammar_for,
)
from recipeparse.schemas import Notation


class TestClassifyNotation:
    """Tests for classify_notation function."""

    @pytest.mark.parametrize(
        "line, expected",
        [
            ("1 cup apples", Notation.FRACTION),
            ("1/2c something", Notation.FRACTION),
            ("1 1/2 cup flour", Notation.FRACTION),
            ("1/2 t. peaches", Notation.FRACTION),
            ("1 c 1/2 t some item", Notation.FRACTION),
            ("1.5 Tbsp ginger ale", Notation.DECIMAL),
            ("1 qt 1.5 c crushed pineapple", Notation.DECIMAL),
            (".5 c milk", Notation.DECIMAL),
            ("2 eggs", Notation.COUNT),
            ("2 eggs, beaten", Notation.COUNT),
        ],
    )
    def test_notations(self, line, expected):
        """Test classification of common lines."""
        assert classify_notation(line) is expected

    def test_fraction_before_decimal(self):
        """Test that fraction wins when both grammars accept a line."""
        line = "1 cup apples"
        assert DECIMAL_GRAMMAR.line_test.match(line)
        assert classify_notation(line) is Notation.FRACTION

    def test_classification_is_stable(self):
        """Test that repeated classification gives the same notation."""
        lines = ["1 cup apples", "1.5 Tbsp ginger ale", "2 eggs", "salt"]
        assert [classify_notation(line) for line in lines] == [
            classify_notation(line) for line in lines
        ]

    @pytest.mark.parametrize(
        "line",
        ["salt to taste", "", "a pinch of salt", "1.23456 c milk", " 1 cup apples"],
    )
    def test_unrecognized_lines(self, line):
        """Test lines that no grammar accepts."""
        assert classify_notation(line) is None

    @pytest.mark.parametrize("line", ["1 cup apples\n", "1.5 Tbsp ginger ale\n", "1 c apples\n\n"])
    def test_trailing_newline_rejected(self, line):
        """Test that a trailing newline fails the measured line tests."""
        assert FRACTION_GRAMMAR.line_test.match(line) is None
        assert DECIMAL_GRAMMAR.line_test.match(line) is None
        assert classify_notation(line) is not Notation.FRACTION
        assert classify_notation(line) is not Notation.DECIMAL

    def test_ascii_digits_only(self):
        """Test that non-ASCII digits are not treated as amounts."""
        assert classify_notation("١ cup flour") is None


class TestGrammarPatterns:
    """Tests for the individual grammar patterns."""

    def test_fraction_span_two_parts(self):
        """Test that the span covers both parts of a measurement."""
        match = FRACTION_GRAMMAR.span.match("1/2c 1/2t something")
        assert match.group(0) == "1/2c 1/2t "

    def test_fraction_span_stops_at_item(self):
        """Test that the span does not consume item text."""
        match = FRACTION_GRAMMAR.span.match("1 cup apples")
        assert match.group(0) == "1 cup "

    def test_fraction_parts_in_order(self):
        """Test splitting a measurement into parts."""
        parts = [m.group(0) for m in FRACTION_GRAMMAR.part.finditer("1 1/2 cup 1 t")]
        assert parts == ["1 1/2 cup ", "1 t"]

    def test_decimal_parts_in_order(self):
        """Test splitting a decimal measurement into parts."""
        parts = [m.group(0) for m in DECIMAL_GRAMMAR.part.finditer("1 qt 1.5 c")]
        assert parts == ["1 qt ", "1.5 c"]

    def test_fraction_amount_mixed_number(self):
        """Test that a mixed number is a single amount."""
        assert FRACTION_GRAMMAR.amount.match("1 1/2 cup").group(0) == "1 1/2"

    def test_decimal_amount_leading_point(self):
        """Test decimal amounts without a leading digit."""
        assert DECIMAL_GRAMMAR.amount.match(".25 c").group(0) == ".25"

    def test_count_span(self):
        """Test the count measurement span."""
        assert COUNT_GRAMMAR.span.match("2 eggs").group(0) == "2 "


class TestGrammarFor:
    """Tests for grammar lookup."""

    def test_lookup(self):
        assert grammar_for(Notation.FRACTION) is FRACTION_GRAMMAR
        assert grammar_for(Notation.DECIMAL) is DECIMAL_GRAMMAR
        assert grammar_for(Notation.COUNT) is COUNT_GRAMMAR

    def test_count_has_no_part_pattern(self):
        assert FRACTION_GRAMMAR.part is not None
        assert DECIMAL_GRAMMAR.part is not None
        assert COUNT_GRAMMAR.part is None
