"""
Tests for the comparison operator enum.

These tests verify:
    - Symbols and lookup
    - The reverse-dispatch flip table
    - Ordering vs equality classification
    - Evaluation through Python's operator protocol
"""

import pytest
from junctions.operators import ComparisonOperator


class TestSymbols:
    """Test operator symbols and lookup."""

    def test_six_operators(self):
        """There are exactly six relational operators."""
        assert len(ComparisonOperator) == 6

    def test_symbol_is_value(self):
        """Each operator's symbol is its Python spelling."""
        assert ComparisonOperator.LESS_EQUAL.symbol == "<="
        assert ComparisonOperator.NOT_EQUALS.symbol == "!="

    def test_from_symbol(self):
        """Operators can be looked up by symbol."""
        assert ComparisonOperator.from_symbol(">") is ComparisonOperator.GREATER_THAN
        assert ComparisonOperator.from_symbol(" == ") is ComparisonOperator.EQUALS

    def test_unknown_symbol_rejected(self):
        """Unknown symbols raise ValueError."""
        with pytest.raises(ValueError, match="Unknown comparison operator"):
            ComparisonOperator.from_symbol("<>")


class TestFlip:
    """Test the flip table used for reverse dispatch."""

    @pytest.mark.parametrize("op,flipped", [
        (ComparisonOperator.LESS_THAN, ComparisonOperator.GREATER_THAN),
        (ComparisonOperator.LESS_EQUAL, ComparisonOperator.GREATER_EQUAL),
        (ComparisonOperator.EQUALS, ComparisonOperator.EQUALS),
        (ComparisonOperator.NOT_EQUALS, ComparisonOperator.NOT_EQUALS),
        (ComparisonOperator.GREATER_EQUAL, ComparisonOperator.LESS_EQUAL),
        (ComparisonOperator.GREATER_THAN, ComparisonOperator.LESS_THAN),
    ])
    def test_flip(self, op, flipped):
        """< and > swap, <= and >= swap, == and != stay."""
        assert op.flipped is flipped

    def test_flip_is_involution(self):
        """Flipping twice gives the original operator."""
        for op in ComparisonOperator:
            assert op.flipped.flipped is op

    def test_flip_swaps_operands(self):
        """(a OP b) == (b FLIP(OP) a) for plain numbers."""
        for op in ComparisonOperator:
            for a in range(3):
                for b in range(3):
                    assert op.apply(a, b) == op.flipped.apply(b, a)


class TestClassification:
    """Test ordering/equality classification."""

    def test_equality_operators_are_not_orderings(self):
        """== and != have no monotonic shortcut."""
        assert not ComparisonOperator.EQUALS.is_ordering
        assert not ComparisonOperator.NOT_EQUALS.is_ordering

    def test_orderings(self):
        """<, <=, >=, > are orderings."""
        orderings = [op for op in ComparisonOperator if op.is_ordering]
        assert len(orderings) == 4

    def test_favours_low(self):
        """Only < and <= favour small left operands."""
        assert ComparisonOperator.LESS_THAN.favours_low
        assert ComparisonOperator.LESS_EQUAL.favours_low
        assert not ComparisonOperator.GREATER_THAN.favours_low
        assert not ComparisonOperator.GREATER_EQUAL.favours_low


class TestApply:
    """Test evaluation of operators."""

    def test_apply_numbers(self):
        assert ComparisonOperator.LESS_THAN.apply(1, 2) is True
        assert ComparisonOperator.GREATER_EQUAL.apply(1, 2) is False

    def test_apply_strings(self):
        """Strings compare lexicographically."""
        assert ComparisonOperator.GREATER_THAN.apply("Jill", "Catherine")

    def test_apply_propagates_type_errors(self):
        """Incomparable operands raise, they are not swallowed."""
        with pytest.raises(TypeError):
            ComparisonOperator.LESS_THAN.apply("a", 1)
