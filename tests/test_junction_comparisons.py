"""
Tests for junction-vs-junction comparisons.

(P(A) OP Q(B)) applies P's quantifier to (a OP Q(B)) for each a, and each
(a OP Q(B)) applies Q's quantifier to (a OP b). These tests check every
quantifier pair, operator and store combination against an explicit
double loop, so every shortcut path is exercised.
"""

import pytest
from junctions import (
    JunctionType,
    all_of,
    any_of,
    none_of,
    one_of,
)

from quantify_helpers import ELEMENT_LISTS, OPERATORS, VARIANTS, build, expected_between


PAIRS = [(left, right) for left in VARIANTS for right in VARIANTS]


class TestWorkedExamples:
    """Hand-checked junction comparisons."""

    def test_any_greater_than_any(self):
        """Some a exceeds some b."""
        assert any_of(1, 5) > any_of(4, 9)
        assert not (any_of(1, 2) > any_of(4, 9))

    def test_all_equal_to_one(self):
        """Each a equals exactly one b."""
        assert all_of(1, 2) == one_of(1, 2, 3)
        assert not (all_of(1, 4) == one_of(1, 2, 3))

    def test_any_greater_than_none(self):
        """Some a is greater than none of the b."""
        assert any_of(2, 3, 4) > none_of(4, 5, 6)
        assert not (any_of(2, 3, 4) > none_of(1, 2, 3))

    def test_all_less_than_none(self):
        """Each a is less than none of the b: every b <= a."""
        assert all_of(3, 4) < none_of(1, 2, 3)
        assert not (all_of(2, 4) < none_of(1, 2, 3))

    def test_none_equal_to_none(self):
        """none(A) == none(B) holds when every a matches some b."""
        assert none_of(1, 2) == none_of(2, 1, 0)
        assert not (none_of(1, 5) == none_of(2, 1, 0))

    def test_one_against_one(self):
        """Exactly one a has exactly one smaller b."""
        assert one_of(1, 2, 5) > one_of(1, 3)
        assert not (one_of(2, 3, 5) > one_of(1, 3))

    def test_empty_right_hand_junctions(self):
        assert all_of(1, 2) < all_of()
        assert not (any_of(1, 2) < any_of())
        assert all_of(1, 2) < none_of()
        assert not (all_of(1, 2) == one_of())

    def test_chained_comparison(self):
        """Python chains (1 < J < 3) as (1 < J) and (J < 3)."""
        assert 1 < any_of(2, 5) < 3
        assert not (1 < all_of(2, 5) < 3)


class TestDoubleQuantification:
    """Compare every pair against an explicit double loop."""

    @pytest.mark.parametrize("left_type,right_type", PAIRS)
    @pytest.mark.parametrize("left_storage,right_storage", [
        ("copy", "copy"),
        ("copy", "ref"),
        ("ref", "copy"),
        ("ref", "ref"),
    ])
    def test_pairs(self, left_type, right_type, left_storage, right_storage):
        for left in ELEMENT_LISTS:
            j = build(left_type, left, left_storage)
            for right in ELEMENT_LISTS:
                k = build(right_type, right, right_storage)
                for op in OPERATORS:
                    wanted = expected_between(left_type, left, op, right_type, right)
                    assert op.apply(j, k) is wanted, (j, op.symbol, k)

    @pytest.mark.parametrize("left_type,right_type", PAIRS)
    def test_stores_agree(self, left_type, right_type):
        """Sorted and borrowed stores give identical answers."""
        for left in ELEMENT_LISTS:
            for right in ELEMENT_LISTS:
                k = build(right_type, right, "copy")
                sorted_j = build(left_type, left, "sorted")
                borrowed_j = build(left_type, left, "ref")
                for op in OPERATORS:
                    assert op.apply(sorted_j, k) == op.apply(borrowed_j, k)

    def test_right_hand_one_junction_is_not_shortcut(self):
        """Against a One-junction every element is tried."""
        j = all_of(1, 2, 3)
        k = one_of(2, 4)
        # 1 < exactly one of (2, 4)? no: both. 3 < exactly one? yes: 4.
        assert not (j < k)
        assert (any_of(1, 2, 3) < k) is True
        assert (one_of(1, 3) < k) is True
        assert (one_of(1, 2, 3) < k) is False
        assert JunctionType.ONE is k.junction_type
