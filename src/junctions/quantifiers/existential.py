"""
Any- and None-junctions.

An Any-junction collapses to true if at least one element satisfies the
comparison. A None-junction is an inverted Any-junction:

    (none(x, y, z) == 3)  <=>  not (any(x, y, z) == 3)

so both share one search and differ only in whether the answer is negated.

Sorted stores let ordering operators inspect a single element: the one
most likely to pass. In (any(1, 2, 3) > n) that is the 3. Against a
None-junction the order is reversed: in (any(2, 3, 4) > none(K)) the 2 is
the likeliest to pass.

IMPORTANT:
    AnyJunction and NoneJunction are siblings. Neither may subclass the
    other (see junctions.junction).
"""

from typing import Any, ClassVar

from junctions.junction import Junction, JunctionType
from junctions.operators import ComparisonOperator
from junctions.reverse import compare


class _ExistentialJunction(Junction):
    """Shared search for Any and None. Carries no quantifier tag of its own."""

    _inverted: ClassVar[bool] = False

    def collapse(self, op: ComparisonOperator, other: Any) -> bool:
        return self._found(op, other) != self._inverted

    def _found(self, op: ComparisonOperator, other: Any) -> bool:
        """True if some element satisfies (elem OP other)."""
        if not self._can_shortcut(op, other):
            return any(compare(elem, op, other) for elem in self._store)

        if self._store.is_empty():
            return False

        if self._low_end_passes_first(op, other):
            likeliest = self._store.first()
        else:
            likeliest = self._store.last()
        return compare(likeliest, op, other)


class AnyJunction(_ExistentialJunction):
    """
    Quantifier: at least one element.

    An empty Any-junction is false for every operator and value.

    Examples:
        any_of(1, 2) == 2         ->  True
        any_of(1, 2) != 2         ->  True
        3 > any_of(1, 7, 8)       ->  True
    """

    junction_type = JunctionType.ANY


class NoneJunction(_ExistentialJunction):
    """
    Quantifier: no element.

    An empty None-junction is true for every operator and value.

    Examples:
        none_of(1, 4, 2, 8, 5, 7) > 8   ->  True
        none_of(1, 4, 2, 8, 5, 7) == 3  ->  True
    """

    junction_type = JunctionType.NONE
    _inverted = True
