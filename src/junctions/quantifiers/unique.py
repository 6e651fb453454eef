"""
One-junctions: collapse to true if exactly one distinct element satisfies
the comparison. An empty One-junction is false for every operator and value.

With a sorted store, (one(1, 2, 3) > n) needs only (3 > n and not 2 > n):
the likeliest element passes and its neighbour does not. Against a
None-junction the ends swap, as they do for All and Any.

Against another One-junction nothing is monotonic, so every element is
tried and counted.
"""

from typing import Any

from junctions.junction import Junction, JunctionType
from junctions.operators import ComparisonOperator
from junctions.reverse import compare


_NO_MATCH = object()


class OneJunction(Junction):
    """
    Quantifier: exactly one distinct element.

    Duplicates in a borrowed collection count once, so the answer does not
    depend on the store:

        one_ref([2, 2, 5]) < 3    ->  True
        one_copy([2, 2, 5]) < 3   ->  True

    Examples:
        one_of(2, 5, 98, 4) < 3       ->  True   (only 2)
        one_of(1, 4, 2, 8, 5, 7) > 3  ->  False  (four elements)
        one_of(1, 4, 2, 8, 5, 7) == 3 ->  False  (no elements)
    """

    junction_type = JunctionType.ONE

    def collapse(self, op: ComparisonOperator, other: Any) -> bool:
        if not self._can_shortcut(op, other):
            return self._exactly_one(op, other)

        store = self._store
        if store.is_empty():
            return False

        if self._low_end_passes_first(op, other):
            likeliest, runner_up = store.first, store.second
        else:
            likeliest, runner_up = store.last, store.penultimate

        if not compare(likeliest(), op, other):
            return False
        return not (store.has_second() and compare(runner_up(), op, other))

    def _exactly_one(self, op: ComparisonOperator, other: Any) -> bool:
        """Full scan; stops at the second distinct match."""
        matched = _NO_MATCH
        for elem in self._store:
            if not compare(elem, op, other):
                continue
            if matched is _NO_MATCH:
                matched = elem
            elif not elem == matched:
                return False
        return matched is not _NO_MATCH
