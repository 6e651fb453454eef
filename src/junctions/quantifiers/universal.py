"""
All-junctions: collapse to true if every element satisfies the comparison.

An empty All-junction is vacuously true for every operator and value.

Sorted stores let ordering operators inspect a single element: the one
most likely to fail. In (all(1, 2, 3) > n) that is the 1; if it passes,
the larger elements pass too. Against a None-junction the order is
reversed: in (all(2, 3, 4) > none(K)) the 4 is the likeliest to fail.
"""

from typing import Any

from junctions.junction import Junction, JunctionType
from junctions.operators import ComparisonOperator
from junctions.reverse import compare


class AllJunction(Junction):
    """
    Quantifier: every element.

    Examples:
        all_of(1, 3, 7, 8) < 10   ->  True
        all_of(1, 3, 7, 8) > 2    ->  False   (1 fails)
        all_of(1, 2) == 2         ->  False
        all_of(1, 2) != 2         ->  False
    """

    junction_type = JunctionType.ALL

    def collapse(self, op: ComparisonOperator, other: Any) -> bool:
        if not self._can_shortcut(op, other):
            return all(compare(elem, op, other) for elem in self._store)

        if self._store.is_empty():
            return True

        if self._low_end_passes_first(op, other):
            binding = self._store.last()
        else:
            binding = self._store.first()
        return compare(binding, op, other)
