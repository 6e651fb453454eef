"""
Reverse-comparison dispatch.

Junctions define (junction OP value). This module supplies (value OP junction)
by evaluating (junction FLIP(OP) value), where FLIP swaps < with > and <= with >=,
and leaves == and != alone.

The rule applies only when exactly one operand is a junction:
    - value OP junction        -> junction FLIP(OP) value
    - junction OP anything     -> the junction's own operator
    - value OP value           -> ordinary comparison

Python reflects rich comparisons itself when the left operand returns
NotImplemented. Element types are not required to do that (some return
False from __eq__ for foreign types), so the quantifiers route every
element-level comparison through compare() instead of trusting the
element's own operator.
"""

from typing import Any

from junctions.junction import Junction, is_junction
from junctions.operators import ComparisonOperator


def reflect(op: ComparisonOperator, value: Any, junction: Junction) -> bool:
    """Evaluate (value OP junction) as (junction FLIP(OP) value)."""
    return junction.collapse(op.flipped, value)


def compare(left: Any, op: ComparisonOperator, right: Any) -> bool:
    """Evaluate (left OP right), dispatching to a junction on either side."""
    if is_junction(right) and not is_junction(left):
        return reflect(op, left, right)
    return bool(op.apply(left, right))
