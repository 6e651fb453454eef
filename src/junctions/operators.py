"""
Comparison Operators for Junctions

Every junction comparison is one of six relational operators.
They are represented as an enum, never as strings or bare functions.

This ensures:
    - A single place for the operator flip table
    - Explicit distinction between ordering and equality operators
    - Readable diagnostics

ARCHITECTURAL RULE:
    Junction operators are NOT related by algebraic identities.
    (any(1, 2) == 2) and (any(1, 2) != 2) are both true.
    Never derive one operator from another at the junction level.
"""

import operator
from enum import Enum
from typing import Any, Callable, Dict


class ComparisonOperator(Enum):
    """
    The six relational operators a junction redefines.

    The value of each member is its Python symbol.
    """

    LESS_THAN = "<"
    LESS_EQUAL = "<="
    EQUALS = "=="
    NOT_EQUALS = "!="
    GREATER_EQUAL = ">="
    GREATER_THAN = ">"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def flipped(self) -> "ComparisonOperator":
        """
        The operator that gives the same answer with the operands swapped.

        (v < j) is evaluated as (j > v), (v <= j) as (j >= v).
        Equality operators flip to themselves.
        """
        return _FLIPPED[self]

    @property
    def is_ordering(self) -> bool:
        """True for <, <=, >=, >; False for == and !=."""
        return self not in (ComparisonOperator.EQUALS, ComparisonOperator.NOT_EQUALS)

    @property
    def favours_low(self) -> bool:
        """
        True if smaller left operands are more likely to satisfy the operator.

        Only meaningful for ordering operators.
        """
        return self in (ComparisonOperator.LESS_THAN, ComparisonOperator.LESS_EQUAL)

    def apply(self, left: Any, right: Any) -> Any:
        """Evaluate (left OP right) with Python's own operator protocol."""
        return _FUNCTIONS[self](left, right)

    @classmethod
    def from_symbol(cls, symbol: str) -> "ComparisonOperator":
        """
        Look up an operator by its symbol.

        Raises:
            ValueError: If the symbol is not one of the six operators
        """
        try:
            return cls(symbol.strip())
        except ValueError:
            raise ValueError(f"Unknown comparison operator: {symbol!r}") from None


_FLIPPED: Dict[ComparisonOperator, ComparisonOperator] = {
    ComparisonOperator.LESS_THAN: ComparisonOperator.GREATER_THAN,
    ComparisonOperator.LESS_EQUAL: ComparisonOperator.GREATER_EQUAL,
    ComparisonOperator.EQUALS: ComparisonOperator.EQUALS,
    ComparisonOperator.NOT_EQUALS: ComparisonOperator.NOT_EQUALS,
    ComparisonOperator.GREATER_EQUAL: ComparisonOperator.LESS_EQUAL,
    ComparisonOperator.GREATER_THAN: ComparisonOperator.LESS_THAN,
}

_FUNCTIONS: Dict[ComparisonOperator, Callable[[Any, Any], Any]] = {
    ComparisonOperator.LESS_THAN: operator.lt,
    ComparisonOperator.LESS_EQUAL: operator.le,
    ComparisonOperator.EQUALS: operator.eq,
    ComparisonOperator.NOT_EQUALS: operator.ne,
    ComparisonOperator.GREATER_EQUAL: operator.ge,
    ComparisonOperator.GREATER_THAN: operator.gt,
}
