"""
Junction Core

A junction wraps a store of elements and a quantifier, and redefines the
six relational operators so that (junction OP value) collapses the
element-wise comparisons into one boolean.

This module defines:
    - JunctionType: the closed set of quantifiers
    - Junction: the abstract core every quantifier variant builds on
    - is_junction: recognition of variants for generic dispatch
    - describe: read-only diagnostics

ARCHITECTURAL RULE:
    Junction itself is never instantiated and is never recognized as a
    junction. Only the four quantifier variants are.

    Variants must stay siblings. If one variant subclassed another,
    Python would try the subclass's reflected operator first and a
    junction-vs-junction comparison would quantify in the wrong order.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from itertools import islice
from typing import Any, Callable, ClassVar, Iterable, Iterator, Optional, Sequence

from junctions.operators import ComparisonOperator
from junctions.storage import BorrowedStore, SortedStore, Store


class JunctionType(Enum):
    """Quantifier tags, in the conventional order none, one, any, all."""

    NONE = "none"
    ONE = "one"
    ANY = "any"
    ALL = "all"


def junction_type_of(value: Any) -> Optional[JunctionType]:
    """Quantifier tag of a junction instance or class, or None for anything else."""
    cls = value if isinstance(value, type) else type(value)
    if not issubclass(cls, Junction):
        return None
    return cls.junction_type


def is_junction(value: Any) -> bool:
    """
    True if value (an instance or a class) is a quantifier variant.

    Works regardless of element type or store kind. The abstract bases
    carry no quantifier tag and are not junctions.
    """
    return junction_type_of(value) is not None


def _copy_store(values: Iterable[Any]) -> SortedStore:
    # Inputs already known to be sorted and unique skip the sort.
    if isinstance(values, range) and values.step > 0:
        return SortedStore.adopt(values)
    if isinstance(values, Junction) and values.is_ordered:
        return SortedStore.adopt(values.elements)
    return SortedStore(values)


class Junction(ABC):
    """
    Abstract base of every quantifier variant.

    Holds exactly one Store and never mutates it.

    Construction paths (classmethods, inherited by every variant):
        of(*elements)                 copy a literal element list
        copy(values)                  copy any iterable
        borrow(collection)            reference a caller-owned collection
        from_range(values, start, stop)
                                      copy positions [start, stop)
        from_sorted(values)           adopt a sorted, deduplicated sequence

    Copying sorts and deduplicates, enabling boundary-only shortcuts.
    Borrowing is O(1) but forgoes them, and the junction follows later
    changes to the borrowed collection.
    """

    junction_type: ClassVar[Optional[JunctionType]] = None

    # Array libraries return NotImplemented, so Python falls back to our
    # reflected comparison.
    __array_ufunc__ = None

    def __init__(self, store: Store):
        if not isinstance(store, Store):
            raise TypeError(f"Junction needs a Store, got {type(store).__name__}")
        self._store = store

    @classmethod
    def of(cls, *elements: Any) -> Junction:
        return cls(SortedStore(elements))

    @classmethod
    def copy(cls, values: Iterable[Any]) -> Junction:
        return cls(_copy_store(values))

    @classmethod
    def borrow(cls, collection: Any) -> Junction:
        # Sorted stores are immutable and can be shared; a borrowing junction
        # is re-pointed at the collection it borrows.
        if isinstance(collection, Junction):
            if collection.is_ordered:
                return cls(collection.store)
            collection = collection.elements
        return cls(BorrowedStore(collection))

    @classmethod
    def from_range(cls, values: Iterable[Any], start: int, stop: Optional[int]) -> Junction:
        return cls(SortedStore(islice(values, start, stop)))

    @classmethod
    def from_sorted(cls, values: Sequence[Any]) -> Junction:
        return cls(SortedStore.adopt(values))

    @property
    def store(self) -> Store:
        return self._store

    @property
    def elements(self) -> Iterable[Any]:
        return self._store.elements

    @property
    def is_ordered(self) -> bool:
        return self._store.ordered

    def is_empty(self) -> bool:
        return self._store.is_empty()

    def size(self) -> int:
        return self._store.size()

    def __iter__(self) -> Iterator[Any]:
        return iter(self._store)

    def map(self, transform: Callable[[Any], Any]) -> Junction:
        """
        Apply transform to every element, giving a new junction of the same type.

        The result always owns a fresh sorted, deduplicated store, whatever
        the source store was. The element type may change.

        Example:
            all_of("Fred", "Jim", "Sheila").map(len)  ->  all(3, 4, 6)
        """
        return type(self)(SortedStore(transform(elem) for elem in self._store))

    __call__ = map

    @abstractmethod
    def collapse(self, op: ComparisonOperator, other: Any) -> bool:
        """Evaluate (self OP other) under this junction's quantifier."""
        ...

    # Each operator is quantified independently; none is derived from another.

    def __lt__(self, other: Any) -> bool:
        return self.collapse(ComparisonOperator.LESS_THAN, other)

    def __le__(self, other: Any) -> bool:
        return self.collapse(ComparisonOperator.LESS_EQUAL, other)

    def __eq__(self, other: Any) -> bool:
        return self.collapse(ComparisonOperator.EQUALS, other)

    def __ne__(self, other: Any) -> bool:
        return self.collapse(ComparisonOperator.NOT_EQUALS, other)

    def __ge__(self, other: Any) -> bool:
        return self.collapse(ComparisonOperator.GREATER_EQUAL, other)

    def __gt__(self, other: Any) -> bool:
        return self.collapse(ComparisonOperator.GREATER_THAN, other)

    __hash__ = None

    def _can_shortcut(self, op: ComparisonOperator, other: Any) -> bool:
        """
        True if only boundary elements need inspecting.

        Needs a sorted store and an ordering operator. A One-junction on the
        right is not monotonic in our elements, so it always needs a scan.
        """
        return (
            self._store.ordered
            and op.is_ordering
            and junction_type_of(other) is not JunctionType.ONE
        )

    @staticmethod
    def _low_end_passes_first(op: ComparisonOperator, other: Any) -> bool:
        """
        True if smaller elements are more likely to satisfy (elem OP other).

        (e < v) favours small e. Against a None-junction it is reversed:
        (e < none(K)) means every k <= e, which favours large e.
        """
        return op.favours_low != (junction_type_of(other) is JunctionType.NONE)

    def __repr__(self) -> str:
        name = self.junction_type.value if self.junction_type else type(self).__name__
        if isinstance(self._store, BorrowedStore):
            return f"{name}_ref({self._store.elements!r})"
        return f"{name}({', '.join(repr(elem) for elem in self._store)})"


@dataclass(frozen=True)
class JunctionInfo:
    """
    Read-only summary of a junction.

    Properties:
        junction_type: Quantifier tag
        ordered: True if backed by a sorted, deduplicated store
        size: Element count (raw length for borrowed stores)
        storage: Store kind, "sorted" or "borrowed"
    """

    junction_type: JunctionType
    ordered: bool
    size: int
    storage: str


def describe(junction: Junction) -> JunctionInfo:
    """
    Summarize a junction for display.

    Raises:
        TypeError: If the value is not a junction
    """
    if not (isinstance(junction, Junction) and is_junction(junction)):
        raise TypeError(f"Not a junction: {type(junction).__name__}")
    return JunctionInfo(
        junction_type=junction.junction_type,
        ordered=junction.is_ordered,
        size=junction.size(),
        storage=junction.store.kind,
    )
