"""
Element Storage for Junctions

A junction never holds its elements directly. It delegates to one of two
interchangeable stores that share a single capability contract:

    SortedStore:
        Owns a private, deduplicated, ascending tuple of elements.
        ordered = True. Enables boundary-only comparison shortcuts.

    BorrowedStore:
        Holds a reference to a collection the caller owns.
        ordered = False. Never copies, never sorts, never deduplicates.

ARCHITECTURAL RULE:
    Boundary accessors (first, second, penultimate, last) exist only on
    ordered stores. Calling them on an empty store, or asking for
    second/penultimate with fewer than two elements, is a caller bug.
    It is reported with `assert`, not with a recoverable exception.

LIFETIME CONTRACT:
    A BorrowedStore sees every later change to the borrowed collection.
    That is reference semantics, not a bug. Mutating the collection from
    another thread during a comparison is a data race; no locking is done.
"""

from abc import ABC, abstractmethod
from collections.abc import Collection
from itertools import groupby
from typing import Any, ClassVar, Iterable, Iterator, Sequence, Tuple


class StorageError(Exception):
    """Base class for store construction failures."""
    pass


class BorrowError(StorageError, TypeError):
    """Raised when a value cannot be borrowed (it is not a re-iterable collection)."""
    pass


class Store(ABC):
    """
    Capability contract shared by every junction store.

    Properties:
        ordered: Class-level fact; True only for sorted, deduplicated stores
        kind: Short name for diagnostics
    """

    ordered: ClassVar[bool] = False
    kind: ClassVar[str] = "store"

    @abstractmethod
    def is_empty(self) -> bool:
        ...

    @abstractmethod
    def size(self) -> int:
        ...

    @property
    @abstractmethod
    def elements(self) -> Iterable[Any]:
        ...

    def __iter__(self) -> Iterator[Any]:
        return iter(self.elements)


def _sorted_unique(values: Iterable[Any]) -> Tuple[Any, ...]:
    """Sort and drop adjacent duplicates; needs ordering and ==, not hashing."""
    return tuple(key for key, _ in groupby(sorted(values)))


def _is_strictly_ascending(values: Sequence[Any]) -> bool:
    return all(values[i] < values[i + 1] for i in range(len(values) - 1))


class SortedStore(Store):
    """
    Owned-Sorted-Store.

    Copies its input into a deduplicated, ascending tuple in O(N log N),
    or adopts an input that is already sorted and deduplicated.

    Example:
        SortedStore([3, 1, 3, 2]).elements == (1, 2, 3)

    IMPORTANT:
        The tuple is private to the store. Callers mutating the original
        input afterwards do not affect the junction.
    """

    ordered = True
    kind = "sorted"

    def __init__(self, values: Iterable[Any] = ()):
        self._elements: Tuple[Any, ...] = _sorted_unique(values)
        self._adopted = False

    @classmethod
    def adopt(cls, values: Sequence[Any]) -> "SortedStore":
        """
        Take over an already-sorted, deduplicated sequence without re-sorting.

        A tuple is kept as-is; any other sequence is frozen into a tuple in
        linear time.

        Args:
            values: Strictly ascending sequence

        Returns:
            SortedStore whose adopted flag is set
        """
        store = cls.__new__(cls)
        store._elements = tuple(values)
        store._adopted = True
        assert _is_strictly_ascending(store._elements), "adopted values must be sorted and unique"
        return store

    @property
    def adopted(self) -> bool:
        """True if built by adopt() rather than by sorting a copy."""
        return self._adopted

    @property
    def elements(self) -> Tuple[Any, ...]:
        return self._elements

    def is_empty(self) -> bool:
        return not self._elements

    def size(self) -> int:
        return len(self._elements)

    def has_second(self) -> bool:
        return len(self._elements) >= 2

    def first(self) -> Any:
        assert not self.is_empty(), "first() on an empty store"
        return self._elements[0]

    def second(self) -> Any:
        assert self.has_second(), "second() needs at least two elements"
        return self._elements[1]

    def penultimate(self) -> Any:
        assert self.has_second(), "penultimate() needs at least two elements"
        return self._elements[-2]

    def last(self) -> Any:
        assert not self.is_empty(), "last() on an empty store"
        return self._elements[-1]


class BorrowedStore(Store):
    """
    Borrowed-Store.

    Keeps a reference to a caller-owned collection. Construction is O(1).

    The collection must be re-iterable and sized (a
    collections.abc.Collection: list, tuple, set, dict view, range, ...).
    One-shot iterators are refused, because a junction may scan its
    elements many times.

    Raises:
        BorrowError: If the value is not a Collection
    """

    ordered = False
    kind = "borrowed"

    def __init__(self, collection: Collection):
        if not isinstance(collection, Collection):
            raise BorrowError(
                f"Cannot borrow {type(collection).__name__}: "
                "a re-iterable collection is required; copy it instead"
            )
        self._collection = collection

    @property
    def elements(self) -> Collection:
        return self._collection

    def is_empty(self) -> bool:
        return len(self._collection) == 0

    def size(self) -> int:
        return len(self._collection)
