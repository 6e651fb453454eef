"""
Construction helpers: the explicit choice between copying and borrowing.

Every junction is built by one of five paths per quantifier. The caller
always names the path; nothing is inferred from how an argument was passed.

    <q>_of(*elements)            literal elements, copied
    <q>_copy(iterable)           any iterable, copied, sorted, deduplicated
    <q>_ref(collection)          borrowed: no copy, no sort, O(1)
    <q>_range(values, start, stop)
                                 positions [start, stop) of values, copied
    <q>_sorted(sequence)         an already-sorted, deduplicated sequence,
                                 adopted without re-sorting

Copy when in doubt. A borrowed junction follows every later change to the
collection it borrowed:

    low_fib = [1, 1, 2, 3, 5, 8]
    any_low_fib = any_ref(low_fib)
    assert not (13 == any_low_fib)
    low_fib.append(13)
    assert 13 == any_low_fib

whereas any_copy(low_fib) would keep answering False.
"""

from typing import Any, Collection, Iterable, Optional, Sequence

from junctions.quantifiers import AllJunction, AnyJunction, NoneJunction, OneJunction


# All

def all_of(*elements: Any) -> AllJunction:
    return AllJunction.of(*elements)


def all_copy(values: Iterable[Any]) -> AllJunction:
    return AllJunction.copy(values)


def all_ref(collection: Collection) -> AllJunction:
    return AllJunction.borrow(collection)


def all_range(values: Iterable[Any], start: int, stop: Optional[int] = None) -> AllJunction:
    return AllJunction.from_range(values, start, stop)


def all_sorted(values: Sequence[Any]) -> AllJunction:
    return AllJunction.from_sorted(values)


# Any

def any_of(*elements: Any) -> AnyJunction:
    return AnyJunction.of(*elements)


def any_copy(values: Iterable[Any]) -> AnyJunction:
    return AnyJunction.copy(values)


def any_ref(collection: Collection) -> AnyJunction:
    return AnyJunction.borrow(collection)


def any_range(values: Iterable[Any], start: int, stop: Optional[int] = None) -> AnyJunction:
    return AnyJunction.from_range(values, start, stop)


def any_sorted(values: Sequence[Any]) -> AnyJunction:
    return AnyJunction.from_sorted(values)


# One

def one_of(*elements: Any) -> OneJunction:
    return OneJunction.of(*elements)


def one_copy(values: Iterable[Any]) -> OneJunction:
    return OneJunction.copy(values)


def one_ref(collection: Collection) -> OneJunction:
    return OneJunction.borrow(collection)


def one_range(values: Iterable[Any], start: int, stop: Optional[int] = None) -> OneJunction:
    return OneJunction.from_range(values, start, stop)


def one_sorted(values: Sequence[Any]) -> OneJunction:
    return OneJunction.from_sorted(values)


# None

def none_of(*elements: Any) -> NoneJunction:
    return NoneJunction.of(*elements)


def none_copy(values: Iterable[Any]) -> NoneJunction:
    return NoneJunction.copy(values)


def none_ref(collection: Collection) -> NoneJunction:
    return NoneJunction.borrow(collection)


def none_range(values: Iterable[Any], start: int, stop: Optional[int] = None) -> NoneJunction:
    return NoneJunction.from_range(values, start, stop)


def none_sorted(values: Sequence[Any]) -> NoneJunction:
    return NoneJunction.from_sorted(values)
