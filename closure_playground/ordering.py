"""Sorting driven by a two-argument ordering predicate.

The predicate answers "must ``a`` come before ``b``?". It can be written as
an inline ``lambda``, a named function, or an existing operator such as
``operator.gt``; all three produce the same descending order here.
"""

from __future__ import annotations

import functools
import operator
from typing import Callable, Iterable, List, TypeVar

T = TypeVar("T")

OrderingPredicate = Callable[[T, T], bool]


def backwards(s1: str, s2: str) -> bool:
    return s1 > s2


def _as_comparison(is_ordered_before: OrderingPredicate) -> Callable[[T, T], int]:
    def compare(a: T, b: T) -> int:
        if is_ordered_before(a, b):
            return -1
        if is_ordered_before(b, a):
            return 1
        return 0

    return compare


def sort_with(values: Iterable[T], is_ordered_before: OrderingPredicate) -> List[T]:
    """Return a new list of ``values`` ordered by ``is_ordered_before``.

    The sort is stable: elements the predicate does not distinguish keep
    their relative input order.
    """
    return sorted(values, key=functools.cmp_to_key(_as_comparison(is_ordered_before)))


def sort_descending(values: Iterable[str]) -> List[str]:
    """Sort strings in descending lexicographic order."""
    return sort_with(values, backwards)


# Comparator variants shown by the walkthrough, keyed by snippet suffix.
COMPARATORS: dict[str, OrderingPredicate] = {
    "inline": lambda s1, s2: s1 > s2,
    "shorthand": lambda a, b: a > b,
    "named": backwards,
    "operator": operator.gt,
}


__all__ = [
    "COMPARATORS",
    "OrderingPredicate",
    "backwards",
    "sort_descending",
    "sort_with",
]
