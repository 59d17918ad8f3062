from __future__ import annotations

from typing import Any, Callable, TypeVar

T = TypeVar("T")

Comparator = Callable[[T, T], int]


def natural_order(one: Any, other: Any) -> int:
    # three-way result from the elements' own < and >
    if one < other:
        return -1
    if one > other:
        return 1
    return 0


def reverse_order(one: Any, other: Any) -> int:
    return natural_order(other, one)


def by_key(key: Callable[[T], Any]) -> Comparator[T]:
    """Build a comparator that orders elements by ``key(element)``."""

    def compare(one: T, other: T) -> int:
        return natural_order(key(one), key(other))

    return compare
