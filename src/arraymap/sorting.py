from __future__ import annotations

from typing import Any, MutableSequence, Optional

from .ordering import Comparator, natural_order


def swap(slots: MutableSequence[Any], i: int, j: int) -> None:
    slots[i], slots[j] = slots[j], slots[i]


def partition(slots: MutableSequence[Any], low: int, high: int, cmp: Comparator) -> int:
    """
    Lomuto partition of ``slots[low:high + 1]`` around its last element.

    Every element comparing ``<= 0`` against the pivot is swapped to the left
    of a moving border, then the pivot is swapped into ``border + 1``, which
    is its final sorted position and the return value.
    """
    pivot = slots[high]
    border = low - 1
    for j in range(low, high):
        if cmp(slots[j], pivot) <= 0:
            border += 1
            swap(slots, border, j)
    swap(slots, border + 1, high)
    return border + 1


def quick_sort(
    slots: MutableSequence[Any],
    low: int,
    high: int,
    cmp: Optional[Comparator] = None,
) -> None:
    """
    Sort ``slots[low:high + 1]`` in place.

    The pivot is always the last element of the subrange, so sorted and
    reverse-sorted input take O(n^2) comparisons. The smaller side is sorted
    by recursion and the larger one by looping, which keeps the stack depth
    logarithmic without changing which partitions are produced.
    """
    if cmp is None:
        cmp = natural_order
    while low < high:
        p = partition(slots, low, high, cmp)
        if p - low < high - p:
            quick_sort(slots, low, p - 1, cmp)
            low = p + 1
        else:
            quick_sort(slots, p + 1, high, cmp)
            high = p - 1
