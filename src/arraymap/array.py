from __future__ import annotations

import logging
from typing import Any, Generic, Iterable, Optional, TypeVar

from .cursor import ArrayCursor
from .limits import CLEARED_CAPACITY, DEFAULT_CAPACITY, check_capacity, grown_capacity
from .ordering import Comparator
from .sorting import quick_sort

T = TypeVar("T")

logger = logging.getLogger(__name__)


class DynamicArray(Generic[T]):
    """
    Resizable array backed by a pre-sized slot buffer.

    Slots ``[0, size)`` hold the elements; the rest of the buffer is unused.
    When an append or insert finds the buffer full, a buffer of
    ``max(1, size) * 2`` slots replaces it. The buffer never shrinks, except
    that ``clear`` swaps in a single-slot buffer.

    Not thread-safe.
    """

    __slots__ = ("_slots", "_size")

    def __init__(self, capacity: int = DEFAULT_CAPACITY, items: Optional[Iterable[T]] = None):
        self._slots: list[Any] = [None] * check_capacity(capacity)
        self._size = 0
        if items is not None:
            self.add_all(items)

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def contains(self, value: object) -> bool:
        for i in range(self._size):
            if self._slots[i] == value:
                return True
        return False

    def to_array(self) -> list[T]:
        return self._slots[: self._size]

    def cursor(self, index: int = 0) -> ArrayCursor[T]:
        """Return a cursor positioned before the element at ``index``."""
        if index < 0 or index > self._size:
            raise IndexError(f"cursor index {index} out of range for size {self._size}")
        return ArrayCursor(self, index)

    # --- element access ---

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= self._size:
            raise IndexError(f"index {index} out of range for size {self._size}")

    def get(self, index: int) -> T:
        self._check_index(index)
        return self._slots[index]

    def set(self, index: int, value: T) -> T:
        # returns the value just written, not the one it replaced
        self._check_index(index)
        self._slots[index] = value
        return value

    # --- structural changes ---

    def _reallocate(self) -> list[Any]:
        old = self._slots
        self._slots = [None] * grown_capacity(self._size)
        logger.debug("grow buffer %d -> %d slots", len(old), len(self._slots))
        return old

    def add(self, value: T) -> bool:
        if len(self._slots) == self._size:
            old = self._reallocate()
            self._slots[: self._size] = old[: self._size]
        self._slots[self._size] = value
        self._size += 1
        return True

    def insert(self, index: int, value: T) -> None:
        size = self._size
        if index < 0 or index > size:
            raise IndexError(f"insert index {index} out of range for size {size}")
        if index == size:
            self.add(value)
            return
        if len(self._slots) == size:
            old = self._reallocate()
            self._slots[:index] = old[:index]
            self._slots[index + 1 : size + 1] = old[index:size]
        else:
            self._slots[index + 1 : size + 1] = self._slots[index:size]
        self._slots[index] = value
        self._size += 1

    def add_all(self, other: Iterable[T]) -> bool:
        if other is self:
            other = self.to_array()
        for item in other:
            self.add(item)
        return True

    def remove(self, value: object) -> bool:
        """Remove the first element equal to ``value``; report whether one was found."""
        for i in range(self._size):
            if self._slots[i] == value:
                self.remove_at(i)
                return True
        return False

    def remove_at(self, index: int) -> T:
        self._check_index(index)
        element = self._slots[index]
        last = self._size - 1
        if index != last:
            self._slots[index:last] = self._slots[index + 1 : self._size]
        self._slots[last] = None
        self._size = last
        return element

    def remove_all(self, other: Iterable[object]) -> bool:
        """
        Remove one occurrence of each element of ``other``, in ``other``'s
        order. A value listed once in ``other`` but present several times
        here loses only its first occurrence.
        """
        for item in other:
            self.remove(item)
        return True

    def retain_all(self, other: Iterable[object]) -> bool:
        """Remove every element that ``other`` does not contain."""
        if isinstance(other, DynamicArray):
            keep = other
        else:
            keep = list(other)
        it = self.cursor()
        while it.has_next():
            if next(it) not in keep:
                it.remove()
        return True

    def clear(self) -> None:
        logger.debug("clear: drop %d-slot buffer", len(self._slots))
        self._slots = [None] * CLEARED_CAPACITY
        self._size = 0

    def quick_sort(self, cmp: Optional[Comparator] = None) -> None:
        quick_sort(self._slots, 0, self._size - 1, cmp)

    # --- python protocol ---

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    def __getitem__(self, index: int) -> T:
        return self.get(index)

    def __iter__(self) -> ArrayCursor[T]:
        return self.cursor()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DynamicArray):
            return NotImplemented
        return self.to_array() == other.to_array()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"DynamicArray({self.to_array()!r})"
