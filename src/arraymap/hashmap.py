from __future__ import annotations

import logging
from typing import Generic, Iterator, Optional, TypeVar

from .limits import (
    DEFAULT_BUCKET_COUNT,
    DEFAULT_LOAD_FACTOR,
    check_bucket_count,
    check_load_factor,
    exceeds_threshold,
)
from .model import Entry

K = TypeVar("K")
V = TypeVar("V")

logger = logging.getLogger(__name__)


class ChainedHashMap(Generic[K, V]):
    """
    Hash map resolving collisions by separate chaining.

    Every bucket holds a singly linked chain of ``Entry`` objects; new
    entries are linked at the head of their chain. Once ``size / buckets``
    goes above 0.75 the bucket table is doubled and every entry is relinked
    into its new bucket. That threshold is fixed: ``load_factor`` is
    validated and kept but does not decide when to resize.

    Iteration order is unspecified and changes across resizes. Not
    thread-safe.
    """

    __slots__ = ("_table", "_size", "_load_factor")

    def __init__(self, bucket_count: int = DEFAULT_BUCKET_COUNT, load_factor: float = DEFAULT_LOAD_FACTOR):
        self._load_factor = check_load_factor(load_factor)
        self._table: list[Optional[Entry[K, V]]] = [None] * check_bucket_count(bucket_count)
        self._size = 0

    @property
    def bucket_count(self) -> int:
        return len(self._table)

    @property
    def load_factor(self) -> float:
        return self._load_factor

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        for i in range(len(self._table)):
            self._table[i] = None
        self._size = 0

    # python's % takes the sign of the divisor, so negative hashes still land in range
    def _index(self, key: object, bucket_count: int) -> int:
        return hash(key) % bucket_count

    def _entries(self) -> Iterator[Entry[K, V]]:
        for entry in self._table:
            while entry is not None:
                yield entry
                entry = entry.next

    def _find(self, key: object) -> Optional[Entry[K, V]]:
        entry = self._table[self._index(key, len(self._table))]
        while entry is not None:
            if entry.has_key(key):
                return entry
            entry = entry.next
        return None

    def put(self, key: K, value: V) -> Optional[V]:
        """
        Map ``key`` to ``value``.

        Returns the value previously mapped to ``key``, or None when the key
        is new. Inserting a new key may rehash the whole table.
        """
        index = self._index(key, len(self._table))
        entry = self._table[index]
        while entry is not None:
            if entry.has_key(key):
                return entry.set_value(value)
            entry = entry.next

        self._table[index] = Entry(key, value, self._table[index])
        self._size += 1

        if exceeds_threshold(self._size, len(self._table)):
            self._resize()
        return None

    def get(self, key: object) -> Optional[V]:
        entry = self._find(key)
        return None if entry is None else entry.value

    def get_or_default(self, key: object, default: V) -> V:
        # presence is decided by the entry, so a stored None is returned as is
        entry = self._find(key)
        return default if entry is None else entry.value

    def remove(self, key: object) -> Optional[V]:
        index = self._index(key, len(self._table))
        entry = self._table[index]
        previous: Optional[Entry[K, V]] = None
        while entry is not None:
            if entry.has_key(key):
                if previous is None:
                    self._table[index] = entry.next
                else:
                    previous.next = entry.next
                entry.next = None
                self._size -= 1
                return entry.value
            previous = entry
            entry = entry.next
        return None

    def contains_key(self, key: object) -> bool:
        # a key mapped to None counts as absent here
        return self.get(key) is not None

    def contains_value(self, value: object) -> bool:
        for entry in self._entries():
            if entry.has_value(value):
                return True
        return False

    def key_set(self) -> set[K]:
        return {entry.key for entry in self._entries()}

    def _resize(self) -> None:
        # relinking prepends, so each chain comes out in reverse arrival order
        new_count = len(self._table) * 2
        new_table: list[Optional[Entry[K, V]]] = [None] * new_count
        for head in self._table:
            entry = head
            while entry is not None:
                following = entry.next
                index = self._index(entry.key, new_count)
                entry.next = new_table[index]
                new_table[index] = entry
                entry = following
        logger.debug("rehash %d entries: %d -> %d buckets", self._size, len(self._table), new_count)
        self._table = new_table

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __contains__(self, key: object) -> bool:
        return self.contains_key(key)

    def __iter__(self) -> Iterator[K]:
        return iter(self.key_set())

    def __repr__(self) -> str:
        body = ", ".join(str(entry) for entry in self._entries())
        return f"ChainedHashMap({{{body}}})"
