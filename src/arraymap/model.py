from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


@dataclass(slots=True)
class Entry(Generic[K, V]):
    key: K
    value: V
    # link to the next entry of the same bucket; ignored by ==
    next: Optional["Entry[K, V]"] = field(default=None, compare=False, repr=False)

    def has_key(self, key: object) -> bool:
        return self.key is key or self.key == key

    def has_value(self, value: object) -> bool:
        return self.value is value or self.value == value

    def set_value(self, value: V) -> V:
        old = self.value
        self.value = value
        return old

    def __str__(self) -> str:
        return f"{self.key}={self.value}"
