from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from .errors import CursorStateError
from .limits import NOT_SET

if TYPE_CHECKING:
    from .array import DynamicArray

T = TypeVar("T")


class ArrayCursor(Generic[T]):
    """
    Bidirectional cursor over a DynamicArray.

    ``index`` is the position of the element ``next`` would return;
    ``last_index`` is the slot returned by the latest ``next``/``previous``,
    or NOT_SET once the cursor's own ``add``/``remove`` has invalidated it.

    The cursor keeps a live reference to its array. Changing the array other
    than through this cursor leaves both indices stale and is not detected.
    """

    __slots__ = ("_array", "index", "last_index")

    def __init__(self, array: DynamicArray[T], index: int = 0):
        self._array = array
        self.index = index
        self.last_index = NOT_SET

    def __iter__(self) -> ArrayCursor[T]:
        return self

    def has_next(self) -> bool:
        return self._array.size() > self.index

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        self.last_index = self.index
        self.index += 1
        return self._array.get(self.last_index)

    def next_index(self) -> int:
        return self.index

    def has_previous(self) -> bool:
        return self.index > 0

    def previous(self) -> T:
        if not self.has_previous():
            raise StopIteration
        self.index -= 1
        self.last_index = self.index
        return self._array.get(self.last_index)

    def previous_index(self) -> int:
        return self.index - 1 if self.index > 0 else NOT_SET

    def add(self, value: T) -> None:
        self._array.insert(self.index, value)
        self.index += 1
        self.last_index = NOT_SET

    def set(self, value: T) -> None:
        if self.last_index == NOT_SET:
            raise CursorStateError("set() needs a preceding next() or previous()")
        self._array.set(self.last_index, value)

    def remove(self) -> None:
        if self.last_index == NOT_SET:
            raise CursorStateError("remove() needs a preceding next() or previous()")
        self._array.remove_at(self.last_index)
        # after previous() the removed slot already sits at index
        if self.last_index < self.index:
            self.index -= 1
        self.last_index = NOT_SET
