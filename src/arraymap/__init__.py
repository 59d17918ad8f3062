from .array import DynamicArray
from .cursor import ArrayCursor
from .errors import CursorStateError
from .hashmap import ChainedHashMap
from .limits import DEFAULT_BUCKET_COUNT, DEFAULT_CAPACITY, DEFAULT_LOAD_FACTOR, RESIZE_THRESHOLD
from .model import Entry
from .ordering import by_key, natural_order, reverse_order
from .sorting import partition, quick_sort

__all__ = [
    "DynamicArray",
    "ArrayCursor",
    "ChainedHashMap",
    "Entry",
    "CursorStateError",
    "quick_sort",
    "partition",
    "natural_order",
    "reverse_order",
    "by_key",
    "DEFAULT_CAPACITY",
    "DEFAULT_BUCKET_COUNT",
    "DEFAULT_LOAD_FACTOR",
    "RESIZE_THRESHOLD",
]
