from __future__ import annotations

import math

DEFAULT_CAPACITY = 10
GROWTH_FACTOR = 2
CLEARED_CAPACITY = 1

DEFAULT_BUCKET_COUNT = 16
DEFAULT_LOAD_FACTOR = 0.75
# rehash trigger; the configured load factor does not take part in it
RESIZE_THRESHOLD = 0.75

# "no slot recorded" marker for cursors
NOT_SET = -1


def _check_int(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def check_capacity(capacity: int) -> int:
    _check_int("capacity", capacity)
    if capacity <= 0:
        raise ValueError(f"Illegal capacity: {capacity}")
    return capacity


def check_bucket_count(bucket_count: int) -> int:
    _check_int("bucket count", bucket_count)
    if bucket_count <= 0:
        raise ValueError(f"Illegal initial capacity: {bucket_count}")
    return bucket_count


def check_load_factor(load_factor: float) -> float:
    if isinstance(load_factor, bool) or not isinstance(load_factor, (int, float)):
        raise TypeError(f"load factor must be a number, got {type(load_factor).__name__}")
    if math.isnan(load_factor) or load_factor <= 0.0:
        raise ValueError(f"Illegal load factor: {load_factor}")
    return float(load_factor)


def grown_capacity(size: int) -> int:
    return max(1, size) * GROWTH_FACTOR


def exceeds_threshold(size: int, bucket_count: int) -> bool:
    return size / bucket_count > RESIZE_THRESHOLD
