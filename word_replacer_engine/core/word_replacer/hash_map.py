"""
Hash table backend.

Separate chaining over a power-of-two bucket array. Python's built-in str
hash is salted per process, which would make iteration order change from one
run to the next; a polynomial string hash is used instead so that the order
(and therefore the resolver's processing order) is fixed for a given input.
"""

from typing import Iterator, List, Optional, Tuple

from .ordered_map import OrderedMap

INITIAL_CAPACITY = 16
MAX_LOAD_FACTOR = 0.75


def string_hash(key: str) -> int:
    """31-based polynomial hash over code points, truncated to 32 bits."""
    h = 0
    for ch in key:
        h = (31 * h + ord(ch)) & 0xFFFFFFFF
    return h


class HashTableMap(OrderedMap):
    """Hash table map; keys iterate in bucket order."""

    name = "hash"

    def __init__(self, capacity: int = INITIAL_CAPACITY) -> None:
        size = INITIAL_CAPACITY
        while size < capacity:
            size *= 2
        self._buckets: List[List[List[str]]] = [[] for _ in range(size)]
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._buckets)

    def _bucket_for(self, key: str) -> List[List[str]]:
        h = string_hash(key)
        # Spread the high bits before masking, power-of-two tables only see low bits
        h ^= h >> 16
        return self._buckets[h & (len(self._buckets) - 1)]

    def get(self, key: str) -> Optional[str]:
        for entry in self._bucket_for(key):
            if entry[0] == key:
                return entry[1]
        return None

    def put(self, key: str, value: str) -> None:
        bucket = self._bucket_for(key)
        for entry in bucket:
            if entry[0] == key:
                entry[1] = value
                return
        bucket.append([key, value])
        self._size += 1
        if self._size > MAX_LOAD_FACTOR * len(self._buckets):
            self._resize(len(self._buckets) * 2)

    def _resize(self, new_capacity: int) -> None:
        old_entries = [entry for bucket in self._buckets for entry in bucket]
        self._buckets = [[] for _ in range(new_capacity)]
        for entry in old_entries:
            self._bucket_for(entry[0]).append(entry)

    def items(self) -> Iterator[Tuple[str, str]]:
        for bucket in self._buckets:
            for key, value in bucket:
                yield key, value

    def load_factor(self) -> float:
        return self._size / len(self._buckets)

    def __len__(self) -> int:
        return self._size
