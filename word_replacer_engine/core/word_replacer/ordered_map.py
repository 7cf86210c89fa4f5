"""
Key-value mapping contract shared by every rule storage backend.

The resolver and the substitutor only ever talk to an OrderedMap, so any of
the backends (binary search tree, red-black tree, hash table) can be dropped
in without changing their behaviour. Observable key -> value semantics are
identical across backends; only iteration order and performance differ.

Contract:
- get(key) returns the stored value, or None when the key is absent. It
  never substitutes a default, so a key mapped to "" is distinguishable from
  a key with no rule.
- put(key, value) inserts or overwrites.
- items() yields (key, value) pairs in the backend's natural order, which is
  fixed for a given backend and insertion sequence.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterator, List, Optional, Tuple


class OrderedMap(ABC):
    """Abstract string -> string map."""

    # Selector used on the command line; set by each backend.
    name: str = ""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the value stored for key, or None if absent."""

    @abstractmethod
    def put(self, key: str, value: str) -> None:
        """Store value under key, overwriting any previous value."""

    @abstractmethod
    def items(self) -> Iterator[Tuple[str, str]]:
        """Iterate over (key, value) pairs in the backend's natural order."""

    @abstractmethod
    def __len__(self) -> int:
        ...

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def __iter__(self) -> Iterator[str]:
        for key, _ in self.items():
            yield key

    def keys(self) -> List[str]:
        return [key for key, _ in self.items()]

    def to_dict(self) -> Dict[str, str]:
        """Snapshot of the map as a plain dict (insertion follows natural order)."""
        return dict(self.items())

    def update(self, pairs) -> None:
        for key, value in pairs:
            self.put(key, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self)} entries)"
