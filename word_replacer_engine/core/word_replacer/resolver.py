"""
Transitive rule resolution.

Rules may chain ("a -> b", "b -> c"). Before any text is processed every
source word is mapped directly to the end of its chain, so that a lookup
during substitution is a single get() and never walks a chain. Resolution is
a union-find over words: a word's root is the first word on its chain that
has no rule of its own.

Cycles ("x -> y", "y -> x", or "a -> a") have no root. They are rejected here,
before any output is produced, instead of hanging the substitution stage.
"""

import logging
from typing import Set

from .exceptions import CycleError
from .ordered_map import OrderedMap

logger = logging.getLogger(__name__)


def find(word: str, rule_map: OrderedMap) -> str:
    """
    Follow word through rule_map until a lookup misses and return that root.

    Takes one lookup per chain link. A word without a rule is its own root.

    Raises:
        CycleError: if the walk comes back to a word it has already visited
    """
    visited: Set[str] = set()
    current = word
    while True:
        visited.add(current)
        following = rule_map.get(current)
        if following is None:
            return current
        if following in visited:
            raise CycleError(current, following)
        current = following


def union(source_root: str, target_chain: str, resolved_map: OrderedMap) -> None:
    """
    Map source_root to the root of target_chain in resolved_map.

    Raises:
        CycleError: if the root of target_chain is source_root itself
    """
    root = find(target_chain, resolved_map)
    if root == source_root:
        raise CycleError(source_root, target_chain)
    resolved_map.put(source_root, root)


class TransitiveResolver:
    """Flattens a raw rule map into a chain-free resolved map."""

    def __init__(self):
        self.resolved_count = 0

    def resolve(self, raw_map: OrderedMap, resolved_map: OrderedMap) -> OrderedMap:
        """
        Resolve every rule of raw_map into resolved_map.

        Sources are processed in raw_map's iteration order. Cycle detection
        does not depend on that order: any cycle in raw_map is met by find()
        when walking from one of its members.

        Args:
            raw_map: Rules as written, possibly chained
            resolved_map: Empty map receiving source -> final word

        Returns:
            resolved_map

        Raises:
            CycleError: if any chain loops back on itself
        """
        logger.info("Resolving %d rules", len(raw_map))
        self.resolved_count = 0
        for source, target in raw_map.items():
            root = find(source, raw_map)
            if root != target:
                logger.debug("Chain resolved: %s -> %s -> ... -> %s", source, target, root)
            union(source, root, resolved_map)
            self.resolved_count += 1

        logger.info("Resolved %d rules", self.resolved_count)
        return resolved_map
