"""
Backend selection for rule maps.

Maps the command-line selectors ("bst", "rbt", "hash") to their OrderedMap
implementations.
"""

import logging
from typing import Dict, List, Type, Union

from .bst_map import BSTreeMap
from .exceptions import UsageError
from .hash_map import HashTableMap
from .models import MapBackend
from .ordered_map import OrderedMap
from .rbt_map import RBTreeMap

logger = logging.getLogger(__name__)

BACKEND_REGISTRY: Dict[MapBackend, Type[OrderedMap]] = {
    MapBackend.BST: BSTreeMap,
    MapBackend.RBT: RBTreeMap,
    MapBackend.HASH: HashTableMap,
}


def available_backends() -> List[str]:
    """Selectors accepted on the command line, in registry order."""
    return [backend.value for backend in BACKEND_REGISTRY]


def parse_backend(selector: Union[str, MapBackend]) -> MapBackend:
    """
    Turn a selector into a MapBackend.

    Matching is exact: "BST" or " bst" are rejected like any other unknown value.

    Raises:
        UsageError: if the selector is not one of available_backends()
    """
    if isinstance(selector, MapBackend):
        return selector
    try:
        return MapBackend(selector)
    except ValueError:
        raise UsageError.invalid_backend(selector) from None


def create_map(selector: Union[str, MapBackend]) -> OrderedMap:
    """Return a new, empty map for the given backend."""
    backend = parse_backend(selector)
    logger.debug("Creating %s map", backend.value)
    return BACKEND_REGISTRY[backend]()
