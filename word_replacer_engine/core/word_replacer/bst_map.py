"""
Unbalanced binary search tree backend.
"""

from typing import Iterator, List, Optional, Tuple

from .ordered_map import OrderedMap


class _Node:
    __slots__ = ("key", "value", "left", "right")

    def __init__(self, key: str, value: str):
        self.key = key
        self.value = value
        self.left: Optional["_Node"] = None
        self.right: Optional["_Node"] = None


class BSTreeMap(OrderedMap):
    """
    Binary search tree keyed on string comparison.

    No rebalancing is done, so a rules file sorted by source word degrades the
    tree to a linked list. Insert and lookup are iterative to keep such
    degenerate trees clear of the recursion limit.
    """

    name = "bst"

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._size = 0

    def get(self, key: str) -> Optional[str]:
        node = self._root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return node.value
        return None

    def put(self, key: str, value: str) -> None:
        if self._root is None:
            self._root = _Node(key, value)
            self._size = 1
            return

        node = self._root
        while True:
            if key < node.key:
                if node.left is None:
                    node.left = _Node(key, value)
                    break
                node = node.left
            elif key > node.key:
                if node.right is None:
                    node.right = _Node(key, value)
                    break
                node = node.right
            else:
                node.value = value
                return
        self._size += 1

    def items(self) -> Iterator[Tuple[str, str]]:
        # In-order walk with an explicit stack
        stack: List[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key, node.value
            node = node.right

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path."""
        if self._root is None:
            return 0
        best = 0
        stack: List[Tuple[_Node, int]] = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            best = max(best, depth)
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return best

    def __len__(self) -> int:
        return self._size
