"""
Red-black tree backend.

Left-leaning red-black tree (Sedgewick): every 3-node is represented by a red
left link, which keeps insertion to three local fix-ups (rotate left, rotate
right, flip colors) and bounds the height at 2 * log2(n + 1).
"""

from typing import Iterator, List, Optional, Tuple

from .ordered_map import OrderedMap

RED = True
BLACK = False


class _Node:
    __slots__ = ("key", "value", "left", "right", "color")

    def __init__(self, key: str, value: str, color: bool = RED):
        self.key = key
        self.value = value
        self.left: Optional["_Node"] = None
        self.right: Optional["_Node"] = None
        self.color = color


def _is_red(node: Optional[_Node]) -> bool:
    return node is not None and node.color == RED


def _rotate_left(node: _Node) -> _Node:
    child = node.right
    node.right = child.left
    child.left = node
    child.color = node.color
    node.color = RED
    return child


def _rotate_right(node: _Node) -> _Node:
    child = node.left
    node.left = child.right
    child.right = node
    child.color = node.color
    node.color = RED
    return child


def _flip_colors(node: _Node) -> None:
    node.color = not node.color
    node.left.color = not node.left.color
    node.right.color = not node.right.color


class RBTreeMap(OrderedMap):
    """Balanced search tree map; keys iterate in sorted order."""

    name = "rbt"

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
        self._root = self._put(self._root, key, value)
        self._root.color = BLACK

    def _put(self, node: Optional[_Node], key: str, value: str) -> _Node:
        if node is None:
            self._size += 1
            return _Node(key, value)

        if key < node.key:
            node.left = self._put(node.left, key, value)
        elif key > node.key:
            node.right = self._put(node.right, key, value)
        else:
            node.value = value

        if _is_red(node.right) and not _is_red(node.left):
            node = _rotate_left(node)
        if _is_red(node.left) and _is_red(node.left.left):
            node = _rotate_right(node)
        if _is_red(node.left) and _is_red(node.right):
            _flip_colors(node)
        return node

    def items(self) -> Iterator[Tuple[str, str]]:
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
        def _height(node: Optional[_Node]) -> int:
            if node is None:
                return 0
            return 1 + max(_height(node.left), _height(node.right))

        return _height(self._root)

    def black_height(self) -> int:
        """
        Count of black links from the root to any leaf.

        Raises:
            ValueError: if two root-to-leaf paths disagree, i.e. the tree
                is no longer balanced
        """
        def _black_height(node: Optional[_Node]) -> int:
            if node is None:
                return 0
            left = _black_height(node.left)
            right = _black_height(node.right)
            if left != right:
                raise ValueError(f"Unbalanced black height at {node.key!r}")
            return left + (0 if node.color == RED else 1)

        return _black_height(self._root)

    def __len__(self) -> int:
        return self._size
