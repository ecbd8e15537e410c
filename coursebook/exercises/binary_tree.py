"""A set of values stored in an unbalanced binary search tree."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    value: T
    left: _Node[T] | None = None
    right: _Node[T] | None = None


class BinaryTree(Generic[T]):
    """A set of ordered values; a value added twice is stored once."""

    def __init__(self) -> None:
        self._root: _Node[T] | None = None
        self._size = 0

    def insert(self, value: T) -> None:
        """Add the value unless it is already present."""
        if self._root is None:
            self._root = _Node(value)
            self._size += 1
            return
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = _Node(value)
                    break
                node = node.left
            elif node.value < value:
                if node.right is None:
                    node.right = _Node(value)
                    break
                node = node.right
            else:
                return
        self._size += 1

    def __contains__(self, value: Any) -> bool:
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif node.value < value:
                node = node.right
            else:
                return True
        return False

    def __len__(self) -> int:
        return self._size


def main(argv: list[str] | None = None) -> int:
    """Insert a couple of strings and report on the tree."""
    tree: BinaryTree[str] = BinaryTree()
    tree.insert("foo")
    tree.insert("bar")
    print(f"size: {len(tree)}, has foo: {'foo' in tree}")
    return 0


if __name__ == "__main__":
    sys.exit(main())