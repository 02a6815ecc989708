"""Binary search tree of integers."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass
class _Node:
    value: int
    left: _Node | None = None
    right: _Node | None = None


class IntBST:
    """Unbalanced binary search tree; duplicate values are ignored."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: _Node | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> bool:
        """Add ``value``; return False if it was already present."""
        node = _Node(value)
        if self._root is None:
            self._root = node
            return True
        current = self._root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = node
                    return True
                current = current.left
            elif value > current.value:
                if current.right is None:
                    current.right = node
                    return True
                current = current.right
            else:
                return False

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int):
            return False
        node = self._root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def inorder(self) -> Iterator[int]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def preorder(self) -> Iterator[int]:
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.value
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def postorder(self) -> Iterator[int]:
        stack = [self._root] if self._root is not None else []
        visited: list[int] = []
        while stack:
            node = stack.pop()
            visited.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        yield from reversed(visited)

    def minimum(self) -> int:
        """The leftmost value; raises ValueError on an empty tree."""
        if self._root is None:
            raise ValueError("Tree is empty")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.value

    def maximum(self) -> int:
        """The rightmost value; raises ValueError on an empty tree."""
        if self._root is None:
            raise ValueError("Tree is empty")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.value

    def mirror(self) -> None:
        """Swap the children of every node in place."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            node.left, node.right = node.right, node.left
            stack.extend(child for child in (node.left, node.right) if child)


_MENU = """
__MENU__
1. Create
2. Insert
3. Traverse using Inorder
4. Traverse using Preorder
5. Traverse using Postorder
6. Search
7. Minimum node
8. Maximum node
9. Mirror Tree
10. Exit"""


def _create(tree: IntBST) -> None:
    while True:
        tree.insert(int(input("Enter the data to store in tree: ")))
        if input("Do you want to continue? yes-1 no-0: ").strip() != "1":
            return


def _show(label: str, values: Iterable[int]) -> None:
    print(f"{label} Traversal: " + " ".join(str(v) for v in values))


def _extreme(label: str, pick) -> None:
    try:
        print(f"{label} node value: {pick()}")
    except ValueError as exc:
        print(exc)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive binary search tree menu."""
    argparse.ArgumentParser(description="Integer binary search tree.").parse_args(
        argv
    )
    tree = IntBST()
    while True:
        print(_MENU)
        try:
            choice = int(input("Enter your choice: "))
            if choice == 10:
                return 0
            if choice in (1, 2):
                _create(tree)
            elif choice == 3:
                _show("Inorder", tree.inorder())
            elif choice == 4:
                _show("Preorder", tree.preorder())
            elif choice == 5:
                _show("Postorder", tree.postorder())
            elif choice == 6:
                key = int(input("\nEnter the data to search in BST: "))
                print("Data found" if key in tree else "Data not found")
            elif choice == 7:
                _extreme("Minimum", tree.minimum)
            elif choice == 8:
                _extreme("Maximum", tree.maximum)
            elif choice == 9:
                tree.mirror()
                print("Tree mirrored successfully")
            else:
                print("Invalid choice")
        except ValueError:
            print("Invalid input")
        except EOFError:
            return 0


if __name__ == "__main__":
    raise SystemExit(main())