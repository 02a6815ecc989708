"""Dictionary of words and meanings in a binary search tree."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class _Node:
    word: str
    meaning: str
    left: _Node | None = None
    right: _Node | None = None


class WordBST:
    """Unbalanced search tree keyed by word; duplicate words are ignored."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def _find(self, word: str) -> _Node | None:
        node = self._root
        while node is not None and node.word != word:
            node = node.left if word < node.word else node.right
        return node

    def insert(self, word: str, meaning: str) -> bool:
        """Add a word; return False if it was already present."""
        node = _Node(word, meaning)
        if self._root is None:
            self._root = node
            return True
        current = self._root
        while True:
            if word < current.word:
                if current.left is None:
                    current.left = node
                    return True
                current = current.left
            elif word > current.word:
                if current.right is None:
                    current.right = node
                    return True
                current = current.right
            else:
                return False

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self._find(word) is not None

    def ascending(self) -> Iterator[tuple[str, str]]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.word, node.meaning
            node = node.right

    def descending(self) -> Iterator[tuple[str, str]]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.right
            node = stack.pop()
            yield node.word, node.meaning
            node = node.left

    def update(self, word: str, meaning: str) -> None:
        """Replace the meaning of ``word``; KeyError if it is absent."""
        node = self._find(word)
        if node is None:
            raise KeyError(word)
        node.meaning = meaning

    def delete(self, word: str) -> bool:
        """Remove ``word``; return False if it was not present."""
        parent: _Node | None = None
        node = self._root
        while node is not None and node.word != word:
            parent = node
            node = node.left if word < node.word else node.right
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            succ_parent, succ = node, node.right
            while succ.left is not None:
                succ_parent, succ = succ, succ.left
            node.word, node.meaning = succ.word, succ.meaning
            if succ_parent is node:
                succ_parent.right = succ.right
            else:
                succ_parent.left = succ.right
            return True
        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        return True

    def _spine(self, side: str) -> int:
        count = 0
        node = self._root
        while node is not None:
            count += 1
            node = getattr(node, side)
        return count

    def max_comparisons(self) -> int:
        """Length of the path from the root along right children."""
        return self._spine("right")

    def min_comparisons(self) -> int:
        """Length of the path from the root along left children."""
        return self._spine("left")


_MENU = """
__MENU__
1. Create
2. Insert
3. Traverse using ascending
4. Traverse using descending
5. Search
6. Delete
7. Update the meaning of word
8. Maximum comparisons
9. Minimum comparisons
10. Exit"""


def _create(tree: WordBST) -> None:
    while True:
        word = input("Enter the word to store in tree: ").strip()
        meaning = input("Enter the meaning of word: ")
        tree.insert(word, meaning)
        if input("Do you want to continue? yes-1 no-0: ").strip() != "1":
            return


def _print_entries(entries: Iterator[tuple[str, str]]) -> None:
    for word, meaning in entries:
        print(f"{word} : {meaning}")


def _update(tree: WordBST) -> None:
    word = input("Enter the word to update the meaning: ").strip()
    if word not in tree:
        print("Word not found")
        return
    tree.update(word, input("Enter the new meaning: "))
    print("Meaning updated successfully!")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive dictionary menu."""
    argparse.ArgumentParser(description="Word dictionary in a BST.").parse_args(argv)
    tree = WordBST()
    while True:
        print(_MENU)
        try:
            raw = input("Enter your choice: ").strip()
            if raw == "10":
                return 0
            if raw in ("1", "2"):
                _create(tree)
            elif raw == "3":
                _print_entries(tree.ascending())
            elif raw == "4":
                _print_entries(tree.descending())
            elif raw == "5":
                word = input("Enter the word to search in BST: ").strip()
                print("Word found!" if word in tree else "Word not found.")
            elif raw == "6":
                tree.delete(input("Enter the word to be deleted: ").strip())
                print("Word deleted!")
            elif raw == "7":
                _update(tree)
            elif raw == "8":
                print(f"Maximum comparisons required: {tree.max_comparisons()}")
            elif raw == "9":
                print(f"Minimum comparisons required: {tree.min_comparisons()}")
            else:
                print("Invalid choice!")
        except EOFError:
            return 0


if __name__ == "__main__":
    raise SystemExit(main())