"""Dictionary of words and meanings in a height-balanced search tree."""

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
    height: int = 1


def _height(node: _Node | None) -> int:
    return node.height if node is not None else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: _Node | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(parent: _Node) -> _Node:
    child = parent.left
    assert child is not None
    parent.left = child.right
    child.right = parent
    _update(parent)
    _update(child)
    return child


def _rotate_left(parent: _Node) -> _Node:
    child = parent.right
    assert child is not None
    parent.right = child.left
    child.left = parent
    _update(parent)
    _update(child)
    return child


def _insert(node: _Node | None, word: str, meaning: str) -> _Node:
    if node is None:
        return _Node(word, meaning)
    if word > node.word:
        node.right = _insert(node.right, word, meaning)
        if _balance(node) == -2:
            if node.right is not None and word > node.right.word:
                node = _rotate_left(node)
            else:
                node.right = _rotate_right(node.right)
                node = _rotate_left(node)
    else:
        node.left = _insert(node.left, word, meaning)
        if _balance(node) == 2:
            if node.left is not None and word < node.left.word:
                node = _rotate_right(node)
            else:
                node.left = _rotate_left(node.left)
                node = _rotate_right(node)
    _update(node)
    return node


def _delete(node: _Node | None, word: str) -> tuple[_Node | None, bool]:
    if node is None:
        return None, False
    if word < node.word:
        node.left, removed = _delete(node.left, word)
    elif word > node.word:
        node.right, removed = _delete(node.right, word)
    else:
        if node.left is None:
            return node.right, True
        if node.right is None:
            return node.left, True
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.word, node.meaning = successor.word, successor.meaning
        node.right, _ = _delete(node.right, successor.word)
        removed = True
    _update(node)
    return node, removed


class AVLDictionary:
    """Words kept balanced on insertion; deletion only refreshes heights."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def _find(self, word: str) -> _Node | None:
        node = self._root
        while node is not None and node.word != word:
            node = node.left if word < node.word else node.right
        return node

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self._find(word) is not None

    def insert(self, word: str, meaning: str) -> None:
        """Add a word; a repeated word is stored again beside the first."""
        self._root = _insert(self._root, word, meaning)
        self._size += 1

    def delete(self, word: str) -> bool:
        """Remove ``word``; return False if it was not present."""
        self._root, removed = _delete(self._root, word)
        if removed:
            self._size -= 1
        return removed

    def get(self, word: str) -> str:
        """The meaning of ``word``; KeyError if it is absent."""
        node = self._find(word)
        if node is None:
            raise KeyError(word)
        return node.meaning

    def modify(self, word: str, meaning: str) -> None:
        """Replace the meaning of ``word``; KeyError if it is absent."""
        node = self._find(word)
        if node is None:
            raise KeyError(word)
        node.meaning = meaning

    def height(self) -> int:
        """Height of the tree: the most comparisons a search can need."""
        return _height(self._root)

    def preorder(self) -> Iterator[tuple[str, str, int]]:
        """``(word, meaning, balance factor)`` in preorder."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.word, node.meaning, _balance(node)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def inorder(self) -> Iterator[tuple[str, str, int]]:
        """``(word, meaning, balance factor)`` in sorted order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.word, node.meaning, _balance(node)
            node = node.right


_MENU = """
1. Add word
2. Display (Inorder/Preorder)
3. Delete word
4. Search word
5. Modify meaning
6. Maximum Comparisons
7. Exit"""


def _read_word(prompt: str) -> str:
    tokens = input(prompt).split()
    return tokens[0] if tokens else ""


def _print_entries(entries: Iterator[tuple[str, str, int]]) -> None:
    for word, meaning, balance in entries:
        print(f"{word} : {meaning} (BF={balance})")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive AVL dictionary menu."""
    argparse.ArgumentParser(description="Dictionary in an AVL tree.").parse_args(argv)
    tree = AVLDictionary()
    print("\t--- DICTIONARY USING AVL TREE ---\t")
    while True:
        print(_MENU)
        try:
            raw = input("Enter choice: ").strip()
            if raw == "1":
                word = _read_word("Enter word: ")
                tree.insert(word, input("Enter meaning: "))
            elif raw == "2":
                print("\nPreorder:")
                _print_entries(tree.preorder())
                print("\nInorder:")
                _print_entries(tree.inorder())
            elif raw == "3":
                tree.delete(_read_word("Enter word to delete: "))
            elif raw == "4":
                word = _read_word("Enter word to search: ")
                try:
                    print(f"Word: {word}\nMeaning: {tree.get(word)}")
                except KeyError:
                    print("Word not found")
            elif raw == "5":
                word = _read_word("Enter word to modify: ")
                if word in tree:
                    tree.modify(word, input("Enter new meaning: "))
                else:
                    print("Word not found")
            elif raw == "6":
                print(
                    "Maximum comparisons required to search = Height = "
                    f"{tree.height()}"
                )
            elif raw == "7":
                return 0
            else:
                print("Invalid choice!")
        except EOFError:
            return 0


if __name__ == "__main__":
    raise SystemExit(main())