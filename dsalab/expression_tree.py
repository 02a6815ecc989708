"""Expression trees built from prefix expressions."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

OPERATORS = frozenset("+-*/^")


@dataclass
class ExprNode:
    data: str
    left: ExprNode | None = None
    right: ExprNode | None = None


def is_operator(ch: str) -> bool:
    return ch in OPERATORS and len(ch) == 1


def build_from_prefix(prefix: str) -> ExprNode | None:
    """Build a tree from a prefix expression of single-letter operands.

    Characters that are neither ASCII letters nor operators are skipped;
    an operator short of operands gets only those available.
    """
    stack: list[ExprNode] = []
    for ch in reversed(prefix):
        if ch.isascii() and ch.isalpha():
            stack.append(ExprNode(ch))
        elif is_operator(ch):
            node = ExprNode(ch)
            if stack:
                node.left = stack.pop()
            if stack:
                node.right = stack.pop()
            stack.append(node)
    return stack[-1] if stack else None


def postorder(root: ExprNode | None) -> list[str]:
    """Node symbols in postorder, computed without recursion."""
    if root is None:
        return []
    stack = [root]
    visited: list[str] = []
    while stack:
        node = stack.pop()
        visited.append(node.data)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    return visited[::-1]


_MENU = """
MENU
1. Postorder
2. Delete Tree
3. Exit"""


def main(argv: list[str] | None = None) -> int:
    """Run the interactive expression tree menu."""
    argparse.ArgumentParser(description="Prefix expression trees.").parse_args(argv)
    root: ExprNode | None = None
    while True:
        print(_MENU)
        try:
            raw = input("Enter your choice: ").strip()
            if raw == "1":
                tokens = input("Enter prefix expression: ").split()
                root = build_from_prefix(tokens[0] if tokens else "")
                print("Postorder: " + " ".join(postorder(root)))
            elif raw == "2":
                root = None
                print("Deleted nodes successfully")
            elif raw == "3":
                print("Exiting.")
                return 0
            else:
                print("Invalid choice")
        except EOFError:
            return 0


if __name__ == "__main__":
    raise SystemExit(main())