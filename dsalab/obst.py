"""Expected search cost of an optimal binary search tree."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True)
class OptimalBST:
    """Minimum expected cost and the chosen root of every key range.

    ``roots[(i, j)]`` is the 1-based key at the root of the optimal subtree
    over keys ``i..j``.
    """

    cost: float
    roots: dict[tuple[int, int], int] = field(default_factory=dict)


def optimal_bst(probabilities: Sequence[float]) -> OptimalBST:
    """Build the cost and root tables for keys with the given probabilities."""
    p = [0.0, *(float(x) for x in probabilities)]
    n = len(p) - 1
    expected: dict[tuple[int, int], float] = {}
    weight: dict[tuple[int, int], float] = {}
    for i in range(1, n + 2):
        expected[i, i - 1] = 0.0
        weight[i, i - 1] = 0.0
    roots: dict[tuple[int, int], int] = {}
    for length in range(1, n + 1):
        for i in range(1, n - length + 2):
            j = i + length - 1
            w = weight[i, j - 1] + p[j]
            weight[i, j] = w
            costs = {r: expected[i, r - 1] + expected[r + 1, j] + w for r in range(i, j + 1)}
            best = min(costs, key=costs.__getitem__)
            roots[i, j] = best
            expected[i, j] = costs[best]
    return OptimalBST(expected[1, n], roots)


def optimal_bst_cost(probabilities: Sequence[float]) -> float:
    return optimal_bst(probabilities).cost


def main(argv: list[str] | None = None) -> int:
    """Ask for key probabilities and print the optimal tree's cost."""
    argparse.ArgumentParser(description="Optimal binary search tree cost.").parse_args(
        argv
    )
    try:
        count = int(input("Enter number of keys: "))
        print("Enter the probabilities:")
        probabilities = [float(input(f"p[{i}]: ")) for i in range(1, count + 1)]
    except (ValueError, EOFError) as exc:
        print(f"Invalid input: {exc}")
        return 1
    print(f"\nMinimum cost of Optimal BST: {optimal_bst_cost(probabilities):g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())