"""Cheapest way to connect offices: Prim's minimum spanning tree."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from dataclasses import dataclass

MAX_OFFICES = 20
# Costs at or above this bound are never chosen as connections.
UNREACHABLE = 999


@dataclass(frozen=True)
class MSTEdge:
    source: str
    target: str
    cost: int


class OfficeNetwork:
    """Offices and the cost of linking each pair; 0 means no direct link."""

    def __init__(self, offices: Iterable[str]) -> None:
        names = list(offices)
        if len(names) > MAX_OFFICES:
            raise ValueError(f"at most {MAX_OFFICES} offices are supported")
        self.offices = names
        self._costs = [[0] * len(names) for _ in names]

    def __len__(self) -> int:
        return len(self.offices)

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self.offices):
            raise IndexError(f"no office with index {index}")

    def cost(self, a: int, b: int) -> int:
        self._check(a)
        self._check(b)
        return self._costs[a][b]

    def set_cost(self, a: int, b: int, cost: int) -> None:
        """Set the cost of linking two offices in both directions."""
        self._check(a)
        self._check(b)
        if a == b:
            if cost:
                raise ValueError("an office is not linked to itself")
            return
        self._costs[a][b] = self._costs[b][a] = cost

    def render(self) -> str:
        """The cost matrix labelled with office names."""
        lines = ["\t\t" + "".join(f"{name:>15}" for name in self.offices)]
        lines.extend(
            f"{name:>15}" + "".join(f"{c:>15}" for c in row)
            for name, row in zip(self.offices, self._costs)
        )
        return "\n".join(lines)

    def prims(self, start: int) -> list[MSTEdge]:
        """Edges of the minimum spanning tree grown from ``start``, in order.

        Raises ValueError when some office cannot be reached.
        """
        self._check(start)
        count = len(self.offices)
        connected = {start}
        edges: list[MSTEdge] = []
        while len(edges) < count - 1:
            candidates = (
                (i, j, c)
                for i in range(count)
                if i in connected
                for j, c in enumerate(self._costs[i])
                if j not in connected and c != 0 and c < UNREACHABLE
            )
            best = min(candidates, key=lambda edge: edge[2], default=None)
            if best is None:
                raise ValueError("offices cannot all be connected")
            i, j, c = best
            edges.append(MSTEdge(self.offices[i], self.offices[j], c))
            connected.add(j)
        return edges


def _create(count: int) -> OfficeNetwork:
    names = [input(f"Enter name of office {i + 1}: ").strip() for i in range(count)]
    network = OfficeNetwork(names)
    for i in range(count):
        for j in range(i + 1, count):
            print(f"Enter cost to connect {names[i]} and {names[j]}: ", end="")
            print("(Enter 0 if no direct connection)")
            network.set_cost(i, j, int(input()))
    return network


def main(argv: list[str] | None = None) -> int:
    """Read the offices and costs, then print the minimum spanning tree."""
    argparse.ArgumentParser(description="Minimum cost office network.").parse_args(
        argv
    )
    try:
        count = int(input("Enter the number of offices: "))
        network = _create(count)
        print("\nAdjacency Matrix (Cost to connect offices):")
        print(network.render())
        start = int(input(f"\nEnter the starting office index (0 to {count - 1}): "))
        edges = network.prims(start)
    except EOFError:
        return 1
    except (ValueError, IndexError) as exc:
        print(f"Error: {exc}")
        return 1
    print("\nEdges selected for Minimum Spanning Tree:")
    for edge in edges:
        print(f"{edge.source} - {edge.target} : {edge.cost}")
    total = sum(edge.cost for edge in edges)
    print(f"\nTotal minimum cost to connect all offices: {total}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())