"""Flight paths between cities as an undirected weighted graph."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterable, Iterator

MAX_CITIES = 20


class FlightGraph:
    """Cities joined by flights; a distance of 0 means no direct flight."""

    def __init__(self, cities: Iterable[str]) -> None:
        names = list(cities)
        if len(names) > MAX_CITIES:
            raise ValueError(f"at most {MAX_CITIES} cities are supported")
        self.cities = names
        self._distances = [[0] * len(names) for _ in names]

    def __len__(self) -> int:
        return len(self.cities)

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self.cities):
            raise IndexError(f"no city with index {index}")

    def distance(self, a: int, b: int) -> int:
        self._check(a)
        self._check(b)
        return self._distances[a][b]

    def set_distance(self, a: int, b: int, distance: int) -> None:
        """Set the flight distance between two cities in both directions."""
        self._check(a)
        self._check(b)
        if a == b:
            if distance:
                raise ValueError("a city has no flight to itself")
            return
        self._distances[a][b] = self._distances[b][a] = distance

    def _neighbours(self, index: int) -> Iterator[int]:
        return (j for j, d in enumerate(self._distances[index]) if d != 0)

    def render(self) -> str:
        """The adjacency matrix labelled with city names."""
        lines = ["\t" + "".join(f"{city:>10}" for city in self.cities)]
        lines.extend(
            f"{city:>10}" + "".join(f"{d:>10}" for d in row)
            for city, row in zip(self.cities, self._distances)
        )
        return "\n".join(lines)

    def _bfs_indices(self, start: int) -> list[int]:
        visited = {start}
        queue = deque([start])
        order: list[int] = []
        while queue:
            current = queue.popleft()
            order.append(current)
            for j in self._neighbours(current):
                if j not in visited:
                    visited.add(j)
                    queue.append(j)
        return order

    def bfs(self, start: int) -> list[str]:
        """City names in breadth-first order from ``start``."""
        self._check(start)
        return [self.cities[i] for i in self._bfs_indices(start)]

    def dfs(self, start: int) -> list[str]:
        """City names in stack-based depth-first order from ``start``."""
        self._check(start)
        visited = {start}
        stack = [start]
        order: list[str] = []
        while stack:
            current = stack.pop()
            order.append(self.cities[current])
            for j in self._neighbours(current):
                if j not in visited:
                    visited.add(j)
                    stack.append(j)
        return order

    def is_connected(self) -> bool:
        """Whether every city is reachable from the first one."""
        if not self.cities:
            return False
        return len(self._bfs_indices(0)) == len(self.cities)


_MENU = """
Menu:
1. Create Graph
2. Display Graph
3. BFS Traversal
4. DFS Traversal
5. Check if Graph is Connected"""


def _create(count: int) -> FlightGraph:
    names = [input(f"Enter name of city {i + 1}: ").strip() for i in range(count)]
    graph = FlightGraph(names)
    for i in range(count):
        for j in range(i + 1, count):
            distance = int(
                input(
                    f"Enter distance between {names[i]} and {names[j]} "
                    "(0 if no flight): "
                )
            )
            graph.set_distance(i, j, distance)
    return graph


def main(argv: list[str] | None = None) -> int:
    """Run the interactive flight graph menu."""
    argparse.ArgumentParser(description="Flight path graph.").parse_args(argv)
    try:
        count = int(input("Enter number of cities in flight path graph: "))
        graph = FlightGraph([""] * count)
    except EOFError:
        return 0
    except ValueError as exc:
        print(f"Invalid input: {exc}")
        return 1
    while True:
        try:
            print(_MENU)
            try:
                choice = int(input("Enter your choice: "))
                if choice == 1:
                    graph = _create(count)
                elif choice == 2:
                    print("\nAdjacency Matrix:")
                    print(graph.render())
                elif choice in (3, 4):
                    start = int(
                        input(f"Enter starting city index (0 to {count - 1}): ")
                    )
                    if choice == 3:
                        order, label = graph.bfs(start), "BFS"
                    else:
                        order, label = graph.dfs(start), "DFS"
                    print(
                        f"\n{label} Traversal from {graph.cities[start]}: "
                        + " ".join(order)
                    )
                elif choice == 5:
                    if graph.is_connected():
                        print(
                            "\nThe graph is CONNECTED — All cities are reachable."
                        )
                    else:
                        print(
                            "\nThe graph is NOT CONNECTED — "
                            "Some cities are unreachable."
                        )
                else:
                    print("Invalid choice!")
            except IndexError as exc:
                print(exc)
            except ValueError as exc:
                print(f"Invalid input: {exc}")
            answer = input("\nPress 1 to continue or 0 to exit: ").strip()
        except EOFError:
            return 0
        if answer != "1":
            return 0


if __name__ == "__main__":
    raise SystemExit(main())