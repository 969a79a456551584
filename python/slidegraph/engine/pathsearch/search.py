"""Uniform-cost shortest-path search over integer node handles."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Path:
    """One frontier entry: a node plus the path that led to it.

    Paths share their prefixes, so extending one is O(1). Iterating walks
    from the tail back towards the source.
    """

    node: int
    cost: int = 0
    previous: Path | None = None

    def extend(self, node: int, weight: int = 1) -> Path:
        return Path(node, self.cost + weight, self)

    def __iter__(self) -> Iterator[Path]:
        path: Path | None = self
        while path is not None:
            yield path
            path = path.previous

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def nodes(self) -> list[int]:
        """Node handles from source to tail."""
        return [p.node for p in self][::-1]


def shortest_path(
    neighbors: Callable[[int], Sequence[int]],
    source: int,
    destination: int,
    weight: int = 1,
) -> Path | None:
    """Return the cheapest path from *source* to *destination*, or ``None``.

    Every edge costs *weight*, so taking frontier entries in insertion order
    is the same as taking the cheapest one first. Visited nodes are tracked
    per call; nothing is written to the graph.
    """
    if weight < 0:
        raise ValueError(f"Edge weight must be non-negative, got {weight}.")

    frontier: deque[Path] = deque([Path(source)])
    visited: set[int] = set()

    while frontier:
        cheapest = frontier.popleft()
        node = cheapest.node
        if node in visited:
            continue  # stale entry
        visited.add(node)

        if node == destination:
            logger.debug(
                "Reached node %d at cost %d after visiting %d nodes",
                destination, cheapest.cost, len(visited),
            )
            return cheapest

        frontier.extend(
            cheapest.extend(n, weight) for n in neighbors(node) if n not in visited
        )

    logger.debug("Node %d unreachable from %d (%d visited)", destination, source, len(visited))
    return None
