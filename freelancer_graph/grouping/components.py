"""Connected components of a similarity graph by breadth-first search."""

from __future__ import annotations

import operator
from collections import deque
from typing import Sequence


class MalformedAdjacencyError(ValueError):
    """Raised when a neighbor list holds an index outside the graph."""


def find_components(adjacency: Sequence[Sequence[int]]) -> list[list[int]]:
    """Partition graph nodes into connected components.

    Start nodes are taken in ascending index order, so clusters come out
    ordered by their smallest member. Within a cluster, members appear in
    BFS discovery order from that start node.

    Args:
        adjacency: Symmetric adjacency list of N neighbor lists

    Returns:
        List of clusters covering every index in ``range(N)`` exactly once

    Raises:
        MalformedAdjacencyError: If a neighbor is negative, not an integer,
            or not smaller than N. No partial result is returned.

    """
    n = len(adjacency)
    # Unvisited nodes are False; queued and visited nodes are True.
    discovered = [False] * n
    clusters: list[list[int]] = []

    for start in range(n):
        if discovered[start]:
            continue

        cluster: list[int] = []
        queue = deque([start])
        discovered[start] = True

        while queue:
            current = queue.popleft()
            cluster.append(current)

            for entry in adjacency[current]:
                neighbor = _checked_index(entry, current, n)
                if not discovered[neighbor]:
                    discovered[neighbor] = True
                    queue.append(neighbor)

        clusters.append(cluster)

    return clusters


def _checked_index(entry: object, node: int, n: int) -> int:
    try:
        index = operator.index(entry)  # type: ignore[arg-type]
    except TypeError:
        raise MalformedAdjacencyError(
            f"Malformed adjacency structure: node {node} lists non-integer neighbor {entry!r}",
        ) from None
    if not 0 <= index < n:
        raise MalformedAdjacencyError(
            f"Malformed adjacency structure: node {node} lists neighbor {index} "
            f"outside range 0..{n - 1}",
        )
    return index
