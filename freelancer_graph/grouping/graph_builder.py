"""Similarity graph construction over freelancer records."""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from freelancer_graph.records import Freelancer
from freelancer_graph.similarity.scoring import similarity_score

logger = logging.getLogger(__name__)

SIMILARITY_THRESHOLD = 0.7

Scorer = Callable[[Freelancer, Freelancer], float]


def build_graph(
    records: Sequence[Freelancer],
    threshold: float = SIMILARITY_THRESHOLD,
    scorer: Scorer = similarity_score,
) -> list[list[int]]:
    """Build the undirected similarity graph as an adjacency list.

    Every unordered pair ``i < j`` is scored once, in ascending ``i`` then
    ascending ``j``. Pairs scoring strictly above ``threshold`` are linked in
    both directions, so each neighbor list is in ascending index order.

    Args:
        records: Records addressed by position
        threshold: Link pairs whose score is strictly greater than this
        scorer: Pairwise similarity function

    Returns:
        List of N neighbor lists

    Raises:
        ValueError: If threshold is outside [0, 1]

    """
    if not 0 <= threshold <= 1:
        raise ValueError(f"Threshold {threshold} must be in [0,1]")

    n = len(records)
    adjacency: list[list[int]] = [[] for _ in range(n)]

    for i in range(n):
        for j in range(i + 1, n):
            if scorer(records[i], records[j]) > threshold:
                adjacency[i].append(j)
                adjacency[j].append(i)

    logger.debug(
        f"Built similarity graph with {n} nodes and {count_edges(adjacency)} edges "
        f"above threshold {threshold}",
    )
    return adjacency


def count_edges(adjacency: Sequence[Sequence[int]]) -> int:
    """Count undirected edges in a symmetric adjacency list."""
    return sum(len(neighbors) for neighbors in adjacency) // 2
