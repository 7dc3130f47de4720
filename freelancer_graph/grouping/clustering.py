"""End-to-end similarity clustering of freelancer records."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from freelancer_graph.grouping.components import find_components
from freelancer_graph.grouping.graph_builder import (
    SIMILARITY_THRESHOLD,
    build_graph,
    count_edges,
)
from freelancer_graph.records import Freelancer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClusteringResult:
    """Snapshot of one clustering run.

    Attributes:
        adjacency: Neighbor lists of the similarity graph
        clusters: Connected components, each an ordered list of record indices
        threshold: Similarity threshold used to link records [0,1]
    """

    adjacency: list[list[int]]
    clusters: list[list[int]]
    threshold: float

    def __post_init__(self):
        """Validate clustering result after initialization."""
        if not 0 <= self.threshold <= 1:
            raise ValueError(f"Threshold {self.threshold} must be in [0,1]")

    @property
    def edge_count(self) -> int:
        return count_edges(self.adjacency)

    @property
    def cluster_count(self) -> int:
        return len(self.clusters)


def cluster_records(
    records: Sequence[Freelancer],
    threshold: float = SIMILARITY_THRESHOLD,
) -> ClusteringResult:
    """Build the similarity graph and split it into connected components.

    Args:
        records: Records addressed by position
        threshold: Link records whose similarity is strictly above this

    Returns:
        ClusteringResult holding the graph and its clusters

    """
    adjacency = build_graph(records, threshold=threshold)
    clusters = find_components(adjacency)

    result = ClusteringResult(adjacency=adjacency, clusters=clusters, threshold=threshold)
    logger.info(
        f"Clustered {len(records)} records into {result.cluster_count} clusters "
        f"({result.edge_count} edges above threshold {threshold})",
    )
    return result
