"""Similarity graph construction and connected-component clustering."""

from .clustering import ClusteringResult, cluster_records
from .components import MalformedAdjacencyError, find_components
from .graph_builder import SIMILARITY_THRESHOLD, build_graph, count_edges

__all__ = [
    "ClusteringResult",
    "MalformedAdjacencyError",
    "SIMILARITY_THRESHOLD",
    "build_graph",
    "cluster_records",
    "count_edges",
    "find_components",
]
