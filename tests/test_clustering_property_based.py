"""Property-based tests for similarity clustering using Hypothesis."""

import itertools

import pytest
from hypothesis import given, strategies as st

from freelancer_graph.grouping import build_graph, count_edges, find_components
from freelancer_graph.records import Freelancer
from freelancer_graph.similarity.scoring import ATTRIBUTE_WEIGHTS, similarity_score

# Small label pools so that matches are common
freelancers = st.builds(
    Freelancer,
    id=st.integers(min_value=0, max_value=10_000),
    job_category=st.sampled_from(["Web Development", "Design", "Writing", ""]),
    platform=st.sampled_from(["Upwork", "Fiverr", ""]),
    experience_level=st.sampled_from(["Beginner", "Intermediate", "Expert"]),
    client_region=st.sampled_from(["USA", "Europe", ""]),
    earnings_usd=st.floats(min_value=0, max_value=1e6),
    hourly_rate=st.floats(min_value=0, max_value=500),
    job_success_rate=st.floats(min_value=0, max_value=100),
)
record_lists = st.lists(freelancers, max_size=25)
thresholds = st.sampled_from([0.0, 0.2, 0.45, 0.5, 0.55, 0.7, 0.75, 0.8, 1.0])


def _edges(adjacency):
    return {(i, j) for i, neighbors in enumerate(adjacency) for j in neighbors if i < j}


class TestScoringProperties:
    """Invariants of the similarity scorer."""

    @given(a=freelancers, b=freelancers)
    def test_score_symmetry(self, a, b):
        assert similarity_score(a, b) == similarity_score(b, a)

    @given(a=freelancers, b=freelancers)
    def test_score_is_sum_of_matching_weights(self, a, b):
        expected = sum(
            weight
            for attribute, weight in ATTRIBUTE_WEIGHTS.items()
            if getattr(a, attribute) == getattr(b, attribute)
        )
        score = similarity_score(a, b)

        assert score == pytest.approx(expected)
        assert 0.0 <= score <= 1.0


class TestGraphProperties:
    """Invariants of the adjacency structure."""

    @given(records=record_lists)
    def test_adjacency_symmetric_without_self_loops(self, records):
        adjacency = build_graph(records)

        assert len(adjacency) == len(records)
        for i, neighbors in enumerate(adjacency):
            assert i not in neighbors
            for j in neighbors:
                assert i in adjacency[j]

    @given(records=record_lists, low=thresholds, high=thresholds)
    def test_raising_threshold_never_adds_edges(self, records, low, high):
        low, high = min(low, high), max(low, high)

        low_edges = _edges(build_graph(records, threshold=low))
        high_edges = _edges(build_graph(records, threshold=high))

        assert high_edges <= low_edges
        assert count_edges(build_graph(records, threshold=high)) <= len(low_edges)

    @given(records=record_lists, low=thresholds, high=thresholds)
    def test_lowering_threshold_never_splits_clusters(self, records, low, high):
        """Test that every cluster at the higher threshold sits inside one at the lower."""
        low, high = min(low, high), max(low, high)

        low_clusters = find_components(build_graph(records, threshold=low))
        high_clusters = find_components(build_graph(records, threshold=high))

        owner = {node: c for c, cluster in enumerate(low_clusters) for node in cluster}
        for cluster in high_clusters:
            assert len({owner[node] for node in cluster}) == 1
        assert len(high_clusters) >= len(low_clusters)


class TestComponentProperties:
    """Invariants of the component finder."""

    @given(records=record_lists)
    def test_clusters_partition_all_indices(self, records):
        clusters = find_components(build_graph(records))

        flattened = list(itertools.chain.from_iterable(clusters))
        assert sorted(flattened) == list(range(len(records)))
        assert len(flattened) == len(set(flattened))

    @given(records=record_lists)
    def test_clusters_are_connected_and_closed(self, records):
        """Test that no edge crosses clusters and each cluster starts at its minimum."""
        adjacency = build_graph(records)
        clusters = find_components(adjacency)

        owner = {node: c for c, cluster in enumerate(clusters) for node in cluster}
        for i, j in _edges(adjacency):
            assert owner[i] == owner[j]
        for cluster in clusters:
            assert cluster[0] == min(cluster)
        assert [cluster[0] for cluster in clusters] == sorted(cluster[0] for cluster in clusters)

    @given(records=record_lists)
    def test_idempotent(self, records):
        first = find_components(build_graph(records))
        second = find_components(build_graph(records))

        assert first == second
