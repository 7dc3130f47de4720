"""Unit tests for similarity graph construction."""

import pytest

from freelancer_graph.grouping.graph_builder import (
    SIMILARITY_THRESHOLD,
    build_graph,
    count_edges,
)


def _table_scorer(table):
    """Scorer reading pair scores from a {(i, j): score} table keyed by record id."""

    def scorer(a, b):
        key = (min(a.id, b.id), max(a.id, b.id))
        return table.get(key, 0.0)

    return scorer


class TestBuildGraph:
    """Test build_graph."""

    def test_empty_input(self):
        assert build_graph([]) == []

    def test_single_record_has_no_edges(self, make_freelancer):
        adjacency = build_graph([make_freelancer(0)])
        assert adjacency == [[]]
        assert count_edges(adjacency) == 0

    def test_identical_records_are_linked_both_ways(self, make_freelancer):
        records = [
            make_freelancer(1),
            make_freelancer(2),
            make_freelancer(
                3,
                job_category="Design",
                platform="Fiverr",
                client_region="Europe",
                experience_level="Beginner",
            ),
        ]

        adjacency = build_graph(records)

        assert adjacency == [[1], [0], []]

    def test_score_below_threshold_not_linked(self, make_freelancer):
        """Test that job category + platform (0.55) does not link."""
        records = [
            make_freelancer(0),
            make_freelancer(1, client_region="Europe", experience_level="Beginner"),
        ]
        assert build_graph(records) == [[], []]

    def test_score_equal_to_threshold_not_linked(self, make_freelancer):
        """Test that the comparison is strictly greater than the threshold."""
        records = [make_freelancer(0), make_freelancer(1, job_category="Design")]
        assert build_graph(records) == [[], []]

    def test_score_just_above_threshold_linked(self, make_freelancer):
        records = [make_freelancer(0), make_freelancer(1, platform="Fiverr")]
        assert build_graph(records) == [[1], [0]]

    def test_neighbor_lists_are_ascending(self, make_freelancer):
        records = [make_freelancer(i) for i in range(4)]

        adjacency = build_graph(records)

        assert adjacency == [[1, 2, 3], [0, 2, 3], [0, 1, 3], [0, 1, 2]]
        assert count_edges(adjacency) == 6

    def test_no_self_loops(self, make_freelancer):
        records = [make_freelancer(i) for i in range(3)]
        adjacency = build_graph(records)
        for node, neighbors in enumerate(adjacency):
            assert node not in neighbors

    def test_custom_threshold(self, make_freelancer):
        records = [
            make_freelancer(0),
            make_freelancer(1, client_region="Europe", experience_level="Beginner"),
        ]
        assert build_graph(records, threshold=0.5) == [[1], [0]]

    def test_custom_scorer(self, make_freelancer):
        records = [make_freelancer(i) for i in range(3)]
        scorer = _table_scorer({(0, 2): 0.9})

        assert build_graph(records, scorer=scorer) == [[2], [], [0]]

    def test_each_pair_scored_once_in_order(self, make_freelancer):
        records = [make_freelancer(i) for i in range(4)]
        calls = []

        def scorer(a, b):
            calls.append((a.id, b.id))
            return 0.0

        build_graph(records, scorer=scorer)

        assert calls == [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)]

    @pytest.mark.parametrize("threshold", [-0.1, 1.5])
    def test_invalid_threshold(self, make_freelancer, threshold):
        with pytest.raises(ValueError, match="must be in \\[0,1\\]"):
            build_graph([make_freelancer(0)], threshold=threshold)

    def test_default_threshold(self):
        assert SIMILARITY_THRESHOLD == 0.7


class TestCountEdges:
    """Test count_edges."""

    def test_count_edges(self):
        assert count_edges([[1, 2], [0], [0]]) == 2

    def test_count_edges_empty(self):
        assert count_edges([]) == 0
