"""Tests for the per-metric separation statistics."""

import math

import pytest

from degree_separation.graph.build import build_adjacency
from degree_separation.stats.aggregate import (
    calculate_average_max_degree,
    calculate_average_shortest_path_length,
    calculate_connected_components,
    calculate_max_degree_of_separation,
    calculate_mean_and_std_dev,
    calculate_normalized_separation_distribution,
    calculate_separation_stats,
    count_connected_components,
)


class TestPathGraph:
    """Statistics of 1 - 2 - 3 (eccentricities 2, 1, 2)."""

    def test_max_degree_of_separation(self, path_graph) -> None:
        assert calculate_max_degree_of_separation(path_graph) == 2

    def test_average_max_degree(self, path_graph) -> None:
        assert calculate_average_max_degree(path_graph) == pytest.approx(5 / 3)

    def test_connected_components_proxy(self, path_graph) -> None:
        """Two distinct eccentricities, so the proxy counts two."""
        assert calculate_connected_components(path_graph) == 2
        assert count_connected_components(path_graph) == 1

    def test_average_shortest_path_length(self, path_graph) -> None:
        assert calculate_average_shortest_path_length(path_graph) == pytest.approx(8 / 6)

    def test_mean_and_std_dev(self, path_graph) -> None:
        # Distances {1, 2, 1, 1, 2, 1}.
        mean, std_dev = calculate_mean_and_std_dev(path_graph)
        assert mean == pytest.approx(8 / 6)
        assert std_dev == pytest.approx(math.sqrt(2 / 9))

    def test_normalized_separation_distribution(self, path_graph) -> None:
        distribution, degree, percentage = calculate_normalized_separation_distribution(
            path_graph
        )
        assert distribution == pytest.approx({1: 4 / 6, 2: 2 / 6})
        assert sum(distribution.values()) == pytest.approx(1.0, abs=1e-9)
        assert degree == 1
        assert percentage == pytest.approx(4 / 6)


class TestDisconnected:
    """Edge 1 - 2 with a third node that has no edges."""

    def test_without_isolated_node(self) -> None:
        """Node 3 is absent, so only the 1 - 2 component is measured."""
        adjacency = build_adjacency([(1, 2)])
        assert 3 not in adjacency
        assert calculate_max_degree_of_separation(adjacency) == 1
        assert calculate_average_max_degree(adjacency) == 1.0
        assert calculate_connected_components(adjacency) == 1
        assert calculate_average_shortest_path_length(adjacency) == 1.0
        assert calculate_mean_and_std_dev(adjacency) == (1.0, 0.0)
        assert calculate_normalized_separation_distribution(adjacency) == ({1: 1.0}, 1, 1.0)

    def test_with_isolated_node(self) -> None:
        """Node 3 is present with no neighbors and contributes eccentricity 0."""
        adjacency = build_adjacency([(1, 2)], isolated_nodes=[3])
        assert calculate_max_degree_of_separation(adjacency) == 1
        assert calculate_average_max_degree(adjacency) == pytest.approx(2 / 3)
        assert calculate_connected_components(adjacency) == 2
        assert count_connected_components(adjacency) == 2
        # Self-distances are excluded, so path statistics are unchanged.
        assert calculate_average_shortest_path_length(adjacency) == 1.0
        assert calculate_mean_and_std_dev(adjacency) == (1.0, 0.0)

    def test_equal_diameters_collapse_in_proxy(self) -> None:
        """Two components with the same diameter count once in the proxy."""
        adjacency = build_adjacency([(1, 2), (3, 4)])
        assert calculate_connected_components(adjacency) == 1
        assert count_connected_components(adjacency) == 2


class TestDegenerateInputs:
    """Empty and edgeless graphs produce zeros for every metric."""

    def test_empty_graph(self) -> None:
        adjacency = build_adjacency([])
        assert calculate_max_degree_of_separation(adjacency) == 0
        assert calculate_average_max_degree(adjacency) == 0.0
        assert calculate_connected_components(adjacency) == 0
        assert calculate_average_shortest_path_length(adjacency) == 0.0
        assert calculate_mean_and_std_dev(adjacency) == (0.0, 0.0)
        assert calculate_normalized_separation_distribution(adjacency) == ({}, 0, 0.0)
        assert count_connected_components(adjacency) == 0

    def test_only_isolated_nodes(self) -> None:
        adjacency = build_adjacency([], isolated_nodes=[1, 2, 3])
        assert calculate_max_degree_of_separation(adjacency) == 0
        assert calculate_average_max_degree(adjacency) == 0.0
        # Every eccentricity is 0: one distinct value.
        assert calculate_connected_components(adjacency) == 1
        assert count_connected_components(adjacency) == 3
        assert calculate_average_shortest_path_length(adjacency) == 0.0
        assert calculate_mean_and_std_dev(adjacency) == (0.0, 0.0)
        assert calculate_normalized_separation_distribution(adjacency) == ({}, 0, 0.0)


def test_std_dev_zero_when_all_distances_equal() -> None:
    complete = build_adjacency([(a, b) for a in range(4) for b in range(a + 1, 4)])
    assert calculate_mean_and_std_dev(complete) == (1.0, 0.0)


def test_std_dev_positive_when_distances_differ(ring_with_tail) -> None:
    _, std_dev = calculate_mean_and_std_dev(ring_with_tail)
    assert std_dev > 0


def test_distribution_sums_to_one(ring_with_tail) -> None:
    distribution, _, _ = calculate_normalized_separation_distribution(ring_with_tail)
    assert sum(distribution.values()) == pytest.approx(1.0, abs=1e-9)


def test_single_sweep_matches_per_metric_functions(ring_with_tail) -> None:
    stats = calculate_separation_stats(ring_with_tail)
    mean, std_dev = calculate_mean_and_std_dev(ring_with_tail)
    distribution, degree, percentage = calculate_normalized_separation_distribution(
        ring_with_tail
    )

    assert stats.max_degree_of_separation == calculate_max_degree_of_separation(ring_with_tail)
    assert stats.average_max_degree == pytest.approx(calculate_average_max_degree(ring_with_tail))
    assert stats.connected_components == calculate_connected_components(ring_with_tail)
    assert stats.average_shortest_path_length == pytest.approx(
        calculate_average_shortest_path_length(ring_with_tail)
    )
    assert stats.mean == pytest.approx(mean)
    assert stats.std_dev == pytest.approx(std_dev)
    assert stats.distribution.distribution == pytest.approx(distribution)
    assert stats.distribution.mode_degree == degree
    assert stats.distribution.mode_probability == pytest.approx(percentage)
    assert stats.node_count == len(ring_with_tail)
    assert stats.edge_count == 12
