"""
Separation statistics, one function per metric.

Each calculate_* function runs its own BFS from every node. Use
calculate_separation_stats to get all of them from a single sweep.
"""

import math
from collections import Counter
from collections.abc import Iterator

from degree_separation.graph.bfs import bfs, iter_distance_maps
from degree_separation.graph.build import count_edges
from degree_separation.graph.types import AdjacencyMap, SeparationStats
from degree_separation.stats.accumulate import (
    SeparationAccumulator,
    eccentricity,
    normalize_distribution,
)


def _eccentricities(adjacency: AdjacencyMap) -> list[int]:
    return [eccentricity(distances) for _, distances in iter_distance_maps(adjacency)]


def _positive_distances(adjacency: AdjacencyMap) -> Iterator[int]:
    for _, distances in iter_distance_maps(adjacency):
        for distance in distances.values():
            if distance > 0:
                yield distance


def calculate_max_degree_of_separation(adjacency: AdjacencyMap) -> int:
    """Largest eccentricity of any node (the diameter within each component)."""
    return max(_eccentricities(adjacency), default=0)


def calculate_average_max_degree(adjacency: AdjacencyMap) -> float:
    """Mean eccentricity over all nodes, 0.0 for an empty graph."""
    eccentricities = _eccentricities(adjacency)
    if not eccentricities:
        return 0.0
    return sum(eccentricities) / len(eccentricities)


def calculate_connected_components(adjacency: AdjacencyMap) -> int:
    """
    Estimate the component count as the number of distinct eccentricities.

    This is a proxy: components sharing a diameter are counted once, and a
    component whose nodes differ in eccentricity is counted more than once.
    See count_connected_components for a traversal-based count.
    """
    return len(set(_eccentricities(adjacency)))


def calculate_average_shortest_path_length(adjacency: AdjacencyMap) -> float:
    """Mean distance over ordered reachable pairs of distinct nodes."""
    total_length = 0
    total_paths = 0
    for distance in _positive_distances(adjacency):
        total_length += distance
        total_paths += 1

    if total_paths == 0:
        return 0.0
    return total_length / total_paths


def calculate_mean_and_std_dev(adjacency: AdjacencyMap) -> tuple[float, float]:
    """Mean and population standard deviation of all positive distances."""
    all_distances = list(_positive_distances(adjacency))
    if not all_distances:
        return 0.0, 0.0

    mean = sum(all_distances) / len(all_distances)
    variance = sum((distance - mean) ** 2 for distance in all_distances) / len(all_distances)
    return mean, math.sqrt(variance)


def calculate_normalized_separation_distribution(
    adjacency: AdjacencyMap,
) -> tuple[dict[int, float], int, float]:
    """
    Probability of each path length, plus the most common length and its probability.

    Ties for the most common length go to the shortest one.
    """
    result = normalize_distribution(Counter(_positive_distances(adjacency)))
    return result.distribution, result.mode_degree, result.mode_probability


def calculate_separation_stats(adjacency: AdjacencyMap) -> SeparationStats:
    """Compute every statistic from one BFS per node."""
    accumulator = SeparationAccumulator()
    for _, distances in iter_distance_maps(adjacency):
        accumulator.add(distances)
    return accumulator.finalize(edge_count=count_edges(adjacency))


def count_connected_components(adjacency: AdjacencyMap) -> int:
    """Count connected components by labelling each node's reachable set once."""
    seen: set[int] = set()
    components = 0
    for node in adjacency:
        if node not in seen:
            components += 1
            seen.update(bfs(adjacency, node))
    return components
