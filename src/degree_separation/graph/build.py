"""Adjacency construction utilities for undirected edge lists."""

from collections import defaultdict
from collections.abc import Iterable

from degree_separation.graph.errors import AsymmetricAdjacencyError
from degree_separation.graph.types import AdjacencyMap, EdgeRecord, NodeId


def build_adjacency(
    records: Iterable[EdgeRecord],
    isolated_nodes: Iterable[NodeId] = (),
) -> AdjacencyMap:
    """
    Build a symmetric adjacency map from undirected edges.

    Every edge is recorded in both directions; duplicates collapse via sets.
    Nodes in isolated_nodes that have no edges are added with no neighbors,
    otherwise only nodes that appear in an edge are present.
    """
    neighbors: defaultdict[NodeId, set[NodeId]] = defaultdict(set)

    for node_a, node_b in records:
        neighbors[node_a].add(node_b)
        neighbors[node_b].add(node_a)

    for node in isolated_nodes:
        neighbors.setdefault(node, set())

    return {node: frozenset(adjacent) for node, adjacent in neighbors.items()}


def count_edges(adjacency: AdjacencyMap) -> int:
    """Count distinct undirected edges, self-loops included once."""
    twice = 0
    loops = 0
    for node, adjacent in adjacency.items():
        twice += len(adjacent)
        if node in adjacent:
            loops += 1
    return (twice - loops) // 2 + loops


def validate_symmetric(adjacency: AdjacencyMap) -> None:
    """Raise AsymmetricAdjacencyError on the first one-way neighbor entry."""
    for node, adjacent in adjacency.items():
        for neighbor in adjacent:
            if node not in adjacency.get(neighbor, ()):
                raise AsymmetricAdjacencyError(node, neighbor)
