"""Breadth-first search distances over an adjacency map."""

from collections import deque
from collections.abc import Iterable, Iterator

from degree_separation.graph.errors import NodeNotFoundError
from degree_separation.graph.types import AdjacencyMap, DistanceMap, NodeId


def bfs(adjacency: AdjacencyMap, source: NodeId) -> DistanceMap:
    """
    Find the shortest hop count from source to every reachable node.

    Args:
        adjacency: Symmetric adjacency map.
        source: Start node; must be a key of adjacency.

    Returns:
        Mapping of node -> distance. The source maps to 0 and unreachable
        nodes are absent.
    """
    if source not in adjacency:
        raise NodeNotFoundError(source)

    visited = {source}
    queue = deque([(source, 0)])
    distances: DistanceMap = {}

    while queue:
        node, distance = queue.popleft()
        distances[node] = distance

        for neighbor in adjacency[node]:
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append((neighbor, distance + 1))

    return distances


def iter_distance_maps(
    adjacency: AdjacencyMap,
    nodes: Iterable[NodeId] | None = None,
) -> Iterator[tuple[NodeId, DistanceMap]]:
    """Yield (node, distances) for each node, defaulting to every node."""
    for node in adjacency if nodes is None else nodes:
        yield node, bfs(adjacency, node)
