"""Splitting BFS sources into chunks of work."""

from collections.abc import Iterable

from degree_separation.graph.types import NodeId


def partition_nodes(nodes: Iterable[NodeId], num_chunks: int) -> list[list[NodeId]]:
    """
    Deal sorted node ids round-robin into at most num_chunks chunks.

    Round-robin keeps neighbouring ids (often one dense region of the graph)
    spread across workers. Empty chunks are dropped.
    """
    if num_chunks < 1:
        raise ValueError(f"num_chunks must be positive, got {num_chunks}")

    ordered = sorted(nodes)
    chunks = [ordered[i::num_chunks] for i in range(num_chunks)]
    return [chunk for chunk in chunks if chunk]
