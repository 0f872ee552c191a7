"""Reading an edge list and sweeping BFS from every node, serially or on a pool."""

import logging
import time
from collections.abc import Iterable
from functools import partial
from pathlib import Path

from degree_separation.graph.bfs import iter_distance_maps
from degree_separation.graph.build import build_adjacency, count_edges
from degree_separation.graph.parse import read_edge_records
from degree_separation.graph.types import AdjacencyMap, NodeId, SeparationStats
from degree_separation.report import print_report
from degree_separation.solver.execution import is_gil_enabled, plan_sweep
from degree_separation.solver.partition import partition_nodes
from degree_separation.stats.accumulate import SeparationAccumulator

logger = logging.getLogger(__name__)

# Adjacency map of a process-pool worker, set once by install_adjacency.
_worker_adjacency: AdjacencyMap | None = None


def sweep_chunk(adjacency: AdjacencyMap, nodes: Iterable[NodeId]) -> SeparationAccumulator:
    """Run BFS from each node in a chunk and fold the results."""
    accumulator = SeparationAccumulator()
    for _, distances in iter_distance_maps(adjacency, nodes):
        accumulator.add(distances)
    return accumulator


def install_adjacency(adjacency: AdjacencyMap) -> None:
    """Process-pool initializer: keep the graph so chunks only carry node ids."""
    global _worker_adjacency
    _worker_adjacency = adjacency


def sweep_installed_chunk(nodes: list[NodeId]) -> SeparationAccumulator:
    """Sweep a chunk against the adjacency map installed in this worker."""
    if _worker_adjacency is None:
        raise RuntimeError("worker has no adjacency map installed")
    return sweep_chunk(_worker_adjacency, nodes)


def compute_stats(
    adjacency: AdjacencyMap,
    workers: int | None = None,
    chunks: int | None = None,
) -> SeparationStats:
    """
    Compute separation statistics with one BFS per node.

    BFS runs are independent, so nodes are split into chunks and swept on the
    planned pool. Partial accumulators are merged here, in the calling
    thread only.
    """
    plan = plan_sweep(len(adjacency), workers=workers, chunks=chunks)
    total = SeparationAccumulator()

    if plan.mode == "serial":
        total.merge(sweep_chunk(adjacency, adjacency))
        return total.finalize(edge_count=count_edges(adjacency))

    node_chunks = partition_nodes(adjacency, plan.chunks)
    logger.debug(
        "Sweeping %d nodes in %d chunks on %d %s",
        len(adjacency),
        len(node_chunks),
        plan.workers,
        plan.mode,
    )

    if plan.mode == "processes":
        executor = plan.executor_class(
            max_workers=plan.workers,
            initializer=install_adjacency,
            initargs=(adjacency,),
        )
        task = sweep_installed_chunk
    else:
        executor = plan.executor_class(max_workers=plan.workers)
        task = partial(sweep_chunk, adjacency)

    with executor:
        for index, partial_result in enumerate(executor.map(task, node_chunks)):
            total.merge(partial_result)
            logger.debug(
                "Chunk %d/%d merged (%d nodes)",
                index + 1,
                len(node_chunks),
                partial_result.node_count,
            )

    return total.finalize(edge_count=count_edges(adjacency))


def solve(
    input_path: str,
    workers: int | None = None,
    isolated_nodes: Iterable[NodeId] = (),
) -> SeparationStats:
    """
    Compute separation statistics for the graph in an edge-list CSV file.

    Two phases:
    1. Read the edge list into a symmetric adjacency map
    2. Sweep BFS from every node in parallel and fold the statistics
    """
    total_start = time.perf_counter()
    input_file = Path(input_path)

    gil_status = "enabled" if is_gil_enabled() else "disabled"
    workers_desc = "auto" if workers is None else str(workers)
    logger.info(f"Starting: file={input_file.name}, workers={workers_desc}, GIL={gil_status}")

    # Phase 1: read and build.
    t1_start = time.perf_counter()
    adjacency = build_adjacency(read_edge_records(str(input_file)), isolated_nodes)
    t1 = time.perf_counter() - t1_start
    logger.info(
        "Phase 1 done: %d nodes, %d edges in %.2fs",
        len(adjacency),
        count_edges(adjacency),
        t1,
    )

    if not adjacency:
        logger.warning("Graph is empty; all statistics are zero")

    # Phase 2: BFS sweep.
    plan = plan_sweep(len(adjacency), workers=workers)
    logger.info("Sweep plan: %s, %d workers, %d chunks", plan.mode, plan.workers, plan.chunks)
    t2_start = time.perf_counter()
    stats = compute_stats(adjacency, workers=workers)
    t2 = time.perf_counter() - t2_start
    logger.info("Phase 2 done: %d BFS runs in %.2fs", stats.node_count, t2)

    if adjacency and not stats.distribution.distribution:
        logger.warning("Graph has no edges between distinct nodes; path statistics are zero")

    total_time = time.perf_counter() - total_start
    logger.info(
        "Result: max separation %d, mean %.4f (total %.2fs)",
        stats.max_degree_of_separation,
        stats.mean,
        total_time,
    )
    return stats


def main_solve(
    input_path: str,
    workers: int | None = None,
    isolated_nodes: Iterable[NodeId] = (),
    output_format: str = "text",
) -> None:
    """Main entry point that prints the report to stdout."""
    stats = solve(input_path, workers=workers, isolated_nodes=isolated_nodes)
    print_report(stats, output_format)
