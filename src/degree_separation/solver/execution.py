"""Planning how the per-node BFS sweep is run."""

import logging
import os
import sys
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Environment variable forcing a sweep mode: "serial", "threads" or "processes".
DS_EXECUTOR_ENV = "DS_EXECUTOR"

SWEEP_MODES = ("serial", "threads", "processes")

# Graphs smaller than this are swept serially; a pool costs more than it saves.
MIN_PARALLEL_NODES = 256

# Chunks handed out per worker, so slow chunks do not leave workers idle.
CHUNKS_PER_WORKER = 4


@dataclass(frozen=True, slots=True)
class SweepPlan:
    """How many workers sweep how many node chunks, and on what kind of pool."""

    mode: str
    workers: int
    chunks: int

    @property
    def executor_class(self) -> type[Executor] | None:
        if self.mode == "threads":
            return ThreadPoolExecutor
        if self.mode == "processes":
            return ProcessPoolExecutor
        return None


def is_gil_enabled() -> bool:
    """Check if GIL is enabled."""
    try:
        return sys._is_gil_enabled()
    except AttributeError:
        return True


def forced_mode() -> str | None:
    """Sweep mode requested through DS_EXECUTOR, or None if unset or unknown."""
    requested = os.environ.get(DS_EXECUTOR_ENV, "").strip().lower()
    if not requested:
        return None
    if requested not in SWEEP_MODES:
        logger.warning(
            "Ignoring %s=%r, expected one of %s", DS_EXECUTOR_ENV, requested, SWEEP_MODES
        )
        return None
    return requested


def plan_sweep(
    node_count: int,
    workers: int | None = None,
    chunks: int | None = None,
) -> SweepPlan:
    """
    Decide how to run one BFS per node.

    Without a DS_EXECUTOR override, small graphs and a single worker run
    serially. Larger graphs use processes, or threads on a free-threaded
    interpreter, since BFS is pure Python and CPU-bound. Workers and chunks
    never exceed the number of nodes.
    """
    if workers is not None and workers < 1:
        raise ValueError(f"workers must be positive, got {workers}")
    if chunks is not None and chunks < 1:
        raise ValueError(f"chunks must be positive, got {chunks}")

    mode = forced_mode()
    if mode is None:
        if node_count < MIN_PARALLEL_NODES or workers == 1:
            mode = "serial"
        elif is_gil_enabled():
            mode = "processes"
        else:
            mode = "threads"

    if mode == "serial" or node_count == 0:
        return SweepPlan("serial", 1, 1)

    worker_count = min(workers or os.cpu_count() or 1, node_count)
    chunk_count = min(chunks or worker_count * CHUNKS_PER_WORKER, node_count)
    return SweepPlan(mode, worker_count, chunk_count)
