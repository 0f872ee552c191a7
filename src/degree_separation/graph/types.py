"""Shared type definitions for graph processing."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TypeAlias

NodeId: TypeAlias = int
EdgeRecord: TypeAlias = tuple[NodeId, NodeId]
AdjacencyMap: TypeAlias = Mapping[NodeId, frozenset[NodeId]]
DistanceMap: TypeAlias = dict[NodeId, int]


@dataclass(frozen=True, slots=True)
class SeparationDistribution:
    """Probability of each positive path length, with its most likely length."""

    distribution: dict[int, float] = field(default_factory=dict)
    mode_degree: int = 0
    mode_probability: float = 0.0


@dataclass(frozen=True, slots=True)
class SeparationStats:
    """All statistics computed from one sweep of per-node BFS runs."""

    max_degree_of_separation: int
    average_max_degree: float
    connected_components: int
    average_shortest_path_length: float
    mean: float
    std_dev: float
    distribution: SeparationDistribution
    node_count: int = 0
    edge_count: int = 0
