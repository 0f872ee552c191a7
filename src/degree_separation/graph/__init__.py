from degree_separation.graph.bfs import bfs, iter_distance_maps
from degree_separation.graph.build import build_adjacency, count_edges, validate_symmetric
from degree_separation.graph.parse import read_edge_records

__all__ = [
    "bfs",
    "build_adjacency",
    "count_edges",
    "iter_distance_maps",
    "read_edge_records",
    "validate_symmetric",
]
