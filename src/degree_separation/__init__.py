"""Degree Separation - shortest-path statistics of undirected graphs."""

from degree_separation.solver.solve import compute_stats, main_solve, solve
from degree_separation.stats.aggregate import calculate_separation_stats

__all__ = ["calculate_separation_stats", "compute_stats", "main_solve", "solve"]
