from degree_separation.stats.accumulate import SeparationAccumulator
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

__all__ = [
    "SeparationAccumulator",
    "calculate_average_max_degree",
    "calculate_average_shortest_path_length",
    "calculate_connected_components",
    "calculate_max_degree_of_separation",
    "calculate_mean_and_std_dev",
    "calculate_normalized_separation_distribution",
    "calculate_separation_stats",
    "count_connected_components",
]
