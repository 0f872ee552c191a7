"""Rendering separation statistics for the terminal."""

import json

from degree_separation.graph.types import SeparationStats

SEPARATOR = "----------------"

OUTPUT_FORMATS = ("text", "json")


def format_report(stats: SeparationStats) -> str:
    """Render statistics as one labelled line per value."""
    distribution = stats.distribution
    lines = [
        f"Max Degree of Separation: {stats.max_degree_of_separation}",
        f"Average Max Degree: {stats.average_max_degree}",
        f"Number of Connected Components: {stats.connected_components}",
        f"Average Shortest Path Length: {stats.average_shortest_path_length}",
        f"Mean of Separations: {stats.mean}",
        f"Standard Deviation of Separations: {stats.std_dev}",
        SEPARATOR,
        "Separation Distribution (degree: percentage): "
        f"{dict(sorted(distribution.distribution.items()))}",
        SEPARATOR,
        f"Degree with Maximum Percentage: {distribution.mode_degree}, "
        f"Percentage: {distribution.mode_probability}",
    ]
    return "\n".join(lines)


def format_json(stats: SeparationStats) -> str:
    """Render statistics as a JSON object."""
    distribution = stats.distribution
    payload = {
        "nodes": stats.node_count,
        "edges": stats.edge_count,
        "max_degree_of_separation": stats.max_degree_of_separation,
        "average_max_degree": stats.average_max_degree,
        "connected_components": stats.connected_components,
        "average_shortest_path_length": stats.average_shortest_path_length,
        "mean": stats.mean,
        "std_dev": stats.std_dev,
        "separation_distribution": {
            str(degree): probability
            for degree, probability in sorted(distribution.distribution.items())
        },
        "degree_with_max_percentage": distribution.mode_degree,
        "max_percentage": distribution.mode_probability,
    }
    return json.dumps(payload, indent=2)


def print_report(stats: SeparationStats, output_format: str = "text") -> None:
    """Print statistics to stdout in the requested format."""
    if output_format == "text":
        print(format_report(stats))
    elif output_format == "json":
        print(format_json(stats))
    else:
        raise ValueError(
            f"unknown output format {output_format!r}, expected one of {OUTPUT_FORMATS}"
        )
