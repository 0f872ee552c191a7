"""Single-sweep folding of per-node distance maps into separation statistics."""

import math
from collections import Counter
from dataclasses import dataclass, field

from degree_separation.graph.types import DistanceMap, SeparationDistribution, SeparationStats


def eccentricity(distances: DistanceMap) -> int:
    """Largest distance in a BFS result, or 0 if it is empty."""
    return max(distances.values(), default=0)


def normalize_distribution(tally: Counter[int]) -> SeparationDistribution:
    """
    Turn path-length frequencies into probabilities.

    The mode is the most frequent length; on a tie the smallest length wins.
    An empty tally gives an empty distribution with mode 0 and probability 0.0.
    """
    total = sum(tally.values())
    if total == 0:
        return SeparationDistribution()

    degrees = sorted(tally)
    distribution = {degree: tally[degree] / total for degree in degrees}
    # max() keeps the first maximum, and degrees are ascending.
    mode = max(degrees, key=tally.__getitem__)
    return SeparationDistribution(distribution, mode, distribution[mode])


@dataclass(slots=True)
class SeparationAccumulator:
    """
    Partial statistics over any subset of BFS sources.

    Accumulators built from disjoint node subsets can be merged in any order,
    which lets workers fold their own chunk and hand back one object.
    """

    eccentricities: Counter[int] = field(default_factory=Counter)
    distances: Counter[int] = field(default_factory=Counter)

    def add(self, distances: DistanceMap) -> None:
        """Fold one node's BFS result."""
        self.eccentricities[eccentricity(distances)] += 1
        tally = Counter(distances.values())
        # Self-distance is not a separation.
        tally.pop(0, None)
        self.distances.update(tally)

    def merge(self, other: "SeparationAccumulator") -> "SeparationAccumulator":
        """Add another accumulator's counts into this one."""
        self.eccentricities.update(other.eccentricities)
        self.distances.update(other.distances)
        return self

    @property
    def node_count(self) -> int:
        return sum(self.eccentricities.values())

    @property
    def path_count(self) -> int:
        return sum(self.distances.values())

    def finalize(self, edge_count: int = 0) -> SeparationStats:
        """
        Compute the final statistics.

        Empty inputs produce zeros rather than NaN: no nodes gives zero for
        every value, and no positive distances gives 0.0 for the averages.
        """
        nodes = self.node_count
        paths = self.path_count

        if nodes:
            eccentricity_sum = sum(ecc * count for ecc, count in self.eccentricities.items())
            average_max_degree = eccentricity_sum / nodes
        else:
            average_max_degree = 0.0

        if paths:
            mean = sum(degree * count for degree, count in self.distances.items()) / paths
            # Sorted so the float sum does not depend on merge order.
            squared = sum(
                count * (degree - mean) ** 2 for degree, count in sorted(self.distances.items())
            )
            variance = squared / paths
            std_dev = math.sqrt(variance)
        else:
            mean = std_dev = 0.0

        return SeparationStats(
            max_degree_of_separation=max(self.eccentricities, default=0),
            average_max_degree=average_max_degree,
            connected_components=len(self.eccentricities),
            average_shortest_path_length=mean,
            mean=mean,
            std_dev=std_dev,
            distribution=normalize_distribution(self.distances),
            node_count=nodes,
            edge_count=edge_count,
        )
