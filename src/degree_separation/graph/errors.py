"""Exceptions raised while reading and traversing graphs."""


class GraphError(Exception):
    """Base class for graph errors."""


class EdgeListError(GraphError, ValueError):
    """A row of the edge list could not be parsed."""

    def __init__(self, message: str, line_number: int):
        super().__init__(f"line {line_number}: {message}")
        self.line_number = line_number


class NodeNotFoundError(GraphError, KeyError):
    """BFS was asked to start from a node the adjacency map does not contain."""

    def __init__(self, node: int):
        super().__init__(node)
        self.node = node

    def __str__(self) -> str:
        return f"node {self.node} is not in the adjacency map"


class AsymmetricAdjacencyError(GraphError, ValueError):
    """An adjacency map lists v as a neighbor of u but not u of v."""

    def __init__(self, node: int, neighbor: int):
        super().__init__(f"{neighbor} is a neighbor of {node} but not the reverse")
        self.node = node
        self.neighbor = neighbor
