"""Shared graph fixtures."""

import pytest

from degree_separation.graph.build import build_adjacency


@pytest.fixture
def path_graph():
    """1 - 2 - 3"""
    return build_adjacency([(1, 2), (2, 3)])


@pytest.fixture
def ring_with_tail():
    """
    Ring 1..6 with a chord 1 - 4, plus a tail 6 - 7 - 8, and a separate
    component 10 - 11 - 12 - 10.
    """
    edges = [(1, 2), (2, 3), (3, 4), (4, 5), (5, 6), (6, 1), (1, 4), (6, 7), (7, 8)]
    edges += [(10, 11), (11, 12), (12, 10)]
    return build_adjacency(edges)
