"""Tests for node partitioning."""

import pytest

from degree_separation.solver.partition import partition_nodes


class TestPartitionNodes:
    """Test cases for partition_nodes."""

    def test_round_robin_over_sorted_ids(self) -> None:
        """Test that sorted ids are dealt across chunks in turn."""
        assert partition_nodes([5, 1, 4, 2, 3], 2) == [[1, 3, 5], [2, 4]]

    def test_every_node_assigned_once(self) -> None:
        """Test that chunks cover all nodes without overlap."""
        nodes = list(range(100))
        chunks = partition_nodes(nodes, 7)
        flattened = [node for chunk in chunks for node in chunk]
        assert sorted(flattened) == nodes
        assert len(chunks) == 7

    def test_drops_empty_chunks(self) -> None:
        """Test that asking for more chunks than nodes gives one node per chunk."""
        assert partition_nodes([3, 1], 8) == [[1], [3]]
        assert partition_nodes([], 4) == []

    def test_rejects_non_positive_chunk_count(self) -> None:
        """Test that zero chunks is an error."""
        with pytest.raises(ValueError):
            partition_nodes([1, 2], 0)
