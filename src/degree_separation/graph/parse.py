"""Parsing utilities for two-column CSV edge lists."""

import csv
from collections.abc import Iterable, Iterator, Sequence

from degree_separation.graph.errors import EdgeListError
from degree_separation.graph.types import EdgeRecord


def parse_edge_row(row: Sequence[str], line_number: int) -> EdgeRecord | None:
    """
    Parse one CSV row into an undirected edge.

    Returns None for blank rows. Columns after the second are ignored.
    Raises EdgeListError if the row has a single field or a non-integer endpoint.
    """
    if not row or all(not value.strip() for value in row):
        return None

    if len(row) < 2:
        raise EdgeListError(f"expected two endpoints, got {len(row)} field", line_number)

    try:
        return int(row[0]), int(row[1])
    except ValueError:
        raise EdgeListError(
            f"endpoints must be integers, got {row[0]!r}, {row[1]!r}", line_number
        ) from None


def decode_lines(raw_lines: Iterable[bytes]) -> Iterator[str]:
    """Decode raw lines as UTF-8, one at a time so errors carry a line number."""
    for line_number, raw_line in enumerate(raw_lines, start=1):
        try:
            yield raw_line.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise EdgeListError(f"not valid UTF-8 ({exc.reason})", line_number) from None


def iter_edge_records(lines: Iterable[str]) -> Iterator[EdgeRecord]:
    """Yield edges from CSV lines (no header row), skipping blank rows."""
    reader = csv.reader(lines)
    while True:
        try:
            row = next(reader)
        except StopIteration:
            return
        except csv.Error as exc:
            raise EdgeListError(str(exc), reader.line_num) from None

        parsed = parse_edge_row(row, reader.line_num)
        if parsed is not None:
            yield parsed


def read_edge_records(path: str) -> Iterator[EdgeRecord]:
    """Read and parse all edges from a CSV file."""
    with open(path, "rb") as handle:
        yield from iter_edge_records(decode_lines(handle))
