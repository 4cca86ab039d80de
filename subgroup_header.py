"""Split the subgroup-number header row into per-group column clusters.

The second header row holds one cell per week-column. A group without
subgroups owns a single column with an empty cell; a group with subgroups owns
one column per subgroup, each labelled with its number. Two groups with
subgroups may sit side by side without an empty column between them, in which
case a number that does not grow starts the next group.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from errors import CellTypeMismatch, UnparsableSubgroupNumber
from grid import Cell, Row, header_cells, is_empty, is_string

LOGGER = logging.getLogger(__name__)

SUBGROUP_HEADER_ROW = 1
MAX_SUBGROUP_NUMBER = 255

Cluster = Optional[List[int]]


class SubgroupHeaderScanner:
    """State machine over header cells.

    ``current`` is ``None`` while idle, i.e. the last column seen belongs to a
    group without subgroups, and a list while subgroup numbers are collected.
    """

    def __init__(self) -> None:
        self.clusters: List[Cluster] = []
        self.current: Cluster = None
        self._seen_cells = 0

    def feed_empty(self) -> None:
        if self._seen_cells:
            self.clusters.append(self.current)
        self.current = None
        self._seen_cells += 1

    def feed_number(self, number: int) -> None:
        if self.current is None:
            if self._seen_cells:
                self.clusters.append(None)
            self.current = []
        if self.current and number <= self.current[-1]:
            self.clusters.append(self.current)
            self.current = [number]
        else:
            self.current.append(number)
        self._seen_cells += 1

    def finish(self) -> List[Cluster]:
        self.clusters.append(self.current)
        self.current = None
        return self.clusters


def parse_subgroup_number(cell: Cell, row: int, column: int) -> int:
    if not is_string(cell):
        raise CellTypeMismatch(row, column, cell)
    text = cell.strip()
    if not text.isdecimal():
        raise UnparsableSubgroupNumber(row, column, cell)
    number = int(text)
    if not 1 <= number <= MAX_SUBGROUP_NUMBER:
        raise UnparsableSubgroupNumber(row, column, cell)
    return number


def parse_subgroup_header(row: Row, row_index: int = SUBGROUP_HEADER_ROW) -> List[Cluster]:
    """Return one entry per group, left to right.

    ``None`` stands for a group occupying a single column, a list holds the
    subgroup numbers of the group's columns in order.
    """

    scanner = SubgroupHeaderScanner()
    for column, cell in header_cells(row):
        if is_empty(cell):
            scanner.feed_empty()
        else:
            scanner.feed_number(parse_subgroup_number(cell, row_index, column))
    clusters = scanner.finish()
    LOGGER.debug("Subgroup clusters: %s", clusters)
    return clusters


def count_columns(clusters: Sequence[Cluster]) -> int:
    """Number of week-columns the clusters span."""

    return sum(1 if cluster is None else len(cluster) for cluster in clusters)


__all__ = [
    "Cluster",
    "SubgroupHeaderScanner",
    "count_columns",
    "parse_subgroup_header",
    "parse_subgroup_number",
]
