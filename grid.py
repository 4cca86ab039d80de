from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Sequence, Tuple, Union

Cell = Union[None, str, float, int]
Row = Sequence[Cell]

# Columns 0..2 hold the day, the lesson number and the lesson time.
LEAD_IN_CELLS = 3
# Every class column is followed by its (merged) room column.
CELL_STRIDE = 2
HEADER_ROWS = 2

DAYS_PER_WEEK = 7
LESSONS_PER_DAY = 7
MAX_LESSON_PAIRS = DAYS_PER_WEEK * LESSONS_PER_DAY

SHEETS_PER_WORKBOOK = 4


@dataclass
class Sheet:
    """One named grid of a workbook."""

    name: str
    rows: List[List[Cell]] = field(default_factory=list)


def is_empty(cell: Cell) -> bool:
    return cell is None or cell == ""


def is_string(cell: Cell) -> bool:
    return isinstance(cell, str)


def slot_position(pair_index: int) -> Tuple[int, int]:
    """Return ``(day, lesson)`` for the zero-based index of a body row pair."""

    return divmod(pair_index, LESSONS_PER_DAY)


def header_cells(row: Row) -> List[Tuple[int, Cell]]:
    """Return ``(column, cell)`` for every class column of a header row."""

    return [
        (column, row[column])
        for column in range(LEAD_IN_CELLS, len(row), CELL_STRIDE)
    ]


def column_cells(row: Row, column: int) -> Tuple[Cell, Cell]:
    """Return the description and room cells of a week-column."""

    start = LEAD_IN_CELLS + column * CELL_STRIDE
    return row[start], row[start + 1]


def expected_row_width(subgroups_num: int) -> int:
    return LEAD_IN_CELLS + CELL_STRIDE * subgroups_num


def row_pairs(rows: Sequence[Row]) -> Iterator[Tuple[Row, Row]]:
    """Yield consecutive non-overlapping row pairs, dropping an odd last row."""

    return zip(rows[0::2], rows[1::2])


__all__ = [
    "CELL_STRIDE",
    "Cell",
    "DAYS_PER_WEEK",
    "HEADER_ROWS",
    "LEAD_IN_CELLS",
    "LESSONS_PER_DAY",
    "MAX_LESSON_PAIRS",
    "Row",
    "SHEETS_PER_WORKBOOK",
    "Sheet",
    "column_cells",
    "expected_row_width",
    "header_cells",
    "is_empty",
    "is_string",
    "row_pairs",
    "slot_position",
]
