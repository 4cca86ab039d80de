from __future__ import annotations

import logging
from typing import List, Sequence

from class_parser import parse_class
from errors import RowColumnCountMismatch, TooManyRows
from grid import (
    HEADER_ROWS,
    LEAD_IN_CELLS,
    MAX_LESSON_PAIRS,
    Row,
    column_cells,
    expected_row_width,
    row_pairs,
    slot_position,
)
from models import Day, new_week

LOGGER = logging.getLogger(__name__)


def _check_width(row: Row, row_index: int, subgroups_num: int) -> None:
    if len(row) != expected_row_width(subgroups_num):
        raise RowColumnCountMismatch(
            row_index,
            expected=2 * subgroups_num,
            actual=len(row) - LEAD_IN_CELLS,
        )


def scan_body(
    rows: Sequence[Row], subgroups_num: int, first_row: int = HEADER_ROWS
) -> List[List[Day]]:
    """Fill one week per week-column from the body rows of a sheet.

    Rows go in pairs: the upper and the lower class of a lesson. Pair ``k``
    is lesson ``k % 7`` of day ``k // 7``. ``first_row`` is the sheet index of
    ``rows[0]`` and is only used in error reports.
    """

    weeks = [new_week() for _ in range(subgroups_num)]
    for pair_index, (upper, lower) in enumerate(row_pairs(rows)):
        upper_index = first_row + 2 * pair_index
        if pair_index >= MAX_LESSON_PAIRS:
            raise TooManyRows(upper_index, MAX_LESSON_PAIRS)
        _check_width(upper, upper_index, subgroups_num)
        _check_width(lower, upper_index + 1, subgroups_num)

        day_num, lesson_num = slot_position(pair_index)
        for column in range(subgroups_num):
            day = weeks[column][day_num]
            day.upper_classes[lesson_num] = parse_class(*column_cells(upper, column))
            day.lower_classes[lesson_num] = parse_class(*column_cells(lower, column))

    LOGGER.debug("Scanned %d body rows into %d weeks", len(rows), subgroups_num)
    return weeks


__all__ = ["scan_body"]
