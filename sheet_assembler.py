from __future__ import annotations

import logging
from typing import List, Sequence

from errors import (
    GroupSubgroupCountMismatch,
    MissingHeaderRows,
    ScheduleError,
    SheetParseError,
    WeekCountMismatch,
)
from grid import HEADER_ROWS, LEAD_IN_CELLS, Cell, Row, Sheet, is_empty, is_string
from grid_scanner import scan_body
from models import Course, Day, GroupInfo, Subgroup, WithoutSubgroup, WithSubgroups
from subgroup_header import Cluster, count_columns, parse_subgroup_header

LOGGER = logging.getLogger(__name__)


def group_name_cells(row: Row) -> List[str]:
    """Group names of the first header row.

    Names are merged across all columns of their group, so only the first
    cell of each merge holds text.
    """

    return [cell for cell in row[LEAD_IN_CELLS:] if is_string(cell) and not is_empty(cell)]


def assemble(
    group_names: Sequence[Cell],
    clusters: Sequence[Cluster],
    weeks: Sequence[List[Day]],
) -> List[GroupInfo]:
    """Pair group names with their clusters, taking weeks left to right."""

    if len(group_names) != len(clusters):
        raise GroupSubgroupCountMismatch(len(group_names), len(clusters))
    if len(weeks) != count_columns(clusters):
        raise WeekCountMismatch(count_columns(clusters), len(weeks))

    cursor = iter(weeks)
    groups: List[GroupInfo] = []
    for name, cluster in zip(group_names, clusters):
        if cluster is None:
            info = WithoutSubgroup(days=next(cursor))
        else:
            info = WithSubgroups(
                subgroups=[Subgroup(number=number, days=next(cursor)) for number in cluster]
            )
        groups.append(GroupInfo(name=name, subgroups=info))
    return groups


def parse_sheet(sheet: Sheet) -> Course:
    """Build the course described by one sheet.

    Raises :class:`SheetParseError` carrying the sheet name when the sheet
    does not have the expected shape.
    """

    try:
        if len(sheet.rows) < HEADER_ROWS:
            raise MissingHeaderRows(HEADER_ROWS, len(sheet.rows))
        names_row, subgroups_row, *body = sheet.rows

        clusters = parse_subgroup_header(subgroups_row)
        subgroups_num = count_columns(clusters)
        weeks = scan_body(body, subgroups_num)
        groups = assemble(group_name_cells(names_row), clusters, weeks)
    except ScheduleError as exc:
        raise SheetParseError(sheet.name, exc) from exc

    LOGGER.info("Parsed sheet %r: %d groups, %d week-columns", sheet.name, len(groups), subgroups_num)
    return Course(name=sheet.name, groups=groups)


__all__ = ["assemble", "group_name_cells", "parse_sheet"]
