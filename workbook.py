"""Decode spreadsheet files into :class:`grid.Sheet` grids.

``.xls`` files go through xlrd, everything else through openpyxl. Only the
used range of every sheet is kept, so the grid starts at the first non-empty
row and column.
"""
from __future__ import annotations

import datetime as dt
import logging
import zipfile
from pathlib import Path
from typing import Any, List, Sequence

import xlrd
from openpyxl import load_workbook
from openpyxl.utils.datetime import to_excel
from openpyxl.utils.exceptions import InvalidFileException

from errors import WorkbookReadError
from grid import Cell, Sheet, is_empty

LOGGER = logging.getLogger(__name__)

LEGACY_SUFFIX = ".xls"
SUPPORTED_SUFFIXES = (".xlsx", ".xlsm", ".xltx", ".xltm", LEGACY_SUFFIX)

_XLS_EMPTY_TYPES = {xlrd.XL_CELL_EMPTY, xlrd.XL_CELL_BLANK}


def load_sheets(path: Path) -> List[Sheet]:
    """Read every sheet of a workbook in workbook order."""

    path = Path(path)
    LOGGER.debug("Reading workbook %s", path)
    if path.suffix.lower() == LEGACY_SUFFIX:
        return _load_xls(path)
    return _load_xlsx(path)


def _load_xlsx(path: Path) -> List[Sheet]:
    try:
        book = load_workbook(path, data_only=True)
    except (OSError, InvalidFileException, zipfile.BadZipFile, KeyError) as exc:
        raise WorkbookReadError(path, str(exc)) from exc
    try:
        return [
            Sheet(
                name=worksheet.title,
                rows=used_range(
                    [[normalize_value(value) for value in row] for row in worksheet.iter_rows(values_only=True)]
                ),
            )
            for worksheet in book.worksheets
        ]
    finally:
        book.close()


def _load_xls(path: Path) -> List[Sheet]:
    try:
        book = xlrd.open_workbook(str(path))
    except (OSError, xlrd.XLRDError) as exc:
        raise WorkbookReadError(path, str(exc)) from exc
    sheets = []
    for xls_sheet in book.sheets():
        rows = [
            [_xls_cell(cell) for cell in xls_sheet.row(index)]
            for index in range(xls_sheet.nrows)
        ]
        sheets.append(Sheet(name=xls_sheet.name, rows=used_range(rows)))
    return sheets


def _xls_cell(cell: xlrd.sheet.Cell) -> Cell:
    if cell.ctype in _XLS_EMPTY_TYPES:
        return None
    if cell.ctype == xlrd.XL_CELL_TEXT:
        return cell.value
    return float(cell.value)


def normalize_value(value: Any) -> Cell:
    """Reduce a spreadsheet value to empty, text or number."""

    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (dt.datetime, dt.date, dt.time, dt.timedelta)):
        return float(to_excel(value))
    return float(value)


def used_range(rows: Sequence[Sequence[Cell]]) -> List[List[Cell]]:
    """Drop rows and columns that are empty on the border of the grid."""

    filled = [[not is_empty(cell) for cell in row] for row in rows]
    row_indexes = [index for index, row in enumerate(filled) if any(row)]
    if not row_indexes:
        return []
    column_indexes = [
        index for row in filled for index, present in enumerate(row) if present
    ]
    top, bottom = row_indexes[0], row_indexes[-1]
    left, right = min(column_indexes), max(column_indexes)

    width = right + 1
    grid = []
    for row in rows[top : bottom + 1]:
        padded = list(row) + [None] * (width - len(row))
        grid.append(padded[left:width])
    return grid


__all__ = ["SUPPORTED_SUFFIXES", "load_sheets", "normalize_value", "used_range"]
