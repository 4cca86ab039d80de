from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from config import get_settings
from errors import SheetParseError, WorkbookParseError, WrongSheetCount
from grid import SHEETS_PER_WORKBOOK, Sheet
from models import Course
from sheet_assembler import parse_sheet

LOGGER = logging.getLogger(__name__)

Courses = Tuple[Course, Course, Course, Course]


@dataclass
class SheetResult:
    """Outcome of parsing one sheet: a course or the reason it failed."""

    name: str
    course: Optional[Course] = None
    error: Optional[SheetParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _parse_one(sheet: Sheet) -> SheetResult:
    try:
        return SheetResult(name=sheet.name, course=parse_sheet(sheet))
    except SheetParseError as exc:
        LOGGER.warning("%s", exc)
        return SheetResult(name=sheet.name, error=exc)


def parse_sheets(sheets: Sequence[Sheet], max_workers: Optional[int] = None) -> List[SheetResult]:
    """Parse every sheet independently, keeping sheet order.

    A malformed sheet yields a failed :class:`SheetResult` and never stops
    the others from being parsed.
    """

    if len(sheets) != SHEETS_PER_WORKBOOK:
        raise WrongSheetCount(SHEETS_PER_WORKBOOK, len(sheets))

    workers = max_workers or get_settings().parse_workers
    with ThreadPoolExecutor(max_workers=workers) as executor:
        results = list(executor.map(_parse_one, sheets))
    LOGGER.debug("Parsed %d sheets with %d workers", len(results), workers)
    return results


def build_courses(sheets: Sequence[Sheet], max_workers: Optional[int] = None) -> Courses:
    """Return the four courses of a workbook in sheet order.

    Raises :class:`WrongSheetCount` before parsing anything when the workbook
    does not have exactly four sheets, and :class:`WorkbookParseError`
    listing every failed sheet otherwise.
    """

    results = parse_sheets(sheets, max_workers=max_workers)
    failures = [result.error for result in results if result.error is not None]
    if failures:
        raise WorkbookParseError(failures)

    courses = [result.course for result in results if result.course is not None]
    first, second, third, fourth = courses
    return first, second, third, fourth


__all__ = ["Courses", "SheetResult", "build_courses", "parse_sheets"]
