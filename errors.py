from __future__ import annotations

from pathlib import Path
from typing import List, Sequence


class ScheduleError(Exception):
    """Base class for malformed timetable input."""


class WrongSheetCount(ScheduleError):
    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Workbook must have {expected} sheets, got {actual}")


class MissingHeaderRows(ScheduleError):
    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Sheet needs {expected} header rows, got {actual} rows")


class CellTypeMismatch(ScheduleError):
    """A cell that must hold text holds something else."""

    def __init__(self, row: int, column: int, value: object, expected: str = "string") -> None:
        self.row = row
        self.column = column
        self.value = value
        self.expected = expected
        super().__init__(
            f"Cell ({row}, {column}) must be a {expected}, got {type(value).__name__} {value!r}"
        )


class UnparsableSubgroupNumber(ScheduleError):
    def __init__(self, row: int, column: int, text: str) -> None:
        self.row = row
        self.column = column
        self.text = text
        super().__init__(f"Cell ({row}, {column}) is not a subgroup number: {text!r}")


class RowColumnCountMismatch(ScheduleError):
    def __init__(self, row: int, expected: int, actual: int) -> None:
        self.row = row
        self.expected = expected
        self.actual = actual
        super().__init__(f"Row {row} has {actual} cells, expected {expected}")


class TooManyRows(ScheduleError):
    def __init__(self, row: int, limit: int) -> None:
        self.row = row
        self.limit = limit
        super().__init__(f"Row {row} is past the last lesson slot ({limit} row pairs at most)")


class GroupSubgroupCountMismatch(ScheduleError):
    def __init__(self, groups: int, clusters: int) -> None:
        self.groups = groups
        self.clusters = clusters
        super().__init__(
            f"Found {groups} group names but {clusters} subgroup clusters in the header"
        )


class WeekCountMismatch(ScheduleError):
    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Subgroup clusters span {expected} week-columns, got {actual} weeks")


class SheetParseError(ScheduleError):
    """Wraps a sheet-level failure with the name of the sheet."""

    def __init__(self, sheet: str, error: ScheduleError) -> None:
        self.sheet = sheet
        self.error = error
        super().__init__(f"Sheet {sheet!r}: {error}")


class WorkbookParseError(ScheduleError):
    def __init__(self, failures: Sequence[SheetParseError]) -> None:
        self.failures: List[SheetParseError] = list(failures)
        details = "; ".join(str(failure) for failure in self.failures)
        super().__init__(f"{len(self.failures)} sheet(s) failed to parse: {details}")


class WorkbookReadError(ScheduleError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read workbook {path}: {reason}")


class ScheduleFileError(ScheduleError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load parsed schedule {path}: {reason}")


__all__ = [
    "CellTypeMismatch",
    "GroupSubgroupCountMismatch",
    "MissingHeaderRows",
    "RowColumnCountMismatch",
    "ScheduleError",
    "ScheduleFileError",
    "SheetParseError",
    "TooManyRows",
    "UnparsableSubgroupNumber",
    "WeekCountMismatch",
    "WorkbookParseError",
    "WorkbookReadError",
    "WrongSheetCount",
]
