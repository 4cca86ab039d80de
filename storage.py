from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Sequence

from pydantic import TypeAdapter, ValidationError

from errors import ScheduleFileError
from models import Course
from schedule_builder import Courses

LOGGER = logging.getLogger(__name__)

COURSES_ADAPTER: TypeAdapter[Courses] = TypeAdapter(Courses)


def to_document(courses: Sequence[Course]) -> List[Any]:
    """Return the JSON-compatible document of a workbook's courses."""

    return COURSES_ADAPTER.dump_python(tuple(courses), mode="json")


def from_document(document: Any) -> Courses:
    return COURSES_ADAPTER.validate_python(document)


def dump_courses(courses: Sequence[Course], path: Path) -> None:
    """Write courses as pretty printed JSON, creating parent directories."""

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = json.dumps(to_document(courses), ensure_ascii=False, indent=2)
    path.write_text(payload, encoding="utf-8")
    LOGGER.info("Saved %d courses to %s", len(courses), path)


def load_courses(path: Path) -> Courses:
    path = Path(path)
    try:
        return COURSES_ADAPTER.validate_json(path.read_bytes())
    except OSError as exc:
        raise ScheduleFileError(path, str(exc)) from exc
    except ValidationError as exc:
        raise ScheduleFileError(path, f"{exc.error_count()} validation error(s): {exc}") from exc
    except ValueError as exc:
        raise ScheduleFileError(path, str(exc)) from exc


__all__ = ["COURSES_ADAPTER", "dump_courses", "from_document", "load_courses", "to_document"]
