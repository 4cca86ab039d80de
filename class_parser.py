from __future__ import annotations

import logging
from typing import Optional

from grid import Cell, is_string
from models import Class, ClassType

LOGGER = logging.getLogger(__name__)

TYPE_SEPARATOR = " ("


def parse_class(description: Cell, room: Cell) -> Optional[Class]:
    """Parse a class from its description and room cells.

    The description cell is written as::

        Name (Type)
        Teacher

    where the teacher line is optional. ``None`` means the slot is free or
    its text does not follow this layout.
    """

    if not is_string(description) or not is_string(room):
        return None

    name, separator, rest = description.partition(TYPE_SEPARATOR)
    if not separator:
        LOGGER.debug("No class type in cell %r", description)
        return None

    type_label, newline, teacher_line = rest.partition("\n")
    teacher: Optional[str] = teacher_line if newline else None
    if teacher is not None and not teacher.strip():
        teacher = None

    if not type_label.endswith(")"):
        LOGGER.debug("Unclosed class type in cell %r", description)
        return None

    return Class(
        name=name,
        class_type=ClassType.from_label(type_label[:-1]),
        teacher=teacher,
        room=room,
    )


__all__ = ["parse_class"]
