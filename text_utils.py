from __future__ import annotations

from typing import List, Optional, Sequence

from models import Class, Day, GroupInfo, WithSubgroups

WEEKDAY_NAMES = (
    "Понедельник",
    "Вторник",
    "Среда",
    "Четверг",
    "Пятница",
    "Суббота",
    "Воскресенье",
)
UPPER_MARK = "верх"
LOWER_MARK = "низ"


def format_class(item: Class) -> str:
    """Format a class as a single human-readable line."""

    return " • ".join(
        part
        for part in (item.name, item.class_type.title, item.teacher, item.room)
        if part
    )


def format_week(days: Sequence[Day]) -> str:
    lines: List[str] = []
    for name, day in zip(WEEKDAY_NAMES, days):
        if day.is_free():
            continue
        lines.append(name)
        for lesson, (upper, lower) in enumerate(zip(day.upper_classes, day.lower_classes), start=1):
            if upper:
                lines.append(f"  {lesson} ({UPPER_MARK}): {format_class(upper)}")
            if lower:
                lines.append(f"  {lesson} ({LOWER_MARK}): {format_class(lower)}")
    return "\n".join(lines) if lines else "Занятий нет"


def format_group(group: GroupInfo, subgroup: Optional[int] = None) -> str:
    """Render a group's week, or a single subgroup's week when requested."""

    info = group.subgroups
    if not isinstance(info, WithSubgroups):
        return f"Расписание для группы {group.name}:\n{format_week(info.days)}"

    sections = [
        f"Расписание для группы {group.name}, подгруппа {item.number}:\n{format_week(item.days)}"
        for item in info.subgroups
        if subgroup is None or item.number == subgroup
    ]
    return "\n\n".join(sections)


__all__ = ["WEEKDAY_NAMES", "format_class", "format_group", "format_week"]
