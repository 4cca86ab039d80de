from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import Field

from grid import DAYS_PER_WEEK, LESSONS_PER_DAY


class ClassKind(str, Enum):
    LECTURE = "lecture"
    PRACTICE = "practice"
    LAB = "lab"
    UNKNOWN = "unknown"


CLASS_TYPE_LABELS: Dict[str, ClassKind] = {
    "Лекционные": ClassKind.LECTURE,
    "Практические": ClassKind.PRACTICE,
    "Лабораторные": ClassKind.LAB,
}


@dataclass
class ClassType:
    """Kind of a class; ``label`` keeps the raw text of unrecognised kinds."""

    kind: ClassKind
    label: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind is ClassKind.UNKNOWN:
            if self.label is None:
                raise ValueError("unknown class type must keep its label")
            if self.label in CLASS_TYPE_LABELS:
                raise ValueError(f"label {self.label!r} is a known class type")
        elif self.label is not None:
            raise ValueError(f"{self.kind.value} class type must not carry a label")

    @classmethod
    def from_label(cls, label: str) -> ClassType:
        kind = CLASS_TYPE_LABELS.get(label)
        if kind is None:
            return cls(ClassKind.UNKNOWN, label)
        return cls(kind)

    @property
    def title(self) -> str:
        """Human readable label, as it was written in the timetable."""

        if self.label is not None:
            return self.label
        for label, kind in CLASS_TYPE_LABELS.items():
            if kind is self.kind:
                return label
        return self.kind.value


@dataclass
class Class:
    """Single class occupying one lesson slot."""

    name: str
    class_type: ClassType
    teacher: Optional[str]
    room: str


LessonSlots = Annotated[
    List[Optional[Class]],
    Field(min_length=LESSONS_PER_DAY, max_length=LESSONS_PER_DAY),
]


def _empty_slots() -> List[Optional[Class]]:
    return [None] * LESSONS_PER_DAY


@dataclass
class Day:
    """Upper and lower classes of one day, indexed by lesson number."""

    upper_classes: LessonSlots = field(default_factory=_empty_slots)
    lower_classes: LessonSlots = field(default_factory=_empty_slots)

    def is_free(self) -> bool:
        return not any(self.upper_classes) and not any(self.lower_classes)


Week = Annotated[List[Day], Field(min_length=DAYS_PER_WEEK, max_length=DAYS_PER_WEEK)]


def new_week() -> List[Day]:
    """Return an empty week, Monday first."""

    return [Day() for _ in range(DAYS_PER_WEEK)]


SubgroupNumber = Annotated[int, Field(ge=1, le=255)]


@dataclass
class Subgroup:
    number: SubgroupNumber
    days: Week


@dataclass
class WithSubgroups:
    subgroups: Annotated[List[Subgroup], Field(min_length=1)]
    kind: Literal["with_subgroups"] = "with_subgroups"

    def __post_init__(self) -> None:
        numbers = [subgroup.number for subgroup in self.subgroups]
        if len(set(numbers)) != len(numbers):
            raise ValueError(f"subgroup numbers must be unique, got {numbers}")


@dataclass
class WithoutSubgroup:
    days: Week
    kind: Literal["without_subgroup"] = "without_subgroup"


WeekInfo = Annotated[Union[WithSubgroups, WithoutSubgroup], Field(discriminator="kind")]


@dataclass
class GroupInfo:
    """Student group with either one week or a week per subgroup."""

    name: str
    subgroups: WeekInfo

    def get_subgroup(self, number: int) -> Optional[Subgroup]:
        if not isinstance(self.subgroups, WithSubgroups):
            return None
        for subgroup in self.subgroups.subgroups:
            if subgroup.number == number:
                return subgroup
        return None

    def __str__(self) -> str:
        return self.name


@dataclass
class Course:
    """Groups of one workbook sheet."""

    name: str
    groups: List[GroupInfo] = field(default_factory=list)

    def find_group(self, name: str) -> Optional[GroupInfo]:
        for group in self.groups:
            if group.name == name:
                return group
        return None


__all__ = [
    "CLASS_TYPE_LABELS",
    "Class",
    "ClassKind",
    "ClassType",
    "Course",
    "Day",
    "GroupInfo",
    "Subgroup",
    "Week",
    "WeekInfo",
    "WithSubgroups",
    "WithoutSubgroup",
    "new_week",
]
