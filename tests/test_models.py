import pytest

from models import (
    ClassKind,
    ClassType,
    Course,
    Day,
    GroupInfo,
    Subgroup,
    WithoutSubgroup,
    WithSubgroups,
    new_week,
)


def test_class_type_from_label():
    assert ClassType.from_label("Лекционные") == ClassType(ClassKind.LECTURE)
    assert ClassType.from_label("Практические") == ClassType(ClassKind.PRACTICE)
    assert ClassType.from_label("Лабораторные") == ClassType(ClassKind.LAB)
    assert ClassType.from_label("Зачёт") == ClassType(ClassKind.UNKNOWN, "Зачёт")


def test_class_type_title():
    assert ClassType(ClassKind.PRACTICE).title == "Практические"
    assert ClassType(ClassKind.UNKNOWN, "Зачёт").title == "Зачёт"


def test_new_week_days_are_independent():
    week = new_week()
    assert len(week) == 7
    assert week[0] == Day()
    week[0].upper_classes[0] = "x"
    assert week[1].upper_classes[0] is None
    assert Day().upper_classes == [None] * 7


def test_lookup_helpers():
    split = GroupInfo(
        name="БИВТ-21-15",
        subgroups=WithSubgroups(subgroups=[Subgroup(number=1, days=new_week())]),
    )
    whole = GroupInfo(name="БИВТ-21-16", subgroups=WithoutSubgroup(days=new_week()))
    course = Course(name="3 курс", groups=[split, whole])

    assert course.find_group("БИВТ-21-15") is split
    assert course.find_group("нет") is None
    assert split.get_subgroup(1).number == 1
    assert split.get_subgroup(2) is None
    assert whole.get_subgroup(1) is None
    assert str(whole) == "БИВТ-21-16"


@pytest.mark.parametrize(
    "kind,label",
    [
        (ClassKind.LECTURE, "Зачёт"),
        (ClassKind.UNKNOWN, None),
        (ClassKind.UNKNOWN, "Практические"),
    ],
)
def test_class_type_rejects_inconsistent_label(kind, label):
    with pytest.raises(ValueError):
        ClassType(kind, label)


def test_with_subgroups_rejects_duplicate_numbers():
    with pytest.raises(ValueError):
        WithSubgroups(
            subgroups=[Subgroup(number=1, days=new_week()), Subgroup(number=1, days=new_week())]
        )
