from class_parser import parse_class
from models import Class, ClassKind, ClassType


def test_parse_class_with_teacher():
    assert parse_class("Math (Практические)\nTeacher", "Class") == Class(
        name="Math",
        class_type=ClassType(ClassKind.PRACTICE),
        teacher="Teacher",
        room="Class",
    )


def test_parse_class_without_teacher_line():
    parsed = parse_class("CS (Лабораторные)", "Class2")
    assert parsed is not None
    assert parsed.class_type.kind is ClassKind.LAB
    assert parsed.teacher is None
    assert parsed.room == "Class2"


def test_blank_teacher_line_is_dropped():
    parsed = parse_class("Физика (Лекционные)\n   ", "Ауд. 101")
    assert parsed is not None
    assert parsed.class_type == ClassType(ClassKind.LECTURE)
    assert parsed.teacher is None


def test_unknown_type_keeps_raw_label():
    parsed = parse_class("Физкультура (Секция)\nИванов И.И.", "Спортзал")
    assert parsed is not None
    assert parsed.class_type == ClassType(ClassKind.UNKNOWN, "Секция")


def test_type_labels_are_case_sensitive():
    parsed = parse_class("История (лекционные)", "205")
    assert parsed.class_type == ClassType(ClassKind.UNKNOWN, "лекционные")


def test_only_first_separator_splits_name():
    parsed = parse_class("Матан (углублённый) (Практические)", "301")
    assert parsed is not None
    assert parsed.name == "Матан"
    assert parsed.class_type == ClassType(ClassKind.UNKNOWN, "углублённый) (Практические")


def test_teacher_keeps_following_lines():
    parsed = parse_class("Химия (Лабораторные)\nПетров П.П.\nСидоров С.С.", "Лаб. 3")
    assert parsed.teacher == "Петров П.П.\nСидоров С.С."


def test_non_string_cells_mean_no_class():
    assert parse_class(42.0, "Class") is None
    assert parse_class(None, "Class") is None
    assert parse_class("Math (Практические)", None) is None
    assert parse_class("Math (Практические)", 101.0) is None


def test_text_without_grammar_means_no_class():
    assert parse_class("Военная кафедра", "Корпус Б") is None
    assert parse_class("Math (Практические", "Class") is None
    assert parse_class("Math (Практические\nTeacher)", "Class") is None
    assert parse_class("", "") is None
