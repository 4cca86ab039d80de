"""
Конвертер расписания из Excel в JSON.

Пример запуска:
    python cli.py convert --schedules-dir schedules
    python cli.py show schedules/parsed/itkn.json --course 1 --group "БИВТ-21-15" --subgroup 1

Каталог расписаний содержит подкаталоги ``raw`` (исходные .xls/.xlsx) и
``parsed`` (JSON с тем же именем файла).
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from config import get_settings
from errors import ScheduleError
from schedule_builder import build_courses
from storage import dump_courses, load_courses
from text_utils import format_group
from workbook import SUPPORTED_SUFFIXES, load_sheets

LOGGER = logging.getLogger(__name__)


def needs_conversion(raw_path: Path, parsed_path: Path, force: bool = False) -> bool:
    """Parsed file is missing or older than its source."""

    if force or not parsed_path.exists():
        return True
    return parsed_path.stat().st_mtime < raw_path.stat().st_mtime


def pending_files(raw_dir: Path, parsed_dir: Path, force: bool = False) -> List[Path]:
    return [
        path
        for path in sorted(raw_dir.iterdir())
        if path.is_file()
        and path.suffix.lower() in SUPPORTED_SUFFIXES
        and needs_conversion(path, parsed_dir / f"{path.stem}.json", force)
    ]


def convert_file(raw_path: Path, parsed_dir: Path, max_workers: Optional[int] = None) -> Path:
    courses = build_courses(load_sheets(raw_path), max_workers=max_workers)
    parsed_path = parsed_dir / f"{raw_path.stem}.json"
    dump_courses(courses, parsed_path)
    return parsed_path


def convert_all(schedules_dir: Path, force: bool = False, max_workers: Optional[int] = None) -> int:
    """Convert pending workbooks; return the number of failed files."""

    raw_dir = schedules_dir / "raw"
    parsed_dir = schedules_dir / "parsed"
    if not raw_dir.is_dir():
        LOGGER.error("Каталог с исходными файлами не найден: %s", raw_dir)
        return 1
    parsed_dir.mkdir(parents=True, exist_ok=True)

    failed = 0
    for raw_path in pending_files(raw_dir, parsed_dir, force):
        try:
            parsed_path = convert_file(raw_path, parsed_dir, max_workers=max_workers)
        except ScheduleError as exc:
            LOGGER.error("Не удалось разобрать %s: %s", raw_path.name, exc)
            failed += 1
            continue
        LOGGER.info("Файл %s сохранён в %s", raw_path.name, parsed_path)
    return failed


def show_group(path: Path, course_index: int, group_name: str, subgroup: Optional[int]) -> Optional[str]:
    courses = load_courses(path)
    if not 0 <= course_index < len(courses):
        LOGGER.error("Номер курса должен быть от 0 до %d", len(courses) - 1)
        return None
    group = courses[course_index].find_group(group_name)
    if group is None:
        LOGGER.error("Группа %s не найдена в курсе %s", group_name, courses[course_index].name)
        return None
    if subgroup is not None and group.get_subgroup(subgroup) is None:
        LOGGER.error("У группы %s нет подгруппы %d", group_name, subgroup)
        return None
    return format_group(group, subgroup)


def build_arg_parser() -> argparse.ArgumentParser:
    """Создает аргумент-парсер CLI."""

    parser = argparse.ArgumentParser(description="Разбор расписания из Excel в JSON")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Показывать отладочную информацию",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    convert = commands.add_parser("convert", help="Разобрать новые и изменённые файлы")
    convert.add_argument(
        "-d",
        "--schedules-dir",
        type=Path,
        help="Каталог с подкаталогами raw и parsed",
    )
    convert.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Разобрать все файлы заново",
    )

    show = commands.add_parser("show", help="Показать расписание группы")
    show.add_argument("file", type=Path, help="Разобранный JSON файл")
    show.add_argument("-c", "--course", type=int, default=0, help="Номер листа (курса), с нуля")
    show.add_argument("-g", "--group", required=True, help="Название группы")
    show.add_argument("-s", "--subgroup", type=int, help="Номер подгруппы")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Точка входа CLI."""

    args = build_arg_parser().parse_args(argv)
    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.command == "convert":
        failed = convert_all(
            args.schedules_dir or settings.schedules_dir,
            force=args.force,
            max_workers=settings.parse_workers,
        )
        return 1 if failed else 0

    try:
        text = show_group(args.file, args.course, args.group, args.subgroup)
    except ScheduleError as exc:
        LOGGER.error("%s", exc)
        return 1
    if text is None:
        return 1
    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
