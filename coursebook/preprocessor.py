"""Book preprocessor that adds course structure, outlines and timings."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import IO, Any

from coursebook.book import read_preprocessor_input
from coursebook.course import Course, Courses
from coursebook.markdown import duration
from coursebook.replacements import replace
from coursebook.timing_info import insert_timing_info

FUNDAMENTALS_TARGET = 8 * 3 * 60
"""Target length of the Fundamentals course, in minutes."""

SESSION_TARGET = 3 * 60
"""Target length of one session, in minutes."""


def timediff(actual: int, target: int) -> str:
    """Describe how an actual duration compares with a target duration."""
    if actual > target:
        return (
            f"{duration(actual)}: {duration(actual - target)} "
            f"OVER TARGET {duration(target)}"
        )
    if actual < target:
        return (
            f"{duration(actual)}: {duration(target - actual)} "
            f"shorter than target {duration(target)}"
        )
    return f"{duration(actual)}: right on time"


def print_summary(fundamentals: Course, file: IO[str] | None = None) -> None:
    """Print the timing of the course, its sessions and their segments."""
    out = sys.stderr if file is None else file
    print(
        f"Fundamentals: {timediff(fundamentals.minutes(), FUNDAMENTALS_TARGET)}",
        file=out,
    )
    print("Sessions:", file=out)
    for session in fundamentals:
        print(
            f"  {session.name}: {timediff(session.minutes(), SESSION_TARGET)}",
            file=out,
        )
        for segment in session:
            print(f"    {segment.name}: {duration(segment.minutes())}", file=out)


def _verbose(context: dict[str, Any]) -> bool:
    config = context.get("config")
    preprocessors = config.get("preprocessor") if isinstance(config, dict) else None
    settings = (
        preprocessors.get("course") if isinstance(preprocessors, dict) else None
    )
    return isinstance(settings, dict) and settings.get("verbose") is True


def preprocess(input_stream: IO[str], output_stream: IO[str]) -> None:
    """Read a book, add course content to its chapters and write it back."""
    context, book = read_preprocessor_input(input_stream)
    courses, book = Courses.extract_structure(book)

    for chapter in book.iter_chapters():
        found = courses.find_slide(chapter)
        if found is None:
            replace(courses, None, None, None, chapter)
            continue
        course, session, segment, slide = found
        insert_timing_info(slide, chapter)
        replace(courses, course, session, segment, chapter)

    if _verbose(context):
        fundamentals = courses.find_course("Fundamentals")
        if fundamentals is not None:
            print_summary(fundamentals)

    json.dump(book.to_json(), output_stream)


def main(argv: list[str] | None = None) -> int:
    """Run as a book preprocessor, reading from stdin and writing to stdout."""
    parser = argparse.ArgumentParser(
        prog="coursebook-course",
        description="Book preprocessor for course material.",
    )
    commands = parser.add_subparsers(dest="command")
    supports = commands.add_parser("supports")
    supports.add_argument("renderer")
    args = parser.parse_args(argv)

    if args.command == "supports":
        return 0

    logging.basicConfig(level=logging.WARNING)
    try:
        preprocess(sys.stdin, sys.stdout)
    except (ValueError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())