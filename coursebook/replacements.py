"""Replacing ``{{%...}}`` directives in chapters with generated content."""

from __future__ import annotations

import re

from coursebook.book import Chapter
from coursebook.course import Course, Courses, Segment, Session

_DIRECTIVE = re.compile(r"\{\{%([^}]*)}}")


def replace(
    courses: Courses,
    course: Course | None,
    session: Session | None,
    segment: Segment | None,
    chapter: Chapter,
) -> None:
    """Replace the first directive in the chapter with the content it names."""
    source_path = chapter.source_path
    if source_path is None:
        return

    def expand(match: re.Match[str]) -> str:
        directive_str = match.group(1).strip()
        directive = directive_str.split()
        if directive == ["session", "outline"] and session is not None:
            return session.outline(source_path)
        if directive == ["segment", "outline"] and segment is not None:
            return segment.outline(source_path)
        if directive == ["course", "outline"] and course is not None:
            return course.schedule(source_path)
        if len(directive) == 3 and directive[:2] == ["course", "outline"]:
            named = courses.find_course(directive[2])
            if named is None:
                return match.group(0)
            return named.schedule(source_path)
        return directive_str

    chapter.content = _DIRECTIVE.sub(expand, chapter.content, count=1)