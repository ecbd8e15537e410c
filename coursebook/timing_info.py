"""Adding timing notes to slides."""

from __future__ import annotations

from coursebook.book import Chapter
from coursebook.course import Slide


def insert_timing_info(slide: Slide, chapter: Chapter) -> None:
    """Put the slide's expected duration into the chapter's speaker notes."""
    if (
        slide.minutes > 0
        and not slide.is_sub_chapter(chapter)
        and "<details>" in chapter.content
    ):
        plural = "minute" if slide.minutes == 1 else "minutes"
        subslides = "and its sub-slides " if len(slide.source_paths) > 1 else ""
        message = f"This slide {subslides}should take about {slide.minutes} {plural}. "
        chapter.content = chapter.content.replace("<details>", f"<details>\n{message}")