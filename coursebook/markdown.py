"""Helpers for producing Markdown text."""

from __future__ import annotations

import os
from pathlib import PurePosixPath


def _ancestors(path: PurePosixPath) -> list[tuple[str, ...]]:
    parts = path.parts
    lowest = 1 if path.is_absolute() else 0
    return [parts[:length] for length in range(len(parts), lowest - 1, -1)]


def relative_link(doc_path: str | os.PathLike, target_path: str | os.PathLike) -> str:
    """Return a link to ``target_path`` relative to the document at ``doc_path``."""
    doc = PurePosixPath(os.fspath(doc_path))
    target = PurePosixPath(os.fspath(target_path))
    target_parts = target.parts

    dotdot = -1
    for ancestor in _ancestors(doc):
        if target_parts[: len(ancestor)] == ancestor:
            break
        dotdot += 1

    shown = os.fspath(target_path)
    if dotdot > 0:
        return "../" * dotdot + shown
    return f"./{shown}"


def duration(minutes: int) -> str:
    """Describe a duration in words, rounding times over 5 minutes up to 5."""
    if minutes < 0:
        raise ValueError("duration cannot be negative")
    if minutes > 5:
        minutes += 4
        minutes -= minutes % 5

    hours, minutes = divmod(minutes, 60)
    if hours == 0:
        return "1 minute" if minutes == 1 else f"{minutes} minutes"
    hour_text = "1 hour" if hours == 1 else f"{hours} hours"
    if minutes == 0:
        return hour_text
    return f"{hour_text} and {minutes} minutes"