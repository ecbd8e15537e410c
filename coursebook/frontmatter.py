"""Reading the YAML frontmatter at the top of a chapter."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

import yaml

from coursebook.book import Chapter

_FRONTMATTER = re.compile(
    r"\A\s*---[ \t]*\r?\n(?:(.*?)\r?\n)?---[ \t]*(?:\r?\n|\Z)(.*)\Z",
    re.DOTALL,
)


class FrontmatterError(ValueError):
    """The frontmatter of a chapter could not be parsed."""


@dataclass(frozen=True)
class Frontmatter:
    """Course annotations given in a chapter's frontmatter."""

    minutes: int | None = None
    course: str | None = None
    session: str | None = None


def _from_mapping(data: Any) -> Frontmatter:
    if data is None:
        return Frontmatter()
    if not isinstance(data, dict):
        raise ValueError("frontmatter must be a mapping")
    minutes = data.get("minutes")
    if minutes is not None and (
        isinstance(minutes, bool) or not isinstance(minutes, int) or minutes < 0
    ):
        raise ValueError(f"minutes must be a non-negative integer, not {minutes!r}")
    for key in ("course", "session"):
        value = data.get(key)
        if value is not None and not isinstance(value, str):
            raise ValueError(f"{key} must be a string, not {value!r}")
    return Frontmatter(
        minutes=minutes, course=data.get("course"), session=data.get("session")
    )


def split_frontmatter(chapter: Chapter) -> tuple[Frontmatter, str]:
    """Split a chapter's content into its frontmatter and the remaining text."""
    match = _FRONTMATTER.match(chapter.content)
    if match is None:
        return Frontmatter(), chapter.content
    header, content = match.group(1) or "", match.group(2)
    try:
        frontmatter = _from_mapping(yaml.safe_load(header))
    except (yaml.YAMLError, ValueError) as exc:
        raise FrontmatterError(
            f"error parsing frontmatter in {chapter.source_path!r}: {exc}"
        ) from exc
    return frontmatter, content