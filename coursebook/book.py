"""Book structures exchanged with the book builder as JSON."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import IO, Any, Iterator, Union


@dataclass
class Chapter:
    """A chapter of the book, possibly with nested items."""

    name: str
    content: str = ""
    number: list[int] | None = None
    sub_items: list[BookItem] = field(default_factory=list)
    path: str | None = None
    source_path: str | None = None
    parent_names: list[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Chapter:
        """Build a chapter from its JSON object."""
        if not isinstance(data, dict) or not isinstance(data.get("name"), str):
            raise ValueError(f"invalid chapter: {data!r}")
        number = data.get("number")
        return cls(
            name=data["name"],
            content=data.get("content") or "",
            number=list(number) if number is not None else None,
            sub_items=[parse_item(item) for item in data.get("sub_items") or []],
            path=data.get("path"),
            source_path=data.get("source_path"),
            parent_names=list(data.get("parent_names") or []),
        )

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object for this chapter."""
        return {
            "name": self.name,
            "content": self.content,
            "number": list(self.number) if self.number is not None else None,
            "sub_items": [item_to_json(item) for item in self.sub_items],
            "path": self.path,
            "source_path": self.source_path,
            "parent_names": list(self.parent_names),
        }


@dataclass(frozen=True)
class Separator:
    """A separator line in the table of contents."""


@dataclass(frozen=True)
class PartTitle:
    """A part title in the table of contents."""

    title: str


BookItem = Union[Chapter, Separator, PartTitle]


def parse_item(data: Any) -> BookItem:
    """Parse one book item from its JSON form."""
    if data == "Separator":
        return Separator()
    if isinstance(data, dict) and len(data) == 1:
        (kind, value), = data.items()
        if kind == "Chapter":
            return Chapter.from_json(value)
        if kind == "PartTitle" and isinstance(value, str):
            return PartTitle(value)
    raise ValueError(f"unknown book item: {data!r}")


def item_to_json(item: BookItem) -> Any:
    """Return the JSON form of one book item."""
    if isinstance(item, Chapter):
        return {"Chapter": item.to_json()}
    if isinstance(item, Separator):
        return "Separator"
    if isinstance(item, PartTitle):
        return {"PartTitle": item.title}
    raise TypeError(f"not a book item: {item!r}")


@dataclass
class Book:
    """A whole book: a list of top-level items."""

    sections: list[BookItem] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Book:
        """Build a book from its JSON object."""
        if not isinstance(data, dict):
            raise ValueError(f"invalid book: {data!r}")
        sections = [parse_item(item) for item in data.get("sections") or []]
        extra = {key: value for key, value in data.items() if key != "sections"}
        return cls(sections=sections, extra=extra)

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object for this book."""
        result: dict[str, Any] = {
            "sections": [item_to_json(item) for item in self.sections]
        }
        result.update(self.extra)
        result.setdefault("__non_exhaustive", None)
        return result

    def iter_chapters(self) -> Iterator[Chapter]:
        """Yield every chapter, parents before their sub-chapters."""

        def walk(items: list[BookItem]) -> Iterator[Chapter]:
            for item in items:
                if isinstance(item, Chapter):
                    yield item
                    yield from walk(item.sub_items)

        return walk(self.sections)


def read_preprocessor_input(stream: IO[str]) -> tuple[dict[str, Any], Book]:
    """Read the ``[context, book]`` pair given to a preprocessor."""
    data = json.load(stream)
    if not isinstance(data, list) or len(data) != 2 or not isinstance(data[0], dict):
        raise ValueError("preprocessor input must be a [context, book] pair")
    return data[0], Book.from_json(data[1])


def read_render_context(stream: IO[str]) -> tuple[dict[str, Any], Book]:
    """Read the render context given to a renderer."""
    data = json.load(stream)
    if not isinstance(data, dict) or "book" not in data:
        raise ValueError("render context must be an object with a book")
    return data, Book.from_json(data["book"])