"""Extract starter code for exercises from Markdown chapters into files."""

from __future__ import annotations

import argparse
import logging
import os
import shutil
import sys
from pathlib import Path, PurePosixPath
from typing import IO, Iterator

from markdown_it import MarkdownIt

from coursebook.book import Book, read_render_context

log = logging.getLogger(__name__)

FILENAME_START = "<!-- File "
FILENAME_END = " -->"


def _filename_from_html(html: str) -> str | None:
    html = html.strip()
    if (
        html.startswith(FILENAME_START)
        and html.endswith(FILENAME_END)
        and len(html) >= len(FILENAME_START) + len(FILENAME_END)
    ):
        return html[len(FILENAME_START) : len(html) - len(FILENAME_END)]
    return None


def _events(input_contents: str) -> Iterator[tuple[str, str]]:
    """Yield ("html", text) and ("code", text) events in document order."""
    for token in MarkdownIt("commonmark").parse(input_contents):
        if token.type == "html_block":
            for line in token.content.splitlines():
                yield "html", line
        elif token.type == "inline":
            for child in token.children or []:
                if child.type == "html_inline":
                    yield "html", child.content
        elif token.type in ("fence", "code_block"):
            yield "code", token.content


def process(output_directory: str | os.PathLike, input_contents: str) -> None:
    """Write each code block preceded by a ``<!-- File name -->`` comment to that file.

    Code blocks without such a comment are ignored, as are comments that no
    code block follows.
    """
    output_directory = Path(output_directory)
    next_filename: str | None = None
    for kind, text in _events(input_contents):
        log.debug("%s: %r", kind, text)
        if kind == "html":
            filename = _filename_from_html(text)
            if filename is not None:
                next_filename = filename
                log.info("Next file: %r", next_filename)
        elif next_filename is not None:
            full_filename = output_directory / next_filename
            log.info("Opening %s", full_filename)
            full_filename.parent.mkdir(parents=True, exist_ok=True)
            with open(full_filename, "w", encoding="utf-8", newline="") as output:
                output.write(text)
            next_filename = None


def process_all(book: Book, output_directory: str | os.PathLike) -> None:
    """Extract exercises from every chapter, one subdirectory per chapter file."""
    output_directory = Path(output_directory)
    for chapter in book.iter_chapters():
        log.debug("Chapter %r / %r", chapter.path, chapter.source_path)
        if chapter.path is None:
            continue
        chapter_path = PurePosixPath(chapter.path)
        if chapter_path.name in ("", ".."):
            raise ValueError(f"Chapter {chapter.path!r} has no file stem")
        process(output_directory / chapter_path.stem, chapter.content)


def _output_directory(context: dict) -> Path:
    config = context.get("config")
    output = config.get("output") if isinstance(config, dict) else None
    renderer = output.get("exerciser") if isinstance(output, dict) else None
    if not isinstance(renderer, dict):
        raise ValueError("Missing output.exerciser configuration")
    if "output-directory" not in renderer:
        raise ValueError(
            "Missing output.exerciser.output-directory configuration value"
        )
    value = renderer["output-directory"]
    if not isinstance(value, str):
        raise ValueError("Expected a string for output.exerciser.output-directory")
    return Path(value)


def _render(stream: IO[str]) -> None:
    try:
        context, book = read_render_context(stream)
    except ValueError as exc:
        raise ValueError(f"Parsing stdin: {exc}") from exc

    output_directory = _output_directory(context)
    shutil.rmtree(output_directory, ignore_errors=True)
    try:
        os.mkdir(output_directory)
    except OSError as exc:
        raise OSError(
            f"Failed to create output directory {str(output_directory)!r}: {exc}"
        ) from exc

    process_all(book, output_directory)


def main(argv: list[str] | None = None) -> int:
    """Run as a book renderer, reading the render context from standard input."""
    parser = argparse.ArgumentParser(
        prog="coursebook-exerciser",
        description="Extract starter code for exercises from Markdown files.",
    )
    parser.parse_args(argv)
    logging.basicConfig(level=logging.WARNING)
    try:
        _render(sys.stdin)
    except (ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())