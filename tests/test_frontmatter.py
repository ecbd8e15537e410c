import pytest

from coursebook.book import Chapter
from coursebook.frontmatter import Frontmatter, FrontmatterError, split_frontmatter


def _chapter(content, source_path="welcome.md"):
    return Chapter(name="Welcome", content=content, source_path=source_path)


def test_split_with_frontmatter():
    chapter = _chapter(
        "---\nminutes: 5\ncourse: Fundamentals\nsession: Day 1 Morning\n---\n# Welcome\n"
    )
    frontmatter, content = split_frontmatter(chapter)
    assert frontmatter == Frontmatter(
        minutes=5, course="Fundamentals", session="Day 1 Morning"
    )
    assert content == "# Welcome\n"


def test_split_without_frontmatter():
    chapter = _chapter("# Welcome\n\nSome text.\n")
    frontmatter, content = split_frontmatter(chapter)
    assert frontmatter == Frontmatter()
    assert content == chapter.content


def test_partial_frontmatter_and_unknown_keys():
    frontmatter, content = split_frontmatter(
        _chapter("---\nminutes: 3\ntarget_minutes: 20\n---\nBody")
    )
    assert frontmatter.minutes == 3
    assert frontmatter.course is None
    assert frontmatter.session is None
    assert content == "Body"


def test_empty_frontmatter():
    frontmatter, content = split_frontmatter(_chapter("---\n---\nBody\n"))
    assert frontmatter == Frontmatter()
    assert content == "Body\n"


def test_invalid_yaml():
    with pytest.raises(FrontmatterError) as info:
        split_frontmatter(_chapter("---\nminutes: [\n---\nBody\n", "broken.md"))
    assert "broken.md" in str(info.value)


@pytest.mark.parametrize(
    "header",
    ["minutes: five", "minutes: -1", "minutes: true", "course: [a, b]", "- a list"],
)
def test_invalid_values(header):
    with pytest.raises(FrontmatterError):
        split_frontmatter(_chapter(f"---\n{header}\n---\nBody\n"))


def test_content_is_not_modified():
    chapter = _chapter("---\nminutes: 5\n---\nBody\n")
    split_frontmatter(chapter)
    assert chapter.content == "---\nminutes: 5\n---\nBody\n"