import pytest

from coursebook.book import Book, Chapter, PartTitle, Separator
from coursebook.course import BREAK_DURATION, CourseStructureError, Courses
from coursebook.frontmatter import FrontmatterError
from coursebook.markdown import duration


def fm(**values):
    body = "".join(f"{key}: {value}\n" for key, value in values.items())
    return f"---\n{body}---\n"


def chapter(name, content, source_path, sub_items=()):
    return Chapter(
        name=name,
        content=content,
        path=source_path.replace(".md", ".html") if source_path else None,
        source_path=source_path,
        sub_items=list(sub_items),
    )


def make_book():
    deep = chapter("Deep", fm(minutes=3) + "deep body", "hello/what/deep.md")
    what = chapter("What", fm(minutes=10) + "what body", "hello/what.md", [deep])
    hello = chapter(
        "Hello",
        fm(minutes=5, course="Fundamentals", session="Day 1") + "Hello body",
        "hello.md",
        [what, Separator()],
    )
    types = chapter("Types", fm(minutes=20) + "types body", "types.md")
    afternoon = chapter(
        "Afternoon", fm(session="Day 1 Afternoon") + "pm", "afternoon.md"
    )
    welcome = chapter("Welcome", fm(course="none") + "Welcome text", "welcome.md")
    return Book(
        sections=[welcome, PartTitle("Part"), hello, types, Separator(), afternoon]
    )


@pytest.fixture
def extracted():
    return Courses.extract_structure(make_book())


def test_structure_names(extracted):
    courses, _ = extracted
    assert [c.name for c in courses] == ["Fundamentals"]
    course = courses.find_course("Fundamentals")
    assert [s.name for s in course] == ["Day 1", "Day 1 Afternoon"]
    assert [seg.name for seg in course.sessions[0]] == ["Hello", "Types"]
    assert [seg.name for seg in course.sessions[1]] == ["Afternoon"]


def test_frontmatter_is_stripped(extracted):
    _, book = extracted
    contents = {c.name: c.content for c in book.iter_chapters()}
    assert contents["Hello"] == "Hello body"
    assert contents["Deep"] == "deep body"
    assert contents["Welcome"] == "Welcome text"
    assert not any(c.startswith("---") for c in contents.values())


def test_slides_collect_sub_chapters(extracted):
    courses, _ = extracted
    hello = courses.courses[0].sessions[0].segments[0]
    assert [slide.name for slide in hello] == ["Hello", "What"]
    what = hello.slides[1]
    assert what.source_paths == ["hello/what.md", "hello/what/deep.md"]
    assert what.minutes == 10 + 3
    assert hello.minutes() == sum(slide.minutes for slide in hello)


def test_session_minutes_include_breaks(extracted):
    courses, _ = extracted
    morning, afternoon = courses.courses[0].sessions
    hello, types = morning.segments
    assert morning.minutes() == hello.minutes() + types.minutes() + BREAK_DURATION
    assert afternoon.minutes() == 0


def test_course_minutes_sum_sessions(extracted):
    courses, _ = extracted
    course = courses.courses[0]
    assert course.minutes() == sum(session.minutes() for session in course)


def test_find_slide(extracted):
    courses, book = extracted
    deep = next(c for c in book.iter_chapters() if c.name == "Deep")
    course, session, segment, slide = courses.find_slide(deep)
    assert (course.name, session.name, segment.name, slide.name) == (
        "Fundamentals",
        "Day 1",
        "Hello",
        "What",
    )
    assert slide.is_sub_chapter(deep)
    what = next(c for c in book.iter_chapters() if c.name == "What")
    assert not slide.is_sub_chapter(what)


def test_find_slide_outside_course(extracted):
    courses, book = extracted
    welcome = next(c for c in book.iter_chapters() if c.name == "Welcome")
    assert courses.find_slide(welcome) is None
    assert courses.find_slide(Chapter(name="Draft")) is None
    assert courses.find_course("Android") is None


def test_segment_outline(extracted):
    courses, _ = extracted
    hello = courses.courses[0].sessions[0].segments[0]
    expected = (
        "In this segment:\n"
        " * [Hello](./hello.md) (5 minutes)\n"
        f" * [What](./hello/what.md) ({duration(hello.slides[1].minutes)})\n"
        f"\nThis segment should take about {duration(hello.minutes())}\n"
    )
    assert hello.outline("hello.md") == expected


def test_session_outline(extracted):
    courses, _ = extracted
    morning = courses.courses[0].sessions[0]
    hello, types = morning.segments
    expected = (
        "In this session:\n"
        f" * [Hello](../hello.md) ({duration(hello.minutes())})\n"
        f" * [Types](../types.md) ({duration(types.minutes())})\n"
        f"\nIncluding {BREAK_DURATION} minute breaks, this session should take "
        f"about {duration(morning.minutes())}\n"
    )
    assert morning.outline("day1/index.md") == expected


def test_schedule_skips_empty_segments(extracted):
    courses, _ = extracted
    course = courses.courses[0]
    schedule = course.schedule("index.md")
    assert schedule.startswith("Course schedule:\n")
    assert "Day 1 Afternoon (0 minutes, including breaks)" in schedule
    assert "[Afternoon]" not in schedule
    assert "   * [Types](./types.md)" in schedule


def test_course_without_session_is_error():
    book = Book(sections=[chapter("A", fm(course="C") + "x", "a.md")])
    with pytest.raises(CourseStructureError):
        Courses.extract_structure(book)


def test_sub_slide_with_session_is_error():
    bad = chapter("Bad", fm(session="S2") + "x", "a/b/bad.md")
    sub = chapter("Sub", "sub", "a/b.md", [bad])
    top = chapter("A", fm(course="C", session="S") + "x", "a.md", [sub])
    with pytest.raises(CourseStructureError):
        Courses.extract_structure(Book(sections=[top]))


def test_invalid_frontmatter_is_error():
    book = Book(sections=[chapter("A", "---\nminutes: [\n---\nx", "a.md")])
    with pytest.raises(FrontmatterError):
        Courses.extract_structure(book)


def test_same_session_name_merges():
    first = chapter("A", fm(course="C", session="S", minutes=5) + "a", "a.md")
    other = chapter("B", fm(course="D", session="T") + "b", "b.md")
    again = chapter("E", fm(course="C", session="S") + "e", "e.md")
    courses, _ = Courses.extract_structure(Book(sections=[first, other, again]))
    assert [c.name for c in courses] == ["C", "D"]
    course = courses.find_course("C")
    assert [s.name for s in course] == ["S"]
    assert [seg.name for seg in course.sessions[0]] == ["A", "E"]