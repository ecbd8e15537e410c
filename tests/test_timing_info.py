from coursebook.book import Chapter
from coursebook.course import Slide
from coursebook.timing_info import insert_timing_info


def make_chapter(content, source_path="a.md"):
    return Chapter(name="A", content=content, source_path=source_path)


def test_inserts_minutes():
    slide = Slide(name="A", minutes=5, source_paths=["a.md"])
    chapter = make_chapter("text\n<details>\nnotes\n</details>")
    insert_timing_info(slide, chapter)
    assert chapter.content == (
        "text\n<details>\nThis slide should take about 5 minutes. \nnotes\n</details>"
    )


def test_singular_minute():
    slide = Slide(name="A", minutes=1, source_paths=["a.md"])
    chapter = make_chapter("<details>")
    insert_timing_info(slide, chapter)
    assert chapter.content == "<details>\nThis slide should take about 1 minute. "


def test_mentions_sub_slides():
    slide = Slide(name="A", minutes=7, source_paths=["a.md", "a/b.md"])
    chapter = make_chapter("<details>")
    insert_timing_info(slide, chapter)
    assert "This slide and its sub-slides should take about 7 minutes. " in chapter.content


def test_every_details_tag_is_annotated():
    slide = Slide(name="A", minutes=5, source_paths=["a.md"])
    chapter = make_chapter("<details>x</details><details>y</details>")
    insert_timing_info(slide, chapter)
    assert chapter.content.count("should take about") == 2


def test_unchanged_cases():
    no_details = make_chapter("no notes here")
    insert_timing_info(Slide(name="A", minutes=5, source_paths=["a.md"]), no_details)
    assert no_details.content == "no notes here"

    untimed = make_chapter("<details>")
    insert_timing_info(Slide(name="A", minutes=0, source_paths=["a.md"]), untimed)
    assert untimed.content == "<details>"

    sub = make_chapter("<details>", source_path="a/b.md")
    insert_timing_info(Slide(name="A", minutes=5, source_paths=["a.md", "a/b.md"]), sub)
    assert sub.content == "<details>"