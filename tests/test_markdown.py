from pathlib import PurePosixPath

import pytest

from coursebook.markdown import duration, relative_link


def test_relative_link_same_dir():
    assert relative_link("welcome.md", "hello-world.md") == "./hello-world.md"


def test_relative_link_subdir():
    assert relative_link("hello-world.md", "hello-world/foo.md") == "./hello-world/foo.md"


def test_relative_link_parent_dir():
    assert relative_link("references/foo.md", "hello-world.md") == "../hello-world.md"


def test_relative_link_deep_parent_dir():
    assert relative_link("references/foo/bar.md", "hello-world.md") == "../../hello-world.md"


def test_relative_link_peer_dir():
    assert relative_link("references/foo.md", "hello-world/foo.md") == "../hello-world/foo.md"


def test_relative_link_accepts_paths():
    assert (
        relative_link(PurePosixPath("references/foo.md"), PurePosixPath("hello-world.md"))
        == "../hello-world.md"
    )


@pytest.mark.parametrize(
    "minutes, expected",
    [
        (0, "0 minutes"),
        (1, "1 minute"),
        (2, "2 minutes"),
        (7, "10 minutes"),
        (60, "1 hour"),
        (61, "1 hour and 5 minutes"),
        (120, "2 hours"),
        (130, "2 hours and 10 minutes"),
    ],
)
def test_duration(minutes, expected):
    assert duration(minutes) == expected


def test_duration_multiple_of_five_unchanged():
    assert duration(10) == "10 minutes"


def test_duration_negative():
    with pytest.raises(ValueError):
        duration(-1)