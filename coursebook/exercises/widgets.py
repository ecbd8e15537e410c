"""A tiny text GUI of labels, buttons and windows."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod


def _lines(text: str) -> list[str]:
    """Split text into lines; a trailing newline ends the last line."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class Widget(ABC):
    """Something that can be drawn as text."""

    @abstractmethod
    def width(self) -> int:
        """Natural width of the widget."""

    @abstractmethod
    def render(self) -> str:
        """Return the widget drawn as text, each line ending in a newline."""

    def draw(self) -> str:
        """Draw the widget on standard output and return what was written."""
        text = f"{self.render()}\n"
        sys.stdout.write(text)
        return text


class Label(Widget):
    """Plain text, possibly over several lines."""

    def __init__(self, label: str) -> None:
        self.label = label

    def width(self) -> int:
        return max((len(line) for line in _lines(self.label)), default=0)

    def render(self) -> str:
        return f"{self.label}\n"


class Button(Widget):
    """A label in a box."""

    def __init__(self, label: str) -> None:
        self.label = Label(label)

    def width(self) -> int:
        return self.label.width() + 8

    def render(self) -> str:
        width = self.width()
        border = f"+{'-' * width}+\n"
        body = "".join(f"|{line:^{width}}|\n" for line in _lines(self.label.render()))
        return border + body + border


class Window(Widget):
    """A titled frame around a column of widgets."""

    def __init__(self, title: str) -> None:
        self.title = title
        self.widgets: list[Widget] = []

    def add_widget(self, widget: Widget) -> None:
        """Append a widget to the window."""
        self.widgets.append(widget)

    def _inner_width(self) -> int:
        widest = max((widget.width() for widget in self.widgets), default=0)
        return max(len(self.title), widest)

    def width(self) -> int:
        # Two characters of border and padding on each side.
        return self._inner_width() + 4

    def render(self) -> str:
        inner = "".join(widget.render() for widget in self.widgets)
        width = self._inner_width()
        border = f"+-{'-' * width}-+\n"
        parts = [
            border,
            f"| {self.title:^{width}} |\n",
            f"+={'=' * width}=+\n",
        ]
        parts.extend(f"| {line:{width}} |\n" for line in _lines(inner))
        parts.append(border)
        return "".join(parts)


def main(argv: list[str] | None = None) -> int:
    """Draw a sample window."""
    window = Window("Rust GUI Demo 1.23")
    window.add_widget(Label("This is a small text GUI demo."))
    window.add_widget(Button("Click me!"))
    window.draw()
    return 0


if __name__ == "__main__":
    sys.exit(main())