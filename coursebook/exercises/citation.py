"""Choosing the lesser of two citations."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Protocol, TypeVar


class _LessThan(Protocol):
    def less_than(self, other) -> bool: ...


L = TypeVar("L", bound=_LessThan)


@dataclass(frozen=True)
class Citation:
    """A citation ordered by author, then by year."""

    author: str
    year: int

    def less_than(self, other: Citation) -> bool:
        """Return True if this citation sorts before the other."""
        if self.author != other.author:
            return self.author < other.author
        return self.year < other.year


def minimum(left: L, right: L) -> L:
    """Return ``left`` if it is less than ``right``, otherwise ``right``."""
    return left if left.less_than(right) else right


def main(argv: list[str] | None = None) -> int:
    """Print the lesser of some pairs of sample citations."""
    cit1 = Citation("Shapiro", 2011)
    cit2 = Citation("Baumann", 2010)
    cit3 = Citation("Baumann", 2019)
    for left, right in ((cit1, cit2), (cit2, cit3), (cit1, cit3)):
        print(f"min({left}, {right}) = {minimum(left, right)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())