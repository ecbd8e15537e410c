"""Counting how often each value has been seen."""

from __future__ import annotations

import sys
from typing import Generic, Hashable, TypeVar

T = TypeVar("T", bound=Hashable)


class Counter(Generic[T]):
    """Counts the number of times each value has been seen."""

    def __init__(self) -> None:
        self._values: dict[T, int] = {}

    def count(self, value: T) -> None:
        """Count one occurrence of the value."""
        self._values[value] = self._values.get(value, 0) + 1

    def times_seen(self, value: T) -> int:
        """Return how many times the value has been counted."""
        return self._values.get(value, 0)


def main(argv: list[str] | None = None) -> int:
    """Count some sample values and print the tallies."""
    ctr: Counter[int] = Counter()
    for value in (13, 14, 16, 14, 14, 11):
        ctr.count(value)
    for i in range(10, 20):
        print(f"saw {ctr.times_seen(i)} values equal to {i}")

    fruit: Counter[str] = Counter()
    for value in ("apple", "orange", "apple"):
        fruit.count(value)
    print(f"got {fruit.times_seen('apple')} apples")
    return 0


if __name__ == "__main__":
    sys.exit(main())