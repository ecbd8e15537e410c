"""Differences between elements of a sequence at a cyclic offset."""

from __future__ import annotations

from itertools import cycle, islice
from typing import Sequence, TypeVar

N = TypeVar("N")


def offset_differences(offset: int, values: Sequence[N]) -> list[N]:
    """Return ``values[(n + offset) % len] - values[n]`` for each ``n``."""
    values = list(values)
    shifted = islice(cycle(values), offset, None)
    return [later - earlier for earlier, later in zip(values, shifted)]