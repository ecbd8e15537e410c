"""Transposing a matrix."""

from __future__ import annotations

import pprint
import sys
from typing import Sequence

_SAMPLE = [
    [101, 102, 103],
    [201, 202, 203],
    [301, 302, 303],
]


def transpose(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the transpose of a rectangular matrix."""
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("matrix rows must all have the same length")
    return [list(column) for column in zip(*rows)]


def main(argv: list[str] | None = None) -> int:
    """Print a matrix and its transpose.

    Each argument is one row of comma-separated integers; without arguments a
    sample 3x3 matrix is used.
    """
    if argv:
        matrix = [[int(cell) for cell in row.split(",")] for row in argv]
    else:
        matrix = _SAMPLE
    try:
        transposed = transpose(matrix)
    except ValueError as exc:
        sys.stderr.write(f"Error: {exc}\n")
        return 1
    sys.stdout.write(f"matrix: {pprint.pformat(matrix)}\n")
    sys.stdout.write(f"transposed: {pprint.pformat(transposed)}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))