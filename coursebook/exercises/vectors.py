"""Magnitude and normalisation of three-dimensional vectors."""

from __future__ import annotations

import math
import sys
from typing import Sequence


def magnitude(vector: Sequence[float]) -> float:
    """Return the length of the vector."""
    return math.hypot(*vector)


def normalize(vector: Sequence[float]) -> tuple[float, ...]:
    """Return the vector scaled to length 1.0, keeping its direction."""
    mag = magnitude(vector)
    if mag == 0:
        raise ValueError("cannot normalize a zero vector")
    return tuple(coord / mag for coord in vector)


def main(argv: list[str] | None = None) -> int:
    """Print magnitudes of sample vectors before and after normalisation."""
    print(f"Magnitude of a unit vector: {magnitude([0.0, 1.0, 0.0])}")
    v = [1.0, 2.0, 9.0]
    print(f"Magnitude of {v}: {magnitude(v)}")
    normalized = normalize(v)
    print(
        f"Magnitude of {list(normalized)} after normalization: "
        f"{magnitude(normalized)}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())