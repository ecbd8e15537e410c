"""Length of a Collatz sequence."""

from __future__ import annotations

import sys


def collatz_length(n: int) -> int:
    """Return the length of the Collatz sequence that starts at ``n``."""
    length = 1
    while n > 1:
        n = n // 2 if n % 2 == 0 else 3 * n + 1
        length += 1
    return length


def main(argv: list[str] | None = None) -> int:
    """Print the length of the sequence that starts at the given number (11)."""
    start = int(argv[0]) if argv else 11
    length = collatz_length(start)
    sys.stdout.write(f"Length: {length}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))