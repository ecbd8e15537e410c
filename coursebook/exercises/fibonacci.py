"""Fibonacci numbers limited to 32 unsigned bits."""

from __future__ import annotations

import sys

_U32_MAX = 0xFFFFFFFF


def fib(n: int) -> int:
    """Return the ``n``-th Fibonacci number, counting fib(1) == fib(2) == 1.

    Raises OverflowError when the result does not fit in 32 unsigned bits.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    previous, current = 1, 1
    for _ in range(max(n - 2, 0)):
        previous, current = current, previous + current
        if current > _U32_MAX:
            raise OverflowError(f"fib({n}) does not fit in 32 bits")
    return current


def main(argv: list[str] | None = None) -> int:
    """Print the Fibonacci number at the given position (20)."""
    n = int(argv[0]) if argv else 20
    try:
        value = fib(n)
    except (ValueError, OverflowError) as exc:
        sys.stderr.write(f"Error: {exc}\n")
        return 1
    sys.stdout.write(f"fib(n) = {value}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))