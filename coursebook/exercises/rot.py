"""A readable stream that applies a rotation cipher to ASCII letters."""

from __future__ import annotations

import io
import string
import sys
from typing import BinaryIO


def _rotate(alphabet: str, rot: int) -> str:
    return "".join(
        chr((ord(c) - ord(alphabet[0]) + rot) % 26 + ord(alphabet[0])) for c in alphabet
    )


class RotDecoder(io.RawIOBase):
    """Reads from another binary stream, rotating ASCII letters by ``rot``."""

    def __init__(self, input: BinaryIO, rot: int) -> None:
        super().__init__()
        self._input = input
        self.rot = rot
        letters = string.ascii_uppercase + string.ascii_lowercase
        rotated = _rotate(string.ascii_uppercase, rot) + _rotate(
            string.ascii_lowercase, rot
        )
        self._table = bytes.maketrans(letters.encode("ascii"), rotated.encode("ascii"))

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        """Fill the buffer with decoded bytes and return how many were read."""
        view = memoryview(buffer).cast("B")
        data = self._input.read(len(view))
        if not data:
            return 0
        size = len(data)
        view[:size] = bytes(data).translate(self._table)
        return size


def main(argv: list[str] | None = None) -> int:
    """Decode and print a sample message."""
    decoder = RotDecoder(io.BytesIO(b"Gb trg gb gur bgure fvqr!"), 13)
    print(decoder.read().decode("ascii"))
    return 0


if __name__ == "__main__":
    sys.exit(main())