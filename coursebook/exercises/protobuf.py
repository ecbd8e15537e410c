"""Decoding a subset of the protobuf wire format into message objects."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Protocol, TypeVar, Union


class ProtobufError(ValueError):
    """The data is not a valid encoded message."""


class InvalidVarintError(ProtobufError):
    def __init__(self) -> None:
        super().__init__("Invalid varint")


class InvalidWireTypeError(ProtobufError):
    def __init__(self) -> None:
        super().__init__("Invalid wire-type")


class UnexpectedEOFError(ProtobufError):
    def __init__(self) -> None:
        super().__init__("Unexpected EOF")


class UnexpectedWireTypeError(ProtobufError):
    def __init__(self) -> None:
        super().__init__("Unexpected wire-type")


class InvalidStringError(ProtobufError):
    def __init__(self) -> None:
        super().__init__("Invalid string (not UTF-8)")


class WireType(IntEnum):
    """A wire type as seen on the wire."""

    VARINT = 0
    """A single varint."""
    LEN = 2
    """A varint length followed by that many bytes."""
    I32 = 5
    """Four bytes holding a little-endian signed 32-bit integer."""


@dataclass(frozen=True)
class FieldValue:
    """A field's value, typed by its wire type."""

    wire_type: WireType
    value: Union[int, bytes]

    def as_string(self) -> str:
        """Return the value as text, for a length-delimited field."""
        data = self.as_bytes()
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidStringError() from exc

    def as_bytes(self) -> bytes:
        """Return the raw bytes of a length-delimited field."""
        if self.wire_type is not WireType.LEN:
            raise UnexpectedWireTypeError()
        return bytes(self.value)

    def as_u64(self) -> int:
        """Return the integer of a varint field."""
        if self.wire_type is not WireType.VARINT:
            raise UnexpectedWireTypeError()
        return int(self.value)


@dataclass(frozen=True)
class Field:
    """A field number with its value."""

    field_num: int
    value: FieldValue


class _Message(Protocol):
    def add_field(self, field: Field) -> None: ...


M = TypeVar("M", bound=_Message)


def parse_varint(data: bytes | memoryview) -> tuple[int, bytes | memoryview]:
    """Parse a varint, returning its value and the bytes after it."""
    for i, byte in enumerate(data[:7]):
        if not byte & 0x80:
            value = 0
            for part in reversed(bytes(data[: i + 1])):
                value = (value << 7) | (part & 0x7F)
            return value, data[i + 1 :]
    raise InvalidVarintError()


def unpack_tag(tag: int) -> tuple[int, WireType]:
    """Split a tag into a field number and a wire type."""
    try:
        wire_type = WireType(tag & 0x7)
    except ValueError as exc:
        raise InvalidWireTypeError() from exc
    return tag >> 3, wire_type


def parse_field(data: bytes | memoryview) -> tuple[Field, bytes | memoryview]:
    """Parse one field, returning it and the bytes after it."""
    tag, remainder = parse_varint(data)
    field_num, wire_type = unpack_tag(tag)
    if wire_type is WireType.VARINT:
        number, remainder = parse_varint(remainder)
        value = FieldValue(wire_type, number)
    elif wire_type is WireType.LEN:
        length, remainder = parse_varint(remainder)
        if len(remainder) < length:
            raise UnexpectedEOFError()
        value = FieldValue(wire_type, bytes(remainder[:length]))
        remainder = remainder[length:]
    else:
        if len(remainder) < 4:
            raise UnexpectedEOFError()
        number = int.from_bytes(bytes(remainder[:4]), "little", signed=True)
        value = FieldValue(wire_type, number)
        remainder = remainder[4:]
    return Field(field_num, value), remainder


def parse_message(data: bytes | memoryview, message_type: type[M]) -> M:
    """Parse all of ``data`` into a new message of the given type."""
    result = message_type()
    remaining = memoryview(data)
    while remaining:
        parsed, remaining = parse_field(remaining)
        result.add_field(parsed)
    return result


@dataclass
class PhoneNumber:
    """A phone number entry."""

    number: str = ""
    type_: str = ""

    def add_field(self, field: Field) -> None:
        """Store a decoded field; unknown fields are skipped."""
        if field.field_num == 1:
            self.number = field.value.as_string()
        elif field.field_num == 2:
            self.type_ = field.value.as_string()


@dataclass
class Person:
    """A person with an identifier and phone numbers."""

    name: str = ""
    id: int = 0
    phone: list[PhoneNumber] = field(default_factory=list)

    def add_field(self, field: Field) -> None:
        """Store a decoded field; unknown fields are skipped."""
        if field.field_num == 1:
            self.name = field.value.as_string()
        elif field.field_num == 2:
            self.id = field.value.as_u64()
        elif field.field_num == 3:
            self.phone.append(parse_message(field.value.as_bytes(), PhoneNumber))


_SAMPLE = (
    b"\x0a\x07maxwell\x10\x2a"
    b"\x1a\x10\x0a\x08ext-1001\x12\x04home"
    b"\x1a\x12\x0a\x08ext-2002\x12\x06mobile"
)


def main(argv: list[str] | None = None) -> int:
    """Decode a sample person and print it."""
    try:
        person = parse_message(_SAMPLE, Person)
    except ProtobufError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(person)
    return 0


if __name__ == "__main__":
    sys.exit(main())