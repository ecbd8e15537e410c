"""Tokenizing and parsing a tiny arithmetic expression language."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Union

_U32_MAX = 0xFFFFFFFF


class Op(Enum):
    """An arithmetic operator."""

    ADD = "+"
    SUB = "-"


@dataclass(frozen=True)
class NumberToken:
    """A run of digits."""

    text: str


@dataclass(frozen=True)
class IdentifierToken:
    """A variable name."""

    name: str


@dataclass(frozen=True)
class OperatorToken:
    """An operator symbol."""

    op: Op


Token = Union[NumberToken, IdentifierToken, OperatorToken]


@dataclass(frozen=True)
class Var:
    """A reference to a variable."""

    name: str


@dataclass(frozen=True)
class Number:
    """A literal number."""

    value: int


@dataclass(frozen=True)
class Operation:
    """A binary operation."""

    left: Expression
    op: Op
    right: Expression


Expression = Union[Var, Number, Operation]


class ParserError(Exception):
    """The input is not a valid expression."""


class TokenizerError(ParserError):
    """The input holds a character that starts no token."""

    def __init__(self, character: str) -> None:
        super().__init__(f"Unexpected character '{character}' in input")
        self.character = character


class UnexpectedEOFError(ParserError):
    """The input ended where an operand was expected."""

    def __init__(self) -> None:
        super().__init__("Unexpected end of input")


class UnexpectedTokenError(ParserError):
    """A token appeared where it is not allowed."""

    def __init__(self, token: Token) -> None:
        super().__init__(f"Unexpected token {token!r}")
        self.token = token


class InvalidNumberError(ParserError):
    """A number does not fit in 32 unsigned bits."""

    def __init__(self, text: str) -> None:
        super().__init__("Invalid number")
        self.text = text


_LEXEME = re.compile(
    r"(?P<number>[0-9]+)|(?P<ident>[a-z][a-z_0-9]*)|(?P<op>[+-])|(?P<other>.)",
    re.DOTALL,
)


def tokenize(input_text: str) -> Iterator[Token]:
    """Yield the tokens of the input, raising TokenizerError at a bad character."""
    for match in _LEXEME.finditer(input_text):
        if match.group("number") is not None:
            yield NumberToken(match.group("number"))
        elif match.group("ident") is not None:
            yield IdentifierToken(match.group("ident"))
        elif match.group("op") is not None:
            yield OperatorToken(Op(match.group("op")))
        else:
            raise TokenizerError(match.group("other"))


def _operand(token: Token) -> Expression:
    if isinstance(token, NumberToken):
        value = int(token.text)
        if value > _U32_MAX:
            raise InvalidNumberError(token.text)
        return Number(value)
    if isinstance(token, IdentifierToken):
        return Var(token.name)
    raise UnexpectedTokenError(token)


def parse(input_text: str) -> Expression:
    """Parse the input into an expression; operators group to the right."""
    tokens = tokenize(input_text)
    operands: list[Expression] = []
    operators: list[Op] = []
    while True:
        item = next(tokens, None)
        if item is None:
            raise UnexpectedEOFError()
        operands.append(_operand(item))
        following = next(tokens, None)
        if following is None:
            break
        if not isinstance(following, OperatorToken):
            raise UnexpectedTokenError(following)
        operators.append(following.op)

    expression = operands.pop()
    for op, left in zip(reversed(operators), reversed(operands)):
        expression = Operation(left, op, expression)
    return expression


def main(argv: list[str] | None = None) -> int:
    """Parse a sample expression and print it."""
    try:
        expression = parse("10+foo+20-30")
    except ParserError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(repr(expression))
    return 0


if __name__ == "__main__":
    sys.exit(main())