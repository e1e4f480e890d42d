"""Reading the command-line numbers that make up the starting stack ``a``."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
MAX_DIGITS = 10

_DIGITS = frozenset("0123456789")
_WHITESPACE = frozenset(" \t\n\v\f\r")


class ParseError(ValueError):
    """Raised when the arguments do not describe a valid stack."""


def _is_digit(char: str) -> bool:
    return char in _DIGITS


def to_long(text: str) -> int:
    """Read a leading integer from ``text``.

    Leading whitespace is skipped and one optional sign is accepted. Digits
    are read until the first non-digit; with no digits the result is 0.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for char in rest:
        if not _is_digit(char):
            break
        result = result * 10 + int(char)
    return sign * result


def is_valid_number(text: str) -> bool:
    """Tell whether ``text`` is a plain 32-bit signed integer.

    An optional sign followed by one to ten ASCII digits, and nothing else,
    whose value lies within the 32-bit signed range.
    """
    body = text[1:] if text[:1] in ("-", "+") else text
    if not body:
        return False
    if not all(_is_digit(char) for char in body):
        return False
    if len(body) > MAX_DIGITS:
        return False
    return INT_MIN <= to_long(text) <= INT_MAX


def _read_numbers(tokens: Iterable[str]) -> list[int]:
    values: list[int] = []
    seen: set[int] = set()
    for token in tokens:
        if not is_valid_number(token):
            raise ParseError(f"not a valid integer: {token!r}")
        value = to_long(token)
        if value in seen:
            raise ParseError(f"duplicate value: {value}")
        seen.add(value)
        values.append(value)
    return values


def parse_stack(args: Sequence[str]) -> list[int]:
    """Turn the program arguments into the values of stack ``a``, top first.

    A single argument holding a space is split on spaces, so ``"1 2 3"``
    counts the same as three separate arguments. Any invalid or repeated
    number raises :class:`ParseError`.
    """
    if len(args) == 1 and " " in args[0]:
        tokens = [part for part in args[0].split(" ") if part]
        if not tokens:
            raise ParseError("no numbers given")
        return _read_numbers(tokens)
    return _read_numbers(args)