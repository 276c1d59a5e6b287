"""Checking and reading the numbers given on the command line."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

INT_MAX = "2147483647"
INT_MIN = "-2147483648"

_NUMBER_PATTERN = re.compile(r"[+-]?[0-9]+")
_SPACES = " \t\n\v\f\r"


class ParseError(ValueError):
    """Raised when the arguments are not a valid list of numbers."""


def split_args(args: Iterable[str]) -> list[str]:
    """Split every argument on spaces and return the non-empty pieces."""
    return [piece for arg in args for piece in arg.split(" ") if piece]


def is_valid(arg: str) -> bool:
    """Return True when the argument is space-separated signed integers."""
    return all(
        _NUMBER_PATTERN.fullmatch(piece) for piece in arg.split(" ") if piece
    )


def has_duplicates(tokens: Sequence[str]) -> bool:
    """Return True when the same number text appears twice."""
    return len(set(tokens)) != len(tokens)


def _exceeds(text: str) -> bool:
    if len(text) < 10:
        return False
    limit = INT_MIN if text.startswith("-") else INT_MAX
    return limit < text[:13]


def overflows(tokens: Iterable[str]) -> bool:
    """Return True when a number is past the 32-bit integer limits."""
    return any(_exceeds(text) for text in tokens)


def _wrap32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def to_int(token: str) -> int:
    """Read a leading integer the way a 32-bit ``atoi`` does.

    Leading whitespace and one sign are skipped, reading stops at the first
    non-digit, the value wraps at 32 bits, and more than 20 digits give -1.
    """
    text = token.lstrip(_SPACES)
    sign = 1
    if text[:1] == "-":
        sign = -1
        text = text[1:]
    elif text[:1] == "+":
        text = text[1:]
    digits = re.match(r"[0-9]*", text).group()
    result = 0
    for digit in digits:
        result = _wrap32(result * 10 + int(digit))
    if len(digits) > 20:
        return -1
    return _wrap32(result * sign)


def parse_args(args: Sequence[str]) -> list[int]:
    """Check the arguments and return the numbers they hold, in order."""
    if not all(is_valid(arg) for arg in args):
        raise ParseError("invalid character in arguments")
    pieces = split_args(args)
    if has_duplicates(pieces):
        raise ParseError("duplicate number in arguments")
    if overflows(pieces):
        raise ParseError("number out of integer range")
    return [to_int(piece) for piece in pieces]