"""Validation and conversion of the integers given on the command line."""

from __future__ import annotations

from typing import Iterable

_WHITESPACE = " \n\t\r\v\f"
_DIGITS = "0123456789"
_MAX_DIGITS = 10
_INT_MAX = 2147483647
_INT_MIN_MAGNITUDE = 2147483648


class ParseError(ValueError):
    """Raised when the arguments are not a valid list of distinct integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def atoi(text: str) -> int:
    """Read a leading integer like the classic ``atoi``, wrapping to 32 bits.

    Leading whitespace is skipped, one optional sign is accepted and reading
    stops at the first character that is not a digit. No digits give 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for char in rest:
        if char not in _DIGITS:
            break
        value = _to_int32(value * 10 + (ord(char) - ord("0")))
    return _to_int32(sign * value)


def split_words(text: str) -> list[str]:
    """Split on single spaces, dropping the empty pieces between them."""
    return [word for word in text.split(" ") if word]


def _check_number(word: str) -> None:
    negative = word.startswith("-")
    digits = word[1:] if negative else word
    if any(char not in _DIGITS for char in digits):
        raise ParseError()
    if len(digits) > _MAX_DIGITS:
        raise ParseError()
    limit = _INT_MIN_MAGNITUDE if negative else _INT_MAX
    if int(digits or "0") > limit:
        raise ParseError()


def parse_args(args: Iterable[str]) -> list[int]:
    """Turn the program arguments into the list of numbers for stack a.

    A single argument is split on spaces; several arguments are taken one
    number each. Every word must be an optional ``-`` followed by digits,
    within the 32-bit signed range, and no value may appear twice.
    """
    words = list(args)
    if len(words) == 1:
        words = split_words(words[0])
    for word in words:
        _check_number(word)
    numbers = [atoi(word) for word in words]
    if len(set(numbers)) != len(numbers):
        raise ParseError()
    return numbers