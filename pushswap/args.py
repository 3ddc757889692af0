"""Validation and conversion of command-line integers."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import takewhile

INT_MIN = -2147483648
INT_MAX = 2147483647

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = frozenset("0123456789")
_SIGNS = ("-", "+")
_CHECKER_COMPARE_LENGTH = 20


class ArgumentError(ValueError):
    """Raised when the command-line numbers are not acceptable."""


def _scan(text: str) -> int:
    """Read an optionally signed decimal prefix, without any range limit."""
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in _SIGNS:
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(lambda ch: ch in _DIGITS, rest))
    return sign * int(digits) if digits else 0


def parse_int(text: str) -> int:
    """Convert the leading number in ``text`` to a 32-bit signed integer.

    Leading whitespace and one sign are accepted; reading stops at the first
    non-digit. Text with no digits gives 0, and values outside the 32-bit
    range wrap around.
    """
    return (_scan(text) - INT_MIN) % 2**32 + INT_MIN


def _check_format(arg: str, digit_after_sign: bool) -> None:
    first = arg[:1]
    if first not in _SIGNS and first not in _DIGITS:
        raise ArgumentError(f"not a number: {arg!r}")
    if digit_after_sign and first in _SIGNS and arg[1:2] not in _DIGITS:
        raise ArgumentError(f"sign without digits: {arg!r}")
    if not all(ch in _DIGITS for ch in arg[1:]):
        raise ArgumentError(f"not a number: {arg!r}")
    if not INT_MIN <= _scan(arg) <= INT_MAX:
        raise ArgumentError(f"out of integer range: {arg!r}")


def validate_args(args: Iterable[str]) -> list[int]:
    """Check the sorter's arguments and return them as integers.

    Two arguments with the same numeric value are duplicates.
    """
    args = list(args)
    numbers = [parse_int(arg) for arg in args]
    if len(set(numbers)) != len(numbers):
        raise ArgumentError("duplicate value")
    for arg in args:
        _check_format(arg, digit_after_sign=True)
    return numbers


def validate_checker_args(args: Iterable[str]) -> list[int]:
    """Check the checker's arguments and return them as integers.

    Duplicates are found by comparing the first 20 characters of the
    arguments as text, and a lone sign is read as 0.
    """
    args = list(args)
    prefixes = [arg[:_CHECKER_COMPARE_LENGTH] for arg in args]
    if len(set(prefixes)) != len(prefixes):
        raise ArgumentError("duplicate value")
    for arg in args:
        _check_format(arg, digit_after_sign=False)
    return [parse_int(arg) for arg in args]