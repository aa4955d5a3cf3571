# SPDX-License-Identifier: MIT
"""Positional numeral conversion using an arbitrary digit set."""

from __future__ import annotations

from typing import Sequence


def to_id(number: int, digits: Sequence[str]) -> str:
    """Return ``number`` written in base ``len(digits)``.

    The most significant digit comes first and ``0`` yields a single digit.

    Args:
        number: Non-negative integer to convert.
        digits: Glyphs for digit values ``0 .. len(digits) - 1``.

    Returns:
        The numeral string.
    """
    base = len(digits)
    glyphs: list[str] = []
    result = number
    while True:
        result, remainder = divmod(result, base)
        glyphs.append(digits[remainder])
        if result == 0:
            break
    return "".join(reversed(glyphs))


def to_number(chunk: str, digits: Sequence[str]) -> int:
    """Return the integer written as ``chunk`` in base ``len(digits)``.

    Args:
        chunk: Numeral produced by :func:`to_id`.
        digits: Digit glyphs used when the numeral was written.

    Raises:
        ValueError: If ``chunk`` contains a character missing from ``digits``.
    """
    base = len(digits)
    result = 0
    for char in chunk:
        result = result * base + digits.index(char)
    return result


__all__ = ["to_id", "to_number"]
