# SPDX-License-Identifier: MIT
"""Deterministic, content-driven permutation of character sequences."""

from __future__ import annotations

from typing import MutableSequence


def consistent_shuffle(chars: MutableSequence[str]) -> None:
    """Permute ``chars`` in place using only their own content.

    The same input sequence always yields the same output sequence. The index
    arithmetic is part of the ID format.

    Args:
        chars: Single-character strings to shuffle in place.
    """
    length = len(chars)
    i, j = 0, length - 1
    while j > 0:
        r = (i * j + ord(chars[i]) + ord(chars[j])) % length
        chars[i], chars[r] = chars[r], chars[i]
        i += 1
        j -= 1


def shuffled(text: str) -> str:
    """Return ``text`` permuted by :func:`consistent_shuffle`."""
    chars = list(text)
    consistent_shuffle(chars)
    return "".join(chars)


__all__ = ["consistent_shuffle", "shuffled"]
