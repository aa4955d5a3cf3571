# SPDX-License-Identifier: MIT
"""Alphabet preparation shared by encoding and decoding."""

from __future__ import annotations

from shuffleid.core.shuffle import shuffled


def base_alphabet(alphabet: str) -> str:
    """Return the permanent, shuffled alphabet for a validated ``alphabet``."""
    return shuffled(alphabet)


def working_alphabet(alphabet: str, offset: int) -> tuple[str, list[str]]:
    """Return the prefix and a fresh working copy for ``offset``.

    The base alphabet is rotated left by ``offset``. Its first character is
    the ID prefix; the rotated copy is then reversed to become the mutable
    working alphabet for a single encode or decode call.

    Args:
        alphabet: Shuffled base alphabet.
        offset: Rotation in ``0 .. len(alphabet) - 1``.

    Returns:
        A ``(prefix, working)`` tuple. ``working`` is never shared.
    """
    rotated = alphabet[offset:] + alphabet[:offset]
    return rotated[0], list(reversed(rotated))


__all__ = ["base_alphabet", "working_alphabet"]
