# SPDX-License-Identifier: MIT
"""Blocklist normalisation and matching for generated IDs.

Comparisons are case-insensitive throughout. Short words and short IDs only
block on exact equality, words containing digits only block as a prefix or
suffix, and every other word blocks anywhere inside the ID. The digit rule is
kept separate from the substring rule so that the same IDs are rejected as in
other implementations of the scheme.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from shuffleid.constants import MIN_BLOCKLIST_WORD_LENGTH

# IDs or words at or below this length only block on exact equality.
_EXACT_MATCH_LENGTH = 3


def normalise_blocklist(words: Iterable[str], alphabet: str) -> tuple[str, ...]:
    """Return the usable subset of ``words`` for ``alphabet``.

    Words are de-duplicated case-insensitively and the first occurrence keeps
    its casing. Words shorter than three characters, or containing a character
    that the alphabet lacks in any casing, are dropped.

    Args:
        words: Candidate blocklist words.
        alphabet: Alphabet the encoder will draw IDs from.

    Returns:
        Words in first-seen order with their original casing.
    """
    allowed = set(alphabet.lower())
    seen: set[str] = set()
    result: list[str] = []
    for word in words:
        folded = word.lower()
        if folded in seen:
            continue
        seen.add(folded)
        if len(word) < MIN_BLOCKLIST_WORD_LENGTH:
            continue
        if any(char not in allowed for char in folded):
            continue
        result.append(word)
    return tuple(result)


def _word_blocks(word: str, candidate: str) -> bool:
    """Return ``True`` when lower-cased ``word`` blocks lower-cased ``candidate``."""
    if len(word) > len(candidate):
        return False
    if len(candidate) <= _EXACT_MATCH_LENGTH or len(word) <= _EXACT_MATCH_LENGTH:
        return candidate == word
    if any(char.isdigit() for char in word):
        return candidate.startswith(word) or candidate.endswith(word)
    return word in candidate


@dataclass(frozen=True)
class Blocklist:
    """Immutable set of normalised words checked against generated IDs."""

    words: tuple[str, ...] = ()
    _folded: tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        folded = tuple(word.lower() for word in self.words)
        object.__setattr__(self, "_folded", folded)

    @classmethod
    def build(cls, words: Iterable[str], alphabet: str) -> "Blocklist":
        """Return a blocklist holding the words usable with ``alphabet``."""
        return cls(normalise_blocklist(words, alphabet))

    def is_blocked(self, candidate: str) -> bool:
        """Return ``True`` if any word forbids ``candidate``."""
        folded = candidate.lower()
        return any(_word_blocks(word, folded) for word in self._folded)

    def __len__(self) -> int:
        return len(self.words)


__all__ = ["Blocklist", "normalise_blocklist"]
