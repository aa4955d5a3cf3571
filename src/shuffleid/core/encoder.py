# SPDX-License-Identifier: MIT
"""Encode lists of non-negative integers into short IDs and back.

An :class:`IdEncoder` owns a shuffled base alphabet and a normalised
blocklist, both immutable after construction. Every call works on its own
copy of the alphabet, so a single encoder can be shared between threads.

Example:
    >>> encoder = IdEncoder()
    >>> encoder.encode([1, 2, 3])
    '86Rf07'
    >>> encoder.decode("86Rf07")
    [1, 2, 3]
"""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING, Any, Iterable

import logfire
from pydantic import ValidationError

from shuffleid.constants import (
    DEFAULT_ALPHABET,
    DEFAULT_BLOCKLIST,
    DEFAULT_MIN_LENGTH,
    MAX_VALUE,
)
from shuffleid.core.alphabet import base_alphabet, working_alphabet
from shuffleid.core.blocklist import Blocklist
from shuffleid.core.numerals import to_id, to_number
from shuffleid.core.shuffle import consistent_shuffle
from shuffleid.core.widths import IntegerWidth, check_width
from shuffleid.errors import (
    InvalidConfigurationError,
    OutOfRangeError,
    RegenerationExhaustedError,
)
from shuffleid.models import EncoderOptions

if TYPE_CHECKING:  # pragma: no cover - for type checkers only
    from shuffleid.runtime.settings import Settings


def build_options(**values: Any) -> EncoderOptions:
    """Return validated :class:`EncoderOptions` built from ``values``.

    Raises:
        InvalidConfigurationError: If any option is invalid.
    """
    try:
        return EncoderOptions(**values)
    except ValidationError as exc:
        # Summarise validation issues so the caller receives clear feedback.
        details = "; ".join(
            f"{'.'.join(map(str, error['loc']))}: {error['msg']}"
            for error in exc.errors()
        )
        raise InvalidConfigurationError(f"Invalid encoder options: {details}") from exc


def _check_number(number: Any) -> int:
    """Return ``number`` as an ``int`` within the unsigned 64-bit range."""
    try:
        value = operator.index(number)
    except TypeError:
        raise TypeError(
            f"Expected an integer, got {type(number).__name__}"
        ) from None
    if not 0 <= value <= MAX_VALUE:
        raise OutOfRangeError(value, 0, MAX_VALUE)
    return value


class IdEncoder:
    """Reversible encoder between integer lists and alphabet-based IDs."""

    def __init__(
        self,
        alphabet: str = DEFAULT_ALPHABET,
        min_length: int = DEFAULT_MIN_LENGTH,
        blocklist: Iterable[str] | None = DEFAULT_BLOCKLIST,
    ) -> None:
        """Validate the options and prepare the shuffled alphabet.

        Args:
            alphabet: Distinct single-byte characters, at least three.
            min_length: Minimum ID length between 0 and 255.
            blocklist: Words generated IDs must avoid. Pass an empty
                collection to disable blocking.

        Raises:
            InvalidConfigurationError: If any option is invalid.
        """
        if blocklist is not None and not isinstance(blocklist, str):
            blocklist = tuple(blocklist)
        options = build_options(
            alphabet=alphabet, min_length=min_length, blocklist=blocklist
        )
        self._min_length = options.min_length
        self._blocklist = Blocklist.build(options.blocklist, options.alphabet)
        self._alphabet = base_alphabet(options.alphabet)
        self._charset = frozenset(self._alphabet)
        logfire.debug(
            "IdEncoder configured",
            alphabet_length=len(self._alphabet),
            min_length=self._min_length,
            blocklist_size=len(self._blocklist),
        )

    @classmethod
    def from_options(cls, options: EncoderOptions) -> "IdEncoder":
        """Return an encoder configured from ``options``."""
        return cls(
            alphabet=options.alphabet,
            min_length=options.min_length,
            blocklist=options.blocklist,
        )

    @classmethod
    def from_settings(cls, settings: "Settings") -> "IdEncoder":
        """Return an encoder configured from application ``settings``."""
        return cls.from_options(settings.encoder_options())

    @property
    def alphabet(self) -> str:
        """Return the shuffled base alphabet."""
        return self._alphabet

    @property
    def min_length(self) -> int:
        """Return the minimum ID length."""
        return self._min_length

    @property
    def blocklist(self) -> tuple[str, ...]:
        """Return the usable blocklist words with their original casing."""
        return self._blocklist.words

    def encode(self, numbers: Iterable[int]) -> str:
        """Return the ID for ``numbers``.

        Blocked IDs are regenerated with a shifted alphabet rotation, at most
        once per alphabet character.

        Args:
            numbers: Non-negative integers no larger than ``2**64 - 1``.

        Returns:
            The ID, or ``""`` when ``numbers`` is empty.

        Raises:
            OutOfRangeError: If a number is negative or too large.
            RegenerationExhaustedError: If every attempt was blocked.
        """
        values = [_check_number(number) for number in numbers]
        if not values:
            return ""
        max_attempts = len(self._alphabet) + 1
        for attempt in range(max_attempts):
            candidate = self._encode_attempt(values, attempt)
            if not self._blocklist.is_blocked(candidate):
                return candidate
            logfire.debug("Generated ID is blocked, regenerating", attempt=attempt)
        logfire.error(
            "Unable to generate an unblocked ID",
            attempts=max_attempts,
            count=len(values),
        )
        raise RegenerationExhaustedError(max_attempts)

    def encode_one(self, number: int) -> str:
        """Return the ID for a single ``number``."""
        return self.encode([number])

    def _encode_attempt(self, values: list[int], attempt: int) -> str:
        """Return the candidate ID for ``values`` on regeneration ``attempt``."""
        alphabet = self._alphabet
        length = len(alphabet)
        offset = sum(
            ord(alphabet[value % length]) + index for index, value in enumerate(values)
        )
        offset = (len(values) + offset) % length
        offset = (offset + attempt) % length

        prefix, working = working_alphabet(alphabet, offset)
        parts = [prefix]
        last = len(values) - 1
        for index, value in enumerate(values):
            # The first working character is reserved as the separator.
            parts.append(to_id(value, working[1:]))
            if index < last:
                parts.append(working[0])
                consistent_shuffle(working)

        result = "".join(parts)
        if len(result) < self._min_length:
            result += working[0]
            while len(result) < self._min_length:
                consistent_shuffle(working)
                take = min(self._min_length - len(result), length)
                result += "".join(working[:take])
        return result

    def decode(self, id_: str | None) -> list[int]:
        """Return the numbers encoded in ``id_``.

        Malformed input never raises: empty IDs, IDs containing characters
        outside the alphabet, and IDs whose values exceed ``2**64 - 1``
        all decode to ``[]``. Padding after the last value is ignored.
        """
        if not id_:
            return []
        if any(char not in self._charset for char in id_):
            return []

        _, working = working_alphabet(self._alphabet, self._alphabet.index(id_[0]))
        remaining = id_[1:]
        result: list[int] = []
        while remaining:
            chunk, _, remaining = remaining.partition(working[0])
            if not chunk:
                break
            value = to_number(chunk, working[1:])
            if value > MAX_VALUE:
                logfire.debug("Decoded value exceeds 64 bits", length=len(id_))
                return []
            result.append(value)
            if remaining:
                consistent_shuffle(working)
        return result

    def decode_as(self, id_: str | None, width: IntegerWidth) -> list[int]:
        """Return the numbers in ``id_`` after checking they fit ``width``.

        Raises:
            OutOfRangeError: If a decoded value does not fit ``width``.
        """
        return check_width(self.decode(id_), width)


__all__ = ["IdEncoder", "build_options"]
