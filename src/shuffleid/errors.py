# SPDX-License-Identifier: MIT
"""Exception hierarchy raised by the encoder.

There is no error for malformed IDs: decoding an ID that this package could
not have produced yields an empty list.
"""

from __future__ import annotations


class ShuffleIdError(Exception):
    """Base class for all encoder errors."""


class InvalidConfigurationError(ShuffleIdError, ValueError):
    """Encoder options failed validation at construction time."""


class OutOfRangeError(ShuffleIdError, ValueError):
    """A number is negative or wider than the supported integer width."""

    def __init__(self, value: int, minimum: int, maximum: int) -> None:
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"Value {value} is outside the supported range [{minimum}, {maximum}]."
        )


class RegenerationExhaustedError(ShuffleIdError, RuntimeError):
    """Every regeneration attempt produced a blocked ID."""

    def __init__(self, attempts: int) -> None:
        self.attempts = attempts
        super().__init__(f"Reached max attempts ({attempts}) to re-generate the ID.")


__all__ = [
    "InvalidConfigurationError",
    "OutOfRangeError",
    "RegenerationExhaustedError",
    "ShuffleIdError",
]
