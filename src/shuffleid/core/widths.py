# SPDX-License-Identifier: MIT
"""Fixed-width integer bounds for callers that store IDs in narrower types.

The encoder itself always works on unsigned 64-bit values. Callers that keep
numbers in, say, a signed 32-bit column check decoded values here instead of
relying on per-type encoder overloads.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from shuffleid.errors import OutOfRangeError


class IntegerWidth(Enum):
    """Supported integer widths as ``(bits, signed)`` pairs."""

    UINT8 = (8, False)
    INT8 = (8, True)
    UINT16 = (16, False)
    INT16 = (16, True)
    UINT32 = (32, False)
    INT32 = (32, True)
    UINT64 = (64, False)
    INT64 = (64, True)

    @property
    def bits(self) -> int:
        """Return the width in bits."""
        return self.value[0]

    @property
    def signed(self) -> bool:
        """Return ``True`` for two's complement widths."""
        return self.value[1]

    @property
    def minimum(self) -> int:
        """Return the smallest representable value."""
        return -(2 ** (self.bits - 1)) if self.signed else 0

    @property
    def maximum(self) -> int:
        """Return the largest representable value."""
        return 2 ** (self.bits - 1) - 1 if self.signed else 2**self.bits - 1

    @classmethod
    def parse(cls, name: str) -> "IntegerWidth":
        """Return the width called ``name`` (case-insensitive, e.g. ``"int32"``).

        Raises:
            ValueError: If ``name`` is not a known width.
        """
        try:
            return cls[name.upper()]
        except KeyError:
            choices = ", ".join(member.name.lower() for member in cls)
            raise ValueError(
                f"Unknown integer width '{name}'. Expected one of: {choices}."
            ) from None


def check_width(numbers: Iterable[int], width: IntegerWidth) -> list[int]:
    """Return ``numbers`` as a list after checking each fits ``width``.

    Raises:
        OutOfRangeError: If a value falls outside the width's bounds.
    """
    values = list(numbers)
    for value in values:
        if not width.minimum <= value <= width.maximum:
            raise OutOfRangeError(value, width.minimum, width.maximum)
    return values


__all__ = ["IntegerWidth", "check_width"]
