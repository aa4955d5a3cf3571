# SPDX-License-Identifier: MIT
"""Reversible short IDs built from lists of non-negative integers."""

from .core import IdEncoder, IntegerWidth
from .errors import (
    InvalidConfigurationError,
    OutOfRangeError,
    RegenerationExhaustedError,
    ShuffleIdError,
)
from .models import EncoderOptions

__all__ = [
    "EncoderOptions",
    "IdEncoder",
    "IntegerWidth",
    "InvalidConfigurationError",
    "OutOfRangeError",
    "RegenerationExhaustedError",
    "ShuffleIdError",
]
