# SPDX-License-Identifier: MIT
"""Core encoding algorithms.

Exports:
    IdEncoder: Encode integer lists into IDs and decode them back.
    Blocklist: Normalised words rejected in generated IDs.
    IntegerWidth: Fixed integer widths for caller-side range checks.
    check_width: Verify decoded values fit an :class:`IntegerWidth`.
    consistent_shuffle: Deterministic in-place permutation.
"""

from .blocklist import Blocklist
from .encoder import IdEncoder
from .shuffle import consistent_shuffle
from .widths import IntegerWidth, check_width

__all__ = [
    "Blocklist",
    "IdEncoder",
    "IntegerWidth",
    "check_width",
    "consistent_shuffle",
]
