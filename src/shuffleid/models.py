# SPDX-License-Identifier: MIT
"""Pydantic models describing encoder options and file-based configuration.

:class:`EncoderOptions` is the contract accepted by
:class:`shuffleid.core.encoder.IdEncoder`. :class:`AppConfig` mirrors the
optional YAML configuration file consumed by the command-line interface.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from shuffleid.constants import (
    DEFAULT_ALPHABET,
    DEFAULT_BLOCKLIST,
    DEFAULT_MIN_LENGTH,
    MAX_MIN_LENGTH,
    MIN_ALPHABET_LENGTH,
)


class StrictModel(BaseModel):
    """Base model with strict settings to prevent shape drift."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=False)


def validate_alphabet(value: str) -> str:
    """Return ``value`` when it is usable as an encoder alphabet.

    Checks run in a fixed order so the first reported problem is stable:
    duplicates, then multi-byte characters, then length.

    Raises:
        ValueError: If the alphabet is unusable.
    """
    if len(set(value)) != len(value):
        raise ValueError("The alphabet must not contain duplicate characters.")
    if len(value.encode("utf-8")) != len(value):
        raise ValueError("The alphabet must not contain multi-byte characters.")
    if len(value) < MIN_ALPHABET_LENGTH:
        raise ValueError(
            f"The alphabet must contain at least {MIN_ALPHABET_LENGTH} characters."
        )
    return value


class EncoderOptions(StrictModel):
    """Options controlling how numbers are turned into IDs."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    alphabet: str = Field(
        DEFAULT_ALPHABET,
        description="Distinct single-byte characters used to build IDs.",
    )
    min_length: int = Field(
        DEFAULT_MIN_LENGTH,
        ge=0,
        le=MAX_MIN_LENGTH,
        description="Minimum length of generated IDs.",
    )
    blocklist: tuple[str, ...] = Field(
        DEFAULT_BLOCKLIST,
        description="Words that must not appear in generated IDs.",
    )

    @field_validator("alphabet")
    @classmethod
    def _check_alphabet(cls, value: str) -> str:
        return validate_alphabet(value)


class AppConfig(StrictModel):
    """Top-level file configuration for the command-line interface."""

    alphabet: Annotated[
        str, Field(min_length=1, description="Alphabet used to build IDs.")
    ] = DEFAULT_ALPHABET
    min_length: int = Field(
        DEFAULT_MIN_LENGTH,
        ge=0,
        le=MAX_MIN_LENGTH,
        description="Minimum length of generated IDs.",
    )
    blocklist: list[str] | None = Field(
        None,
        description="Inline blocklist replacing the built-in list when set.",
    )
    blocklist_file: Path | None = Field(
        None,
        description="JSON or plain-text file holding blocklist words.",
    )
    use_blocklist: bool = Field(
        True, description="Disable to generate IDs without any blocklist."
    )
    log_level: Annotated[
        str, Field(min_length=1, description="Logging verbosity level.")
    ] = "warn"


__all__ = ["AppConfig", "EncoderOptions", "StrictModel", "validate_alphabet"]
