# SPDX-License-Identifier: MIT
"""Centralised application configuration management.

This module exposes :class:`Settings`, a ``pydantic-settings`` model that
combines values sourced from an optional YAML configuration file and
environment variables prefixed with ``SHUFFLEID_``. Environment variables take
precedence over file-based values and the merged configuration is validated
before use.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

from dotenv import dotenv_values
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from shuffleid.constants import (
    DEFAULT_ALPHABET,
    DEFAULT_BLOCKLIST,
    DEFAULT_CONFIG_DIR,
    DEFAULT_CONFIG_FILE,
    DEFAULT_MIN_LENGTH,
    MAX_MIN_LENGTH,
)
from shuffleid.core.encoder import build_options
from shuffleid.io_utils.loader import load_app_config, load_blocklist
from shuffleid.models import AppConfig, EncoderOptions, validate_alphabet

ENV_PREFIX = "SHUFFLEID_"

LogLevel = Literal["fatal", "error", "warn", "notice", "info", "debug", "trace"]


class Settings(BaseSettings):
    """Application settings combining file-based and environment configuration."""

    alphabet: str = Field(
        DEFAULT_ALPHABET, description="Alphabet used to build IDs."
    )
    min_length: int = Field(
        DEFAULT_MIN_LENGTH,
        ge=0,
        le=MAX_MIN_LENGTH,
        description="Minimum length of generated IDs.",
    )
    blocklist: list[str] | None = Field(
        None, description="Inline blocklist replacing the built-in list when set."
    )
    blocklist_file: Path | None = Field(
        None, description="JSON or plain-text file holding blocklist words."
    )
    use_blocklist: bool = Field(
        True, description="Disable to generate IDs without any blocklist."
    )
    log_level: LogLevel = Field("warn", description="Logging verbosity level.")
    logfire_token: str | None = Field(
        None, description="Logfire authentication token, if available.", repr=False
    )

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, extra="ignore")

    @field_validator("alphabet")
    @classmethod
    def _check_alphabet(cls, value: str) -> str:
        return validate_alphabet(value)

    def resolve_blocklist(self) -> tuple[str, ...]:
        """Return the blocklist words selected by these settings.

        A blocklist file wins over an inline list, which wins over the
        built-in list. ``use_blocklist=False`` disables blocking entirely.

        Raises:
            FileNotFoundError: If ``blocklist_file`` does not exist.
            RuntimeError: If ``blocklist_file`` cannot be parsed.
        """
        if not self.use_blocklist:
            return ()
        if self.blocklist_file is not None:
            return tuple(load_blocklist(self.blocklist_file))
        if self.blocklist is not None:
            return tuple(self.blocklist)
        return DEFAULT_BLOCKLIST

    def encoder_options(self) -> EncoderOptions:
        """Return validated encoder options derived from these settings."""
        return build_options(
            alphabet=self.alphabet,
            min_length=self.min_length,
            blocklist=self.resolve_blocklist(),
        )


def _file_values(
    config: AppConfig, base_dir: Path | None, env_file: Path | None
) -> dict[str, object]:
    """Return explicitly set file values not overridden by the environment.

    Variables in the process environment and in ``env_file`` both win over
    the YAML file.
    """
    values = config.model_dump(exclude_unset=True)
    blocklist_file = values.get("blocklist_file")
    if base_dir is not None and blocklist_file is not None:
        path = Path(blocklist_file)
        # Relative blocklist paths are resolved against the config file.
        values["blocklist_file"] = path if path.is_absolute() else base_dir / path
    overridden = {name.upper() for name in os.environ}
    if env_file is not None:
        overridden.update(name.upper() for name in dotenv_values(env_file))
    return {
        key: value
        for key, value in values.items()
        if f"{ENV_PREFIX}{key.upper()}" not in overridden
    }


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load and validate application settings.

    Configuration values are read from the YAML configuration file and then
    merged with environment variables using ``pydantic-settings``. When a value
    is provided in both sources the environment variable wins. A ``.env`` file
    in the working directory is loaded automatically when present. Without
    ``config_path`` the default ``config/shuffleid.yaml`` is used if it
    exists, otherwise built-in defaults apply.

    Args:
        config_path: Optional path to a YAML configuration file.

    Returns:
        Settings: Fully validated application configuration.

    Raises:
        FileNotFoundError: If ``config_path`` does not exist.
        RuntimeError: If configuration values are invalid.
    """
    if config_path:
        cfg_path = Path(config_path)
        config = load_app_config(cfg_path.parent, cfg_path.name)
        base_dir: Path | None = cfg_path.parent
    else:
        default_path = DEFAULT_CONFIG_DIR / DEFAULT_CONFIG_FILE
        config = load_app_config() if default_path.exists() else AppConfig()
        base_dir = DEFAULT_CONFIG_DIR if default_path.exists() else None
    env_file_path = Path(".env")
    env_file = env_file_path if env_file_path.exists() else None
    try:
        # Validate and merge configuration from file, env file and environment.
        return Settings(**_file_values(config, base_dir, env_file), _env_file=env_file)
    except ValidationError as exc:
        # Summarise validation issues so the caller receives clear feedback.
        details = "; ".join(
            f"{'.'.join(map(str, error['loc']))}: {error['msg']}"
            for error in exc.errors()
        )
        raise RuntimeError(f"Invalid configuration: {details}") from exc
