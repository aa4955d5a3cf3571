# SPDX-License-Identifier: MIT
"""Helpers for enabling Pydantic Logfire telemetry."""

from __future__ import annotations

import os
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Literal

import logfire

SERVICE_NAME = "shuffleid"
TOKEN_ENV_VAR = "SHUFFLEID_LOGFIRE_TOKEN"


def package_version() -> str:
    """Return the installed ``shuffleid`` version, or ``"unknown"``."""
    try:
        return version(SERVICE_NAME)
    except PackageNotFoundError:  # pragma: no cover - source checkouts
        return "unknown"


def _mask_token(value: str | None) -> str | None:
    """Return a masked representation of ``value`` for safe logging."""

    if not value:
        return None
    return f"{value[:4]}..."


def init_logfire(
    token: str | None = None,
    min_log_level: Literal[
        "fatal", "error", "warn", "notice", "info", "debug", "trace"
    ] = "warn",
) -> None:
    """Configure Logfire for the command-line tool.

    Console output goes to stderr so that IDs printed on stdout stay clean
    for piping. Spans are only exported when a token is available.

    Args:
        token: Optional Logfire API token. If omitted, ``SHUFFLEID_LOGFIRE_TOKEN``
            from the environment is used.
        min_log_level: Minimum level for console and telemetry output.
    """

    key = token or os.getenv(TOKEN_ENV_VAR)
    logfire.configure(
        token=key,
        send_to_logfire="if-token-present",
        service_name=SERVICE_NAME,
        service_version=package_version(),
        console=logfire.ConsoleOptions(
            min_log_level=min_log_level,
            show_project_link=False,
            output=sys.stderr,
        ),
        min_level=min_log_level,
    )
    logfire.debug("Configured logfire", token=_mask_token(key))
