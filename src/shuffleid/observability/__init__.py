# SPDX-License-Identifier: MIT
"""Telemetry helpers.

Exports:
    init_logfire: Configure Pydantic Logfire for the command-line tool.
    package_version: Installed package version.
"""

from .monitoring import init_logfire, package_version

__all__ = ["init_logfire", "package_version"]
