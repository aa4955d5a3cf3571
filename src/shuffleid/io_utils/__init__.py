# SPDX-License-Identifier: MIT
"""File loading helpers for configuration and blocklists."""

from .loader import load_app_config, load_blocklist

__all__ = ["load_app_config", "load_blocklist"]
