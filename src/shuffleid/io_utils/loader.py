# SPDX-License-Identifier: MIT
"""Utilities for loading configuration files and blocklists.

The helpers in this module centralise file-system access for the optional
YAML configuration and for external blocklist files. Errors are reported
through an :class:`~shuffleid.utils.ErrorHandler` and surfaced to callers as
concise exceptions.
"""

from __future__ import annotations

from pathlib import Path
from typing import TypeVar

import logfire
import yaml
from pydantic import TypeAdapter, ValidationError

from shuffleid.constants import DEFAULT_CONFIG_DIR, DEFAULT_CONFIG_FILE
from shuffleid.models import AppConfig
from shuffleid.utils import ErrorHandler, LoggingErrorHandler

T = TypeVar("T")


def _read_file(path: Path, error_handler: ErrorHandler | None = None) -> str:
    """Return the UTF-8 text stored at ``path``.

    A leading byte order mark, as written by some Windows editors, is dropped
    so the first blocklist word or YAML key is read intact.

    Raises:
        FileNotFoundError: If the file does not exist.
        RuntimeError: If the file cannot be read.
    """
    handler = error_handler or LoggingErrorHandler()
    with logfire.span("fs.read_text", attributes={"path": str(path)}):
        try:
            text = path.read_text(encoding="utf-8-sig")
        except FileNotFoundError as exc:
            handler.handle("File not found", exc, path=path)
            raise
        except (OSError, UnicodeDecodeError) as exc:
            handler.handle("Unreadable file", exc, path=path)
            raise RuntimeError(f"Cannot read {path}: {exc}") from exc
        logfire.debug("Read text file", path=str(path), chars=len(text))
        return text


def _read_yaml_file(
    path: Path,
    schema: type[T],
    error_handler: ErrorHandler | None = None,
) -> T:
    """Return YAML data loaded from ``path`` validated against ``schema``.

    An empty document validates as an empty mapping so a blank configuration
    file yields the schema defaults.
    """
    handler = error_handler or LoggingErrorHandler()
    with logfire.span("fs.read_yaml", attributes={"path": str(path)}):
        try:
            adapter = TypeAdapter(schema)
            data = yaml.safe_load(_read_file(path, handler))
            return adapter.validate_python({} if data is None else data)
        except FileNotFoundError:
            raise
        except (RuntimeError, ValidationError, yaml.YAMLError, ValueError) as exc:
            handler.handle("Invalid YAML configuration", exc, path=path)
            raise RuntimeError(f"Invalid configuration file {path}: {exc}") from exc


def load_app_config(
    base_dir: Path | str = DEFAULT_CONFIG_DIR,
    filename: Path | str = DEFAULT_CONFIG_FILE,
) -> AppConfig:
    """Return application configuration from ``base_dir``.

    Raises:
        FileNotFoundError: If the file does not exist.
        RuntimeError: If the file cannot be read or fails validation.
    """
    path = Path(base_dir) / Path(filename)
    return _read_yaml_file(path, AppConfig)


def _parse_text_blocklist(text: str) -> list[str]:
    """Return words from newline-separated ``text``.

    Surrounding whitespace is stripped; blank lines and ``#`` comments are
    skipped.
    """
    words: list[str] = []
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if line and not line.startswith("#"):
            words.append(line)
    return words


def load_blocklist(
    path: Path | str, error_handler: ErrorHandler | None = None
) -> list[str]:
    """Return blocklist words stored at ``path``.

    Files ending in ``.json`` must hold a JSON array of strings. Any other file
    is read as plain text with one word per line.

    Args:
        path: Blocklist file location.
        error_handler: Processor for any errors encountered.

    Returns:
        Words in file order. Normalisation happens in the encoder.

    Raises:
        FileNotFoundError: If the file does not exist.
        RuntimeError: If the file cannot be read or parsed.
    """
    handler = error_handler or LoggingErrorHandler()
    file_path = Path(path)
    with logfire.span("loader.load_blocklist", attributes={"path": str(file_path)}):
        text = _read_file(file_path, handler)
        if file_path.suffix.lower() != ".json":
            return _parse_text_blocklist(text)
        try:
            return TypeAdapter(list[str]).validate_json(text)
        except ValidationError as exc:
            handler.handle("Invalid blocklist data", exc, path=file_path)
            raise RuntimeError(f"Invalid blocklist file: {exc}") from exc


__all__ = ["load_app_config", "load_blocklist"]
