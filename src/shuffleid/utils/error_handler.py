# SPDX-License-Identifier: MIT
"""Reporting for problems met while reading configuration and blocklists."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

import logfire


class ErrorHandler(ABC):
    """Receives file problems before the loader raises to its caller.

    Implementations must not raise; the loader raises its own exception once
    the handler returns.
    """

    @abstractmethod
    def handle(
        self,
        message: str,
        exc: Exception | None = None,
        *,
        path: Path | None = None,
    ) -> None:
        """Record ``message`` with optional ``exc`` and file ``path``."""


class LoggingErrorHandler(ErrorHandler):
    """Error handler that logs via ``logfire``."""

    def handle(
        self,
        message: str,
        exc: Exception | None = None,
        *,
        path: Path | None = None,
    ) -> None:
        """Log ``message`` as an error.

        Args:
            message: Description of the problem.
            exc: Exception raised while reading, if any.
            path: File being read when the problem occurred.
        """
        attributes: dict[str, str] = {}
        if path is not None:
            attributes["path"] = str(path)
        if exc is None:
            logfire.error("{message}", message=message, **attributes)
            return
        logfire.error(
            "{message}: {exc}",
            message=message,
            exc=str(exc),
            error_type=type(exc).__name__,
            **attributes,
        )
