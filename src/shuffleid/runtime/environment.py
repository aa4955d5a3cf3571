# SPDX-License-Identifier: MIT
"""Runtime environment singleton for shared settings and the shared encoder."""

from __future__ import annotations

from threading import Lock
from typing import TYPE_CHECKING

import logfire

from shuffleid.core.encoder import IdEncoder

if TYPE_CHECKING:  # pragma: no cover - for type checkers only
    from shuffleid.runtime.settings import Settings


class RuntimeEnv:
    """Thread-safe singleton storing application settings and the encoder.

    The encoder is immutable once built, so callers on any thread may use
    :attr:`encoder` without further locking.
    """

    _instance: "RuntimeEnv" | None = None
    _lock = Lock()

    def __init__(self, settings: "Settings") -> None:
        """Initialise the runtime environment and build the encoder."""
        self.settings = settings
        self._encoder = IdEncoder.from_settings(settings)
        # Debug logging helps diagnose configuration loading problems.
        logfire.debug("RuntimeEnv created", settings=repr(settings))

    @property
    def encoder(self) -> IdEncoder:
        """Return the encoder configured from :attr:`settings`."""
        return self._encoder

    @classmethod
    def initialize(cls, settings: "Settings") -> "RuntimeEnv":
        """Initialise and return the runtime environment.

        Args:
            settings: Validated application settings.

        Returns:
            The active :class:`RuntimeEnv` instance.

        Raises:
            InvalidConfigurationError: If the settings produce invalid encoder
                options.
        """
        with logfire.span("runtime_env.initialize"):
            with cls._lock:
                logfire.info(
                    "Initialising runtime environment",
                    min_length=settings.min_length,
                )
                cls._instance = cls(settings)
                return cls._instance

    @classmethod
    def instance(cls) -> "RuntimeEnv":
        """Return the current runtime environment.

        Raises:
            RuntimeError: If :meth:`initialize` was not called.
        """
        inst = cls._instance
        if inst is None:
            logfire.error("RuntimeEnv accessed before initialisation")
            raise RuntimeError("RuntimeEnv has not been initialised")
        return inst

    @classmethod
    def reset(cls) -> None:
        """Clear the active runtime environment.

        Useful for tests needing a fresh configuration or when settings must
        be reloaded at runtime.
        """
        with logfire.span("runtime_env.reset"):
            with cls._lock:
                logfire.info("Resetting runtime environment")
                cls._instance = None


__all__ = ["RuntimeEnv"]
