# SPDX-License-Identifier: MIT
"""Test configuration for shuffleid.

Keeps Logfire output local and provides a clean runtime environment.
"""

from __future__ import annotations

import logfire
import pytest


@pytest.fixture(autouse=True, scope="session")
def _configure_logfire():
    """Configure Logfire once without exporting or printing spans."""

    logfire.configure(send_to_logfire=False, console=False)
    yield


@pytest.fixture
def runtime_env():
    """Reset the runtime environment before and after a test."""

    from shuffleid.runtime.environment import RuntimeEnv

    RuntimeEnv.reset()
    yield RuntimeEnv
    RuntimeEnv.reset()


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch):
    """Run in an empty directory with no ``SHUFFLEID_`` variables set."""

    import os

    for name in list(os.environ):
        if name.upper().startswith("SHUFFLEID_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return tmp_path
