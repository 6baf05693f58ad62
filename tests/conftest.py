"""Shared test fixtures."""

from __future__ import annotations

import logging

import pytest

from foreman.config import get_paths


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Clear the cached paths and drop env vars that change resolution."""
    get_paths.cache_clear()
    for var in ("FOREMAN_HOME", "XDG_DATA_HOME", "LOCALAPPDATA"):
        monkeypatch.delenv(var, raising=False)
    yield
    get_paths.cache_clear()


@pytest.fixture()
def _caplog_foreman(caplog):
    """Attach caplog handler to the ``foreman`` logger so records are captured
    even though ``propagate=False``."""
    root = logging.getLogger("foreman")
    root.addHandler(caplog.handler)
    yield
    root.removeHandler(caplog.handler)
