"""Process-wide path configuration for Foreman.

Respects ``FOREMAN_HOME`` when it names an existing directory and falls
back to ``~/.foreman``.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from foreman.paths import ForemanPaths

FOREMAN_HOME_ENV = "FOREMAN_HOME"
DEFAULT_DIR_NAME = ".foreman"


@lru_cache(maxsize=1)
def get_paths() -> ForemanPaths:
    """Return the Foreman paths for the running process.

    Resolution order:
    1. ``FOREMAN_HOME`` environment variable (must be an existing directory)
    2. ``~/.foreman``
    """
    from foreman.env import ProcessEnvironment
    from foreman.paths import ForemanPaths

    return ForemanPaths.resolve(ProcessEnvironment())
