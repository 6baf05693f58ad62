"""Environment access for path resolution.

Resolution code never touches ``os.environ`` directly; it receives an
:class:`Environment` so tests can supply a fixed set of variables.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

from foreman.errors import EnvVarNotFoundError


class Environment(Protocol):
    def get(self, name: str) -> str | None: ...

    def home_dir(self) -> Path: ...


class ProcessEnvironment:
    """Read variables from the running process."""

    def get(self, name: str) -> str | None:
        return os.environ.get(name)

    def home_dir(self) -> Path:
        try:
            return Path.home()
        except (RuntimeError, KeyError):
            raise EnvVarNotFoundError("$HOME") from None


class MappingEnvironment:
    """Read variables from a fixed mapping."""

    def __init__(
        self, variables: Mapping[str, str] | None = None, home: Path | None = None
    ) -> None:
        self._variables = dict(variables or {})
        self._home = home

    def get(self, name: str) -> str | None:
        return self._variables.get(name)

    def home_dir(self) -> Path:
        if self._home is not None:
            return self._home
        home = self.get("HOME") or self.get("USERPROFILE")
        if not home:
            raise EnvVarNotFoundError("$HOME")
        return Path(home)
