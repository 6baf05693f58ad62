"""Error types raised while resolving and materializing the Foreman home."""

from __future__ import annotations

from pathlib import Path


class ForemanError(Exception):
    """Base error for Foreman home operations."""


class EnvVarNotFoundError(ForemanError):
    """A required environment variable (or the home directory) is unavailable."""

    def __init__(self, env_var: str) -> None:
        self.env_var = env_var
        super().__init__(f"environment variable not found: {env_var}")


class ForemanIOError(ForemanError):
    """Creating a directory or writing a file under the home failed."""

    def __init__(self, path: Path, source: OSError) -> None:
        self.path = path
        self.source = source
        reason = source.strerror or str(source)
        super().__init__(f"I/O error at '{path}': {reason}")


class UnsupportedPlatformError(ForemanError, NotImplementedError):
    """The current operating system has no known ArtiAA token location."""

    def __init__(self, platform: str) -> None:
        self.platform = platform
        super().__init__(
            f"artiaa_path is only defined for Windows or Unix operating systems (got '{platform}')"
        )
