"""Filesystem helpers that attach the target path to OS errors."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from foreman.errors import ForemanIOError


def create_dir_all(path: Path) -> None:
    """Create *path* and any missing ancestors. No-op if it already exists."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ForemanIOError(path, exc) from exc


def write_if_not_found(path: Path, contents: str) -> bool:
    """Write *contents* to *path* only if the file does not exist.

    The text is written to a temporary file beside *path* and hard-linked
    into place, so *path* either doesn't exist or holds the full contents.
    If another writer publishes first, its file is kept. Returns True if
    this call created the file.
    """
    if path.exists():
        return False

    try:
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    except OSError as exc:
        raise ForemanIOError(path, exc) from exc

    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(contents)
        os.link(tmp, path)
    except FileExistsError:
        return False
    except OSError as exc:
        raise ForemanIOError(path, exc) from exc
    finally:
        tmp.unlink(missing_ok=True)
    return True
