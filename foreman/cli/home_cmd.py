"""Home directory commands: inspect, materialize, and locate credential caches."""

from __future__ import annotations

from rich.markup import escape
from rich.table import Table

from foreman.cli._helpers import console, fail
from foreman.errors import EnvVarNotFoundError, ForemanIOError, UnsupportedPlatformError


def paths() -> None:
    """Show the Foreman root directory and every path derived from it."""
    from foreman.config import get_paths

    home = get_paths()

    table = Table(title="Foreman Paths")
    table.add_column("Name", style="cyan")
    table.add_column("Path")
    table.add_column("Exists")

    rows = [
        ("root", home.root_dir),
        ("bin", home.bin_dir()),
        ("tools", home.tools_dir()),
        ("user config", home.user_config()),
        ("auth store", home.auth_store()),
        ("index", home.index_file()),
    ]
    for name, path in rows:
        exists = "[green]yes[/green]" if path.exists() else "[dim]no[/dim]"
        table.add_row(name, escape(str(path)), exists)

    console.print(table)


def init() -> None:
    """Create the Foreman directory tree and default config files."""
    from foreman.config import get_paths

    home = get_paths()
    try:
        home.create_all()
    except ForemanIOError as exc:
        raise fail(exc) from None

    console.print(f"[green]Initialized[/green] {escape(str(home.root_dir))}")


def artiaa_path() -> None:
    """Print where the ArtiAA credential helper stores its tokens."""
    from foreman.config import get_paths

    try:
        path = get_paths().artiaa_path()
    except (EnvVarNotFoundError, UnsupportedPlatformError) as exc:
        raise fail(exc) from None

    console.print(escape(str(path)), soft_wrap=True)
