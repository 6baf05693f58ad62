"""All of the paths that Foreman needs to deal with.

Everything lives under a single root directory, ``~/.foreman`` unless
``FOREMAN_HOME`` points at an existing directory. Derived paths are
computed from the root on every call and are not checked for existence;
run :meth:`ForemanPaths.create_all` before relying on them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from foreman._log import get_logger
from foreman.config import DEFAULT_DIR_NAME, FOREMAN_HOME_ENV
from foreman.defaults import DEFAULT_AUTH_CONFIG, DEFAULT_USER_CONFIG
from foreman.env import Environment, ProcessEnvironment
from foreman.errors import EnvVarNotFoundError, UnsupportedPlatformError
from foreman.fs import create_dir_all, write_if_not_found
from foreman.platforms import Platform, detect_platform

logger = get_logger("paths")

ARTIAA_TOKENS_FILE = "artiaa-tokens.json"


@dataclass(frozen=True)
class OverrideResolution:
    """Outcome of validating ``FOREMAN_HOME``.

    ``root`` is None when the default should be used; ``warnings`` explains
    why an override that was set got rejected.
    """

    root: Path | None
    warnings: list[str] = field(default_factory=list)


def _fallback_warning(detail: str) -> str:
    return f"{detail}. Using default path `~/{DEFAULT_DIR_NAME}`"


def resolve_root_override(env: Environment) -> OverrideResolution:
    value = env.get(FOREMAN_HOME_ENV)
    if value is None:
        return OverrideResolution(root=None)

    # Path("") is the working directory, never a valid override
    if not value:
        return OverrideResolution(
            root=None,
            warnings=[_fallback_warning(f"path specified using {FOREMAN_HOME_ENV} is empty")],
        )

    path = Path(value)
    if path.is_dir():
        return OverrideResolution(root=path)

    problem = "is not a directory" if path.exists() else "does not exist"
    return OverrideResolution(
        root=None,
        warnings=[
            _fallback_warning(f"path specified using {FOREMAN_HOME_ENV} `{path}` {problem}")
        ],
    )


@dataclass(frozen=True)
class ForemanPaths:
    root_dir: Path

    @classmethod
    def from_env(cls, env: Environment | None = None) -> ForemanPaths | None:
        """Return paths rooted at ``FOREMAN_HOME``, or None to use the default.

        An override that does not name an existing directory is logged and ignored.
        """
        resolution = resolve_root_override(env or ProcessEnvironment())
        for message in resolution.warnings:
            logger.warning(message)
        if resolution.root is None:
            return None
        return cls(resolution.root)

    @classmethod
    def default(cls, env: Environment | None = None) -> ForemanPaths:
        """Return paths rooted at ``<home>/.foreman``.

        Raises :class:`EnvVarNotFoundError` if the home directory is unknown.
        """
        home = (env or ProcessEnvironment()).home_dir()
        return cls(home / DEFAULT_DIR_NAME)

    @classmethod
    def resolve(cls, env: Environment | None = None) -> ForemanPaths:
        env = env or ProcessEnvironment()
        return cls.from_env(env) or cls.default(env)

    def _from_root(self, name: str) -> Path:
        return self.root_dir / name

    def tools_dir(self) -> Path:
        return self._from_root("tools")

    def bin_dir(self) -> Path:
        return self._from_root("bin")

    def auth_store(self) -> Path:
        return self._from_root("auth.toml")

    def user_config(self) -> Path:
        return self._from_root("foreman.toml")

    def index_file(self) -> Path:
        return self._from_root("tool-cache.json")

    def create_all(
        self,
        user_config_text: str = DEFAULT_USER_CONFIG,
        auth_config_text: str = DEFAULT_AUTH_CONFIG,
    ) -> None:
        """Create the directory tree and seed config files that don't exist yet.

        Safe to call repeatedly; existing files are never overwritten.
        Raises :class:`~foreman.errors.ForemanIOError` on the first failure
        without undoing earlier steps.
        """
        for directory in (self.root_dir, self.bin_dir(), self.tools_dir()):
            create_dir_all(directory)
            logger.debug("Ensured directory %s", directory)

        for target, text in (
            (self.user_config(), user_config_text),
            (self.auth_store(), auth_config_text),
        ):
            if write_if_not_found(target, text):
                logger.debug("Seeded %s with default content", target)

    def artiaa_path(
        self, env: Environment | None = None, platform: Platform | None = None
    ) -> Path:
        return artiaa_path(env, platform)


def _require(env: Environment, name: str, display: str) -> str:
    value = env.get(name)
    if not value:
        raise EnvVarNotFoundError(display)
    return value


def artiaa_path(env: Environment | None = None, platform: Platform | None = None) -> Path:
    """Return where the ArtiAA credential helper caches its tokens.

    Pure lookup over environment variables; the file may not exist.
    """
    env = env or ProcessEnvironment()
    platform = platform or detect_platform()

    if platform is Platform.WINDOWS:
        local_app_data = _require(env, "LOCALAPPDATA", "%LOCALAPPDATA%")
        return Path(f"{local_app_data}\\ArtiAA\\{ARTIAA_TOKENS_FILE}")

    if platform is Platform.MACOS:
        home = _require(env, "HOME", "$HOME")
        return Path(f"{home}/Library/Application Support/ArtiAA/{ARTIAA_TOKENS_FILE}")

    if platform is Platform.UNIX:
        xdg_data_home = env.get("XDG_DATA_HOME")
        if xdg_data_home:
            return Path(f"{xdg_data_home}/{ARTIAA_TOKENS_FILE}")
        home = _require(env, "HOME", "$HOME")
        return Path(f"{home}/.local/share/{ARTIAA_TOKENS_FILE}")

    raise UnsupportedPlatformError(str(platform))
