"""Configuration management module.

Loads the optional plugin-docs.toml file from the working directory and
applies environment overrides. The resulting DocsConfig is passed explicitly
to the cloner and the generator; nothing reads the environment later.

Environment:
    JX_DOCS_DISABLE_CLONE: boolean-like flag, skips the clone phase
    GITHUB_TOKEN: token for the GitHub API (optional, raises rate limits)
"""

import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

import tomli

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "plugin-docs.toml"
DISABLE_CLONE_ENV = "JX_DOCS_DISABLE_CLONE"
GITHUB_TOKEN_ENV = "GITHUB_TOKEN"

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"", "0", "false", "no", "off"}


@dataclass
class DocsConfig:
    """plugin-docs configuration data."""

    organisation: str = "jenkins-x-plugins"
    repo_prefix: str = "jx-"
    plugins_dir: str = "jx-plugins"
    reference_dir: str = "content/en/v3/develop/reference/jx"
    clone_repositories: bool = True
    ignore_plugins: list[str] = field(default_factory=list)
    github_token: str | None = None
    git_timeout: int = 600

    def plugins_path(self, base_dir: Path) -> Path:
        return Path(base_dir) / self.plugins_dir

    def reference_path(self, base_dir: Path) -> Path:
        return Path(base_dir) / self.reference_dir

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, excluding None values and the token."""
        data = asdict(self)
        data.pop("github_token", None)
        return {k: v for k, v in data.items() if v is not None}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DocsConfig":
        """Create from dictionary.

        Raises:
            ConfigError: If a value has the wrong type
        """
        defaults = cls()
        ignore_plugins = data.get("ignore_plugins", [])
        if not isinstance(ignore_plugins, list) or not all(
            isinstance(p, str) for p in ignore_plugins
        ):
            raise ConfigError("ignore_plugins must be a list of plugin names")

        git_timeout = data.get("git_timeout", defaults.git_timeout)
        if not isinstance(git_timeout, int) or git_timeout <= 0:
            raise ConfigError(f"git_timeout must be a positive integer (got: {git_timeout!r})")

        clone_repositories = data.get("clone_repositories", defaults.clone_repositories)
        if not isinstance(clone_repositories, bool):
            raise ConfigError(
                f"clone_repositories must be true or false (got: {clone_repositories!r})"
            )

        return cls(
            organisation=str(data.get("organisation", defaults.organisation)),
            repo_prefix=str(data.get("repo_prefix", defaults.repo_prefix)),
            plugins_dir=str(data.get("plugins_dir", defaults.plugins_dir)),
            reference_dir=str(data.get("reference_dir", defaults.reference_dir)),
            clone_repositories=clone_repositories,
            ignore_plugins=list(ignore_plugins),
            git_timeout=git_timeout,
        )


def parse_bool(value: str, name: str) -> bool:
    """Parse a boolean-like environment value.

    Raises:
        ConfigError: If the value is not recognised
    """
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean value (got: {value!r})")


class ConfigManager:
    """Load plugin-docs configuration.

    Configuration is read from <base_dir>/plugin-docs.toml when present;
    defaults are used otherwise.
    """

    @classmethod
    def get_config_path(cls, base_dir: Path, custom_path: str | None = None) -> Path:
        """Get configuration file path.

        Args:
            base_dir: Working directory of the run
            custom_path: Custom config file path (optional)

        Returns:
            Path to config file

        Raises:
            ConfigError: If a custom path does not exist
        """
        if custom_path:
            path = Path(custom_path).expanduser()
            if not path.exists():
                raise ConfigError(f"Config file not found: {path}")
            return path

        return Path(base_dir) / CONFIG_FILE_NAME

    @classmethod
    def load_config(
        cls,
        base_dir: Path,
        custom_path: str | None = None,
        environ: dict[str, str] | None = None,
    ) -> DocsConfig:
        """Load configuration from file and environment.

        Args:
            base_dir: Working directory of the run
            custom_path: Custom config file path (optional)
            environ: Environment mapping, defaults to os.environ

        Returns:
            DocsConfig object

        Raises:
            ConfigError: If loading fails
        """
        config_path = cls.get_config_path(base_dir, custom_path)

        if config_path.exists():
            try:
                with open(config_path, "rb") as f:
                    data = tomli.load(f)
            except (OSError, tomli.TOMLDecodeError) as e:
                raise ConfigError(f"Failed to load config {config_path}: {e}") from e
            logger.debug(f"Loaded config from: {config_path}")
            config = DocsConfig.from_dict(data)
        else:
            logger.debug("Config file not found, using defaults")
            config = DocsConfig()

        return cls.apply_environment(config, os.environ if environ is None else environ)

    @classmethod
    def apply_environment(cls, config: DocsConfig, environ: dict[str, str]) -> DocsConfig:
        """Apply environment overrides to a loaded configuration."""
        disable_clone = environ.get(DISABLE_CLONE_ENV)
        if disable_clone is not None and parse_bool(disable_clone, DISABLE_CLONE_ENV):
            logger.debug(f"{DISABLE_CLONE_ENV} set, cloning disabled")
            config.clone_repositories = False

        token = environ.get(GITHUB_TOKEN_ENV)
        if token:
            config.github_token = token

        return config


__all__ = [
    "CONFIG_FILE_NAME",
    "DISABLE_CLONE_ENV",
    "ConfigManager",
    "DocsConfig",
    "parse_bool",
]
