"""Configuration sources for git-style and environment lookups."""

import logging
import os
import subprocess
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Optional, Protocol, Union

import yaml
from pydantic import BaseModel, Field, ValidationError

from .errors import ConfigFileError

logger = logging.getLogger(__name__)

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


class ConfigSource(Protocol):
    """Read-only access to the git config scope and the environment scope."""

    def git_get(self, key: str) -> tuple[str, bool]: ...

    def env_get(self, key: str) -> tuple[str, bool]: ...

    def env_bool(self, key: str, default: bool = False) -> bool: ...


def fold_key(key: str) -> str:
    """Case-fold a git config key the way git does.

    The section and variable name are case-insensitive; a subsection such as
    ``https://Example.com/`` in ``http.https://Example.com/.sslcainfo`` is not.
    """
    section, dot, rest = key.partition(".")
    if not dot:
        return key.lower()
    subsection, dot, name = rest.rpartition(".")
    if not dot:
        return f"{section.lower()}.{name.lower()}"
    return f"{section.lower()}.{subsection}.{name.lower()}"


def parse_bool(value: str, default: bool = False) -> bool:
    """Interpret a configuration string as a boolean.

    Unset, empty and unrecognised values yield ``default``.
    """
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


class ConfigFile(BaseModel):
    """On-disk YAML configuration."""

    git: dict[str, Union[str, list[str]]] = Field(default_factory=dict)
    env: dict[str, str] = Field(default_factory=dict)


class Configuration:
    """In-memory configuration with a multi-valued git scope and an environment scope."""

    def __init__(
        self,
        git: Optional[Mapping[str, Union[str, Iterable[str]]]] = None,
        env: Optional[Mapping[str, str]] = None,
    ):
        """Initialize configuration.

        Args:
            git: Git config values; a key may map to a single string or a
                list of values (the last one wins on lookup)
            env: Environment variables
        """
        self._git: dict[str, list[str]] = {}
        for key, value in (git or {}).items():
            if isinstance(value, str):
                self.add_git_value(key, value)
            else:
                for item in value:
                    self.add_git_value(key, item)
        self._env: dict[str, str] = dict(env or {})

    def add_git_value(self, key: str, value: str) -> None:
        self._git.setdefault(fold_key(key), []).append(value)

    def git_get(self, key: str) -> tuple[str, bool]:
        values = self._git.get(fold_key(key))
        if not values:
            return "", False
        return values[-1], True

    def git_get_all(self, key: str) -> list[str]:
        return list(self._git.get(fold_key(key), []))

    def env_get(self, key: str) -> tuple[str, bool]:
        if key in self._env:
            return self._env[key], True
        return "", False

    def env_bool(self, key: str, default: bool = False) -> bool:
        value, ok = self.env_get(key)
        if not ok:
            return default
        return parse_bool(value, default)

    @classmethod
    def from_environment(
        cls, environ: Optional[Mapping[str, str]] = None, git: bool = True
    ) -> "Configuration":
        """Build configuration from the process environment and ``git config``.

        Args:
            environ: Environment mapping (default: os.environ)
            git: Whether to read the git scope by running ``git config``

        Returns:
            Configuration instance
        """
        config = cls(env=os.environ if environ is None else environ)
        if git:
            for key, value in read_git_config():
                config.add_git_value(key, value)
        return config

    @classmethod
    def from_yaml(cls, config_path: Union[str, Path]) -> "Configuration":
        """Load configuration from a YAML file.

        The file holds optional ``git`` and ``env`` mappings.

        Args:
            config_path: Path to YAML config file

        Returns:
            Configuration instance

        Raises:
            ConfigFileError: If config file cannot be loaded or parsed
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigFileError(f"Config file not found: {config_path}")

        try:
            with open(config_path, "r") as f:
                data = yaml.safe_load(f) or {}
            parsed = ConfigFile.model_validate(data)
        except (OSError, yaml.YAMLError, ValidationError) as e:
            raise ConfigFileError(f"Failed to load config {config_path}: {e}")

        return cls(git=parsed.git, env=parsed.env)


def parse_git_config_list(output: bytes) -> list[tuple[str, str]]:
    """Parse the output of ``git config --null --list``.

    Each entry is ``key\\nvalue`` terminated by NUL; a key without a value
    (``[core] bare``) has no newline and is treated as ``"true"``.
    """
    entries = []
    for raw in output.split(b"\0"):
        if not raw:
            continue
        key, sep, value = raw.decode("utf-8", errors="replace").partition("\n")
        entries.append((key, value if sep else "true"))
    return entries


def read_git_config(cwd: Optional[Union[str, Path]] = None) -> list[tuple[str, str]]:
    """Read all visible git config entries.

    Returns an empty list if git is unavailable or the command fails.
    """
    try:
        result = subprocess.run(
            ["git", "config", "--null", "--list"],
            cwd=cwd,
            capture_output=True,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as e:
        logger.debug("Error reading git config: %s", e)
        return []
    return parse_git_config_list(result.stdout)
