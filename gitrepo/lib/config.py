"""
Configuration for gitrepo.

Settings come from a KEY=value env file:

    GIT_BINARY=/usr/bin/git
    GIT_TIMEOUT=60

Unset keys keep their defaults. Values are checked against
gitrepo/schemas/config.schema.json before use.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

import jsonschema

from . import envparse

logger = logging.getLogger(__name__)

DEFAULT_GIT_BINARY = "git"
DEFAULT_TIMEOUT = 30
KNOWN_KEYS = {"GIT_BINARY", "GIT_TIMEOUT"}

CONFIG_SCHEMA_PATH = Path(__file__).parent.parent / "schemas" / "config.schema.json"


class ConfigError(ValueError):
    """Config values rejected by the schema."""

    def __init__(self, message: str, key: str | None = None):
        self.key = key
        super().__init__(message + (f" ({key})" if key else ""))


@dataclass(frozen=True)
class GitConfig:
    """How git is invoked."""
    git_binary: str = DEFAULT_GIT_BINARY
    timeout: int = DEFAULT_TIMEOUT  # seconds per invocation


_current = GitConfig()
_schema: dict | None = None


def check_env(env: dict) -> None:
    """
    Check raw env values against the config schema.

    Raises:
        ConfigError: naming the offending key
    """
    global _schema
    if _schema is None:
        _schema = json.loads(CONFIG_SCHEMA_PATH.read_text())

    error = jsonschema.exceptions.best_match(jsonschema.Draft7Validator(_schema).iter_errors(env))
    if error is not None:
        key = ".".join(str(p) for p in error.absolute_path) or None
        raise ConfigError(error.message, key)


def load_config(path: Path) -> GitConfig:
    """Load an env file and return GitConfig."""
    env = envparse.load_env(str(path))
    check_env(env)

    unknown = sorted(set(env) - KNOWN_KEYS)
    if unknown:
        logger.warning(f"Ignoring unknown config keys in {path}: {', '.join(unknown)}")

    return GitConfig(
        git_binary=env.get("GIT_BINARY", DEFAULT_GIT_BINARY),
        timeout=int(env.get("GIT_TIMEOUT", str(DEFAULT_TIMEOUT))),
    )


def get_config() -> GitConfig:
    """Get the active configuration."""
    return _current


def set_config(config: GitConfig) -> None:
    """Replace the active configuration."""
    global _current
    _current = config
