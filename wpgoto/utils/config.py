"""
wpgoto/utils/config.py - goto Configuration Parser

Parses goto.yaml and provides typed access to the projects root and the
local database conventions. Without a config file the built-in defaults
apply (127.0.0.1, root/root, wp_ table prefix).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from wpgoto.utils.errors import ConfigError


# ---------------------------------------------------------------------------
# Data models
# ---------------------------------------------------------------------------

@dataclass
class DatabaseConfig:
    """Connection settings shared by every local WordPress database."""

    host: str = "127.0.0.1"
    port: int = 3306
    user: str = "root"
    password: str = "root"
    table_prefix: str = "wp_"
    connect_timeout: int = 5

    @property
    def options_table(self) -> str:
        return f"{self.table_prefix}options"


@dataclass
class GotoConfig:
    """Top-level goto configuration."""

    projects_root: str | None = None
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    source: Path | None = None


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

_CONFIG_FILENAME = "goto.yaml"
_CONFIG_ENV = "GOTO_CONFIG"


def _database_from_dict(data: dict[str, Any]) -> DatabaseConfig:
    """Build a DatabaseConfig from a raw YAML dict."""
    defaults = DatabaseConfig()
    return DatabaseConfig(
        host=_str_or(data.get("host"), defaults.host),
        port=_to_int(data.get("port", defaults.port), "database.port"),
        user=_str_or(data.get("user"), defaults.user),
        # `password:` left empty means no password
        password=_str_or(data.get("password", defaults.password), ""),
        table_prefix=_str_or(data.get("table_prefix"), defaults.table_prefix),
        connect_timeout=_to_int(
            data.get("connect_timeout", defaults.connect_timeout), "database.connect_timeout"
        ),
    )


def _str_or(val: Any, default: str) -> str:
    return default if val is None else str(val)


def _absolute_root(root: str, config_path: Path) -> str:
    expanded = os.path.expanduser(root)
    return os.path.abspath(os.path.join(config_path.parent, expanded))


def _to_int(val: Any, key: str) -> int:
    try:
        return int(val)
    except (ValueError, TypeError):
        raise ConfigError(f"'{key}' must be an integer, got {val!r}") from None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def find_goto_yaml(start: Path | None = None) -> Path | None:
    """Walk upward from *start* (default: cwd) to find goto.yaml.

    Returns None if there is none. Raises ConfigError if the cwd is gone.
    """
    try:
        current = (start or Path.cwd()).resolve()
        while True:
            candidate = current / _CONFIG_FILENAME
            if candidate.is_file():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent
    except OSError as err:
        raise ConfigError(f"Cannot search for {_CONFIG_FILENAME}: {err}") from err


def config_path_default(start: Path | None = None) -> Path | None:
    """Return the config file to use: $GOTO_CONFIG, else goto.yaml above cwd."""
    explicit = os.environ.get(_CONFIG_ENV)
    if explicit:
        path = Path(explicit).expanduser()
        if not path.is_file():
            raise ConfigError(f"{_CONFIG_ENV} points to a missing file: {path}")
        return path
    return find_goto_yaml(start)


def load_config(path: Path | None = None) -> GotoConfig:
    """Load and parse goto.yaml into a GotoConfig.

    If *path* is None, uses config_path_default(); a missing file yields
    the defaults. A relative projects_root is taken from the config file's
    directory.
    """
    config_path = path if path else config_path_default()
    if config_path is None:
        return GotoConfig()

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except yaml.YAMLError as err:
        raise ConfigError(f"Invalid YAML in {config_path}: {err}") from err
    except (OSError, UnicodeDecodeError) as err:
        raise ConfigError(f"Cannot read {config_path}: {err}") from err

    if not isinstance(raw, dict):
        raise ConfigError(f"{config_path} must contain a mapping")

    db_raw = raw.get("database") or {}
    if not isinstance(db_raw, dict):
        raise ConfigError(f"'database' in {config_path} must be a mapping")

    root = raw.get("projects_root")
    return GotoConfig(
        projects_root=_absolute_root(str(root), config_path) if root else None,
        database=_database_from_dict(db_raw),
        source=config_path,
    )
