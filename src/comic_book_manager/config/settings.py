# src/comic_book_manager/config/settings.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from comic_book_manager.config.env import get_app_env, load_env
from comic_book_manager.models import Settings


class ConfigError(RuntimeError):
    """Raised when the configuration file is missing, unreadable or incomplete."""


DEFAULT_CONFIG_DIR = "config"
DEFAULT_CONFIG_NAME = "default"

# Tried in order after the bare name.
SUPPORTED_SUFFIXES: Tuple[str, ...] = (".yaml", ".yml", ".json")

DATABASE_URL_KEY = "database.url"
MARVEL_BASE_URL_KEY = "api.marvel_base_url"
COMICVINE_BASE_URL_KEY = "api.comicvine_base_url"


def resolve_config_file(
    config_dir: Union[str, Path] = DEFAULT_CONFIG_DIR,
    name: str = DEFAULT_CONFIG_NAME,
) -> Path:
    """
    Return the first existing file among `<dir>/<name>` and `<dir>/<name><suffix>`.

    Raises ConfigError if none exists.
    """
    base = Path(config_dir) / name
    candidates = [base, *(base.with_name(name + s) for s in SUPPORTED_SUFFIXES)]
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    raise ConfigError(
        f"configuration file {base} not found (tried: {', '.join(str(c) for c in candidates)})")


def load_settings_file(
    config_dir: Union[str, Path] = DEFAULT_CONFIG_DIR,
    name: str = DEFAULT_CONFIG_NAME,
) -> Dict[str, Any]:
    """Read and parse the configuration file. JSON files parse as YAML too."""
    path = resolve_config_file(config_dir, name)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid configuration in {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"cannot decode configuration file {path} as UTF-8: {e}") from e
    except OSError as e:
        raise ConfigError(f"cannot read configuration file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"configuration in {path} must be a mapping")
    return data


def get_setting(data: Dict[str, Any], key: str) -> str:
    """
    Look up a dotted key (e.g. "database.url") in nested mappings.

    Raises ConfigError when a segment is missing or the leaf is not a string.
    """
    node: Any = data
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            raise ConfigError(f"missing configuration key: {key}")
        node = node[part]

    if not isinstance(node, str):
        raise ConfigError(
            f"invalid type for configuration key {key}: expected string, "
            f"found {type(node).__name__}")
    return node


def load_settings(
    config_dir: Union[str, Path] = DEFAULT_CONFIG_DIR,
    *,
    dotenv_path: Optional[Union[str, Path]] = None,
    use_dotenv: bool = True,
) -> Settings:
    """
    Build the application Settings.

    Order: .env overlay, configuration file, then the required secrets.
    `dotenv_path=None` searches the CWD and its parents for `.env`;
    `use_dotenv=False` skips the overlay.
    File problems raise ConfigError before the environment is checked;
    missing secrets raise EnvError.
    """
    if use_dotenv:
        load_env(dotenv_path, override=False)

    data = load_settings_file(config_dir)
    database_url = get_setting(data, DATABASE_URL_KEY)
    marvel_base_url = get_setting(data, MARVEL_BASE_URL_KEY)
    comicvine_base_url = get_setting(data, COMICVINE_BASE_URL_KEY)

    return Settings(
        database_url=database_url,
        marvel_base_url=marvel_base_url,
        comicvine_base_url=comicvine_base_url,
        api_keys=get_app_env(use_dotenv=False),
    )


__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_DIR",
    "DEFAULT_CONFIG_NAME",
    "resolve_config_file",
    "load_settings_file",
    "get_setting",
    "load_settings",
]
