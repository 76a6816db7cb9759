# src/comic_book_manager/config/env.py
from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from dotenv import dotenv_values, find_dotenv, load_dotenv

from comic_book_manager.models import ApiKeys


class EnvError(RuntimeError):
    """Raised when the .env file is unreadable or required variables are unset."""


MARVEL_API_PUBLIC_KEY = "MARVEL_API_PUBLIC_KEY"
MARVEL_API_PRIVATE_KEY = "MARVEL_API_PRIVATE_KEY"
COMICVINE_API_KEY = "COMICVINE_API_KEY"

REQUIRED_KEYS: Tuple[str, ...] = (
    MARVEL_API_PUBLIC_KEY,
    MARVEL_API_PRIVATE_KEY,
    COMICVINE_API_KEY,
)


def find_project_dotenv(start: Optional[Path] = None) -> Path:
    """
    Return the nearest `.env` in `start` (default: CWD) or one of its parents,
    or Path() when there is none.
    """
    if start is None:
        found = find_dotenv(filename=".env", usecwd=True)
        return Path(found) if found else Path()

    start_path = Path(start)
    for p in (start_path, *start_path.parents):
        candidate = p / ".env"
        if candidate.is_file():
            return candidate
    return Path()


def load_env(
    dotenv_path: Optional[Union[str, Path]] = None,
    *,
    override: bool = False,
) -> Dict[str, str]:
    """
    Load a .env file into the process environment and return its key/value pairs.

    `dotenv_path` names an exact file; None searches the CWD and its parents.
    A missing file is not an error. Existing env vars are kept unless
    `override=True`. Undecodable files raise EnvError.
    """
    path = Path(dotenv_path) if dotenv_path else find_project_dotenv()
    if not path.name or not path.is_file():
        return {}

    try:
        load_dotenv(dotenv_path=path, override=override, encoding="utf-8")
        values = dotenv_values(path, encoding="utf-8")
    except UnicodeDecodeError as e:
        raise EnvError(f"cannot decode {path} as UTF-8: {e}") from e

    return {k: v for k, v in values.items() if v is not None}


def missing_keys(keys: Tuple[str, ...] = REQUIRED_KEYS) -> list[str]:
    """Names from `keys` that are not set at all. Empty strings count as set."""
    return [k for k in keys if os.getenv(k) is None]


def get_app_env(
    dotenv_path: Optional[Union[str, Path]] = None,
    *,
    use_dotenv: bool = True,
) -> ApiKeys:
    """
    Load the API secrets and return them as an ApiKeys record.

    With `use_dotenv` the .env overlay is applied first (see `load_env`);
    process env values always win over the file.
    Raises EnvError naming every unset variable.
    """
    if use_dotenv:
        load_env(dotenv_path, override=False)

    missing = missing_keys(REQUIRED_KEYS)
    if missing:
        raise EnvError(
            f"Missing required environment variable(s): {', '.join(missing)}")

    return ApiKeys(
        marvel_public_key=os.environ[MARVEL_API_PUBLIC_KEY],
        marvel_private_key=os.environ[MARVEL_API_PRIVATE_KEY],
        comicvine_api_key=os.environ[COMICVINE_API_KEY],
    )


__all__ = [
    "EnvError",
    "REQUIRED_KEYS",
    "MARVEL_API_PUBLIC_KEY",
    "MARVEL_API_PRIVATE_KEY",
    "COMICVINE_API_KEY",
    "find_project_dotenv",
    "load_env",
    "missing_keys",
    "get_app_env",
]
