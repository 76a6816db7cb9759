# src/comic_book_manager/cli.py
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Callable, Dict, Optional, Union

from . import __version__
from .config.env import EnvError
from .config.logging_config import get_logger
from .config.settings import DEFAULT_CONFIG_DIR, ConfigError, load_settings
from .models import Entity, Settings

PROG = "comic-book-manager"
NO_SUBCOMMAND_HINT = "No subcommand was used. Use --help for more information."

logger = logging.getLogger("comic_book_manager")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=PROG,
        description="Manages your comic book collection",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    sub = p.add_subparsers(dest="command", metavar="COMMAND")

    list_cmd = sub.add_parser("list", help="List entities", description="List entities")
    list_cmd.add_argument(
        "entity",
        choices=Entity.choices(),
        help="The type of entity to list",
    )
    return p


def list_entity(entity: Entity, settings: Settings) -> None:
    """Placeholder listing: announce the entity, nothing is fetched yet."""
    LIST_HANDLERS[entity](settings)


def _announce(entity: Entity) -> Callable[[Settings], None]:
    def handler(settings: Settings) -> None:
        print(f"Listing {entity.value}")
    return handler


LIST_HANDLERS: Dict[Entity, Callable[[Settings], None]] = {
    entity: _announce(entity) for entity in Entity
}


def dispatch(args: argparse.Namespace, settings: Settings) -> int:
    if args.command == "list":
        entity = Entity.parse(args.entity)
        logger.debug("Dispatching list %s", entity.value)
        list_entity(entity, settings)
    else:
        print(NO_SUBCOMMAND_HINT)
    return 0


def main(
    argv: list[str] | None = None,
    *,
    config_dir: Union[str, Path] = DEFAULT_CONFIG_DIR,
    dotenv_path: Optional[Union[str, Path]] = None,
    use_dotenv: bool = True,
) -> int:
    args = build_parser().parse_args(argv)

    get_logger(
        "comic_book_manager",
        level=os.getenv("LOG_LEVEL") or "WARNING",
        log_file=os.getenv("LOG_FILE"),
    )

    try:
        settings = load_settings(config_dir, dotenv_path=dotenv_path, use_dotenv=use_dotenv)
    except ConfigError as e:
        logger.debug("Configuration failed", exc_info=True)
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1
    except EnvError as e:
        logger.debug("Environment check failed", exc_info=True)
        print(f"Environment error: {e}", file=sys.stderr)
        return 2

    logger.debug("Configuration loaded from %s", Path(config_dir).resolve())
    logger.debug("Database URL: %s", settings.database_url)
    logger.debug("Marvel API Base URL: %s", settings.marvel_base_url)
    logger.debug("ComicVine API Base URL: %s", settings.comicvine_base_url)
    logger.debug("API keys: %r", settings.api_keys)

    return dispatch(args, settings)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
