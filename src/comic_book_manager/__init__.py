# src/comic_book_manager/__init__.py
__version__ = "0.1.0"

from .config.settings import ConfigError, load_settings
from .config.env import EnvError
from .models import ApiKeys, Entity, Settings

__all__ = [
    "__version__",
    "ConfigError",
    "EnvError",
    "load_settings",
    "ApiKeys",
    "Entity",
    "Settings",
]
