from .env import EnvError, get_app_env
from .settings import ConfigError, load_settings

__all__ = [
    "EnvError",
    "ConfigError",
    "get_app_env",
    "load_settings",
]
