from .entity import Entity
from .settings import ApiKeys, Settings

__all__ = [
    "Entity",
    "ApiKeys",
    "Settings",
]
