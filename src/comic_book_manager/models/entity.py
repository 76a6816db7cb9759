from __future__ import annotations

from enum import Enum
from typing import Tuple


class Entity(str, Enum):
    """Categories the collection manager can list."""

    PUBLISHERS = "publishers"
    SERIES = "series"
    ISSUES = "issues"
    CHARACTERS = "characters"
    CREATORS = "creators"
    EVENTS = "events"

    @classmethod
    def choices(cls) -> Tuple[str, ...]:
        """Entity names in declaration order (used for argparse choices)."""
        return tuple(member.value for member in cls)

    @classmethod
    def parse(cls, name: str) -> "Entity":
        """Case-sensitive lookup by name; raises ValueError for unknown names."""
        return cls(name)

    def __str__(self) -> str:
        return self.value
