from __future__ import annotations
from dataclasses import dataclass, field


def _mask(secret: str) -> str:
    return "***" if secret else ""


@dataclass(frozen=True)
class ApiKeys:
    """Secrets read from the environment. repr() never shows full values."""
    marvel_public_key: str = ""
    marvel_private_key: str = ""
    comicvine_api_key: str = ""

    def __repr__(self) -> str:
        return (
            "ApiKeys("
            f"marvel_public_key={_mask(self.marvel_public_key)!r}, "
            f"marvel_private_key={_mask(self.marvel_private_key)!r}, "
            f"comicvine_api_key={_mask(self.comicvine_api_key)!r})"
        )


@dataclass(frozen=True)
class Settings:
    database_url: str
    marvel_base_url: str
    comicvine_base_url: str
    api_keys: ApiKeys = field(default_factory=ApiKeys)
