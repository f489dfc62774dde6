"""Application configuration helpers."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import os

DEFAULT_LOCALE = "en"
DEFAULT_SUPPORTED_LOCALES = ("en", "fr")
DEFAULT_LOG_LEVEL = "INFO"


def _get_list_env(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    raw = os.getenv(name)
    if raw is None:
        return default
    return tuple(part.strip() for part in raw.split(",") if part.strip())


@dataclass(frozen=True)
class Settings:
    """Runtime settings for error translation and logging."""

    default_locale: str
    supported_locales: tuple[str, ...]
    log_level: str

    def __post_init__(self) -> None:
        if not self.supported_locales:
            raise ValueError("at least one supported locale is required")
        if self.default_locale not in self.supported_locales:
            raise ValueError(
                f"default locale {self.default_locale!r} is not one of {', '.join(self.supported_locales)}"
            )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from the environment."""
    return Settings(
        default_locale=os.getenv("SURVEYPOC_DEFAULT_LOCALE", DEFAULT_LOCALE),
        supported_locales=_get_list_env("SURVEYPOC_SUPPORTED_LOCALES", DEFAULT_SUPPORTED_LOCALES),
        log_level=os.getenv("SURVEYPOC_LOG_LEVEL", DEFAULT_LOG_LEVEL),
    )
