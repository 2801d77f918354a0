"""
Configuration typst_builder — lue depuis l'environnement.

TYPST_BUILDER_LOG_LEVEL : niveau de log (défaut WARNING)
"""
import logging
import os
from typing import Literal, Optional

from pydantic import BaseModel, Field

LOG_FORMAT = "%(asctime)s %(levelname)s — %(message)s"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_SETTINGS_CACHE: dict = {}


class Settings(BaseModel):
    log_level: LogLevel = Field(default="WARNING")
    log_format: str = Field(default=LOG_FORMAT)


def get_settings() -> Settings:
    """Lit l'environnement au premier appel (mis en cache)."""
    if "settings" not in _SETTINGS_CACHE:
        _SETTINGS_CACHE["settings"] = Settings(
            log_level=os.getenv("TYPST_BUILDER_LOG_LEVEL", "WARNING").upper(),
        )
    return _SETTINGS_CACHE["settings"]


def reload_settings() -> None:
    """Force la relecture de l'environnement (utile en test)."""
    _SETTINGS_CACHE.clear()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Applique le niveau et le format de log au logger racine."""
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level, format=settings.log_format)
    logging.getLogger("typst_builder").setLevel(settings.log_level)
