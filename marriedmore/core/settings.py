"""Définition et chargement des paramètres de configuration applicative.

Objectif du module
------------------
- Centraliser les paramètres (env/.env) via Pydantic Settings
- Résoudre le fichier `.env` à utiliser selon la stratégie: ENV_FILE > .env.{APP_ENV} > .env
"""

import os
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from marriedmore.core.constants import CLIPBOARD_TIMEOUT_S, COPY_RESET_DELAY_MS, TIMEZONES


def _resolve_env_file() -> Path | str:
    """Retourne le fichier .env à charger.

    Priorité:
    1) ENV_FILE (chemin explicite)
    2) .env.{APP_ENV} si présent
    3) .env (défaut)
    """
    env_file = os.getenv("ENV_FILE")
    if env_file:
        return env_file
    cwd = Path.cwd()
    candidate_specific = cwd / f".env.{os.getenv('APP_ENV', 'dev')}"
    if candidate_specific.exists():
        return candidate_specific
    return cwd / ".env"


class Settings(BaseSettings):
    """Modèle de configuration chargé depuis l'environnement et .env."""

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
    )
    APP_NAME: str = "marriedmore"
    APP_ENV: str = "dev"
    APP_DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Widget
    COPY_RESET_DELAY_MS: int = COPY_RESET_DELAY_MS
    DEFAULT_TIMEZONE: str = "UTC"

    # Presse-papiers: commande imposée (ex: "xclip -selection clipboard")
    CLIPBOARD_COMMAND: str | None = None
    CLIPBOARD_OSC52_FALLBACK: bool = True
    CLIPBOARD_TIMEOUT_S: float = CLIPBOARD_TIMEOUT_S

    @field_validator("COPY_RESET_DELAY_MS")
    @classmethod
    def _positive_delay(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("COPY_RESET_DELAY_MS must be positive")
        return value

    @field_validator("CLIPBOARD_TIMEOUT_S")
    @classmethod
    def _positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("CLIPBOARD_TIMEOUT_S must be positive")
        return value

    @field_validator("DEFAULT_TIMEZONE")
    @classmethod
    def _supported_timezone(cls, value: str) -> str:
        if value not in TIMEZONES:
            raise ValueError(f"Unsupported timezone: {value!r}")
        return value

    @field_validator("LOG_LEVEL")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper()


def get_settings() -> Settings:
    """Construit et retourne la configuration de l'application."""
    return Settings(_env_file=_resolve_env_file())
