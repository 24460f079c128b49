"""
Tests pour la résolution des variables d'environnement.

Ce module teste le chargement des settings depuis l'environnement et depuis des fichiers .env
personnalisés, ainsi que la validation des valeurs.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from marriedmore.core.settings import Settings, get_settings

# Constantes pour éviter les valeurs magiques
DEFAULT_DELAY_MS = 2000
CUSTOM_DELAY_MS = 1500
ENV_FILE_DELAY_MS = 750
DEFAULT_CLIPBOARD_TIMEOUT_S = 2.0
CUSTOM_CLIPBOARD_TIMEOUT_S = 0.75

_KEYS = (
    "ENV_FILE",
    "APP_ENV",
    "COPY_RESET_DELAY_MS",
    "DEFAULT_TIMEZONE",
    "CLIPBOARD_COMMAND",
    "CLIPBOARD_OSC52_FALLBACK",
    "CLIPBOARD_TIMEOUT_S",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isole les tests de l'environnement et des .env du répertoire courant."""
    for key in _KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


def test_defaults() -> None:
    """Teste les valeurs par défaut sans environnement."""
    settings = get_settings()
    assert settings.COPY_RESET_DELAY_MS == DEFAULT_DELAY_MS
    assert settings.DEFAULT_TIMEZONE == "UTC"
    assert settings.CLIPBOARD_COMMAND is None
    assert settings.CLIPBOARD_OSC52_FALLBACK is True
    assert settings.CLIPBOARD_TIMEOUT_S == DEFAULT_CLIPBOARD_TIMEOUT_S


def test_env_overrides(monkeypatch) -> None:
    """Teste la surcharge par variables d'environnement."""
    monkeypatch.setenv("COPY_RESET_DELAY_MS", str(CUSTOM_DELAY_MS))
    monkeypatch.setenv("default_timezone", "Europe/Paris")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("CLIPBOARD_TIMEOUT_S", str(CUSTOM_CLIPBOARD_TIMEOUT_S))
    settings = get_settings()
    assert settings.COPY_RESET_DELAY_MS == CUSTOM_DELAY_MS
    assert settings.DEFAULT_TIMEZONE == "Europe/Paris"
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.CLIPBOARD_TIMEOUT_S == CUSTOM_CLIPBOARD_TIMEOUT_S


def test_empty_env_value_ignored(monkeypatch) -> None:
    """Teste qu'une variable vide laisse la valeur par défaut."""
    monkeypatch.setenv("COPY_RESET_DELAY_MS", "")
    assert get_settings().COPY_RESET_DELAY_MS == DEFAULT_DELAY_MS


def test_explicit_env_file(monkeypatch, tmp_path: Path) -> None:
    """Teste la priorité de ENV_FILE."""
    env_file = tmp_path / "custom.env"
    env_file.write_text(f"COPY_RESET_DELAY_MS={ENV_FILE_DELAY_MS}\n", encoding="utf-8")
    monkeypatch.setenv("ENV_FILE", str(env_file))
    assert get_settings().COPY_RESET_DELAY_MS == ENV_FILE_DELAY_MS


def test_app_env_specific_file(monkeypatch, tmp_path: Path) -> None:
    """Teste le choix de .env.{APP_ENV} quand il existe."""
    (tmp_path / ".env").write_text("DEFAULT_TIMEZONE=Asia/Tokyo\n", encoding="utf-8")
    (tmp_path / ".env.staging").write_text("DEFAULT_TIMEZONE=Europe/London\n", encoding="utf-8")
    monkeypatch.setenv("APP_ENV", "staging")
    assert get_settings().DEFAULT_TIMEZONE == "Europe/London"


def test_default_env_file(tmp_path: Path) -> None:
    """Teste le repli sur .env."""
    (tmp_path / ".env").write_text("DEFAULT_TIMEZONE=Asia/Tokyo\n", encoding="utf-8")
    assert get_settings().DEFAULT_TIMEZONE == "Asia/Tokyo"


def test_rejects_unsupported_timezone() -> None:
    """Teste le rejet d'un fuseau par défaut hors liste."""
    with pytest.raises(ValidationError):
        Settings(DEFAULT_TIMEZONE="Mars/Olympus_Mons")


def test_rejects_non_positive_delay() -> None:
    """Teste le rejet d'un délai nul."""
    with pytest.raises(ValidationError):
        Settings(COPY_RESET_DELAY_MS=0)


def test_rejects_non_positive_clipboard_timeout() -> None:
    """Teste le rejet d'un délai de commande presse-papiers nul ou négatif."""
    with pytest.raises(ValidationError):
        Settings(CLIPBOARD_TIMEOUT_S=0)
    with pytest.raises(ValidationError):
        Settings(CLIPBOARD_TIMEOUT_S=-1)
