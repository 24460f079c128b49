"""Interface de base pour l'écriture dans le presse-papiers.

Ce module définit la capacité injectée `Clipboard` et les erreurs levées par ses
implémentations.
"""

from __future__ import annotations

from typing import Protocol


class ClipboardError(Exception):
    """Échec d'écriture dans le presse-papiers."""


class ClipboardUnavailableError(ClipboardError):
    """Aucun mécanisme de presse-papiers utilisable sur cette plateforme."""


class Clipboard(Protocol):
    """Capacité d'écriture de texte dans le presse-papiers."""

    async def write_text(self, text: str) -> None:
        """Écrit `text` dans le presse-papiers.

        Raises:
            ClipboardError: si l'écriture échoue.
        """
