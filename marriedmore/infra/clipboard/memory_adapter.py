"""
Presse-papiers en mémoire.

Utilisé en développement et dans les tests: conserve le dernier texte écrit et peut simuler un
échec.
"""

from __future__ import annotations

from marriedmore.infra.clipboard.base import ClipboardError


class InMemoryClipboard:
    """Presse-papiers local, non partagé avec le système."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.text: str | None = None
        self.writes = 0

    async def write_text(self, text: str) -> None:
        """Mémorise `text`, ou lève `ClipboardError` si `fail` est actif."""
        self.writes += 1
        if self.fail:
            raise ClipboardError("in-memory clipboard configured to fail")
        self.text = text
