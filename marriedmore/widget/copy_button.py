"""Bouton "Copy result" et cycle de vie de son libellé.

Objectif du module
------------------
- Écrire le résumé via la capacité `Clipboard` injectée.
- Afficher "Copied!" ou "Copy failed", puis revenir au libellé par défaut après un délai.
- Garder au plus une remise à zéro programmée: une nouvelle copie la remplace, la fermeture
  du composant l'annule.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable

import structlog

from marriedmore.core.constants import (
    COPY_LABEL_DEFAULT,
    COPY_LABEL_FAILURE,
    COPY_LABEL_SUCCESS,
    COPY_RESET_DELAY_MS,
)
from marriedmore.infra.clipboard.base import Clipboard, ClipboardError


class CopyButton:
    """État du bouton de copie, propriétaire de la tâche de remise à zéro du libellé."""

    def __init__(
        self,
        clipboard: Clipboard,
        reset_delay_ms: int = COPY_RESET_DELAY_MS,
        on_label_change: Callable[[str], None] | None = None,
    ) -> None:
        """
        Args:
            clipboard: capacité d'écriture injectée.
            reset_delay_ms: délai avant retour au libellé par défaut.
            on_label_change: rappel optionnel de l'UI à chaque changement de libellé.
        """
        self.clipboard = clipboard
        self.reset_delay_ms = reset_delay_ms
        self.label = COPY_LABEL_DEFAULT
        self._on_label_change = on_label_change
        self._reset_handle: asyncio.TimerHandle | None = None
        self._closed = False
        self._log = structlog.get_logger(__name__).bind(component="copy_button")

    @property
    def reset_pending(self) -> bool:
        """True si une remise à zéro du libellé est programmée."""
        return self._reset_handle is not None

    @property
    def closed(self) -> bool:
        return self._closed

    async def copy(self, text: str) -> bool:
        """Copie `text` et met à jour le libellé.

        Returns:
            bool: True si l'écriture a réussi (principal ou repli).
        """
        if self._closed:
            return False
        self._cancel_reset()
        try:
            await self.clipboard.write_text(text)
            copied = True
        except ClipboardError as ex:
            self._log.warning("clipboard_copy_failed", error=str(ex))
            copied = False

        if self._closed:
            return copied
        self._set_label(COPY_LABEL_SUCCESS if copied else COPY_LABEL_FAILURE)
        # Another copy may have scheduled a reset while this write was pending.
        self._cancel_reset()
        loop = asyncio.get_running_loop()
        self._reset_handle = loop.call_later(self.reset_delay_ms / 1000, self._reset_label)
        return copied

    def close(self) -> None:
        """Démontage du composant: annule la remise à zéro en attente."""
        self._closed = True
        self._cancel_reset()

    def _cancel_reset(self) -> None:
        if self._reset_handle is not None:
            self._reset_handle.cancel()
            self._reset_handle = None

    def _reset_label(self) -> None:
        self._reset_handle = None
        self._set_label(COPY_LABEL_DEFAULT)

    def _set_label(self, label: str) -> None:
        self.label = label
        if self._on_label_change is not None:
            self._on_label_change(label)
