# ============================================================
# Module : marriedmore/infra/clipboard/fallback.py
# Objet  : Presse-papiers principal avec repli sur un second mécanisme.
# Contexte : Le repli n'est tenté que si le principal échoue ou est indisponible.
#            L'échec des deux remonte en ClipboardError (jamais avalé ici).
# ============================================================

from __future__ import annotations

import structlog

from marriedmore.infra.clipboard.base import Clipboard, ClipboardError


class FallbackClipboard:
    """Compose deux presse-papiers: `primary` puis `secondary`."""

    def __init__(self, primary: Clipboard, secondary: Clipboard) -> None:
        self.primary = primary
        self.secondary = secondary
        self._log = structlog.get_logger(__name__).bind(component="fallback_clipboard")

    async def write_text(self, text: str) -> None:
        try:
            await self.primary.write_text(text)
            return
        except ClipboardError as ex:
            self._log.warning("clipboard_primary_failed", error=str(ex))
        try:
            await self.secondary.write_text(text)
        except ClipboardError as ex:
            raise ClipboardError("primary and fallback clipboard both failed") from ex
