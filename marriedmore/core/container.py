import datetime as dt

from marriedmore.core.logging import setup_logging
from marriedmore.core.settings import Settings, get_settings
from marriedmore.domain.services import MarriedMoreService
from marriedmore.infra.clipboard.base import Clipboard
from marriedmore.infra.clipboard.fallback import FallbackClipboard
from marriedmore.infra.clipboard.system_clipboard import CommandClipboard, OSC52Clipboard
from marriedmore.widget.copy_button import CopyButton
from marriedmore.widget.form import MarriedMoreForm


def utc_now() -> dt.datetime:
    """Horloge par défaut (UTC)."""
    return dt.datetime.now(dt.timezone.utc)


class Container:
    def __init__(self, settings: Settings | None = None, clipboard: Clipboard | None = None):
        self.settings = settings or get_settings()
        setup_logging("DEBUG" if self.settings.APP_DEBUG else self.settings.LOG_LEVEL)
        self.clock = utc_now
        self.service = MarriedMoreService()
        if clipboard is not None:
            self.clipboard = clipboard
        else:
            primary = CommandClipboard(
                self.settings.CLIPBOARD_COMMAND, timeout_s=self.settings.CLIPBOARD_TIMEOUT_S
            )
            if self.settings.CLIPBOARD_OSC52_FALLBACK:
                self.clipboard = FallbackClipboard(primary, OSC52Clipboard())
            else:
                self.clipboard = primary

    def create_form(self) -> MarriedMoreForm:
        """Construit un formulaire neuf avec son propre bouton de copie."""
        copy_button = CopyButton(self.clipboard, reset_delay_ms=self.settings.COPY_RESET_DELAY_MS)
        return MarriedMoreForm(
            self.service,
            copy_button,
            clock=self.clock,
            default_timezone=self.settings.DEFAULT_TIMEZONE,
        )


"""
Conteneur d'injection de dépendances.

Instancie les composants centraux (settings, horloge, service, presse-papiers) et fabrique les
formulaires MarriedMore.
"""
