"""Configuration de test pour pytest avec gestion des chemins.

Ce module configure pytest pour résoudre les imports `marriedmore` en ajoutant la racine du projet
au sys.path, et fournit les fixtures partagées (horloge figée, presse-papiers mémoire, formulaire).
"""

import datetime as dt
import os
import sys

import pytest

# Ensure project root is on sys.path so that
# imports like `from marriedmore...` resolve.
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from marriedmore.domain.services import MarriedMoreService  # noqa: E402
from marriedmore.infra.clipboard.memory_adapter import InMemoryClipboard  # noqa: E402
from marriedmore.widget.copy_button import CopyButton  # noqa: E402
from marriedmore.widget.form import MarriedMoreForm  # noqa: E402

FIXED_NOW = dt.datetime(2026, 1, 1, tzinfo=dt.timezone.utc)


@pytest.fixture
def fixed_now() -> dt.datetime:
    """Instant courant figé pour un drapeau "mariage à venir" déterministe."""
    return FIXED_NOW


@pytest.fixture
def memory_clipboard() -> InMemoryClipboard:
    """Presse-papiers mémoire qui réussit."""
    return InMemoryClipboard()


@pytest.fixture
def make_form(memory_clipboard):
    """Fabrique de formulaires avec horloge figée et presse-papiers mémoire."""
    forms: list[MarriedMoreForm] = []

    def _make(clipboard=None, reset_delay_ms: int = 2000) -> MarriedMoreForm:
        button = CopyButton(clipboard or memory_clipboard, reset_delay_ms=reset_delay_ms)
        form = MarriedMoreForm(MarriedMoreService(), button, clock=lambda: FIXED_NOW)
        forms.append(form)
        return form

    yield _make
    for form in forms:
        form.close()
