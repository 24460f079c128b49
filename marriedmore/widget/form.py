"""
Formulaire MarriedMore sans interface graphique.

Ce module porte l'état du formulaire, recalcule le résultat de façon synchrone à chaque saisie et
expose les libellés dérivés auxquels une interface se lie.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Callable

from pydantic import BaseModel

from marriedmore.core.constants import (
    EXPLANATION,
    FUTURE_NOTE,
    PLACEHOLDER,
    Mode,
)
from marriedmore.domain.entities import (
    CalculationResult,
    ErrorResult,
    FormState,
    IdleResult,
    ReadyResult,
)
from marriedmore.domain.formatter import (
    age_label,
    build_copy_text,
    format_married_more_date,
    precision_hint,
)
from marriedmore.domain.services import MarriedMoreService
from marriedmore.widget.copy_button import CopyButton


class ResultView(BaseModel):
    """Bloc résultat prêt à afficher."""

    married_more_label: str
    age_detail: str
    explanation: str
    status_message: str | None = None
    is_error: bool = False
    future_note: str | None = None
    precision_hint: str
    copy_disabled: bool
    copy_label: str


class MarriedMoreForm:
    """Formulaire à deux modes (basique / avancé) et son bouton de copie.

    Chaque setter modifie l'état puis recalcule immédiatement le résultat; `result` reflète
    toujours les dernières saisies.
    """

    def __init__(
        self,
        service: MarriedMoreService,
        copy_button: CopyButton,
        clock: Callable[[], dt.datetime],
        default_timezone: str = "UTC",
    ):
        """
        Paramètres:
        - service: calcul du résultat tri-état.
        - copy_button: bouton de copie (propriétaire du minuteur de libellé).
        - clock: fournit l'instant courant (UTC).
        - default_timezone: fuseau initial des deux sélecteurs.
        """
        self.service = service
        self.copy_button = copy_button
        self.clock = clock
        self.state = FormState(birth_timezone=default_timezone, wedding_timezone=default_timezone)
        self._result: CalculationResult = self.service.evaluate(self.state, self.clock())

    @property
    def result(self) -> CalculationResult:
        return self._result

    @property
    def copy_label(self) -> str:
        return self.copy_button.label

    @property
    def copy_disabled(self) -> bool:
        return not isinstance(self._result, ReadyResult)

    def set_mode(self, mode: Mode) -> None:
        self._update(mode=mode)

    def set_birth_date(self, value: str) -> None:
        self._update(birth_date=value)

    def set_wedding_date(self, value: str) -> None:
        self._update(wedding_date=value)

    def set_advanced_birth(self, value: str) -> None:
        self._update(advanced_birth=value)

    def set_advanced_wedding(self, value: str) -> None:
        self._update(advanced_wedding=value)

    def set_birth_timezone(self, zone: str) -> None:
        self._update(birth_timezone=zone)

    def set_wedding_timezone(self, zone: str) -> None:
        self._update(wedding_timezone=zone)

    def married_more_label(self) -> str:
        if isinstance(self._result, ReadyResult):
            return format_married_more_date(
                self._result.married_more, self.state.mode, self.state.wedding_timezone
            )
        return PLACEHOLDER

    def age_detail(self) -> str:
        if isinstance(self._result, ReadyResult):
            return age_label(self._result.age.years, self._result.age.months)
        return PLACEHOLDER

    def view(self) -> ResultView:
        """Construit le bloc résultat pour l'état courant."""
        result = self._result
        status_message = None
        future_note = None
        if isinstance(result, ReadyResult):
            future_note = FUTURE_NOTE if result.wedding_future else None
        elif isinstance(result, (ErrorResult, IdleResult)):
            status_message = result.message
        else:
            raise TypeError(f"Unexpected result: {result!r}")
        return ResultView(
            married_more_label=self.married_more_label(),
            age_detail=self.age_detail(),
            explanation=EXPLANATION,
            status_message=status_message,
            is_error=isinstance(result, ErrorResult),
            future_note=future_note,
            precision_hint=precision_hint(self.state.mode),
            copy_disabled=self.copy_disabled,
            copy_label=self.copy_label,
        )

    def copy_text(self) -> str | None:
        """Texte du presse-papiers, ou None si le résultat n'est pas prêt."""
        if not isinstance(self._result, ReadyResult):
            return None
        return build_copy_text(
            self.married_more_label(), self.age_detail(), self._result.wedding_future
        )

    async def copy(self) -> bool:
        """Copie le résumé; sans effet tant que le résultat n'est pas prêt."""
        text = self.copy_text()
        if text is None:
            return False
        return await self.copy_button.copy(text)

    def close(self) -> None:
        """Démontage: annule toute remise à zéro de libellé en attente."""
        self.copy_button.close()

    def _update(self, **changes) -> None:
        for field, value in changes.items():
            setattr(self.state, field, value)
        self._result = self.service.evaluate(self.state, self.clock())
