import datetime as dt

import structlog

from marriedmore.core.constants import IDLE_ADVANCED_MESSAGE, IDLE_BASIC_MESSAGE
from marriedmore.domain.calculator import explain_married_more
from marriedmore.domain.entities import CalculationResult, FormState, IdleResult
from marriedmore.domain.time_normalizer import normalize_inputs


class MarriedMoreService:
    """Service métier qui transforme un état de formulaire en résultat tri-état.

    Responsabilités:
    - Détecter les saisies incomplètes (état `idle`).
    - Normaliser les saisies du mode actif en instants UTC.
    - Déléguer le calcul à `explain_married_more`.
    """

    def __init__(self):
        self._log = structlog.get_logger(__name__).bind(component="married_more_service")

    def evaluate(self, state: FormState, now: dt.datetime) -> CalculationResult:
        """Calcule le résultat pour l'état courant.

        Paramètres:
        - state: saisies du formulaire.
        - now: instant courant (UTC), pour le drapeau "mariage à venir".

        Retour: `IdleResult`, `ErrorResult` ou `ReadyResult`.
        """
        if state.mode == "basic" and (not state.birth_date or not state.wedding_date):
            return IdleResult(message=IDLE_BASIC_MESSAGE)
        if state.mode == "advanced" and (not state.advanced_birth or not state.advanced_wedding):
            return IdleResult(message=IDLE_ADVANCED_MESSAGE)

        birth, wedding = normalize_inputs(state)
        result = explain_married_more(birth, wedding, now)
        self._log.debug("married_more_evaluated", mode=state.mode, status=result.status)
        return result
