"""
Calcul du moment MarriedMore.

Le moment MarriedMore est l'instant où la durée de mariage égale la durée écoulée entre la
naissance et le mariage: `mariage + (mariage - naissance)`.
"""

from __future__ import annotations

import datetime as dt

from marriedmore.core.constants import (
    INCOMPLETE_ENTRY_MESSAGE,
    OUT_OF_RANGE_MESSAGE,
    WEDDING_ORDER_MESSAGE,
)
from marriedmore.domain.entities import Age, CalculationResult, ErrorResult, ReadyResult


def month_difference(start: dt.datetime | None, end: dt.datetime | None) -> int:
    """Nombre de mois calendaires pleins entre `start` et `end` (UTC).

    Un mois n'est compté qu'une fois le jour du mois (et l'heure) de `start` atteint dans le mois
    de `end`. Jamais négatif; 0 si un des instants est invalide.
    """
    if start is None or end is None:
        return 0
    start = start.astimezone(dt.timezone.utc)
    end = end.astimezone(dt.timezone.utc)
    months = (end.year - start.year) * 12 + (end.month - start.month)
    start_rest = (start.day, start.hour, start.minute, start.second, start.microsecond)
    end_rest = (end.day, end.hour, end.minute, end.second, end.microsecond)
    if end_rest < start_rest:
        months -= 1
    return max(months, 0)


def explain_married_more(
    birth: dt.datetime | None, wedding: dt.datetime | None, now: dt.datetime
) -> CalculationResult:
    """Calcule le résultat tri-état pour deux instants normalisés.

    Args:
        birth: instant de naissance (None = saisie invalide).
        wedding: instant du mariage (None = saisie invalide).
        now: instant courant, fourni par l'appelant.

    Returns:
        CalculationResult: `ErrorResult` si une saisie est invalide ou si le mariage ne suit pas
        strictement la naissance ou si le moment dépasse l'an 9999, sinon `ReadyResult`.
    """
    if birth is None or wedding is None:
        return ErrorResult(message=INCOMPLETE_ENTRY_MESSAGE)

    if wedding <= birth:
        return ErrorResult(message=WEDDING_ORDER_MESSAGE)

    span = wedding - birth
    try:
        married_more = (wedding + span).astimezone(dt.timezone.utc)
    except OverflowError:
        return ErrorResult(message=OUT_OF_RANGE_MESSAGE)
    total_months = month_difference(birth, married_more)
    return ReadyResult(
        married_more=married_more,
        age=Age(years=total_months // 12, months=total_months % 12),
        wedding_future=wedding > now,
    )
