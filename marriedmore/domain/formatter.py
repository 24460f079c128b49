"""Mise en forme des résultats MarriedMore (libellés en-US).

Objectif du module
------------------
- Rendre la date MarriedMore (date seule en mode basique, date + heure du fuseau du mariage en
  mode avancé).
- Rendre la décomposition d'âge et le texte copié dans le presse-papiers.
"""

from __future__ import annotations

import datetime as dt

from marriedmore.core.constants import (
    EXPLANATION,
    FUTURE_COPY_NOTE,
    PRECISION_HINT_ADVANCED,
    PRECISION_HINT_BASIC,
    Mode,
)
from marriedmore.domain.time_normalizer import resolve_zone


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'}"


def age_label(years: int, months: int) -> str:
    """Phrase d'âge: "60 years", "1 year, 2 months", "0 months"."""
    parts = []
    if years:
        parts.append(_plural(years, "year"))
    if months or (not years and not months):
        parts.append(_plural(months, "month"))
    return ", ".join(parts)


def _full_date(moment: dt.datetime) -> str:
    return f"{moment:%A}, {moment:%B} {moment.day}, {moment.year}"


def format_married_more_date(instant: dt.datetime, mode: Mode, zone: str = "UTC") -> str:
    """Formate l'instant MarriedMore.

    Args:
        instant: instant UTC calculé.
        mode: "basic" (date seule, UTC) ou "advanced" (date et heure dans `zone`).
        zone: fuseau du mariage, utilisé en mode avancé.

    Returns:
        str: ex. "Saturday, January 1, 2050" ou "Saturday, January 1, 2050 at 08:00".
    """
    if mode == "advanced":
        try:
            local = instant.astimezone(resolve_zone(zone))
        except OverflowError:
            # Next to years 1 and 9999 the local rendering can leave the datetime range.
            utc = instant.astimezone(dt.timezone.utc)
            return f"{_full_date(utc)} at {utc:%H:%M} UTC"
        return f"{_full_date(local)} at {local:%H:%M}"
    return _full_date(instant.astimezone(dt.timezone.utc))


def precision_hint(mode: Mode) -> str:
    """Indication de précision affichée sous le résultat."""
    return PRECISION_HINT_ADVANCED if mode == "advanced" else PRECISION_HINT_BASIC


def build_copy_text(married_more_label: str, age_detail: str, wedding_future: bool) -> str:
    """Construit le texte copié (3 lignes, 4 si le mariage est à venir)."""
    lines = [
        f"MarriedMore Date: {married_more_label}",
        f"You’ll be married more than not married at: {age_detail} old",
        EXPLANATION,
    ]
    if wedding_future:
        lines.append(FUTURE_COPY_NOTE)
    return "\n".join(lines)
