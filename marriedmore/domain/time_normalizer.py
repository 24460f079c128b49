"""Normalisation des saisies date/heure en instants UTC.

Objectif du module
------------------
- Mode basique: une date `YYYY-MM-DD` vaut minuit UTC.
- Mode avancé: une date-heure locale `YYYY-MM-DDTHH:MM[:SS]` est interprétée dans le fuseau
  choisi; le décalage est résolu au moment précis saisi (heure d'été comprise).

Une chaîne vide, ou une saisie dont l'instant UTC sort de la plage de `datetime`, produit
l'instant invalide `None`. Les chaînes mal formées ne sont pas attendues (sélecteurs natifs) et
laissent remonter le `ValueError` du parseur.
"""

from __future__ import annotations

import datetime as dt
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from marriedmore.core.constants import TIMEZONES
from marriedmore.domain.entities import FormState


class UnsupportedTimeZoneError(ValueError):
    """Fuseau hors de la liste supportée."""


def resolve_zone(name: str) -> dt.tzinfo:
    """Résout un nom de fuseau de la liste blanche en tzinfo.

    Raises:
        UnsupportedTimeZoneError: nom absent de la liste ou inconnu de la base tz.
    """
    if name not in TIMEZONES:
        raise UnsupportedTimeZoneError(f"Unsupported timezone: {name!r}")
    if name == "UTC":
        return dt.timezone.utc
    try:
        return ZoneInfo(name)
    except ZoneInfoNotFoundError as ex:
        raise UnsupportedTimeZoneError(f"Timezone data missing for {name!r}") from ex


def timezone_offset(zone: str, instant: dt.datetime) -> dt.timedelta:
    """Décalage UTC de `zone` à l'instant donné.

    Rend l'instant dans le fuseau, relit les champs horaires obtenus comme s'ils étaient en UTC
    et retourne l'écart avec l'instant d'origine.

    Raises:
        OverflowError: le rendu local sort de la plage de `datetime` (années 1 à 9999).
    """
    rendered = instant.astimezone(resolve_zone(zone))
    return rendered.replace(tzinfo=None) - instant.astimezone(dt.timezone.utc).replace(tzinfo=None)


def parse_date_only(value: str) -> dt.datetime | None:
    """`YYYY-MM-DD` -> minuit UTC, ou None si vide."""
    if not value:
        return None
    day = dt.date.fromisoformat(value)
    return dt.datetime(day.year, day.month, day.day, tzinfo=dt.timezone.utc)


def parse_datetime_in_zone(value: str, zone: str) -> dt.datetime | None:
    """Interprète une date-heure locale dans `zone` et retourne l'instant UTC.

    Args:
        value: `YYYY-MM-DDTHH:MM[:SS]`; sans partie horaire, minuit est supposé.
        zone: nom de fuseau de la liste supportée.

    Returns:
        datetime | None: instant UTC, ou None si `value` est vide ou si l'instant n'est pas
        représentable.
    """
    if not value:
        return None
    date_part, _, time_part = value.partition("T")
    day = dt.date.fromisoformat(date_part)
    clock = dt.time.fromisoformat(time_part) if time_part else dt.time()
    guess = dt.datetime.combine(day, clock.replace(tzinfo=None), tzinfo=dt.timezone.utc)

    try:
        offset = timezone_offset(zone, guess)
        candidate = guess - offset
        # Near a DST switch the first offset can belong to the other side of it.
        corrected = timezone_offset(zone, candidate)
        if corrected != offset:
            retry = guess - corrected
            if timezone_offset(zone, retry) == corrected:
                return retry
    except OverflowError:
        return None
    return candidate


def normalize_inputs(state: FormState) -> tuple[dt.datetime | None, dt.datetime | None]:
    """Retourne les instants (naissance, mariage) pour le mode actif du formulaire."""
    if state.mode == "advanced":
        return (
            parse_datetime_in_zone(state.advanced_birth, state.birth_timezone),
            parse_datetime_in_zone(state.advanced_wedding, state.wedding_timezone),
        )
    return parse_date_only(state.birth_date), parse_date_only(state.wedding_date)
