"""Constantes partagées de l'application MarriedMore.

Objectif du module
------------------
- Centraliser la liste fermée des fuseaux supportés.
- Regrouper les textes affichés à l'utilisateur (messages, libellés).
"""

from typing import Literal, get_args

Mode = Literal["basic", "advanced"]

TimeZoneName = Literal[
    "UTC",
    "America/New_York",
    "America/Chicago",
    "America/Denver",
    "America/Los_Angeles",
    "America/Phoenix",
    "Europe/London",
    "Europe/Paris",
    "Asia/Tokyo",
    "Asia/Kolkata",
    "Australia/Sydney",
]

TIMEZONES: tuple[str, ...] = get_args(TimeZoneName)

# Messages d'état
IDLE_BASIC_MESSAGE = "Enter both dates to reveal your MarriedMore moment."
IDLE_ADVANCED_MESSAGE = "Add the date, time, and timezone for both birth and wedding."
INCOMPLETE_ENTRY_MESSAGE = "Double-check that each calendar entry is complete."
WEDDING_ORDER_MESSAGE = (
    "Your wedding must happen after your birthdate. Please adjust the earlier entry."
)
OUT_OF_RANGE_MESSAGE = (
    "Your MarriedMore moment falls beyond the supported calendar (year 9999). "
    "Please check the dates."
)

# Bloc résultat
PLACEHOLDER = "—"
EXPLANATION = "At this moment, married time becomes greater than unmarried time."
FUTURE_NOTE = (
    "This date stays in the future because your wedding is still planned; "
    "the milestone always follows the ceremony."
)
FUTURE_COPY_NOTE = (
    "Wedding is still in the future, so this milestone also lives ahead until your ceremony."
)
PRECISION_HINT_ADVANCED = "Precise to the minute."
PRECISION_HINT_BASIC = "Days only, for a quicker read."

# Bouton de copie
COPY_LABEL_DEFAULT = "Copy result"
COPY_LABEL_SUCCESS = "Copied!"
COPY_LABEL_FAILURE = "Copy failed"
COPY_RESET_DELAY_MS = 2000

# Presse-papiers
CLIPBOARD_TIMEOUT_S = 2.0
