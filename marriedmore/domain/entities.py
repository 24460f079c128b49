"""
Entités du domaine MarriedMore.

Ce module définit l'état du formulaire et le résultat tri-état (idle / error / ready) produit par
le calculateur.
"""

from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from marriedmore.core.constants import Mode, TimeZoneName


class FormState(BaseModel):
    """Saisies brutes du formulaire (chaîne vide = champ non renseigné)."""

    model_config = ConfigDict(validate_assignment=True)

    mode: Mode = "basic"
    birth_date: str = ""  # YYYY-MM-DD
    wedding_date: str = ""  # YYYY-MM-DD
    advanced_birth: str = ""  # YYYY-MM-DDTHH:MM[:SS]
    advanced_wedding: str = ""  # YYYY-MM-DDTHH:MM[:SS]
    birth_timezone: TimeZoneName = "UTC"
    wedding_timezone: TimeZoneName = "UTC"


class Age(BaseModel):
    """Âge décomposé en années pleines et mois restants."""

    model_config = ConfigDict(frozen=True)

    years: int = Field(..., ge=0)
    months: int = Field(..., ge=0, le=11)


class IdleResult(BaseModel):
    """Saisie incomplète: rien à calculer."""

    model_config = ConfigDict(frozen=True)

    status: Literal["idle"] = "idle"
    message: str


class ErrorResult(BaseModel):
    """Saisie complète mais invalide (ordre chronologique, entrée incomplète)."""

    model_config = ConfigDict(frozen=True)

    status: Literal["error"] = "error"
    message: str


class ReadyResult(BaseModel):
    """Moment MarriedMore calculé."""

    model_config = ConfigDict(frozen=True)

    status: Literal["ready"] = "ready"
    married_more: datetime = Field(..., description="UTC instant")
    age: Age
    wedding_future: bool


CalculationResult = Annotated[
    Union[IdleResult, ErrorResult, ReadyResult],
    Field(discriminator="status"),
]
