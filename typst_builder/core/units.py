"""
Unités Typst — longueurs, fractions, ratios.
Les valeurs sont formatées en décimal + suffixe : 12.0pt, 1.0fr, 50.0%.
Chaque type accepte aussi son écriture Typst en chaîne ("12pt", "1fr", "50%")
pour les manifests.
"""
import re
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .values import format_decimal

LengthUnit = Literal["pt", "mm", "cm", "in", "em"]

_NUMBER = r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?"
_LENGTH_RE = re.compile(rf"^\s*({_NUMBER})\s*(pt|mm|cm|in|em)\s*$")
_FRACTION_RE = re.compile(rf"^\s*({_NUMBER})\s*fr\s*$")
_RATIO_RE = re.compile(rf"^\s*({_NUMBER})\s*%\s*$")


class _Unit(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class Length(_Unit):
    """Longueur absolue ou relative à la police (em)."""
    value: float = Field(allow_inf_nan=False)
    unit: LengthUnit = "pt"

    @model_validator(mode="before")
    @classmethod
    def _parse(cls, data: Any) -> Any:
        if isinstance(data, str):
            match = _LENGTH_RE.match(data)
            if not match:
                raise ValueError(f"Longueur invalide : {data!r}")
            return {"value": match.group(1), "unit": match.group(2)}
        return data

    def to_typst(self) -> str:
        return f"{format_decimal(self.value)}{self.unit}"


class Fraction(_Unit):
    """Fraction de l'espace restant (grilles)."""
    value: float = Field(allow_inf_nan=False)

    @model_validator(mode="before")
    @classmethod
    def _parse(cls, data: Any) -> Any:
        if isinstance(data, str):
            match = _FRACTION_RE.match(data)
            if not match:
                raise ValueError(f"Fraction invalide : {data!r}")
            return {"value": match.group(1)}
        return data

    def to_typst(self) -> str:
        return f"{format_decimal(self.value)}fr"


class Ratio(_Unit):
    """Pourcentage."""
    value: float = Field(allow_inf_nan=False)

    @model_validator(mode="before")
    @classmethod
    def _parse(cls, data: Any) -> Any:
        if isinstance(data, str):
            match = _RATIO_RE.match(data)
            if not match:
                raise ValueError(f"Ratio invalide : {data!r}")
            return {"value": match.group(1)}
        return data

    def to_typst(self) -> str:
        return f"{format_decimal(self.value)}%"


class Auto(_Unit):
    """Valeur `auto` de Typst."""
    auto: Literal[True] = True

    @model_validator(mode="before")
    @classmethod
    def _parse(cls, data: Any) -> Any:
        if data == "auto":
            return {}
        return data

    def to_typst(self) -> str:
        return "auto"


AUTO = Auto()

# Taille de piste d'une grille (colonne ou ligne)
TrackSize = Union[Auto, Length, Fraction, Ratio]


def pt(value: float) -> Length:
    return Length(value=value, unit="pt")


def mm(value: float) -> Length:
    return Length(value=value, unit="mm")


def cm(value: float) -> Length:
    return Length(value=value, unit="cm")


def inches(value: float) -> Length:
    return Length(value=value, unit="in")


def em(value: float) -> Length:
    return Length(value=value, unit="em")


def fr(value: float) -> Fraction:
    return Fraction(value=value)


def percent(value: float) -> Ratio:
    return Ratio(value=value)
