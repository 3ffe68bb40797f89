"""
Request options and their closed vocabularies.

Each option the service understands is a ``StrEnum``; lookups are
case-insensitive and always resolve to the canonical member, so
``Mode("DRIVING") is Mode.DRIVING`` and ``Language("zh-cn") is Language.ZH_CN``.

``OptionSet`` bundles one value per option. It is frozen, and building it
with a value outside a vocabulary raises ``ConfigurationError`` naming the
field::

    >>> OptionSet(mode="walking", avoid="tolls").query_params()
    [('sensor', 'false'), ('avoid', 'tolls'), ('units', 'metric'), ('mode', 'walking'), ('language', 'en')]
"""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType
from typing import Any

import pydantic
from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

from distance_matrix.errors import ConfigurationError

# =============================================================================
# Vocabularies
# =============================================================================


class Choice(StrEnum):
    """Base for option vocabularies with case-insensitive lookup."""

    @classmethod
    def _missing_(cls, value: object) -> Choice | None:
        if isinstance(value, str):
            folded = value.lower()
            for member in cls:
                if member.value.lower() == folded:
                    return member
        return None

    @classmethod
    def accepts(cls, value: object) -> bool:
        """Return True if ``value`` names a member of this vocabulary."""
        try:
            cls(value)
        except ValueError:
            return False
        return True


class Mode(Choice):
    """Mode of transport used to compute the route."""

    DRIVING = "driving"
    WALKING = "walking"
    BICYCLING = "bicycling"


class Units(Choice):
    """Unit system for the distance text."""

    METRIC = "metric"
    IMPERIAL = "imperial"


class Avoid(Choice):
    """Route restriction. Only one can be requested."""

    TOLLS = "tolls"
    HIGHWAYS = "highways"


class OutputFormat(Choice):
    """Response format, also the last path segment of the endpoint."""

    JSON = "json"
    XML = "xml"


class Sensor(Choice):
    """Whether the location came from a device sensor (e.g. GPS)."""

    TRUE = "true"
    FALSE = "false"

    @classmethod
    def _missing_(cls, value: object) -> Choice | None:
        if isinstance(value, bool):
            return cls.TRUE if value else cls.FALSE
        return super()._missing_(value)


class Language(Choice):
    """Languages the service can return results in."""

    AR = "ar"
    BG = "bg"
    BN = "bn"
    CA = "ca"
    CS = "cs"
    DA = "da"
    DE = "de"
    EL = "el"
    EN = "en"
    EN_AU = "en-AU"
    EN_GB = "en-GB"
    ES = "es"
    EU = "eu"
    FA = "fa"
    FI = "fi"
    FIL = "fil"
    FR = "fr"
    GL = "gl"
    GU = "gu"
    HI = "hi"
    HR = "hr"
    HU = "hu"
    ID = "id"
    IT = "it"
    IW = "iw"
    JA = "ja"
    KN = "kn"
    KO = "ko"
    LT = "lt"
    LV = "lv"
    ML = "ml"
    MR = "mr"
    NL = "nl"
    NN = "nn"
    NO = "no"
    OR = "or"
    PL = "pl"
    PT = "pt"
    PT_BR = "pt-BR"
    PT_PT = "pt-PT"
    RM = "rm"
    RO = "ro"
    RU = "ru"
    SK = "sk"
    SL = "sl"
    SR = "sr"
    SV = "sv"
    TA = "ta"
    TE = "te"
    TH = "th"
    TL = "tl"
    TR = "tr"
    UK = "uk"
    VI = "vi"
    ZH_CN = "zh-CN"
    ZH_TW = "zh-TW"


#: Vocabulary for every option field, keyed by field name.
FIELD_CHOICES: MappingProxyType[str, type[Choice]] = MappingProxyType(
    {
        "mode": Mode,
        "units": Units,
        "avoid": Avoid,
        "language": Language,
        "output": OutputFormat,
        "sensor": Sensor,
    }
)

SUPPORTED_LANGUAGES: frozenset[str] = frozenset(lang.value for lang in Language)


def is_valid_option(field: str, value: object) -> bool:
    """Check ``value`` against the vocabulary of option ``field``.

    Unknown field names are never valid.
    """
    choice = FIELD_CHOICES.get(field)
    if choice is None:
        return False
    return choice.accepts(value)


# =============================================================================
# Option set
# =============================================================================


class OptionSet(BaseModel):
    """Validated, immutable request options.

    ``avoid`` is the only field without a default; leaving it unset means
    no restriction, and it is left out of the query entirely.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    mode: Mode = Mode.DRIVING
    units: Units = Units.METRIC
    avoid: Avoid | None = None
    language: Language = Language.EN
    output: OutputFormat = OutputFormat.JSON
    sensor: Sensor = Sensor.FALSE

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except pydantic.ValidationError as exc:
            error = exc.errors()[0]
            field = str(error["loc"][0]) if error["loc"] else "options"
            if error["type"] == "extra_forbidden":
                raise ConfigurationError(
                    field, error.get("input"), message=f"unknown option: {field}"
                ) from exc
            raise ConfigurationError(field, error.get("input")) from exc

    @field_validator(*FIELD_CHOICES, mode="before")
    @classmethod
    def _lookup_choice(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return value
        return FIELD_CHOICES[info.field_name](value)

    def query_params(self) -> list[tuple[str, str]]:
        """Option part of the query string, in serialization order."""
        params = [("sensor", self.sensor.value)]
        if self.avoid is not None:
            params.append(("avoid", self.avoid.value))
        params += [
            ("units", self.units.value),
            ("mode", self.mode.value),
            ("language", self.language.value),
        ]
        return params
