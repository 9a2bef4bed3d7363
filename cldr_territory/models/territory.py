from datetime import date
from enum import Enum

from pydantic import BaseModel


class Style(str, Enum):
    SHORT = "short"
    STANDARD = "standard"
    VARIANT = "variant"


class Representation(str, Enum):
    """Output form for territory and currency codes.

    CODE returns ``str``, BYTES returns ASCII ``bytes``, CHARS returns a list of
    single characters.
    """

    CODE = "code"
    BYTES = "bytes"
    CHARS = "chars"


class CurrencyPeriod(BaseModel):
    model_config = {"frozen": True}

    code: str
    valid_from: date | None = None
    valid_to: date | None = None
    tender: bool = True

    @property
    def active(self) -> bool:
        return self.tender and self.valid_to is None


class MeasurementSystem(BaseModel):
    model_config = {"frozen": True}

    default: str
    paper_size: str
    temperature: str


class LanguagePopulation(BaseModel):
    model_config = {"frozen": True}

    population_percent: float
    official_status: str | None = None
    writing_percent: float | None = None


class TerritoryInfo(BaseModel):
    model_config = {"frozen": True}

    currency: list[CurrencyPeriod] = []
    population: int | None = None
    literacy_percent: float | None = None
    gdp: int | None = None
    measurement_system: MeasurementSystem | None = None
    language_population: dict[str, LanguagePopulation] = {}


class LanguageTag(BaseModel):
    """A resolved locale: the configured CLDR locale plus its territory."""

    model_config = {"frozen": True}

    language: str
    script: str | None = None
    territory: str | None = None
    cldr_locale_name: str
    requested_locale_name: str
