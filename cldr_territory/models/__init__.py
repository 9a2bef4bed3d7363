from cldr_territory.models.territory import (
    CurrencyPeriod,
    LanguagePopulation,
    LanguageTag,
    MeasurementSystem,
    Representation,
    Style,
    TerritoryInfo,
)

__all__ = [
    "CurrencyPeriod",
    "LanguagePopulation",
    "LanguageTag",
    "MeasurementSystem",
    "Representation",
    "Style",
    "TerritoryInfo",
]
