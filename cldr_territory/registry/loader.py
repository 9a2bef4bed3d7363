"""Build the territory tables once per process.

Names, currency history and language population come from babel's CLDR data;
containment, alt-style names, measurement rules and population figures come from
the JSON snapshots in ``settings.DATA_DIR``.
"""

import json
import logging
import os
import re
from datetime import date

from babel import Locale
from babel import UnknownLocaleError as BabelUnknownLocaleError
from babel.languages import get_territory_language_info
from babel.numbers import get_territory_currencies

from cldr_territory.config import settings
from cldr_territory.models.territory import (
    CurrencyPeriod,
    LanguagePopulation,
    MeasurementSystem,
    Style,
    TerritoryInfo,
)

logger = logging.getLogger(__name__)

STYLE_ORDER: list[str] = [style.value for style in Style]

_CODE_PATTERN = re.compile(r"^(?:[A-Z]{2}|\d{3})$")

# Countries sit three levels below the world: continent, sub-region, country
_FLAG_ROOT = "001"
_FLAG_DEPTH = 3
_FLAG_GROUPINGS = ("EU", "UN")


class Registry:
    """Name table, containment graph and territory-info table, read-only after load."""

    def __init__(
        self,
        names: dict[str, dict[str, dict[str, str]]],
        containment: dict[str, list[str]],
        info: dict[str, TerritoryInfo],
    ):
        self.names = names
        self.containment = containment
        self.info = info
        self.parents = _build_parent_index(containment)
        self.flag_codes = _build_flag_index(containment)
        self.known_codes: frozenset[str] = frozenset(containment) | frozenset(self.parents) | frozenset(info)

    @property
    def locales(self) -> list[str]:
        return list(self.names)


def _build_parent_index(containment: dict[str, list[str]]) -> dict[str, list[str]]:
    """Reverse lookup: child -> sorted parents."""
    index: dict[str, list[str]] = {}
    for parent, children in containment.items():
        for child in children:
            index.setdefault(child, []).append(parent)
    return {child: sorted(parents) for child, parents in index.items()}


def _build_flag_index(containment: dict[str, list[str]]) -> frozenset[str]:
    """Country-level codes (great-grandchildren of the world) plus EU and UN."""
    level = [_FLAG_ROOT]
    for _ in range(_FLAG_DEPTH):
        level = [child for code in level for child in containment.get(code, [])]
    return frozenset(code for code in level if code.isalpha()) | frozenset(_FLAG_GROUPINGS)


def _read_json(data_dir: str, filename: str):
    with open(os.path.join(data_dir, filename), encoding="utf-8") as f:
        return json.load(f)


def _style_overrides(styles: dict, locale_name: str) -> dict[str, dict[str, str]]:
    """Alt names for a locale, inheriting from its bare language ("en-001" <- "en")."""
    chain = [locale_name.split("-")[0]]
    if locale_name != chain[0]:
        chain.append(locale_name)

    merged: dict[str, dict[str, str]] = {}
    for name in chain:
        for code, alternates in styles.get(name, {}).items():
            merged.setdefault(code, {}).update(alternates)
    return merged


def load_names(
    locale_name: str,
    overrides: dict[str, dict[str, str]],
    codes: set[str] | None = None,
) -> dict[str, dict[str, str]]:
    """Style -> name map per territory code, restricted to ``codes`` when given."""
    try:
        territories = Locale.parse(locale_name, sep="-").territories
    except (BabelUnknownLocaleError, ValueError) as exc:
        raise ValueError(f"Configured locale '{locale_name}' has no CLDR data") from exc

    table: dict[str, dict[str, str]] = {}
    for code in sorted(territories):
        if not _CODE_PATTERN.match(code) or (codes is not None and code not in codes):
            continue
        names = {Style.STANDARD.value: territories[code], **overrides.get(code, {})}
        table[code] = {style: names[style] for style in STYLE_ORDER if style in names}
    return table


def currency_history(code: str) -> list[CurrencyPeriod]:
    details = get_territory_currencies(
        code,
        start_date=date.min,
        end_date=date.max,
        tender=True,
        non_tender=True,
        include_details=True,
    )
    return [
        CurrencyPeriod(
            code=detail["currency"],
            valid_from=detail["from"],
            valid_to=detail["to"],
            tender=detail["tender"],
        )
        for detail in details
    ]


def language_population(code: str) -> dict[str, LanguagePopulation]:
    return {
        language: LanguagePopulation(
            population_percent=data["population_percent"],
            official_status=data.get("official_status"),
            writing_percent=data.get("writing_percent"),
        )
        for language, data in get_territory_language_info(code).items()
    }


def measurement_system(code: str, rules: dict) -> MeasurementSystem:
    values = dict(rules["default"])
    for field, systems in rules["overrides"].items():
        for system, codes in systems.items():
            if code in codes:
                values[field] = system
    return MeasurementSystem(**values)


def load_registry(data_dir: str | None = None, locales: list[str] | None = None) -> Registry:
    data_dir = data_dir or settings.DATA_DIR
    if locales is None:
        locales = settings.KNOWN_LOCALES

    containment: dict[str, list[str]] = _read_json(data_dir, "containment.json")
    styles = _read_json(data_dir, "styles.json")
    measurement = _read_json(data_dir, "measurement.json")
    figures = _read_json(data_dir, "figures.json")

    codes = set(containment) | set(figures)
    for children in containment.values():
        codes.update(children)

    info: dict[str, TerritoryInfo] = {}
    for code in sorted(codes):
        info[code] = TerritoryInfo(
            currency=currency_history(code),
            language_population=language_population(code),
            # Regions and groupings have no measurement system of their own
            measurement_system=None if code in containment else measurement_system(code, measurement),
            **figures.get(code, {}),
        )

    names = {
        locale_name: load_names(locale_name, _style_overrides(styles, locale_name), codes)
        for locale_name in locales
    }

    registry = Registry(names=names, containment=containment, info=info)
    for locale_name, table in names.items():
        missing = registry.known_codes - table.keys()
        if missing:
            logger.warning("Locale %s has no names for %d territories: %s",
                           locale_name, len(missing), ", ".join(sorted(missing)))

    logger.info("Loaded %d territories, %d containment groups, %d locales",
                len(registry.known_codes), len(containment), len(names))
    return registry


def validate_registry(registry: Registry) -> None:
    """Raise ValueError if a locale misses a territory or containment has a cycle."""
    for locale_name, table in registry.names.items():
        for code in sorted(registry.known_codes):
            if Style.STANDARD.value not in table.get(code, {}):
                raise ValueError(f"Locale '{locale_name}' has no standard name for '{code}'")

    visiting: set[str] = set()
    done: set[str] = set()

    def visit(code: str, path: list[str]) -> None:
        if code in done:
            return
        if code in visiting:
            raise ValueError(f"Containment cycle: {' -> '.join(path + [code])}")
        visiting.add(code)
        for child in registry.containment.get(code, []):
            visit(child, path + [code])
        visiting.discard(code)
        done.add(code)

    for parent in registry.containment:
        visit(parent, [])


_registry: Registry | None = None


def get_registry() -> Registry:
    global _registry
    if _registry is None:
        _registry = load_registry()
    return _registry
