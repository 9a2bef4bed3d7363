from enum import Enum

from cldr_territory.errors import Result, UnknownStyleError, UnknownTerritoryError, fail, ok
from cldr_territory.models.territory import LanguageTag, Style
from cldr_territory.registry.loader import get_registry

_STYLES = {style.value: style for style in Style}


def normalize_code(territory) -> str | None:
    """Canonical form of a caller's territory code, or None if it is not a string."""
    if isinstance(territory, LanguageTag):
        territory = territory.territory
    if not isinstance(territory, str):
        return None
    return territory.strip().upper()


def validate_territory(territory) -> Result[str]:
    code = normalize_code(territory)
    if code is None:
        if isinstance(territory, LanguageTag):
            return fail(UnknownTerritoryError(territory.territory))
        return fail(UnknownTerritoryError(territory))
    if code not in get_registry().known_codes:
        return fail(UnknownTerritoryError(code))
    return ok(code)


def validate_style(style) -> Result[Style]:
    """Accept a Style member or its exact lower-case string value."""
    if isinstance(style, Style):
        return ok(style)
    if isinstance(style, str) and not isinstance(style, Enum) and style in _STYLES:
        return ok(_STYLES[style])
    return fail(UnknownStyleError(style))
