from cldr_territory.engine.currency import (
    info,
    info_or_raise,
    to_currency_code,
    to_currency_code_or_raise,
    to_currency_codes,
    to_currency_codes_or_raise,
)
from cldr_territory.engine.hierarchy import (
    children,
    children_or_raise,
    contains,
    country_codes,
    parent,
    parent_or_raise,
    to_unicode_flag,
    to_unicode_flag_or_raise,
)
from cldr_territory.engine.names import (
    available_styles,
    available_territories,
    available_territories_or_raise,
    from_language_tag,
    from_language_tag_or_raise,
    from_territory_code,
    from_territory_code_or_raise,
    known_territories,
    known_territories_or_raise,
    translate_language_tag,
    translate_language_tag_or_raise,
    translate_territory,
    translate_territory_or_raise,
)
from cldr_territory.engine.validation import validate_style, validate_territory
from cldr_territory.errors import (
    NoActiveCurrencyError,
    Result,
    TerritoryError,
    UnknownChildrenError,
    UnknownFlagError,
    UnknownLanguageTagError,
    UnknownLocaleError,
    UnknownParentError,
    UnknownStyleError,
    UnknownTerritoryError,
)
from cldr_territory.models.territory import LanguageTag, Representation, Style, TerritoryInfo
from cldr_territory.registry.locales import get_locale, new_language_tag, new_language_tag_or_raise

__all__ = [
    "LanguageTag",
    "NoActiveCurrencyError",
    "Representation",
    "Result",
    "Style",
    "TerritoryError",
    "TerritoryInfo",
    "UnknownChildrenError",
    "UnknownFlagError",
    "UnknownLanguageTagError",
    "UnknownLocaleError",
    "UnknownParentError",
    "UnknownStyleError",
    "UnknownTerritoryError",
    "available_styles",
    "available_territories",
    "available_territories_or_raise",
    "children",
    "children_or_raise",
    "contains",
    "country_codes",
    "from_language_tag",
    "from_language_tag_or_raise",
    "from_territory_code",
    "from_territory_code_or_raise",
    "get_locale",
    "info",
    "info_or_raise",
    "known_territories",
    "known_territories_or_raise",
    "new_language_tag",
    "new_language_tag_or_raise",
    "parent",
    "parent_or_raise",
    "to_currency_code",
    "to_currency_code_or_raise",
    "to_currency_codes",
    "to_currency_codes_or_raise",
    "to_unicode_flag",
    "to_unicode_flag_or_raise",
    "translate_language_tag",
    "translate_language_tag_or_raise",
    "translate_territory",
    "translate_territory_or_raise",
    "validate_style",
    "validate_territory",
]
