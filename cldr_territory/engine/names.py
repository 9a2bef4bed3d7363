"""Localized territory names and name translation between locales.

Names are looked up in the per-locale tables built by the registry. Each code
maps style -> name; ``standard`` is always present, ``short`` and ``variant``
only where CLDR defines an alternate form.
"""

import logging

from cldr_territory.config import settings
from cldr_territory.engine.validation import validate_style, validate_territory
from cldr_territory.errors import (
    Result,
    UnknownLanguageTagError,
    UnknownStyleError,
    UnknownTerritoryError,
    fail,
    ok,
)
from cldr_territory.models.territory import LanguageTag, Style
from cldr_territory.registry.loader import STYLE_ORDER, get_registry
from cldr_territory.registry.locales import validate_locale

logger = logging.getLogger(__name__)


def available_styles() -> list[Style]:
    return list(Style)


def _resolve_locale(locale) -> Result[LanguageTag]:
    if locale is None:
        locale = settings.DEFAULT_LOCALE
    return validate_locale(locale, get_registry().names.keys())


def _table(tag: LanguageTag) -> dict[str, dict[str, str]]:
    return get_registry().names[tag.cldr_locale_name]


def available_territories(locale=None) -> Result[list[str]]:
    """Sorted territory codes that have a name in ``locale``."""
    return _resolve_locale(locale).then(lambda tag: ok(sorted(_table(tag))))


def available_territories_or_raise(locale=None) -> list[str]:
    return available_territories(locale).unwrap()


def known_territories(locale=None) -> Result[dict[str, dict[str, str]]]:
    return _resolve_locale(locale).then(
        lambda tag: ok({code: dict(names) for code, names in _table(tag).items()})
    )


def known_territories_or_raise(locale=None) -> dict[str, dict[str, str]]:
    return known_territories(locale).unwrap()


def from_territory_code(territory, locale=None, style=Style.STANDARD) -> Result[str]:
    """Name of ``territory`` in ``locale`` for the given style.

    Checks run in order territory, locale, style; the first failure wins.
    """
    code_result = validate_territory(territory)
    if not code_result.ok:
        return code_result
    tag_result = _resolve_locale(locale)
    if not tag_result.ok:
        return tag_result
    style_result = validate_style(style)
    if not style_result.ok:
        return style_result

    names = _table(tag_result.value).get(code_result.value, {})
    name = names.get(style_result.value.value)
    if name is None:
        return fail(UnknownStyleError(style))
    return ok(name)


def from_territory_code_or_raise(territory, locale=None, style=Style.STANDARD) -> str:
    return from_territory_code(territory, locale, style).unwrap()


def from_language_tag(tag, style=Style.STANDARD) -> Result[str]:
    """Name of the tag's territory, in the tag's own locale."""
    if not isinstance(tag, LanguageTag):
        return fail(UnknownLanguageTagError(tag))
    return from_territory_code(tag.territory, tag, style)


def from_language_tag_or_raise(tag, style=Style.STANDARD) -> str:
    return from_language_tag(tag, style).unwrap()


def _find_name(table: dict[str, dict[str, str]], name: str) -> tuple[str, str] | None:
    for code, names in table.items():
        for style in STYLE_ORDER:
            if names.get(style) == name:
                return code, style
    return None


def translate_territory(name: str, from_locale, to_locale=None) -> Result[str]:
    """Translate a localized territory name from one locale to another.

    The first (code, style) whose name matches exactly in ``from_locale`` wins,
    scanning codes in sorted order and styles short, standard, variant. The
    result keeps the matched style, falling back to the standard name when the
    target locale has no such form.
    """
    from_result = _resolve_locale(from_locale)
    if not from_result.ok:
        return from_result

    match = _find_name(_table(from_result.value), name)
    if match is None:
        logger.debug("No territory named %r in %s", name, from_result.value.cldr_locale_name)
        return fail(UnknownTerritoryError(name))
    code, style = match

    to_result = _resolve_locale(to_locale)
    if not to_result.ok:
        return to_result

    target = _table(to_result.value).get(code, {})
    translated = target.get(style) or target.get(Style.STANDARD.value)
    if translated is None:
        return fail(UnknownTerritoryError(code))
    return ok(translated)


def translate_territory_or_raise(name: str, from_locale, to_locale=None) -> str:
    return translate_territory(name, from_locale, to_locale).unwrap()


def translate_language_tag(from_tag, to_locale=None, style=Style.STANDARD) -> Result[str]:
    return from_language_tag(from_tag, style).then(
        lambda name: translate_territory(name, from_tag, to_locale)
    )


def translate_language_tag_or_raise(from_tag, to_locale=None, style=Style.STANDARD) -> str:
    return translate_language_tag(from_tag, to_locale, style).unwrap()
