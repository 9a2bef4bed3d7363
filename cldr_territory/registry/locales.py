"""Locale validation backed by babel's CLDR locale data.

Identifiers are accepted in either ``en_001`` or ``en-001`` form, any case, and
resolved to the most specific configured locale (``en-US`` -> ``en``).
"""

import logging
from collections.abc import Iterable

from babel import Locale
from babel import UnknownLocaleError as BabelUnknownLocaleError
from babel.core import get_global, parse_locale

from cldr_territory.config import settings
from cldr_territory.errors import Result, UnknownLocaleError, fail, ok
from cldr_territory.models.territory import LanguageTag

logger = logging.getLogger(__name__)


def canonical_name(locale: Locale) -> str:
    return str(locale).replace("_", "-")


def _candidate_names(locale: Locale) -> list[str]:
    names = [canonical_name(locale)]
    if locale.territory:
        names.append(f"{locale.language}-{locale.territory}")
    if locale.script:
        names.append(f"{locale.language}-{locale.script}")
    names.append(locale.language)
    return names


def likely_territory(language: str) -> str | None:
    """Territory CLDR considers most likely for a bare language ("bs" -> "BA")."""
    likely = get_global("likely_subtags").get(language)
    if likely is None:
        return None
    return parse_locale(likely)[1]


def validate_locale(locale, known_locales: Iterable[str] | None = None) -> Result[LanguageTag]:
    """Resolve ``locale`` to a LanguageTag for one of the configured locales."""
    known = list(known_locales) if known_locales is not None else settings.KNOWN_LOCALES

    if isinstance(locale, LanguageTag):
        if locale.cldr_locale_name in known:
            return ok(locale)
        return fail(UnknownLocaleError(locale.cldr_locale_name))
    if isinstance(locale, Locale):
        locale = canonical_name(locale)
    if not isinstance(locale, str):
        return fail(UnknownLocaleError(locale))

    try:
        parsed = Locale.parse(locale.strip().replace("-", "_"))
    except (BabelUnknownLocaleError, ValueError):
        logger.debug("No CLDR data for locale %r", locale)
        return fail(UnknownLocaleError(locale))

    for name in _candidate_names(parsed):
        if name in known:
            return ok(LanguageTag(
                language=parsed.language,
                script=parsed.script,
                territory=parsed.territory or likely_territory(parsed.language),
                cldr_locale_name=name,
                requested_locale_name=locale,
            ))
    return fail(UnknownLocaleError(locale))


def get_locale() -> LanguageTag:
    """The default locale as a LanguageTag."""
    return validate_locale(settings.DEFAULT_LOCALE).unwrap()


def new_language_tag(locale) -> Result[LanguageTag]:
    return validate_locale(locale)


def new_language_tag_or_raise(locale) -> LanguageTag:
    return validate_locale(locale).unwrap()
