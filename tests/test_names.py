import pytest

from cldr_territory.engine.names import (
    _find_name,
    available_styles,
    available_territories,
    available_territories_or_raise,
    from_language_tag,
    from_language_tag_or_raise,
    from_territory_code,
    from_territory_code_or_raise,
    known_territories_or_raise,
    translate_language_tag,
    translate_language_tag_or_raise,
    translate_territory,
    translate_territory_or_raise,
)
from cldr_territory.errors import (
    UnknownLanguageTagError,
    UnknownLocaleError,
    UnknownStyleError,
    UnknownTerritoryError,
)
from cldr_territory.models.territory import Style
from cldr_territory.registry.locales import get_locale, new_language_tag_or_raise

US = new_language_tag_or_raise("en")
BS = new_language_tag_or_raise("bs")


def test_available_styles():
    assert available_styles() == [Style.SHORT, Style.STANDARD, Style.VARIANT]


def test_available_territories():
    codes = available_territories_or_raise()
    assert codes == sorted(codes)
    assert "001" in codes
    assert "EU" in codes
    assert "ZZ" not in codes
    assert isinstance(available_territories("zzz").error, UnknownLocaleError)


def test_known_territories():
    table = known_territories_or_raise("en")
    assert table["GB"] == {"short": "UK", "standard": "United Kingdom"}
    table["GB"]["short"] = "changed"
    assert known_territories_or_raise("en")["GB"]["short"] == "UK"


def test_from_territory_code():
    assert from_territory_code("GB").value == "United Kingdom"
    assert from_territory_code_or_raise("GB", style=Style.SHORT) == "UK"
    assert from_territory_code_or_raise("gb", "pt") == "Reino Unido"
    assert from_territory_code_or_raise("US", "bs") == "Sjedinjene Države"
    assert from_territory_code_or_raise("US", "bs", "short") == "SAD"
    assert from_territory_code_or_raise("CG", "en", Style.VARIANT) == "Congo (Republic)"


def test_from_territory_code_locale_forms():
    assert from_territory_code_or_raise("GB", "en_001") == "United Kingdom"
    assert from_territory_code_or_raise("GB", "en-US") == "United Kingdom"
    assert from_territory_code_or_raise("GB", US) == "United Kingdom"


def test_from_territory_code_errors():
    with pytest.raises(UnknownLocaleError, match=r"The locale 'zzz' is not known\."):
        from_territory_code_or_raise("US", "zzz", Style.SHORT)
    with pytest.raises(UnknownStyleError, match="The style 'zzz' is unknown"):
        from_territory_code_or_raise("US", "en", "zzz")
    with pytest.raises(UnknownStyleError, match="The style 'SHORT' is unknown"):
        from_territory_code_or_raise("US", "en", "SHORT")
    with pytest.raises(UnknownTerritoryError, match="The territory 'ZZ' is unknown"):
        from_territory_code_or_raise("ZZ", "zzz", "zzz")


def test_missing_style_echoes_enum():
    result = from_territory_code("FR", "en", Style.SHORT)
    assert isinstance(result.error, UnknownStyleError)
    assert result.error.message == "The style Style.SHORT is unknown"


def test_from_language_tag():
    assert from_language_tag(US).value == "United States"
    assert from_language_tag_or_raise(US, Style.SHORT) == "US"
    assert from_language_tag_or_raise(BS) == "Bosna i Hercegovina"
    assert from_language_tag_or_raise(get_locale()).lower() == "world"


def test_from_language_tag_errors():
    result = from_language_tag("zzz", Style.SHORT)
    assert isinstance(result.error, UnknownLanguageTagError)
    assert result.error.message == "The tag 'zzz' is not a valid LanguageTag"

    with pytest.raises(UnknownLanguageTagError):
        from_language_tag_or_raise("US")
    with pytest.raises(UnknownStyleError):
        from_language_tag_or_raise(get_locale(), Style.SHORT)


def test_translate_territory():
    assert translate_territory("United States", "en", "bs").value == "Sjedinjene Države"
    assert translate_territory_or_raise("US", "en", "bs") == "SAD"
    assert translate_territory_or_raise("Sjedinjene Države", "bs", "en") == "United States"
    assert translate_territory_or_raise("SAD", "bs", "en") == "US"
    assert translate_territory_or_raise("United Kingdom", "en", "pt") == "Reino Unido"


def test_translate_prefers_short_on_ties():
    # pt uses "Reino Unido" for both short and standard
    assert translate_territory_or_raise("Reino Unido", "pt") == "UK"


def test_translate_falls_back_to_standard():
    assert translate_territory_or_raise("Congo (Republic)", "en", "ja") == from_territory_code_or_raise("CG", "ja")


def test_translate_round_trip():
    for code in ["FR", "DE", "JP", "BR"]:
        name = from_territory_code_or_raise(code, "en")
        translated = translate_territory_or_raise(name, "en", "fr")
        assert translate_territory_or_raise(translated, "fr", "en") == name


def test_translate_territory_errors():
    with pytest.raises(UnknownLocaleError, match="The locale 'zzz' is not known"):
        translate_territory_or_raise("US", "zzz", "bs")
    with pytest.raises(UnknownLocaleError, match="The locale 'zzz' is not known"):
        translate_territory_or_raise("US", "en", "zzz")
    result = translate_territory("Atlantis", "en", "bs")
    assert isinstance(result.error, UnknownTerritoryError)
    assert result.error.message == "The territory 'Atlantis' is unknown"


def test_translate_language_tag():
    assert translate_language_tag(US, BS).value == "Sjedinjene Države"
    assert translate_language_tag_or_raise(US, BS, Style.SHORT) == "SAD"
    assert translate_language_tag_or_raise(US) == "United States"
    assert translate_language_tag_or_raise(US, style=Style.SHORT) == "US"


def test_translate_language_tag_errors():
    with pytest.raises(UnknownLanguageTagError, match="The tag 'US' is not a valid LanguageTag"):
        translate_language_tag_or_raise("US", BS)
    assert isinstance(translate_language_tag(BS, US, "zzz").error, UnknownStyleError)
    assert isinstance(translate_language_tag(US, "zzz").error, UnknownLocaleError)


def test_shared_name_resolves_to_first_code():
    table = {
        "CD": {"standard": "Congo", "variant": "Congo (DRC)"},
        "CG": {"standard": "Congo", "variant": "Congo (Republic)"},
    }
    assert _find_name(table, "Congo") == ("CD", "standard")
    assert _find_name(dict(reversed(list(table.items()))), "Congo") == ("CG", "standard")
    assert _find_name(table, "Congo (Republic)") == ("CG", "variant")
    assert _find_name(table, "Atlantis") is None
