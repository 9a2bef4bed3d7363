from fastapi import APIRouter, HTTPException, Query

from cldr_territory.config import settings
from cldr_territory.engine import currency, hierarchy, names
from cldr_territory.errors import (
    Result,
    UnknownLanguageTagError,
    UnknownLocaleError,
    UnknownTerritoryError,
)
from cldr_territory.models.territory import Style, TerritoryInfo
from cldr_territory.schemas.territory import (
    ContainsResponse,
    CurrenciesResponse,
    FlagResponse,
    TerritoryCodesResponse,
    TerritoryNameResponse,
    TranslationResponse,
)

router = APIRouter(prefix="/territories", tags=["territories"])

_NOT_FOUND = (UnknownTerritoryError, UnknownLocaleError, UnknownLanguageTagError)


def _unwrap(result: Result):
    if result.error is None:
        return result.value
    status_code = 404 if isinstance(result.error, _NOT_FOUND) else 422
    raise HTTPException(status_code=status_code, detail=result.error.message)


# Fixed paths are registered before /{code} so they are not captured as codes


@router.get("/styles", response_model=list[str])
async def list_styles():
    return [style.value for style in names.available_styles()]


@router.get("/country-codes", response_model=list[str])
async def list_country_codes():
    return hierarchy.country_codes()


@router.get("/locales/{locale}", response_model=list[str])
async def list_locale_territories(locale: str):
    return _unwrap(names.available_territories(locale))


@router.get("/translate", response_model=TranslationResponse)
async def translate(
    name: str = Query(..., description="Territory name in from_locale"),
    from_locale: str = Query(..., description="Locale the name is written in"),
    to_locale: str = Query(settings.DEFAULT_LOCALE, description="Target locale"),
):
    translation = _unwrap(names.translate_territory(name, from_locale, to_locale))
    return TranslationResponse(
        name=name, from_locale=from_locale, to_locale=to_locale, translation=translation,
    )


@router.get("/{code}/name", response_model=TerritoryNameResponse)
async def get_name(
    code: str,
    locale: str = Query(settings.DEFAULT_LOCALE, description="Locale of the name"),
    style: str = Query(Style.STANDARD.value, description="short, standard or variant"),
):
    name = _unwrap(names.from_territory_code(code, locale, style))
    return TerritoryNameResponse(code=code.strip().upper(), locale=locale, style=style, name=name)


@router.get("/{code}/parents", response_model=TerritoryCodesResponse)
async def get_parents(code: str):
    parents = _unwrap(hierarchy.parent(code))
    return TerritoryCodesResponse(code=code.strip().upper(), codes=parents)


@router.get("/{code}/children", response_model=TerritoryCodesResponse)
async def get_children(code: str):
    children = _unwrap(hierarchy.children(code))
    return TerritoryCodesResponse(code=code.strip().upper(), codes=children)


@router.get("/{code}/contains/{child}", response_model=ContainsResponse)
async def get_contains(code: str, child: str):
    return ContainsResponse(
        parent=code.strip().upper(),
        child=child.strip().upper(),
        contains=hierarchy.contains(code, child),
    )


@router.get("/{code}/flag", response_model=FlagResponse)
async def get_flag(code: str):
    flag = _unwrap(hierarchy.to_unicode_flag(code))
    return FlagResponse(code=code.strip().upper(), flag=flag)


@router.get("/{code}/currencies", response_model=CurrenciesResponse)
async def get_currencies(code: str):
    codes = _unwrap(currency.to_currency_codes(code))
    return CurrenciesResponse(code=code.strip().upper(), primary=codes[0], currencies=codes)


@router.get("/{code}/info", response_model=TerritoryInfo)
async def get_info(code: str):
    return _unwrap(currency.info(code))
