from pydantic import BaseModel


class TerritoryNameResponse(BaseModel):
    code: str
    locale: str
    style: str
    name: str


class TerritoryCodesResponse(BaseModel):
    code: str
    codes: list[str]


class ContainsResponse(BaseModel):
    parent: str
    child: str
    contains: bool


class FlagResponse(BaseModel):
    code: str
    flag: str


class TranslationResponse(BaseModel):
    name: str
    from_locale: str
    to_locale: str
    translation: str


class CurrenciesResponse(BaseModel):
    code: str
    primary: str
    currencies: list[str]
