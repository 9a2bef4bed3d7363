from datetime import date

from cldr_territory.engine.representation import represent_result
from cldr_territory.engine.validation import validate_territory
from cldr_territory.errors import NoActiveCurrencyError, Result, fail, ok
from cldr_territory.models.territory import CurrencyPeriod, Representation, TerritoryInfo
from cldr_territory.registry.loader import get_registry


def info(territory) -> Result[TerritoryInfo]:
    """Currency history, population figures, measurement system and languages."""
    return validate_territory(territory).then(lambda code: ok(get_registry().info[code]))


def info_or_raise(territory) -> TerritoryInfo:
    return info(territory).unwrap()


def active_currencies(territory_info: TerritoryInfo) -> list[CurrencyPeriod]:
    """Legal-tender currencies with no end date, oldest first."""
    active = [period for period in territory_info.currency if period.active]
    return sorted(active, key=lambda period: period.valid_from or date.min)


def _active_codes(code: str) -> Result[list[str]]:
    codes = [period.code for period in active_currencies(get_registry().info[code])]
    if not codes:
        return fail(NoActiveCurrencyError(code))
    return ok(codes)


def to_currency_codes(territory, as_: Representation = Representation.CODE) -> Result[list]:
    return represent_result(validate_territory(territory).then(_active_codes), as_)


def to_currency_codes_or_raise(territory, as_: Representation = Representation.CODE) -> list:
    return to_currency_codes(territory, as_).unwrap()


def to_currency_code(territory, as_: Representation = Representation.CODE) -> Result:
    """The longest-standing active currency of a territory."""
    return represent_result(
        validate_territory(territory).then(_active_codes).then(lambda codes: ok(codes[0])),
        as_,
    )


def to_currency_code_or_raise(territory, as_: Representation = Representation.CODE):
    return to_currency_code(territory, as_).unwrap()
