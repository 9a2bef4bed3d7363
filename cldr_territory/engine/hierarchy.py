"""Containment queries over the CLDR territory graph.

The graph is a DAG: a country sits under its geographic sub-region and also
under organizational groupings (EU, EZ, UN). Those groupings are not contained
by anything in the data, so their parent is fixed to the world ("001").
"""

from cldr_territory.engine.representation import represent, represent_result
from cldr_territory.engine.validation import normalize_code, validate_territory
from cldr_territory.errors import (
    Result,
    UnknownChildrenError,
    UnknownFlagError,
    UnknownParentError,
    fail,
    ok,
)
from cldr_territory.models.territory import Representation
from cldr_territory.registry.loader import get_registry

WORLD = "001"

ORGANIZATION_PARENTS: dict[str, list[str]] = {
    "EU": [WORLD],
    "EZ": [WORLD],
    "UN": [WORLD],
}

# Sub-regions whose children are countries
MACRO_REGIONS = [
    "005", "011", "013", "014", "015", "017",
    "018", "021", "029", "030", "034", "035",
    "039", "053", "054", "057", "061", "143",
    "145", "151", "154", "155",
]

# chr(REGIONAL_INDICATOR_OFFSET + ord("A")) is REGIONAL INDICATOR SYMBOL LETTER A
REGIONAL_INDICATOR_OFFSET = 127397


def _parents_of(code: str) -> Result[list[str]]:
    if code in ORGANIZATION_PARENTS:
        return ok(list(ORGANIZATION_PARENTS[code]))
    parents = get_registry().parents.get(code)
    if not parents:
        return fail(UnknownChildrenError(code))
    return ok(list(parents))


def _children_of(code: str) -> Result[list[str]]:
    children = get_registry().containment.get(code)
    if children is None:
        return fail(UnknownParentError(code))
    return ok(list(children))


def parent(territory, as_: Representation = Representation.CODE) -> Result[list]:
    """Sorted parents of a territory."""
    return represent_result(validate_territory(territory).then(_parents_of), as_)


def parent_or_raise(territory, as_: Representation = Representation.CODE) -> list:
    return parent(territory, as_).unwrap()


def children(territory, as_: Representation = Representation.CODE) -> Result[list]:
    """Children of a territory in CLDR order (not sorted)."""
    return represent_result(validate_territory(territory).then(_children_of), as_)


def children_or_raise(territory, as_: Representation = Representation.CODE) -> list:
    return children(territory, as_).unwrap()


def contains(parent_territory, child_territory) -> bool:
    """True if child_territory is a direct child of parent_territory. Never raises."""
    parent_code = normalize_code(parent_territory)
    child_code = normalize_code(child_territory)
    if parent_code is None or child_code is None:
        return False
    return child_code in get_registry().containment.get(parent_code, [])


def country_codes(as_: Representation = Representation.CODE) -> list:
    containment = get_registry().containment
    codes = {code for region in MACRO_REGIONS for code in containment.get(region, [])}
    return represent(sorted(codes), as_)


def _flag_for(code: str) -> Result[str]:
    if code not in get_registry().flag_codes:
        return fail(UnknownFlagError(code))
    return ok("".join(chr(REGIONAL_INDICATOR_OFFSET + ord(char)) for char in code))


def to_unicode_flag(territory) -> Result[str]:
    return validate_territory(territory).then(_flag_for)


def to_unicode_flag_or_raise(territory) -> str:
    return to_unicode_flag(territory).unwrap()
