from cldr_territory.errors import Result, ok
from cldr_territory.models.territory import Representation


def represent(value, as_: Representation | str = Representation.CODE):
    """Convert a code, or each code in a list, to the requested representation."""
    as_ = Representation(as_)
    if isinstance(value, list):
        return [represent(item, as_) for item in value]
    if as_ is Representation.BYTES:
        return value.encode("ascii")
    if as_ is Representation.CHARS:
        return list(value)
    return value


def represent_result(result: Result, as_: Representation | str = Representation.CODE) -> Result:
    if not result.ok:
        return result
    return ok(represent(result.value, as_))
