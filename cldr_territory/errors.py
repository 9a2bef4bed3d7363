"""Territory error taxonomy and the Result wrapper returned by the default API.

Every fallible operation returns a ``Result``; the ``*_or_raise`` twins call
``Result.unwrap()`` which raises the carried error unchanged.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


def describe(value: Any) -> str:
    """Render a caller value for an error message, keeping enum vs string visible."""
    if isinstance(value, Enum):
        return f"{type(value).__name__}.{value.name}"
    return repr(value)


class TerritoryError(Exception):
    """Base class for every error raised by the territory API."""

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.message = message
        self.value = value


class UnknownTerritoryError(TerritoryError):
    def __init__(self, code: Any):
        super().__init__(f"The territory {describe(code)} is unknown", code)


class UnknownLocaleError(TerritoryError):
    def __init__(self, locale: Any):
        super().__init__(f"The locale {describe(locale)} is not known.", locale)


class UnknownStyleError(TerritoryError):
    def __init__(self, style: Any):
        super().__init__(f"The style {describe(style)} is unknown", style)


class UnknownChildrenError(TerritoryError):
    """Raised for a valid territory that is nobody's child."""

    def __init__(self, code: Any):
        super().__init__(f"The territory {describe(code)} has no parent(s)", code)


class UnknownParentError(TerritoryError):
    """Raised for a valid territory that has no children (a leaf)."""

    def __init__(self, code: Any):
        super().__init__(f"The territory {describe(code)} has no children", code)


class UnknownFlagError(TerritoryError):
    def __init__(self, code: Any):
        super().__init__(f"The territory {describe(code)} has no flag", code)


class UnknownLanguageTagError(TerritoryError):
    def __init__(self, tag: Any):
        super().__init__(f"The tag {describe(tag)} is not a valid LanguageTag", tag)


class NoActiveCurrencyError(TerritoryError):
    def __init__(self, code: Any):
        super().__init__(f"The territory {describe(code)} has no active currency", code)


@dataclass(frozen=True)
class Result(Generic[T]):
    value: T | None = None
    error: TerritoryError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value

    def then(self, fn) -> "Result":
        """Chain another fallible step; errors short-circuit."""
        if self.error is not None:
            return self
        return fn(self.value)


def ok(value: T) -> Result[T]:
    return Result(value=value)


def fail(error: TerritoryError) -> Result:
    return Result(error=error)
