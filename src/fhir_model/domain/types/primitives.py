"""Primitive data types.

Each primitive wraps a plain Python value and may carry an id and
extensions like any other element. A primitive with neither a value nor
extensions is rejected (ele-1).
"""

from __future__ import annotations

import datetime
import decimal
from typing import Any, TypeVar

from fhir_model.domain import validation
from fhir_model.domain.base import model, optional
from fhir_model.domain.exceptions import InvalidElementTypeError, InvalidValueError
from fhir_model.domain.types.element import Element

P = TypeVar("P", bound="PrimitiveType")

MIN_INTEGER = -2147483648
MAX_INTEGER = 2147483647


@model
class PrimitiveType(Element):
    """Base for data types whose content is a single value."""

    @classmethod
    def of(cls: type[P], value: Any) -> P:
        return cls(value=value)

    def has_value(self) -> bool:
        return getattr(self, "value", None) is not None

    def _validate(self) -> None:
        self._check_value()
        super()._validate()

    def _check_value(self) -> None:
        """Value rules of the concrete type."""


# =============================================================================
# String types
# =============================================================================


@model
class String(PrimitiveType):
    value: str | None = optional(str)

    def _check_value(self) -> None:
        validation.check_string(self.value)


@model
class Code(String):
    """A string without leading/trailing whitespace and single inner spaces."""

    def _check_value(self) -> None:
        validation.check_code(self.value)


@model
class Id(String):
    def _check_value(self) -> None:
        validation.check_id(self.value)


@model
class Markdown(String):
    pass


# =============================================================================
# URI types
# =============================================================================


@model
class Uri(PrimitiveType):
    value: str | None = optional(str)

    def _check_value(self) -> None:
        validation.check_uri(self.value)


@model
class Canonical(Uri):
    """A URI referring to a canonical resource, optionally with |version."""


@model
class Url(Uri):
    pass


# =============================================================================
# Numbers and booleans
# =============================================================================


@model
class Boolean(PrimitiveType):
    value: bool | None = optional(bool)


@model
class Integer(PrimitiveType):
    """32-bit signed integer."""

    value: int | None = optional(int)

    def _check_value(self) -> None:
        if isinstance(self.value, bool):
            raise InvalidElementTypeError(
                f"Invalid type: bool for element: 'value' must be: int ({type(self).__name__})"
            )
        if self.value is not None and not MIN_INTEGER <= self.value <= MAX_INTEGER:
            raise InvalidValueError(
                f"Integer value: {self.value} is outside the 32-bit signed integer range"
            )


@model
class PositiveInt(Integer):
    def _check_value(self) -> None:
        super()._check_value()
        validation.check_value(self.value, 1)


@model
class UnsignedInt(Integer):
    def _check_value(self) -> None:
        super()._check_value()
        validation.check_value(self.value, 0)


@model
class Decimal(PrimitiveType):
    value: decimal.Decimal | None = optional(decimal.Decimal)

    @classmethod
    def of(cls, value: Any) -> Decimal:
        """Accepts a Decimal, an int or a numeric string.

        Floats are converted through their string form so that 0.1 stays 0.1.
        """
        if isinstance(value, int | float | str) and not isinstance(value, bool):
            try:
                value = decimal.Decimal(str(value))
            except decimal.InvalidOperation as e:
                raise InvalidValueError(f"Invalid decimal value: {value!r}") from e
        return cls(value=value)

    def _check_value(self) -> None:
        if self.value is not None and not self.value.is_finite():
            raise InvalidValueError(f"Decimal value: {self.value} must be finite")

    def _values(self) -> tuple[Any, ...]:
        # Scale is significant: 1.0 and 1.00 are different values.
        scale = self.value.as_tuple() if self.value is not None else None
        return super()._values() + (scale,)


# =============================================================================
# Dates and times
# =============================================================================


@model
class Date(PrimitiveType):
    value: datetime.date | None = optional(datetime.date)

    def _check_value(self) -> None:
        if isinstance(self.value, datetime.datetime):
            raise InvalidElementTypeError(
                "Invalid type: datetime for element: 'value' must be: date (Date)"
            )


@model
class DateTime(PrimitiveType):
    """A date, or a date and time.

    Times must be timezone aware; a plain date stands for the whole day.
    """

    value: datetime.date | None = optional(datetime.date)

    def _check_value(self) -> None:
        if isinstance(self.value, datetime.datetime) and self.value.tzinfo is None:
            raise InvalidValueError(
                f"DateTime value: {self.value.isoformat()} must include a timezone offset"
            )


@model
class Instant(PrimitiveType):
    """A timezone-aware point in time."""

    value: datetime.datetime | None = optional(datetime.datetime)

    def _check_value(self) -> None:
        if self.value is not None and self.value.tzinfo is None:
            raise InvalidValueError(
                f"Instant value: {self.value.isoformat()} must include a timezone offset"
            )
