"""Tests for primitive data types.

Tests cover:
- of() factories and value rules of each primitive
- ele-1: a primitive needs a value or extensions
- Integer ranges and rejection of bool
- Decimal conversion, date/time timezone rules
"""

import datetime
import decimal

import pytest

from fhir_model.domain.exceptions import (
    EmptyElementError,
    InvalidElementTypeError,
    InvalidValueError,
)
from fhir_model.domain.types import (
    Boolean,
    Canonical,
    Code,
    Date,
    DateTime,
    Decimal,
    Extension,
    Id,
    Instant,
    Integer,
    Markdown,
    PositiveInt,
    String,
    UnsignedInt,
    Uri,
)

# =============================================================================
# Strings
# =============================================================================


class TestStringTypes:
    def test_of_wraps_value(self) -> None:
        assert String.of("hello").value == "hello"

    def test_string_rejects_blank_value(self) -> None:
        with pytest.raises(InvalidValueError):
            String.of("   ")

    def test_code_rejects_leading_whitespace(self) -> None:
        with pytest.raises(InvalidValueError, match="non-whitespace"):
            Code.of(" final")

    def test_id_rejects_invalid_characters(self) -> None:
        with pytest.raises(InvalidValueError):
            Id.of("no spaces allowed")

    def test_code_and_markdown_are_strings(self) -> None:
        assert isinstance(Code.of("a"), String)
        assert isinstance(Markdown.of("*a*"), String)

    def test_uri_rejects_whitespace(self) -> None:
        with pytest.raises(InvalidValueError):
            Uri.of("http://example.org/a b")

    def test_canonical_is_a_uri(self) -> None:
        assert isinstance(Canonical.of("http://example.org/StructureDefinition/x|1.0"), Uri)

    def test_string_rejects_non_str_value(self) -> None:
        with pytest.raises(InvalidElementTypeError, match="'value'"):
            String.of(42)


class TestEmptyPrimitive:
    def test_primitive_without_value_or_extension_is_rejected(self) -> None:
        with pytest.raises(EmptyElementError, match="ele-1"):
            String()

    def test_primitive_with_only_extension_is_accepted(self) -> None:
        extension = Extension(
            url="http://hl7.org/fhir/StructureDefinition/data-absent-reason",
            value=Code.of("unknown"),
        )

        value = String(extension=(extension,))

        assert value.value is None
        assert value.extension == (extension,)

    def test_element_id_must_be_valid_string(self) -> None:
        with pytest.raises(InvalidValueError):
            String(id="", value="x")


# =============================================================================
# Numbers and booleans
# =============================================================================


class TestIntegerTypes:
    def test_integer_accepts_int(self) -> None:
        assert Integer.of(-5).value == -5

    def test_integer_rejects_bool(self) -> None:
        with pytest.raises(InvalidElementTypeError):
            Integer.of(True)

    def test_integer_rejects_out_of_range_value(self) -> None:
        with pytest.raises(InvalidValueError, match="32-bit"):
            Integer.of(2**31)

    def test_positive_int_rejects_zero(self) -> None:
        with pytest.raises(InvalidValueError, match="minimum required value: 1"):
            PositiveInt.of(0)

    def test_unsigned_int_accepts_zero(self) -> None:
        assert UnsignedInt.of(0).value == 0

    def test_unsigned_int_rejects_negative(self) -> None:
        with pytest.raises(InvalidValueError):
            UnsignedInt.of(-1)

    def test_boolean_accepts_false(self) -> None:
        assert Boolean.of(False).value is False


class TestDecimal:
    def test_float_keeps_its_decimal_representation(self) -> None:
        assert Decimal.of(0.1).value == decimal.Decimal("0.1")

    def test_numeric_string_is_converted(self) -> None:
        assert Decimal.of("12.50").value == decimal.Decimal("12.50")

    def test_non_numeric_string_is_rejected(self) -> None:
        with pytest.raises(InvalidValueError, match="Invalid decimal"):
            Decimal.of("abc")

    def test_non_finite_value_is_rejected(self) -> None:
        with pytest.raises(InvalidValueError, match="finite"):
            Decimal.of("NaN")

    def test_bool_is_rejected(self) -> None:
        with pytest.raises(InvalidElementTypeError):
            Decimal.of(True)

    def test_scale_is_significant_for_equality(self) -> None:
        assert Decimal.of("1.0") != Decimal.of("1.00")

    def test_equal_scale_values_share_hash(self) -> None:
        assert Decimal.of("1.50") == Decimal.of("1.50")
        assert hash(Decimal.of("1.50")) == hash(Decimal.of("1.50"))


# =============================================================================
# Dates and times
# =============================================================================


class TestDateTimeTypes:
    def test_date_accepts_date(self) -> None:
        assert Date.of(datetime.date(2024, 1, 15)).value == datetime.date(2024, 1, 15)

    def test_date_rejects_datetime(self, fixed_time: datetime.datetime) -> None:
        with pytest.raises(InvalidElementTypeError):
            Date.of(fixed_time)

    def test_date_time_accepts_date(self) -> None:
        assert DateTime.of(datetime.date(2024, 1, 15)).value == datetime.date(2024, 1, 15)

    def test_date_time_accepts_aware_datetime(self, fixed_time: datetime.datetime) -> None:
        assert DateTime.of(fixed_time).value == fixed_time

    def test_date_time_rejects_naive_datetime(self) -> None:
        with pytest.raises(InvalidValueError, match="timezone"):
            DateTime.of(datetime.datetime(2024, 1, 15, 12, 0))

    def test_instant_rejects_naive_datetime(self) -> None:
        with pytest.raises(InvalidValueError, match="timezone"):
            Instant.of(datetime.datetime(2024, 1, 15, 12, 0))

    def test_instant_rejects_date(self) -> None:
        with pytest.raises(InvalidElementTypeError):
            Instant.of(datetime.date(2024, 1, 15))
