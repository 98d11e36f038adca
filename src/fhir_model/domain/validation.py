"""Static checks invoked while model objects are constructed.

Every check raises a ValidationError subclass whose message names the
element; none of them log or recover. Checks on optional values pass None
through so that callers can apply them unconditionally.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any, TypeVar

from fhir_model.config import get_config
from fhir_model.domain.exceptions import (
    EmptyElementError,
    InvalidChoiceTypeError,
    InvalidElementTypeError,
    InvalidReferenceTypeError,
    InvalidValueError,
    MissingRequiredElementError,
    ProhibitedElementError,
)
from fhir_model.domain.resource_type import ResourceType

if TYPE_CHECKING:
    from collections.abc import Sequence

    from fhir_model.domain.base import ModelObject
    from fhir_model.domain.types.complex import Reference

logger = logging.getLogger(__name__)

T = TypeVar("T")

MIN_STRING_LENGTH = 1
MAX_STRING_LENGTH = 1048576  # 1 MiB
MAX_ID_LENGTH = 64

WHITESPACE = frozenset(" \t\r\n")
UNSUPPORTED_CONTROL_CHARS = frozenset(chr(i) for i in range(32) if i not in (9, 10, 13))
ID_PATTERN = re.compile(r"[A-Za-z0-9\-.]{1,64}")

# Type/id[/_history/vid]
REFERENCE_PATTERN = re.compile(
    r"([A-Z][A-Za-z]+)/[A-Za-z0-9\-.]{1,64}(/_history/[A-Za-z0-9\-.]{1,64})?"
)
RESOURCE_TYPE_GROUP = 1


def _type_names(types: Sequence[type]) -> str:
    return "[" + ", ".join(t.__name__ for t in types) + "]"


# =============================================================================
# Cardinality
# =============================================================================


def require_non_null(value: T | None, element_name: str) -> T:
    if value is None:
        raise MissingRequiredElementError(f"Missing required element: '{element_name}'")
    return value


def require_non_empty(values: Sequence[T], element_name: str) -> Sequence[T]:
    """Fail if a repeated element marked as mandatory has no entries."""
    if not values:
        raise MissingRequiredElementError(f"Missing required element: '{element_name}'")
    return values


def prohibited(value: Any, element_name: str) -> None:
    """Fail if an element excluded by a profile carries a value.

    Accepts singular values and sequences; an empty sequence counts as absent.
    """
    if value is None or (isinstance(value, tuple | list) and not value):
        return
    raise ProhibitedElementError(f"Element: '{element_name}' is prohibited")


# =============================================================================
# Types
# =============================================================================


def check_type(value: T | None, element_name: str, element_type: type) -> T | None:
    """Fail if a singular value is not an instance of element_type."""
    if value is not None and not isinstance(value, element_type):
        raise InvalidElementTypeError(
            f"Invalid type: {type(value).__name__} for element: '{element_name}' "
            f"must be: {element_type.__name__}"
        )
    return value


def check_list(values: Sequence[T], element_name: str, element_type: type) -> Sequence[T]:
    """Fail if a repeated element holds null entries or entries of the wrong type."""
    for value in values:
        if value is None:
            raise InvalidElementTypeError(
                f"Repeating element: '{element_name}' does not permit null elements"
            )
        if not isinstance(value, element_type):
            raise InvalidElementTypeError(
                f"Invalid type: {type(value).__name__} for repeating element: "
                f"'{element_name}' must be: {element_type.__name__}"
            )
    return values


def choice_element(value: T | None, element_name: str, *types: type) -> T | None:
    """Fail if a non-null choice value is not one of the allowed types.

    A subclass of an allowed type is accepted (a Code is a String).
    """
    if value is not None and not isinstance(value, types):
        raise InvalidChoiceTypeError(
            f"Invalid type: {type(value).__name__} for choice element: '{element_name}' "
            f"must be one of: {_type_names(types)}"
        )
    return value


def require_choice_element(value: T | None, element_name: str, *types: type) -> T:
    require_non_null(value, element_name)
    return choice_element(value, element_name, *types)


def require_value_or_children(element: ModelObject) -> None:
    """ele-1: All FHIR elements must have a @value or children."""
    if not element.has_value() and not element.has_children():
        raise EmptyElementError(
            f"ele-1: All FHIR elements must have a @value or children "
            f"({type(element).__name__})"
        )


# =============================================================================
# Primitive values
# =============================================================================


def _check_control_chars(s: str, ch: str) -> None:
    if ch in UNSUPPORTED_CONTROL_CHARS and get_config().check_control_chars:
        raise InvalidValueError(
            f"String value contains unsupported control characters: "
            f"decimal range=[0000-0008,0011,0012,0014-0031] value=[{s!r}]"
        )


def check_max_length(s: str | None) -> None:
    if s is not None and len(s) > MAX_STRING_LENGTH:
        raise InvalidValueError(
            f"String value length: {len(s)} is greater than maximum allowed length: "
            f"{MAX_STRING_LENGTH}"
        )


def check_string(s: str | None) -> None:
    """A sequence of Unicode characters matching [ \\r\\n\\t\\S]+."""
    if s is None:
        return
    check_max_length(s)
    count = 0
    for ch in s:
        if not ch.isspace():
            _check_control_chars(s, ch)
            count += 1
        elif ch not in WHITESPACE:
            raise InvalidValueError(
                f"String value: {s!r} is not valid with respect to pattern: [ \\r\\n\\t\\S]+"
            )
    if count < MIN_STRING_LENGTH:
        raise InvalidValueError(
            f"Trimmed String value length: {count} is less than minimum required length: "
            f"{MIN_STRING_LENGTH}"
        )


def check_code(s: str | None) -> None:
    """At least one character, no leading/trailing whitespace, single inner spaces only."""
    if s is None:
        return
    if not s or s[0].isspace():
        raise InvalidValueError(f"Code value: {s!r} must begin with a non-whitespace character")
    if s[-1].isspace():
        raise InvalidValueError(f"Code value: {s!r} must end with a non-whitespace character")
    previous_is_space = False
    for ch in s:
        if ch.isspace():
            if ch != " ":
                raise InvalidValueError(
                    f"Code value: {s!r} must not contain whitespace other than a single space"
                )
            if previous_is_space:
                raise InvalidValueError(f"Code value: {s!r} must not contain consecutive spaces")
            previous_is_space = True
        else:
            _check_control_chars(s, ch)
            previous_is_space = False


def check_id(s: str | None) -> None:
    """Letters, numerals, '-' and '.', at most 64 characters."""
    if s is None:
        return
    if not s:
        raise InvalidValueError("Id value must not be empty")
    if len(s) > MAX_ID_LENGTH:
        raise InvalidValueError(
            f"Id value length: {len(s)} is greater than maximum allowed length: {MAX_ID_LENGTH}"
        )
    if not ID_PATTERN.fullmatch(s):
        raise InvalidValueError(f"Id value: {s!r} contains invalid characters")


def check_uri(s: str | None) -> None:
    if s is None:
        return
    check_max_length(s)
    for ch in s:
        _check_control_chars(s, ch)
        if ch.isspace():
            raise InvalidValueError(f"Uri value: {s!r} must not contain whitespace")


def check_value(value: int | None, min_value: int) -> None:
    if value is not None and value < min_value:
        raise InvalidValueError(
            f"Integer value: {value} is less than minimum required value: {min_value}"
        )


# =============================================================================
# References
# =============================================================================


def _has_scheme(literal: str) -> bool:
    index = literal.find(":")
    return index > 0 and len(literal) > index + 1


def check_reference_type(
    reference: Reference | None, element_name: str, *reference_types: str
) -> None:
    """Fail if a Reference targets a resource type outside reference_types.

    The resource type is taken from the relative or conditional literal
    reference and from Reference.type; when both are present
    they must agree. Contained ("#id") and scheme-qualified references (urn:, http:)
    are not resolved.
    """
    if reference is None:
        return
    if not get_config().check_reference_types:
        logger.debug("Reference type check skipped for element '%s'", element_name)
        return

    resource_type = None
    literal = reference.reference.value if reference.reference is not None else None

    if literal is not None and not literal.startswith("#") and not _has_scheme(literal):
        index = literal.find("?")
        if index != -1:
            # conditional reference
            resource_type = literal[:index]
        else:
            match = REFERENCE_PATTERN.fullmatch(literal)
            if match:
                resource_type = match.group(RESOURCE_TYPE_GROUP)

        if resource_type is None:
            raise InvalidReferenceTypeError(
                f"Invalid reference value or resource type not found in reference value: "
                f"'{literal}' for element: '{element_name}'"
            )
        if not ResourceType.is_valid(resource_type):
            raise InvalidReferenceTypeError(
                f"Resource type found in reference value: '{literal}' for element: "
                f"'{element_name}' must be a valid resource type name"
            )
        if resource_type not in reference_types:
            raise InvalidReferenceTypeError(
                f"Resource type found in reference value: '{literal}' for element: "
                f"'{element_name}' must be one of: {list(reference_types)}"
            )

    reference_type = reference.type.value if reference.type is not None else None
    if reference_type is not None:
        if not ResourceType.is_valid(reference_type):
            raise InvalidReferenceTypeError(
                f"Resource type found in Reference.type: '{reference_type}' for element: "
                f"'{element_name}' must be a valid resource type name"
            )
        if reference_type not in reference_types:
            raise InvalidReferenceTypeError(
                f"Resource type found in Reference.type: '{reference_type}' for element: "
                f"'{element_name}' must be one of: {list(reference_types)}"
            )
        if resource_type is not None and resource_type != reference_type:
            raise InvalidReferenceTypeError(
                f"Resource type found in reference value: '{literal}' for element: "
                f"'{element_name}' does not match Reference.type: {reference_type}"
            )
