"""Domain exceptions for fhir-model.

Exception hierarchy:
    ModelException (base)
    └── ValidationError
        ├── Cardinality Errors
        │   ├── MissingRequiredElementError
        │   └── ProhibitedElementError
        ├── Type Errors
        │   ├── InvalidElementTypeError
        │   └── InvalidChoiceTypeError
        ├── Content Errors
        │   ├── EmptyElementError
        │   └── InvalidValueError
        └── Reference Errors
            └── InvalidReferenceTypeError

Every ValidationError is raised synchronously from construction. No partial
object is produced and nothing is retried or logged inside the library.
"""

from __future__ import annotations


class ModelException(Exception):
    """Base exception for all model-level errors."""


class ValidationError(ModelException):
    """Raised when a model object violates a structural invariant.

    Cardinality, type and reference errors name the offending element.
    InvalidValueError names the data type and what is wrong with the value.
    EmptyElementError names the type of the empty element.
    """


# =============================================================================
# Cardinality Errors
# =============================================================================


class MissingRequiredElementError(ValidationError):
    """Raised when a required element is null.

    Covers required singular fields, mandatory choice fields and repeated
    fields that must hold at least one item.
    """


class ProhibitedElementError(ValidationError):
    """Raised when an element excluded by a profile carries a value."""


# =============================================================================
# Type Errors
# =============================================================================


class InvalidElementTypeError(ValidationError):
    """Raised when a singular element or a list entry has the wrong type.

    Null entries inside a repeated element also raise this error.
    """


class InvalidChoiceTypeError(ValidationError):
    """Raised when a choice element holds a type outside its allowed set.

    Example: ChargeItem.occurrence[x] accepts DateTime, Period or Timing;
    a Quantity fails regardless of its content.
    """


# =============================================================================
# Content Errors
# =============================================================================


class EmptyElementError(ValidationError):
    """Raised when an element has neither a value nor children (ele-1)."""


class InvalidValueError(ValidationError):
    """Raised when a primitive value breaks the rules of its data type.

    Examples: a code with consecutive spaces, an id longer than 64
    characters, a negative unsignedInt.
    """


# =============================================================================
# Reference Errors
# =============================================================================


class InvalidReferenceTypeError(ValidationError):
    """Raised when a Reference targets a resource type the element forbids.

    Only raised while reference type checking is enabled in ModelConfig.
    """
