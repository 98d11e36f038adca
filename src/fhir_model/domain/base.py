"""Immutable model objects and their element declarations.

A model class is a frozen dataclass decorated with @model whose fields are
declared with one of the element descriptors below. The descriptors carry
the cardinality and type rules of each element; ModelObject applies them once
in __post_init__, so every constructed instance is fully validated, and then
walks the same declarations for equality, hashing and visitor traversal.

    @model
    class Period(Element):
        start: DateTime | None = optional(DateTime)
        end: DateTime | None = optional(DateTime)
"""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, TypeVar

from fhir_model.domain import validation
from fhir_model.domain.builder import Builder
from fhir_model.domain.exceptions import InvalidElementTypeError, InvalidValueError

if TYPE_CHECKING:
    from fhir_model.application.ports import Visitor

M = TypeVar("M", bound="ModelObject")

_ELEMENT_KEY = "fhir_model.element"
_MODEL_CLASSES: dict[str, type[ModelObject]] = {}
_ELEMENT_SPECS: dict[type, tuple[ElementSpec, ...]] = {}


class Cardinality(Enum):
    REQUIRED = "required"
    OPTIONAL = "optional"
    CHOICE = "choice"
    REPEATED = "repeated"


@dataclass(frozen=True, slots=True)
class _Declaration:
    cardinality: Cardinality
    types: tuple[type | str, ...]
    required: bool = False
    min_items: int = 0
    targets: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ElementSpec:
    """Resolved declaration of one element of a model class.

    Attributes:
        name: Python attribute name (snake_case).
        element_name: FHIR element name (lowerCamelCase).
        cardinality: How many values the element holds.
        types: Allowed value types; more than one only for choice elements.
        required: Whether a singular element or choice must be non-null.
        min_items: Minimum number of entries of a repeated element.
        targets: Resource types a Reference value may point to.
    """

    name: str
    element_name: str
    cardinality: Cardinality
    types: tuple[type, ...]
    required: bool
    min_items: int
    targets: tuple[str, ...]

    @property
    def element_type(self) -> type:
        return self.types[0]

    @property
    def is_repeating(self) -> bool:
        return self.cardinality is Cardinality.REPEATED

    @property
    def is_choice(self) -> bool:
        return self.cardinality is Cardinality.CHOICE

    def check(self, value: Any) -> Any:
        """Validate a field value and return it in its stored form.

        Lists are frozen to tuples and code strings are converted to their
        enumeration member; anything else is returned unchanged.

        Raises:
            ValidationError: If the value breaks the declaration.
        """
        name = self.element_name

        if self.cardinality is Cardinality.REPEATED:
            if value is None:
                value = ()
            elif isinstance(value, list):
                value = tuple(value)
            elif not isinstance(value, tuple):
                raise InvalidElementTypeError(
                    f"Repeating element: '{name}' must be a sequence, "
                    f"got {type(value).__name__}"
                )
            value = tuple(self._coerce(item) for item in value)
            if self.min_items:
                validation.require_non_empty(value, name)
            validation.check_list(value, name, self.element_type)
            for item in value:
                self._check_reference(item)
            return value

        if self.cardinality is Cardinality.CHOICE:
            if self.required:
                validation.require_choice_element(value, name, *self.types)
            else:
                validation.choice_element(value, name, *self.types)
            self._check_reference(value)
            return value

        if self.required:
            validation.require_non_null(value, name)
        value = self._coerce(value)
        validation.check_type(value, name, self.element_type)
        self._check_reference(value)
        return value

    def _coerce(self, value: Any) -> Any:
        element_type = self.element_type
        if isinstance(value, str) and issubclass(element_type, Enum):
            try:
                return element_type(value)
            except ValueError as e:
                raise InvalidValueError(
                    f"Invalid code: '{value}' for element: '{self.element_name}' "
                    f"must be one of: {[member.value for member in element_type]}"
                ) from e
        return value

    def _check_reference(self, value: Any) -> None:
        if self.targets and isinstance(value, model_class("Reference")):
            validation.check_reference_type(value, self.element_name, *self.targets)


# =============================================================================
# Element descriptors
# =============================================================================


def _element(default: Any, declaration: _Declaration) -> Any:
    return field(default=default, metadata={_ELEMENT_KEY: declaration})


def required(element_type: type | str, *, targets: tuple[str, ...] = ()) -> Any:
    """Singular element that must be non-null."""
    return _element(None, _Declaration(Cardinality.REQUIRED, (element_type,), True, 0, targets))


def optional(element_type: type | str, *, targets: tuple[str, ...] = ()) -> Any:
    """Singular element that may be null."""
    return _element(None, _Declaration(Cardinality.OPTIONAL, (element_type,), False, 0, targets))


def choice(*types: type | str, required: bool = False, targets: tuple[str, ...] = ()) -> Any:
    """Element whose value is exactly one of a closed set of types."""
    return _element(None, _Declaration(Cardinality.CHOICE, types, required, 0, targets))


def repeated(
    element_type: type | str, *, min_items: int = 0, targets: tuple[str, ...] = ()
) -> Any:
    """Ordered sequence of values; empty when absent, never null."""
    return _element(
        (), _Declaration(Cardinality.REPEATED, (element_type,), False, min_items, targets)
    )


# =============================================================================
# Registry
# =============================================================================


def model(cls: type[M]) -> type[M]:
    """Class decorator turning a ModelObject subclass into a frozen model class."""
    cls = dataclass(frozen=True, eq=False, kw_only=True)(cls)
    _MODEL_CLASSES[cls.__qualname__] = cls
    return cls


def model_class(qualname: str) -> type[ModelObject]:
    try:
        return _MODEL_CLASSES[qualname]
    except KeyError:
        raise LookupError(f"Unknown model class: {qualname}") from None


def model_classes() -> tuple[type[ModelObject], ...]:
    return tuple(_MODEL_CLASSES.values())


def _element_name(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _resolve(element_type: type | str) -> type:
    if isinstance(element_type, str):
        return model_class(element_type)
    return element_type


def element_specs(cls: type) -> tuple[ElementSpec, ...]:
    """Return the element specs of a model class in declaration order.

    Inherited elements come first. String type references are resolved
    against the registry on first use and the result is cached per class.
    """
    specs = _ELEMENT_SPECS.get(cls)
    if specs is None:
        specs = tuple(
            ElementSpec(
                name=f.name,
                element_name=_element_name(f.name),
                cardinality=declaration.cardinality,
                types=tuple(_resolve(t) for t in declaration.types),
                required=declaration.required,
                min_items=declaration.min_items,
                targets=declaration.targets,
            )
            for f in dataclasses.fields(cls)
            if (declaration := f.metadata.get(_ELEMENT_KEY)) is not None
        )
        _ELEMENT_SPECS[cls] = specs
    return specs


_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def snake_case(name: str) -> str:
    """ChargeItem.Performer -> charge_item_performer"""
    return "_".join(_CAMEL_BOUNDARY.sub("_", part).lower() for part in name.split("."))


# =============================================================================
# ModelObject
# =============================================================================


class ModelObject:
    """Base for every immutable model class.

    Subclasses are decorated with @model and declare their elements with
    required(), optional(), choice() and repeated(). Construction validates
    every element once; afterwards the object never changes. Use builder()
    to accumulate values and to_builder() to derive a modified copy.
    """

    def __post_init__(self) -> None:
        for spec in element_specs(type(self)):
            value = getattr(self, spec.name)
            checked = spec.check(value)
            if checked is not value:
                object.__setattr__(self, spec.name, checked)
        self._validate()
        # Computed eagerly: the object is immutable from here on
        object.__setattr__(self, "_hash", hash((type(self).__qualname__, self._values())))

    def _validate(self) -> None:
        """Cross-element rules; subclasses extend this."""

    def _values(self) -> tuple[Any, ...]:
        return tuple(getattr(self, spec.name) for spec in element_specs(type(self)))

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self._hash == other._hash and self._values() == other._values()

    def __hash__(self) -> int:
        return self._hash

    # -------------------------------------------------------------------------
    # Introspection
    # -------------------------------------------------------------------------

    @classmethod
    def element_specs(cls) -> tuple[ElementSpec, ...]:
        return element_specs(cls)

    @classmethod
    def type_name(cls) -> str:
        return cls.__qualname__

    def has_value(self) -> bool:
        """True if this is a primitive element carrying a value."""
        return False

    def has_children(self) -> bool:
        """True if any child element is present.

        Plain attribute values (ids, urls, the value of a primitive) are not
        children; model objects, codes and non-empty sequences are.
        """
        for spec in element_specs(type(self)):
            value = getattr(self, spec.name)
            if isinstance(value, ModelObject | Enum) or (isinstance(value, tuple) and value):
                return True
        return False

    # -------------------------------------------------------------------------
    # Builders
    # -------------------------------------------------------------------------

    @classmethod
    def builder(cls: type[M], **values: Any) -> Builder[M]:
        """Return a builder, optionally pre-seeded with element values."""
        return Builder(cls, **values)

    def to_builder(self: M) -> Builder[M]:
        """Return a builder pre-populated with every element of this object."""
        return Builder.from_model(self)

    # -------------------------------------------------------------------------
    # Visitor
    # -------------------------------------------------------------------------

    def accept(
        self, visitor: Visitor, element_name: str | None = None, element_index: int = -1
    ) -> None:
        """Walk this object depth-first with the given visitor.

        Children are skipped when visit() returns False; visit_end() and
        post_visit() are still called, so enter/exit callbacks stay balanced.
        Nothing at all is called past pre_visit() when it returns False.
        """
        if element_name is None:
            element_name = self.type_name()
        if visitor.pre_visit(self):
            visitor.visit_start(element_name, element_index, self)
            if visitor.visit(element_name, element_index, self):
                for spec in element_specs(type(self)):
                    _accept_element(getattr(self, spec.name), spec, visitor)
            visitor.visit_end(element_name, element_index, self)
            visitor.post_visit(self)


def choice_element_name(element_name: str, element_type: type) -> str:
    """occurrence + DateTime -> occurrenceDateTime"""
    return element_name + element_type.__name__


def _accept_element(value: Any, spec: ElementSpec, visitor: Visitor) -> None:
    if value is None:
        return
    if spec.is_repeating:
        if not value:
            return
        visitor.visit_start_list(spec.element_name, value, spec.element_type)
        for index, item in enumerate(value):
            _accept_value(item, spec.element_name, visitor, index)
        visitor.visit_end_list(spec.element_name, value, spec.element_type)
    elif spec.is_choice:
        _accept_value(value, choice_element_name(spec.element_name, type(value)), visitor)
    else:
        _accept_value(value, spec.element_name, visitor)


def _accept_value(value: Any, element_name: str, visitor: Visitor, element_index: int = -1) -> None:
    if isinstance(value, ModelObject):
        value.accept(visitor, element_name, element_index)
    else:
        visitor.visit_value(element_name, value)
