"""Introspection over the element declarations of model classes.

Lets consumers (serializers, validators, indexers) ask about the shape of
the model without hard-coding it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fhir_model.domain.base import (
    ModelObject,
    choice_element_name,
    element_specs,
    model_class,
    model_classes,
)
from fhir_model.domain.resource_type import ResourceType
from fhir_model.domain.resources import Resource

if TYPE_CHECKING:
    from fhir_model.domain.base import ElementSpec


def get_model_classes() -> tuple[type[ModelObject], ...]:
    return model_classes()


def get_element_specs(cls: type[ModelObject]) -> tuple[ElementSpec, ...]:
    return element_specs(cls)


def get_element_spec(cls: type[ModelObject], element_name: str) -> ElementSpec:
    """Look up an element by its Python or FHIR name.

    Raises:
        KeyError: If the class declares no such element.
    """
    for spec in element_specs(cls):
        if element_name in (spec.name, spec.element_name):
            return spec
    raise KeyError(f"{cls.__qualname__} has no element '{element_name}'")


def get_element_names(cls: type[ModelObject]) -> tuple[str, ...]:
    """FHIR element names in declaration order."""
    return tuple(spec.element_name for spec in element_specs(cls))


def is_required_element(cls: type[ModelObject], element_name: str) -> bool:
    spec = get_element_spec(cls, element_name)
    return spec.required or spec.min_items > 0


def is_repeating_element(cls: type[ModelObject], element_name: str) -> bool:
    return get_element_spec(cls, element_name).is_repeating


def is_choice_element(cls: type[ModelObject], element_name: str) -> bool:
    return get_element_spec(cls, element_name).is_choice


def get_choice_element_types(cls: type[ModelObject], element_name: str) -> tuple[type, ...]:
    spec = get_element_spec(cls, element_name)
    return spec.types if spec.is_choice else ()


def get_choice_element_name(element_name: str, element_type: type) -> str:
    return choice_element_name(element_name, element_type)


def get_reference_target_types(cls: type[ModelObject], element_name: str) -> tuple[str, ...]:
    return get_element_spec(cls, element_name).targets


def get_type_name(cls: type[ModelObject]) -> str:
    return cls.type_name()


def is_resource_type(name: str) -> bool:
    return ResourceType.is_valid(name)


def get_resource_type(name: str) -> type[Resource]:
    """Return the model class implementing the named resource type.

    Raises:
        LookupError: If the resource type is unknown or not modelled here.
    """
    cls = model_class(name)
    if not issubclass(cls, Resource):
        raise LookupError(f"Not a resource type: {name}")
    return cls
