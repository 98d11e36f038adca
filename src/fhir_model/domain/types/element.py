from __future__ import annotations

from typing import TYPE_CHECKING

from fhir_model.domain import validation
from fhir_model.domain.base import ModelObject, model, optional, repeated

if TYPE_CHECKING:
    from fhir_model.domain.types.complex import Extension


@model
class Element(ModelObject):
    """Base for every data type and backbone element.

    Elements enforce ele-1: they must carry a value or at least one child.
    """

    id: str | None = optional(str)
    extension: tuple[Extension, ...] = repeated("Extension")

    def _validate(self) -> None:
        validation.check_string(self.id)
        validation.require_value_or_children(self)


@model
class BackboneElement(Element):
    """Base for elements nested inside a single resource definition."""

    modifier_extension: tuple[Extension, ...] = repeated("Extension")
