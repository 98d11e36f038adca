"""Abstract resource bases shared by every resource definition."""

from __future__ import annotations

from fhir_model.domain import validation
from fhir_model.domain.base import ModelObject, model, optional, repeated
from fhir_model.domain.resource_type import ResourceType
from fhir_model.domain.types import Code, Extension, Meta, Narrative, Uri


@model
class Resource(ModelObject):
    """Base for all resources.

    Resources are top-level records. They refer to each other only through
    Reference elements, so an object graph never contains another resource
    except through DomainResource.contained.
    """

    id: str | None = optional(str)
    meta: Meta | None = optional(Meta)
    implicit_rules: Uri | None = optional(Uri)
    language: Code | None = optional(Code)

    def _validate(self) -> None:
        validation.check_id(self.id)

    @classmethod
    def resource_type(cls) -> ResourceType:
        return ResourceType(cls.__name__)


@model
class DomainResource(Resource):
    """A resource with narrative, extensions and contained resources."""

    text: Narrative | None = optional(Narrative)
    contained: tuple[Resource, ...] = repeated(Resource)
    extension: tuple[Extension, ...] = repeated(Extension)
    modifier_extension: tuple[Extension, ...] = repeated(Extension)

    def _validate(self) -> None:
        super()._validate()
        for resource in self.contained:
            # dom-2 / dom-4
            validation.prohibited(getattr(resource, "contained", ()), "contained.contained")
            if resource.meta is not None:
                validation.prohibited(resource.meta.version_id, "contained.meta.versionId")
                validation.prohibited(resource.meta.last_updated, "contained.meta.lastUpdated")
