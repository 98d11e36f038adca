"""Immutable, validated FHIR R4 model objects.

    from fhir_model import ChargeItem, ChargeItemStatus, Reference, String

    charge_item = (
        ChargeItem.builder()
        .status(ChargeItemStatus.BILLABLE)
        .code(code)
        .subject(Reference.builder().reference(String.of("Patient/123")).build())
        .build()
    )
"""

from fhir_model.application.ports import Visitor
from fhir_model.config import ModelConfig, get_config, reset_config, set_config
from fhir_model.domain.base import ModelObject
from fhir_model.domain.builder import Builder
from fhir_model.domain.exceptions import (
    EmptyElementError,
    InvalidChoiceTypeError,
    InvalidElementTypeError,
    InvalidReferenceTypeError,
    InvalidValueError,
    MissingRequiredElementError,
    ModelException,
    ProhibitedElementError,
    ValidationError,
)
from fhir_model.domain.resource_type import ResourceType
from fhir_model.domain.resources import (
    ChargeItem,
    CommunicationRequest,
    DiagnosticReport,
    DomainResource,
    Resource,
)
from fhir_model.domain.types import (
    Annotation,
    Attachment,
    BackboneElement,
    Boolean,
    Canonical,
    ChargeItemStatus,
    Code,
    CodeableConcept,
    Coding,
    Date,
    DateTime,
    Decimal,
    DiagnosticReportStatus,
    Element,
    Extension,
    Id,
    Identifier,
    IdentifierUse,
    Instant,
    Integer,
    Markdown,
    Meta,
    Money,
    Narrative,
    NarrativeStatus,
    Period,
    PositiveInt,
    Quantity,
    QuantityComparator,
    Reference,
    RequestPriority,
    RequestStatus,
    String,
    Timing,
    UnsignedInt,
    Uri,
    Url,
)
from fhir_model.infrastructure import CollectingVisitor, DefaultVisitor, PathAwareVisitor

__all__ = [
    "Annotation",
    "Attachment",
    "BackboneElement",
    "Boolean",
    "Builder",
    "Canonical",
    "ChargeItem",
    "ChargeItemStatus",
    "Code",
    "CodeableConcept",
    "Coding",
    "CollectingVisitor",
    "CommunicationRequest",
    "Date",
    "DateTime",
    "Decimal",
    "DefaultVisitor",
    "DiagnosticReport",
    "DiagnosticReportStatus",
    "DomainResource",
    "Element",
    "EmptyElementError",
    "Extension",
    "Id",
    "Identifier",
    "IdentifierUse",
    "Instant",
    "Integer",
    "InvalidChoiceTypeError",
    "InvalidElementTypeError",
    "InvalidReferenceTypeError",
    "InvalidValueError",
    "Markdown",
    "Meta",
    "MissingRequiredElementError",
    "ModelConfig",
    "ModelException",
    "ModelObject",
    "Money",
    "Narrative",
    "NarrativeStatus",
    "PathAwareVisitor",
    "Period",
    "PositiveInt",
    "ProhibitedElementError",
    "Quantity",
    "QuantityComparator",
    "Reference",
    "RequestPriority",
    "RequestStatus",
    "Resource",
    "ResourceType",
    "String",
    "Timing",
    "UnsignedInt",
    "Uri",
    "Url",
    "ValidationError",
    "Visitor",
    "get_config",
    "reset_config",
    "set_config",
]
