"""Data types - Immutable elements composed into resources."""

from fhir_model.domain.types.codes import (
    ChargeItemStatus,
    DiagnosticReportStatus,
    IdentifierUse,
    NarrativeStatus,
    QuantityComparator,
    RequestPriority,
    RequestStatus,
)
from fhir_model.domain.types.complex import (
    Annotation,
    Attachment,
    CodeableConcept,
    Coding,
    Extension,
    Identifier,
    Meta,
    Money,
    Narrative,
    Period,
    Quantity,
    Reference,
    Timing,
)
from fhir_model.domain.types.element import BackboneElement, Element
from fhir_model.domain.types.primitives import (
    Boolean,
    Canonical,
    Code,
    Date,
    DateTime,
    Decimal,
    Id,
    Instant,
    Integer,
    Markdown,
    PositiveInt,
    PrimitiveType,
    String,
    UnsignedInt,
    Uri,
    Url,
)

__all__ = [
    "Annotation",
    "Attachment",
    "BackboneElement",
    "Boolean",
    "Canonical",
    "ChargeItemStatus",
    "Code",
    "CodeableConcept",
    "Coding",
    "Date",
    "DateTime",
    "Decimal",
    "DiagnosticReportStatus",
    "Element",
    "Extension",
    "Id",
    "Identifier",
    "IdentifierUse",
    "Instant",
    "Integer",
    "Markdown",
    "Meta",
    "Money",
    "Narrative",
    "NarrativeStatus",
    "Period",
    "PositiveInt",
    "PrimitiveType",
    "Quantity",
    "QuantityComparator",
    "Reference",
    "RequestPriority",
    "RequestStatus",
    "String",
    "Timing",
    "UnsignedInt",
    "Uri",
    "Url",
]
