"""ChargeItem resource.

The provision of healthcare related goods or services that has been billed
or is to be billed, recorded so that it can be collected into an Account or
Invoice.
"""

from __future__ import annotations

from fhir_model.domain.base import choice, model, optional, repeated, required
from fhir_model.domain.resources.resource import DomainResource
from fhir_model.domain.types import (
    Annotation,
    BackboneElement,
    Canonical,
    ChargeItemStatus,
    CodeableConcept,
    DateTime,
    Decimal,
    Identifier,
    Money,
    Period,
    Quantity,
    Reference,
    String,
    Timing,
    Uri,
)

PERFORMER_TARGETS = (
    "Practitioner",
    "PractitionerRole",
    "Organization",
    "CareTeam",
    "Patient",
    "Device",
    "RelatedPerson",
)


@model
class ChargeItem(DomainResource):
    @model
    class Performer(BackboneElement):
        """Who performed or participated in the charged service."""

        function: CodeableConcept | None = optional(CodeableConcept)
        actor: Reference = required(Reference, targets=PERFORMER_TARGETS)

    identifier: tuple[Identifier, ...] = repeated(Identifier)
    definition_uri: tuple[Uri, ...] = repeated(Uri)
    definition_canonical: tuple[Canonical, ...] = repeated(Canonical)
    status: ChargeItemStatus = required(ChargeItemStatus)
    part_of: tuple[Reference, ...] = repeated(Reference, targets=("ChargeItem",))
    code: CodeableConcept = required(CodeableConcept)
    subject: Reference = required(Reference, targets=("Patient", "Group"))
    context: Reference | None = optional(Reference, targets=("Encounter", "EpisodeOfCare"))
    occurrence: DateTime | Period | Timing | None = choice(DateTime, Period, Timing)
    performer: tuple[Performer, ...] = repeated(Performer)
    performing_organization: Reference | None = optional(Reference, targets=("Organization",))
    requesting_organization: Reference | None = optional(Reference, targets=("Organization",))
    cost_center: Reference | None = optional(Reference, targets=("Organization",))
    quantity: Quantity | None = optional(Quantity)
    bodysite: tuple[CodeableConcept, ...] = repeated(CodeableConcept)
    factor_override: Decimal | None = optional(Decimal)
    price_override: Money | None = optional(Money)
    override_reason: String | None = optional(String)
    enterer: Reference | None = optional(
        Reference,
        targets=(
            "Practitioner",
            "PractitionerRole",
            "Organization",
            "Patient",
            "Device",
            "RelatedPerson",
        ),
    )
    entered_date: DateTime | None = optional(DateTime)
    reason: tuple[CodeableConcept, ...] = repeated(CodeableConcept)
    service: tuple[Reference, ...] = repeated(
        Reference,
        targets=(
            "DiagnosticReport",
            "ImagingStudy",
            "Immunization",
            "MedicationAdministration",
            "MedicationDispense",
            "Observation",
            "Procedure",
            "SupplyDelivery",
        ),
    )
    product: Reference | CodeableConcept | None = choice(
        Reference, CodeableConcept, targets=("Device", "Medication", "Substance")
    )
    account: tuple[Reference, ...] = repeated(Reference, targets=("Account",))
    note: tuple[Annotation, ...] = repeated(Annotation)
    supporting_information: tuple[Reference, ...] = repeated(Reference)
