"""CommunicationRequest resource.

A request to convey information; e.g. the CDS system proposes that an alert
be sent to a responsible provider.
"""

from __future__ import annotations

from fhir_model.domain.base import choice, model, optional, repeated, required
from fhir_model.domain.resources.resource import DomainResource
from fhir_model.domain.types import (
    Annotation,
    Attachment,
    BackboneElement,
    Boolean,
    CodeableConcept,
    DateTime,
    Identifier,
    Period,
    Reference,
    RequestPriority,
    RequestStatus,
    String,
)


@model
class CommunicationRequest(DomainResource):
    @model
    class Payload(BackboneElement):
        """Text, attachment(s), or resource(s) to be communicated."""

        content: String | Attachment | Reference = choice(
            String, Attachment, Reference, required=True
        )

    identifier: tuple[Identifier, ...] = repeated(Identifier)
    based_on: tuple[Reference, ...] = repeated(Reference)
    replaces: tuple[Reference, ...] = repeated(Reference, targets=("CommunicationRequest",))
    group_identifier: Identifier | None = optional(Identifier)
    status: RequestStatus = required(RequestStatus)
    status_reason: CodeableConcept | None = optional(CodeableConcept)
    category: tuple[CodeableConcept, ...] = repeated(CodeableConcept)
    priority: RequestPriority | None = optional(RequestPriority)
    do_not_perform: Boolean | None = optional(Boolean)
    medium: tuple[CodeableConcept, ...] = repeated(CodeableConcept)
    subject: Reference | None = optional(Reference, targets=("Patient", "Group"))
    about: tuple[Reference, ...] = repeated(Reference)
    encounter: Reference | None = optional(Reference, targets=("Encounter",))
    payload: tuple[Payload, ...] = repeated(Payload)
    occurrence: DateTime | Period | None = choice(DateTime, Period)
    authored_on: DateTime | None = optional(DateTime)
    requester: Reference | None = optional(
        Reference,
        targets=(
            "Practitioner",
            "PractitionerRole",
            "Organization",
            "Patient",
            "RelatedPerson",
            "Device",
        ),
    )
    recipient: tuple[Reference, ...] = repeated(
        Reference,
        targets=(
            "Device",
            "Organization",
            "Patient",
            "Practitioner",
            "PractitionerRole",
            "RelatedPerson",
            "Group",
            "CareTeam",
            "HealthcareService",
        ),
    )
    sender: Reference | None = optional(
        Reference,
        targets=(
            "Device",
            "Organization",
            "Patient",
            "Practitioner",
            "PractitionerRole",
            "RelatedPerson",
            "HealthcareService",
        ),
    )
    reason_code: tuple[CodeableConcept, ...] = repeated(CodeableConcept)
    reason_reference: tuple[Reference, ...] = repeated(
        Reference,
        targets=("Condition", "Observation", "DiagnosticReport", "DocumentReference"),
    )
    note: tuple[Annotation, ...] = repeated(Annotation)
