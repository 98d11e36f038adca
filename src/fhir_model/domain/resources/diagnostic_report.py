"""DiagnosticReport resource.

The findings and interpretation of diagnostic tests performed on patients,
groups of patients, devices, and locations, and/or specimens derived from
these.
"""

from __future__ import annotations

from fhir_model.domain.base import choice, model, optional, repeated, required
from fhir_model.domain.resources.resource import DomainResource
from fhir_model.domain.types import (
    Attachment,
    BackboneElement,
    CodeableConcept,
    DateTime,
    DiagnosticReportStatus,
    Identifier,
    Instant,
    Period,
    Reference,
    String,
)

INTERPRETER_TARGETS = ("Practitioner", "PractitionerRole", "Organization", "CareTeam")


@model
class DiagnosticReport(DomainResource):
    @model
    class Media(BackboneElement):
        """A key image associated with the report."""

        comment: String | None = optional(String)
        link: Reference = required(Reference, targets=("Media",))

    identifier: tuple[Identifier, ...] = repeated(Identifier)
    based_on: tuple[Reference, ...] = repeated(
        Reference,
        targets=(
            "CarePlan",
            "ImmunizationRecommendation",
            "MedicationRequest",
            "NutritionOrder",
            "ServiceRequest",
        ),
    )
    status: DiagnosticReportStatus = required(DiagnosticReportStatus)
    category: tuple[CodeableConcept, ...] = repeated(CodeableConcept)
    code: CodeableConcept = required(CodeableConcept)
    subject: Reference | None = optional(
        Reference, targets=("Patient", "Group", "Device", "Location")
    )
    encounter: Reference | None = optional(Reference, targets=("Encounter",))
    effective: DateTime | Period | None = choice(DateTime, Period)
    issued: Instant | None = optional(Instant)
    performer: tuple[Reference, ...] = repeated(Reference, targets=INTERPRETER_TARGETS)
    results_interpreter: tuple[Reference, ...] = repeated(Reference, targets=INTERPRETER_TARGETS)
    specimen: tuple[Reference, ...] = repeated(Reference, targets=("Specimen",))
    result: tuple[Reference, ...] = repeated(Reference, targets=("Observation",))
    imaging_study: tuple[Reference, ...] = repeated(Reference, targets=("ImagingStudy",))
    media: tuple[Media, ...] = repeated(Media)
    conclusion: String | None = optional(String)
    conclusion_code: tuple[CodeableConcept, ...] = repeated(CodeableConcept)
    presented_form: tuple[Attachment, ...] = repeated(Attachment)
