"""Resources - Top-level records exchanged between systems."""

from fhir_model.domain.resources.charge_item import ChargeItem
from fhir_model.domain.resources.communication_request import CommunicationRequest
from fhir_model.domain.resources.diagnostic_report import DiagnosticReport
from fhir_model.domain.resources.resource import DomainResource, Resource

__all__ = [
    "ChargeItem",
    "CommunicationRequest",
    "DiagnosticReport",
    "DomainResource",
    "Resource",
]
