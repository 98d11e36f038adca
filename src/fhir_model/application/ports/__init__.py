"""Ports - Abstract interfaces driven by the model.

Ports define the contracts that infrastructure adapters must implement.
This keeps ModelObject.accept() decoupled from any concrete consumer.
"""

from fhir_model.application.ports.visitor import Visitor

__all__ = [
    "Visitor",
]
