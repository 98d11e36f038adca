"""Domain layer - Immutable FHIR model objects and their rules.

This layer contains:
- Model base: Element declarations, ModelObject, the class registry
- Builder: Accumulates element values and validates on build()
- Validation: Cardinality, choice, string and reference rules
- Types: Primitive and complex data types, coded enumerations
- Resources: ChargeItem, CommunicationRequest, DiagnosticReport
- Domain Exceptions: Validation failures

The domain layer has NO dependencies on external frameworks or infrastructure.
"""
