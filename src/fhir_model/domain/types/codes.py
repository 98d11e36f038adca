"""Coded enumerations bound to required value sets.

Elements typed with one of these accept either the member or its code
string; the string is converted during construction.
"""

from __future__ import annotations

from enum import Enum


class ChargeItemStatus(Enum):
    """http://hl7.org/fhir/ValueSet/chargeitem-status"""

    PLANNED = "planned"
    BILLABLE = "billable"
    NOT_BILLABLE = "not-billable"
    ABORTED = "aborted"
    BILLED = "billed"
    ENTERED_IN_ERROR = "entered-in-error"
    UNKNOWN = "unknown"


class RequestStatus(Enum):
    """http://hl7.org/fhir/ValueSet/request-status"""

    DRAFT = "draft"
    ACTIVE = "active"
    ON_HOLD = "on-hold"
    REVOKED = "revoked"
    COMPLETED = "completed"
    ENTERED_IN_ERROR = "entered-in-error"
    UNKNOWN = "unknown"


class RequestPriority(Enum):
    """http://hl7.org/fhir/ValueSet/request-priority"""

    ROUTINE = "routine"
    URGENT = "urgent"
    ASAP = "asap"
    STAT = "stat"


class DiagnosticReportStatus(Enum):
    """http://hl7.org/fhir/ValueSet/diagnostic-report-status"""

    REGISTERED = "registered"
    PARTIAL = "partial"
    PRELIMINARY = "preliminary"
    FINAL = "final"
    AMENDED = "amended"
    CORRECTED = "corrected"
    APPENDED = "appended"
    CANCELLED = "cancelled"
    ENTERED_IN_ERROR = "entered-in-error"
    UNKNOWN = "unknown"


class IdentifierUse(Enum):
    USUAL = "usual"
    OFFICIAL = "official"
    TEMP = "temp"
    SECONDARY = "secondary"
    OLD = "old"


class QuantityComparator(Enum):
    LESS_THAN = "<"
    LESS_OR_EQUALS = "<="
    GREATER_OR_EQUALS = ">="
    GREATER_THAN = ">"


class NarrativeStatus(Enum):
    GENERATED = "generated"
    EXTENSIONS = "extensions"
    ADDITIONAL = "additional"
    EMPTY = "empty"
