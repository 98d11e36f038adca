"""Tests for the Resource and DomainResource bases.

Tests cover:
- Resource id rules
- Contained resources may not contain resources or carry version metadata
- Narrative and extensions on resources
"""

import datetime

import pytest

from fhir_model.domain.exceptions import InvalidValueError, ProhibitedElementError
from fhir_model.domain.resources import (
    ChargeItem,
    DiagnosticReport,
    DomainResource,
    Resource,
)
from fhir_model.domain.types import (
    Canonical,
    CodeableConcept,
    Extension,
    Id,
    Instant,
    Meta,
    Narrative,
    Reference,
    String,
)


@pytest.fixture
def report(code: CodeableConcept) -> DiagnosticReport:
    return DiagnosticReport(id="report-1", status="final", code=code)


class TestResourceId:
    def test_valid_id(self, report: DiagnosticReport) -> None:
        assert report.id == "report-1"

    def test_invalid_id_is_rejected(self, code: CodeableConcept) -> None:
        with pytest.raises(InvalidValueError):
            DiagnosticReport(id="report 1", status="final", code=code)

    def test_resources_are_domain_resources(self, report: DiagnosticReport) -> None:
        assert isinstance(report, DomainResource)
        assert isinstance(report, Resource)


class TestContainedResources:
    def test_contained_resource(
        self, code: CodeableConcept, patient_reference: Reference, report: DiagnosticReport
    ) -> None:
        charge_item = ChargeItem(
            status="billable",
            code=code,
            subject=patient_reference,
            service=(Reference(reference=String.of("#report-1")),),
            contained=(report,),
        )

        assert charge_item.contained == (report,)

    def test_nested_contained_resources_are_prohibited(
        self, code: CodeableConcept, patient_reference: Reference, report: DiagnosticReport
    ) -> None:
        outer_report = DiagnosticReport(status="final", code=code, contained=(report,))

        with pytest.raises(ProhibitedElementError, match="contained.contained"):
            ChargeItem(
                status="billable",
                code=code,
                subject=patient_reference,
                contained=(outer_report,),
            )

    def test_contained_version_id_is_prohibited(
        self, code: CodeableConcept, patient_reference: Reference
    ) -> None:
        versioned = DiagnosticReport(
            status="final", code=code, meta=Meta(version_id=Id.of("2"))
        )

        with pytest.raises(ProhibitedElementError, match="versionId"):
            ChargeItem(
                status="billable", code=code, subject=patient_reference, contained=(versioned,)
            )

    def test_contained_last_updated_is_prohibited(
        self, code: CodeableConcept, patient_reference: Reference, fixed_time: datetime.datetime
    ) -> None:
        updated = DiagnosticReport(
            status="final", code=code, meta=Meta(last_updated=Instant.of(fixed_time))
        )

        with pytest.raises(ProhibitedElementError, match="lastUpdated"):
            ChargeItem(
                status="billable", code=code, subject=patient_reference, contained=(updated,)
            )

    def test_contained_meta_profile_is_allowed(
        self, code: CodeableConcept, patient_reference: Reference
    ) -> None:
        profiled = DiagnosticReport(
            status="final",
            code=code,
            meta=Meta(profile=(Canonical.of("http://example.org/profile"),)),
        )

        charge_item = ChargeItem(
            status="billable", code=code, subject=patient_reference, contained=(profiled,)
        )

        assert charge_item.contained == (profiled,)


class TestResourceContent:
    def test_narrative_and_extension(self, code: CodeableConcept) -> None:
        narrative = Narrative(status="generated", div="<div>Full blood count</div>")
        extension = Extension(url="http://example.org/ext", value=String.of("x"))

        report = DiagnosticReport(
            status="final", code=code, text=narrative, extension=(extension,)
        )

        assert report.text == narrative
        assert report.extension == (extension,)
