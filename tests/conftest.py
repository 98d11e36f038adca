"""Shared pytest fixtures for the test suite."""

from collections.abc import Iterator
from datetime import UTC, datetime

import pytest

from fhir_model.config import reset_config
from fhir_model.domain.types import (
    Code,
    CodeableConcept,
    Coding,
    Identifier,
    Reference,
    String,
    Uri,
)


@pytest.fixture(autouse=True)
def _fresh_config() -> Iterator[None]:
    """Every test starts from the environment-derived configuration."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def fixed_time() -> datetime:
    """A fixed timestamp for deterministic testing."""
    return datetime(2024, 1, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def patient_reference() -> Reference:
    return Reference.builder().reference(String.of("Patient/123")).build()


@pytest.fixture
def practitioner_reference() -> Reference:
    return Reference.builder().reference(String.of("Practitioner/456")).build()


@pytest.fixture
def code() -> CodeableConcept:
    """A SNOMED CT coded concept."""
    return CodeableConcept(
        coding=(
            Coding(
                system=Uri.of("http://snomed.info/sct"),
                code=Code.of("386053000"),
                display=String.of("Evaluation procedure"),
            ),
        ),
        text=String.of("Evaluation procedure"),
    )


@pytest.fixture
def first_identifier() -> Identifier:
    return Identifier(system=Uri.of("http://example.org/charges"), value=String.of("c-1"))


@pytest.fixture
def second_identifier() -> Identifier:
    return Identifier(system=Uri.of("http://example.org/charges"), value=String.of("c-2"))
