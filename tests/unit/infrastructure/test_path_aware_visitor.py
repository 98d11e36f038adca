"""Tests for PathAwareVisitor."""

from typing import Any

import pytest

from fhir_model.domain.base import ModelObject
from fhir_model.domain.resources import ChargeItem
from fhir_model.domain.types import (
    ChargeItemStatus,
    CodeableConcept,
    Identifier,
    Reference,
)
from fhir_model.infrastructure import PathAwareVisitor


class PathRecorder(PathAwareVisitor):
    def __init__(self) -> None:
        super().__init__()
        self.identifier_paths: list[str] = []
        self.values: dict[str, Any] = {}

    def visit_identifier(self, element_name: str, element_index: int, obj: ModelObject) -> bool:
        self.identifier_paths.append(self.path)
        return True

    def visit_value(self, element_name: str, value: Any) -> None:
        self.values[self.child_path(element_name)] = value


@pytest.fixture
def charge_item(
    code: CodeableConcept,
    patient_reference: Reference,
    first_identifier: Identifier,
    second_identifier: Identifier,
) -> ChargeItem:
    return ChargeItem(
        identifier=(first_identifier, second_identifier),
        status=ChargeItemStatus.BILLABLE,
        code=code,
        subject=patient_reference,
    )


class TestPathAwareVisitor:
    def test_path_of_repeated_elements_includes_index(self, charge_item: ChargeItem) -> None:
        visitor = PathRecorder()

        charge_item.accept(visitor)

        assert visitor.identifier_paths == [
            "ChargeItem.identifier[0]",
            "ChargeItem.identifier[1]",
        ]

    def test_value_paths(self, charge_item: ChargeItem) -> None:
        visitor = PathRecorder()

        charge_item.accept(visitor)

        system = visitor.values["ChargeItem.identifier[0].system.value"]
        assert system == "http://example.org/charges"
        assert visitor.values["ChargeItem.identifier[1].value.value"] == "c-2"
        assert visitor.values["ChargeItem.status"] is ChargeItemStatus.BILLABLE
        assert visitor.values["ChargeItem.subject.reference.value"] == "Patient/123"
        assert visitor.values["ChargeItem.code.coding[0].code.value"] == "386053000"

    def test_path_is_empty_after_traversal(self, charge_item: ChargeItem) -> None:
        visitor = PathRecorder()

        charge_item.accept(visitor)

        assert visitor.path == ""
        assert visitor.child_path("status") == "status"
