"""Tests for DefaultVisitor type-directed dispatch.

Tests cover:
- DefaultVisitor implements the Visitor port
- Fallback to visit_children without a handler
- Handlers found along the MRO, most specific first
- Handler return value controls descent
"""

import datetime

import pytest

from fhir_model.application.ports import Visitor
from fhir_model.domain.base import ModelObject
from fhir_model.domain.resources import ChargeItem
from fhir_model.domain.types import (
    ChargeItemStatus,
    CodeableConcept,
    DateTime,
    Reference,
    String,
)
from fhir_model.infrastructure import DefaultVisitor


@pytest.fixture
def charge_item(
    code: CodeableConcept, patient_reference: Reference, practitioner_reference: Reference
) -> ChargeItem:
    return ChargeItem(
        status=ChargeItemStatus.BILLABLE,
        code=code,
        subject=patient_reference,
        occurrence=DateTime.of(datetime.date(2024, 1, 15)),
        performer=(ChargeItem.Performer(actor=practitioner_reference),),
    )


class CountingVisitor(DefaultVisitor):
    def __init__(self, visit_children: bool = True) -> None:
        super().__init__(visit_children)
        self.elements: list[str] = []
        self.resources: list[str] = []
        self.references: list[str] = []
        self.performers = 0
        self.values: list[str] = []

    def visit_domain_resource(
        self, element_name: str, element_index: int, obj: ModelObject
    ) -> bool:
        self.resources.append(element_name)
        return True

    def visit_element(self, element_name: str, element_index: int, obj: ModelObject) -> bool:
        self.elements.append(type(obj).__name__)
        return True

    def visit_reference(self, element_name: str, element_index: int, obj: ModelObject) -> bool:
        self.references.append(element_name)
        return False

    def visit_charge_item_performer(
        self, element_name: str, element_index: int, obj: ModelObject
    ) -> bool:
        self.performers += 1
        return True

    def visit_value(self, element_name: str, value: object) -> None:
        self.values.append(element_name)


class ValueVisitor(DefaultVisitor):
    """No handlers; only records leaf values."""

    def __init__(self, visit_children: bool) -> None:
        super().__init__(visit_children)
        self.values: list[str] = []

    def visit_value(self, element_name: str, value: object) -> None:
        self.values.append(element_name)


class TestDefaultVisitorFallback:
    def test_implements_visitor_port(self) -> None:
        assert isinstance(DefaultVisitor(), Visitor)

    def test_without_handlers_returns_visit_children(self) -> None:
        assert DefaultVisitor(visit_children=True).visit("x", -1, String.of("a")) is True
        assert DefaultVisitor(visit_children=False).visit("x", -1, String.of("a")) is False

    def test_pre_visit_accepts_every_node(self, charge_item: ChargeItem) -> None:
        assert DefaultVisitor().pre_visit(charge_item) is True

    def test_visit_children_false_stops_at_root(self, charge_item: ChargeItem) -> None:
        visitor = ValueVisitor(visit_children=False)

        charge_item.accept(visitor)

        assert visitor.values == []

    def test_visit_children_true_reaches_leaves(self, charge_item: ChargeItem) -> None:
        visitor = ValueVisitor(visit_children=True)

        charge_item.accept(visitor)

        assert "status" in visitor.values
        assert "value" in visitor.values


class TestDefaultVisitorDispatch:
    def test_resource_handled_by_base_class_handler(self, charge_item: ChargeItem) -> None:
        visitor = CountingVisitor()

        charge_item.accept(visitor)

        assert visitor.resources == ["ChargeItem"]

    def test_most_specific_handler_wins(self, charge_item: ChargeItem) -> None:
        visitor = CountingVisitor()

        charge_item.accept(visitor)

        assert visitor.references == ["subject", "actor"]
        assert "Reference" not in visitor.elements
        assert visitor.performers == 1
        assert "Performer" not in visitor.elements

    def test_data_types_fall_back_to_element_handler(self, charge_item: ChargeItem) -> None:
        visitor = CountingVisitor()

        charge_item.accept(visitor)

        assert "CodeableConcept" in visitor.elements
        assert "DateTime" in visitor.elements

    def test_handler_returning_false_skips_children(self, charge_item: ChargeItem) -> None:
        visitor = CountingVisitor()

        charge_item.accept(visitor)

        # Only the two Strings of the code are reached, not those inside references
        assert visitor.elements.count("String") == 2

    def test_handler_lookup_is_cached(self, charge_item: ChargeItem) -> None:
        visitor = CountingVisitor()

        charge_item.accept(visitor)
        charge_item.accept(visitor)

        assert visitor.resources == ["ChargeItem", "ChargeItem"]
        assert ChargeItem in visitor._handlers
