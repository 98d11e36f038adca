from __future__ import annotations

from typing import Generic, TypeVar

from fhir_model.domain.base import ModelObject
from fhir_model.infrastructure.default_visitor import DefaultVisitor

T = TypeVar("T", bound=ModelObject)


class CollectingVisitor(DefaultVisitor, Generic[T]):
    """Collect every visited node that is an instance of a given type.

    Nodes are gathered in depth-first order, the root included:

        visitor = CollectingVisitor(Reference)
        charge_item.accept(visitor)
        visitor.result  # (subject, performer actor, ...)
    """

    def __init__(self, node_type: type[T], visit_children: bool = True) -> None:
        super().__init__(visit_children)
        self.node_type = node_type
        self._collected: list[T] = []

    @property
    def result(self) -> tuple[T, ...]:
        return tuple(self._collected)

    def visit(self, element_name: str, element_index: int, obj: ModelObject) -> bool:
        if isinstance(obj, self.node_type):
            self._collected.append(obj)
        return super().visit(element_name, element_index, obj)
