from __future__ import annotations

from fhir_model.domain.base import ModelObject
from fhir_model.infrastructure.default_visitor import DefaultVisitor


class PathAwareVisitor(DefaultVisitor):
    """DefaultVisitor that knows where in the graph it currently is.

    The path of the node being visited is available as `path` from within
    visit() and the visit_<type> handlers, e.g.:

        ChargeItem.identifier[0].system

    Subclasses overriding visit_start() or visit_end() must call super().
    """

    def __init__(self, visit_children: bool = True) -> None:
        super().__init__(visit_children)
        self._segments: list[str] = []

    @property
    def path(self) -> str:
        return ".".join(self._segments)

    def child_path(self, element_name: str) -> str:
        """Path of a leaf value reported to visit_value() under element_name."""
        return f"{self.path}.{element_name}" if self._segments else element_name

    def visit_start(self, element_name: str, element_index: int, obj: ModelObject) -> None:
        if element_index >= 0:
            element_name = f"{element_name}[{element_index}]"
        self._segments.append(element_name)

    def visit_end(self, element_name: str, element_index: int, obj: ModelObject) -> None:
        self._segments.pop()
