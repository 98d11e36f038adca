from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from fhir_model.domain.base import ModelObject


class Visitor(ABC):
    """Port for depth-first traversal of a model object graph.

    Contract:
    - pre_visit() is called first for every model object; returning False
      skips that object entirely (no further callbacks for it)
    - visit_start() and visit_end() always come in pairs once pre_visit()
      returned True, and so do pre_visit() and post_visit()
    - visit() returning False skips the children but not visit_end()
    - Repeated elements are bracketed by visit_start_list() and
      visit_end_list(); empty sequences produce no callbacks
    - Values that are not model objects (codes, ids, urls, the value of a
      primitive) are reported through visit_value()
    - Children are visited in element declaration order; choice elements
      are named with their type suffix (e.g. occurrenceDateTime)

    Usage:
        charge_item.accept(visitor)
        # visitor.pre_visit(charge_item) -> visit_start("ChargeItem", -1, ...) -> ...
    """

    @abstractmethod
    def pre_visit(self, obj: ModelObject) -> bool:
        """Return False to skip this object and its whole subtree."""

    @abstractmethod
    def post_visit(self, obj: ModelObject) -> None:
        """Called after the object and its children have been visited."""

    @abstractmethod
    def visit_start(self, element_name: str, element_index: int, obj: ModelObject) -> None:
        """Entering an element.

        Args:
            element_name: Element name in the parent, or the type name at the root.
            element_index: Position within a repeated element, -1 otherwise.
            obj: The model object being entered.
        """

    @abstractmethod
    def visit_end(self, element_name: str, element_index: int, obj: ModelObject) -> None:
        """Leaving an element; mirrors visit_start()."""

    @abstractmethod
    def visit(self, element_name: str, element_index: int, obj: ModelObject) -> bool:
        """Handle the object; return True to descend into its children."""

    @abstractmethod
    def visit_start_list(
        self, element_name: str, values: tuple[Any, ...], element_type: type
    ) -> None:
        """Entering a non-empty repeated element."""

    @abstractmethod
    def visit_end_list(
        self, element_name: str, values: tuple[Any, ...], element_type: type
    ) -> None:
        """Leaving a repeated element; mirrors visit_start_list()."""

    @abstractmethod
    def visit_value(self, element_name: str, value: Any) -> None:
        """A leaf value that is not a model object."""
