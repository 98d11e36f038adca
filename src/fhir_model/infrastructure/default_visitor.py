from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fhir_model.application.ports import Visitor
from fhir_model.domain.base import ModelObject, snake_case

if TYPE_CHECKING:
    from collections.abc import Callable

# Port callbacks; a model type whose snake name collides with one of these
# is never dispatched to it.
_HOOKS = frozenset(
    {
        "visit_start",
        "visit_end",
        "visit_start_list",
        "visit_end_list",
        "visit_value",
    }
)


class DefaultVisitor(Visitor):
    """Visitor with no-op callbacks and type-directed dispatch.

    visit() looks for a handler named after the node's type, walking the
    MRO from the most specific class up to ModelObject:

        ChargeItem.Performer -> visit_charge_item_performer
        ChargeItem           -> visit_charge_item, visit_domain_resource, ...
        String               -> visit_string, visit_primitive_type, visit_element

    The first handler found is called with (element_name, element_index, obj)
    and its return value decides whether children are visited. Without a
    handler, visit() returns visit_children.

    Implementation notes:
    - Handler lookup is cached per node type on the instance
    - NOT thread-safe; use one visitor per traversal
    """

    def __init__(self, visit_children: bool = True) -> None:
        self.visit_children = visit_children
        self._handlers: dict[type, Callable[[str, int, Any], bool] | None] = {}

    def pre_visit(self, obj: ModelObject) -> bool:
        return True

    def post_visit(self, obj: ModelObject) -> None:
        pass

    def visit_start(self, element_name: str, element_index: int, obj: ModelObject) -> None:
        pass

    def visit_end(self, element_name: str, element_index: int, obj: ModelObject) -> None:
        pass

    def visit(self, element_name: str, element_index: int, obj: ModelObject) -> bool:
        handler = self._handler(type(obj))
        if handler is None:
            return self.visit_children
        return handler(element_name, element_index, obj)

    def visit_start_list(
        self, element_name: str, values: tuple[Any, ...], element_type: type
    ) -> None:
        pass

    def visit_end_list(
        self, element_name: str, values: tuple[Any, ...], element_type: type
    ) -> None:
        pass

    def visit_value(self, element_name: str, value: Any) -> None:
        pass

    def _handler(self, node_type: type) -> Callable[[str, int, Any], bool] | None:
        if node_type in self._handlers:
            return self._handlers[node_type]
        handler = None
        for cls in node_type.__mro__:
            if not issubclass(cls, ModelObject):
                continue
            name = f"visit_{snake_case(cls.__qualname__)}"
            if name not in _HOOKS and (handler := getattr(self, name, None)) is not None:
                break
        self._handlers[node_type] = handler
        return handler
