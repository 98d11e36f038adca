"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- DefaultVisitor: Type-directed dispatch to visit_<type> handlers
- CollectingVisitor: Gathers every node of a given type
- PathAwareVisitor: Tracks the location of the current node

Infrastructure adapters implement the ports defined in the application layer.
"""

from fhir_model.infrastructure.collecting_visitor import CollectingVisitor
from fhir_model.infrastructure.default_visitor import DefaultVisitor
from fhir_model.infrastructure.path_aware_visitor import PathAwareVisitor

__all__ = [
    "CollectingVisitor",
    "DefaultVisitor",
    "PathAwareVisitor",
]
