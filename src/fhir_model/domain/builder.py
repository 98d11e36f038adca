"""Mutable accumulator producing immutable model objects."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from fhir_model.domain.base import ElementSpec, ModelObject

M = TypeVar("M", bound="ModelObject")


class Builder(Generic[M]):
    """Fluent builder for one model class.

    Every element of the model class is exposed as a chainable setter named
    after the element:

        report = (
            DiagnosticReport.builder(status="final", code=code)
            .subject(patient_ref)
            .result(first_ref, second_ref)
            .build()
        )

    Setter semantics:
    - Singular elements overwrite the previous value.
    - Repeated elements always append, whether given variadic values
      (result(a, b)) or a single list/tuple (result([a, b])). Use
      clear(name) to drop accumulated entries.

    All validation is deferred to build(), which re-validates on every call
    and leaves the builder untouched when it fails. A builder is meant to be
    confined to a single thread.
    """

    def __init__(self, model_class: type[M], **values: Any) -> None:
        self._model_class = model_class
        self._specs: dict[str, ElementSpec] = {
            spec.name: spec for spec in model_class.element_specs()
        }
        self._values: dict[str, Any] = {
            name: [] if spec.is_repeating else None for name, spec in self._specs.items()
        }
        for name, value in values.items():
            if self._spec(name).is_repeating:
                if value is None:
                    self.clear(name)
                else:
                    self.add(name, value)
            else:
                self.set(name, value)

    @classmethod
    def from_model(cls, obj: M) -> Builder[M]:
        """Return a builder pre-populated with every element of obj."""
        builder = cls(type(obj))
        for spec in obj.element_specs():
            value = getattr(obj, spec.name)
            if spec.is_repeating:
                builder._values[spec.name].extend(value)
            else:
                builder._values[spec.name] = value
        return builder

    @property
    def model_class(self) -> type[M]:
        return self._model_class

    def _spec(self, name: str) -> ElementSpec:
        try:
            return self._specs[name]
        except KeyError:
            raise AttributeError(
                f"{self._model_class.__qualname__} has no element '{name}'"
            ) from None

    def __getattr__(self, name: str) -> Callable[..., Builder[M]]:
        if name.startswith("_"):
            raise AttributeError(name)
        spec = self._spec(name)

        if spec.is_repeating:

            def setter(*values: Any) -> Builder[M]:
                return self.add(name, *values)

        else:

            def setter(value: Any) -> Builder[M]:
                return self.set(name, value)

        setter.__name__ = name
        return setter

    def set(self, name: str, value: Any) -> Builder[M]:
        """Overwrite a singular element."""
        if self._spec(name).is_repeating:
            raise AttributeError(f"Element '{name}' is repeating; use add() or clear()")
        self._values[name] = value
        return self

    def add(self, name: str, *values: Any) -> Builder[M]:
        """Append entries to a repeated element.

        A single list or tuple argument is treated as the sequence of entries
        to append.
        """
        if not self._spec(name).is_repeating:
            raise AttributeError(f"Element '{name}' is singular; use set()")
        if len(values) == 1 and isinstance(values[0], list | tuple):
            values = tuple(values[0])
        self._values[name].extend(values)
        return self

    def clear(self, name: str) -> Builder[M]:
        """Reset an element to absent (None or an empty sequence)."""
        self._values[name] = [] if self._spec(name).is_repeating else None
        return self

    def build(self) -> M:
        """Construct the immutable model object.

        Raises:
            ValidationError: If the accumulated values break any element rule.
        """
        values = {
            name: tuple(value) if isinstance(value, list) else value
            for name, value in self._values.items()
        }
        return self._model_class(**values)
