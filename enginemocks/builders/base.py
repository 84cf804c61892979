"""Generic fluent builder for frozen doubles."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, Self, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MockBuilder(ABC, Generic[T]):
    """Accumulates field assignments and materializes a double on build().

    Every field that was not assigned explicitly takes its catalog default.
    An explicit assignment always wins, including an explicit ``None``.

    Subclasses set ``model`` and implement ``defaults``. A builder is meant
    to be built once; assignments made after ``build()`` do not affect the
    double that was already returned.
    """

    model: type[T]

    def __init__(self) -> None:
        self._fields: dict[str, Any] = {}

    @abstractmethod
    def defaults(self) -> dict[str, Any]:
        """Return the catalog value of every field of the double."""

    def _with(self, name: str, value: Any) -> Self:
        self._fields[name] = value
        return self

    def _model(self) -> type[T]:
        return self.model

    def _prepare(self, fields: dict[str, Any]) -> dict[str, Any]:
        """Hook for derived fields; returns the constructor arguments."""
        return fields

    def build(self) -> T:
        """Create the double.

        Returns:
            A new double; defaults merged with the explicit assignments.
        """
        fields = self._prepare({**self.defaults(), **self._fields})
        entity = self._model()(**fields)
        logger.debug(
            f"Built {type(entity).__name__} {fields.get('id')!r} "
            f"({len(self._fields)} overridden fields)"
        )
        return entity
