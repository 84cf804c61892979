"""Typed variable values.

A typed value is either a primitive value tagged with its type name or a
serialized object value carrying its data format and root type metadata.
Both are frozen so catalog entries can be shared between doubles.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

STRING = "String"
INTEGER = "Integer"
LONG = "Long"
SHORT = "Short"
DOUBLE = "Double"
BOOLEAN = "Boolean"
DATE = "Date"
BYTES = "Bytes"
NULL = "Null"
OBJECT = "Object"

PRIMITIVE_TYPE_NAMES = frozenset(
    {STRING, INTEGER, LONG, SHORT, DOUBLE, BOOLEAN, DATE, BYTES, NULL}
)


@dataclass(frozen=True)
class PrimitiveValue:
    """A value of one of the engine's primitive variable types."""

    value: Any
    type_name: str

    def __post_init__(self) -> None:
        """Validate the declared type name."""
        if self.type_name not in PRIMITIVE_TYPE_NAMES:
            raise ValueError(f"Unknown primitive type name: {self.type_name}")


@dataclass(frozen=True)
class SerializedObjectValue:
    """An opaque object value in serialized form.

    ``value`` holds the deserialized object when one is available and is
    None otherwise.
    """

    serialized_value: str | bytes | None
    serialization_data_format: str
    object_type_name: str | None
    value: Any = None
    type_name: str = OBJECT


TypedValue = PrimitiveValue | SerializedObjectValue


def string_value(value: str | None) -> PrimitiveValue:
    return PrimitiveValue(value, STRING)


def integer_value(value: int | None) -> PrimitiveValue:
    return PrimitiveValue(value, INTEGER)


def long_value(value: int | None) -> PrimitiveValue:
    return PrimitiveValue(value, LONG)


def short_value(value: int | None) -> PrimitiveValue:
    return PrimitiveValue(value, SHORT)


def double_value(value: float | None) -> PrimitiveValue:
    return PrimitiveValue(value, DOUBLE)


def boolean_value(value: bool | None) -> PrimitiveValue:
    return PrimitiveValue(value, BOOLEAN)


def date_value(value: datetime | None) -> PrimitiveValue:
    return PrimitiveValue(value, DATE)


def bytes_value(value: bytes | None) -> PrimitiveValue:
    return PrimitiveValue(value, BYTES)


def null_value() -> PrimitiveValue:
    return PrimitiveValue(None, NULL)


def serialized_object_value(
    serialized_value: str | bytes | None,
    serialization_data_format: str,
    object_type_name: str | None,
) -> SerializedObjectValue:
    """Create an object value that is only available in serialized form."""
    return SerializedObjectValue(
        serialized_value=serialized_value,
        serialization_data_format=serialization_data_format,
        object_type_name=object_type_name,
    )
