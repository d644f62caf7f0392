"""Tagged attribute values for provider attribute bags."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum


class AttributeKind(str, Enum):
    """Tag of a classified attribute value."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    NULL = "null"
    UNSUPPORTED = "unsupported"


SCALAR_KINDS = frozenset({AttributeKind.STRING, AttributeKind.NUMBER, AttributeKind.BOOLEAN})


@dataclass(frozen=True, slots=True)
class AttributeValue:
    """One attribute bag value, classified once so callers dispatch on ``kind``.

    ``value`` holds a ``str`` for strings, an ``int``/``float`` for numbers, a
    ``bool`` for booleans and a tuple of ``AttributeValue`` for arrays. Null,
    missing and unsupported values (objects, nested arrays) carry ``None``.
    """

    kind: AttributeKind
    value: object = None

    @classmethod
    def of(cls, raw: object) -> AttributeValue:
        """Classify a raw JSON-ish value."""

        if raw is None:
            return NULL_VALUE
        # bool before int: True is an int in Python but never a number here.
        if isinstance(raw, bool):
            return cls(AttributeKind.BOOLEAN, raw)
        if isinstance(raw, (int, float)):
            return cls(AttributeKind.NUMBER, raw)
        if isinstance(raw, str):
            return cls(AttributeKind.STRING, raw)
        if isinstance(raw, (list, tuple)):
            return cls(AttributeKind.ARRAY, tuple(_classify_item(item) for item in raw))
        return UNSUPPORTED_VALUE

    @property
    def is_scalar(self) -> bool:
        return self.kind in SCALAR_KINDS

    @property
    def items(self) -> tuple[AttributeValue, ...]:
        """Elements of an array value; empty for every other kind."""

        if self.kind is AttributeKind.ARRAY:
            return self.value  # type: ignore[return-value]
        return ()

    def strictly_equals(self, other: AttributeValue) -> bool:
        """Same kind and same value. Only scalars compare equal."""

        if not self.is_scalar or self.kind is not other.kind:
            return False
        return self.value == other.value

    def as_text(self) -> str | None:
        """Textual form used by free-text search, ``None`` when not searchable."""

        if self.kind is AttributeKind.STRING:
            return self.value  # type: ignore[return-value]
        if self.kind is AttributeKind.NUMBER:
            return format_number(self.value)  # type: ignore[arg-type]
        if self.kind is AttributeKind.BOOLEAN:
            return "true" if self.value else "false"
        return None


NULL_VALUE = AttributeValue(AttributeKind.NULL)
UNSUPPORTED_VALUE = AttributeValue(AttributeKind.UNSUPPORTED)


def format_number(value: int | float) -> str:
    """Decimal text of a number; integral floats drop their ``.0``."""

    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def classify_attributes(raw: object) -> dict[str, AttributeValue]:
    """Classify a whole attribute bag, keeping key order.

    Anything other than a mapping is treated as an empty bag.
    """

    if not isinstance(raw, Mapping):
        return {}
    return {str(key): AttributeValue.of(value) for key, value in raw.items()}


def _classify_item(raw: object) -> AttributeValue:
    value = AttributeValue.of(raw)
    # Arrays hold primitives only.
    if value.kind is AttributeKind.ARRAY:
        return UNSUPPORTED_VALUE
    return value
