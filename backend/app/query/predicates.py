"""Attribute filter predicates and the attribute matcher stage."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Union

from app.query.values import NULL_VALUE, AttributeKind, AttributeValue, classify_attributes
from app.schemas.provider import ProviderRead

_RANGE_KEYS = frozenset({"min", "max"})


@dataclass(frozen=True, slots=True)
class ScalarPredicate:
    """Strict equality, or membership when the candidate value is an array."""

    expected: AttributeValue

    def matches(self, actual: AttributeValue) -> bool:
        if actual.kind is AttributeKind.ARRAY:
            return any(item.strictly_equals(self.expected) for item in actual.items)
        return actual.strictly_equals(self.expected)


@dataclass(frozen=True, slots=True)
class RangePredicate:
    """Inclusive numeric range; either bound may be open."""

    min: int | float | None = None
    max: int | float | None = None

    def matches(self, actual: AttributeValue) -> bool:
        if actual.kind is not AttributeKind.NUMBER:
            return False
        value = actual.value
        if self.min is not None and not self.min <= value:  # type: ignore[operator]
            return False
        if self.max is not None and not value <= self.max:  # type: ignore[operator]
            return False
        return True


@dataclass(frozen=True, slots=True)
class UnsatisfiablePredicate:
    """Predicate built from a malformed filter value; matches nothing."""

    raw: object = None

    def matches(self, actual: AttributeValue) -> bool:
        return False


AttributePredicate = Union[ScalarPredicate, RangePredicate, UnsatisfiablePredicate]


def parse_predicate(raw: object) -> AttributePredicate:
    """Build a predicate from a decoded filter value.

    Scalars become equality predicates and ``{"min": .., "max": ..}`` objects
    become range predicates. Anything else (null, lists, objects with other
    keys or non-numeric bounds) can never match.
    """

    if isinstance(raw, Mapping):
        return _parse_range(raw)
    value = AttributeValue.of(raw)
    if value.is_scalar:
        return ScalarPredicate(value)
    return UnsatisfiablePredicate(raw)


def parse_attribute_filters(raw: Mapping[str, object] | None) -> dict[str, AttributePredicate]:
    """Parse a mapping of attribute name to filter value."""

    if not raw:
        return {}
    return {str(key): parse_predicate(value) for key, value in raw.items()}


def matches_attribute_filters(
    attributes: Mapping[str, AttributeValue],
    predicates: Mapping[str, AttributePredicate],
) -> bool:
    """True when every predicate matches its attribute. Missing keys never match."""

    return all(
        predicate.matches(attributes.get(key, NULL_VALUE))
        for key, predicate in predicates.items()
    )


def filter_by_attributes(
    providers: Iterable[ProviderRead],
    predicates: Mapping[str, AttributePredicate],
) -> list[ProviderRead]:
    """Keep providers whose attribute bag satisfies all predicates, in order."""

    if not predicates:
        return list(providers)
    return [
        provider
        for provider in providers
        if matches_attribute_filters(classify_attributes(provider.attributes), predicates)
    ]


def _parse_range(raw: Mapping[object, object]) -> AttributePredicate:
    if not set(raw) <= _RANGE_KEYS:
        return UnsatisfiablePredicate(dict(raw))
    bounds: dict[str, int | float | None] = {}
    for key in ("min", "max"):
        if key not in raw or raw[key] is None:
            bounds[key] = None
            continue
        bound = AttributeValue.of(raw[key])
        if bound.kind is not AttributeKind.NUMBER:
            return UnsatisfiablePredicate(dict(raw))
        bounds[key] = bound.value  # type: ignore[assignment]
    return RangePredicate(min=bounds["min"], max=bounds["max"])
