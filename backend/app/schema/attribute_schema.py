"""Write-path validation of provider attribute bags against their type schema."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from app.query.values import AttributeKind, AttributeValue, format_number
from app.schemas.provider_type import FieldSpec


@dataclass(frozen=True, slots=True)
class AttributeIssue:
    """One schema violation, addressed by a dotted attribute path."""

    path: str
    message: str


def validate_attribute_bag(
    schema: Mapping[str, FieldSpec],
    attributes: Mapping[str, object],
    *,
    prefix: str = "",
) -> list[AttributeIssue]:
    """Check required fields, kinds and min/max bounds. Unknown keys are allowed."""

    issues: list[AttributeIssue] = []
    for name, spec in schema.items():
        path = f"{prefix}{name}"
        raw = attributes.get(name)
        if _is_blank(raw):
            if spec.required:
                issues.append(AttributeIssue(path, "is required"))
            continue
        issues.extend(_check_value(path, spec, raw))
    return issues


def _check_value(path: str, spec: FieldSpec, raw: object) -> list[AttributeIssue]:
    if spec.kind == "object":
        if not isinstance(raw, Mapping):
            return [AttributeIssue(path, "must be an object")]
        return validate_attribute_bag(spec.properties or {}, raw, prefix=f"{path}.")

    value = AttributeValue.of(raw)
    if value.kind.value != spec.kind:
        return [AttributeIssue(path, f"must be of type {spec.kind}")]

    issues: list[AttributeIssue] = []
    if value.kind is AttributeKind.ARRAY and spec.item_kind:
        issues.extend(
            AttributeIssue(f"{path}[{index}]", f"must be of type {spec.item_kind}")
            for index, item in enumerate(value.items)
            if item.kind.value != spec.item_kind
        )

    measure, unit = _measure(value)
    if measure is None:
        return issues
    if spec.min is not None and measure < spec.min:
        issues.append(AttributeIssue(path, f"must be at least {format_number(spec.min)}{unit}"))
    if spec.max is not None and measure > spec.max:
        issues.append(AttributeIssue(path, f"must be at most {format_number(spec.max)}{unit}"))
    return issues


def _measure(value: AttributeValue) -> tuple[float | None, str]:
    if value.kind is AttributeKind.NUMBER:
        return value.value, ""  # type: ignore[return-value]
    if value.kind is AttributeKind.STRING:
        return len(value.value), " characters"  # type: ignore[arg-type]
    if value.kind is AttributeKind.ARRAY:
        return len(value.items), " items"
    return None, ""


def _is_blank(raw: object) -> bool:
    if raw is None:
        return True
    if isinstance(raw, str):
        return not raw.strip()
    if isinstance(raw, (list, tuple)):
        return not raw
    return False
