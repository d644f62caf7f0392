"""Free-text search across fixed provider fields and attribute values."""

from __future__ import annotations

from collections.abc import Iterable

from app.query.values import AttributeKind, AttributeValue, classify_attributes
from app.schemas.provider import ProviderRead

SEARCHABLE_FIELDS: tuple[str, ...] = ("name", "email", "address", "phone")


def normalize_search_term(term: str | None) -> str:
    """Case-fold a search term. Only an empty term disables the scan; whitespace is significant."""

    return (term or "").casefold()


def provider_matches_search(provider: ProviderRead, term: str) -> bool:
    """Substring match on fixed fields first, then on every attribute value.

    ``term`` must already be normalized.
    """

    for field_name in SEARCHABLE_FIELDS:
        text = getattr(provider, field_name, None)
        if isinstance(text, str) and term in text.casefold():
            return True
    return any(
        _value_contains(value, term) for value in classify_attributes(provider.attributes).values()
    )


def filter_by_search(providers: Iterable[ProviderRead], term: str) -> list[ProviderRead]:
    """Stable filter keeping providers that contain ``term``; no-op for an empty term."""

    if not term:
        return list(providers)
    return [provider for provider in providers if provider_matches_search(provider, term)]


def _value_contains(value: AttributeValue, term: str) -> bool:
    if value.kind is AttributeKind.ARRAY:
        return any(_value_contains(item, term) for item in value.items)
    text = value.as_text()
    return text is not None and term in text.casefold()
