"""Provider CRUD and listing services."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.provider import Provider
from app.query.engine import ProviderQuery, run_provider_query
from app.schema.attribute_schema import validate_attribute_bag
from app.schemas.provider import ProviderCreate, ProviderListingResponse, ProviderRead, ProviderUpdate
from app.services.errors import AttributeBagError, UnknownProviderTypeError
from app.services.provider_store import SqlAlchemyProviderStore

logger = logging.getLogger(__name__)


def list_providers(db: Session, query: ProviderQuery) -> ProviderListingResponse:
    """Run the provider query engine against the database."""

    return run_provider_query(SqlAlchemyProviderStore(db), query)


def get_provider(db: Session, provider_id: int) -> ProviderRead | None:
    """Return one provider with its type, or ``None``."""

    return SqlAlchemyProviderStore(db).fetch_provider(provider_id)


def create_provider(db: Session, payload: ProviderCreate) -> ProviderRead:
    """Create a provider after checking its attribute bag against the type schema."""

    store = SqlAlchemyProviderStore(db)
    _check_attributes(store, payload.provider_type_id, payload.attributes)

    provider = Provider(
        name=payload.name.strip(),
        email=str(payload.email),
        phone=_clean_optional(payload.phone),
        address=_clean_optional(payload.address),
        provider_type_id=payload.provider_type_id,
        attributes_json=dict(payload.attributes),
        status=payload.status,
    )
    db.add(provider)
    _commit_provider(db, payload.provider_type_id)
    db.refresh(provider)
    logger.info(
        "provider.created id=%d provider_type_id=%d",
        provider.id,
        provider.provider_type_id,
    )
    return ProviderRead.model_validate(provider)


def update_provider(db: Session, provider_id: int, payload: ProviderUpdate) -> ProviderRead | None:
    """Apply a partial update. Explicit nulls clear ``phone`` and ``address``."""

    provider = db.get(Provider, provider_id)
    if provider is None:
        return None

    fields = payload.model_fields_set
    provider_type_id = payload.provider_type_id or provider.provider_type_id
    attributes = payload.attributes if payload.attributes is not None else provider.attributes_json
    if "provider_type_id" in fields or "attributes" in fields:
        _check_attributes(
            SqlAlchemyProviderStore(db),
            provider_type_id,
            attributes if isinstance(attributes, dict) else {},
        )

    if payload.name is not None:
        provider.name = payload.name.strip()
    if payload.email is not None:
        provider.email = str(payload.email)
    if "phone" in fields:
        provider.phone = _clean_optional(payload.phone)
    if "address" in fields:
        provider.address = _clean_optional(payload.address)
    if payload.provider_type_id is not None:
        provider.provider_type_id = payload.provider_type_id
    if payload.attributes is not None:
        provider.attributes_json = dict(payload.attributes)
    if payload.status is not None:
        provider.status = payload.status

    _commit_provider(db, provider_type_id)
    db.refresh(provider)
    return ProviderRead.model_validate(provider)


def delete_provider(db: Session, provider_id: int) -> bool:
    """Delete one provider."""

    provider = db.get(Provider, provider_id)
    if provider is None:
        return False
    db.delete(provider)
    db.commit()
    logger.info("provider.deleted id=%d", provider_id)
    return True


def _check_attributes(
    store: SqlAlchemyProviderStore,
    provider_type_id: int,
    attributes: dict[str, Any],
) -> None:
    provider_type = store.fetch_provider_type(provider_type_id)
    if provider_type is None:
        raise UnknownProviderTypeError(provider_type_id)
    issues = validate_attribute_bag(provider_type.attribute_schema, attributes)
    if issues:
        raise AttributeBagError(issues)


def _commit_provider(db: Session, provider_type_id: int) -> None:
    try:
        db.commit()
    except IntegrityError as exc:
        # The provider type was deleted between the schema check and the commit.
        db.rollback()
        raise UnknownProviderTypeError(provider_type_id) from exc


def _clean_optional(value: str | None) -> str | None:
    if value is None:
        return None
    clean = value.strip()
    return clean or None
