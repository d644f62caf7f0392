"""Provider type CRUD services."""

from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.provider import Provider
from app.models.provider_type import ProviderType
from app.schemas.provider_type import (
    AttributeSchema,
    ProviderTypeCreate,
    ProviderTypeRead,
    ProviderTypeUpdate,
)
from app.services.errors import ProviderTypeInUseError, ProviderTypeNameTakenError

logger = logging.getLogger(__name__)


def list_provider_types(db: Session) -> list[ProviderTypeRead]:
    """List provider types, newest first."""

    stmt = select(ProviderType).order_by(ProviderType.created_at.desc(), ProviderType.id.asc())
    return [ProviderTypeRead.model_validate(row) for row in db.scalars(stmt).all()]


def get_provider_type(db: Session, provider_type_id: int) -> ProviderTypeRead | None:
    """Return one provider type or ``None``."""

    provider_type = db.get(ProviderType, provider_type_id)
    if provider_type is None:
        return None
    return ProviderTypeRead.model_validate(provider_type)


def create_provider_type(db: Session, payload: ProviderTypeCreate) -> ProviderTypeRead:
    """Register a provider type under a unique slug."""

    existing = db.scalar(select(ProviderType.id).where(ProviderType.name == payload.name))
    if existing is not None:
        raise ProviderTypeNameTakenError(payload.name)

    provider_type = ProviderType(
        name=payload.name,
        label=payload.label.strip(),
        attribute_schema_json=_dump_schema(payload.attribute_schema),
    )
    db.add(provider_type)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise ProviderTypeNameTakenError(payload.name) from exc
    db.refresh(provider_type)
    logger.info("provider_type.created id=%d name=%s", provider_type.id, provider_type.name)
    return ProviderTypeRead.model_validate(provider_type)


def update_provider_type(
    db: Session,
    provider_type_id: int,
    payload: ProviderTypeUpdate,
) -> ProviderTypeRead | None:
    """Update the label and/or attribute schema. The slug never changes."""

    provider_type = db.get(ProviderType, provider_type_id)
    if provider_type is None:
        return None
    if payload.label is not None:
        provider_type.label = payload.label.strip()
    if payload.attribute_schema is not None:
        provider_type.attribute_schema_json = _dump_schema(payload.attribute_schema)
    db.commit()
    db.refresh(provider_type)
    return ProviderTypeRead.model_validate(provider_type)


def delete_provider_type(db: Session, provider_type_id: int) -> bool:
    """Delete a provider type that no provider references."""

    provider_type = db.get(ProviderType, provider_type_id)
    if provider_type is None:
        return False

    provider_count = _count_providers(db, provider_type_id)
    if provider_count > 0:
        raise ProviderTypeInUseError(provider_type_id, provider_count)

    db.delete(provider_type)
    try:
        db.commit()
    except IntegrityError as exc:
        # A provider referencing this type was committed after the count above.
        db.rollback()
        raise ProviderTypeInUseError(provider_type_id, _count_providers(db, provider_type_id)) from exc
    logger.info("provider_type.deleted id=%d", provider_type_id)
    return True


def _count_providers(db: Session, provider_type_id: int) -> int:
    stmt = select(func.count(Provider.id)).where(Provider.provider_type_id == provider_type_id)
    return int(db.scalar(stmt) or 0)


def _dump_schema(schema: AttributeSchema) -> dict[str, object]:
    return {name: spec.model_dump(exclude_none=True) for name, spec in schema.items()}
