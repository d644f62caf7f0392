"""SQLAlchemy-backed store consulted by the provider query engine."""

from __future__ import annotations

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session

from app.models.provider import Provider
from app.models.provider_type import ProviderType
from app.schemas.provider import ProviderRead
from app.schemas.provider_type import ProviderTypeRead


class SqlAlchemyProviderStore:
    """Equality-filtered reads over the ``providers`` table."""

    def __init__(self, db: Session) -> None:
        self._db = db

    def fetch_providers(
        self,
        *,
        provider_type_id: int | None = None,
        status: str | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> list[ProviderRead]:
        stmt = _apply_equality_filters(select(Provider), provider_type_id, status).order_by(
            Provider.created_at.desc(),
            Provider.id.asc(),
        )
        if offset is not None:
            stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        rows = self._db.scalars(stmt).unique().all()
        return [ProviderRead.model_validate(provider) for provider in rows]

    def count_providers(
        self,
        *,
        provider_type_id: int | None = None,
        status: str | None = None,
    ) -> int:
        stmt = _apply_equality_filters(select(func.count(Provider.id)), provider_type_id, status)
        return int(self._db.scalar(stmt) or 0)

    def fetch_provider_type(self, provider_type_id: int) -> ProviderTypeRead | None:
        provider_type = self._db.get(ProviderType, provider_type_id)
        if provider_type is None:
            return None
        return ProviderTypeRead.model_validate(provider_type)

    def fetch_provider(self, provider_id: int) -> ProviderRead | None:
        provider = self._db.get(Provider, provider_id)
        if provider is None:
            return None
        return ProviderRead.model_validate(provider)


def _apply_equality_filters(stmt: Select, provider_type_id: int | None, status: str | None) -> Select:
    if provider_type_id is not None:
        stmt = stmt.where(Provider.provider_type_id == provider_type_id)
    if status is not None:
        stmt = stmt.where(Provider.status == status)
    return stmt
