"""Provider type ORM model."""

from typing import TYPE_CHECKING, Any

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, IdMixin, TimestampMixin

if TYPE_CHECKING:
    from app.models.provider import Provider


class ProviderType(Base, IdMixin, TimestampMixin):
    """Named schema describing the attribute bag of its providers."""

    __tablename__ = "provider_types"

    name: Mapped[str] = mapped_column(String(50), unique=True, index=True, nullable=False)
    label: Mapped[str] = mapped_column(String(100), nullable=False)
    attribute_schema_json: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict, nullable=False)

    providers: Mapped[list["Provider"]] = relationship(
        back_populates="provider_type",
        passive_deletes=True,
    )
