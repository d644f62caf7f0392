"""Provider ORM model."""

from typing import TYPE_CHECKING, Any

from sqlalchemy import JSON, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, IdMixin, TimestampMixin

if TYPE_CHECKING:
    from app.models.provider_type import ProviderType


class Provider(Base, IdMixin, TimestampMixin):
    """Supplier with fixed contact fields and a type-dependent attribute bag."""

    __tablename__ = "providers"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(64), nullable=True)
    address: Mapped[str | None] = mapped_column(String(512), nullable=True)
    provider_type_id: Mapped[int] = mapped_column(
        ForeignKey("provider_types.id", ondelete="RESTRICT"),
        index=True,
        nullable=False,
    )
    attributes_json: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict, nullable=False)
    status: Mapped[str] = mapped_column(String(16), default="active", index=True, nullable=False)

    provider_type: Mapped["ProviderType"] = relationship(
        back_populates="providers",
        lazy="joined",
    )
