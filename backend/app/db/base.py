"""SQLAlchemy metadata registry import for Alembic."""

from app.models import Provider, ProviderType
from app.models.base import Base

__all__ = ["Base", "Provider", "ProviderType"]
