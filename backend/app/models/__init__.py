"""ORM models package exports."""

from app.models.provider import Provider
from app.models.provider_type import ProviderType

__all__ = [
    "Provider",
    "ProviderType",
]
