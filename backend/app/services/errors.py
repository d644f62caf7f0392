"""Domain errors raised by provider services and mapped to HTTP by routers."""

from __future__ import annotations

from app.schema.attribute_schema import AttributeIssue


class ProviderRegistryError(Exception):
    """Base class for expected provider registry failures."""


class ProviderTypeNameTakenError(ProviderRegistryError):
    """A provider type with the same slug already exists."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Provider type '{name}' already exists")
        self.name = name


class ProviderTypeInUseError(ProviderRegistryError):
    """A provider type still referenced by providers cannot be deleted."""

    def __init__(self, provider_type_id: int, provider_count: int) -> None:
        super().__init__(
            f"Cannot delete provider type with {provider_count} associated providers"
        )
        self.provider_type_id = provider_type_id
        self.provider_count = provider_count


class UnknownProviderTypeError(ProviderRegistryError):
    """A provider references a provider type that does not exist."""

    def __init__(self, provider_type_id: int) -> None:
        super().__init__(f"Provider type {provider_type_id} not found")
        self.provider_type_id = provider_type_id


class AttributeBagError(ProviderRegistryError):
    """A provider attribute bag violates its type schema."""

    def __init__(self, issues: list[AttributeIssue]) -> None:
        super().__init__("; ".join(f"{issue.path} {issue.message}" for issue in issues))
        self.issues = issues
