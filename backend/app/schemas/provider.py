"""Provider request/response schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, EmailStr, Field, field_validator, model_validator

from app.schemas.provider_type import ProviderTypeRead

ProviderStatus = Literal["active", "inactive"]


class ProviderCreate(BaseModel):
    """Payload for registering a provider."""

    name: str = Field(min_length=2, max_length=200)
    email: EmailStr
    phone: str | None = None
    address: str | None = None
    provider_type_id: int = Field(ge=1)
    attributes: dict[str, Any] = Field(default_factory=dict)
    status: ProviderStatus = "active"


class ProviderUpdate(BaseModel):
    """Allowed mutable fields for a provider."""

    name: str | None = Field(default=None, min_length=2, max_length=200)
    email: EmailStr | None = None
    phone: str | None = None
    address: str | None = None
    provider_type_id: int | None = Field(default=None, ge=1)
    attributes: dict[str, Any] | None = None
    status: ProviderStatus | None = None

    @model_validator(mode="after")
    def validate_non_empty_update(self) -> "ProviderUpdate":
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided.")
        return self


class ProviderRead(BaseModel):
    """Serialized provider snapshot with its embedded type."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    phone: str | None
    address: str | None
    provider_type_id: int
    provider_type: ProviderTypeRead | None = None
    attributes: dict[str, Any] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("attributes", "attributes_json"),
    )
    status: ProviderStatus
    created_at: datetime
    updated_at: datetime

    @field_validator("attributes", mode="before")
    @classmethod
    def coerce_attribute_bag(cls, value: object) -> object:
        # Stored bags are not validated; anything but an object reads as empty.
        return value if isinstance(value, dict) else {}


class ProviderListingResponse(BaseModel):
    """One page of providers plus the exact filtered total."""

    items: list[ProviderRead]
    total: int
    page: int
    limit: int
