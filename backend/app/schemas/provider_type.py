"""Provider type request/response schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from app.schema.type_slugs import normalize_type_slug

FieldKind = Literal["string", "number", "boolean", "array", "object"]
PrimitiveKind = Literal["string", "number", "boolean"]


class FieldSpec(BaseModel):
    """Type and constraint descriptor for one attribute of a provider type."""

    kind: FieldKind = Field(validation_alias=AliasChoices("kind", "type"))
    required: bool | None = None
    min: float | None = None
    max: float | None = None
    item_kind: PrimitiveKind | None = Field(
        default=None,
        validation_alias=AliasChoices("item_kind", "items"),
    )
    properties: dict[str, FieldSpec] | None = None

    @model_validator(mode="after")
    def validate_bounds(self) -> "FieldSpec":
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError("min must not exceed max.")
        return self


AttributeSchema = dict[str, FieldSpec]


class ProviderTypeCreate(BaseModel):
    """Payload for registering a provider type."""

    name: str = Field(min_length=2, max_length=50, pattern=r"^[a-z0-9-]+$")
    label: str = Field(min_length=2, max_length=100)
    attribute_schema: AttributeSchema = Field(default_factory=dict)

    @field_validator("name", mode="before")
    @classmethod
    def normalize_name(cls, value: object) -> object:
        return normalize_type_slug(value) if isinstance(value, str) else value


class ProviderTypeUpdate(BaseModel):
    """Allowed mutable fields for a provider type. The slug name is immutable."""

    model_config = ConfigDict(extra="forbid")

    label: str | None = Field(default=None, min_length=2, max_length=100)
    attribute_schema: AttributeSchema | None = None

    @model_validator(mode="after")
    def validate_non_empty_update(self) -> "ProviderTypeUpdate":
        if self.label is None and self.attribute_schema is None:
            raise ValueError("At least one field must be provided.")
        return self


class ProviderTypeRead(BaseModel):
    """Serialized provider type."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    label: str
    attribute_schema: AttributeSchema = Field(
        validation_alias=AliasChoices("attribute_schema", "attribute_schema_json"),
    )
    created_at: datetime
    updated_at: datetime


class DeleteResult(BaseModel):
    """Generic delete response payload."""

    id: int
    deleted: bool
