"""Common API response schemas."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Consistent JSON envelope for API responses."""

    data: T


class ErrorResponse(BaseModel):
    """Body of error responses raised outside FastAPI's own validation."""

    detail: str


STORE_UNAVAILABLE_RESPONSES: dict[int | str, dict[str, object]] = {
    503: {"model": ErrorResponse, "description": "Provider store unavailable"},
}
