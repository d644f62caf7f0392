"""Provider type CRUD routes."""

from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.orm import Session

from app.db.dependencies import get_db
from app.schemas.common import STORE_UNAVAILABLE_RESPONSES, ApiResponse
from app.schemas.provider_type import (
    DeleteResult,
    ProviderTypeCreate,
    ProviderTypeRead,
    ProviderTypeUpdate,
)
from app.services.errors import ProviderTypeInUseError, ProviderTypeNameTakenError
from app.services.provider_types import (
    create_provider_type,
    delete_provider_type,
    get_provider_type,
    list_provider_types,
    update_provider_type,
)

router = APIRouter(prefix="/provider-types", responses=STORE_UNAVAILABLE_RESPONSES)


@router.get("", response_model=ApiResponse[list[ProviderTypeRead]])
def get_provider_types(db: Session = Depends(get_db)) -> ApiResponse[list[ProviderTypeRead]]:
    """List provider types, newest first."""

    return ApiResponse(data=list_provider_types(db))


@router.get("/{provider_type_id}", response_model=ApiResponse[ProviderTypeRead])
def get_provider_type_view(
    provider_type_id: int = Path(..., ge=1),
    db: Session = Depends(get_db),
) -> ApiResponse[ProviderTypeRead]:
    """Return one provider type with its attribute schema."""

    provider_type = get_provider_type(db, provider_type_id)
    if provider_type is None:
        raise HTTPException(status_code=404, detail="Provider type not found")
    return ApiResponse(data=provider_type)


@router.post("", response_model=ApiResponse[ProviderTypeRead], status_code=201)
def post_provider_type(
    payload: ProviderTypeCreate,
    db: Session = Depends(get_db),
) -> ApiResponse[ProviderTypeRead]:
    """Register a provider type."""

    try:
        created = create_provider_type(db, payload)
    except ProviderTypeNameTakenError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return ApiResponse(data=created)


@router.patch("/{provider_type_id}", response_model=ApiResponse[ProviderTypeRead])
def patch_provider_type(
    payload: ProviderTypeUpdate,
    provider_type_id: int = Path(..., ge=1),
    db: Session = Depends(get_db),
) -> ApiResponse[ProviderTypeRead]:
    """Edit the label or attribute schema of a provider type."""

    updated = update_provider_type(db, provider_type_id, payload)
    if updated is None:
        raise HTTPException(status_code=404, detail="Provider type not found")
    return ApiResponse(data=updated)


@router.delete("/{provider_type_id}", response_model=ApiResponse[DeleteResult])
def remove_provider_type(
    provider_type_id: int = Path(..., ge=1),
    db: Session = Depends(get_db),
) -> ApiResponse[DeleteResult]:
    """Delete a provider type that no provider uses."""

    try:
        deleted = delete_provider_type(db, provider_type_id)
    except ProviderTypeInUseError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    if not deleted:
        raise HTTPException(status_code=404, detail="Provider type not found")
    return ApiResponse(data=DeleteResult(id=provider_type_id, deleted=True))
