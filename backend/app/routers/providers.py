"""Provider listing and CRUD routes."""

import json
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from sqlalchemy.orm import Session

from app.config import get_settings
from app.db.dependencies import get_db
from app.query.engine import ProviderQuery
from app.schemas.common import STORE_UNAVAILABLE_RESPONSES, ApiResponse
from app.schemas.provider import (
    ProviderCreate,
    ProviderListingResponse,
    ProviderRead,
    ProviderStatus,
    ProviderUpdate,
)
from app.schemas.provider_type import DeleteResult
from app.services.errors import AttributeBagError, UnknownProviderTypeError
from app.services.providers import (
    create_provider,
    delete_provider,
    get_provider,
    list_providers,
    update_provider,
)

_settings = get_settings()

PageParam = Query(default=1, ge=1)
LimitParam = Query(default=_settings.default_page_size, ge=1, le=_settings.max_page_size)

router = APIRouter(prefix="/providers", responses=STORE_UNAVAILABLE_RESPONSES)


@router.get("", response_model=ApiResponse[ProviderListingResponse])
def get_providers(
    provider_type_id: int | None = Query(default=None, ge=1),
    status: ProviderStatus | None = Query(default=None),
    search: str | None = Query(default=None),
    attributes: str | None = Query(
        default=None,
        description='JSON object of attribute filters, e.g. {"stars": {"min": 3}, "amenities": "wifi"}',
    ),
    page: int = PageParam,
    limit: int = LimitParam,
    db: Session = Depends(get_db),
) -> ApiResponse[ProviderListingResponse]:
    """List providers filtered by type, status, attributes and free text."""

    query = ProviderQuery(
        provider_type_id=provider_type_id,
        status=status,
        search=search,
        attribute_filters=_parse_attribute_filters_param(attributes),
        page=page,
        limit=limit,
    )
    return ApiResponse(data=list_providers(db, query))


@router.get("/{provider_id}", response_model=ApiResponse[ProviderRead])
def get_provider_view(
    provider_id: int = Path(..., ge=1),
    db: Session = Depends(get_db),
) -> ApiResponse[ProviderRead]:
    """Return one provider with its type."""

    provider = get_provider(db, provider_id)
    if provider is None:
        raise HTTPException(status_code=404, detail="Provider not found")
    return ApiResponse(data=provider)


@router.post("", response_model=ApiResponse[ProviderRead], status_code=201)
def post_provider(
    payload: ProviderCreate,
    db: Session = Depends(get_db),
) -> ApiResponse[ProviderRead]:
    """Create a provider."""

    try:
        created = create_provider(db, payload)
    except UnknownProviderTypeError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except AttributeBagError as exc:
        raise HTTPException(status_code=422, detail=_issue_details(exc)) from exc
    return ApiResponse(data=created)


@router.patch("/{provider_id}", response_model=ApiResponse[ProviderRead])
def patch_provider(
    payload: ProviderUpdate,
    provider_id: int = Path(..., ge=1),
    db: Session = Depends(get_db),
) -> ApiResponse[ProviderRead]:
    """Edit one provider."""

    try:
        updated = update_provider(db, provider_id, payload)
    except UnknownProviderTypeError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except AttributeBagError as exc:
        raise HTTPException(status_code=422, detail=_issue_details(exc)) from exc
    if updated is None:
        raise HTTPException(status_code=404, detail="Provider not found")
    return ApiResponse(data=updated)


@router.delete("/{provider_id}", response_model=ApiResponse[DeleteResult])
def remove_provider(
    provider_id: int = Path(..., ge=1),
    db: Session = Depends(get_db),
) -> ApiResponse[DeleteResult]:
    """Delete one provider."""

    deleted = delete_provider(db, provider_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Provider not found")
    return ApiResponse(data=DeleteResult(id=provider_id, deleted=True))


def _parse_attribute_filters_param(raw: str | None) -> dict[str, Any]:
    if raw is None or not raw.strip():
        return {}
    try:
        decoded = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise HTTPException(status_code=422, detail="attributes must be a JSON object") from exc
    if not isinstance(decoded, dict):
        raise HTTPException(status_code=422, detail="attributes must be a JSON object")
    return decoded


def _issue_details(exc: AttributeBagError) -> list[dict[str, str]]:
    return [{"path": issue.path, "message": issue.message} for issue in exc.issues]
