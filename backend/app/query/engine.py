"""Provider query engine: prefilter, attribute match, search, paginate."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from time import perf_counter
from typing import Any, Protocol

from app.query.pagination import PageWindow, page_window, paginate
from app.query.predicates import filter_by_attributes, parse_attribute_filters
from app.query.search import filter_by_search, normalize_search_term
from app.schemas.provider import ProviderListingResponse, ProviderRead
from app.schemas.provider_type import ProviderTypeRead

logger = logging.getLogger(__name__)


class ProviderStore(Protocol):
    """Read-only entity store consulted once per query."""

    def fetch_providers(
        self,
        *,
        provider_type_id: int | None = None,
        status: str | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> list[ProviderRead]:
        """Providers matching the equality filters, newest first, ties by ascending id."""

    def count_providers(
        self,
        *,
        provider_type_id: int | None = None,
        status: str | None = None,
    ) -> int:
        """Number of providers matching the equality filters."""

    def fetch_provider_type(self, provider_type_id: int) -> ProviderTypeRead | None:
        """One provider type, or ``None`` when it does not exist."""


@dataclass(slots=True)
class ProviderQuery:
    """Listing request as it reaches the engine.

    ``attribute_filters`` maps attribute names to a scalar or a
    ``{"min": .., "max": ..}`` object.
    """

    provider_type_id: int | None = None
    status: str | None = None
    search: str | None = None
    attribute_filters: dict[str, Any] = field(default_factory=dict)
    page: int = 1
    limit: int = 10


class FetchMode(str, Enum):
    """How the engine reads from the store."""

    OFFSET_LIMIT = "offset_limit"
    FULL_SCAN = "full_scan"


@dataclass(frozen=True, slots=True)
class FetchPlan:
    """Store access decided before any I/O happens."""

    mode: FetchMode
    window: PageWindow


def plan_fetch(query: ProviderQuery) -> FetchPlan:
    """Choose between store pagination and a full in-memory scan.

    Pagination is pushed to the store only when no in-memory stage can narrow
    the prefiltered set; otherwise the full set is fetched and sliced later.
    """

    window = page_window(query.page, query.limit)
    if normalize_search_term(query.search) or query.attribute_filters:
        return FetchPlan(mode=FetchMode.FULL_SCAN, window=window)
    return FetchPlan(mode=FetchMode.OFFSET_LIMIT, window=window)


def run_provider_query(store: ProviderStore, query: ProviderQuery) -> ProviderListingResponse:
    """List providers for one query. Store errors propagate unchanged."""

    started = perf_counter()
    plan = plan_fetch(query)

    if plan.mode is FetchMode.OFFSET_LIMIT:
        total = store.count_providers(provider_type_id=query.provider_type_id, status=query.status)
        candidate_count = total
        # Pages past the end never reach the store, so no unbindable OFFSET is sent.
        if plan.window.is_empty or plan.window.offset >= total:
            items = []
        else:
            items = store.fetch_providers(
                provider_type_id=query.provider_type_id,
                status=query.status,
                offset=plan.window.offset,
                limit=plan.window.size,
            )
    else:
        candidates = store.fetch_providers(provider_type_id=query.provider_type_id, status=query.status)
        candidate_count = len(candidates)
        matched = filter_by_attributes(candidates, parse_attribute_filters(query.attribute_filters))
        matched = filter_by_search(matched, normalize_search_term(query.search))
        items, total = paginate(matched, query.page, query.limit)

    logger.info(
        "provider_query.timing mode=%s candidates=%d total=%d returned=%d total_ms=%.2f",
        plan.mode.value,
        candidate_count,
        total,
        len(items),
        (perf_counter() - started) * 1000.0,
    )
    return ProviderListingResponse(items=items, total=total, page=query.page, limit=query.limit)
