"""Provider query engine package."""

from app.query.engine import (
    FetchMode,
    FetchPlan,
    ProviderQuery,
    ProviderStore,
    plan_fetch,
    run_provider_query,
)
from app.query.pagination import PageWindow, page_window, paginate
from app.query.predicates import (
    RangePredicate,
    ScalarPredicate,
    UnsatisfiablePredicate,
    filter_by_attributes,
    parse_attribute_filters,
    parse_predicate,
)
from app.query.search import filter_by_search, normalize_search_term
from app.query.values import AttributeKind, AttributeValue, classify_attributes

__all__ = [
    "AttributeKind",
    "AttributeValue",
    "FetchMode",
    "FetchPlan",
    "PageWindow",
    "ProviderQuery",
    "ProviderStore",
    "RangePredicate",
    "ScalarPredicate",
    "UnsatisfiablePredicate",
    "classify_attributes",
    "filter_by_attributes",
    "filter_by_search",
    "normalize_search_term",
    "page_window",
    "paginate",
    "parse_attribute_filters",
    "parse_predicate",
    "plan_fetch",
    "run_provider_query",
]
