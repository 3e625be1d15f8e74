"""Generic list-query construction"""
from .filter_builder import QueryFilterBuilder, select_filters, to_bind_params
from .sort_resolver import SortResolver, SortSpec, SortDirection
from .paginator import Paginator, PageRequest
from .page import PageEnvelope
from .resource import ResourceConfig
from .list_query_executor import ListQueryExecutor, ListQuery

__all__ = [
    "QueryFilterBuilder",
    "select_filters",
    "to_bind_params",
    "SortResolver",
    "SortSpec",
    "SortDirection",
    "Paginator",
    "PageRequest",
    "PageEnvelope",
    "ResourceConfig",
    "ListQueryExecutor",
    "ListQuery",
]
