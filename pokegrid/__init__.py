"""Fetch, filter, sort and page the first-generation Pokédex."""

from pokegrid.errors import DetailFetchError, ListFetchError, PokeGridError
from pokegrid.filters import SORT_OPTIONS, apply_filters, filter_by_name, filter_by_type, sort_records
from pokegrid.models import ALL_TYPES, TYPE_TAGS, Ability, BaseListEntry, QueryState, Record, SortKey, Stat
from pokegrid.pagination import PageMetadata, PageWindow, Paginator
from pokegrid.store import LoadState, LoadStatus, RecordStore

__all__ = [
    "ALL_TYPES",
    "SORT_OPTIONS",
    "TYPE_TAGS",
    "Ability",
    "BaseListEntry",
    "DetailFetchError",
    "ListFetchError",
    "LoadState",
    "LoadStatus",
    "PageMetadata",
    "PageWindow",
    "Paginator",
    "PokeGridError",
    "QueryState",
    "Record",
    "RecordStore",
    "SortKey",
    "Stat",
    "apply_filters",
    "filter_by_name",
    "filter_by_type",
    "sort_records",
]

__version__ = "0.1.0"
