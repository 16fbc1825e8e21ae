from __future__ import annotations

from operator import attrgetter
from typing import Dict, Iterable, List

from pokegrid.models import ALL_TYPES, QueryState, Record, SortKey

SORT_OPTIONS: Dict[SortKey, str] = {
    SortKey.ID_ASC: "ID: Low to High",
    SortKey.ID_DESC: "ID: High to Low",
    SortKey.EXP_ASC: "Base Exp: Low to High",
    SortKey.EXP_DESC: "Base Exp: High to Low",
}

_SORT_FIELDS: Dict[SortKey, str] = {
    SortKey.ID_ASC: "id",
    SortKey.ID_DESC: "id",
    SortKey.EXP_ASC: "experience",
    SortKey.EXP_DESC: "experience",
}


def filter_by_name(record: Record, search_term: str | None) -> bool:
    if not search_term:
        return True
    return record.name.lower().startswith(search_term.lower())


def filter_by_type(record: Record, selected_type: str | None) -> bool:
    if not selected_type or selected_type == ALL_TYPES:
        return True
    return selected_type in record.types


def matches_query(record: Record, query: QueryState) -> bool:
    return filter_by_name(record, query.search_term) and filter_by_type(record, query.selected_type)


def sort_records(records: Iterable[Record], sort_key: SortKey | str) -> List[Record]:
    key = SortKey.parse(sort_key)
    # reverse=True keeps equal keys in input order.
    return sorted(records, key=attrgetter(_SORT_FIELDS[key]), reverse=key.descending)


def apply_filters(records: Iterable[Record], query: QueryState | None = None) -> List[Record]:
    """Filter by name prefix and type, then sort. Inputs are never mutated."""
    query = query or QueryState()
    return sort_records((r for r in records if matches_query(r, query)), query.sort_key)
