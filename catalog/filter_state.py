"""
Current sort/filter selection, as shown by the filter and sort controls.

These helpers reuse the readers from `filters.py` but ignore the validity flag:
views only reach them after `get_filter_query_variables` has redirected away
any invalid params.
"""

from __future__ import annotations

from typing import Any, Literal, Mapping, NamedTuple

from django.http import QueryDict

from .constants import FILTER_KEYS, SORT_OPTIONS, SortOption
from .filters import get_available, get_max_price, get_min_price, get_product_types, get_sort


class SelectedPrice(NamedTuple):
    min: float | None
    max: float | None


def current_sort(params: QueryDict) -> SortOption:
    """Selected sort option; the first option when nothing (valid) is selected."""
    sort = get_sort(params).value
    for option in SORT_OPTIONS:
        if option.value == sort:
            return option
    return SORT_OPTIONS[0]


def current_availability(params: QueryDict) -> Literal["true", "false"] | None:
    available = get_available(params).value
    if available is None:
        return None
    return "true" if available else "false"


def current_price(params: QueryDict) -> SelectedPrice:
    return SelectedPrice(get_min_price(params).value, get_max_price(params).value)


def current_product_types(params: QueryDict) -> frozenset[str]:
    """Recognized product types (unknown ones are never reported as selected)."""
    return frozenset(get_product_types(params).value)


def is_filter_applied(params: QueryDict) -> bool:
    # Sort is not a filter
    return any(key in params for key in FILTER_KEYS)


def clean_filter_params(data: Mapping[str, Any]) -> QueryDict:
    """
    Build query params from a submitted filter form, dropping empty fields.

    Blank inputs (e.g. an untouched price box) would otherwise end up in the
    URL as `price.min=`.
    """
    cleaned = QueryDict(mutable=True)
    for key in data:
        values = data.getlist(key) if hasattr(data, "getlist") else [data[key]]
        kept = [str(value) for value in values if value not in ("", None)]
        if kept:
            cleaned.setlist(key, kept)
    return cleaned


def get_filter_state(params: QueryDict) -> dict[str, Any]:
    """Everything the filter/sort controls need to render the current selection."""
    price = current_price(params)
    return {
        "sort_options": SORT_OPTIONS,
        "sort": current_sort(params),
        "available": current_availability(params),
        "price": {"min": price.min, "max": price.max},
        "product_types": list(get_product_types(params).value),
        "is_filter_applied": is_filter_applied(params),
    }
