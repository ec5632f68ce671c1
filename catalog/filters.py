"""Parsing and validation of collection filter/sort query params.

Supported query params on collection listings:
- sort: one of the `SORT_OPTIONS` values
- available: "true" / "false"
- price.min / price.max: non-negative numbers (no min <= max check)
- product-type: repeatable, each one of `PRODUCT_TYPES`

Each reader returns a `ParsedParam`: a missing param is valid, a present but
unparsable one is invalid (never replaced by a default). The builder either
produces the Storefront query variables, or a `FilterRedirect` pointing at the
same params with every invalid value removed.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Generic, TypedDict, TypeVar

from django.http import QueryDict

from .constants import (
    FILTER_AVAILABLE,
    FILTER_PRICE_MAX,
    FILTER_PRICE_MIN,
    FILTER_PRODUCT_TYPE,
    PRODUCT_TYPE_VALUES,
    SORT_KEY,
    SORT_QUERY_VARIABLES,
    SORT_VALUES,
)

T = TypeVar("T")


@dataclass(frozen=True)
class ParsedParam(Generic[T]):
    """Parsed value of a single dimension plus its validity flag."""

    value: T
    is_valid: bool


# ------------------------------ Filter predicates -----------------------------
# Shapes follow the Storefront API `ProductFilter` input.


class PriceRange(TypedDict, total=False):
    min: float
    max: float


class AvailableFilter(TypedDict):
    available: bool


class PriceFilter(TypedDict):
    price: PriceRange


class ProductTypeFilter(TypedDict):
    productType: str


ProductFilter = AvailableFilter | PriceFilter | ProductTypeFilter


# ---------------------------------- Readers -----------------------------------
def _first(params: QueryDict, key: str) -> str | None:
    # A repeated single-valued key reads as its first value
    values = params.getlist(key)
    return values[0] if values else None


def get_sort(params: QueryDict) -> ParsedParam[str | None]:
    """Read `sort`; unknown sort values are invalid."""
    if SORT_KEY not in params:
        return ParsedParam(None, True)
    sort = _first(params, SORT_KEY)
    if sort in SORT_VALUES:
        return ParsedParam(sort, True)
    return ParsedParam(None, False)


def get_available(params: QueryDict) -> ParsedParam[bool | None]:
    """Read `available`; only the literals "true" and "false" are accepted."""
    if FILTER_AVAILABLE not in params:
        return ParsedParam(None, True)
    available = _first(params, FILTER_AVAILABLE)
    if available in ("true", "false"):
        return ParsedParam(available == "true", True)
    return ParsedParam(None, False)


def _get_price(params: QueryDict, key: str) -> ParsedParam[float | None]:
    raw = _first(params, key)
    # An empty input (e.g. a cleared price box) counts as "not set"
    if not raw:
        return ParsedParam(None, True)
    # float() also takes "1_000" and non-ASCII digits; neither is a plain decimal
    if not raw.isascii() or "_" in raw:
        return ParsedParam(None, False)
    try:
        price = float(raw)
    except ValueError:
        return ParsedParam(None, False)
    if not math.isfinite(price) or price < 0:
        return ParsedParam(None, False)
    return ParsedParam(price, True)


def get_min_price(params: QueryDict) -> ParsedParam[float | None]:
    """Read `price.min` as a non-negative number."""
    return _get_price(params, FILTER_PRICE_MIN)


def get_max_price(params: QueryDict) -> ParsedParam[float | None]:
    """Read `price.max` as a non-negative number."""
    return _get_price(params, FILTER_PRICE_MAX)


def get_product_types(params: QueryDict) -> ParsedParam[tuple[str, ...]]:
    """
    Read every `product-type` value.

    The recognized values are always returned (in URL order); the result is
    flagged invalid as soon as one value is unknown, so the caller can redirect
    to a URL holding only the recognized ones.
    """
    if FILTER_PRODUCT_TYPE not in params:
        return ParsedParam((), True)
    product_types = params.getlist(FILTER_PRODUCT_TYPE)
    recognized = tuple(pt for pt in product_types if pt in PRODUCT_TYPE_VALUES)
    return ParsedParam(recognized, len(recognized) == len(product_types))


# ---------------------------------- Builder -----------------------------------
@dataclass(frozen=True)
class FilterQueryVariables:
    """Validated sort/filter variables for the Storefront collection query."""

    filters: tuple[ProductFilter, ...] = ()
    sort_key: str | None = None
    reverse: bool | None = None

    def as_variables(self) -> dict[str, Any]:
        """Return the variables as sent to the Storefront API (sort fields omitted if unset)."""
        variables: dict[str, Any] = {}
        if self.sort_key is not None:
            variables["sortKey"] = self.sort_key
            variables["reverse"] = self.reverse
        variables["filters"] = list(self.filters)
        return variables


@dataclass(frozen=True)
class FilterRedirect:
    """Outcome for invalid params: where the client should be sent instead."""

    search_params: QueryDict
    invalid_keys: tuple[str, ...] = ()

    @property
    def location(self) -> str:
        """Relative redirect target, e.g. "?product-type=toys" (or just "?")."""
        return f"?{self.search_params.urlencode()}"


def get_filter_query_variables(params: QueryDict) -> FilterQueryVariables | FilterRedirect:
    """
    Validate all filter/sort params and build the collection query variables.

    Returns a `FilterRedirect` when any dimension is invalid; no variables are
    built in that case.
    """
    sort = get_sort(params)
    available = get_available(params)
    min_price = get_min_price(params)
    max_price = get_max_price(params)
    product_types = get_product_types(params)

    checks: tuple[tuple[str, ParsedParam[Any]], ...] = (
        (SORT_KEY, sort),
        (FILTER_AVAILABLE, available),
        (FILTER_PRICE_MIN, min_price),
        (FILTER_PRICE_MAX, max_price),
        (FILTER_PRODUCT_TYPE, product_types),
    )
    invalid_keys = tuple(key for key, parsed in checks if not parsed.is_valid)
    if invalid_keys:
        return FilterRedirect(
            search_params=_canonical_params(params, invalid_keys, product_types.value),
            invalid_keys=invalid_keys,
        )

    filters: list[ProductFilter] = []
    if isinstance(available.value, bool):
        filters.append({"available": available.value})

    if min_price.value is not None or max_price.value is not None:
        price: PriceRange = {}
        if min_price.value is not None:
            price["min"] = min_price.value
        if max_price.value is not None:
            price["max"] = max_price.value
        filters.append({"price": price})

    filters.extend({"productType": product_type} for product_type in product_types.value)

    if sort.value is None:
        return FilterQueryVariables(filters=tuple(filters))
    storefront_sort = SORT_QUERY_VARIABLES[sort.value]
    return FilterQueryVariables(
        filters=tuple(filters),
        sort_key=storefront_sort.sort_key,
        reverse=storefront_sort.reverse,
    )


def _canonical_params(
    params: QueryDict,
    invalid_keys: tuple[str, ...],
    valid_product_types: tuple[str, ...],
) -> QueryDict:
    """Copy `params` without the invalid values; unrelated params are kept as-is."""
    canonical = params.copy()
    for key in invalid_keys:
        canonical.pop(key, None)
    if FILTER_PRODUCT_TYPE in invalid_keys and valid_product_types:
        # Re-appended, so the recognized product types move to the end of the query
        canonical.setlist(FILTER_PRODUCT_TYPE, list(valid_product_types))
    # Hand out an immutable copy like request.GET
    return QueryDict(canonical.urlencode())
