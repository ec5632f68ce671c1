"""Query-string keys and lookup tables for collection filtering and sorting."""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, NamedTuple

SORT_KEY: Final[str] = "sort"

# Filter keys as they appear in the URL
FILTER_AVAILABLE: Final[str] = "available"
FILTER_PRICE_MIN: Final[str] = "price.min"
FILTER_PRICE_MAX: Final[str] = "price.max"
FILTER_PRODUCT_TYPE: Final[str] = "product-type"

FILTER_KEYS: Final[tuple[str, ...]] = (
    FILTER_AVAILABLE,
    FILTER_PRICE_MIN,
    FILTER_PRICE_MAX,
    FILTER_PRODUCT_TYPE,
)

class SortOption(NamedTuple):
    """A user-facing sort choice (URL value + label shown in the sort menu)."""

    value: str
    label: str


# Order matters: the first option is the default shown when no sort is selected.
SORT_OPTIONS: Final[tuple[SortOption, ...]] = (
    SortOption("best-selling", "Best Selling"),
    SortOption("price-high-to-low", "Price: High To Low"),
    SortOption("price-low-to-high", "Price: Low To High"),
    SortOption("newest", "Newest"),
)

SORT_VALUES: Final[frozenset[str]] = frozenset(option.value for option in SORT_OPTIONS)


class StorefrontSort(NamedTuple):
    """`sortKey` / `reverse` pair expected by the Storefront collection query."""

    sort_key: str
    reverse: bool


SORT_QUERY_VARIABLES: Final = MappingProxyType(
    {
        "best-selling": StorefrontSort("BEST_SELLING", False),
        "price-high-to-low": StorefrontSort("PRICE", True),
        "price-low-to-high": StorefrontSort("PRICE", False),
        "newest": StorefrontSort("CREATED", True),
    }
)

# The Storefront API does not expose the list of product types, so they are
# maintained here.
PRODUCT_TYPES: Final[tuple[str, ...]] = (
    "apparel",
    "accessories",
    "stationery",
    "stickers",
    "toys",
)

PRODUCT_TYPE_VALUES: Final[frozenset[str]] = frozenset(PRODUCT_TYPES)
