import pytest
from django.http import QueryDict

from catalog.filters import (
    FilterQueryVariables,
    FilterRedirect,
    get_available,
    get_filter_query_variables,
    get_max_price,
    get_min_price,
    get_product_types,
    get_sort,
)


def build(query: str) -> FilterQueryVariables | FilterRedirect:
    return get_filter_query_variables(QueryDict(query))


# ---------------------------------- Readers -----------------------------------


def test_missing_params_are_valid() -> None:
    params = QueryDict("")

    assert get_sort(params).value is None
    assert get_sort(params).is_valid
    assert get_available(params).value is None
    assert get_available(params).is_valid
    assert get_min_price(params).value is None
    assert get_min_price(params).is_valid
    assert get_max_price(params).value is None
    assert get_max_price(params).is_valid
    assert get_product_types(params).value == ()
    assert get_product_types(params).is_valid


def test_sort_rejects_unknown_values() -> None:
    assert get_sort(QueryDict("sort=newest")).value == "newest"

    parsed = get_sort(QueryDict("sort=test"))
    assert parsed.value is None
    assert not parsed.is_valid

    # Present but empty is not the same as missing
    assert not get_sort(QueryDict("sort=")).is_valid


def test_repeated_sort_reads_first_value() -> None:
    parsed = get_sort(QueryDict("sort=newest&sort=bogus"))
    assert parsed.value == "newest"
    assert parsed.is_valid


@pytest.mark.parametrize(
    ("query", "value", "is_valid"),
    [
        ("available=true", True, True),
        ("available=false", False, True),
        ("available=blah", None, False),
        ("available=TRUE", None, False),
        ("available=1", None, False),
        ("available=", None, False),
    ],
)
def test_available(query: str, value: bool | None, is_valid: bool) -> None:
    parsed = get_available(QueryDict(query))
    assert parsed.value is value
    assert parsed.is_valid is is_valid


@pytest.mark.parametrize(
    ("raw", "value", "is_valid"),
    [
        ("0", 0, True),
        ("10", 10, True),
        ("19.99", 19.99, True),
        ("1e3", 1000, True),
        ("100000000", 100000000, True),  # no upper bound
        ("", None, True),  # cleared input counts as missing
        ("-10", None, False),
        ("blah", None, False),
        ("inf", None, False),
        ("nan", None, False),
        ("1_000", None, False),
        ("１０", None, False),  # full-width digits
    ],
)
def test_price_bounds(raw: str, value: float | None, is_valid: bool) -> None:
    for key, reader in (("price.min", get_min_price), ("price.max", get_max_price)):
        parsed = reader(QueryDict(f"{key}={raw}"))
        assert parsed.value == value
        assert parsed.is_valid is is_valid


def test_product_types_keep_recognized_values_in_order() -> None:
    parsed = get_product_types(QueryDict("product-type=toys&product-type=apparel"))
    assert parsed.value == ("toys", "apparel")
    assert parsed.is_valid


def test_product_types_partial_match_is_invalid() -> None:
    parsed = get_product_types(QueryDict("product-type=toys&product-type=not-a-type"))
    assert parsed.value == ("toys",)
    assert not parsed.is_valid


def test_product_types_old_spelling_is_unknown() -> None:
    parsed = get_product_types(QueryDict("product-type=stationary"))
    assert parsed.value == ()
    assert not parsed.is_valid


# ---------------------------------- Builder -----------------------------------


def test_builds_all_filters_in_order() -> None:
    outcome = build(
        "sort=best-selling&available=false&price.min=10&price.max=100"
        "&product-type=toys&product-type=apparel"
    )

    assert isinstance(outcome, FilterQueryVariables)
    assert outcome.as_variables() == {
        "sortKey": "BEST_SELLING",
        "reverse": False,
        "filters": [
            {"available": False},
            {"price": {"min": 10, "max": 100}},
            {"productType": "toys"},
            {"productType": "apparel"},
        ],
    }


def test_single_price_bound_without_sort() -> None:
    outcome = build("price.min=0")

    assert isinstance(outcome, FilterQueryVariables)
    assert outcome.as_variables() == {"filters": [{"price": {"min": 0}}]}


def test_empty_query_has_no_filters() -> None:
    outcome = build("")

    assert isinstance(outcome, FilterQueryVariables)
    assert outcome.as_variables() == {"filters": []}


def test_min_above_max_is_not_cross_checked() -> None:
    outcome = build("price.min=100&price.max=10")

    assert isinstance(outcome, FilterQueryVariables)
    assert outcome.filters == ({"price": {"min": 100, "max": 10}},)


@pytest.mark.parametrize(
    ("sort", "sort_key", "reverse"),
    [
        ("best-selling", "BEST_SELLING", False),
        ("price-high-to-low", "PRICE", True),
        ("price-low-to-high", "PRICE", False),
        ("newest", "CREATED", True),
    ],
)
def test_sort_mapping(sort: str, sort_key: str, reverse: bool) -> None:
    outcome = build(f"sort={sort}")

    assert isinstance(outcome, FilterQueryVariables)
    assert outcome.as_variables() == {"sortKey": sort_key, "reverse": reverse, "filters": []}


@pytest.mark.parametrize(
    "query",
    [
        "sort=test",
        "available=blah",
        "price.min=blah",
        "price.min=-10",
        "price.max=blah",
        "price.max=-10",
        "product-type=blah",
    ],
)
def test_single_invalid_param_redirects_to_empty_query(query: str) -> None:
    outcome = build(query)

    assert isinstance(outcome, FilterRedirect)
    assert outcome.location == "?"


def test_invalid_params_are_stripped_and_valid_product_types_kept() -> None:
    outcome = build(
        "sort=test&available=blah&price.min=asdf&price.max=fdsa"
        "&product-type=toys&product-type=not-toys&product-type=apparel"
    )

    assert isinstance(outcome, FilterRedirect)
    assert outcome.location == "?product-type=toys&product-type=apparel"
    assert outcome.invalid_keys == (
        "sort",
        "available",
        "price.min",
        "price.max",
        "product-type",
    )


def test_partial_product_types_redirect_keeps_recognized_one() -> None:
    outcome = build("product-type=toys&product-type=not-a-type")

    assert isinstance(outcome, FilterRedirect)
    assert outcome.search_params.getlist("product-type") == ["toys"]
    assert outcome.location == "?product-type=toys"


def test_redirect_keeps_valid_and_unrelated_params() -> None:
    outcome = build("cursor=abc&price.min=-10&sort=newest&price.max=50")

    assert isinstance(outcome, FilterRedirect)
    assert outcome.location == "?cursor=abc&sort=newest&price.max=50"


@pytest.mark.parametrize(
    "query",
    [
        "sort=test",
        "available=blah&sort=newest",
        "price.min=-1&price.max=abc&product-type=toys",
        "product-type=toys&product-type=nope&product-type=apparel&available=true",
        "product-type=nope&product-type=nada",
        "sort=test&available=blah&price.min=asdf&price.max=fdsa&product-type=bad",
    ],
)
def test_canonical_params_are_a_fixed_point(query: str) -> None:
    first = build(query)
    assert isinstance(first, FilterRedirect)

    second = get_filter_query_variables(first.search_params)
    assert isinstance(second, FilterQueryVariables)


def test_builder_does_not_touch_input() -> None:
    params = QueryDict("sort=test&product-type=toys&product-type=nope")

    get_filter_query_variables(params)

    assert params.urlencode() == "sort=test&product-type=toys&product-type=nope"
