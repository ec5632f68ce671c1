"""API views (DRF) for collection listings and their filter/sort controls."""

import logging
from typing import Any

from django.conf import settings
from django.http import HttpResponseRedirect
from django.urls import reverse
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import parsers, status
from rest_framework.exceptions import APIException, NotFound
from rest_framework.parsers import BaseParser
from rest_framework.permissions import AllowAny, BasePermission
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from .constants import (
    FILTER_AVAILABLE,
    FILTER_PRICE_MAX,
    FILTER_PRICE_MIN,
    FILTER_PRODUCT_TYPE,
    PRODUCT_TYPES,
    SORT_KEY,
    SORT_OPTIONS,
)
from .filter_state import clean_filter_params, get_filter_state
from .filters import FilterRedirect, get_filter_query_variables
from .http import safe_redirect
from .serializers import (
    CollectionPageQuerySerializer,
    CollectionSerializer,
    FilterStateSerializer,
)
from .storefront import StorefrontError, get_storefront_client

logger = logging.getLogger(__name__)


class StorefrontUnavailable(APIException):
    status_code = status.HTTP_502_BAD_GATEWAY
    default_detail = "The storefront is temporarily unavailable."
    default_code = "storefront_unavailable"


# Shared OpenAPI description of the filter/sort query params
FILTER_PARAMETERS = [
    OpenApiParameter(
        name=SORT_KEY,
        type=OpenApiTypes.STR,
        location="query",
        required=False,
        enum=[option.value for option in SORT_OPTIONS],
    ),
    OpenApiParameter(
        name=FILTER_AVAILABLE,
        type=OpenApiTypes.STR,
        location="query",
        required=False,
        enum=["true", "false"],
    ),
    OpenApiParameter(
        name=FILTER_PRICE_MIN,
        type=OpenApiTypes.NUMBER,
        location="query",
        required=False,
        description="Minimum price (>= 0)",
    ),
    OpenApiParameter(
        name=FILTER_PRICE_MAX,
        type=OpenApiTypes.NUMBER,
        location="query",
        required=False,
        description="Maximum price (>= 0)",
    ),
    OpenApiParameter(
        name=FILTER_PRODUCT_TYPE,
        type=OpenApiTypes.STR,
        location="query",
        required=False,
        many=True,
        enum=list(PRODUCT_TYPES),
    ),
]

_REDIRECT_RESPONSE = OpenApiResponse(
    description="Invalid filter/sort params: redirect to the same URL without them"
)


def redirect_to_canonical(request: Request, outcome: FilterRedirect) -> HttpResponseRedirect:
    """Send the client to the current path with the corrected query string."""
    location = f"{request.path}{outcome.location}"
    logger.info(
        "Invalid filter params (%s) on %s, redirecting to %s",
        ", ".join(outcome.invalid_keys),
        request.path,
        location,
    )
    return safe_redirect(location)


@extend_schema(
    tags=["Collections"],
    parameters=[
        *FILTER_PARAMETERS,
        OpenApiParameter(
            name="cursor",
            type=OpenApiTypes.STR,
            location="query",
            required=False,
            description="Page cursor from `page_info`",
        ),
        OpenApiParameter(
            name="direction",
            type=OpenApiTypes.STR,
            location="query",
            required=False,
            enum=["next", "previous"],
        ),
    ],
    responses={200: CollectionSerializer, 302: _REDIRECT_RESPONSE},
)
class CollectionProductsView(APIView):
    """
    One page of a collection's products, sorted and filtered by the query string.

    GET /api/collections/<handle>/products/?sort=newest&available=true&product-type=toys
    Invalid filter/sort params never reach the Storefront API: the client is
    redirected to the same URL with those params removed.
    """

    permission_classes: list[type[BasePermission]] = [AllowAny]

    def get(self, request: Request, handle: str, *args: Any, **kwargs: Any) -> Any:
        outcome = get_filter_query_variables(request.query_params)
        if isinstance(outcome, FilterRedirect):
            return redirect_to_canonical(request, outcome)

        page = CollectionPageQuerySerializer(data=request.query_params)
        page.is_valid(raise_exception=True)
        page_size = int(getattr(settings, "CATALOG_PAGE_SIZE", 8))
        variables = {**page.to_pagination_variables(page_size), **outcome.as_variables()}

        client = get_storefront_client()
        if client is None:
            logger.warning("Storefront API is not configured (STOREFRONT_DOMAIN is empty)")
            raise StorefrontUnavailable()

        with client:
            try:
                collection = client.get_collection(handle, variables)
            except StorefrontError as e:
                logger.warning("Collection query failed for '%s': %s", handle, e)
                raise StorefrontUnavailable() from e

        if collection is None:
            raise NotFound("Collection not found.")

        return Response(CollectionSerializer(collection).data)


@extend_schema(
    tags=["Collections"],
    parameters=FILTER_PARAMETERS,
    responses={200: FilterStateSerializer, 302: _REDIRECT_RESPONSE},
)
class FilterStateView(APIView):
    """
    Current sort/filter selection for rendering the filter controls.

    GET /api/collections/filters/?sort=newest&price.min=10
    """

    permission_classes: list[type[BasePermission]] = [AllowAny]

    def get(self, request: Request, *args: Any, **kwargs: Any) -> Any:
        # Same gate as the listing: never describe a selection that was not applied
        outcome = get_filter_query_variables(request.query_params)
        if isinstance(outcome, FilterRedirect):
            return redirect_to_canonical(request, outcome)

        return Response(FilterStateSerializer(get_filter_state(request.query_params)).data)


@extend_schema(
    tags=["Collections"],
    request={"application/x-www-form-urlencoded": OpenApiTypes.OBJECT},
    responses={303: OpenApiResponse(description="Redirect to the filtered collection")},
)
class FilterFormView(APIView):
    """
    Submit target of the filter form (works without JavaScript).

    POST /api/collections/<handle>/filter/ with the form fields; empty fields
    are dropped and the client is sent to the listing with the rest as query params.
    """

    permission_classes: list[type[BasePermission]] = [AllowAny]
    parser_classes: list[type[BaseParser]] = [parsers.FormParser, parsers.MultiPartParser]

    def post(self, request: Request, handle: str, *args: Any, **kwargs: Any) -> Any:
        params = clean_filter_params(request.data)
        url = reverse("catalog:collection-products", kwargs={"handle": handle})
        query = params.urlencode()
        return safe_redirect(f"{url}?{query}" if query else url, status=303)
