"""Minimal client for the hosted commerce platform's Storefront GraphQL API."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx
from django.conf import settings

logger = logging.getLogger(__name__)

COLLECTION_QUERY = """
query Collection(
  $handle: String!
  $first: Int
  $last: Int
  $startCursor: String
  $endCursor: String
  $sortKey: ProductCollectionSortKeys
  $reverse: Boolean
  $filters: [ProductFilter!]
) {
  collection(handle: $handle) {
    id
    handle
    title
    description
    products(
      first: $first
      last: $last
      before: $startCursor
      after: $endCursor
      sortKey: $sortKey
      reverse: $reverse
      filters: $filters
    ) {
      nodes {
        id
        handle
        title
        images(first: 2) { nodes { url altText width height } }
        priceRange { maxVariantPrice { amount currencyCode } }
      }
      pageInfo { hasPreviousPage hasNextPage startCursor endCursor }
    }
  }
}
"""

SHOP_QUERY = "query Shop { shop { name } }"


class StorefrontError(Exception):
    """The Storefront API could not be reached or answered with errors."""


class StorefrontClient:
    """
    Synchronous Storefront API client (one `httpx.Client` per instance).

    Usable as a context manager so the connection pool is closed per request.
    """

    def __init__(
        self,
        domain: str,
        access_token: str,
        api_version: str = "2024-10",
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.domain = domain.removeprefix("https://").removeprefix("http://").rstrip("/")
        self.endpoint = f"https://{self.domain}/api/{api_version}/graphql.json"
        self.http_client = httpx.Client(
            timeout=httpx.Timeout(timeout, connect=5.0),
            transport=transport,
            headers={
                "Content-Type": "application/json",
                "X-Shopify-Storefront-Access-Token": access_token,
            },
        )

    def __enter__(self) -> StorefrontClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self.http_client.close()

    def query(self, document: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        Execute a GraphQL document and return its `data` payload.

        Raises:
            StorefrontError: on transport errors, non-2xx responses, a body that
                is not JSON, or a GraphQL `errors` list.
        """
        try:
            resp = self.http_client.post(
                self.endpoint, json={"query": document, "variables": variables or {}}
            )
            resp.raise_for_status()
            payload = resp.json()
        except httpx.HTTPError as e:
            raise StorefrontError(f"Storefront request failed: {e}") from e
        except ValueError as e:
            raise StorefrontError("Storefront returned a non-JSON response") from e
        if not isinstance(payload, dict):
            raise StorefrontError("Storefront returned a non-object JSON response")

        errors = payload.get("errors")
        if errors:
            if not isinstance(errors, list):
                errors = [errors]
            messages = "; ".join(
                str(err.get("message", err) if isinstance(err, dict) else err) for err in errors
            )
            raise StorefrontError(f"Storefront query failed: {messages}")
        return payload.get("data") or {}

    def get_collection(self, handle: str, variables: dict[str, Any]) -> dict[str, Any] | None:
        """
        Fetch one page of a collection's products.

        `variables` holds pagination (`first`/`last`, `startCursor`/`endCursor`)
        and the sort/filter variables; returns None for an unknown handle.
        """
        data = self.query(COLLECTION_QUERY, {"handle": handle, **variables})
        collection = data.get("collection")
        if not collection:
            return None

        products = collection["products"]
        return {
            "id": collection["id"],
            "handle": collection["handle"],
            "title": collection["title"],
            "description": collection.get("description") or "",
            "page_info": products["pageInfo"],
            "products": [
                {
                    "id": node["id"],
                    "handle": node["handle"],
                    "title": node["title"],
                    "images": node["images"]["nodes"],
                    # Listings show the highest variant price
                    "price": node["priceRange"]["maxVariantPrice"],
                }
                for node in products["nodes"]
            ],
        }

    def ping(self) -> bool:
        """True when a trivial query succeeds."""
        try:
            self.query(SHOP_QUERY)
        except StorefrontError as e:
            logger.warning("Storefront ping failed: %s", e)
            return False
        return True


def get_storefront_client(transport: httpx.BaseTransport | None = None) -> StorefrontClient | None:
    """Build a client from settings; None when no store domain is configured."""
    domain = getattr(settings, "STOREFRONT_DOMAIN", "")
    if not domain:
        return None
    return StorefrontClient(
        domain=domain,
        access_token=getattr(settings, "STOREFRONT_ACCESS_TOKEN", ""),
        api_version=getattr(settings, "STOREFRONT_API_VERSION", "2024-10"),
        timeout=float(getattr(settings, "STOREFRONT_TIMEOUT", 10.0)),
        transport=transport,
    )
