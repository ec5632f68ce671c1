import copy
import json
from typing import Any

import httpx
import pytest

from catalog import views
from catalog.storefront import StorefrontClient

_COLLECTION_PAYLOAD: dict[str, Any] = {
    "data": {
        "collection": {
            "id": "gid://shopify/Collection/1",
            "handle": "all",
            "title": "All",
            "description": "Everything we sell",
            "products": {
                "nodes": [
                    {
                        "id": "gid://shopify/Product/1",
                        "handle": "mini-plush",
                        "title": "Mini Plush",
                        "images": {
                            "nodes": [
                                {
                                    "url": "https://cdn.example.com/plush.png",
                                    "altText": None,
                                    "width": 800,
                                    "height": 800,
                                }
                            ]
                        },
                        "priceRange": {
                            "maxVariantPrice": {"amount": "25.0", "currencyCode": "USD"}
                        },
                    }
                ],
                "pageInfo": {
                    "hasPreviousPage": False,
                    "hasNextPage": True,
                    "startCursor": "a",
                    "endCursor": "b",
                },
            },
        }
    }
}


@pytest.fixture
def collection_payload() -> dict[str, Any]:
    """Storefront answer for a one-product collection page."""
    return copy.deepcopy(_COLLECTION_PAYLOAD)


class FakeStorefront:
    """Records Storefront requests and answers them with a canned response."""

    def __init__(self, response: httpx.Response) -> None:
        self.response = response
        self.requests: list[dict[str, Any]] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(json.loads(request.content))
        return self.response

    def client(self) -> StorefrontClient:
        return StorefrontClient(
            domain="shop.example.com",
            access_token="token",
            transport=httpx.MockTransport(self.handler),
        )


@pytest.fixture
def storefront(monkeypatch: pytest.MonkeyPatch, collection_payload: dict[str, Any]) -> FakeStorefront:
    """Route the catalog views' Storefront calls to an in-memory fake."""
    fake = FakeStorefront(httpx.Response(200, json=collection_payload))
    monkeypatch.setattr(views, "get_storefront_client", fake.client)
    return fake
