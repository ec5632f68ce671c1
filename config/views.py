"""
Project-level views.

Currently, includes:
- HealthCheckView: simple monitoring endpoint for load balancers and ops.
"""

from __future__ import annotations

import logging
from typing import Any

from django.conf import settings
from django.db import connection as db_connection
from django.db.utils import OperationalError
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from catalog.storefront import get_storefront_client

logger = logging.getLogger(__name__)


class HealthCheckView(APIView):
    """
    Health-check endpoint for monitoring and load balancers.

    Fields:
        - status: "ok" if all required services are healthy, otherwise "error".
        - database: True if the default DB connection works, False if not.
        - storefront: True if the Storefront API answers, False if it does not,
          or null when no store domain is configured.

    Example response:

        200 OK
        {
            "status": "ok",
            "database": true,
            "storefront": null
        }
    """

    # Explicitly public: no auth, allow any requester.
    authentication_classes: list[Any] = []
    permission_classes = [AllowAny]
    throttle_classes: list[Any] = []

    def get(self, request: Request, *args: object, **kwargs: object) -> Response:
        """
        Check the database and (when configured) the Storefront API.

        An unreachable storefront only sets `status` to "error" when
        `HEALTH_STOREFRONT_REQUIRED` is enabled.
        """
        result: dict[str, Any] = {
            "status": "ok",
            "database": False,
            "storefront": None,  # None = not configured
        }

        # --- Database check ---
        try:
            with db_connection.cursor() as cursor:
                cursor.execute("SELECT 1")
            result["database"] = True
        except OperationalError as e:
            logger.warning("DB health check failed: %s", e)
            result["status"] = "error"

        # --- Storefront check (optional) ---
        client = get_storefront_client()
        if client is not None:
            with client:
                result["storefront"] = client.ping()
            if not result["storefront"] and getattr(settings, "HEALTH_STOREFRONT_REQUIRED", False):
                result["status"] = "error"

        return Response(result)
