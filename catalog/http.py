"""Redirect helpers shared by the catalog views."""

from __future__ import annotations

from typing import Any

from django.http import HttpResponseRedirect


def safe_redirect(to: Any, status: int = 302) -> HttpResponseRedirect:
    """
    Redirect to a same-site path.

    Anything that is not a string starting with a single "/" (absolute URLs,
    protocol-relative "//host" URLs, empty values) falls back to "/".
    Use `status=303` after form posts so the follow-up request is a GET.
    """
    if not to or not isinstance(to, str) or not to.startswith("/") or to.startswith("//"):
        to = "/"
    response = HttpResponseRedirect(to)
    response.status_code = status
    return response
