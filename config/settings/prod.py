"""
Production settings for the Django project.

This module extends the shared base settings (`base.py`) with configuration
suitable for a production environment:

- Debug disabled.
- HTTPS only, HSTS enabled with preload and subdomains.
- JSON-only responses (no browsable API).
"""

from .base import *  # noqa: F403, F401

# ---------------------------------------------------------------------
# Debug
# ---------------------------------------------------------------------
DEBUG = False

# ---------------------------------------------------------------------
# Security
# ---------------------------------------------------------------------
SECURE_SSL_REDIRECT = True
CSRF_COOKIE_SECURE = True
SECURE_HSTS_SECONDS = 60 * 60 * 24 * 30  # 30 days
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_HSTS_PRELOAD = True

REST_FRAMEWORK["DEFAULT_RENDERER_CLASSES"] = ["rest_framework.renderers.JSONRenderer"]  # noqa: F405
