"""
Development settings for the Django project.

This module extends the shared base settings (`base.py`) with configuration
suitable for local development and the test suite:

- Debug mode enabled.
- No HTTPS redirect, so the test client and runserver work over plain HTTP.
- Catalog logs at DEBUG level.
"""

from .base import *  # noqa: F403, F401

# ---------------------------------------------------------------------
# Debug
# ---------------------------------------------------------------------
DEBUG = True

SECURE_SSL_REDIRECT = False

# Show every canonicalizing redirect and Storefront call locally
LOGGING["loggers"]["catalog"]["level"] = "DEBUG"  # noqa: F405
