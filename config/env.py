"""
Select the Django settings module based on an environment variable.

If `DEBUG` is "True" (or missing) the development settings are used:
    "config.settings.dev"

Otherwise, the production settings module is used:
    "config.settings.prod"

An explicitly exported `DJANGO_SETTINGS_MODULE` (e.g. staging) always wins.
"""

import os


def configure_django_settings() -> None:
    """Default the Django settings module based on DEBUG=True/False."""
    default_settings = (
        "config.settings.dev" if os.getenv("DEBUG", "True") == "True" else "config.settings.prod"
    )
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", default_settings)
