"""App configuration for the Catalog application."""

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class CatalogConfig(AppConfig):
    """Django app config for the Catalog app (no models: products live in the hosted storefront)."""

    name = "catalog"
    verbose_name = _("Catalog")
