"""Application URL routing for the catalog API: collection listings and filter controls."""

from django.urls import path

from .views import CollectionProductsView, FilterFormView, FilterStateView

# Namespacing helps with reverse('catalog:collection-products', kwargs={"handle": ...})
app_name = "catalog"

urlpatterns = [
    path("collections/filters/", FilterStateView.as_view(), name="filter-state"),
    path(
        "collections/<str:handle>/products/",
        CollectionProductsView.as_view(),
        name="collection-products",
    ),
    path(
        "collections/<str:handle>/filter/",
        FilterFormView.as_view(),
        name="collection-filter",
    ),
]
