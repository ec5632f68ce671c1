"""DRF serializers for collection listings and the filter/sort state."""

from typing import Any

from rest_framework import serializers

from .constants import PRODUCT_TYPES

# ------------------------------ Query params ----------------------------------


class CollectionPageQuerySerializer(serializers.Serializer):
    """
    Pagination query params for a collection listing.

    Filter/sort params are not validated here: invalid ones are redirected
    away before this serializer runs.
    """

    cursor = serializers.CharField(required=False, allow_blank=True)
    direction = serializers.ChoiceField(choices=["next", "previous"], default="next")

    def to_pagination_variables(self, page_size: int) -> dict[str, Any]:
        """Storefront pagination variables: forward from `endCursor` or back from `startCursor`."""
        cursor = self.validated_data.get("cursor") or None
        if self.validated_data["direction"] == "previous":
            return {"last": page_size, "startCursor": cursor}
        return {"first": page_size, "endCursor": cursor}


# ------------------------------- Collections ----------------------------------


class MoneySerializer(serializers.Serializer):
    amount = serializers.CharField()
    currencyCode = serializers.CharField()


class ProductImageSerializer(serializers.Serializer):
    url = serializers.URLField()
    altText = serializers.CharField(allow_null=True, required=False)
    width = serializers.IntegerField(allow_null=True, required=False)
    height = serializers.IntegerField(allow_null=True, required=False)


class CollectionProductSerializer(serializers.Serializer):
    """Single product tile in a collection grid."""

    id = serializers.CharField()
    handle = serializers.CharField()
    title = serializers.CharField()
    images = ProductImageSerializer(many=True)
    price = MoneySerializer()


class PageInfoSerializer(serializers.Serializer):
    hasPreviousPage = serializers.BooleanField()
    hasNextPage = serializers.BooleanField()
    startCursor = serializers.CharField(allow_null=True)
    endCursor = serializers.CharField(allow_null=True)


class CollectionSerializer(serializers.Serializer):
    """Collection header plus one page of products."""

    id = serializers.CharField()
    handle = serializers.CharField()
    title = serializers.CharField()
    description = serializers.CharField(allow_blank=True)
    products = CollectionProductSerializer(many=True)
    page_info = PageInfoSerializer()


# ------------------------------- Filter state ---------------------------------


class SortOptionSerializer(serializers.Serializer):
    value = serializers.CharField()
    label = serializers.CharField()


class PriceRangeSerializer(serializers.Serializer):
    min = serializers.FloatField(allow_null=True)
    max = serializers.FloatField(allow_null=True)


class FilterStateSerializer(serializers.Serializer):
    """Current sort/filter selection used to render the filter controls."""

    sort_options = SortOptionSerializer(many=True)
    sort = SortOptionSerializer()
    available = serializers.ChoiceField(choices=["true", "false"], allow_null=True)
    price = PriceRangeSerializer()
    product_types = serializers.ListField(child=serializers.ChoiceField(choices=PRODUCT_TYPES))
    is_filter_applied = serializers.BooleanField()
