from collections.abc import Mapping
from decimal import Decimal

from rest_framework import serializers

from .mappers import ProductSnapshotMapper


class SpecificationsSerializer(serializers.Serializer):
    metal = serializers.CharField(allow_blank=True, default="")
    purity = serializers.CharField(allow_blank=True, default="")
    weight = serializers.CharField(allow_blank=True, default="")
    stones = serializers.ListField(child=serializers.CharField(), default=list)
    hallmarked = serializers.BooleanField(default=True)


class ProductSnapshotSerializer(serializers.Serializer):
    # Matches ProductSnapshot; only the identifier is mandatory on input.
    id = serializers.CharField(max_length=64)
    name = serializers.CharField(allow_blank=True, default="")
    slug = serializers.CharField(allow_blank=True, default="")
    price = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=Decimal("0"), default=Decimal("0")
    )
    images = serializers.ListField(child=serializers.CharField(), default=list)
    category = serializers.CharField(allow_blank=True, default="")
    specifications = SpecificationsSerializer(required=False)
    stock = serializers.IntegerField(min_value=0, default=0)
    featured = serializers.BooleanField(default=False)

    def to_internal_value(self, data):
        # Catalog documents expose their identifier as ``_id``.
        if isinstance(data, Mapping) and "id" not in data and "_id" in data:
            data = {**data, "id": data["_id"]}
        return super().to_internal_value(data)

    def to_representation(self, instance):
        if instance is None:
            return None
        if hasattr(instance, "__dataclass_fields__"):
            return ProductSnapshotMapper.to_dict(instance)
        return super().to_representation(instance)
