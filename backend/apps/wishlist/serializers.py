from rest_framework import serializers

from apps.catalog.serializers import ProductSnapshotSerializer


class WishlistReadSerializer(serializers.Serializer):
    items = ProductSnapshotSerializer(many=True)
    totalItems = serializers.IntegerField(source="total_items")


class WishlistItemWriteSerializer(serializers.Serializer):
    product = ProductSnapshotSerializer()


class WishlistMembershipSerializer(serializers.Serializer):
    productId = serializers.CharField()
    inWishlist = serializers.BooleanField()
