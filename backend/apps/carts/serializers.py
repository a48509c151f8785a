from rest_framework import serializers

from apps.catalog.serializers import ProductSnapshotSerializer

# Largest quantity one request may add or set.
MAX_ITEM_QUANTITY = 1_000_000


class CartItemSerializer(serializers.Serializer):
    product = ProductSnapshotSerializer()
    quantity = serializers.IntegerField()
    lineTotal = serializers.DecimalField(
        max_digits=None, decimal_places=2, source="line_total", read_only=True
    )


class CartSummarySerializer(serializers.Serializer):
    totalItems = serializers.IntegerField(source="total_items")
    subtotal = serializers.DecimalField(max_digits=None, decimal_places=2)
    tax = serializers.DecimalField(max_digits=None, decimal_places=2)
    shipping = serializers.DecimalField(max_digits=None, decimal_places=2)
    total = serializers.DecimalField(max_digits=None, decimal_places=2)
    freeShippingRemaining = serializers.DecimalField(
        max_digits=None, decimal_places=2, source="free_shipping_remaining"
    )


class CartReadSerializer(serializers.Serializer):
    items = CartItemSerializer(many=True)
    totalItems = serializers.IntegerField(source="total_items")
    totalPrice = serializers.DecimalField(
        max_digits=None, decimal_places=2, source="total_price"
    )
    summary = CartSummarySerializer()


class CartItemAddSerializer(serializers.Serializer):
    product = ProductSnapshotSerializer()
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_ITEM_QUANTITY, default=1)


class CartItemQuantitySerializer(serializers.Serializer):
    # Zero or negative removes the line, mirroring the store contract.
    quantity = serializers.IntegerField(max_value=MAX_ITEM_QUANTITY)
