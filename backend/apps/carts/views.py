from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.schemas import ErrorResponseSerializer
from apps.catalog.mappers import ProductSnapshotMapper
from apps.common import get_logger

from .container import build_cart_service
from .serializers import (
    CartItemAddSerializer,
    CartItemQuantitySerializer,
    CartReadSerializer,
)

logger = get_logger(__name__).bind(component="carts", layer="view")


class CartViewMixin:
    permission_classes = [AllowAny]

    def get_service(self, request):
        return build_cart_service(request.session)

    @staticmethod
    def cart_response(service, http_status=status.HTTP_200_OK):
        return Response(CartReadSerializer(service.to_dto()).data, status=http_status)


@extend_schema(tags=["Cart"])
class CartView(CartViewMixin, APIView):
    log = logger.bind(view="CartView")

    @extend_schema(
        summary="Get cart",
        description="Returns the visitor's cart with item and price totals.",
        responses={200: CartReadSerializer},
    )
    def get(self, request):
        return self.cart_response(self.get_service(request))

    @extend_schema(
        summary="Clear cart",
        request=None,
        responses={200: CartReadSerializer},
    )
    def delete(self, request):
        service = self.get_service(request)
        service.clear_cart()
        self.log.info("Cart cleared via API")
        return self.cart_response(service)


@extend_schema(tags=["Cart"])
class CartItemListView(CartViewMixin, APIView):
    log = logger.bind(view="CartItemListView")

    @extend_schema(
        summary="Add product to cart",
        description=(
            "Adds a product snapshot to the cart. If the product is already in the cart its "
            "quantity grows by the given amount. Stock limits are not enforced here."
        ),
        request=CartItemAddSerializer,
        responses={
            200: CartReadSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = CartItemAddSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        product = ProductSnapshotMapper.from_dict(serializer.validated_data["product"])
        quantity = serializer.validated_data["quantity"]
        service = self.get_service(request)
        service.add_item(product, quantity)
        self.log.info("Product added to cart", product_id=product.id, quantity=quantity)
        return self.cart_response(service)


@extend_schema(tags=["Cart"])
class CartItemDetailView(CartViewMixin, APIView):
    log = logger.bind(view="CartItemDetailView")

    @extend_schema(
        summary="Set cart item quantity",
        description=(
            "Sets the quantity of a product already in the cart. A quantity of zero or less "
            "removes the product. Unknown products are ignored."
        ),
        parameters=[OpenApiParameter("product_id", str, OpenApiParameter.PATH)],
        request=CartItemQuantitySerializer,
        responses={
            200: CartReadSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def patch(self, request, product_id: str):
        serializer = CartItemQuantitySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        quantity = serializer.validated_data["quantity"]
        service = self.get_service(request)
        service.update_quantity(product_id, quantity)
        self.log.info("Cart quantity updated", product_id=product_id, quantity=quantity)
        return self.cart_response(service)

    @extend_schema(
        summary="Remove product from cart",
        parameters=[OpenApiParameter("product_id", str, OpenApiParameter.PATH)],
        request=None,
        responses={200: CartReadSerializer},
    )
    def delete(self, request, product_id: str):
        service = self.get_service(request)
        service.remove_item(product_id)
        self.log.info("Product removed from cart", product_id=product_id)
        return self.cart_response(service)
