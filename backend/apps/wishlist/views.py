from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.schemas import ErrorResponseSerializer
from apps.catalog.mappers import ProductSnapshotMapper
from apps.common import get_logger

from .container import build_wishlist_service
from .serializers import (
    WishlistItemWriteSerializer,
    WishlistMembershipSerializer,
    WishlistReadSerializer,
)

logger = get_logger(__name__).bind(component="wishlist", layer="view")


class WishlistViewMixin:
    permission_classes = [AllowAny]

    def get_service(self, request):
        return build_wishlist_service(request.session)

    @staticmethod
    def wishlist_response(service):
        return Response(WishlistReadSerializer(service.to_dto()).data)

    @staticmethod
    def read_product(request):
        serializer = WishlistItemWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return ProductSnapshotMapper.from_dict(serializer.validated_data["product"])


@extend_schema(tags=["Wishlist"])
class WishlistView(WishlistViewMixin, APIView):
    log = logger.bind(view="WishlistView")

    @extend_schema(summary="Get wishlist", responses={200: WishlistReadSerializer})
    def get(self, request):
        return self.wishlist_response(self.get_service(request))

    @extend_schema(
        summary="Clear wishlist", request=None, responses={200: WishlistReadSerializer}
    )
    def delete(self, request):
        service = self.get_service(request)
        service.clear_wishlist()
        self.log.info("Wishlist cleared via API")
        return self.wishlist_response(service)


@extend_schema(tags=["Wishlist"])
class WishlistItemListView(WishlistViewMixin, APIView):
    log = logger.bind(view="WishlistItemListView")

    @extend_schema(
        summary="Save product to wishlist",
        description="Saving a product that is already in the wishlist changes nothing.",
        request=WishlistItemWriteSerializer,
        responses={
            200: WishlistReadSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        product = self.read_product(request)
        service = self.get_service(request)
        service.add_item(product)
        self.log.info("Product saved to wishlist", product_id=product.id)
        return self.wishlist_response(service)


@extend_schema(tags=["Wishlist"])
class WishlistItemToggleView(WishlistViewMixin, APIView):
    log = logger.bind(view="WishlistItemToggleView")

    @extend_schema(
        summary="Toggle product in wishlist",
        request=WishlistItemWriteSerializer,
        responses={
            200: WishlistMembershipSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        product = self.read_product(request)
        in_wishlist = self.get_service(request).toggle_item(product)
        self.log.info(
            "Wishlist membership toggled", product_id=product.id, in_wishlist=in_wishlist
        )
        return Response(
            WishlistMembershipSerializer(
                {"productId": product.id, "inWishlist": in_wishlist}
            ).data
        )


@extend_schema(tags=["Wishlist"])
class WishlistItemDetailView(WishlistViewMixin, APIView):
    log = logger.bind(view="WishlistItemDetailView")

    @extend_schema(
        summary="Check wishlist membership",
        parameters=[OpenApiParameter("product_id", str, OpenApiParameter.PATH)],
        responses={200: WishlistMembershipSerializer},
    )
    def get(self, request, product_id: str):
        in_wishlist = self.get_service(request).is_in_wishlist(product_id)
        return Response(
            WishlistMembershipSerializer(
                {"productId": product_id, "inWishlist": in_wishlist}
            ).data
        )

    @extend_schema(
        summary="Remove product from wishlist",
        parameters=[OpenApiParameter("product_id", str, OpenApiParameter.PATH)],
        request=None,
        responses={200: WishlistReadSerializer},
    )
    def delete(self, request, product_id: str):
        service = self.get_service(request)
        service.remove_item(product_id)
        self.log.info("Product removed from wishlist", product_id=product_id)
        return self.wishlist_response(service)
