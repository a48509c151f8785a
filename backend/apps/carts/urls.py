from django.urls import path, re_path
from .views import CartItemDetailView, CartItemListView, CartView

urlpatterns = [
    path("", CartView.as_view(), name="api-cart"),
    path("items/", CartItemListView.as_view(), name="api-cart-items"),
    # Accept an optional trailing slash on item detail
    re_path(
        r"^items/(?P<product_id>[^/]+)/?$",
        CartItemDetailView.as_view(),
        name="api-cart-item-detail",
    ),
]
