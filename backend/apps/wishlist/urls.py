from django.urls import path, re_path
from .views import (
    WishlistItemDetailView,
    WishlistItemListView,
    WishlistItemToggleView,
    WishlistView,
)

urlpatterns = [
    path("", WishlistView.as_view(), name="api-wishlist"),
    path("items/", WishlistItemListView.as_view(), name="api-wishlist-items"),
    path(
        "items/toggle/",
        WishlistItemToggleView.as_view(),
        name="api-wishlist-item-toggle",
    ),
    re_path(
        r"^items/(?P<product_id>[^/]+)/?$",
        WishlistItemDetailView.as_view(),
        name="api-wishlist-item-detail",
    ),
]
