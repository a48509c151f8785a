from django.urls import include, path

urlpatterns = [
    path("cart/", include("apps.carts.urls")),
    path("wishlist/", include("apps.wishlist.urls")),
]
