from __future__ import annotations

from decimal import Decimal

from django.conf import settings

from apps.catalog.mappers import ProductSnapshotMapper
from apps.common.storage import SessionStorage

from .mappers import CartItemMapper
from .repositories import DEFAULT_CART_STORAGE_KEY, CartRepository
from .services import CartPricing, CartService


def build_cart_pricing() -> CartPricing:
    defaults = CartPricing()
    return CartPricing(
        tax_rate=Decimal(str(getattr(settings, "CART_TAX_RATE", defaults.tax_rate))),
        free_shipping_threshold=Decimal(
            str(
                getattr(
                    settings,
                    "CART_FREE_SHIPPING_THRESHOLD",
                    defaults.free_shipping_threshold,
                )
            )
        ),
        shipping_fee=Decimal(
            str(getattr(settings, "CART_SHIPPING_FEE", defaults.shipping_fee))
        ),
    )


def build_cart_service(session) -> CartService:
    repository = CartRepository(
        storage=SessionStorage(session),
        key=getattr(settings, "CART_STORAGE_KEY", DEFAULT_CART_STORAGE_KEY),
        mapper=CartItemMapper(ProductSnapshotMapper()),
    )
    return CartService(repository=repository, pricing=build_cart_pricing())
