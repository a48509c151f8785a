from __future__ import annotations

from django.conf import settings

from apps.catalog.mappers import ProductSnapshotMapper
from apps.common.storage import SessionStorage

from .repositories import DEFAULT_WISHLIST_STORAGE_KEY, WishlistRepository
from .services import WishlistService


def build_wishlist_service(session) -> WishlistService:
    return WishlistService(
        repository=WishlistRepository(
            storage=SessionStorage(session),
            key=getattr(settings, "WISHLIST_STORAGE_KEY", DEFAULT_WISHLIST_STORAGE_KEY),
            mapper=ProductSnapshotMapper(),
        )
    )
