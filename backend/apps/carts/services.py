from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import List

from apps.catalog.dtos import ProductSnapshot
from apps.common import get_logger

from .commands import (
    AddItem,
    CartCommand,
    ClearCart,
    LoadCart,
    RemoveItem,
    UpdateQuantity,
)
from .dtos import CartDTO, CartItemDTO, CartSummaryDTO
from .protocols import CartRepositoryProtocol
from .reducers import reduce_cart

logger = get_logger(__name__).bind(component="carts", layer="service")


@dataclass(frozen=True)
class CartPricing:
    tax_rate: Decimal = Decimal("0.18")
    free_shipping_threshold: Decimal = Decimal("5000")
    shipping_fee: Decimal = Decimal("200")


class CartService:
    """
    Shopping cart for one visitor, mirrored to persistent storage.

    The cart is hydrated once on construction. Every mutation runs the pure
    reducer, replaces the in-memory list, then writes the full list back
    through the repository. Storage problems never surface here: the
    repository absorbs them and the in-memory list stays authoritative.
    """

    def __init__(
        self,
        repository: CartRepositoryProtocol,
        pricing: CartPricing = CartPricing(),
    ):
        self.repository = repository
        self.pricing = pricing
        self.logger = logger.bind(service="CartService")
        self._items: List[CartItemDTO] = []
        self._dispatch(LoadCart(items=self.repository.load()), persist=False)

    @property
    def items(self) -> List[CartItemDTO]:
        return list(self._items)

    def add_item(self, product: ProductSnapshot, quantity: int = 1) -> None:
        self.logger.debug("Adding cart item", product_id=product.id, quantity=quantity)
        self._dispatch(AddItem(product=product, quantity=quantity))

    def remove_item(self, product_id: str) -> None:
        self.logger.debug("Removing cart item", product_id=product_id)
        self._dispatch(RemoveItem(product_id=product_id))

    def update_quantity(self, product_id: str, quantity: int) -> None:
        self.logger.debug(
            "Updating cart item quantity", product_id=product_id, quantity=quantity
        )
        self._dispatch(UpdateQuantity(product_id=product_id, quantity=quantity))

    def clear_cart(self) -> None:
        self.logger.info("Clearing cart", count=len(self._items))
        self._dispatch(ClearCart())

    def get_total_items(self) -> int:
        return sum(item.quantity for item in self._items)

    def get_total_price(self) -> Decimal:
        return sum((item.line_total for item in self._items), Decimal("0"))

    def get_summary(self) -> CartSummaryDTO:
        subtotal = self.get_total_price()
        tax = (subtotal * self.pricing.tax_rate).quantize(
            Decimal("1"), rounding=ROUND_HALF_UP
        )
        threshold = self.pricing.free_shipping_threshold
        if not self._items or subtotal >= threshold:
            shipping = Decimal("0")
        else:
            shipping = self.pricing.shipping_fee
        return CartSummaryDTO(
            total_items=self.get_total_items(),
            subtotal=subtotal,
            tax=tax,
            shipping=shipping,
            total=subtotal + tax + shipping,
            free_shipping_remaining=max(Decimal("0"), threshold - subtotal),
        )

    def to_dto(self) -> CartDTO:
        return CartDTO(
            items=self.items,
            total_items=self.get_total_items(),
            total_price=self.get_total_price(),
            summary=self.get_summary(),
        )

    def _dispatch(self, command: CartCommand, persist: bool = True) -> None:
        self._items = reduce_cart(self._items, command)
        if persist and not self.repository.save(self._items):
            self.logger.warning(
                "Cart kept in memory only; persistence failed",
                command=type(command).__name__,
            )
