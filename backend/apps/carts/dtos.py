from dataclasses import dataclass
from decimal import Decimal
from typing import List

from apps.catalog.dtos import ProductSnapshot


@dataclass(frozen=True)
class CartItemDTO:
    product: ProductSnapshot
    quantity: int

    @property
    def line_total(self) -> Decimal:
        return self.product.price * self.quantity


@dataclass
class CartSummaryDTO:
    total_items: int
    subtotal: Decimal
    tax: Decimal
    shipping: Decimal
    total: Decimal
    free_shipping_remaining: Decimal


@dataclass
class CartDTO:
    items: List[CartItemDTO]
    total_items: int
    total_price: Decimal
    summary: CartSummaryDTO
