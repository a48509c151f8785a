from typing import Any, Dict, Iterable, List, Mapping, Optional

from apps.catalog.mappers import ProductSnapshotMapper

from .dtos import CartItemDTO


class CartItemMapper:
    def __init__(self, product_mapper: Optional[ProductSnapshotMapper] = None) -> None:
        self.product_mapper = product_mapper or ProductSnapshotMapper()

    def to_dict(self, item: CartItemDTO) -> Dict[str, Any]:
        return {
            "product": self.product_mapper.to_dict(item.product),
            "quantity": item.quantity,
        }

    def from_dict(self, raw: Any) -> CartItemDTO:
        if not isinstance(raw, Mapping):
            raise ValueError("cart item must be an object")
        quantity = raw.get("quantity")
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValueError(f"invalid cart quantity {quantity!r}")
        if quantity < 1:
            raise ValueError(f"cart quantity must be positive, got {quantity}")
        return CartItemDTO(
            product=self.product_mapper.from_dict(raw.get("product")),
            quantity=quantity,
        )

    def many_to_dict(self, items: Iterable[CartItemDTO]) -> List[Dict[str, Any]]:
        return [self.to_dict(i) for i in items]
