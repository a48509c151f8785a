from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterable, List, Mapping

from .dtos import ProductSnapshot, SpecificationsSnapshot


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, bool):
        raise ValueError("price must be numeric, got bool")
    if isinstance(value, float):
        value = str(value)
    try:
        price = value if isinstance(value, Decimal) else Decimal(value)
    except (InvalidOperation, TypeError) as exc:
        raise ValueError(f"invalid price {value!r}") from exc
    if not price.is_finite() or price < 0:
        raise ValueError(f"price must be a finite non-negative number, got {value!r}")
    return price


def _str_tuple(values: Any) -> tuple:
    if values is None:
        return ()
    if isinstance(values, str) or not isinstance(values, Iterable):
        raise ValueError(f"expected a list of strings, got {type(values).__name__}")
    return tuple(str(v) for v in values)


class SpecificationsMapper:
    @staticmethod
    def to_dict(spec: SpecificationsSnapshot) -> Dict[str, Any]:
        return {
            "metal": spec.metal,
            "purity": spec.purity,
            "weight": spec.weight,
            "stones": list(spec.stones),
            "hallmarked": spec.hallmarked,
        }

    @staticmethod
    def from_dict(raw: Any) -> SpecificationsSnapshot:
        if raw is None:
            return SpecificationsSnapshot()
        if not isinstance(raw, Mapping):
            raise ValueError("specifications must be an object")
        return SpecificationsSnapshot(
            metal=str(raw.get("metal") or ""),
            purity=str(raw.get("purity") or ""),
            weight=str(raw.get("weight") or ""),
            stones=_str_tuple(raw.get("stones")),
            hallmarked=bool(raw.get("hallmarked", True)),
        )


class ProductSnapshotMapper:
    """Convert product snapshots to and from JSON-compatible dicts.

    ``from_dict`` only insists on an identifier (``id`` or the catalog's
    ``_id``); every other field falls back to a neutral default so that
    snapshots taken from older catalog shapes still load.
    """

    @staticmethod
    def to_dict(product: ProductSnapshot) -> Dict[str, Any]:
        return {
            "id": product.id,
            "name": product.name,
            "slug": product.slug,
            "price": str(product.price),
            "images": list(product.images),
            "category": product.category,
            "specifications": SpecificationsMapper.to_dict(product.specifications),
            "stock": product.stock,
            "featured": product.featured,
        }

    @staticmethod
    def from_dict(raw: Any) -> ProductSnapshot:
        if not isinstance(raw, Mapping):
            raise ValueError("product snapshot must be an object")
        product_id = raw.get("id", raw.get("_id"))
        if product_id is None or str(product_id) == "":
            raise ValueError("product snapshot is missing an identifier")
        try:
            stock = int(raw.get("stock") or 0)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"invalid stock {raw.get('stock')!r}") from exc
        return ProductSnapshot(
            id=str(product_id),
            name=str(raw.get("name") or ""),
            slug=str(raw.get("slug") or ""),
            price=_to_decimal(raw.get("price", 0)),
            images=_str_tuple(raw.get("images")),
            category=str(raw.get("category") or ""),
            specifications=SpecificationsMapper.from_dict(raw.get("specifications")),
            stock=stock,
            featured=bool(raw.get("featured", False)),
        )

    @staticmethod
    def many_from_dict(raws: Iterable[Any]) -> List[ProductSnapshot]:
        return [ProductSnapshotMapper.from_dict(r) for r in raws]
