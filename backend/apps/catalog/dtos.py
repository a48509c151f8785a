"""DTO dataclasses only. Dict conversion lives in mappers.py."""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Tuple


@dataclass(frozen=True)
class SpecificationsSnapshot:
    metal: str = ""
    purity: str = ""
    weight: str = ""
    stones: Tuple[str, ...] = ()
    hallmarked: bool = True


@dataclass(frozen=True)
class ProductSnapshot:
    id: str
    name: str = ""
    slug: str = ""
    price: Decimal = Decimal("0")
    images: Tuple[str, ...] = ()
    category: str = ""
    specifications: SpecificationsSnapshot = field(default_factory=SpecificationsSnapshot)
    stock: int = 0
    featured: bool = False
