from dataclasses import dataclass
from typing import List

from apps.catalog.dtos import ProductSnapshot


@dataclass
class WishlistDTO:
    items: List[ProductSnapshot]
    total_items: int
