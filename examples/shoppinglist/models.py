"""Shopping list records and wire models.

Records are what the store keeps; wire models are what clients send and
receive. The two are unrelated types that share member names, so the
translation between them is a structural copy.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from pydantic import BaseModel

from collares import CopyFrom


@dataclass(slots=True)
class ShoppinglistItemRecord(CopyFrom):
    """Stored shopping list entry."""

    id: int
    product: str = ""
    price: Decimal = Decimal("0")


class ShoppinglistItem(BaseModel):
    """Shopping list entry as sent and received over the wire."""

    product: str = ""
    price: Decimal = Decimal("0")


@dataclass(slots=True)
class ShoppinglistInfo:
    """Summary of the shopping list."""

    number_of_items: int = 0

    @property
    def name(self) -> str:
        return "Shoppinglist Controller"


class ShoppinglistInfoData(BaseModel):
    """Summary of the shopping list as sent over the wire."""

    name: str = ""
    number_of_items: int = 0
