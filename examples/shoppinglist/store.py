"""In-memory record store standing in for a database."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from decimal import Decimal

from examples.shoppinglist.models import ShoppinglistItemRecord

logger = logging.getLogger(__name__)


def seed_records() -> list[ShoppinglistItemRecord]:
    return [
        ShoppinglistItemRecord(id=1, product="apples", price=Decimal("3.49")),
        ShoppinglistItemRecord(id=2, product="pears", price=Decimal("2.99")),
    ]


class ShoppinglistStore:
    """Keeps records in insertion order, keyed by id."""

    def __init__(self, records: Iterable[ShoppinglistItemRecord] | None = None) -> None:
        self._records: dict[int, ShoppinglistItemRecord] = {}
        for record in seed_records() if records is None else records:
            self._records[record.id] = record

    def __iter__(self) -> Iterator[ShoppinglistItemRecord]:
        return iter(list(self._records.values()))

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._records

    def get(self, item_id: int) -> ShoppinglistItemRecord | None:
        return self._records.get(item_id)

    def add(self, record: ShoppinglistItemRecord) -> None:
        """Store a new record.

        Raises:
            KeyError: If a record with the same id exists.
        """
        if record.id in self._records:
            raise KeyError(record.id)
        self._records[record.id] = record
        logger.info("Added item %d (%s)", record.id, record.product)

    def remove(self, item_id: int) -> bool:
        """Remove a record. Returns False if it did not exist."""
        record = self._records.pop(item_id, None)
        if record is None:
            return False
        logger.info("Removed item %d", item_id)
        return True
