"""Projection journeys: records to wire models and back, per item."""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import astuple, dataclass

from pydantic import BaseModel

from collares import Copier, copy_from


@dataclass(slots=True)
class StoredItem:
    id: int
    product: str = ""
    price: float = 0.0


class WireItem(BaseModel):
    product: str = ""
    price: float = 0.0


def test_round_trip_keeps_identity_fields():
    record = StoredItem(id=5, product="apples", price=3.49)

    wire = copy_from(WireItem(), record)
    wire.price = 2.49
    copy_from(record, wire)

    assert astuple(record) == (5, "apples", 2.49)


def test_per_item_calls_match_isolated_calls(record_cls, item_cls):
    """Copying a collection item by item behaves like isolated single copies."""
    records = [record_cls(id=i, product=f"p{i}", price=float(i)) for i in range(20)]

    batch = [copy_from(item_cls(), r) for r in records]
    isolated = [copy_from(item_cls(), records[i]) for i in range(len(records))]

    assert [(b.product, b.price) for b in batch] == [(i.product, i.price) for i in isolated]


def test_same_copier_across_threads(cached_copier):
    records = [StoredItem(id=i, product=f"p{i}", price=float(i)) for i in range(200)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        wires = list(pool.map(lambda r: cached_copier.copy_from(WireItem(), r), records))

    assert [(w.product, w.price) for w in wires] == [(r.product, r.price) for r in records]


def test_cached_and_uncached_copiers_agree(copier, cached_copier):
    record = StoredItem(id=1, product="pears", price=2.99)

    assert copier.plan(WireItem(), record) == cached_copier.plan(WireItem(), record)
    assert Copier().copy_from(WireItem(), record) == cached_copier.copy_from(WireItem(), record)
