"""Shared test fixtures."""

from dataclasses import dataclass

import pytest

from collares import Copier


@dataclass(slots=True)
class FixtureItem:
    product: str = ""
    price: float = 0.0


@dataclass(slots=True)
class FixtureRecord:
    id: int = 0
    product: str = ""
    price: float = 0.0


@pytest.fixture
def copier():
    """Copier without shape caching."""
    return Copier()


@pytest.fixture
def cached_copier():
    """Copier memoizing shapes per type."""
    return Copier(cache_shapes=True)


@pytest.fixture
def item_cls():
    return FixtureItem


@pytest.fixture
def record_cls():
    return FixtureRecord
