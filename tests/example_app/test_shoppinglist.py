"""Tests for the shopping list example service."""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from examples.shoppinglist import ShoppinglistStore, create_app

# --- Test Setup ---


@pytest.fixture
def store() -> ShoppinglistStore:
    """Store seeded with apples and pears."""
    return ShoppinglistStore()


@pytest.fixture
def client(store: ShoppinglistStore) -> TestClient:
    return TestClient(create_app(store))


# --- Reads ---


class TestReads:
    def test_raw_items(self, client: TestClient) -> None:
        response = client.get("/shoppinglist/rawitems")

        assert response.status_code == 200
        assert response.json() == [
            {"id": 1, "product": "apples", "price": "3.49"},
            {"id": 2, "product": "pears", "price": "2.99"},
        ]

    def test_items_are_wrapped_with_hrefs(self, client: TestClient) -> None:
        body = client.get("/shoppinglist/items").json()

        assert body["hrefs"] == [{"type": "post", "href": "api/shoppinglist/items"}]
        assert [item["id"] for item in body["data"]] == [1, 2]
        first = body["data"][0]
        assert first["data"] == {"product": "apples", "price": "3.49"}
        assert first["hrefs"] == [
            {"type": "delete", "href": "api/shoppinglist/items/1"},
            {"type": "patch", "href": "api/shoppinglist/items/1"},
        ]

    def test_single_item(self, client: TestClient) -> None:
        body = client.get("/shoppinglist/items/2").json()

        assert body["id"] == 2
        assert body["data"] == {"product": "pears", "price": "2.99"}

    def test_missing_item_is_404(self, client: TestClient) -> None:
        assert client.get("/shoppinglist/items/99").status_code == 404

    def test_info_copies_read_only_name(self, client: TestClient) -> None:
        body = client.get("/shoppinglist/items/info").json()

        assert body["data"] == {"name": "Shoppinglist Controller", "number_of_items": 2}
        assert [h["type"] for h in body["hrefs"]] == ["post", "get"]


# --- Writes ---


class TestWrites:
    def test_post_creates_record(self, client: TestClient, store: ShoppinglistStore) -> None:
        response = client.post(
            "/shoppinglist/items/3", json={"product": "milk", "price": "1.19"}
        )

        assert response.status_code == 200
        record = store.get(3)
        assert record is not None
        assert (record.id, record.product, record.price) == (3, "milk", Decimal("1.19"))

    def test_post_existing_is_409(self, client: TestClient, store: ShoppinglistStore) -> None:
        response = client.post("/shoppinglist/items/1", json={"product": "plums"})

        assert response.status_code == 409
        assert store.get(1).product == "apples"

    def test_patch_updates_in_place(self, client: TestClient, store: ShoppinglistStore) -> None:
        record = store.get(1)

        response = client.patch(
            "/shoppinglist/items/1", json={"product": "green apples", "price": "3.99"}
        )

        assert response.status_code == 200
        assert store.get(1) is record
        assert (record.id, record.product, record.price) == (1, "green apples", Decimal("3.99"))

    def test_patch_missing_is_404(self, client: TestClient) -> None:
        assert client.patch("/shoppinglist/items/42", json={"product": "x"}).status_code == 404

    def test_delete(self, client: TestClient, store: ShoppinglistStore) -> None:
        assert client.delete("/shoppinglist/items/2").status_code == 200
        assert len(store) == 1
        assert client.delete("/shoppinglist/items/2").status_code == 404


# --- Store ---


def test_store_rejects_duplicate_ids(store: ShoppinglistStore) -> None:
    with pytest.raises(KeyError):
        store.add(store.get(1))


def test_empty_store() -> None:
    store = ShoppinglistStore(records=[])

    assert len(store) == 0
    assert list(store) == []
