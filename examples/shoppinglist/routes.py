"""Shopping list resource routes.

Please do not use this as a template for a web service; it only illustrates
how records are projected onto wire models with ``copy_from``.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request, status

from collares import copy_from
from examples.shoppinglist.envelopes import (
    CollectionResponse,
    HrefType,
    InfoResponse,
    ResourceResponse,
)
from examples.shoppinglist.models import (
    ShoppinglistInfo,
    ShoppinglistInfoData,
    ShoppinglistItem,
    ShoppinglistItemRecord,
)
from examples.shoppinglist.store import ShoppinglistStore

logger = logging.getLogger(__name__)

ITEMS_HREF = "api/shoppinglist/items"

router = APIRouter()


def get_store(request: Request) -> ShoppinglistStore:
    return request.app.state.store


def _item_response(record: ShoppinglistItemRecord) -> ResourceResponse[ShoppinglistItem]:
    response = ResourceResponse[ShoppinglistItem](
        id=record.id, data=copy_from(ShoppinglistItem(), record)
    )
    # The client may delete or patch this resource
    response.add_href(HrefType.DELETE, f"{ITEMS_HREF}/{record.id}")
    response.add_href(HrefType.PATCH, f"{ITEMS_HREF}/{record.id}")
    return response


def _require(store: ShoppinglistStore, item_id: int) -> ShoppinglistItemRecord:
    record = store.get(item_id)
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"Item {item_id} not found"
        )
    return record


@router.get("/rawitems")
def get_raw_items(store: ShoppinglistStore = Depends(get_store)) -> list[dict]:
    """Stored records as they are."""
    return [
        {"id": r.id, "product": r.product, "price": str(r.price)} for r in store
    ]


@router.get("/items")
def get_items(
    store: ShoppinglistStore = Depends(get_store),
) -> CollectionResponse[ShoppinglistItem]:
    """All items, each wrapped in a resource envelope."""
    response = CollectionResponse[ShoppinglistItem]()
    response.add_href(HrefType.POST, ITEMS_HREF)
    for record in store:
        response.data.append(_item_response(record))
    return response


@router.get("/items/info")
def get_items_info(
    store: ShoppinglistStore = Depends(get_store),
) -> InfoResponse[ShoppinglistInfoData]:
    """Summary of the list, including the read-only list name."""
    info = ShoppinglistInfo(number_of_items=len(store))
    response = InfoResponse[ShoppinglistInfoData](data=copy_from(ShoppinglistInfoData(), info))
    response.add_href(HrefType.POST, ITEMS_HREF)
    response.add_href(HrefType.GET, ITEMS_HREF)
    return response


@router.get("/items/{item_id}")
def get_item(
    item_id: int, store: ShoppinglistStore = Depends(get_store)
) -> ResourceResponse[ShoppinglistItem]:
    return _item_response(_require(store, item_id))


@router.post("/items/{item_id}")
def post_item(
    item_id: int, item: ShoppinglistItem, store: ShoppinglistStore = Depends(get_store)
) -> dict:
    if item_id in store:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=f"Item {item_id} exists")
    store.add(ShoppinglistItemRecord(id=item_id).copy_from(item))
    return {}


@router.delete("/items/{item_id}")
def delete_item(item_id: int, store: ShoppinglistStore = Depends(get_store)) -> dict:
    if not store.remove(item_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"Item {item_id} not found"
        )
    return {}


@router.patch("/items/{item_id}")
def patch_item(
    item_id: int, item: ShoppinglistItem, store: ShoppinglistStore = Depends(get_store)
) -> dict:
    record = _require(store, item_id)
    record.copy_from(item)
    logger.info("Patched item %d", item_id)
    return {}


def create_app(store: ShoppinglistStore | None = None) -> FastAPI:
    """Build the example application.

    Args:
        store: Record store to serve. Defaults to a freshly seeded store.
    """
    app = FastAPI(title="Collares Shoppinglist Example", version="0.1.0")
    app.state.store = store if store is not None else ShoppinglistStore()
    app.include_router(router, prefix="/shoppinglist", tags=["Shoppinglist"])
    return app
