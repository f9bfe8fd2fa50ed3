"""Shopping list web service built on the structural copier.

Records kept by the store and models sent over the wire are unrelated types;
routes translate between them with ``copy_from``.
"""

from examples.shoppinglist.routes import create_app
from examples.shoppinglist.store import ShoppinglistStore

__all__ = [
    "ShoppinglistStore",
    "create_app",
]
