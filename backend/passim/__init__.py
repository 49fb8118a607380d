"""Passim — shared, content-addressed cache items."""

from passim.errors import (
    ItemFileError,
    ItemHashError,
    ItemNotFoundError,
    ItemStatError,
    ItemWireError,
    PassimError,
)
from passim.models.item import Item

__version__ = "0.1.0"

__all__ = [
    "Item",
    "PassimError",
    "ItemFileError",
    "ItemStatError",
    "ItemNotFoundError",
    "ItemHashError",
    "ItemWireError",
    "__version__",
]
