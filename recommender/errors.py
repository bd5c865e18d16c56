"""
recommender/errors.py
---------------------
Error types raised by the similarity core. Nothing here is retried:
each one marks bad catalog data or a bad query.
"""

from __future__ import annotations
from typing import Union

ItemId = Union[int, str]


class SimilarityError(Exception):
    """Base class for similarity engine failures."""


class LengthMismatchError(SimilarityError, ValueError):
    """Two rating vectors of different length were compared."""

    def __init__(self, left: int, right: int):
        self.left = left
        self.right = right
        super().__init__(f"Rating vectors must have equal length (got {left} and {right}).")


class ItemNotFoundError(SimilarityError, LookupError):
    """No catalog item carries the requested identifier."""

    def __init__(self, item_id: ItemId):
        self.item_id = item_id
        super().__init__(f"Couldn't find item {item_id!r}")


class DuplicateItemError(SimilarityError, ValueError):
    """An item identifier is already present in the catalog."""

    def __init__(self, item_id: ItemId):
        self.item_id = item_id
        super().__init__(f"Duplicate item id {item_id!r}")
