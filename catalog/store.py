"""
catalog/store.py
----------------
In-memory catalog: an ordered list of items plus the attribute keys
their rating vectors are measured against.
"""

from __future__ import annotations
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from catalog.schema import AttributeKey, Item
from recommender.errors import DuplicateItemError


def _id_key(item_id: Union[int, str]) -> str:
    # int and str spellings of an id address the same item
    return str(item_id)


class Catalog:
    def __init__(self, items: Iterable[Item] = (), keys: Iterable[AttributeKey] = ()):
        self._items: List[Item] = []
        self._index: Dict[str, Item] = {}
        self._keys: List[AttributeKey] = []
        for key in keys:
            self.add_key(key)
        for item in items:
            self.add_item(item)

    # ── population ────────────────────────────────────────────
    def add_key(self, key: AttributeKey) -> None:
        self._keys.append(key)

    def add_item(self, item: Item) -> None:
        """Append an item. Identifiers must be unique within the catalog."""
        id_key = _id_key(item.id)
        if id_key in self._index:
            raise DuplicateItemError(item.id)
        self._items.append(item)
        self._index[id_key] = item

    # ── read access ───────────────────────────────────────────
    @property
    def items(self) -> Tuple[Item, ...]:
        return tuple(self._items)

    @property
    def keys(self) -> Tuple[AttributeKey, ...]:
        return tuple(self._keys)

    @property
    def rating_length(self) -> Optional[int]:
        return len(self._items[0].rating) if self._items else None

    def get_item_by_id(self, item_id: Union[int, str]) -> Optional[Item]:
        """Fetch an item by its ID, or None."""
        return self._index.get(_id_key(item_id))

    def list_all_items(self, limit: Optional[int] = None) -> List[Item]:
        """Return all items, optionally limited to N."""
        return list(self._items) if limit is None else self._items[:limit]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def __contains__(self, item_id) -> bool:
        return _id_key(item_id) in self._index

    def __repr__(self) -> str:
        return f"Catalog(items={len(self._items)}, keys={len(self._keys)})"
