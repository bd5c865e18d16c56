"""
catalog/loader.py
-----------------
Loads a catalog document (JSON) into an in-memory Catalog.
The bundled catalog.json is a small demo set of shows and movies
rated on Comedy and Action.
"""

import json
from pathlib import Path
from typing import Optional, Union

from catalog.schema import AttributeKey, Item
from catalog.store import Catalog
from catalog.validate_catalog import CATALOG_PATH, validate_catalog


def catalog_from_dict(data: dict) -> Catalog:
    """Validate a parsed catalog document and build a Catalog from it."""
    validate_catalog(data)
    catalog = Catalog()
    for key in data.get("keys", []):
        catalog.add_key(AttributeKey(**key))
    for item in data["items"]:
        catalog.add_item(Item(**item))
    return catalog


def load_catalog(path: Optional[Union[str, Path]] = None) -> Catalog:
    """Return the catalog stored at `path` (defaults to the bundled demo)."""
    with open(path or CATALOG_PATH, "r", encoding="utf-8") as f:
        return catalog_from_dict(json.load(f))
