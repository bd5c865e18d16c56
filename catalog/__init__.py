"""
catalog/__init__.py
-------------------
Expose the catalog data model and loaders.
"""

from .schema import Item, AttributeKey
from .store import Catalog
from .loader import load_catalog, catalog_from_dict

__all__ = ["Item", "AttributeKey", "Catalog", "load_catalog", "catalog_from_dict"]
