"""
catalog/validate_catalog.py
---------------------------
Ensures a catalog document is well-formed and schema-consistent
before it is turned into a Catalog.
"""

import json
import sys
from pathlib import Path

CATALOG_PATH = Path(__file__).parent / "catalog.json"

REQUIRED_ITEM_FIELDS = ["id", "title", "rating"]
REQUIRED_KEY_FIELDS = ["title", "weight"]


def validate_catalog(data: dict) -> dict:
    """Raise ValueError/TypeError on the first problem found; return `data` otherwise."""
    if not isinstance(data, dict):
        raise TypeError("catalog document must be an object with 'keys' and 'items'")

    keys = data.get("keys", [])
    items = data.get("items")
    if items is None:
        raise ValueError("Missing field 'items' in catalog")
    if not isinstance(keys, list):
        raise TypeError("keys field must be a list")
    if not isinstance(items, list):
        raise TypeError("items field must be a list")

    for idx, key in enumerate(keys):
        for field in REQUIRED_KEY_FIELDS:
            if field not in key:
                raise ValueError(f"Missing field '{field}' in key {idx}")

    expected_len = len(keys) if keys else None
    seen = set()
    for idx, item in enumerate(items):
        for field in REQUIRED_ITEM_FIELDS:
            if field not in item:
                raise ValueError(f"Missing field '{field}' in item {idx}")
        if not isinstance(item["rating"], list):
            raise TypeError(f"rating field must be a list in item {item['id']}")

        id_key = str(item["id"])
        if id_key in seen:
            raise ValueError(f"Duplicate item id {item['id']!r}")
        seen.add(id_key)

        if expected_len is None:
            expected_len = len(item["rating"])
        if len(item["rating"]) != expected_len:
            raise ValueError(
                f"rating of item {item['id']} has {len(item['rating'])} values, expected {expected_len}"
            )
    return data


def validate_catalog_file(path: Path = CATALOG_PATH) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    validate_catalog(data)
    print(f"✅ Catalog validated successfully: {len(data['items'])} items, {len(data.get('keys', []))} keys")
    return data


if __name__ == "__main__":
    validate_catalog_file(Path(sys.argv[1]) if len(sys.argv) > 1 else CATALOG_PATH)
