"""
recommender/recommend.py
------------------------
Ranks every other catalog item by cosine similarity to a query item
and returns the top-k.
"""

from __future__ import annotations
from functools import cmp_to_key
from typing import List, Union

from catalog.store import Catalog
from recommender.errors import ItemNotFoundError
from recommender.schema import RankedResult
from recommender.similarity import cosine_similarity

DEFAULT_TOP_K = 5


def _by_similarity_desc(a: RankedResult, b: RankedResult) -> int:
    # NaN compares neither greater nor smaller, so it falls through to 0
    if a.similarity > b.similarity:
        return -1
    if a.similarity < b.similarity:
        return 1
    return 0


# ---------------------------------------------------------------------------
# Core Recommender
# ---------------------------------------------------------------------------

def get_similar(catalog: Catalog, query_id: Union[int, str], k: int = DEFAULT_TOP_K) -> List[RankedResult]:
    """
    Return up to `k` items most similar to `query_id`, best first.
    The query item itself is never included. Equal scores keep catalog order.
    Raises ItemNotFoundError for an unknown id and LengthMismatchError
    when a candidate's ratings differ in length from the query's.
    """
    if k < 0:
        raise ValueError(f"k must be >= 0, got {k}")

    item = catalog.get_item_by_id(query_id)
    if item is None:
        raise ItemNotFoundError(query_id)

    results = []
    for candidate in catalog:
        if candidate.id == item.id:
            continue
        results.append(RankedResult(
            item_id=candidate.id,
            title=candidate.title,
            similarity=cosine_similarity(item, candidate),
        ))

    # sorted() is stable, ties keep catalog order
    results = sorted(results, key=cmp_to_key(_by_similarity_desc))
    return results[:k]
