"""
recommender/similarity.py
-------------------------
Item-level cosine similarity over rating vectors.
"""

from catalog.schema import Item
from recommender import vector_utils


def cosine_similarity(item_1: Item, item_2: Item) -> float:
    """
    Cosine similarity of two items' ratings.
    An all-zero rating vector is treated as dissimilar to everything (0.0).
    Raises LengthMismatchError if the rating vectors differ in length.
    """
    return vector_utils.cosine_similarity(item_1.rating, item_2.rating)
