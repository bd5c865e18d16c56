"""
recommender/vector_utils.py
---------------------------
Atomic math utilities for rating vectors: dot product, magnitude
and zero-safe cosine similarity.
Used by recommender.similarity and the ranking engine.
"""

import math

import numpy as np

from recommender.errors import LengthMismatchError


def _as_vector(vec) -> np.ndarray:
    arr = np.asarray(vec, dtype=np.float64)
    if arr.ndim != 1:
        raise ValueError(f"Expected a 1-D rating vector, got shape {arr.shape}")
    return arr


def _check_lengths(a: np.ndarray, b: np.ndarray) -> None:
    if a.shape[0] != b.shape[0]:
        raise LengthMismatchError(a.shape[0], b.shape[0])


def _scaled(vec: np.ndarray):
    """
    Split `vec` into (scale, vec / scale) with scale = max |element|,
    so sums of squares neither underflow nor overflow.
    """
    scale = float(np.max(np.abs(vec))) if vec.size else 0.0
    if scale == 0.0 or not math.isfinite(scale):
        return scale, vec
    return scale, vec / scale


def _sum_products(a: np.ndarray, b: np.ndarray) -> float:
    # fsum is exactly rounded, so equal inputs always give equal sums
    return math.fsum((a * b).tolist())


# === CORE MATH ===
def dot_product(a, b) -> float:
    """
    Sum of pairwise products of `a` and `b`.
    Raises LengthMismatchError when the vectors differ in length.
    """
    a = _as_vector(a)
    b = _as_vector(b)
    _check_lengths(a, b)
    return float(np.dot(a, b))


def magnitude(vec) -> float:
    """Euclidean length of `vec` (0.0 for empty or all-zero vectors)."""
    scale, unit = _scaled(_as_vector(vec))
    if scale == 0.0 or not math.isfinite(scale):
        return scale
    return scale * math.sqrt(_sum_products(unit, unit))


def cosine_similarity(a, b) -> float:
    """
    Cosine of the angle between `a` and `b`, clipped to [-1, 1].
    A zero-magnitude side scores 0.0 instead of dividing by zero.
    A vector compared with itself scores exactly 1.0.
    """
    a = _as_vector(a)
    b = _as_vector(b)
    _check_lengths(a, b)

    scale_a, a = _scaled(a)
    scale_b, b = _scaled(b)
    if scale_a == 0.0 or scale_b == 0.0:
        return 0.0
    if not (math.isfinite(scale_a) and math.isfinite(scale_b)):
        return math.nan

    # sqrt(x * x) == x in IEEE arithmetic, which keeps cos(v, v) at 1.0
    squares = _sum_products(a, a) * _sum_products(b, b)
    return float(np.clip(_sum_products(a, b) / math.sqrt(squares), -1.0, 1.0))
