from __future__ import annotations

"""Bit derivation: aHash and dHash over a preprocessed luma grid."""
from typing import List

import numpy as np

from .ops import ImageOp
from .preprocess import preprocess


def average_bits(grid: np.ndarray) -> List[bool]:
    """One bit per pixel, row-major: pixel > floor(mean)."""
    g = np.asarray(grid, dtype=np.uint8)
    if g.size == 0:
        return []
    # int64 accumulator; uint8 sums would wrap
    mean = int(g.sum(dtype=np.int64)) // g.size
    return (g.ravel() > mean).tolist()


def difference_bits(grid: np.ndarray) -> List[bool]:
    """(W-1) bits per row, row-major: pixel brighter than its left neighbour."""
    g = np.asarray(grid, dtype=np.uint8)
    if g.ndim != 2:
        raise ValueError(f"difference_bits expects a 2-D grid, got shape {g.shape}")
    diff = g[:, 1:] > g[:, :-1]
    return diff.ravel().tolist()


def average_hash(image, op: ImageOp, *, rgb: bool = False) -> List[bool]:
    """Average hash (aHash) bits of `image`; length op.width * op.height."""
    return average_bits(preprocess(image, op, rgb=rgb))


def difference_hash(image, op: ImageOp, *, rgb: bool = False) -> List[bool]:
    """Difference hash (dHash) bits of `image`; length (op.width - 1) * op.height."""
    return difference_bits(preprocess(image, op, rgb=rgb))
