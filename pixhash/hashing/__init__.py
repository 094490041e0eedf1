"""
Perceptual hashing modules.

Public API is exposed from .api.
"""

from .api import (
    DEFAULT_AVERAGE_OP,
    DEFAULT_DIFFERENCE_OP,
    AverageHash,
    DifferenceHash,
    HashAlgorithm,
    Hasher,
)
from .bits import average_bits, average_hash, difference_bits, difference_hash
from .encoding import hamming_distance, pack_bits, to_hex, unpack_bits
from .ops import FilterType, ImageOp
from .preprocess import preprocess, to_gray

__all__ = [
    "DEFAULT_AVERAGE_OP",
    "DEFAULT_DIFFERENCE_OP",
    "AverageHash",
    "DifferenceHash",
    "HashAlgorithm",
    "Hasher",
    "average_bits",
    "average_hash",
    "difference_bits",
    "difference_hash",
    "hamming_distance",
    "pack_bits",
    "to_hex",
    "unpack_bits",
    "FilterType",
    "ImageOp",
    "preprocess",
    "to_gray",
]
