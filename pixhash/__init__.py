from __future__ import annotations

"""pixhash: average / difference perceptual hashes over decoded pixel buffers."""
import logging
import os

import cv2

from pixhash.core.config import Settings, settings as _settings
from pixhash.core.errors import InvalidImageError, InvalidImageOpError, PixhashError
from pixhash.hashing import (
    DEFAULT_AVERAGE_OP,
    DEFAULT_DIFFERENCE_OP,
    AverageHash,
    DifferenceHash,
    FilterType,
    HashAlgorithm,
    Hasher,
    ImageOp,
    average_hash,
    difference_hash,
    hamming_distance,
    pack_bits,
    preprocess,
    to_hex,
    unpack_bits,
)

__version__ = "0.1.0"

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def _configure_opencv_threads(cfg: Settings) -> None:
    """Configure OpenCV thread count based on settings / CPU."""
    try:
        n = cfg.OPENCV_NUM_THREADS
        if n is None:
            n = max(1, (os.cpu_count() or 2) // 2)
        cv2.setNumThreads(int(n))
        logger.info("OpenCV configured with %d threads", n)
    except Exception as e:
        logger.warning("Failed to configure OpenCV threads: %s", e)


def configure(cfg: Settings | None = None) -> None:
    """Apply LOG_LEVEL and OPENCV_NUM_THREADS from settings (or `cfg`)."""
    cfg = cfg or _settings
    logger.setLevel(cfg.LOG_LEVEL)
    _configure_opencv_threads(cfg)


__all__ = [
    "DEFAULT_AVERAGE_OP",
    "DEFAULT_DIFFERENCE_OP",
    "AverageHash",
    "DifferenceHash",
    "FilterType",
    "HashAlgorithm",
    "Hasher",
    "ImageOp",
    "InvalidImageError",
    "InvalidImageOpError",
    "PixhashError",
    "Settings",
    "average_hash",
    "configure",
    "difference_hash",
    "hamming_distance",
    "pack_bits",
    "preprocess",
    "to_hex",
    "unpack_bits",
]
