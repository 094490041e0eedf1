from __future__ import annotations

"""Color -> 8-bit luma -> fixed-size grid."""
import logging

import cv2
import numpy as np

from pixhash.core.errors import InvalidImageError
from pixhash.utils import img_ops

from .ops import ImageOp

logger = logging.getLogger(__name__)

# cvtColor handles 8U/16U/32F only
_CV_DEPTHS = (np.uint8, np.uint16, np.float32)

_GRAY_CODES = {
    (3, False): cv2.COLOR_BGR2GRAY,
    (3, True): cv2.COLOR_RGB2GRAY,
    (4, False): cv2.COLOR_BGRA2GRAY,
    (4, True): cv2.COLOR_RGBA2GRAY,
}


def to_gray(img, *, rgb: bool = False) -> np.ndarray:
    """Any supported buffer -> 2-D uint8 luma (BT.601 weights via cv2)."""
    arr = img_ops.ensure_contiguous(img)
    if arr.ndim == 3 and arr.shape[2] == 1:
        arr = arr[:, :, 0]
    if arr.ndim not in (2, 3) or arr.shape[0] == 0 or arr.shape[1] == 0:
        raise InvalidImageError(f"unsupported image shape {arr.shape}")

    if arr.dtype == np.bool_:
        arr = img_ops.to_uint8(arr)
    elif np.issubdtype(arr.dtype, np.floating) and arr.dtype != np.float32:
        arr = arr.astype(np.float32)
    elif arr.dtype not in _CV_DEPTHS:
        raise InvalidImageError(f"unsupported image dtype {arr.dtype}")

    if arr.ndim == 3:
        code = _GRAY_CODES.get((arr.shape[2], rgb))
        if code is None:
            raise InvalidImageError(f"unsupported channel count {arr.shape[2]}")
        arr = img_ops.cvtColor(arr, code)

    return img_ops.to_uint8(arr)


def preprocess(img, op: ImageOp, *, rgb: bool = False) -> np.ndarray:
    """Gray first, then resize to exactly op.width x op.height with op.filter."""
    gray = to_gray(img, rgb=rgb)
    grid = img_ops.resize(gray, op.size, interpolation=op.filter.value)
    logger.debug(
        "preprocess: %dx%d -> %dx%d (%s)",
        gray.shape[1],
        gray.shape[0],
        op.width,
        op.height,
        op.filter.name,
    )
    return grid
