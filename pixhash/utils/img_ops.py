from __future__ import annotations

"""Thin OpenCV wrappers that normalise buffers before handing them to cv2."""
import cv2
import numpy as np

from pixhash.core.errors import InvalidImageError


def ensure_contiguous(a, dtype=None) -> np.ndarray:
    """Guarantee an np.ndarray (optionally of `dtype`) in C_CONTIGUOUS layout."""
    if a is None:
        raise InvalidImageError("img_ops: got None as image")

    arr = a if isinstance(a, np.ndarray) else np.asarray(a)
    if dtype is not None and arr.dtype != dtype:
        arr = arr.astype(dtype, copy=False)

    if not arr.flags.c_contiguous:
        arr = np.ascontiguousarray(arr)
    return arr


def to_uint8(gray: np.ndarray) -> np.ndarray:
    """Map a single-channel buffer of any supported depth onto 0..255."""
    dt = gray.dtype
    if dt == np.uint8:
        return gray
    if dt == np.bool_:
        return gray.astype(np.uint8) * np.uint8(255)
    if dt == np.uint16:
        # 65535 / 257 == 255; rounding keeps 8-bit values stored in 16 bits exact
        return ((gray.astype(np.uint32) + 128) // 257).astype(np.uint8)
    if np.issubdtype(dt, np.floating):
        return np.clip(np.rint(gray * 255.0), 0, 255).astype(np.uint8)
    raise InvalidImageError(f"img_ops: unsupported dtype {dt}")


def cvtColor(src, code):
    src = ensure_contiguous(src)
    return cv2.cvtColor(src, code)


def resize(src, dsize, interpolation=cv2.INTER_LINEAR):
    src = ensure_contiguous(src, np.uint8)
    return cv2.resize(src, dsize, interpolation=interpolation)
