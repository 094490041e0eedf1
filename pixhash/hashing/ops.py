from __future__ import annotations

"""Preprocessing parameters: target grid size + resampling kernel."""
import numbers
from dataclasses import dataclass
from enum import Enum

import cv2

from pixhash.core.errors import InvalidImageOpError

MAX_SIDE = 255


class FilterType(Enum):
    """Resampling kernels, valued by their OpenCV interpolation flag."""

    NEAREST = cv2.INTER_NEAREST
    LINEAR = cv2.INTER_LINEAR
    CUBIC = cv2.INTER_CUBIC
    AREA = cv2.INTER_AREA
    LANCZOS4 = cv2.INTER_LANCZOS4

    @classmethod
    def parse(cls, value: "FilterType | str") -> "FilterType":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        raise InvalidImageOpError(
            f"unknown filter {value!r}; expected one of {[f.name for f in cls]}"
        )


def _check_side(name: str, v) -> int:
    # bool is an int subclass; True would silently mean 1
    if isinstance(v, bool) or not isinstance(v, numbers.Integral):
        raise InvalidImageOpError(f"{name} must be an int, got {type(v).__name__}")
    v = int(v)
    if not 1 <= v <= MAX_SIDE:
        raise InvalidImageOpError(f"{name} must be in [1, {MAX_SIDE}], got {v}")
    return v


@dataclass(frozen=True)
class ImageOp:
    """Immutable bundle of preprocessing parameters (grid width/height, filter)."""

    width: int
    height: int
    filter: FilterType = FilterType.LANCZOS4

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", _check_side("width", self.width))
        object.__setattr__(self, "height", _check_side("height", self.height))
        object.__setattr__(self, "filter", FilterType.parse(self.filter))

    @property
    def size(self) -> tuple[int, int]:
        """(width, height), the order cv2.resize expects."""
        return (self.width, self.height)
