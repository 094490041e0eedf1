from __future__ import annotations

"""Exception hierarchy."""


class PixhashError(Exception):
    """Base class for every error raised by pixhash."""


class InvalidImageOpError(PixhashError, ValueError):
    """Preprocessing parameters out of range (zero/oversized grid, bad filter)."""


class InvalidImageError(PixhashError, ValueError):
    """Pixel buffer with an unsupported shape or dtype."""
