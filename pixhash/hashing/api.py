from __future__ import annotations

"""
Public hasher surface.

- Hasher(algorithm, op).hash(image) -> str
- AverageHash() / DifferenceHash() with the stock 8x8 / 9x8 Lanczos defaults
"""

from enum import Enum
from typing import Callable, List

from pixhash.utils.profiling import profiled

from .bits import average_hash, difference_hash
from .encoding import pack_bits, to_hex
from .ops import FilterType, ImageOp

# Changing these changes every "default" hash ever computed.
DEFAULT_AVERAGE_OP = ImageOp(width=8, height=8, filter=FilterType.LANCZOS4)
DEFAULT_DIFFERENCE_OP = ImageOp(width=9, height=8, filter=FilterType.LANCZOS4)


class HashAlgorithm(Enum):
    AVERAGE = "average"
    DIFFERENCE = "difference"

    @classmethod
    def parse(cls, value: "HashAlgorithm | str") -> "HashAlgorithm":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValueError(
            f"unknown algorithm {value!r}; expected one of {[a.value for a in cls]}"
        )

    def compute_bits(self, image, op: ImageOp, *, rgb: bool = False) -> List[bool]:
        return _BIT_FUNCS[self](image, op, rgb=rgb)

    @property
    def default_op(self) -> ImageOp:
        if self is HashAlgorithm.AVERAGE:
            return DEFAULT_AVERAGE_OP
        return DEFAULT_DIFFERENCE_OP


_BIT_FUNCS: dict[HashAlgorithm, Callable[..., List[bool]]] = {
    HashAlgorithm.AVERAGE: average_hash,
    HashAlgorithm.DIFFERENCE: difference_hash,
}


class Hasher:
    """Binds one ImageOp to one algorithm. Stateless between calls."""

    __slots__ = ("_algorithm", "_op")

    def __init__(self, algorithm: HashAlgorithm | str, op: ImageOp | None = None):
        algorithm = HashAlgorithm.parse(algorithm)
        self._algorithm = algorithm
        self._op = op if op is not None else algorithm.default_op

    @classmethod
    def with_op(cls, algorithm: HashAlgorithm | str, op: ImageOp) -> "Hasher":
        return cls(algorithm, op)

    @classmethod
    def default(cls, algorithm: HashAlgorithm | str = HashAlgorithm.AVERAGE) -> "Hasher":
        return cls(algorithm)

    @property
    def algorithm(self) -> HashAlgorithm:
        return self._algorithm

    @property
    def op(self) -> ImageOp:
        return self._op

    def hash_bits(self, image, *, rgb: bool = False) -> List[bool]:
        return self._algorithm.compute_bits(image, self._op, rgb=rgb)

    def hash_bytes(self, image, *, rgb: bool = False) -> bytes:
        return pack_bits(self.hash_bits(image, rgb=rgb))

    @profiled("pixhash.hash")
    def hash(self, image, *, rgb: bool = False) -> str:
        """Hex-encoded hash of `image` (BGR/BGRA/gray ndarray unless rgb=True)."""
        return to_hex(self.hash_bytes(image, rgb=rgb))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(algorithm={self._algorithm.value!r}, op={self._op!r})"


class AverageHash(Hasher):
    """Average hash (aHash); defaults to an 8x8 grid with Lanczos resampling."""

    __slots__ = ()

    def __init__(self, op: ImageOp | None = None):
        super().__init__(HashAlgorithm.AVERAGE, op)

    @classmethod
    def with_op(cls, op: ImageOp) -> "AverageHash":  # type: ignore[override]
        return cls(op)

    @classmethod
    def default(cls) -> "AverageHash":  # type: ignore[override]
        return cls()


class DifferenceHash(Hasher):
    """Difference hash (dHash); defaults to a 9x8 grid so each row gives 8 bits."""

    __slots__ = ()

    def __init__(self, op: ImageOp | None = None):
        super().__init__(HashAlgorithm.DIFFERENCE, op)

    @classmethod
    def with_op(cls, op: ImageOp) -> "DifferenceHash":  # type: ignore[override]
        return cls(op)

    @classmethod
    def default(cls) -> "DifferenceHash":  # type: ignore[override]
        return cls()
