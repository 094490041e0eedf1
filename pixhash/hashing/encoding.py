from __future__ import annotations

"""Bit vector <-> bytes <-> hex, plus Hamming distance."""
from typing import Iterable, List, Optional, Sequence, Union

import numpy as np

HashLike = Union[str, bytes, bytearray, Sequence[bool]]


def pack_bits(bits: Iterable[bool]) -> bytes:
    """MSB-first packing; the tail of the last byte is zero-padded."""
    arr = np.fromiter((bool(b) for b in bits), dtype=bool)
    if arr.size == 0:
        return b""
    return np.packbits(arr, bitorder="big").tobytes()


def unpack_bits(data: bytes, length: Optional[int] = None) -> List[bool]:
    """Inverse of pack_bits; `length` drops the padding bits."""
    if not data:
        return []
    arr = np.unpackbits(np.frombuffer(bytes(data), dtype=np.uint8), bitorder="big")
    if length is not None:
        if length < 0 or length > arr.size:
            raise ValueError(f"length {length} out of range for {len(data)} bytes")
        arr = arr[:length]
    return arr.astype(bool).tolist()


def to_hex(data: bytes) -> str:
    """Lowercase, two digits per byte, no prefix or separators."""
    return bytes(data).hex()


def _as_bytes(h: HashLike) -> tuple[bytes, int]:
    if isinstance(h, str):
        s = h.strip()
        if len(s) % 2:
            raise ValueError(f"odd-length hex string {h!r}")
        return bytes.fromhex(s), len(s) * 4
    if isinstance(h, (bytes, bytearray)):
        return bytes(h), len(h) * 8
    bits = list(h)
    return pack_bits(bits), len(bits)


def hamming_distance(a: HashLike, b: HashLike) -> int:
    """Popcount of a XOR b; accepts bit vectors, bytes or hex strings."""
    ba, na = _as_bytes(a)
    bb, nb = _as_bytes(b)
    if na != nb:
        raise ValueError(f"hash length mismatch: {na} vs {nb} bits")
    x = int.from_bytes(ba, "big") ^ int.from_bytes(bb, "big")
    return x.bit_count()
