from concurrent.futures import ThreadPoolExecutor

import cv2
import numpy as np
import pytest

from conftest import checkerboard, hramp, hstep
from pixhash import (
    DEFAULT_AVERAGE_OP,
    DEFAULT_DIFFERENCE_OP,
    AverageHash,
    DifferenceHash,
    FilterType,
    HashAlgorithm,
    Hasher,
    ImageOp,
    average_hash,
    hamming_distance,
)


def test_default_ops_are_fixed():
    assert DEFAULT_AVERAGE_OP == ImageOp(8, 8, FilterType.LANCZOS4)
    assert DEFAULT_DIFFERENCE_OP == ImageOp(9, 8, FilterType.LANCZOS4)
    assert AverageHash().op == DEFAULT_AVERAGE_OP
    assert AverageHash.default().op == DEFAULT_AVERAGE_OP
    assert DifferenceHash().op == DEFAULT_DIFFERENCE_OP
    assert Hasher.default(HashAlgorithm.DIFFERENCE).op == DEFAULT_DIFFERENCE_OP


def test_average_checkerboard_vector():
    h = AverageHash().hash(checkerboard(8, 2))
    # rows: 00110011 x2, 11001100 x2, ...
    assert h == "3333cccc3333cccc"
    assert len(h) == 16


def test_average_checkerboard_bgr_matches_gray():
    gray = checkerboard(8, 2)
    bgr = cv2.cvtColor(gray, cv2.COLOR_GRAY2BGR)
    assert AverageHash().hash(bgr) == AverageHash().hash(gray)


def test_difference_ramp_vector():
    assert DifferenceHash().hash(hramp(9, 8)) == "ffffffffffffffff"


def test_difference_uniform_vector():
    assert DifferenceHash().hash(np.full((8, 9), 200, np.uint8)) == "0" * 16


def test_average_default_vector_after_downscale():
    # 16x16 -> 8x8 samples at half-pixel offsets; Lanczos ringing around the
    # edge gives the row [0, 0, 0, 9, 100, 190, 200, 200], floor mean 112
    img = hstep(16, 16, edge=9)
    assert AverageHash().hash(img) == "0707070707070707"
    assert AverageHash().hash(np.ascontiguousarray(img.T)) == "0000000000ffffff"


def test_difference_default_vector_after_downscale():
    # 18x16 -> 9x8; row [0, 0, 0, 9, 100, 190, 200, 200, 200]
    assert DifferenceHash().hash(hstep(18, 16, edge=9)) == "3c3c3c3c3c3c3c3c"


@pytest.mark.parametrize(
    "filt,expected",
    [
        (FilterType.LINEAR, "1818181818181818"),
        (FilterType.AREA, "1818181818181818"),
        (FilterType.NEAREST, "0808080808080808"),
    ],
)
def test_other_kernels_give_other_vectors(filt, expected):
    op = ImageOp(9, 8, filt)
    assert DifferenceHash.with_op(op).hash(hstep(18, 16, edge=9)) == expected


def test_custom_op_hash_length(photo_like):
    h = AverageHash.with_op(ImageOp(5, 3, FilterType.AREA)).hash(photo_like)
    # 15 bits -> 2 bytes -> 4 hex chars
    assert len(h) == 4
    assert int(h, 16) & 0x1 == 0

    d = DifferenceHash.with_op(ImageOp(1, 4)).hash(photo_like)
    assert d == ""


def test_hasher_strategy_matches_subclasses(photo_like):
    op = ImageOp(12, 6, FilterType.LINEAR)
    assert Hasher.with_op("average", op).hash(photo_like) == AverageHash(op).hash(photo_like)
    assert (
        Hasher(HashAlgorithm.DIFFERENCE, op).hash(photo_like)
        == DifferenceHash(op).hash(photo_like)
    )
    assert Hasher("AVERAGE").algorithm is HashAlgorithm.AVERAGE
    assert Hasher(" Difference ").algorithm is HashAlgorithm.DIFFERENCE
    with pytest.raises(ValueError):
        Hasher("perceptual")
    with pytest.raises(ValueError):
        Hasher(None)


def test_hash_bits_bytes_hex_agree(photo_like):
    hasher = AverageHash()
    bits = hasher.hash_bits(photo_like)
    assert bits == average_hash(photo_like, DEFAULT_AVERAGE_OP)
    assert hasher.hash_bytes(photo_like).hex() == hasher.hash(photo_like)


def test_rgb_flag_changes_color_weighting(photo_like):
    hasher = AverageHash()
    rgb = photo_like[:, :, ::-1]
    assert hasher.hash(rgb, rgb=True) == hasher.hash(photo_like)


def test_lossless_reencode_distance_zero(photo_like):
    ok, buf = cv2.imencode(".png", photo_like)
    assert ok
    decoded = cv2.imdecode(buf, cv2.IMREAD_COLOR)
    for hasher in (AverageHash(), DifferenceHash()):
        assert hamming_distance(hasher.hash(photo_like), hasher.hash(decoded)) == 0


def test_small_noise_small_distance(photo_like, rng):
    noise = rng.integers(-1, 2, size=photo_like.shape)
    noisy = np.clip(photo_like.astype(np.int16) + noise, 0, 255).astype(np.uint8)
    for hasher in (AverageHash(), DifferenceHash()):
        assert hamming_distance(hasher.hash(photo_like), hasher.hash(noisy)) <= 10


def test_different_images_far_apart(photo_like):
    hasher = AverageHash()
    inverted = 255 - photo_like
    assert hamming_distance(hasher.hash(photo_like), hasher.hash(inverted)) > 32


def test_shared_hasher_across_threads(rng):
    images = [rng.integers(0, 256, size=(40, 60, 3), dtype=np.uint8) for _ in range(16)]
    hasher = DifferenceHash()
    expected = [hasher.hash(im) for im in images]
    with ThreadPoolExecutor(max_workers=4) as pool:
        got = list(pool.map(hasher.hash, images))
    assert got == expected


def test_repr_mentions_algorithm():
    assert "average" in repr(AverageHash())
