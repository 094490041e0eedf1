import numpy as np
import pytest


def checkerboard(size: int = 8, block: int = 2) -> np.ndarray:
    """size x size gray image of alternating 0/255 blocks, top-left block dark."""
    idx = np.arange(size) // block
    return (((idx[:, None] + idx[None, :]) % 2) * 255).astype(np.uint8)


def hramp(width: int, height: int, step: int = 20) -> np.ndarray:
    """Each column strictly brighter than the previous one."""
    row = (np.arange(width) * step).astype(np.uint8)
    return np.tile(row, (height, 1))


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def photo_like(rng):
    """Smooth gradient with some low-frequency structure, BGR uint8."""
    h, w = 120, 160
    y, x = np.mgrid[0:h, 0:w].astype(np.float32)
    base = 128 + 60 * np.sin(x / 23.0) + 50 * np.cos(y / 17.0)
    img = np.stack([base, np.roll(base, 7, axis=1), base[::-1]], axis=2)
    return np.clip(img, 0, 255).astype(np.uint8)


def hstep(width: int, height: int, edge: int, value: int = 200) -> np.ndarray:
    """Columns left of `edge` are 0, the rest `value`."""
    img = np.zeros((height, width), np.uint8)
    img[:, edge:] = value
    return img
