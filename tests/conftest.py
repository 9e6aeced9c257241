import numpy as np
import pytest

from halftone import PixelBuffer


@pytest.fixture
def gradient():
    """Horizontal bands from black at the top to white at the bottom, 32 rows of 24px."""
    levels = np.linspace(0, 255, 32).round().astype(np.uint8)
    return PixelBuffer.from_gray(np.repeat(levels[:, None], 24, axis=1))


@pytest.fixture
def photo():
    rng = np.random.default_rng(1234)
    return PixelBuffer.from_rgb(rng.integers(0, 256, size=(20, 24, 3), dtype=np.uint8))
