import numpy as np
import pytest

from halftone import BAYER_4X4, DITHER_KERNELS, FLOYD_STEINBERG, JARVIS_JUDICE_NINKE, STUCKI
from halftone.kernels import is_causal, kernel_offsets


@pytest.mark.parametrize('kernel', list(DITHER_KERNELS.values()), ids=list(DITHER_KERNELS))
def test_kernels_are_causal(kernel):
    assert is_causal(kernel)
    for dx, dy, _ in kernel.offsets:
        assert dy > 0 or (dy == 0 and dx > 0)


@pytest.mark.parametrize('kernel', list(DITHER_KERNELS.values()), ids=list(DITHER_KERNELS))
def test_weights_add_up_to_divisor(kernel):
    assert sum(weight for _, _, weight in kernel.offsets) == kernel.divisor


def test_causality_check_catches_backward_offsets():
    kernel = FLOYD_STEINBERG._replace(offsets=FLOYD_STEINBERG.offsets + ((-1, 0, 1),))
    assert not is_causal(kernel)


def test_kernel_tables():
    assert FLOYD_STEINBERG.divisor == 16
    assert FLOYD_STEINBERG.offsets == ((1, 0, 7), (-1, 1, 3), (0, 1, 5), (1, 1, 1))
    assert STUCKI.divisor == 42
    assert len(STUCKI.offsets) == 12
    assert JARVIS_JUDICE_NINKE.divisor == 48
    assert JARVIS_JUDICE_NINKE.offsets[:2] == ((1, 0, 7), (2, 0, 5))


def test_kernel_offsets_array():
    offsets = kernel_offsets(STUCKI)
    assert offsets.shape == (12, 3)
    assert offsets.dtype == np.int64


def test_bayer_matrix_uses_every_level_once():
    assert BAYER_4X4.shape == (4, 4)
    assert sorted(BAYER_4X4.ravel().tolist()) == list(range(16))
    assert not BAYER_4X4.flags.writeable
