from collections import namedtuple

import numpy as np


# Offsets are (dx, dy, weight), the weight of each neighbour being weight / divisor
DitherKernel = namedtuple('DitherKernel', ('name', 'divisor', 'offsets'))


FLOYD_STEINBERG = DitherKernel('floyd-steinberg', 16, (
    (1, 0, 7),
    (-1, 1, 3),
    (0, 1, 5),
    (1, 1, 1),
))

STUCKI = DitherKernel('stucki', 42, (
    (1, 0, 8),
    (2, 0, 4),
    (-2, 1, 2),
    (-1, 1, 4),
    (0, 1, 8),
    (1, 1, 4),
    (2, 1, 2),
    (-2, 2, 1),
    (-1, 2, 2),
    (0, 2, 4),
    (1, 2, 2),
    (2, 2, 1),
))

JARVIS_JUDICE_NINKE = DitherKernel('jarvis-judice-ninke', 48, (
    (1, 0, 7),
    (2, 0, 5),
    (-2, 1, 3),
    (-1, 1, 5),
    (0, 1, 7),
    (1, 1, 5),
    (2, 1, 3),
    (-2, 2, 1),
    (-1, 2, 3),
    (0, 2, 5),
    (1, 2, 3),
    (2, 2, 1),
))

DITHER_KERNELS = {kernel.name: kernel for kernel in (FLOYD_STEINBERG, STUCKI, JARVIS_JUDICE_NINKE)}


BAYER_4X4 = np.array([
    [0, 8, 2, 10],
    [12, 4, 14, 6],
    [3, 11, 1, 9],
    [15, 7, 13, 5],
])
BAYER_4X4.flags.writeable = False


def is_causal(kernel):
    """True if every offset points at a pixel the raster scan has not reached yet."""
    return all(dy > 0 or (dy == 0 and dx > 0) for dx, dy, _ in kernel.offsets)


def kernel_offsets(kernel):
    return np.array(kernel.offsets, dtype=np.int64)
