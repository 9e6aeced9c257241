import enum
import math

import numba
import numpy as np

from .kernels import BAYER_4X4, kernel_offsets


@numba.jit(nopython=True)
def warp_error(err):
    """Nonlinear error shaping after Rong: e' = e + sin(4*pi*e) / (4*pi), applied to |err| / 255.

    Odd in its argument, so positive and negative errors are bent the same way.
    """
    if err == 0:
        return 0.0

    sign = 1.0 if err > 0 else -1.0
    e = abs(err) / 255.0
    e = e + math.sin(4 * math.pi * e) / (4 * math.pi)

    return sign * e * 255.0


class ErrorShaping(enum.Enum):
    IDENTITY = 'identity'
    RONG = 'rong'


# Whether the scan bends each error through warp_error before diffusing it
SHAPING_WARPS = {
    ErrorShaping.IDENTITY: False,
    ErrorShaping.RONG: True,
}


def dither_bayer(input, matrix=BAYER_4X4):
    mheight, mwidth = matrix.shape
    height, width = input.shape

    # Thresholds sit in the middle of each of the matrix.size levels
    thresholds = (np.asarray(matrix, dtype=np.float64) + 0.5) / matrix.size * 255
    thresholds = np.tile(thresholds, (height // mheight + 1, width // mwidth + 1))[:height, :width]

    return np.where(input < thresholds, 0.0, 255.0).astype(np.float32)


@numba.jit(nopython=True)
def _diffuse(input, offsets, divisor, warp):
    height, width = input.shape

    for y in range(height):
        for x in range(width):
            old_pixel = input[y, x]
            new_pixel = 0.0 if old_pixel < 128.0 else 255.0
            quantization_error = old_pixel - new_pixel
            if warp:
                quantization_error = warp_error(quantization_error)
            input[y, x] = new_pixel

            for i in range(offsets.shape[0]):
                xn, yn = x + offsets[i, 0], y + offsets[i, 1]

                # Error leaving the image is dropped
                if (0 <= xn < width) and (0 <= yn < height):
                    input[yn, xn] = input[yn, xn] + quantization_error * (offsets[i, 2] / divisor)


def dither_classic(input, kernel, shaping=ErrorShaping.IDENTITY):
    """Raster-scan error diffusion of a single float plane with values in 0-255.

    Works on a private float32 copy; every pixel of the returned plane is 0.0 or 255.0.
    """
    if shaping not in SHAPING_WARPS:
        raise ValueError('Unsupported error shaping: {!r}'.format(shaping))

    working = np.array(input, dtype=np.float32)
    _diffuse(working, kernel_offsets(kernel), kernel.divisor, SHAPING_WARPS[shaping])

    return working
