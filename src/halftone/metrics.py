import logging
import math
from collections import namedtuple

import numpy as np
import skimage.metrics

from .errors import DegenerateRegion, DimensionMismatch
from .pixels import to_luma_plane


logger = logging.getLogger(__name__)


QualityResult = namedtuple('QualityResult', ('psnr', 'ssim'))

# Identical images have an infinite PSNR; this value is reported instead
PSNR_IDENTICAL = 99.0

DYNAMIC_RANGE = 255

# A Gaussian of sigma 1.5 truncated at 3.5 sigma gives the 11x11 window
SSIM_SIGMA = 1.5
SSIM_RADIUS = 5

# C1 = (K1 * 255) ** 2 = 6.5025, C2 = (K2 * 255) ** 2 = 58.5225
K1 = 0.01
K2 = 0.03


def _check_same_size(original, result):
    if original.size != result.size:
        raise DimensionMismatch(original.size, result.size)


def psnr(original, result):
    """Peak signal-to-noise ratio over the red, green and blue channels, alpha excluded.

    Returns PSNR_IDENTICAL (99) rather than infinity when the buffers are equal.
    """
    _check_same_size(original, result)

    mse = skimage.metrics.mean_squared_error(original.data[..., :3].astype(np.float64),
                                             result.data[..., :3].astype(np.float64))
    if mse == 0:
        return PSNR_IDENTICAL

    return 10 * math.log10(DYNAMIC_RANGE ** 2 / mse)


def ssim(original, result):
    """Single-scale SSIM on luma with an 11x11 Gaussian window (sigma 1.5).

    skimage crops the filtered maps by the window radius before averaging, so only centres
    at least 5 pixels away from every border count and both sides must be larger than 10.
    """
    _check_same_size(original, result)

    if original.width <= 2 * SSIM_RADIUS or original.height <= 2 * SSIM_RADIUS:
        raise DegenerateRegion(original.width, original.height, SSIM_RADIUS)

    return float(skimage.metrics.structural_similarity(
        to_luma_plane(original, np.float64), to_luma_plane(result, np.float64),
        gaussian_weights=True, sigma=SSIM_SIGMA, use_sample_covariance=False,
        data_range=DYNAMIC_RANGE, K1=K1, K2=K2))


def compare(original, result):
    quality = QualityResult(psnr(original, result), ssim(original, result))
    logger.debug('PSNR %.2f, SSIM %.4f for %dx%d buffers', quality.psnr, quality.ssim,
                 original.width, original.height)

    return quality
