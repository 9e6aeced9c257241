import logging

from .dither import ErrorShaping, dither_bayer, dither_classic, warp_error
from .errors import DegenerateRegion, DimensionMismatch, HalftoneError, InvalidBuffer, UnknownMethod
from .kernels import BAYER_4X4, DITHER_KERNELS, FLOYD_STEINBERG, JARVIS_JUDICE_NINKE, STUCKI, DitherKernel
from .methods import Method, apply_dither, resolve
from .metrics import PSNR_IDENTICAL, QualityResult, compare, psnr, ssim
from .pixels import PixelBuffer, detect_grayscale, rgb_to_luma


# Silent unless the application configures logging, e.g. logging.getLogger('halftone').setLevel(logging.DEBUG)
logging.getLogger(__name__).addHandler(logging.NullHandler())
