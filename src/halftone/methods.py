import enum
import logging
from collections import namedtuple

from .dither import ErrorShaping, dither_bayer, dither_classic
from .errors import UnknownMethod
from .kernels import BAYER_4X4, FLOYD_STEINBERG, JARVIS_JUDICE_NINKE, STUCKI
from .pixels import detect_grayscale, from_luma_plane, from_rgb_planes, to_luma_plane, to_rgb_planes


logger = logging.getLogger(__name__)


class Algorithm(enum.Enum):
    ORDERED = 'ordered'
    ERROR_DIFFUSION = 'error-diffusion'


class Method(enum.Enum):
    BAYER = 'bayer'
    FS = 'fs'
    STUCKI = 'stucki'
    JJN = 'jjn'
    RONG = 'rong'

    @classmethod
    def parse(cls, selector):
        if isinstance(selector, cls):
            return selector
        try:
            return cls(selector)
        except ValueError:
            raise UnknownMethod(selector) from None

    @property
    def label(self):
        return METHOD_LABELS[self]


METHOD_LABELS = {
    Method.BAYER: 'Bayer',
    Method.FS: 'Floyd–Steinberg',
    Method.STUCKI: 'Stucki',
    Method.JJN: 'JJN',
    Method.RONG: 'Rong',
}

# method -> (algorithm, kernel or matrix, shaping); the colour path uses the same entry per channel
METHOD_TABLE = {
    Method.BAYER: (Algorithm.ORDERED, BAYER_4X4, ErrorShaping.IDENTITY),
    Method.FS: (Algorithm.ERROR_DIFFUSION, FLOYD_STEINBERG, ErrorShaping.IDENTITY),
    Method.STUCKI: (Algorithm.ERROR_DIFFUSION, STUCKI, ErrorShaping.IDENTITY),
    Method.JJN: (Algorithm.ERROR_DIFFUSION, JARVIS_JUDICE_NINKE, ErrorShaping.IDENTITY),
    Method.RONG: (Algorithm.ERROR_DIFFUSION, JARVIS_JUDICE_NINKE, ErrorShaping.RONG),
}


DitherConfig = namedtuple('DitherConfig', ('method', 'algorithm', 'kernel', 'shaping', 'grayscale'))


def resolve(selector, grayscale):
    method = Method.parse(selector)
    algorithm, kernel, shaping = METHOD_TABLE[method]

    return DitherConfig(method, algorithm, kernel, shaping, bool(grayscale))


def dither_plane(plane, config):
    if config.algorithm is Algorithm.ORDERED:
        return dither_bayer(plane, config.kernel)
    return dither_classic(plane, config.kernel, config.shaping)


def apply_dither(buffer, selector, grayscale=None):
    """Dither a packed buffer, returning a new buffer of the same size.

    With grayscale left as None the single-channel luma path is taken when every pixel has
    r == g == b, the per-channel path otherwise.
    """
    method = Method.parse(selector)
    if grayscale is None:
        grayscale = detect_grayscale(buffer)

    config = resolve(method, grayscale)
    logger.debug('Dithering %dx%d buffer with %s (%s, %s path)', buffer.width, buffer.height,
                 config.method.value, config.algorithm.value, 'grayscale' if config.grayscale else 'color')

    if config.grayscale:
        return from_luma_plane(dither_plane(to_luma_plane(buffer), config))

    # Channels are dithered independently, colour fringing included
    return from_rgb_planes(*(dither_plane(plane, config) for plane in to_rgb_planes(buffer)))
