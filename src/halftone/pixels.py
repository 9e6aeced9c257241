import logging

import numpy as np
from PIL import Image

from .errors import InvalidBuffer


logger = logging.getLogger(__name__)


class PixelBuffer:
    """Packed RGBA pixels, shape (height, width, 4), row-major from the top-left corner.

    The array is copied on construction and made read-only, so a buffer can be handed to
    any number of algorithms without one of them changing it under the others.
    """

    __slots__ = ('data',)

    def __init__(self, data):
        data = np.asarray(data)

        if data.ndim != 3 or data.shape[2] != 4:
            raise InvalidBuffer('Expected an array of shape (height, width, 4), got {}'.format(data.shape))

        if data.shape[0] == 0 or data.shape[1] == 0:
            raise InvalidBuffer('Buffer must contain at least one pixel')

        if data.dtype != np.uint8:
            if not np.issubdtype(data.dtype, np.integer):
                raise InvalidBuffer('Expected integer samples, got {}'.format(data.dtype))
            if data.min() < 0 or data.max() > 255:
                raise InvalidBuffer('Samples must lie within 0-255')

        self.data = data.astype(np.uint8, copy=True)
        self.data.flags.writeable = False

    @classmethod
    def from_rgb(cls, rgb):
        rgb = np.asarray(rgb)
        if rgb.ndim != 3 or rgb.shape[2] != 3:
            raise InvalidBuffer('Expected an array of shape (height, width, 3), got {}'.format(rgb.shape))

        alpha = np.full(rgb.shape[:2] + (1,), 255, dtype=rgb.dtype)
        return cls(np.concatenate((rgb, alpha), axis=2))

    @classmethod
    def from_gray(cls, gray):
        gray = np.asarray(gray)
        if gray.ndim != 2:
            raise InvalidBuffer('Expected an array of shape (height, width), got {}'.format(gray.shape))

        return cls.from_rgb(np.stack((gray, gray, gray), axis=2))

    @classmethod
    def from_image(cls, image):
        return cls(np.array(image.convert('RGBA'), dtype=np.uint8))

    def to_image(self):
        return Image.fromarray(np.ascontiguousarray(self.data))

    @property
    def width(self):
        return self.data.shape[1]

    @property
    def height(self):
        return self.data.shape[0]

    @property
    def size(self):
        return self.width, self.height

    def __eq__(self, other):
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return self.data.shape == other.data.shape and bool(np.array_equal(self.data, other.data))

    __hash__ = None

    def __repr__(self):
        return '<PixelBuffer {}x{}>'.format(self.width, self.height)


# ITU-R BT.601
def rgb_to_luma(r, g, b):
    return 0.299 * r + 0.587 * g + 0.114 * b


def detect_grayscale(buffer):
    r, g, b = buffer.data[..., 0], buffer.data[..., 1], buffer.data[..., 2]
    return bool(np.array_equal(r, g) and np.array_equal(g, b))


def to_luma_plane(buffer, dtype=np.float32):
    # Luma is always evaluated in double precision, then narrowed to the plane type
    rgb = buffer.data[..., :3].astype(np.float64)
    return rgb_to_luma(rgb[..., 0], rgb[..., 1], rgb[..., 2]).astype(dtype)


def to_rgb_planes(buffer, dtype=np.float32):
    return tuple(buffer.data[..., channel].astype(dtype) for channel in range(3))


def _check_planes(planes):
    shape = planes[0].shape
    if len(shape) != 2:
        raise InvalidBuffer('Planes must be two-dimensional, got {}'.format(shape))

    for plane in planes[1:]:
        if plane.shape != shape:
            raise InvalidBuffer('Planes differ in shape: {} vs {}'.format(shape, plane.shape))


def from_rgb_planes(r, g, b):
    planes = tuple(np.asarray(plane) for plane in (r, g, b))
    _check_planes(planes)

    height, width = planes[0].shape
    output = np.empty((height, width, 4), dtype=np.uint8)
    for channel, plane in enumerate(planes):
        output[..., channel] = np.rint(np.clip(plane, 0.0, 255.0))
    output[..., 3] = 255

    return PixelBuffer(output)


def from_luma_plane(luma):
    return from_rgb_planes(luma, luma, luma)
