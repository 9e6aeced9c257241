class HalftoneError(Exception):
    pass


class UnknownMethod(HalftoneError, ValueError):
    def __init__(self, method):
        self.method = method
        super().__init__('Unknown dithering method: {!r}'.format(method))


class DimensionMismatch(HalftoneError, ValueError):
    def __init__(self, first_shape, second_shape):
        self.first_shape = first_shape
        self.second_shape = second_shape
        super().__init__('Buffers differ in size: {}x{} vs {}x{}'.format(*first_shape, *second_shape))


class DegenerateRegion(HalftoneError, ValueError):
    def __init__(self, width, height, margin):
        self.width = width
        self.height = height
        super().__init__(
            'SSIM needs both sides larger than {}px, got {}x{}'.format(2 * margin, width, height))


class InvalidBuffer(HalftoneError, ValueError):
    pass
