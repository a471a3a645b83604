#
# PROJECT: wireframe-overlay
# MODULE: wireframe_overlay/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import numpy as np

from .color import BLACK


class Canvas:
    """
    Fixed-size RGBA pixel buffer.

    Pixels live in a (height, width, 4) uint8 numpy array indexed [y][x],
    origin top-left. The buffer is never reallocated; renderers write into
    it in place.
    """
    __slots__ = ['pixels']

    CHANNELS = 4

    def __init__(self, width: int, height: int, fill=BLACK):
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.pixels = np.empty((height, width, self.CHANNELS), dtype=np.uint8)
        self.pixels[:, :] = fill

    @classmethod
    def from_array(cls, array: np.ndarray) -> 'Canvas':
        """Wrap an existing (h, w, 4) uint8 array without copying it."""
        if array.ndim != 3 or array.shape[2] != cls.CHANNELS:
            raise ValueError(f"expected an (h, w, 4) array, got shape {array.shape}")
        if array.dtype != np.uint8:
            raise ValueError(f"expected a uint8 array, got {array.dtype}")
        canvas = cls.__new__(cls)
        canvas.pixels = array
        return canvas

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    def __repr__(self):
        return f"Canvas({self.width}x{self.height})"

    def set_pixel(self, x: int, y: int, color):
        if x < 0 or x >= self.width or y < 0 or y >= self.height: return
        self.pixels[y, x] = color

    def get_pixel(self, x: int, y: int):
        return tuple(int(c) for c in self.pixels[y, x])

    def copy(self) -> 'Canvas':
        return Canvas.from_array(self.pixels.copy())

    def count_nonbackground(self, background=BLACK) -> int:
        """Number of pixels that differ from the background color."""
        return int(np.any(self.pixels != np.asarray(background, dtype=np.uint8), axis=2).sum())
