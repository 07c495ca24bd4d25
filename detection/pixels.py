"""
Pixel extraction
Walks PixelBuffers row by row and yields canonical RGB samples
"""

from typing import Iterator, NamedTuple

import numpy as np

from capture.frame import PixelBuffer


class RGBColor(NamedTuple):
    r: int
    g: int
    b: int

    @property
    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    @classmethod
    def from_array(cls, values) -> 'RGBColor':
        return cls(int(values[0]), int(values[1]), int(values[2]))


BLACK = RGBColor(0, 0, 0)


def extract_samples(buffer: PixelBuffer, skip_black: bool = False) -> np.ndarray:
    """
    RGB samples of `buffer` as an (N, 3) uint8 array in row-major order.

    Rows are addressed through the buffer stride, so row padding is never
    sampled. With `skip_black`, pixels whose channels are all exactly 0 are
    left out.
    """
    if buffer.is_empty:
        return np.empty((0, 3), dtype=np.uint8)

    pixels = buffer.to_array().reshape(-1, 3)
    if buffer.channel_order == 'BGR':
        pixels = pixels[:, ::-1]

    if skip_black:
        pixels = pixels[pixels.any(axis=1)]

    return np.ascontiguousarray(pixels)


def iter_colors(buffer: PixelBuffer, skip_black: bool = False) -> Iterator[RGBColor]:
    for sample in extract_samples(buffer, skip_black):
        yield RGBColor.from_array(sample)
