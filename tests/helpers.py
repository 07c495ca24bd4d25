"""Buffer and provider builders shared by the tests."""

from __future__ import annotations

import numpy as np

from capture.frame import PixelBuffer
from capture.region import Rectangle


def make_buffer(pixels, channel_order: str = "RGB", row_alignment: int = 1) -> PixelBuffer:
    """Build a PixelBuffer from nested (r, g, b) rows."""
    image = np.array(pixels, dtype=np.uint8)
    if channel_order == "BGR":
        image = image[..., ::-1]
    return PixelBuffer.from_array(image, channel_order=channel_order, row_alignment=row_alignment)


def solid_buffer(width: int, height: int, color, channel_order: str = "RGB") -> PixelBuffer:
    return make_buffer([[color] * width for _ in range(height)], channel_order)


class FakeScreenBounds:
    def __init__(self, primary: Rectangle, virtual: Rectangle | None = None) -> None:
        self._primary = primary
        self._virtual = virtual or primary

    def primary(self) -> Rectangle:
        return self._primary

    def virtual(self) -> Rectangle:
        return self._virtual
