"""
Captured frame storage
Owned, stride-addressed 24-bit pixel buffers
"""

from typing import Tuple

import numpy as np

BYTES_PER_PIXEL = 3
CHANNEL_ORDERS = ('BGR', 'RGB')


class PixelBuffer:
    """
    Owned 3 bytes/pixel image with an explicit row stride.

    Row ``y`` starts at byte ``y * stride``; bytes past ``width * 3`` in a row
    are padding. Sizes are validated here so reads never run past ``data``.
    """

    __slots__ = ('data', 'width', 'height', 'stride', 'channel_order')

    def __init__(self, data: bytes, width: int, height: int, stride: int = None, channel_order: str = 'BGR'):
        if stride is None:
            stride = width * BYTES_PER_PIXEL
        if width < 0 or height < 0:
            raise ValueError(f"Invalid buffer size {width}x{height}")
        if stride < width * BYTES_PER_PIXEL:
            raise ValueError(f"Stride {stride} too small for width {width}")
        if len(data) < stride * height:
            raise ValueError(f"Buffer holds {len(data)} bytes, {stride * height} required")
        if channel_order not in CHANNEL_ORDERS:
            raise ValueError(f"Unsupported channel order: {channel_order}")

        self.data = bytes(data)
        self.width = width
        self.height = height
        self.stride = stride
        self.channel_order = channel_order

    @classmethod
    def from_array(cls, image: np.ndarray, channel_order: str = 'BGR', row_alignment: int = 1) -> 'PixelBuffer':
        """Copy an (h, w, 3) uint8 array, padding rows to `row_alignment` bytes"""
        if image.ndim != 3 or image.shape[2] != BYTES_PER_PIXEL:
            raise ValueError(f"Expected an (h, w, 3) image, got shape {image.shape}")

        height, width = image.shape[:2]
        row_bytes = width * BYTES_PER_PIXEL
        stride = -(-row_bytes // row_alignment) * row_alignment

        rows = np.zeros((height, stride), dtype=np.uint8)
        rows[:, :row_bytes] = np.ascontiguousarray(image, dtype=np.uint8).reshape(height, row_bytes)
        return cls(rows.tobytes(), width, height, stride, channel_order)

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def to_array(self) -> np.ndarray:
        """Read-only (h, w, 3) view in the buffer's own channel order"""
        if self.is_empty:
            return np.zeros((self.height, self.width, BYTES_PER_PIXEL), dtype=np.uint8)
        raw = np.frombuffer(self.data, dtype=np.uint8, count=self.stride * self.height)
        rows = raw.reshape(self.height, self.stride)
        return rows[:, :self.width * BYTES_PER_PIXEL].reshape(self.height, self.width, BYTES_PER_PIXEL)

    def pixel_at(self, x: int, y: int) -> Tuple[int, int, int]:
        """Raw channel triple at (x, y), in the buffer's channel order"""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} buffer")
        offset = y * self.stride + x * BYTES_PER_PIXEL
        return self.data[offset], self.data[offset + 1], self.data[offset + 2]

    def __repr__(self):
        return (f"PixelBuffer({self.width}x{self.height}, stride={self.stride}, "
                f"order={self.channel_order})")
