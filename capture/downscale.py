"""
Frame downscaling
Reduces captured frames to a bounded working resolution before color reduction
"""

import logging
from typing import NamedTuple

import cv2
import numpy as np

from .frame import PixelBuffer


class Size(NamedTuple):
    width: int
    height: int


def optimal_size(width: int, height: int, max_width: int, max_height: int) -> Size:
    """Largest size within (max_width, max_height) keeping the aspect ratio"""
    width_ratio = width / max_width
    height_ratio = height / max_height

    if width_ratio <= 1 and height_ratio <= 1:
        return Size(width, height)

    if height_ratio > width_ratio:
        return Size(max(round(width / height_ratio), 1), max_height)

    return Size(max_width, max(round(height / width_ratio), 1))


def downscale(buffer: PixelBuffer, max_width: int, max_height: int) -> PixelBuffer:
    """
    Nearest-neighbor resize into a new buffer.

    Returns `buffer` itself when it already fits, so calling this on its own
    output is a no-op.
    """
    target = optimal_size(buffer.width, buffer.height, max_width, max_height)
    if target == buffer.size:
        return buffer

    image = np.ascontiguousarray(buffer.to_array())
    resized = cv2.resize(image, (target.width, target.height), interpolation=cv2.INTER_NEAREST)

    logging.debug(f"Downscaled {buffer.width}x{buffer.height} -> {target.width}x{target.height}")
    return PixelBuffer.from_array(resized, channel_order=buffer.channel_order)
