"""
Color reduction module for Color Ambience
Reduces captured frames to center, average and dominant colors
"""

import logging
from dataclasses import dataclass

import numpy as np

from capture.frame import PixelBuffer
from config.settings import CaptureSettings
from .kmeans import kmeans
from .pixels import BLACK, RGBColor, extract_samples


@dataclass(frozen=True)
class ColorSet:
    """Colors computed for one capture cycle"""
    center: RGBColor
    average: RGBColor
    dominant: RGBColor


def center_color(buffer: PixelBuffer) -> RGBColor:
    """Pixel at the middle of the buffer"""
    if buffer.is_empty:
        return BLACK
    channels = buffer.pixel_at(buffer.width // 2, buffer.height // 2)
    if buffer.channel_order == 'BGR':
        channels = channels[::-1]
    return RGBColor(*channels)


def average_color(buffer: PixelBuffer, skip_black: bool = True) -> RGBColor:
    """Per-channel mean, black when no pixel qualifies"""
    samples = extract_samples(buffer, skip_black)
    count = len(samples)
    if count == 0:
        return BLACK

    totals = samples.sum(axis=0, dtype=np.int64)
    return RGBColor.from_array(totals // count)


def dominant_color(buffer: PixelBuffer, skip_black: bool = True, threshold: float = 5.0) -> RGBColor:
    """Centroid of a single k-means cluster, black when no pixel qualifies"""
    samples = extract_samples(buffer, skip_black)
    if len(samples) == 0:
        return BLACK
    return kmeans(1, samples, threshold)[0]


class ColorDetector:
    """Applies the configured color reducers to captured frames"""

    def __init__(self, settings: CaptureSettings):
        self.settings = settings

    def center(self, buffer: PixelBuffer) -> RGBColor:
        return center_color(buffer)

    def average(self, buffer: PixelBuffer) -> RGBColor:
        return average_color(buffer, self.settings.ignore_black_pixels)

    def dominant(self, buffer: PixelBuffer) -> RGBColor:
        return dominant_color(buffer, self.settings.ignore_black_pixels, self.settings.kmeans_threshold)

    def detect(self, buffer: PixelBuffer) -> ColorSet:
        """Run all reducers sequentially against the same frame"""
        colors = ColorSet(
            center=self.center(buffer),
            average=self.average(buffer),
            dominant=self.dominant(buffer)
        )
        logging.debug(f"Detected colors: center={colors.center.hex} "
                      f"average={colors.average.hex} dominant={colors.dominant.hex}")
        return colors
