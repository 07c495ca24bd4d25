"""
Screen capture package
Handles capture regions, screen grabbing and downscaling.
Window lookup lives in capture.window_capture (Windows only).
"""

from .downscale import Size, downscale, optimal_size
from .frame import PixelBuffer
from .region import Rectangle, RegionResolver, WindowInfo, crop_rectangle, select_window
from .screen_grabber import CaptureError, MssScreenGrabber, ScreenBounds

__all__ = [
    'Size', 'downscale', 'optimal_size', 'PixelBuffer',
    'Rectangle', 'RegionResolver', 'WindowInfo', 'crop_rectangle', 'select_window',
    'CaptureError', 'MssScreenGrabber', 'ScreenBounds'
]
