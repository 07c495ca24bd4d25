"""
Screen grabbing through mss
Produces PixelBuffers for capture rectangles and reports screen bounds
"""

import logging

import cv2
import mss
import numpy as np
from mss.exception import ScreenShotError

from .frame import PixelBuffer
from .region import Rectangle

# 24bpp DIB rows are padded to 4 bytes
DIB_ROW_ALIGNMENT = 4


class CaptureError(Exception):
    """A frame could not be grabbed; the cycle should be skipped"""


class ScreenBounds:
    """Primary and virtual screen metrics from mss monitors"""

    def __init__(self, sct=None):
        self.sct = sct if sct is not None else mss.mss()

    def primary(self) -> Rectangle:
        return self._monitor(1)

    def virtual(self) -> Rectangle:
        return self._monitor(0)

    def _monitor(self, index: int) -> Rectangle:
        monitors = self.sct.monitors
        # Single-monitor backends may only list the combined area
        monitor = monitors[index] if index < len(monitors) else monitors[0]
        if monitor['width'] <= 0 or monitor['height'] <= 0:
            raise CaptureError(f"Monitor {index} reports an empty area: {monitor}")
        return Rectangle(monitor['left'], monitor['top'], monitor['width'], monitor['height'])


class MssScreenGrabber:
    """Grabs screen rectangles as BGR PixelBuffers"""

    def __init__(self, sct=None, row_alignment: int = DIB_ROW_ALIGNMENT):
        self.sct = sct if sct is not None else mss.mss()
        self.row_alignment = row_alignment

    def grab(self, region: Rectangle) -> PixelBuffer:
        try:
            screenshot = self.sct.grab(region.as_monitor())
        except ScreenShotError as e:
            raise CaptureError(f"Screen capture failed for {region}: {e}") from e

        img = np.array(screenshot)

        # Convert BGRA to BGR
        if img.ndim == 3 and img.shape[2] == 4:
            img = cv2.cvtColor(img, cv2.COLOR_BGRA2BGR)

        height, width = img.shape[:2]
        if (width, height) != (region.width, region.height):
            raise CaptureError(
                f"Captured {width}x{height}, requested {region.width}x{region.height}"
            )

        logging.debug(f"Grabbed {width}x{height} at ({region.left}, {region.top})")
        return PixelBuffer.from_array(img, channel_order='BGR', row_alignment=self.row_alignment)

    def close(self):
        self.sct.close()
