"""
Capture loop for Color Ambience
Runs capture -> downscale -> reduce cycles on a fixed interval
"""

import logging
import time
from typing import Callable, Optional

from capture.downscale import downscale
from capture.region import RegionResolver
from capture.screen_grabber import CaptureError
from config.settings import CaptureSettings
from detection.color_detector import ColorDetector, ColorSet


class CaptureLoop:
    """Synchronous poll loop, one capture cycle per interval"""

    def __init__(self, resolver: RegionResolver, grabber, detector: ColorDetector,
                 settings: CaptureSettings, sink: Callable[[ColorSet], None],
                 window_handle: Optional[int] = None, sleep: Callable[[float], None] = time.sleep):
        self.resolver = resolver
        self.grabber = grabber
        self.detector = detector
        self.settings = settings
        self.sink = sink
        self.window_handle = window_handle
        self.sleep = sleep

        self.running = False
        self.cycle_count = 0
        self.failed_cycles = 0

    def run_cycle(self) -> Optional[ColorSet]:
        """One capture cycle; None when the frame could not be grabbed"""
        self.cycle_count += 1
        try:
            region = self.resolver.resolve(self.window_handle)
            frame = self.grabber.grab(region)
        except CaptureError as e:
            self.failed_cycles += 1
            logging.error(f"Cycle {self.cycle_count} skipped: {e}")
            return None

        frame = downscale(frame, self.settings.resolution_width, self.settings.resolution_height)
        colors = self.detector.detect(frame)
        self.sink(colors)
        return colors

    def run(self, max_cycles: Optional[int] = None):
        """Loop until stop() is called or `max_cycles` cycles have run"""
        self.running = True
        interval = self.settings.capture_interval / 1000
        logging.info(f"Capture loop started ({self.settings.capture_interval} ms interval)")

        completed = 0
        while self.running:
            self.run_cycle()
            completed += 1
            if max_cycles is not None and completed >= max_cycles:
                break
            self.sleep(interval)

        self.running = False
        logging.info(f"Capture loop stopped after {completed} cycles ({self.failed_cycles} failed)")

    def stop(self):
        """Stop after the current cycle"""
        self.running = False
