"""
Capture region resolution
Turns a window handle (or the desktop) plus a crop percentage into a capture rectangle
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional, Tuple

from config.settings import CAPTURE_LIMITS, clamp


@dataclass(frozen=True)
class Rectangle:
    """Absolute screen rectangle, always non-empty"""
    left: int
    top: int
    width: int
    height: int

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Rectangle must have positive size, got {self.width}x{self.height}")

    @classmethod
    def from_corners(cls, left: int, top: int, right: int, bottom: int) -> 'Rectangle':
        return cls(left, top, right - left, bottom - top)

    @property
    def right(self) -> int:
        return self.left + self.width

    @property
    def bottom(self) -> int:
        return self.top + self.height

    def contains(self, other: 'Rectangle') -> bool:
        return (self.left <= other.left and self.top <= other.top
                and other.right <= self.right and other.bottom <= self.bottom)

    def as_monitor(self) -> Dict[str, int]:
        """Region dict for mss"""
        return {'left': self.left, 'top': self.top, 'width': self.width, 'height': self.height}


@dataclass
class WindowInfo:
    """Information about a detected window"""
    hwnd: int
    title: str


def select_window(windows: Iterable[WindowInfo], fragment: Optional[str]) -> Optional[WindowInfo]:
    """
    Pick the window to observe for a name fragment.

    A title starting with the fragment wins over one that merely contains it,
    both compared case-insensitively. None means the desktop.
    """
    if not fragment or not fragment.strip():
        return None

    needle = fragment.lower()
    candidates = [w for w in windows if w.title]

    for window in candidates:
        if window.title.lower().startswith(needle):
            return window

    for window in candidates:
        if needle in window.title.lower():
            return window

    return None


def crop_rectangle(bounds: Rectangle, percentage: float) -> Rectangle:
    """Centered sub-rectangle covering `percentage` of each dimension"""
    percentage = clamp(percentage, *CAPTURE_LIMITS['capture_percentage'])

    width_cut = int(bounds.width - bounds.width * percentage)
    height_cut = int(bounds.height - bounds.height * percentage)

    width = max(bounds.width - width_cut, 1)
    height = max(bounds.height - height_cut, 1)

    return Rectangle(
        bounds.left + (bounds.width - width) // 2,
        bounds.top + (bounds.height - height) // 2,
        width,
        height
    )


class RegionResolver:
    """Resolves the rectangle to capture for each cycle"""

    def __init__(self, screen_bounds, window_bounds: Optional[Callable[[int], Optional[Rectangle]]] = None,
                 crop_percentage: float = 1.0, use_virtual_screen: bool = False):
        self.screen_bounds = screen_bounds
        self.window_bounds = window_bounds
        self.crop_percentage = crop_percentage
        self.use_virtual_screen = use_virtual_screen

    def base_bounds(self, window_handle: Optional[int] = None) -> Rectangle:
        """Window bounds, or screen bounds when there is no usable window"""
        if window_handle and self.window_bounds is not None:
            try:
                bounds = self.window_bounds(window_handle)
            except OSError as e:
                logging.warning(f"Window bounds lookup failed for {window_handle}: {e}")
                bounds = None

            if bounds is not None:
                return bounds

            logging.warning(f"Window {window_handle} unavailable, falling back to screen bounds")

        return self._screen()

    def resolve(self, window_handle: Optional[int] = None, crop_percentage: Optional[float] = None) -> Rectangle:
        if crop_percentage is None:
            crop_percentage = self.crop_percentage
        bounds = self.base_bounds(window_handle)
        region = crop_rectangle(bounds, crop_percentage)
        logging.debug(f"Capture bounds: {region.left}x {region.top}y {region.width}w {region.height}h")
        return region

    def _screen(self) -> Rectangle:
        if self.use_virtual_screen:
            return self.screen_bounds.virtual()
        return self.screen_bounds.primary()


def corners_to_rectangle(rect: Tuple[int, int, int, int]) -> Optional[Rectangle]:
    """(left, top, right, bottom) to Rectangle, None for empty rects"""
    left, top, right, bottom = rect
    if right - left <= 0 or bottom - top <= 0:
        return None
    return Rectangle.from_corners(left, top, right, bottom)
