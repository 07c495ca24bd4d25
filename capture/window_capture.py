"""
Window lookup for Color Ambience
Finds the window to observe and reports its bounds (Windows only)
"""

import logging
from typing import List, Optional

import pywintypes
import win32gui

from .region import Rectangle, WindowInfo, corners_to_rectangle, select_window


class WindowCapture:
    """Handles window detection and window bounds"""

    def list_windows(self) -> List[WindowInfo]:
        """All visible top-level windows with a title"""
        windows = []

        def enum_callback(hwnd, windows_list):
            if win32gui.IsWindowVisible(hwnd):
                title = win32gui.GetWindowText(hwnd)
                if title and title.strip():
                    windows_list.append(WindowInfo(hwnd, title))

        win32gui.EnumWindows(enum_callback, windows)
        return windows

    def locate(self, name_fragment: Optional[str]) -> Optional[int]:
        """Handle of the window matching `name_fragment`, None for the desktop"""
        window = select_window(self.list_windows(), name_fragment) if name_fragment else None

        if window is None:
            logging.info("Now observing Desktop")
            return None

        logging.info(f"Now observing \"{window.title}\"")
        return window.hwnd

    def window_bounds(self, hwnd: int) -> Optional[Rectangle]:
        """Current window rectangle, None if the window is gone"""
        try:
            rect = win32gui.GetWindowRect(hwnd)
        except pywintypes.error as e:
            logging.warning(f"Could not read bounds of window {hwnd}: {e}")
            return None
        return corners_to_rectangle(rect)
