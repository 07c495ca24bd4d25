"""
Runtime package
Capture loop orchestration and color output
"""

from .capture_loop import CaptureLoop
from .console import format_swatch, print_color_set

__all__ = ['CaptureLoop', 'format_swatch', 'print_color_set']
