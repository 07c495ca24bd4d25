"""
Console output for computed colors
"""

from detection.color_detector import ColorSet
from detection.pixels import RGBColor


def format_swatch(color: RGBColor, label: str) -> str:
    """Label, a 24-bit ANSI colored bar and the channel values"""
    r, g, b = color
    return (f"{label:<5}: \x1b[38;2;{r};{g};{b}m░▒▓███ "
            f"{r:>3} {g:>3} {b:>3} ███▓▒░\x1b[39;49m")


def print_color_set(colors: ColorSet, write=print):
    write(format_swatch(colors.center, "CCol"))
    write(format_swatch(colors.dominant, "DCol"))
    write(format_swatch(colors.average, "ACol"))
