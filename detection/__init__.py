"""
Color detection package
Contains pixel extraction, color reducers and k-means clustering
"""

from .color_detector import ColorDetector, ColorSet, average_color, center_color, dominant_color
from .kmeans import kmeans
from .pixels import BLACK, RGBColor, extract_samples, iter_colors

__all__ = [
    'ColorDetector', 'ColorSet', 'average_color', 'center_color', 'dominant_color',
    'kmeans', 'BLACK', 'RGBColor', 'extract_samples', 'iter_colors'
]
