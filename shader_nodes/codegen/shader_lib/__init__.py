# Shader WGSL Library Package
# Re-exports the multi-statement snippets used by the emitters

from .snippet import Snippet
from .color import HSV_TO_RGB, RGB_TO_HSV, COLOR_RAMP
from .noise import VALUE_NOISE
from .voronoi import VORONOI_F1

__all__ = [
    'Snippet',
    'HSV_TO_RGB',
    'RGB_TO_HSV',
    'COLOR_RAMP',
    'VALUE_NOISE',
    'VORONOI_F1',
]
