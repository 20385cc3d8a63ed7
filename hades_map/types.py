"""Common type aliases and enumerations.

``HighlightColor`` selects one of the pre-rendered hex marker assets. The
geometry aliases mirror Pillow's conventions: sizes are ``(width, height)``
and points are ``(x, y)`` in canvas pixels with the origin at the top left.
"""

from enum import StrEnum, auto
from typing import Tuple

from PIL import Image

Canvas = Image.Image
Point = Tuple[int, int]
Size = Tuple[int, int]
Coordinate = str


class HighlightColor(StrEnum):
    """Marker colors. Each member names exactly one asset file."""

    GREEN = auto()
    ORANGE = auto()
    PINK = auto()
    YELLOW = auto()
    RED = auto()
    WARN = auto()  # yellow-black warning stripes


DEFAULT_COLOR = HighlightColor.GREEN
