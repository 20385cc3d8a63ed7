"""Sector map rendering.

Composites the layers of a hex sector map into one image and highlights
individual cells with colored hex markers::

    from hades_map import HighlightColor, apply_highlight, build_base_image

    canvas = build_base_image(["map.png", "labels.png"])
    apply_highlight(canvas, "d4", HighlightColor.RED, asset_root="static")

Coordinates such as ``"c4"`` name cells of a fixed 37-cell grid (see
:mod:`hades_map.grid`). Every failure is raised as a ``HexMapError``
subclass from :mod:`hades_map.errors`.
"""

from hades_map.codec import load_image, save_image
from hades_map.config import RenderConfig
from hades_map.errors import (
    DecodeError,
    EmptyLayerSet,
    HexMapError,
    InvalidCoordinate,
    LayerLoadError,
    MarkerAssetError,
    UnknownColor,
    UnsupportedFormat,
)
from hades_map.grid import is_valid_coordinate, normalized_position
from hades_map.renderer.base_map import build_base_image
from hades_map.renderer.highlight import apply_highlight
from hades_map.renderer.map import HexMapRenderer, render_map
from hades_map.renderer.marker import HexMarker, TargetRectangle, resolve_marker
from hades_map.types import DEFAULT_COLOR, HighlightColor

__all__ = [
    "DEFAULT_COLOR",
    "DecodeError",
    "EmptyLayerSet",
    "HexMapError",
    "HexMapRenderer",
    "HexMarker",
    "HighlightColor",
    "InvalidCoordinate",
    "LayerLoadError",
    "MarkerAssetError",
    "RenderConfig",
    "TargetRectangle",
    "UnknownColor",
    "UnsupportedFormat",
    "apply_highlight",
    "build_base_image",
    "is_valid_coordinate",
    "load_image",
    "normalized_position",
    "render_map",
    "resolve_marker",
    "save_image",
]
