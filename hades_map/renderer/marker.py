"""Hex marker resolution.

A marker is one of the pre-rendered ``hex_<color>.png`` assets, scaled so its
height matches one grid cell of the target canvas, together with the canvas
rectangle it is drawn into. Coordinates are validated before any asset is
read.
"""

import logging
import os
from dataclasses import dataclass
from typing import Callable, Optional, Tuple, Union

from PIL import Image
from pyrsistent import pmap
from pyrsistent.typing import PMap

from hades_map.codec import load_image
from hades_map.config import DEFAULT_ASSET_ROOT
from hades_map.errors import DecodeError, MarkerAssetError, UnknownColor
from hades_map.grid import CELL_HEIGHT, normalized_position
from hades_map.types import Coordinate, HighlightColor, Point, Size
from hades_map.utils.image import DEFAULT_RESAMPLE, resize

logger = logging.getLogger(__name__)

MarkerAssetMap = PMap[HighlightColor, str]
AssetLookupFn = Callable[[HighlightColor], Image.Image]

MARKER_ASSET_MAP: MarkerAssetMap = pmap(
    {color: f"hex_{color}.png" for color in HighlightColor}
)


@dataclass(frozen=True)
class TargetRectangle:
    """Canvas region a marker is painted into.

    Attributes:
        origin: Top-left corner in canvas pixels.
        corner: Bottom-right corner (exclusive), ``origin`` plus marker size.
    """

    origin: Point
    corner: Point

    @property
    def size(self) -> Size:
        return self.corner[0] - self.origin[0], self.corner[1] - self.origin[1]

    @property
    def box(self) -> Tuple[int, int, int, int]:
        return (*self.origin, *self.corner)


@dataclass(frozen=True)
class HexMarker:
    image: Image.Image
    rect: TargetRectangle


def as_color(color: Union[HighlightColor, str]) -> HighlightColor:
    try:
        return HighlightColor(color.lower())
    except ValueError as e:
        raise UnknownColor(color) from e


def marker_asset_path(
    color: HighlightColor, asset_root: str = DEFAULT_ASSET_ROOT
) -> str:
    return os.path.join(asset_root, MARKER_ASSET_MAP[color])


def load_marker_asset(
    color: HighlightColor, asset_root: str = DEFAULT_ASSET_ROOT
) -> Image.Image:
    path = marker_asset_path(color, asset_root)
    try:
        return load_image(path)
    except DecodeError as e:
        logger.warning("Marker asset for %s unavailable: %s", color, e)
        raise MarkerAssetError(color, path) from e


def marker_height(canvas_height: int, cell_height: float = CELL_HEIGHT) -> int:
    # epsilon absorbs float error on exact multiples, e.g. 700 * (1/7)
    return max(1, int(canvas_height * cell_height + 1e-9))


def target_rectangle(
    coord: Coordinate, canvas_size: Size, marker_size: Size
) -> TargetRectangle:
    """
    Place a marker of ``marker_size`` at ``coord``: the origin is the cell's
    fractional position scaled by the canvas size and truncated, the far
    corner is the origin offset by the marker size.
    """
    point = normalized_position(coord)
    origin = (int(canvas_size[0] * point.x), int(canvas_size[1] * point.y))
    corner = (origin[0] + marker_size[0], origin[1] + marker_size[1])
    return TargetRectangle(origin=origin, corner=corner)


def resolve_marker(
    coord: Coordinate,
    color: Union[HighlightColor, str],
    canvas_size: Size,
    asset_root: str = DEFAULT_ASSET_ROOT,
    cell_height: float = CELL_HEIGHT,
    resample: Image.Resampling = DEFAULT_RESAMPLE,
    asset_lookup_fn: Optional[AssetLookupFn] = None,
) -> HexMarker:
    """
    Build the marker for ``coord`` on a canvas of ``canvas_size``.

    Raises ``InvalidCoordinate`` before touching the asset store, and
    ``MarkerAssetError`` if the color's asset cannot be decoded.
    """
    normalized_position(coord)
    color = as_color(color)

    if asset_lookup_fn is not None:
        asset = asset_lookup_fn(color)
    else:
        asset = load_marker_asset(color, asset_root)

    image = resize(asset, 0, marker_height(canvas_size[1], cell_height), resample)
    rect = target_rectangle(coord, canvas_size, image.size)
    logger.debug("Resolved %s marker for %s at %s", color, coord, rect.box)
    return HexMarker(image=image, rect=rect)
