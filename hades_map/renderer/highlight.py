import logging
from typing import Optional, Union

from PIL import Image

from hades_map.config import DEFAULT_ASSET_ROOT
from hades_map.grid import CELL_HEIGHT
from hades_map.renderer.marker import AssetLookupFn, HexMarker, resolve_marker
from hades_map.types import DEFAULT_COLOR, Canvas, Coordinate, HighlightColor
from hades_map.utils.image import DEFAULT_RESAMPLE, composite

logger = logging.getLogger(__name__)


def draw_marker(canvas: Canvas, marker: HexMarker) -> Canvas:
    composite(canvas, marker.image, marker.rect.origin)
    return canvas


def apply_highlight(
    canvas: Canvas,
    coord: Coordinate,
    color: Union[HighlightColor, str] = DEFAULT_COLOR,
    asset_root: str = DEFAULT_ASSET_ROOT,
    cell_height: float = CELL_HEIGHT,
    resample: Image.Resampling = DEFAULT_RESAMPLE,
    asset_lookup_fn: Optional[AssetLookupFn] = None,
) -> Canvas:
    """
    Draw a ``color`` hex marker over ``coord``. The canvas is modified in
    place and returned; it is left untouched if the marker cannot be
    resolved.
    """
    marker = resolve_marker(
        coord,
        color,
        canvas.size,
        asset_root=asset_root,
        cell_height=cell_height,
        resample=resample,
        asset_lookup_fn=asset_lookup_fn,
    )
    logger.debug("Highlighting %s in %s", coord, color)
    return draw_marker(canvas, marker)
