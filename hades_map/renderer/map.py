import logging
from concurrent.futures import ThreadPoolExecutor
from functools import lru_cache
from typing import Dict, List, Optional, Sequence, Tuple, Union

from PIL import Image

from hades_map.config import RenderConfig
from hades_map.grid import normalized_position
from hades_map.renderer.base_map import build_base_image
from hades_map.renderer.highlight import draw_marker
from hades_map.renderer.marker import (
    HexMarker,
    as_color,
    load_marker_asset,
    resolve_marker,
)
from hades_map.types import DEFAULT_COLOR, Canvas, Coordinate, HighlightColor, Size

logger = logging.getLogger(__name__)

Highlight = Tuple[Coordinate, Union[HighlightColor, str]]

MARKER_CACHE_SIZE = 2048


class HexMapRenderer:
    """Renders sector maps with a shared configuration.

    Decoded marker assets are cached per color and resized markers per
    ``(coordinate, color, canvas size)``, so repeated highlights and repeated
    renders at the same size decode each asset only once. The marker cache
    keeps the ``MARKER_CACHE_SIZE`` most recently used entries.
    """

    config: RenderConfig

    def __init__(self, config: Optional[RenderConfig] = None):
        self.config = config or RenderConfig()
        self._assets: Dict[HighlightColor, Image.Image] = {}
        self._cached_marker = lru_cache(maxsize=MARKER_CACHE_SIZE)(self._build_marker)

    def marker_asset(self, color: HighlightColor) -> Image.Image:
        asset = self._assets.get(color)
        if asset is None:
            asset = load_marker_asset(color, self.config.asset_root)
            self._assets[color] = asset
        return asset

    def build_base_image(self, layer_paths: Sequence[str]) -> Canvas:
        return build_base_image(layer_paths, resample=self.config.resample)

    def resolve_marker(
        self, coord: Coordinate, color: Union[HighlightColor, str], canvas_size: Size
    ) -> HexMarker:
        normalized_position(coord)
        return self._cached_marker(coord.lower(), as_color(color), tuple(canvas_size))

    def _build_marker(
        self, coord: Coordinate, color: HighlightColor, canvas_size: Size
    ) -> HexMarker:
        return resolve_marker(
            coord,
            color,
            canvas_size,
            cell_height=self.config.cell_height,
            resample=self.config.resample,
            asset_lookup_fn=self.marker_asset,
        )

    def cache_info(self):
        return self._cached_marker.cache_info()

    def apply_highlight(
        self,
        canvas: Canvas,
        coord: Coordinate,
        color: Union[HighlightColor, str] = DEFAULT_COLOR,
    ) -> Canvas:
        return draw_marker(canvas, self.resolve_marker(coord, color, canvas.size))

    def resolve_markers(
        self, highlights: Sequence[Highlight], canvas_size: Size
    ) -> List[HexMarker]:
        """
        Resolve every highlight, concurrently when ``max_workers > 1``.
        Results keep the input order.
        """
        # fail on a bad coordinate before any asset is decoded
        for coord, _ in highlights:
            normalized_position(coord)

        if self.config.max_workers <= 1 or len(highlights) <= 1:
            return [self.resolve_marker(c, col, canvas_size) for c, col in highlights]

        # warm the asset cache up front so workers only read it
        for color in {as_color(col) for _, col in highlights}:
            self.marker_asset(color)
        with ThreadPoolExecutor(max_workers=self.config.max_workers) as pool:
            return list(
                pool.map(
                    lambda h: self.resolve_marker(h[0], h[1], canvas_size), highlights
                )
            )

    def render(
        self, layer_paths: Sequence[str], highlights: Sequence[Highlight] = ()
    ) -> Canvas:
        """
        Build the base image and draw ``highlights`` in order. Markers are all
        resolved before the first one is drawn, so a failing highlight leaves
        no partially highlighted map behind.
        """
        canvas = self.build_base_image(layer_paths)
        markers = self.resolve_markers(highlights, canvas.size)
        for marker in markers:
            draw_marker(canvas, marker)
        logger.info(
            "Rendered %dx%d map with %d highlights", canvas.width, canvas.height, len(markers)
        )
        return canvas


def render_map(
    layer_paths: Sequence[str],
    highlights: Sequence[Highlight] = (),
    config: Optional[RenderConfig] = None,
) -> Canvas:
    return HexMapRenderer(config).render(layer_paths, highlights)
