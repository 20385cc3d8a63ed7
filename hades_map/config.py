from dataclasses import dataclass

from PIL import Image

from hades_map.grid import CELL_HEIGHT

DEFAULT_ASSET_ROOT = "static"


@dataclass(frozen=True)
class RenderConfig:
    """Settings shared by the base map builder and the marker resolver.

    Attributes:
        asset_root: Directory holding the ``hex_<color>.png`` marker assets.
        cell_height: Marker height as a fraction of the canvas height.
        resample: Pillow resampling filter used for every resize.
        max_workers: Threads used to resolve markers in ``render``; 1 keeps
            resolution sequential.
    """

    asset_root: str = DEFAULT_ASSET_ROOT
    cell_height: float = CELL_HEIGHT
    resample: Image.Resampling = Image.Resampling.LANCZOS
    max_workers: int = 1
