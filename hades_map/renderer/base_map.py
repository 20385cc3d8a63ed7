import logging
from typing import Callable, Iterable, Optional

from PIL import Image

from hades_map.codec import load_image
from hades_map.errors import DecodeError, EmptyLayerSet, LayerLoadError
from hades_map.types import Canvas
from hades_map.utils.image import DEFAULT_RESAMPLE, composite, resize

logger = logging.getLogger(__name__)

LayerLoader = Callable[[str], Image.Image]


def build_base_image(
    layer_paths: Iterable[str],
    resample: Image.Resampling = DEFAULT_RESAMPLE,
    loader: Optional[LayerLoader] = None,
) -> Canvas:
    """
    Composite the layers in order onto a new RGBA canvas sized to the first
    layer. Later layers with different bounds are resized to match before
    being drawn, so they cover exactly the canvas extent.

    Raises ``EmptyLayerSet`` when there are no layers and ``LayerLoadError`` if
    any layer fails to decode; no canvas is returned in either case.
    """
    paths = list(layer_paths)
    load = loader or load_image

    canvas: Optional[Canvas] = None
    for index, path in enumerate(paths):
        try:
            layer = load(path)
        except DecodeError as e:
            logger.warning("Aborting base image: layer %d (%s) failed", index, path)
            raise LayerLoadError(index, path) from e

        if canvas is None:
            canvas = Image.new("RGBA", layer.size, (0, 0, 0, 0))
        elif layer.size != canvas.size:
            logger.debug(
                "Layer %d (%s) is %s, resizing to %s", index, path, layer.size, canvas.size
            )
            layer = resize(layer, canvas.width, canvas.height, resample=resample)

        composite(canvas, layer, (0, 0))

    if canvas is None:
        raise EmptyLayerSet()
    logger.debug("Built base image %s from %d layers", canvas.size, len(paths))
    return canvas
