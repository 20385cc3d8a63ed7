"""Reading and writing image files.

Formats are chosen by the exact, case-sensitive file suffix. Decoded images
are always returned in RGBA mode so they can be composited directly.
"""

import logging
import os

from PIL import Image, UnidentifiedImageError
from pyrsistent import pmap
from pyrsistent.typing import PMap

from hades_map.errors import DecodeError, UnsupportedFormat

logger = logging.getLogger(__name__)

SUFFIX_FORMATS: PMap[str, str] = pmap(
    {
        ".jpeg": "JPEG",
        ".png": "PNG",
    }
)


def image_format(path: str) -> str:
    """Pillow format name for ``path``; raises ``UnsupportedFormat``."""
    _, suffix = os.path.splitext(path)
    fmt = SUFFIX_FORMATS.get(suffix)
    if fmt is None:
        raise UnsupportedFormat(path)
    return fmt


def load_image(path: str) -> Image.Image:
    fmt = image_format(path)
    try:
        with Image.open(path, formats=[fmt]) as img:
            decoded = img.convert("RGBA")
    except (
        OSError,
        UnidentifiedImageError,
        ValueError,
        Image.DecompressionBombError,
    ) as e:
        logger.warning("Failed to decode %s: %s", path, e)
        raise DecodeError(path, str(e)) from e
    logger.debug("Loaded %s (%s, %dx%d)", path, fmt, *decoded.size)
    return decoded


def save_image(img: Image.Image, path: str) -> None:
    """
    Encode ``img`` to ``path`` using the same suffix table as ``load_image``.
    JPEG has no alpha channel, so the image is flattened to RGB first.
    """
    fmt = image_format(path)
    if fmt == "JPEG" and img.mode != "RGB":
        img = img.convert("RGB")
    img.save(path, format=fmt)
    logger.debug("Saved %s (%s, %dx%d)", path, fmt, *img.size)
