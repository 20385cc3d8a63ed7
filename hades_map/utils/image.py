import logging

from PIL import Image

from hades_map.types import Point, Size

logger = logging.getLogger(__name__)

DEFAULT_RESAMPLE = Image.Resampling.LANCZOS


def _as_rgba(img: Image.Image) -> Image.Image:
    return img if img.mode == "RGBA" else img.convert("RGBA")


def auto_size(size: Size, width: int, height: int) -> Size:
    """
    Resolve a target size where a zero dimension means "derive from the other
    one preserving the aspect ratio". Derived dimensions are rounded and never
    drop below one pixel.
    """
    if width < 0 or height < 0:
        raise ValueError(f"Negative target size: {(width, height)}")
    if width == 0 and height == 0:
        raise ValueError("At least one target dimension must be non-zero")
    src_w, src_h = size
    if width == 0:
        width = max(1, int(round(src_w * height / src_h)))
    elif height == 0:
        height = max(1, int(round(src_h * width / src_w)))
    return width, height


def resize(
    img: Image.Image,
    width: int,
    height: int,
    resample: Image.Resampling = DEFAULT_RESAMPLE,
) -> Image.Image:
    """
    Return a resampled copy of ``img``. Pass 0 for one dimension to keep the
    aspect ratio. The input image is not modified.
    """
    target = auto_size(img.size, width, height)
    logger.debug("Resizing %s -> %s", img.size, target)
    return _as_rgba(img).resize(target, resample=resample)


def composite(dst: Image.Image, src: Image.Image, origin: Point = (0, 0)) -> None:
    """
    Paint ``src`` over ``dst`` in place with its top-left corner at ``origin``.
    Transparent source pixels let the destination show through. Parts of
    ``src`` falling outside ``dst`` are clipped.
    """
    if dst.mode != "RGBA":
        raise ValueError(f"Destination must be RGBA, got {dst.mode}")
    src = _as_rgba(src)
    x, y = origin
    # Pillow rejects negative destinations and out-of-bounds sources, crop first
    left, top = max(0, -x), max(0, -y)
    right = min(src.width, dst.width - x)
    bottom = min(src.height, dst.height - y)
    if right <= left or bottom <= top:
        return
    if (left, top, right, bottom) != (0, 0, src.width, src.height):
        src = src.crop((left, top, right, bottom))
    dst.alpha_composite(src, (x + left, y + top))

