"""Exceptions raised by the map renderer.

Every error derives from ``HexMapError`` so callers can catch the whole
family at once. Codec failures surface as ``DecodeError`` and are wrapped
into ``LayerLoadError`` or ``MarkerAssetError`` depending on what was being
loaded; the original exception is always kept as ``__cause__``.
"""


class HexMapError(Exception):
    """Base class for all map rendering errors."""


class InvalidCoordinate(HexMapError, ValueError):
    def __init__(self, coord: str):
        super().__init__(f"invalid coordinate: {coord!r}")
        self.coord = coord


class DecodeError(HexMapError):
    """An image file could not be read or decoded."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"cannot decode {path!r}: {reason}")
        self.path = path


class UnsupportedFormat(DecodeError):
    """The file suffix does not map to a known codec."""

    def __init__(self, path: str):
        super().__init__(path, "unsupported image format")


class LayerLoadError(HexMapError):
    def __init__(self, index: int, path: str):
        super().__init__(f"failed to load layer {index} ({path!r})")
        self.index = index
        self.path = path


class MarkerAssetError(HexMapError):
    def __init__(self, color: str, path: str):
        super().__init__(f"failed to load marker asset for {color!s} ({path!r})")
        self.color = color
        self.path = path


class EmptyLayerSet(HexMapError, ValueError):
    def __init__(self) -> None:
        super().__init__("at least one layer is required to build a base image")


class UnknownColor(HexMapError, ValueError):
    def __init__(self, color: str):
        super().__init__(f"unknown highlight color: {color!r}")
        self.color = color
