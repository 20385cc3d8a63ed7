# tests/renderer/test_base_map.py

from pathlib import Path
from typing import List

import numpy as np
import pytest
from PIL import Image

from hades_map.errors import (
    DecodeError,
    EmptyLayerSet,
    LayerLoadError,
    UnsupportedFormat,
)
from hades_map.renderer.base_map import build_base_image
from tests.test_utils import BLUE, GRAY, TRANSPARENT, pixel, pixels, solid, write_image

RED = (255, 0, 0, 255)


def test_canvas_takes_first_layer_size(tmp_path: Path) -> None:
    paths = [
        write_image(tmp_path, "base.png", solid((40, 30), GRAY)),
        write_image(tmp_path, "small.png", solid((20, 15), TRANSPARENT)),
        write_image(tmp_path, "large.png", solid((80, 90), TRANSPARENT)),
    ]
    canvas = build_base_image(paths)
    assert canvas.mode == "RGBA"
    assert canvas.size == (40, 30)
    assert np.all(pixels(canvas) == np.array(GRAY, dtype=np.uint8))


def test_smaller_layer_is_stretched_over_canvas(tmp_path: Path) -> None:
    paths = [
        write_image(tmp_path, "base.png", solid((40, 40), GRAY)),
        write_image(tmp_path, "cover.png", solid((20, 20), BLUE)),
    ]
    canvas = build_base_image(paths)
    assert canvas.size == (40, 40)
    assert np.all(pixels(canvas) == np.array(BLUE, dtype=np.uint8))


def test_later_layers_paint_over_earlier(tmp_path: Path) -> None:
    overlay = solid((20, 20), TRANSPARENT)
    overlay.paste(RED, (0, 0, 10, 20))
    paths = [
        write_image(tmp_path, "base.png", solid((20, 20), GRAY)),
        write_image(tmp_path, "overlay.png", overlay),
    ]
    canvas = build_base_image(paths)
    assert pixel(canvas, 2, 5) == RED
    assert pixel(canvas, 15, 5) == GRAY


def test_layer_order_matters(tmp_path: Path) -> None:
    red = write_image(tmp_path, "red.png", solid((10, 10), RED))
    blue = write_image(tmp_path, "blue.png", solid((10, 10), BLUE))
    assert pixel(build_base_image([red, blue]), 5, 5) == BLUE
    assert pixel(build_base_image([blue, red]), 5, 5) == RED


def test_single_layer(tmp_path: Path) -> None:
    canvas = build_base_image([write_image(tmp_path, "only.png", solid((9, 4), BLUE))])
    assert canvas.size == (9, 4)
    assert pixel(canvas, 8, 3) == BLUE


def test_empty_layer_set() -> None:
    with pytest.raises(EmptyLayerSet):
        build_base_image([])


def test_undecodable_layer_aborts(tmp_path: Path) -> None:
    broken = tmp_path / "broken.png"
    broken.write_bytes(b"\x00\x01\x02")
    paths = [
        write_image(tmp_path, "base.png", solid((10, 10), GRAY)),
        str(broken),
    ]
    with pytest.raises(LayerLoadError) as exc_info:
        build_base_image(paths)
    assert exc_info.value.index == 1
    assert exc_info.value.path == str(broken)
    assert isinstance(exc_info.value.__cause__, DecodeError)


def test_unsupported_layer_format(tmp_path: Path) -> None:
    path = str(tmp_path / "base.gif")
    Image.new("RGB", (4, 4)).save(path, format="GIF")
    with pytest.raises(LayerLoadError) as exc_info:
        build_base_image([path])
    assert isinstance(exc_info.value.__cause__, UnsupportedFormat)


def test_fail_fast_stops_loading() -> None:
    calls: List[str] = []

    def loader(path: str) -> Image.Image:
        calls.append(path)
        if path == "bad":
            raise DecodeError(path, "boom")
        return solid((4, 4), GRAY)

    with pytest.raises(LayerLoadError):
        build_base_image(["one", "bad", "three"], loader=loader)
    assert calls == ["one", "bad"]


def test_loader_errors_other_than_decode_propagate() -> None:
    def loader(path: str) -> Image.Image:
        raise RuntimeError("unexpected")

    with pytest.raises(RuntimeError):
        build_base_image(["one"], loader=loader)


def test_oversized_layer_aborts(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    path = write_image(tmp_path, "huge.png", solid((100, 100), GRAY))
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 1000)
    with pytest.raises(LayerLoadError) as exc_info:
        build_base_image([path])
    assert isinstance(exc_info.value.__cause__, DecodeError)


def test_empty_iterator_of_layers() -> None:
    with pytest.raises(EmptyLayerSet):
        build_base_image(iter([]))


def test_layers_from_generator(tmp_path: Path) -> None:
    paths = [
        write_image(tmp_path, "base.png", solid((10, 10), GRAY)),
        write_image(tmp_path, "cover.png", solid((5, 5), BLUE)),
    ]
    canvas = build_base_image(p for p in paths)
    assert canvas.size == (10, 10)
    assert pixel(canvas, 9, 9) == BLUE
