import pytest

from brand_assets.config import MarkConfig, Palette
from brand_assets.mark import build_mark_scene
from brand_assets.models import Polygon, Rect, Text


@pytest.fixture
def palette() -> Palette:
    return Palette()


def test_operations_are_background_hexagon_then_initials(palette: Palette) -> None:
    scene = build_mark_scene(500, palette)

    background, hexagon, initials = scene.operations
    assert isinstance(background, Rect)
    assert (background.width, background.height, background.fill) == (500, 500, palette.cream)
    assert isinstance(hexagon, Polygon)
    assert hexagon.fill == palette.brick
    assert hexagon.stroke == palette.orange
    assert hexagon.stroke_width == 9
    assert isinstance(initials, Text)
    assert initials.text == "VS"
    assert initials.fill == palette.cream
    assert initials.bold


@pytest.mark.parametrize("size", [32, 180, 500])
def test_initials_are_centered(size: int, palette: Palette) -> None:
    initials = build_mark_scene(size, palette).texts()[0]

    assert initials.anchor == "middle"
    assert initials.baseline == "middle"
    assert initials.x == size / 2
    assert abs(initials.y - size / 2) <= size * 0.01
    assert initials.font_size == int(size * 0.28)


def test_favicon_keeps_minimum_stroke(palette: Palette) -> None:
    hexagon = build_mark_scene(32, palette).operations[1]

    assert hexagon.stroke_width == 2


def test_custom_initials(palette: Palette) -> None:
    scene = build_mark_scene(180, palette, MarkConfig(initials="AB"))

    assert scene.texts()[0].text == "AB"


def test_rejects_empty_canvas(palette: Palette) -> None:
    with pytest.raises(ValueError):
        build_mark_scene(0, palette)
