import pytest

from brand_assets.banner import build_banner_scene
from brand_assets.config import BannerConfig, Palette
from brand_assets.mark import build_mark_scene
from brand_assets.models import Scene
from brand_assets.svg_document import scene_to_drawing, scene_to_svg


def test_mark_document_contains_hexagon_and_initials() -> None:
    svg = scene_to_svg(build_mark_scene(500, Palette()))

    assert 'width="500"' in svg and 'height="500"' in svg
    assert "<polygon" in svg
    assert 'stroke="#FFA046"' in svg
    assert 'stroke-width="9"' in svg
    assert 'font-weight="700"' in svg
    assert 'text-anchor="middle"' in svg
    assert 'dominant-baseline="middle"' in svg
    assert ">VS</text>" in svg


def test_banner_document_declares_gradient_and_overlay() -> None:
    svg = scene_to_svg(build_banner_scene(BannerConfig(), Palette()))

    assert "<linearGradient" in svg
    assert 'id="gradient1"' in svg
    assert 'fill="url(#gradient1)"' in svg
    assert 'opacity="0.18"' in svg
    assert "<polyline" in svg
    assert 'dominant-baseline="hanging"' in svg
    assert svg.index("<polyline") < svg.index("Varun Samiyani")


def test_serialisation_is_deterministic() -> None:
    scene = build_banner_scene(BannerConfig(), Palette())

    assert scene_to_svg(scene) == scene_to_svg(scene)


def test_drawing_size_matches_scene() -> None:
    drawing = scene_to_drawing(Scene(width=64, height=32))

    assert drawing["width"] == 64
    assert drawing["height"] == 32


def test_unknown_operation_rejected() -> None:
    with pytest.raises(TypeError):
        scene_to_svg(Scene(width=10, height=10, operations=("not an operation",)))


def test_title_shadow_is_written_before_the_title() -> None:
    svg = scene_to_svg(build_banner_scene(BannerConfig(), Palette()))

    shadow_at = svg.index('fill="#000000"')
    title_at = svg.index('fill="#FFFFFF"')
    assert shadow_at < title_at
    assert svg.count(">Varun Samiyani</text>") == 2
    assert 'opacity="0.25"' in svg
    assert 'y="174"' in svg or 'y="174.0"' in svg
