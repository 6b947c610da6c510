from pathlib import Path
from unittest import mock

import pytest
from PIL import Image

from brand_assets import generator
from brand_assets.config import BrandConfig
from brand_assets.generator import generate_brand_assets, generate_og_image
from brand_assets.renderers.pillow import PillowSceneRenderer


@pytest.fixture
def config(tmp_path: Path) -> BrandConfig:
    return BrandConfig(public_dir=tmp_path / "my-app" / "public", renderer="pillow")


def test_generates_logo_and_favicons(config: BrandConfig) -> None:
    artifacts = generate_brand_assets(config)

    names = [artifact.path.name for artifact in artifacts]
    assert names == ["logo.png", "favicon.png", "favicon.ico"]
    assert [(a.width, a.height) for a in artifacts] == [(500, 500), (180, 180), (32, 32)]
    with Image.open(config.public_dir / "logo.png") as logo:
        assert logo.size == (500, 500)
    with Image.open(config.public_dir / "favicon.ico") as icon:
        assert icon.format == "ICO"
        assert icon.size == (32, 32)


def test_transient_icon_png_is_removed(config: BrandConfig) -> None:
    generate_brand_assets(config)

    assert not (config.public_dir / "favicon-32.png").exists()
    assert sorted(path.name for path in config.public_dir.iterdir()) == [
        "favicon.ico",
        "favicon.png",
        "logo.png",
    ]


def test_transient_icon_png_removed_when_ico_fails(config: BrandConfig) -> None:
    with mock.patch.object(generator, "save_ico", side_effect=OSError("disk full")):
        with pytest.raises(OSError):
            generate_brand_assets(config)

    assert not (config.public_dir / "favicon-32.png").exists()


def test_rerun_is_byte_identical(config: BrandConfig) -> None:
    generate_brand_assets(config)
    generate_og_image(config)
    first = {p.name: p.read_bytes() for p in config.public_dir.iterdir()}

    generate_brand_assets(config)
    generate_og_image(config)
    second = {p.name: p.read_bytes() for p in config.public_dir.iterdir()}

    assert first == second


def test_generates_og_image(config: BrandConfig) -> None:
    artifact = generate_og_image(config, PillowSceneRenderer())

    assert artifact.path == config.public_dir / "og-image.png"
    with Image.open(artifact.path) as image:
        assert image.size == (1200, 630)


def test_uncreatable_output_directory_raises(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    config = BrandConfig(public_dir=blocker / "public", renderer="pillow")

    with pytest.raises(OSError):
        generate_og_image(config)
