from PIL import Image

from brand_assets.codec import encode_png, save_ico, save_min_jpeg, save_png, save_webp


def test_encode_png_is_repeatable() -> None:
    image = Image.new("RGBA", (16, 16), (212, 69, 29, 255))

    assert encode_png(image) == encode_png(image)
    assert encode_png(image).startswith(b"\x89PNG")


def test_save_ico_from_png(tmp_path) -> None:
    png = save_png(Image.new("RGBA", (32, 32), (255, 160, 70, 255)), tmp_path / "icon.png")

    ico = save_ico(png, tmp_path / "favicon.ico")

    with Image.open(ico) as image:
        assert image.format == "ICO"
        assert image.size == (32, 32)


def test_save_min_jpeg_flattens_alpha(tmp_path) -> None:
    path = save_min_jpeg(Image.new("RGBA", (8, 8), (0, 0, 0, 0)), tmp_path / "x.min.jpg", 82)

    with Image.open(path) as image:
        assert image.format == "JPEG"
        assert image.mode == "RGB"


def test_save_webp(tmp_path) -> None:
    path = save_webp(Image.new("RGB", (8, 8), "white"), tmp_path / "x.webp", 82)

    with Image.open(path) as image:
        assert image.format == "WEBP"
