import os
from pathlib import Path
import unittest
from unittest import mock

from brand_assets.config import (
    DEFAULT_PUBLIC_DIR,
    BannerConfig,
    BrandConfig,
    OptimizerConfig,
    Palette,
)


class BrandConfigFromEnvTests(unittest.TestCase):
    def test_defaults_without_environment(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            config = BrandConfig.from_env()

        self.assertEqual(config.public_dir, DEFAULT_PUBLIC_DIR)
        self.assertEqual(config.renderer, "svg")
        self.assertEqual(config.palette, Palette())
        self.assertEqual(config.mark.initials, "VS")
        self.assertEqual(config.banner.subtitle, "Frontend Developer & AI Explorer")
        self.assertEqual(config.optimizer, OptimizerConfig())

    def test_environment_overrides(self) -> None:
        env = {
            "BRAND_PUBLIC_DIR": "/srv/site/public",
            "BRAND_RENDERER": "pillow",
            "BRAND_INITIALS": "AB",
            "BRAND_TITLE": "Ada Byron",
            "BRAND_SUBTITLE": "Frontend Developer • AI Explorer • Vibe Coder",
            "BRAND_OVERLAY_OPACITY": "0.12",
            "BRAND_SHOW_CIRCUIT": "no",
            "BRAND_TITLE_SHADOW": "off",
            "BRAND_WEBP_QUALITY": "75",
            "BRAND_JPEG_QUALITY": "70",
            "BRAND_PNG_COMPRESS_LEVEL": "6",
        }
        with mock.patch.dict(os.environ, env, clear=True):
            config = BrandConfig.from_env()

        self.assertEqual(config.public_dir, Path("/srv/site/public"))
        self.assertEqual(config.renderer, "pillow")
        self.assertEqual(config.mark.initials, "AB")
        self.assertEqual(config.banner.title, "Ada Byron")
        self.assertEqual(
            config.banner.subtitle, "Frontend Developer • AI Explorer • Vibe Coder"
        )
        self.assertEqual(config.banner.overlay_opacity, 0.12)
        self.assertFalse(config.banner.show_circuit)
        self.assertFalse(config.banner.title_shadow)
        self.assertEqual(config.optimizer.webp_quality, 75)
        self.assertEqual(config.optimizer.jpeg_quality, 70)
        self.assertEqual(config.optimizer.png_compress_level, 6)

    def test_overlay_opacity_above_ceiling_is_rejected(self) -> None:
        with mock.patch.dict(os.environ, {"BRAND_OVERLAY_OPACITY": "0.5"}, clear=True):
            with self.assertRaises(ValueError):
                BannerConfig.from_env()

    def test_invalid_number_is_rejected(self) -> None:
        with mock.patch.dict(os.environ, {"BRAND_WEBP_QUALITY": "high"}, clear=True):
            with self.assertRaises(ValueError):
                OptimizerConfig.from_env()

    def test_config_is_immutable(self) -> None:
        config = BrandConfig()

        with self.assertRaises(AttributeError):
            config.renderer = "pillow"  # type: ignore[misc]
