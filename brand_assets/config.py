"""Configuration objects for the brand asset generators."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple


PROJECT_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_PUBLIC_DIR = PROJECT_ROOT / "public"

MAX_OVERLAY_OPACITY = 0.2


def _strtobool(value: str) -> bool:
    """Return ``True`` when *value* represents a truthy string."""

    return value.lower() in {"1", "true", "t", "yes", "y", "on"}


@dataclass(frozen=True)
class Palette:
    """Brand colors shared by every generated asset."""

    cream: str = "#F5E9E4"
    orange: str = "#FFA046"
    brick: str = "#D4451D"
    white: str = "#FFFFFF"
    dark_brown: str = "#4B1F12"


@dataclass(frozen=True)
class MarkConfig:
    """Settings for the hexagon mark used by the logo and favicons."""

    initials: str = "VS"
    font_family: str = "Arial, Helvetica, sans-serif"
    logo_size: int = 500
    favicon_size: int = 180
    icon_size: int = 32

    @classmethod
    def from_env(cls, prefix: str = "BRAND_") -> "MarkConfig":
        """Create a configuration from environment variables."""

        return cls(initials=os.getenv(f"{prefix}INITIALS", cls.initials))


@dataclass(frozen=True)
class BannerConfig:
    """Layout and copy for the Open Graph banner."""

    width: int = 1200
    height: int = 630
    title: str = "Varun Samiyani"
    subtitle: str = "Frontend Developer & AI Explorer"
    font_family: str = "Inter, Arial, Helvetica, sans-serif"
    margin_x: int = 80
    title_y: int = 170
    title_size: int = 90
    subtitle_size: int = 40
    overlay_opacity: float = 0.18
    show_circuit: bool = True
    title_shadow: bool = True

    def __post_init__(self) -> None:
        if not 0 < self.overlay_opacity <= MAX_OVERLAY_OPACITY:
            raise ValueError(
                f"Overlay opacity must be within (0, {MAX_OVERLAY_OPACITY}], "
                f"got {self.overlay_opacity}"
            )

    @classmethod
    def from_env(cls, prefix: str = "BRAND_") -> "BannerConfig":
        """Create a configuration from environment variables."""

        return cls(
            title=os.getenv(f"{prefix}TITLE", cls.title),
            subtitle=os.getenv(f"{prefix}SUBTITLE", cls.subtitle),
            overlay_opacity=float(
                os.getenv(f"{prefix}OVERLAY_OPACITY", cls.overlay_opacity)
            ),
            show_circuit=_strtobool(os.getenv(f"{prefix}SHOW_CIRCUIT", "true")),
            title_shadow=_strtobool(os.getenv(f"{prefix}TITLE_SHADOW", "true")),
        )


@dataclass(frozen=True)
class OptimizerConfig:
    """Encoder settings for the batch image optimizer."""

    webp_quality: int = 82
    jpeg_quality: int = 82
    png_compress_level: int = 9
    extensions: Tuple[str, ...] = (".png", ".jpg", ".jpeg")
    minified_suffixes: Tuple[str, ...] = (".min.png", ".min.jpg")

    @classmethod
    def from_env(cls, prefix: str = "BRAND_") -> "OptimizerConfig":
        """Create a configuration from environment variables."""

        return cls(
            webp_quality=int(os.getenv(f"{prefix}WEBP_QUALITY", cls.webp_quality)),
            jpeg_quality=int(os.getenv(f"{prefix}JPEG_QUALITY", cls.jpeg_quality)),
            png_compress_level=int(
                os.getenv(f"{prefix}PNG_COMPRESS_LEVEL", cls.png_compress_level)
            ),
        )


@dataclass(frozen=True)
class BrandConfig:
    """Top level configuration handed to every generator."""

    public_dir: Path = DEFAULT_PUBLIC_DIR
    renderer: str = "svg"
    palette: Palette = Palette()
    mark: MarkConfig = MarkConfig()
    banner: BannerConfig = BannerConfig()
    optimizer: OptimizerConfig = OptimizerConfig()

    @classmethod
    def from_env(cls, prefix: str = "BRAND_") -> "BrandConfig":
        """Create the configuration from environment variables."""

        public_dir = Path(os.getenv(f"{prefix}PUBLIC_DIR", str(cls.public_dir)))
        renderer = os.getenv(f"{prefix}RENDERER", cls.renderer)
        return cls(
            public_dir=public_dir,
            renderer=renderer,
            mark=MarkConfig.from_env(prefix),
            banner=BannerConfig.from_env(prefix),
            optimizer=OptimizerConfig.from_env(prefix),
        )
