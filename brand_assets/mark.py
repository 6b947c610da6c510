"""Hexagon mark used for the logo and favicons."""
from __future__ import annotations

from .config import MarkConfig, Palette
from .geometry import font_size, hexagon_radius, hexagon_vertices, stroke_width, text_offset
from .models import Polygon, Rect, Scene, Text


def build_mark_scene(size: int, palette: Palette, config: MarkConfig | None = None) -> Scene:
    """Compose the mark on a ``size`` x ``size`` canvas.

    Every measurement is proportional to ``size`` so the mark stays
    recognisable from 32 px favicons up to the 500 px logo.
    """

    if size < 1:
        raise ValueError(f"Canvas size must be positive, got {size}")
    config = config or MarkConfig()

    center = (size / 2, size / 2)
    hexagon = Polygon(
        points=tuple(hexagon_vertices(center, hexagon_radius(size))),
        fill=palette.brick,
        stroke=palette.orange,
        stroke_width=stroke_width(size),
    )
    initials = Text(
        text=config.initials,
        x=center[0],
        y=center[1] + text_offset(size),
        font_size=font_size(size),
        fill=palette.cream,
        font_family=config.font_family,
        bold=True,
        anchor="middle",
        baseline="middle",
    )
    return Scene(
        width=size,
        height=size,
        operations=(
            Rect(0, 0, size, size, fill=palette.cream),
            hexagon,
            initials,
        ),
    )
