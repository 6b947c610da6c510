"""Open Graph banner composition."""
from __future__ import annotations

from typing import List, Tuple

from .config import BannerConfig, Palette
from .geometry import circuit_motif, diagonal_waves, wave_band
from .models import (
    Circle,
    GradientStop,
    Group,
    Line,
    LinearGradient,
    Operation,
    Polyline,
    Rect,
    Scene,
    Text,
    TextShadow,
)

# Rough advance widths as a fraction of the font size, used to estimate text
# extents without a font engine.
BOLD_CHAR_WIDTH = 0.58
REGULAR_CHAR_WIDTH = 0.52

CIRCUIT_INSET = 360
CIRCUIT_TOP = 140
CIRCUIT_NODE_RADIUS = 6
WAVE_BAND_OFFSET = 180

# Lifts the white title off the pale top of the gradient.
TITLE_SHADOW = TextShadow(color="#000000", opacity=0.25, offset=(0.0, 4.0), blur=12)

Box = Tuple[float, float, float, float]


def background_gradient(palette: Palette) -> LinearGradient:
    return LinearGradient(
        stops=(
            GradientStop(0.0, palette.cream),
            GradientStop(0.5, palette.orange),
            GradientStop(1.0, palette.brick),
        )
    )


def overlay_operations(config: BannerConfig, palette: Palette) -> List[Operation]:
    """Decorative strokes drawn between the gradient and the text."""

    color = palette.dark_brown
    operations: List[Operation] = [
        Polyline(points=tuple(points), stroke=color, stroke_width=1)
        for points in diagonal_waves(config.width, config.height)
    ]
    for index, points in enumerate(wave_band(config.width, config.height - WAVE_BAND_OFFSET)):
        operations.append(
            Polyline(points=tuple(points), stroke=color, stroke_width=3 if index == 0 else 2)
        )

    if config.show_circuit:
        bus, branches = circuit_motif((config.width - CIRCUIT_INSET, CIRCUIT_TOP))
        operations.append(Line(bus[0], bus[1], stroke=color, stroke_width=2))
        for start, end in branches:
            operations.append(Line(start, end, stroke=color, stroke_width=2))
            operations.append(Circle(end, CIRCUIT_NODE_RADIUS, fill=color))
    return operations


def subtitle_top(config: BannerConfig) -> int:
    """Top edge of the subtitle, one subtitle line below the title."""

    return config.title_y + config.title_size + config.subtitle_size


def text_box(text: Text) -> Box:
    """Estimate the ``(left, top, right, bottom)`` box covered by *text*."""

    ratio = BOLD_CHAR_WIDTH if text.bold else REGULAR_CHAR_WIDTH
    width = len(text.text) * text.font_size * ratio
    height = text.font_size
    left = text.x - width / 2 if text.anchor == "middle" else text.x
    top = text.y - height / 2 if text.baseline == "middle" else text.y
    return left, top, left + width, top + height


def build_banner_scene(config: BannerConfig, palette: Palette) -> Scene:
    """Compose the gradient, overlay, title and subtitle, back to front."""

    title = Text(
        text=config.title,
        x=config.margin_x,
        y=config.title_y,
        font_size=config.title_size,
        fill=palette.white,
        font_family=config.font_family,
        bold=True,
        shadow=TITLE_SHADOW if config.title_shadow else None,
    )
    subtitle = Text(
        text=config.subtitle,
        x=config.margin_x,
        y=subtitle_top(config),
        font_size=config.subtitle_size,
        fill=palette.cream,
        font_family=config.font_family,
    )
    return Scene(
        width=config.width,
        height=config.height,
        operations=(
            Rect(0, 0, config.width, config.height, fill=background_gradient(palette)),
            Group(tuple(overlay_operations(config, palette)), opacity=config.overlay_opacity),
            title,
            subtitle,
        ),
    )
