"""Immediate-mode rendering of scenes with Pillow's ImageDraw."""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Sequence, Tuple

from PIL import Image, ImageColor, ImageDraw, ImageFilter, ImageFont

from ..models import (
    Circle,
    Group,
    Line,
    LinearGradient,
    Operation,
    Polygon,
    Polyline,
    Rect,
    Scene,
    Text,
)

logger = logging.getLogger(__name__)

BOLD_FONTS = (
    "DejaVuSans-Bold.ttf",
    "LiberationSans-Bold.ttf",
    "Arial Bold.ttf",
    "arialbd.ttf",
)
REGULAR_FONTS = (
    "DejaVuSans.ttf",
    "LiberationSans-Regular.ttf",
    "Arial.ttf",
    "arial.ttf",
)
ANCHORS = {"start": "l", "middle": "m"}
BASELINES = {"top": "a", "middle": "m"}

RGB = Tuple[int, int, int]


@lru_cache(maxsize=32)
def load_font(size: int, bold: bool) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    """Return the first installed TrueType font, or Pillow's bundled one."""

    for candidate in BOLD_FONTS if bold else REGULAR_FONTS:
        try:
            return ImageFont.truetype(candidate, size)
        except OSError:
            continue
    logger.warning("No TrueType font found; using Pillow's default font at %dpx", size)
    return ImageFont.load_default(size=size)


def text_anchor(text: Text) -> str:
    return ANCHORS[text.anchor] + BASELINES[text.baseline]


def measure_text(text: Text) -> Tuple[float, float, float, float]:
    """Return the ``(left, top, right, bottom)`` ink box of *text* in canvas pixels."""

    font = load_font(text.font_size, text.bold)
    left, top, right, bottom = font.getbbox(text.text, anchor=text_anchor(text))
    return text.x + left, text.y + top, text.x + right, text.y + bottom


def interpolate(stops: Sequence[Tuple[float, RGB]], t: float) -> RGB:
    """Linear interpolation between the two gradient stops around ``t``."""

    if t <= stops[0][0]:
        return stops[0][1]
    for (start, low), (end, high) in zip(stops, stops[1:]):
        if t <= end:
            span = end - start
            ratio = (t - start) / span if span else 1.0
            return tuple(round(a + (b - a) * ratio) for a, b in zip(low, high))  # type: ignore[return-value]
    return stops[-1][1]


class PillowSceneRenderer:
    name = "pillow"

    def render(self, scene: Scene) -> Image.Image:
        image = Image.new("RGBA", (scene.width, scene.height), (0, 0, 0, 0))
        self._draw_all(image, scene.operations)
        return image

    def _draw_all(self, image: Image.Image, operations: Sequence[Operation]) -> None:
        for operation in operations:
            if isinstance(operation, Group):
                self._draw_group(image, operation)
            else:
                self._draw(image, operation)

    def _draw_group(self, image: Image.Image, group: Group) -> None:
        layer = Image.new("RGBA", image.size, (0, 0, 0, 0))
        self._draw_all(layer, group.operations)
        alpha = layer.getchannel("A").point(lambda value: round(value * group.opacity))
        layer.putalpha(alpha)
        image.alpha_composite(layer)

    def _draw(self, image: Image.Image, operation: Operation) -> None:
        draw = ImageDraw.Draw(image)
        if isinstance(operation, Rect):
            if isinstance(operation.fill, LinearGradient):
                self._fill_gradient(draw, operation, operation.fill)
            else:
                draw.rectangle(self._rect_box(operation), fill=operation.fill)
        elif isinstance(operation, Polygon):
            points = list(operation.points)
            draw.polygon(points, fill=operation.fill)
            if operation.stroke and operation.stroke_width:
                draw.line(
                    points + points[:1],
                    fill=operation.stroke,
                    width=round(operation.stroke_width),
                    joint="curve",
                )
        elif isinstance(operation, Polyline):
            draw.line(
                list(operation.points),
                fill=operation.stroke,
                width=round(operation.stroke_width),
                joint="curve",
            )
        elif isinstance(operation, Line):
            draw.line(
                [operation.start, operation.end],
                fill=operation.stroke,
                width=round(operation.stroke_width),
            )
        elif isinstance(operation, Circle):
            cx, cy = operation.center
            r = operation.radius
            draw.ellipse([cx - r, cy - r, cx + r, cy + r], fill=operation.fill)
        elif isinstance(operation, Text):
            if operation.shadow is not None:
                self._draw_shadow(image, operation)
            draw.text(
                (operation.x, operation.y),
                operation.text,
                fill=operation.fill,
                font=load_font(operation.font_size, operation.bold),
                anchor=text_anchor(operation),
            )
        else:
            raise TypeError(f"Unsupported draw operation: {type(operation).__name__}")

    def _draw_shadow(self, image: Image.Image, text: Text) -> None:
        shadow = text.shadow
        dx, dy = shadow.offset
        layer = Image.new("RGBA", image.size, (0, 0, 0, 0))
        ImageDraw.Draw(layer).text(
            (text.x + dx, text.y + dy),
            text.text,
            fill=shadow.color,
            font=load_font(text.font_size, text.bold),
            anchor=text_anchor(text),
        )
        if shadow.blur:
            # Canvas shadowBlur is roughly twice the Gaussian standard deviation.
            layer = layer.filter(ImageFilter.GaussianBlur(shadow.blur / 2))
        alpha = layer.getchannel("A").point(lambda value: round(value * shadow.opacity))
        layer.putalpha(alpha)
        image.alpha_composite(layer)

    @staticmethod
    def _rect_box(rect: Rect) -> Tuple[float, float, float, float]:
        return rect.x, rect.y, rect.x + rect.width - 1, rect.y + rect.height - 1

    def _fill_gradient(
        self, draw: ImageDraw.ImageDraw, rect: Rect, gradient: LinearGradient
    ) -> None:
        (x1, y1), (x2, y2) = gradient.start, gradient.end
        if x1 != x2 and y1 != y2:
            raise ValueError("The Pillow renderer only supports axis-aligned gradients")
        stops = [(stop.offset, ImageColor.getrgb(stop.color)[:3]) for stop in gradient.stops]
        vertical = x1 == x2
        length = int(rect.height if vertical else rect.width)
        start, end = (y1, y2) if vertical else (x1, x2)
        for index in range(length):
            position = index / (length - 1) if length > 1 else 0.0
            t = (position - start) / (end - start)
            color = interpolate(stops, t)
            if vertical:
                y = rect.y + index
                draw.line([(rect.x, y), (rect.x + rect.width - 1, y)], fill=color)
            else:
                x = rect.x + index
                draw.line([(x, rect.y), (x, rect.y + rect.height - 1)], fill=color)
