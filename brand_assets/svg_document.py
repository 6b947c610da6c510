"""Translate a :class:`Scene` into an SVG document with svgwrite."""
from __future__ import annotations

from typing import Iterable, List

import svgwrite

from .models import (
    Circle,
    Group,
    Line,
    LinearGradient,
    Operation,
    Paint,
    Point,
    Polygon,
    Polyline,
    Rect,
    Scene,
    Text,
)

BASELINES = {"top": "hanging", "middle": "middle"}


def _round(point: Point) -> Point:
    return round(point[0], 2), round(point[1], 2)


def _points(points: Iterable[Point]) -> List[Point]:
    return [_round(point) for point in points]


class _SceneWriter:
    def __init__(self, scene: Scene) -> None:
        self._scene = scene
        self._gradients = 0
        self.drawing = svgwrite.Drawing(
            size=(scene.width, scene.height),
            profile="full",
            viewBox=f"0 0 {scene.width} {scene.height}",
        )

    def write(self) -> svgwrite.Drawing:
        for operation in self._scene.operations:
            self.drawing.add(self._element(operation))
        return self.drawing

    def _paint(self, paint: Paint) -> str:
        if not isinstance(paint, LinearGradient):
            return paint
        self._gradients += 1
        # Fixed ids keep repeated renders byte-identical.
        gradient = self.drawing.linearGradient(
            start=paint.start, end=paint.end, id=f"gradient{self._gradients}"
        )
        for stop in paint.stops:
            gradient.add_stop_color(offset=stop.offset, color=stop.color)
        self.drawing.defs.add(gradient)
        return gradient.get_paint_server()

    def _element(self, operation: Operation):
        d = self.drawing
        if isinstance(operation, Group):
            group = d.g(opacity=operation.opacity)
            for child in operation.operations:
                group.add(self._element(child))
            return group
        if isinstance(operation, Rect):
            return d.rect(
                insert=(operation.x, operation.y),
                size=(operation.width, operation.height),
                fill=self._paint(operation.fill),
            )
        if isinstance(operation, Polygon):
            extra = {}
            if operation.stroke:
                extra = {"stroke": operation.stroke, "stroke_width": operation.stroke_width}
            return d.polygon(points=_points(operation.points), fill=operation.fill, **extra)
        if isinstance(operation, Polyline):
            return d.polyline(
                points=_points(operation.points),
                fill="none",
                stroke=operation.stroke,
                stroke_width=operation.stroke_width,
            )
        if isinstance(operation, Line):
            return d.line(
                start=_round(operation.start),
                end=_round(operation.end),
                stroke=operation.stroke,
                stroke_width=operation.stroke_width,
            )
        if isinstance(operation, Circle):
            return d.circle(
                center=_round(operation.center), r=operation.radius, fill=operation.fill
            )
        if isinstance(operation, Text):
            if operation.shadow is None:
                return self._text(operation)
            # CairoSVG ignores blur filters, so the shadow is a flat offset copy.
            shadow = operation.shadow
            group = d.g()
            group.add(
                self._text(
                    operation,
                    offset=shadow.offset,
                    fill=shadow.color,
                    opacity=shadow.opacity,
                )
            )
            group.add(self._text(operation))
            return group
        raise TypeError(f"Unsupported draw operation: {type(operation).__name__}")

    def _text(self, text: Text, offset: Point = (0.0, 0.0), fill: str | None = None, **extra):
        return self.drawing.text(
            text.text,
            insert=_round((text.x + offset[0], text.y + offset[1])),
            fill=fill or text.fill,
            font_family=text.font_family,
            font_weight="700" if text.bold else "400",
            font_size=f"{text.font_size}px",
            text_anchor=text.anchor,
            dominant_baseline=BASELINES[text.baseline],
            **extra,
        )


def scene_to_drawing(scene: Scene) -> svgwrite.Drawing:
    """Build an svgwrite drawing that reproduces *scene*."""

    return _SceneWriter(scene).write()


def scene_to_svg(scene: Scene) -> str:
    """Serialise *scene* as an SVG document string."""

    return scene_to_drawing(scene).tostring()
