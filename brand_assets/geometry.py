"""Procedural geometry for the brand mark and banner decorations."""
from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from .models import Point

HEX_RADIUS_RATIO = 0.33
STROKE_RATIO = 0.018
MIN_STROKE_WIDTH = 2
FONT_RATIO = 0.28
TEXT_OFFSET_RATIO = 0.01


def hexagon_vertices(center: Point, radius: float) -> List[Point]:
    """Return the six vertices of a flat-top hexagon around *center*.

    Vertex ``i`` sits at angle ``(pi / 3) * i - pi / 6``.
    """

    cx, cy = center
    vertices: List[Point] = []
    for index in range(6):
        angle = math.pi / 3 * index - math.pi / 6
        vertices.append((cx + radius * math.cos(angle), cy + radius * math.sin(angle)))
    return vertices


def hexagon_radius(size: int) -> int:
    return math.floor(size * HEX_RADIUS_RATIO)


def stroke_width(size: int) -> int:
    return max(MIN_STROKE_WIDTH, math.floor(size * STROKE_RATIO))


def font_size(size: int) -> int:
    return math.floor(size * FONT_RATIO)


def text_offset(size: int) -> int:
    """Small downward nudge that optically centers capitals in the hexagon."""

    return math.floor(size * TEXT_OFFSET_RATIO)


def sine_wave(
    width: float,
    base_y: float,
    amplitude: float,
    wavelength: float,
    step: float = 4,
) -> List[Point]:
    """Sample a horizontal sine wave across ``[0, width]``."""

    points: List[Point] = []
    x = 0.0
    while x < width:
        points.append((x, base_y + math.sin(x / wavelength * math.pi * 2) * amplitude))
        x += step
    points.append((width, base_y + math.sin(width / wavelength * math.pi * 2) * amplitude))
    return points


def wave_band(
    width: float,
    base_y: float,
    count: int = 3,
    amplitude: float = 22,
    wavelength: float = 160,
    spacing: float = 28,
) -> List[List[Point]]:
    """Parallel sine waves, each lower, flatter and tighter than the last."""

    return [
        sine_wave(
            width,
            base_y + index * spacing,
            amplitude - index * 6,
            wavelength - index * 15,
        )
        for index in range(count)
    ]


def diagonal_waves(
    width: float,
    height: float,
    spacing: float = 60,
    amplitude: float = 4,
    wavelength: float = 60,
    step: float = 6,
) -> List[List[Point]]:
    """Repeating bottom-left to top-right strokes with a gentle ripple.

    Each stroke follows the 45 degree diagonal and is displaced perpendicular
    to it by a sine wave. Strokes start every ``spacing`` pixels along the
    top and left edges so that the whole canvas is covered.
    """

    strokes: List[List[Point]] = []
    normal = (math.sqrt(0.5), math.sqrt(0.5))
    offset = spacing
    while offset < width + height:
        points: List[Point] = []
        # Walk t along the line x + y = offset, clipped to the canvas.
        t_start = max(0.0, offset - height)
        t_end = min(float(width), float(offset))
        t = t_start
        while True:
            along = (t - t_start) * math.sqrt(2)
            ripple = math.sin(along / wavelength * math.pi * 2) * amplitude
            points.append((t + normal[0] * ripple, offset - t + normal[1] * ripple))
            if t >= t_end:
                break
            t = min(t + step, t_end)
        if len(points) > 1:
            strokes.append(points)
        offset += spacing
    return strokes


def circuit_motif(
    origin: Point,
    bus_length: float = 300,
    branches: Sequence[float] = (60, 140, 220, 280),
    branch_length: float = 220,
    taper: float = 30,
) -> Tuple[Tuple[Point, Point], List[Tuple[Point, Point]]]:
    """Return the vertical bus and its horizontal branches.

    Branch ``i`` leaves the bus ``branches[i]`` pixels below ``origin`` and is
    ``branch_length - i * taper`` pixels long.
    """

    x, y = origin
    bus = ((x, y), (x, y + bus_length))
    segments = [
        ((x, y + dy), (x + branch_length - index * taper, y + dy))
        for index, dy in enumerate(branches)
    ]
    return bus, segments
