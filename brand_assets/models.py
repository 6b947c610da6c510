"""Backend independent scene description used by every renderer."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Tuple, Union

Point = Tuple[float, float]


@dataclass(frozen=True)
class GradientStop:
    offset: float
    color: str


@dataclass(frozen=True)
class LinearGradient:
    """Gradient running from ``start`` to ``end`` in bounding-box units."""

    stops: Tuple[GradientStop, ...]
    start: Point = (0.0, 0.0)
    end: Point = (0.0, 1.0)

    def __post_init__(self) -> None:
        offsets = [stop.offset for stop in self.stops]
        if len(offsets) < 2:
            raise ValueError("A gradient needs at least two stops")
        if offsets != sorted(offsets) or offsets[0] < 0 or offsets[-1] > 1:
            raise ValueError(f"Gradient offsets must be ordered within [0, 1]: {offsets}")
        if self.start == self.end:
            raise ValueError("Gradient start and end must differ")


Paint = Union[str, LinearGradient]


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    fill: Paint


@dataclass(frozen=True)
class Polygon:
    points: Tuple[Point, ...]
    fill: str
    stroke: str | None = None
    stroke_width: float = 0


@dataclass(frozen=True)
class Polyline:
    """An open stroked path, used for wave decorations."""

    points: Tuple[Point, ...]
    stroke: str
    stroke_width: float = 1


@dataclass(frozen=True)
class Line:
    start: Point
    end: Point
    stroke: str
    stroke_width: float = 1


@dataclass(frozen=True)
class Circle:
    center: Point
    radius: float
    fill: str


@dataclass(frozen=True)
class TextShadow:
    """A soft copy of a text run drawn underneath it."""

    color: str = "#000000"
    opacity: float = 0.25
    offset: Point = (0.0, 4.0)
    blur: float = 12


@dataclass(frozen=True)
class Text:
    """A single run of text.

    ``anchor`` is ``"start"`` (``x`` is the left edge) or ``"middle"``
    (``x`` is the horizontal center). ``baseline`` is ``"top"`` (``y`` is the
    top edge) or ``"middle"`` (``y`` is the vertical center).
    """

    text: str
    x: float
    y: float
    font_size: int
    fill: str
    font_family: str = "Arial, Helvetica, sans-serif"
    bold: bool = False
    anchor: str = "start"
    baseline: str = "top"
    shadow: TextShadow | None = None


@dataclass(frozen=True)
class Group:
    """Operations composited together at a shared opacity."""

    operations: Tuple["Operation", ...]
    opacity: float = 1.0


Operation = Union[Rect, Polygon, Polyline, Line, Circle, Text, Group]


@dataclass(frozen=True)
class Scene:
    """An ordered, back-to-front list of draw operations."""

    width: int
    height: int
    operations: Tuple[Operation, ...] = field(default_factory=tuple)

    def walk(self) -> Iterator[Tuple[Operation, float]]:
        """Yield every leaf operation with its effective opacity."""

        yield from _walk(self.operations, 1.0)

    def texts(self) -> list[Text]:
        return [operation for operation, _ in self.walk() if isinstance(operation, Text)]


def _walk(
    operations: Tuple[Operation, ...], opacity: float
) -> Iterator[Tuple[Operation, float]]:
    for operation in operations:
        if isinstance(operation, Group):
            yield from _walk(operation.operations, opacity * operation.opacity)
        else:
            yield operation, opacity


@dataclass(frozen=True)
class OutputArtifact:
    """A file written by a generator."""

    path: Path
    width: int
    height: int
