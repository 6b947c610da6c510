"""Backends that rasterise a :class:`~brand_assets.models.Scene`."""
from __future__ import annotations

from typing import Protocol

from PIL import Image

from ..models import Scene


class SceneRenderer(Protocol):
    """Anything that can turn a scene into RGBA pixels."""

    name: str

    def render(self, scene: Scene) -> Image.Image:
        ...


RENDERERS = ("svg", "pillow")


def get_renderer(name: str) -> SceneRenderer:
    """Return the renderer registered under *name*.

    Backends are imported on demand so the Pillow renderer keeps working on
    hosts without the cairo system library.
    """

    normalised = name.strip().lower()
    if normalised == "svg":
        from .svg import SvgSceneRenderer

        return SvgSceneRenderer()
    if normalised == "pillow":
        from .pillow import PillowSceneRenderer

        return PillowSceneRenderer()
    raise ValueError(f"Unknown renderer {name!r}; expected one of {', '.join(RENDERERS)}")
