"""Render scenes through svgwrite and CairoSVG."""
from __future__ import annotations

import logging
from io import BytesIO

from cairosvg import svg2png
from PIL import Image

from ..models import Scene
from ..svg_document import scene_to_svg

logger = logging.getLogger(__name__)

DPI = 72  # web use


class SvgSceneRenderer:
    name = "svg"

    def render(self, scene: Scene) -> Image.Image:
        svg = scene_to_svg(scene)
        logger.debug("Rasterising %dx%d SVG scene", scene.width, scene.height)
        png = svg2png(
            bytestring=svg.encode("utf-8"),
            output_width=scene.width,
            output_height=scene.height,
            dpi=DPI,
        )
        with Image.open(BytesIO(png)) as image:
            return image.convert("RGBA")
