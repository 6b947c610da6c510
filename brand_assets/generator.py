"""Pipelines that render brand scenes and write them to the public directory."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from .banner import build_banner_scene
from .codec import save_ico, save_png
from .config import BrandConfig
from .mark import build_mark_scene
from .models import OutputArtifact, Scene
from .renderers import SceneRenderer, get_renderer

logger = logging.getLogger(__name__)

LOGO_FILENAME = "logo.png"
FAVICON_PNG_FILENAME = "favicon.png"
FAVICON_ICO_FILENAME = "favicon.ico"
FAVICON_TRANSIENT_FILENAME = "favicon-32.png"
OG_IMAGE_FILENAME = "og-image.png"


def ensure_output_dir(path: Path) -> Path:
    """Create *path* (and parents) if needed; errors propagate to the caller."""

    path.mkdir(parents=True, exist_ok=True)
    return path


def render_to_file(scene: Scene, renderer: SceneRenderer, path: Path) -> OutputArtifact:
    image = renderer.render(scene)
    save_png(image, path)
    logger.debug("Wrote %s (%dx%d) with %s renderer", path, scene.width, scene.height, renderer.name)
    return OutputArtifact(path=path, width=scene.width, height=scene.height)


def generate_brand_assets(
    config: BrandConfig, renderer: Optional[SceneRenderer] = None
) -> List[OutputArtifact]:
    """Write the logo, the PNG favicon and the ICO favicon.

    The ICO is packed from a transient 32 px PNG that is always removed
    before returning.
    """

    renderer = renderer or get_renderer(config.renderer)
    out_dir = ensure_output_dir(config.public_dir)
    mark = config.mark

    artifacts = [
        render_to_file(
            build_mark_scene(mark.logo_size, config.palette, mark),
            renderer,
            out_dir / LOGO_FILENAME,
        ),
        render_to_file(
            build_mark_scene(mark.favicon_size, config.palette, mark),
            renderer,
            out_dir / FAVICON_PNG_FILENAME,
        ),
    ]

    transient = out_dir / FAVICON_TRANSIENT_FILENAME
    ico_path = out_dir / FAVICON_ICO_FILENAME
    try:
        render_to_file(
            build_mark_scene(mark.icon_size, config.palette, mark), renderer, transient
        )
        save_ico(transient, ico_path, sizes=[(mark.icon_size, mark.icon_size)])
    finally:
        transient.unlink(missing_ok=True)
    artifacts.append(OutputArtifact(path=ico_path, width=mark.icon_size, height=mark.icon_size))
    return artifacts


def generate_og_image(
    config: BrandConfig, renderer: Optional[SceneRenderer] = None
) -> OutputArtifact:
    """Write the Open Graph banner."""

    renderer = renderer or get_renderer(config.renderer)
    out_dir = ensure_output_dir(config.public_dir)
    scene = build_banner_scene(config.banner, config.palette)
    return render_to_file(scene, renderer, out_dir / OG_IMAGE_FILENAME)
