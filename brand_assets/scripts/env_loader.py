"""Read the project's ``.env`` into a :class:`BrandConfig`."""
from __future__ import annotations

import logging
from pathlib import Path

from dotenv import dotenv_values, load_dotenv

from brand_assets.config import PROJECT_ROOT, BrandConfig

logger = logging.getLogger(__name__)

DEFAULT_DOTENV = PROJECT_ROOT / ".env"
PREFIX = "BRAND_"
KNOWN_KEYS = frozenset(
    PREFIX + name
    for name in (
        "PUBLIC_DIR",
        "RENDERER",
        "INITIALS",
        "TITLE",
        "SUBTITLE",
        "OVERLAY_OPACITY",
        "SHOW_CIRCUIT",
        "TITLE_SHADOW",
        "WEBP_QUALITY",
        "JPEG_QUALITY",
        "PNG_COMPRESS_LEVEL",
    )
)


def unknown_brand_keys(path: str | Path) -> list[str]:
    """``BRAND_*`` names in *path* that no config section reads."""

    return sorted(
        key for key in dotenv_values(path) if key.startswith(PREFIX) and key not in KNOWN_KEYS
    )


def load_brand_config(dotenv_path: str | Path | None = None, *, override: bool = False) -> BrandConfig:
    """Merge ``BRAND_*`` values from the ``.env`` file into the environment and build the config.

    A missing file is not an error. Variables already exported win unless
    *override* is set.
    """

    path = Path(dotenv_path) if dotenv_path is not None else DEFAULT_DOTENV
    if path.is_file():
        for key in unknown_brand_keys(path):
            logger.warning("Ignoring unknown setting %s in %s", key, path)
        load_dotenv(dotenv_path=path, override=override)
        logger.debug("Loaded settings from %s", path)
    return BrandConfig.from_env(prefix=PREFIX)
