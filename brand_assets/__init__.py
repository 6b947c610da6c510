"""Procedural brand imagery and web image optimization."""
from __future__ import annotations

from .config import BrandConfig
from .generator import generate_brand_assets, generate_og_image
from .optimizer import optimize_directory

__all__ = [
    "BrandConfig",
    "generate_brand_assets",
    "generate_og_image",
    "optimize_directory",
]
