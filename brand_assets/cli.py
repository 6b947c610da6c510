"""Shared command line plumbing for the brand asset scripts."""
from __future__ import annotations

import argparse
import dataclasses
import logging
from pathlib import Path

from .config import BrandConfig
from .renderers import RENDERERS
from .scripts.env_loader import load_brand_config


def configure_logging(level: str) -> None:
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )


def add_common_arguments(parser: argparse.ArgumentParser, *, renderer: bool = True) -> None:
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Override the public assets directory (BRAND_PUBLIC_DIR).",
    )
    if renderer:
        parser.add_argument(
            "--renderer",
            choices=RENDERERS,
            default=None,
            help="Rendering backend (BRAND_RENDERER). Defaults to 'svg'.",
        )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        help="Adjust the verbosity of log output.",
    )


def load_config(args: argparse.Namespace) -> BrandConfig:
    """Read the environment (and ``.env``) then apply command line overrides."""

    config = load_brand_config()
    overrides = {}
    if args.output_dir is not None:
        overrides["public_dir"] = args.output_dir
    if getattr(args, "renderer", None):
        overrides["renderer"] = args.renderer
    return dataclasses.replace(config, **overrides) if overrides else config
