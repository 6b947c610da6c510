"""Generate the hexagon logo and favicons.

Outputs, relative to the public assets directory:
- logo.png (500x500)
- favicon.png (180x180)
- favicon.ico (32x32)
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from brand_assets.cli import add_common_arguments, configure_logging, load_config
from brand_assets.generator import generate_brand_assets

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate the brand logo and favicons.")
    add_common_arguments(parser)
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)

    try:
        config = load_config(args)
        artifacts = generate_brand_assets(config)
    except Exception:  # pylint: disable=broad-except
        logger.exception("Error generating brand assets")
        return 1

    for artifact in artifacts:
        print(f"Generated: {artifact.path}")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
