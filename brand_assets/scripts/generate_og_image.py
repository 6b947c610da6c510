"""Generate the 1200x630 Open Graph preview image (og-image.png)."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from brand_assets.cli import add_common_arguments, configure_logging, load_config
from brand_assets.generator import generate_og_image

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate the Open Graph banner image.")
    add_common_arguments(parser)
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)

    try:
        config = load_config(args)
        artifact = generate_og_image(config)
    except Exception:  # pylint: disable=broad-except
        logger.exception("Failed to generate OG image")
        return 1

    print(f"OG image generated at: {artifact.path}")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
