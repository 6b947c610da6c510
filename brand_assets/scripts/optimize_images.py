"""Convert PNG/JPG files in the public directory to WebP and minified copies."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from brand_assets.cli import add_common_arguments, configure_logging, load_config
from brand_assets.optimizer import optimize_directory

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Create WebP and minified variants of images in the public directory.",
    )
    add_common_arguments(parser, renderer=False)
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)

    try:
        config = load_config(args)
        report = optimize_directory(config.public_dir, config.optimizer)
    except (OSError, ValueError) as exc:
        logger.error("%s", exc)
        return 1

    for path in report.optimized:
        print(f"Optimized: {path.relative_to(config.public_dir)}")
    if report.failed:
        logger.warning(
            "%d of %d images could not be optimized",
            len(report.failed),
            len(report.failed) + len(report.optimized),
        )
        for failure in report.failed:
            print(f"Failed: {failure.path} ({failure.error})", file=sys.stderr)
    if report.optimized:
        print(
            f"Done. {len(report.optimized)} images optimized; "
            "WebP and minified variants created next to originals."
        )
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
