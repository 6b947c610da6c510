"""Create WebP and minified variants of the raster images under a directory.

For every ``name.png`` the optimizer writes ``name.webp`` and
``name.min.png``; for every ``name.jpg``/``name.jpeg`` it writes
``name.webp`` and ``name.min.jpg``. Files that already carry the ``.min``
marker are never used as inputs, so repeated runs do not feed on their own
output. A file that cannot be decoded or written is logged and skipped; the
rest of the batch carries on.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Tuple

from PIL import Image
from tqdm import tqdm

from .codec import save_min_jpeg, save_min_png, save_webp
from .config import OptimizerConfig

logger = logging.getLogger(__name__)

PNG_SUFFIX = ".png"


@dataclass
class FailedImage:
    path: Path
    error: str


@dataclass
class OptimizationReport:
    """Outcome of a single optimizer run."""

    optimized: List[Path] = field(default_factory=list)
    written: List[Path] = field(default_factory=list)
    failed: List[FailedImage] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


def is_minified(path: Path, config: OptimizerConfig = OptimizerConfig()) -> bool:
    name = path.name.lower()
    return any(name.endswith(suffix) for suffix in config.minified_suffixes)


def is_candidate(path: Path, config: OptimizerConfig = OptimizerConfig()) -> bool:
    return path.suffix.lower() in config.extensions and not is_minified(path, config)


def iter_candidates(root: Path, config: OptimizerConfig = OptimizerConfig()) -> Iterator[Path]:
    """Depth-first walk of *root*, yielding images that should be optimized."""

    for entry in sorted(root.iterdir()):
        if entry.is_dir():
            yield from iter_candidates(entry, config)
        elif entry.is_file() and is_candidate(entry, config):
            yield entry


def optimized_paths(path: Path) -> Tuple[Path, Path]:
    """Return the ``(webp, minified)`` output paths for *path*."""

    stem = path.with_suffix("")
    webp = stem.with_name(f"{stem.name}.webp")
    if path.suffix.lower() == PNG_SUFFIX:
        minified = stem.with_name(f"{stem.name}.min.png")
    else:
        minified = stem.with_name(f"{stem.name}.min.jpg")
    return webp, minified


def optimize_image(path: Path, config: OptimizerConfig = OptimizerConfig()) -> List[Path]:
    """Write the WebP and minified variants of *path* and return their paths.

    If any step fails, outputs already started for *path* are removed so a
    failed image never leaves half of its variants behind.
    """

    webp_path, minified_path = optimized_paths(path)
    started: List[Path] = []
    try:
        with Image.open(path) as image:
            image.load()
            started.append(webp_path)
            save_webp(image, webp_path, config.webp_quality)
            started.append(minified_path)
            if path.suffix.lower() == PNG_SUFFIX:
                save_min_png(image, minified_path, config.png_compress_level)
            else:
                save_min_jpeg(image, minified_path, config.jpeg_quality)
    except Exception:
        for output in started:
            output.unlink(missing_ok=True)
        raise
    return started


def optimize_directory(
    root: Path, config: OptimizerConfig = OptimizerConfig()
) -> OptimizationReport:
    """Optimize every candidate image below *root*, one at a time."""

    if not root.is_dir():
        raise FileNotFoundError(f"Public directory not found: {root}")

    report = OptimizationReport()
    targets = list(iter_candidates(root, config))
    if not targets:
        logger.info("No PNG/JPG images found in %s. Nothing to optimize.", root)
        return report

    with tqdm(targets, desc="Optimizing images") as progress:
        for path in progress:
            try:
                written = optimize_image(path, config)
            except Exception as exc:  # pylint: disable=broad-except
                logger.error("Failed optimizing %s: %s", path, exc)
                report.failed.append(FailedImage(path=path, error=str(exc)))
                progress.set_postfix_str("failed")
                continue

            report.optimized.append(path)
            report.written.extend(written)
            progress.set_postfix_str(path.name)
            logger.debug("Optimized %s", path)

    return report
