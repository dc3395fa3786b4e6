"""Command line entry point: ``climg IMAGE [invert]``."""

from __future__ import annotations

import argparse
import sys

from loguru import logger
import yaml

from .config import RenderConfig
from .errors import ClimgError
from .pipeline import render_image

INVERT_KEYWORD = "invert"


def _threshold(value: str) -> int:
    threshold = int(value)
    if not 0 <= threshold <= 255:
        raise argparse.ArgumentTypeError(f"threshold must be in 0..255, got {threshold}")
    return threshold


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="climg",
        description="Render an image as Unicode Braille patterns sized to the terminal.",
    )
    parser.add_argument("image", help="Path to the input image (any format OpenCV can decode)")
    parser.add_argument(
        "mode",
        nargs="?",
        default=None,
        help=f"Pass '{INVERT_KEYWORD}' to draw dark pixels instead of light ones",
    )
    parser.add_argument("-c", "--config", default=None, help="YAML file with a 'climg' section")
    parser.add_argument(
        "-t", "--threshold", type=_threshold, default=None, help="Fixed threshold 0..255 instead of Otsu's method"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log pipeline details to stderr")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "WARNING")

    try:
        config = RenderConfig.from_yaml(args.config) if args.config else RenderConfig()
    except (OSError, KeyError, TypeError, ValueError, yaml.YAMLError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    overrides: dict[str, object] = {}
    if args.mode == INVERT_KEYWORD:
        overrides["invert"] = True
    if args.threshold is not None:
        overrides["threshold"] = args.threshold
    if overrides:
        config = config.model_copy(update=overrides)

    try:
        for line in render_image(args.image, config):
            print(line)
    except (ClimgError, OSError) as e:
        logger.debug("Rendering {} failed: {!r}", args.image, e)
        print(f"Error processing image: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
