#!/usr/bin/env python3
"""Grayscale converter CLI."""

import argparse
import logging
import sys
from pathlib import Path

from .codec import decode, encode
from .config import DEFAULT_QUALITY, ConverterConfig
from .convert import to_grayscale
from .errors import GrayscaleError, ValidationError


class _Parser(argparse.ArgumentParser):
    """Argument parser that reports bad flags with exit code 1."""

    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(1, f"Error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="grayscale",
        description="Convert color images to grayscale",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
        epilog="""
Supported formats: JPEG, PNG

Examples:
  %(prog)s -input photo.jpg -output gray.jpg
  %(prog)s -input image.png -output result.png -info
  %(prog)s -input photo.jpg -output low_quality.jpg -quality 50
  %(prog)s -config preset.yml -input photo.jpg
        """,
    )

    parser.add_argument(
        "-input", "--input", dest="input_path", metavar="PATH", help="Input image file (required)"
    )
    parser.add_argument(
        "-output", "--output", dest="output_path", metavar="PATH", help="Output image file (required)"
    )
    parser.add_argument(
        "-quality",
        "--quality",
        type=int,
        metavar="N",
        help=f"JPEG quality (1-100, default: {DEFAULT_QUALITY})",
    )
    parser.add_argument(
        "-info", "--info", action="store_true", default=None, help="Show image information"
    )

    # Ambient options
    parser.add_argument(
        "-config", "--config", type=Path, metavar="FILE", help="YAML preset with default options"
    )
    parser.add_argument(
        "-verbose", "--verbose", action="store_true", help="Log each step to standard error"
    )
    return parser


def resolve_config(args: argparse.Namespace) -> ConverterConfig:
    """Merge an optional preset file with command-line flags and validate."""
    config = ConverterConfig.from_yaml(args.config) if args.config else ConverterConfig()
    config = config.with_overrides(
        input_path=args.input_path,
        output_path=args.output_path,
        quality=args.quality,
        info=args.info,
    )
    return config.validate()


def run(config: ConverterConfig) -> int:
    """Decode, then either report image info or convert and save.

    Returns:
        Exit code (0 for success). Failures raise GrayscaleError.
    """
    image = decode(config.input_path)

    if config.info:
        print(f"Image format: {image.format}")
        print(f"Dimensions: {image.width}x{image.height}")
        print(f"Color model: {image.color_model}")
        return 0

    gray = to_grayscale(image.pixels)
    encode(gray, config.output_path, config.quality)
    print(f"Grayscale image saved to: {config.output_path}")
    return 0


def main() -> int:
    """Run the grayscale converter."""
    parser = build_parser()
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s"
        )

    try:
        config = resolve_config(args)
    except ValidationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print(file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    try:
        return run(config)
    except GrayscaleError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
