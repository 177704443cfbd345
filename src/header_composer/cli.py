"""CLI argument parsing and main entry point."""

from __future__ import annotations

import argparse
import math
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import header_composer.config as hc_config
import header_composer.main as hc_main
from header_composer.config_defaults import DEFAULT_FILENAME, DEFAULT_OUTPUT_DIR
from header_composer.logging_utils import logger
from header_composer.runtime.version import resolve_project_version

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence


def non_negative_float(text: str) -> float:
    """Argparse type that accepts zero or any finite positive number."""
    try:
        value = float(text)
    except ValueError as exc:
        msg = f"must be a number, got {text!r}"
        raise argparse.ArgumentTypeError(msg) from exc
    if not math.isfinite(value):
        msg = f"must be a finite number, got {text!r}"
        raise argparse.ArgumentTypeError(msg)
    if value < 0:
        msg = f"must not be negative, got {value:g}"
        raise argparse.ArgumentTypeError(msg)
    return value


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the command-line interface."""
    p = argparse.ArgumentParser(
        prog="header-composer",
        description=(
            "Place images side by side into a single header image, "
            "optionally separated by plus signs."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "header-composer a.png b.png c.png\n"
            "header-composer a.png b.png --spacing 40 --margin 20 --plus\n"
            "header-composer a.png b.png c.png --constrain-height "
            "--plus --end-with-equals\n\n"
            "Note:\n"
            "  Without --spacing, spacing is a fifth of the widest image."
        ),
    )
    p.add_argument(
        "images", nargs="*", type=Path,
        help="Images to place, left to right")
    p.add_argument(
        "--version", action="version",
        version=f"%(prog)s {resolve_project_version()}")

    layout = p.add_argument_group("layout")
    layout.add_argument(
        "--spacing", type=non_negative_float,
        help="Gap between images in pixels",
        default=argparse.SUPPRESS)
    layout.add_argument(
        "--margin", type=non_negative_float,
        help="Border around the row in pixels",
        default=argparse.SUPPRESS)
    layout.add_argument(
        "--constrain-height", action=argparse.BooleanOptionalAction,
        help="Scale every image to the shortest image's height",
        default=argparse.SUPPRESS)

    glyphs = p.add_argument_group("separators")
    glyphs.add_argument(
        "--plus", action=argparse.BooleanOptionalAction,
        help="Draw plus signs between images",
        default=argparse.SUPPRESS)
    glyphs.add_argument(
        "--plus-length", type=non_negative_float,
        help="Span of each glyph in pixels (default: half the spacing)",
        default=argparse.SUPPRESS)
    glyphs.add_argument(
        "--plus-stroke-width", type=non_negative_float,
        help="Line width of each glyph (default: a third of the length)",
        default=argparse.SUPPRESS)
    glyphs.add_argument(
        "--end-with-equals", action=argparse.BooleanOptionalAction,
        help="Draw an equals sign in the last gap",
        default=argparse.SUPPRESS)

    output = p.add_argument_group("output")
    output.add_argument(
        "--output", type=str,
        help=f"Output directory (default: {DEFAULT_OUTPUT_DIR})",
        default=argparse.SUPPRESS)
    output.add_argument(
        "--filename", type=str,
        help=f"Output file name (default: {DEFAULT_FILENAME})",
        default=argparse.SUPPRESS)
    output.add_argument(
        "--encoding", choices=["blob", "data-url"],
        help="Artifact encoding path used before saving",
        default=argparse.SUPPRESS)

    cfg = p.add_argument_group("config")
    cfg.add_argument(
        "--config", type=str,
        help="Path to config.toml file")
    cfg.add_argument(
        "--validate-config-only", action="store_true",
        help="Validate config file and exit without composing")

    return p


def log_parameters(
    paths: Sequence[Path],
    cfg: hc_config.HeaderConfig,
    args: argparse.Namespace,
) -> None:
    """Log all user-provided parameters."""
    for path in paths:
        logger.info("Input image: %s", path)
    if getattr(args, "config", None):
        logger.info("Loaded config from: %s", args.config)
    logger.info("Output Directory: %s", cfg.output.output)
    logger.info("Filename: %s", cfg.output.filename)
    logger.info("Encoding: %s", cfg.output.encoding)
    logger.info(
        "Spacing: %s",
        "auto" if cfg.layout.spacing is None else f"{cfg.layout.spacing:g}",
    )
    logger.info("Margin: %g", cfg.layout.margin)
    logger.info("Constrain Height: %s",
                "Enabled" if cfg.layout.constrain_height else "Disabled")
    logger.info("Separators: %s",
                "Enabled" if cfg.plus.enabled else "Disabled")
    logger.info("End With Equals: %s",
                "Enabled" if cfg.plus.end_with_equals else "Disabled")


def run_from_args(args: argparse.Namespace) -> Path | None:
    """Compose a header from command-line arguments."""
    base_cfg: hc_config.HeaderConfig | None = None
    if args.config:
        base_cfg = hc_config.ConfigLoader.load(args.config)
        if args.validate_config_only:
            logger.info("Config %s validated successfully.", args.config)
            sys.exit(0)

    cfg = hc_config.build_config_from_cli(vars(args), base_config=base_cfg)

    log_parameters(args.images, cfg, args)

    return hc_main.compose_header(args.images, cfg)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command-line interface."""
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)
    if args.validate_config_only and not args.config:
        arg_parser.error("--validate-config-only requires --config")
    if not args.validate_config_only and not args.images:
        arg_parser.error("the following arguments are required: images")

    try:
        run_from_args(args)
    except (FileNotFoundError, ValueError) as exc:
        arg_parser.error(str(exc))

    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
