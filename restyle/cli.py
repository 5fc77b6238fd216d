"""
Batch SVG restyler — sets root size, stroke-width and stroke colour.

Usage:
  restyle                                      # prompts for the three values
  restyle --size 256 --stroke-width 1 --stroke-colour currentColor
  restyle -i icons/ -o icons_out/ --size 24    # still prompts for the other two
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from restyle.batch import process_tree
from restyle.config import settings
from restyle.engine.config import PipelineConfig
from restyle.engine.pipeline import create_pipeline
from restyle.models.targets import TargetValues

logger = logging.getLogger(__name__)

PROMPTS = {
    "size": "Enter the size to set for SVG files (e.g., 256):",
    "stroke_width": "Enter the stroke-width to set for SVG files (e.g., 1):",
    "stroke_colour": "Enter the stroke color to set for SVG files (e.g., currentColor):",
}


def prompt_value(field: str) -> str:
    print(PROMPTS[field])
    return input().strip()


def resolve_targets(args: argparse.Namespace) -> TargetValues:
    """Command line first, then settings, then an interactive prompt."""
    values = {}
    for field in PROMPTS:
        value = getattr(args, field)
        if value is None:
            value = getattr(settings, field)
        if value is None:
            value = prompt_value(field)
        values[field] = value
    return TargetValues(**values)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rewrite SVG size, stroke-width and stroke colour")
    parser.add_argument("-i", "--input", default=settings.input_dir, help="Input folder of SVGs")
    parser.add_argument("-o", "--output", default=settings.output_dir, help="Output folder (mirrors input)")
    parser.add_argument("--size", dest="size", help="Root width/height, e.g. 256")
    parser.add_argument("--stroke-width", dest="stroke_width", help="stroke-width, e.g. 1")
    parser.add_argument("--stroke-colour", "--stroke-color", dest="stroke_colour", help="stroke colour, e.g. currentColor")
    parser.add_argument(
        "--duplicate-root-attributes",
        action="store_true",
        default=settings.duplicate_root_attributes,
        help="Legacy root <svg> behaviour: insert height/width ahead of every attribute",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    input_root = Path(args.input)
    if not input_root.is_dir():
        logger.error("Input folder not found: %s", input_root)
        return 1

    targets = resolve_targets(args)
    logger.info(
        "Processing SVG files with size: %s, stroke-width: %s, stroke color: %s",
        targets.size,
        targets.stroke_width,
        targets.stroke_colour,
    )

    pipeline = create_pipeline(PipelineConfig(duplicate_root_attributes=args.duplicate_root_attributes))
    report = process_tree(input_root, Path(args.output), targets, pipeline)

    if report.truncated:
        logger.warning("%d file(s) contained malformed markup and may be incomplete", len(report.truncated))
    return 0


if __name__ == "__main__":
    sys.exit(main())
