"""
iconopt command line — optimize SVG icons on disk.

Usage:
  iconopt input.svg                      # prints optimized SVG to terminal
  iconopt input.svg -o clean.svg         # saves optimized SVG
  iconopt icons/ -o icons_clean/         # batch process folder
  iconopt input.svg --keep-shapes        # leave shapes and path data alone
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from iconopt.config import settings
from iconopt.engine.config import OptimizerConfig
from iconopt.engine.optimizer import optimize
from iconopt.svg.document import SVGDocument

logger = logging.getLogger(__name__)


def process_file(input_path: str, config: OptimizerConfig, output_path: str | None = None) -> bool:
    """Optimize a single file. Returns False when it can't be parsed."""
    with open(input_path, "r", encoding="utf-8") as f:
        raw = f.read()

    try:
        svg = SVGDocument(raw)
        ctx = optimize(svg, config)
    except ValueError as e:
        print(f"  ERROR: {e}")
        return False

    content = svg.to_string()
    closed = ctx.stats.get("paths_closed", 0)
    print(f"  {len(raw)} → {len(content)} bytes, {closed} sub-path(s) closed")
    for name, error in ctx.errors.items():
        print(f"  WARNING: {name} failed: {error}")

    if output_path:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(content)
        print(f"  → Saved: {output_path}")
    else:
        print(content)

    return True


def build_config(args: argparse.Namespace) -> OptimizerConfig:
    if args.no_cleanup_ids:
        cleanup_ids: str | bool = False
    else:
        cleanup_ids = args.id_prefix or settings.iconopt_id_prefix
    return OptimizerConfig(
        multipass=settings.iconopt_multipass and not args.no_multipass,
        keep_shapes=args.keep_shapes,
        cleanup_ids=cleanup_ids,
    )


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    parser = argparse.ArgumentParser(description="SVG icon optimizer")
    parser.add_argument("input", help="SVG file or folder of SVGs")
    parser.add_argument("-o", "--output", help="Output file or folder")
    parser.add_argument("--keep-shapes", action="store_true", help="Don't run plugins that change shapes")
    parser.add_argument("--no-multipass", action="store_true", help="Run every plugin only once")
    ids = parser.add_mutually_exclusive_group()
    ids.add_argument("--id-prefix", help="Prefix for replaced ids (default: svgID)")
    ids.add_argument("--no-cleanup-ids", action="store_true", help="Keep ids as they are")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log plugin timings")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    config = build_config(args)
    logger.debug("Optimizer config: %s", config)

    if os.path.isdir(args.input):
        # Batch mode
        svg_files = [f for f in os.listdir(args.input) if f.lower().endswith(".svg")]
        if not svg_files:
            print("No .svg files found in folder.")
            return 1

        out_dir = args.output or args.input.rstrip("/\\") + "_optimized"
        os.makedirs(out_dir, exist_ok=True)

        print(f"Processing {len(svg_files)} files...\n")
        success = 0
        for fname in sorted(svg_files):
            print(f"[{fname}]")
            out_path = os.path.join(out_dir, fname)
            if process_file(os.path.join(args.input, fname), config, out_path):
                success += 1
            print()

        print(f"Done: {success}/{len(svg_files)} processed → {out_dir}")
        return 0 if success == len(svg_files) else 1

    if not os.path.exists(args.input):
        print(f"File not found: {args.input}")
        return 1
    return 0 if process_file(args.input, config, args.output) else 1


if __name__ == "__main__":
    sys.exit(main())
