#!/usr/bin/env python3
"""
Voronoi Diagram Renderer

Places random seeds on an image, colors every pixel after its nearest seed
and marks each seed with a small filled circle. Writes a PNG.

Usage:
    python render.py
    python render.py --config config.yaml --seeds 40 --output out.png
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from voronoi.config import RenderConfig, load_render_config
from voronoi.renderer import VoronoiRenderer

DEFAULT_CONFIG_PATH = Path("config.yaml")


def setup_logging(log_level: str = "INFO") -> None:
    """Configure logging for the renderer."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def build_config(args: argparse.Namespace) -> RenderConfig:
    """Load the config file (if any) and apply command line overrides."""
    if args.config is not None:
        config = load_render_config(args.config)
    elif DEFAULT_CONFIG_PATH.exists():
        config = load_render_config(DEFAULT_CONFIG_PATH)
    else:
        config = RenderConfig()

    return config.with_overrides(
        width=args.width,
        height=args.height,
        seed_count=args.seeds,
        seed_radius=args.radius,
        output_path=args.output,
        random_seed=args.random_seed,
        inclusive_bounds=True if args.inclusive_bounds else None,
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Voronoi Diagram Renderer")
    parser.add_argument("--config", type=Path, help="Path to config file (default: config.yaml if present)")
    parser.add_argument("--output", type=Path, help="Output PNG path")
    parser.add_argument("--width", type=int, help="Image width in pixels")
    parser.add_argument("--height", type=int, help="Image height in pixels")
    parser.add_argument("--seeds", type=int, help="Number of seeds")
    parser.add_argument("--radius", type=int, help="Seed marker radius in pixels")
    parser.add_argument("--random-seed", type=int, help="Seed for the random generator")
    parser.add_argument(
        "--inclusive-bounds",
        action="store_true",
        help="Allow seed centers on the row/column just past the image edge",
    )
    parser.add_argument("--progress", action="store_true", help="Show a progress bar")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for rendering."""
    args = parse_args(argv)

    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    try:
        config = build_config(args)
        renderer = VoronoiRenderer(config, show_progress=args.progress)
        output_path = renderer.run()
        logger.info(f"Voronoi diagram written to {output_path}")
        return 0
    except Exception as e:
        logger.error(f"Rendering failed: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
