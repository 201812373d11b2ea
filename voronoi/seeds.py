"""
Seed generation for Voronoi cells.

Each seed is a small circle with a fill color taken round-robin from the
configured palette.
"""

import logging
from typing import NamedTuple, Optional, Tuple

import numpy as np

from voronoi.config import Color, RenderConfig
from voronoi.geometry import Circle, Point

logger = logging.getLogger(__name__)


class Seed(NamedTuple):
    circle: Circle
    color: Color

    @property
    def center(self) -> Point:
        return self.circle.center


def make_seed(x: int, y: int, radius: int, color: Color) -> Seed:
    """Convenience constructor for a seed centered at (x, y)."""
    return Seed(Circle(Point(int(x), int(y)), int(radius)), color)


def generate_seeds(
    config: RenderConfig, rng: Optional[np.random.Generator] = None
) -> Tuple[Seed, ...]:
    """
    Generate config.seed_count seeds at uniformly random positions.

    Args:
        config: Render configuration (size, count, radius, palette, bounds mode)
        rng: Random generator; built from config.random_seed when omitted

    Returns:
        Tuple of seeds in generation order
    """
    if rng is None:
        rng = np.random.default_rng(config.random_seed)

    # integers() has an exclusive upper bound
    x_high = config.width + 1 if config.inclusive_bounds else config.width
    y_high = config.height + 1 if config.inclusive_bounds else config.height

    seeds = []
    for i in range(config.seed_count):
        x = int(rng.integers(0, x_high))
        y = int(rng.integers(0, y_high))
        color = config.palette[i % len(config.palette)]
        seeds.append(make_seed(x, y, config.seed_radius, color))

    logger.debug(f"Generated {len(seeds)} seeds: {[tuple(s.center) for s in seeds[:5]]}...")
    return tuple(seeds)
