"""
Nearest-seed queries.

Distance is measured to each seed's circle boundary (distance to the center
minus the radius). Ties go to the seed listed first.
"""

import logging
from typing import Sequence

import numpy as np
from tqdm import tqdm

from voronoi.geometry import Point
from voronoi.seeds import Seed

logger = logging.getLogger(__name__)


def nearest_seed_index(point: Point, seeds: Sequence[Seed]) -> int:
    """
    Index of the seed whose circle boundary is closest to point.

    Raises:
        ValueError: If seeds is empty
    """
    if not seeds:
        raise ValueError("Cannot find nearest seed in an empty seed collection")

    best_index = 0
    best_dist = float("inf")
    for i, seed in enumerate(seeds):
        dist = seed.circle.distance(point)
        # Strict comparison keeps the earliest seed on ties
        if dist < best_dist:
            best_index = i
            best_dist = dist
    return best_index


def nearest_seed(point: Point, seeds: Sequence[Seed]) -> Seed:
    """Seed whose circle boundary is closest to point (first one on ties)."""
    return seeds[nearest_seed_index(point, seeds)]


def assign_cells(
    width: int, height: int, seeds: Sequence[Seed], show_progress: bool = False
) -> np.ndarray:
    """
    Compute the nearest seed index for every pixel of a width x height grid.

    Equivalent to calling nearest_seed_index for each pixel, evaluated one
    row at a time with numpy.

    Args:
        width: Grid width in pixels
        height: Grid height in pixels
        seeds: Seeds to assign pixels to
        show_progress: Show a tqdm progress bar over rows

    Returns:
        Integer array of shape (height, width) with seed indices

    Raises:
        ValueError: If seeds is empty
    """
    if not seeds:
        raise ValueError("Cannot assign cells without seeds")

    centers_x = np.array([s.circle.center.x for s in seeds], dtype=np.float64)
    centers_y = np.array([s.circle.center.y for s in seeds], dtype=np.float64)
    radii = np.array([s.circle.radius for s in seeds], dtype=np.float64)

    # (width, 1) against (1, num_seeds)
    dx = centers_x[np.newaxis, :] - np.arange(width, dtype=np.float64)[:, np.newaxis]
    dx_sq = dx * dx

    labels = np.empty((height, width), dtype=np.intp)
    rows = tqdm(range(height), desc="Assigning cells", disable=not show_progress)
    for y in rows:
        dy = centers_y - float(y)
        dist = np.sqrt(dx_sq + dy * dy) - radii
        # argmin returns the first minimum, matching the scalar tie-break
        labels[y] = np.argmin(dist, axis=1)

    logger.debug(f"Assigned {width}x{height} pixels to {len(seeds)} cells")
    return labels
