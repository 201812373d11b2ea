"""
Pixel buffer operations.

A buffer is a (height, width, 4) uint8 RGBA array indexed [y, x].
"""

from typing import Sequence

import numpy as np

from voronoi.config import Color
from voronoi.geometry import Circle, Point
from voronoi.nearest import assign_cells
from voronoi.seeds import Seed


def new_buffer(width: int, height: int, color: Color) -> np.ndarray:
    """Allocate a width x height RGBA buffer filled with color."""
    buffer = np.empty((height, width, 4), dtype=np.uint8)
    fill(buffer, color)
    return buffer


def fill(buffer: np.ndarray, color: Color):
    buffer[:, :] = color


def paint_cells(buffer: np.ndarray, seeds: Sequence[Seed], show_progress: bool = False):
    """Color every pixel with the color of its nearest seed."""
    height, width = buffer.shape[:2]
    labels = assign_cells(width, height, seeds, show_progress=show_progress)
    colors = np.array([seed.color for seed in seeds], dtype=np.uint8)
    buffer[:, :] = colors[labels]


def draw_circle(buffer: np.ndarray, circle: Circle, color: Color):
    """
    Fill the pixels inside circle with color.

    Only the circle's bounding square is visited, clipped to the buffer, so
    circles that cross or lie past the image edge never write out of range.
    """
    height, width = buffer.shape[:2]
    upper_left, lower_right = circle.bounds()

    x_min = max(upper_left.x, 0)
    y_min = max(upper_left.y, 0)
    x_max = min(lower_right.x, width - 1)
    y_max = min(lower_right.y, height - 1)

    for x in range(x_min, x_max + 1):
        for y in range(y_min, y_max + 1):
            if circle.contains(Point(x, y)):
                buffer[y, x] = color
