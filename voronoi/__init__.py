"""
Voronoi diagram rendering package.

Colors every pixel of a raster image after its nearest seed, overlays a
marker disk on each seed and writes the result as a PNG file.
"""

from voronoi.config import RenderConfig, load_config, load_render_config
from voronoi.geometry import Circle, Point
from voronoi.renderer import VoronoiRenderer
from voronoi.seeds import Seed, generate_seeds

__version__ = "1.0.0"

__all__ = [
    "Circle",
    "Point",
    "RenderConfig",
    "Seed",
    "VoronoiRenderer",
    "generate_seeds",
    "load_config",
    "load_render_config",
]
