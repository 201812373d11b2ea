"""
VoronoiRenderer - orchestrates seed generation, cell painting and output.

Phases run strictly in sequence on one buffer owned by the render call:
background fill, nearest-seed cell coloring, seed marker overlay, PNG write.
"""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from voronoi.config import RenderConfig
from voronoi.raster import draw_circle, new_buffer, paint_cells
from voronoi.seeds import Seed, generate_seeds
from voronoi.writer import save_png

logger = logging.getLogger(__name__)


@dataclass
class VoronoiRenderer:
    """
    Render Voronoi diagrams for a fixed configuration.

    render() is a pure function of the seeds it is given; randomness only
    enters through generate_seeds().
    """

    config: RenderConfig = field(default_factory=RenderConfig)
    show_progress: bool = False

    def __post_init__(self):
        logger.info(
            f"VoronoiRenderer initialized: {self.config.width}x{self.config.height}, "
            f"{self.config.seed_count} seeds, radius={self.config.seed_radius}"
        )

    def make_rng(self) -> np.random.Generator:
        """Random generator from config.random_seed, or from the clock if unset."""
        random_seed = self.config.random_seed
        if random_seed is None:
            random_seed = time.time_ns()
        logger.info(f"Using random seed {random_seed}")
        return np.random.default_rng(random_seed)

    def generate_seeds(self, rng: Optional[np.random.Generator] = None) -> Tuple[Seed, ...]:
        if rng is None:
            rng = self.make_rng()
        return generate_seeds(self.config, rng)

    def render(self, seeds: Sequence[Seed]) -> np.ndarray:
        """
        Render seeds into a new RGBA buffer.

        Args:
            seeds: Seeds in priority order (earlier seeds win distance ties)

        Returns:
            (height, width, 4) uint8 array

        Raises:
            ValueError: If seeds is empty
        """
        if not seeds:
            raise ValueError("At least one seed is required to render")

        cfg = self.config
        start = time.time()

        buffer = new_buffer(cfg.width, cfg.height, cfg.background_color)

        paint_cells(buffer, seeds, show_progress=self.show_progress)
        logger.debug(f"Painted {len(seeds)} cells in {time.time() - start:.3f}s")

        for seed in seeds:
            draw_circle(buffer, seed.circle, cfg.seed_color)

        logger.info(f"Rendered {len(seeds)} seeds in {time.time() - start:.3f}s")
        return buffer

    def run(
        self,
        rng: Optional[np.random.Generator] = None,
        output_path: Optional[Union[str, Path]] = None,
    ) -> Path:
        """
        Generate seeds, render them and write the PNG.

        Returns:
            Path of the written image

        Raises:
            ImageWriteError: If the image cannot be written
        """
        seeds = self.generate_seeds(rng)
        buffer = self.render(seeds)
        return save_png(buffer, output_path if output_path is not None else self.config.output_path)
