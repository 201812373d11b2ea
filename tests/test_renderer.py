"""
Tests for VoronoiRenderer orchestration and end-to-end scenarios.
"""

import shutil
import tempfile
from pathlib import Path

import numpy as np
import pytest

from voronoi.config import RenderConfig
from voronoi.renderer import VoronoiRenderer
from voronoi.seeds import make_seed
from voronoi.writer import ImageWriteError, load_png

BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)
RED = (255, 0, 0, 255)
COLOR_A = (0, 255, 255, 255)
COLOR_B = (255, 0, 255, 255)


def pixel(buffer, x, y):
    return tuple(int(c) for c in buffer[y, x])


class TestVoronoiRenderer:
    """Test suite for VoronoiRenderer."""

    def setup_method(self):
        self.test_output_dir = Path(tempfile.mkdtemp())
        self.config = RenderConfig(
            width=40,
            height=30,
            seed_count=6,
            seed_radius=2,
            output_path=self.test_output_dir / "voronoi.png",
            random_seed=1234,
        )
        self.renderer = VoronoiRenderer(self.config)

    def teardown_method(self):
        if self.test_output_dir.exists():
            shutil.rmtree(self.test_output_dir)

    def test_single_seed_scenario(self):
        """One seed colors the whole image; its marker disk is drawn on top."""
        config = RenderConfig(
            width=10,
            height=10,
            seed_count=1,
            seed_radius=2,
            background_color=BLACK,
            seed_color=WHITE,
            palette=(RED,),
        )
        buffer = VoronoiRenderer(config).render([make_seed(5, 5, 2, RED)])

        for x in range(10):
            for y in range(10):
                inside = (x - 5) ** 2 + (y - 5) ** 2 <= 4
                assert pixel(buffer, x, y) == (WHITE if inside else RED)

    def test_two_seed_scenario(self):
        """Cells split along x + y == 9, with ties going to the first seed."""
        config = RenderConfig(
            width=10,
            height=10,
            seed_count=2,
            seed_radius=1,
            background_color=BLACK,
            seed_color=WHITE,
            palette=(COLOR_A, COLOR_B),
        )
        seeds = [make_seed(0, 0, 1, COLOR_A), make_seed(9, 9, 1, COLOR_B)]
        buffer = VoronoiRenderer(config).render(seeds)

        markers = {(0, 0), (1, 0), (0, 1), (9, 9), (8, 9), (9, 8)}
        for x in range(10):
            for y in range(10):
                if (x, y) in markers:
                    assert pixel(buffer, x, y) == WHITE
                elif x + y <= 9:
                    assert pixel(buffer, x, y) == COLOR_A
                else:
                    assert pixel(buffer, x, y) == COLOR_B

    def test_render_is_deterministic(self):
        seeds = self.renderer.generate_seeds(np.random.default_rng(8))
        first = self.renderer.render(seeds)
        second = self.renderer.render(seeds)
        assert first.tobytes() == second.tobytes()
        assert first is not second

    def test_every_pixel_is_cell_or_marker_color(self):
        seeds = self.renderer.generate_seeds()
        buffer = self.renderer.render(seeds)

        allowed = {tuple(c) for c in self.config.palette} | {self.config.seed_color}
        colors = {tuple(int(c) for c in px) for px in buffer.reshape(-1, 4)}
        assert colors <= allowed
        assert self.config.background_color not in colors

    def test_marker_covers_seed_centers(self):
        seeds = self.renderer.generate_seeds()
        buffer = self.renderer.render(seeds)
        for seed in seeds:
            assert pixel(buffer, seed.center.x, seed.center.y) == self.config.seed_color

    def test_edge_seeds_render_with_inclusive_bounds(self):
        config = RenderConfig(width=10, height=8, seed_count=2, seed_radius=3, inclusive_bounds=True)
        seeds = [make_seed(10, 8, 3, RED), make_seed(0, 0, 3, COLOR_A)]
        buffer = VoronoiRenderer(config).render(seeds)
        assert buffer.shape == (8, 10, 4)
        assert pixel(buffer, 9, 7) == config.seed_color

    def test_generate_seeds_uses_config_random_seed(self):
        assert self.renderer.generate_seeds() == self.renderer.generate_seeds()

    def test_render_without_seeds_rejected(self):
        with pytest.raises(ValueError):
            self.renderer.render([])

    def test_run_writes_png(self):
        output_path = self.renderer.run()

        assert output_path == self.config.output_path
        assert output_path.exists()
        expected = self.renderer.render(self.renderer.generate_seeds())
        assert np.array_equal(load_png(output_path), expected)

    def test_run_with_explicit_output_path(self):
        target = self.test_output_dir / "other.png"
        assert self.renderer.run(np.random.default_rng(3), output_path=target) == target
        assert target.exists()
        assert not self.config.output_path.exists()

    def test_run_fails_on_missing_directory(self):
        with pytest.raises(ImageWriteError):
            self.renderer.run(output_path=self.test_output_dir / "missing" / "out.png")
