# -*- coding: utf-8 -*-
import hashlib

import numpy as np
import pytest

from planeticon import generate_icon
from planeticon.generators.planet_generator import PlanetRasterizer, generate_planet
from planeticon.generators.seeded_colors import SeededColorPicker
from planeticon.styling.color_converter import ColorConverter
from planeticon.styling.style_controls import resolve_planet_style

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)
RADIUS = 56.0


@pytest.fixture
def rasterizer():
    return PlanetRasterizer()


@pytest.fixture
def planet(rasterizer):
    return rasterizer.draw_planet(RED, BLUE, RADIUS)


def squared_distances(size=128):
    # Integer squared distances from the canvas center, indexed [y, x]
    coords = np.arange(size) - size // 2
    return coords[None, :] ** 2 + coords[:, None] ** 2


def test_buffer_layout(planet):
    assert planet.shape == (128, 128, 4)
    assert planet.dtype == np.uint8


def test_default_radius_leaves_margin(rasterizer):
    assert rasterizer.style.radius == RADIUS


def test_disc_containment(planet):
    outside = squared_distances() >= 57 ** 2
    assert (planet[..., 3][outside] == 0).all()
    assert (planet[outside] == 0).all()


def test_full_coverage(planet):
    inside = squared_distances() < 56 ** 2
    assert (planet[..., 3][inside] == 255).all()


def test_ring_alpha_decreases_outwards(planet):
    d2 = squared_distances()
    ring = (d2 >= 56 ** 2) & (d2 < 57 ** 2)
    order = np.argsort(d2[ring], kind="stable")
    alphas = planet[..., 3][ring][order].astype(int)

    assert len(alphas) > 0
    assert (np.diff(alphas) <= 0).all()
    assert alphas.max() == 255
    assert alphas.min() < 255


def test_ring_is_one_pixel_wide(planet):
    partial = (planet[..., 3] > 0) & (planet[..., 3] < 255)
    d2 = squared_distances()[partial]
    assert (d2 >= 56 ** 2).all()
    assert (d2 < 57 ** 2).all()


def test_half_covered_pixel():
    # Pixel (120, 64) sits 56px from center, half a pixel into a 55.5px ring
    pixel = PlanetRasterizer().shade_pixel(120, 64, RED, BLUE, radius=55.5)
    assert pixel[3] in (126, 127)


def test_half_covered_pixel_default_radius():
    # 120.5 is exactly 56.5 from center: coverage (57 - 56.5) * 255 = 127.5
    pixel = PlanetRasterizer().shade_pixel(120.5, 64, RED, BLUE)
    assert pixel[3] in (126, 127)

    inner = PlanetRasterizer().shade_pixel(64, 120.25, RED, BLUE)
    outer = PlanetRasterizer().shade_pixel(64, 120.75, RED, BLUE)
    assert inner[3] > pixel[3] > outer[3] > 0


def test_coverage_at_half_pixel():
    coverage = ColorConverter.units_to_channels(np.float32(57.0) - np.float32(56.5))
    assert int(coverage) == 127


def test_gradient_runs_from_first_to_second_color(planet):
    left = planet[64, 20]
    right = planet[64, 108]
    assert left[0] > right[0]
    assert left[2] < right[2]


def test_diagonal_metric_weights_rows_less(rasterizer):
    assert rasterizer.diagonal(np.float32(10), np.float32(0)) == np.float32(10)
    assert rasterizer.diagonal(np.float32(0), np.float32(10)) == np.float32(4)


def test_vectorised_matches_per_pixel(rasterizer, planet):
    coords = [
        (0, 0), (127, 127), (64, 64), (8, 64), (64, 8),
        (120, 64), (64, 120), (24, 24), (103, 104), (30, 100),
    ]
    d2 = squared_distances()
    ring_y, ring_x = np.nonzero((d2 >= 56 ** 2) & (d2 < 57 ** 2))
    coords.extend(zip(ring_x[::7].tolist(), ring_y[::7].tolist()))

    for x, y in coords:
        assert rasterizer.shade_pixel(x, y, RED, BLUE, RADIUS) == tuple(planet[y, x].tolist())


def test_paints_over_existing_canvas(rasterizer):
    canvas = np.zeros((128, 128, 4), dtype=np.uint8)
    canvas[...] = (10, 20, 30, 255)

    painted = rasterizer.draw_planet(RED, BLUE, canvas=canvas)

    assert painted is canvas
    assert painted[0, 0].tolist() == [10, 20, 30, 255]
    assert painted[64, 64].tolist() != [10, 20, 30, 255]
    assert (painted[..., 3] >= 254).all()


def test_rejects_mismatched_canvas(rasterizer):
    with pytest.raises(ValueError):
        rasterizer.draw_planet(RED, BLUE, canvas=np.zeros((64, 64, 4), dtype=np.uint8))


def test_smaller_canvas_style():
    style = resolve_planet_style(canvas_size=32, margin=4)
    buffer = generate_planet("tiny", style=style)

    assert buffer.shape == (32, 32, 4)
    assert buffer[16, 16, 3] == 255
    assert buffer[0, 0, 3] == 0


class TestGeneratePlanet:

    def test_deterministic(self):
        assert generate_planet("my-app").tobytes() == generate_planet("my-app").tobytes()

    def test_seeds_differ(self):
        assert generate_planet("my-app").tobytes() != generate_planet("my-other-app").tobytes()

    def test_my_app_scenario(self):
        color1, color2 = SeededColorPicker("my-app").pick_colors()
        buffer = generate_icon("my-app")

        assert buffer[64, 64, 3] == 255
        assert buffer[0, 0, 3] == 0
        expected = PlanetRasterizer().shade_pixel(64, 64, color1, color2)
        assert tuple(buffer[64, 64].tolist()) == expected

    def test_my_app_buffer_is_pinned(self):
        buffer = generate_icon("my-app")
        digest = hashlib.sha256(buffer.tobytes()).hexdigest()
        assert digest == "f653fe24d72d0bfcba1e21c8b5feda2154529715ece2498766c594c8fe9efc89"

    def test_injected_rng(self):
        class FixedRng:
            def __init__(self):
                self.values = [0.0, 0.5]

            def random(self, dtype=None):
                return np.float32(self.values.pop(0))

        buffer = generate_planet("ignored", rng=FixedRng())
        # Hues 0 and 180 are far enough apart to be used as drawn
        red = ColorConverter.hsl_to_rgb(0.0, 0.95, 0.55)
        cyan = ColorConverter.hsl_to_rgb(180.0, 0.95, 0.55)
        rasterizer = PlanetRasterizer()

        for x, y in ((64, 64), (9, 64), (100, 30)):
            assert tuple(buffer[y, x].tolist()) == rasterizer.shade_pixel(x, y, red, cyan)
        assert buffer[64, 9, 0] > buffer[64, 9, 1]
