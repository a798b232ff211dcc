# -*- coding: utf-8 -*-
"""
PlanetIcon - Planet Generator
Paints a two-tone disc with a diagonal gradient and an anti-aliased edge.
"""

import logging

import numpy as np

from ..styling.color_converter import ColorConverter
from ..styling.style_controls import PlanetStyle
from .seeded_colors import SeededColorPicker

logger = logging.getLogger(__name__)

F32 = np.float32


class PlanetRasterizer:
    """
    Rasterizes planet discs onto RGBA canvases.

    Every pixel is a function of its own coordinates only, so the whole
    canvas is computed as numpy arrays; shade_pixel runs the same code on a
    single coordinate.
    """

    def __init__(self, style=None):
        self.style = style if style is not None else PlanetStyle()
        self.width = self.style.width
        self.height = self.style.height
        self._center_x = F32(self.width) / F32(2.0)
        self._center_y = F32(self.height) / F32(2.0)
        self._diagonal_max = self.diagonal(F32(self.width), F32(self.height))

    def new_canvas(self):
        """Return a fully transparent canvas, indexed [y, x, channel]."""
        return np.zeros((self.height, self.width, 4), dtype=np.uint8)

    def diagonal(self, x, y):
        """Blend coordinate; the vertical axis weighs less than the horizontal."""
        return x + y / F32(self.style.diagonal_weight)

    def _shade(self, fx, fy, color1, color2, radius):
        """Source color for the given float32 coordinates, before compositing."""
        radius = F32(radius)
        outer = radius + F32(1.0)

        dx = fx - self._center_x
        dy = fy - self._center_y
        dist = np.sqrt(dx * dx + dy * dy)

        t = self.diagonal(fx, fy) / self._diagonal_max
        red, green, blue, _ = ColorConverter.mix(color1, color2, t)

        # Ring coverage falls linearly from 255 at radius to 0 at radius + 1.
        ring_alpha = ColorConverter.units_to_channels(outer - dist)
        alpha = np.where(
            dist < radius,
            np.uint8(255),
            np.where(dist < outer, ring_alpha, np.uint8(0)),
        ).astype(np.uint8)

        return np.stack([red, green, blue, alpha], axis=-1)

    def shade_pixel(self, x, y, color1, color2, radius=None):
        """
        Color of a single pixel when painted onto a transparent canvas.

        :param x: Column
        :param y: Row
        :param color1: RGBA color at the top-left end of the gradient
        :param color2: RGBA color at the bottom-right end of the gradient
        :param radius: Disc radius in pixels, the style radius when omitted
        :return: (r, g, b, a) tuple of ints
        """
        if radius is None:
            radius = self.style.radius
        source = self._shade(F32(x), F32(y), color1, color2, radius)
        pixel = ColorConverter.composite(np.zeros(4, dtype=np.uint8), source)
        return tuple(int(channel) for channel in pixel)

    def draw_planet(self, color1, color2, radius=None, canvas=None):
        """
        Paint the planet disc.

        :param color1: RGBA color at the top-left end of the gradient
        :param color2: RGBA color at the bottom-right end of the gradient
        :param radius: Disc radius in pixels, the style radius when omitted
        :param canvas: Optional (height, width, 4) uint8 canvas to paint on;
            a transparent one is created when omitted
        :return: The painted canvas
        """
        if radius is None:
            radius = self.style.radius
        if canvas is None:
            canvas = self.new_canvas()
        elif canvas.shape != (self.height, self.width, 4):
            raise ValueError(
                f"Canvas shape {canvas.shape} does not match "
                f"{self.height}x{self.width} RGBA."
            )

        fx, fy = np.meshgrid(
            np.arange(self.width, dtype=F32),
            np.arange(self.height, dtype=F32),
        )
        source = self._shade(fx, fy, color1, color2, radius)
        canvas[...] = ColorConverter.composite(canvas, source)
        return canvas


def generate_planet(seed, style=None, rng=None):
    """
    Generate the planet icon for a seed.

    :param seed: str or bytes, usually an executable's file name
    :param style: PlanetStyle, defaults when omitted
    :param rng: Optional generator overriding the seeded one
    :return: (height, width, 4) uint8 RGBA buffer
    """
    style = style if style is not None else PlanetStyle()
    color1, color2 = SeededColorPicker(seed, style=style, rng=rng).pick_colors()
    rasterizer = PlanetRasterizer(style)
    logger.debug("Drawing planet for %r with radius %.1f", seed, style.radius)
    return rasterizer.draw_planet(color1, color2, style.radius)
