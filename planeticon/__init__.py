# -*- coding: utf-8 -*-
"""
PlanetIcon - Deterministic Planet Icon Generator
Turns a seed string, such as an executable's file name, into a reproducible
128x128 RGBA icon of a two-tone planet.
"""

from .defaults import PACKAGE_VERSION

__version__ = PACKAGE_VERSION


def generate_icon(seed, style=None):
    """Generate the planet icon buffer for a seed.

    :param seed: Seed string or bytes.
    :type seed: str
    :param style: Optional PlanetStyle overriding the defaults.
    :returns: (height, width, 4) uint8 numpy array.
    """
    from .generators.planet_generator import generate_planet
    return generate_planet(seed, style=style)


def save_icon(seed, path, overwrite=False, style=None):
    """Generate the planet icon for a seed and write it as PNG."""
    from .icon_writer import IconWriter
    return IconWriter(style).write_icon(seed, path, overwrite=overwrite)
