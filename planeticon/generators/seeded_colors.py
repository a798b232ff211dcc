# -*- coding: utf-8 -*-
"""
PlanetIcon - Seeded Color Picker
Derives a reproducible pair of distinct colors from a seed string.
"""

import hashlib
import logging

import numpy as np

from ..styling.color_converter import ColorConverter
from ..styling.style_controls import PlanetStyle

logger = logging.getLogger(__name__)

F32 = np.float32
FULL_TURN_DEG = F32(360.0)

# 24 mantissa bits fit a float32 exactly
_UNIFORM_SHIFT = np.uint64(40)
_UNIFORM_SCALE = F32(2.0 ** -24)


def seed_to_bytes(seed):
    """Encode a seed as bytes (text seeds are UTF-8)."""
    if isinstance(seed, str):
        return seed.encode("utf-8")
    if isinstance(seed, (bytes, bytearray, memoryview)):
        return bytes(seed)
    raise TypeError(f"Seed must be str or bytes, not {type(seed).__name__}.")


class SeededUniform:
    """
    Uniform float32 draws in [0, 1) straight from a PCG64 bit stream.

    Each draw takes one raw 64-bit output ``raw`` and returns
    ``float32((raw >> 40) * 2**-24)``, i.e. its top 24 bits. Only the bit
    generator and SeedSequence streams are relied upon, so the draws do not
    move between numpy releases.
    """

    def __init__(self, bit_generator):
        self.bit_generator = bit_generator

    def random(self, size=None, dtype=np.float32):
        if np.dtype(dtype) != np.float32:
            raise ValueError(f"Only float32 draws are supported, not {np.dtype(dtype)}.")
        raw = np.asarray(self.bit_generator.random_raw(size), dtype=np.uint64)
        values = (raw >> _UNIFORM_SHIFT).astype(F32) * _UNIFORM_SCALE
        if size is None:
            return F32(values)
        return values


def seeded_generator(seed):
    """
    Build the deterministic generator for a seed.

    The SHA-256 digest of the seed bytes, read as a little-endian integer,
    feeds a SeedSequence which initializes a PCG64 bit generator; floats
    are cut from its raw output by SeededUniform. Changing any step changes
    the icon of every existing seed.

    :param seed: str or bytes
    :return: SeededUniform
    """
    digest = hashlib.sha256(seed_to_bytes(seed)).digest()
    entropy = int.from_bytes(digest, "little")
    return SeededUniform(np.random.PCG64(np.random.SeedSequence(entropy)))


def separate_hues(hue1, hue2, min_separation, correction):
    """
    Push hue2 away from hue1 when the two are too close.

    Both checks run one after the other: when the first shift lands hue2
    near hue1 again the second undoes it, so pairs with hue1 - hue2 in
    (correction - min_separation, min_separation) keep their original
    spacing. Distances are linear, not around the color wheel, so hues
    close across 0/360 are left alone too.

    :return: (hue1, hue2) as float32 degrees
    """
    hue1 = F32(hue1)
    hue2 = F32(hue2)
    min_separation = F32(min_separation)
    correction = F32(correction)

    if abs(hue1 - hue2) < min_separation:
        hue2 = hue2 + correction
    if abs(hue2 - hue1) < min_separation:
        hue2 = hue2 - correction
    if hue2 >= FULL_TURN_DEG:
        hue2 = hue2 - FULL_TURN_DEG
    return hue1, hue2


class SeededColorPicker:
    """Picks two visually distinct colors from a seed."""

    def __init__(self, seed, style=None, rng=None):
        """
        :param seed: str or bytes used as generator entropy
        :param style: PlanetStyle, defaults when omitted
        :param rng: Object with ``random(dtype=...)``, e.g. a SeededUniform.
            Built from the seed when omitted.
        """
        self.seed = seed
        self.style = style if style is not None else PlanetStyle()
        self.rng = rng if rng is not None else seeded_generator(seed)

    def _next_hue(self):
        return F32(self.rng.random(dtype=np.float32)) * FULL_TURN_DEG

    def pick_hues(self):
        """Draw and separate the hue pair, in degrees."""
        hue1 = self._next_hue()
        hue2 = self._next_hue()
        return separate_hues(
            hue1,
            hue2,
            self.style.min_hue_sep,
            self.style.hue_correction,
        )

    def pick_colors(self):
        """
        Pick the two planet colors.

        :return: (color1, color2), each an opaque (r, g, b, a) tuple
        """
        hue1, hue2 = self.pick_hues()
        color1 = ColorConverter.hsl_to_rgb(hue1, self.style.saturation, self.style.lightness)
        color2 = ColorConverter.hsl_to_rgb(hue2, self.style.saturation, self.style.lightness)
        logger.debug(
            "Seed %r: hues %.3f/%.3f -> colors %s/%s",
            self.seed, hue1, hue2, color1, color2,
        )
        return color1, color2
