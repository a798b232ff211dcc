# -*- coding: utf-8 -*-
"""
PlanetIcon shared defaults.
"""

PACKAGE_VERSION = "0.1.0"

CANVAS_SIZE = 128
EDGE_MARGIN_PX = 8

# HSL saturation and lightness, as fractions of 1.0
PLANET_SATURATION = 0.95
PLANET_LIGHTNESS = 0.55

MIN_HUE_SEPARATION_DEG = 75.0
HUE_CORRECTION_DEG = 125.0

# Vertical divisor of the blend coordinate x + y / weight
DIAGONAL_WEIGHT = 2.5

ICON_FORMAT = "PNG"

SETTINGS_PREFIX = "PlanetIcon/"
