# -*- coding: utf-8 -*-
"""
Shared planet style controls.
Centralizes the named geometry and color constants, their settings keys,
and resolution of explicit overrides against stored settings.
"""

from ..defaults import (
    CANVAS_SIZE,
    DIAGONAL_WEIGHT,
    EDGE_MARGIN_PX,
    HUE_CORRECTION_DEG,
    MIN_HUE_SEPARATION_DEG,
    PLANET_LIGHTNESS,
    PLANET_SATURATION,
    SETTINGS_PREFIX,
)

STYLE_CANVAS_SIZE = "canvas_size"
STYLE_MARGIN = "margin"
STYLE_SATURATION = "saturation"
STYLE_LIGHTNESS = "lightness"
STYLE_MIN_HUE_SEP = "min_hue_sep"
STYLE_HUE_CORRECTION = "hue_correction"
STYLE_DIAGONAL_WEIGHT = "diagonal_weight"

STYLE_ORDER = (
    STYLE_CANVAS_SIZE,
    STYLE_MARGIN,
    STYLE_SATURATION,
    STYLE_LIGHTNESS,
    STYLE_MIN_HUE_SEP,
    STYLE_HUE_CORRECTION,
    STYLE_DIAGONAL_WEIGHT,
)

STYLE_KEYS = {name: f"{SETTINGS_PREFIX}{name}" for name in STYLE_ORDER}

STYLE_DEFAULTS = {
    STYLE_CANVAS_SIZE: CANVAS_SIZE,
    STYLE_MARGIN: EDGE_MARGIN_PX,
    STYLE_SATURATION: PLANET_SATURATION,
    STYLE_LIGHTNESS: PLANET_LIGHTNESS,
    STYLE_MIN_HUE_SEP: MIN_HUE_SEPARATION_DEG,
    STYLE_HUE_CORRECTION: HUE_CORRECTION_DEG,
    STYLE_DIAGONAL_WEIGHT: DIAGONAL_WEIGHT,
}

# Geometry is counted in whole pixels, everything else is a float.
_INTEGER_CONTROLS = (STYLE_CANVAS_SIZE, STYLE_MARGIN)


def _coerce(name, value):
    """Convert a raw control value to the type its key expects."""
    if name in _INTEGER_CONTROLS:
        return int(value)
    return float(value)


class PlanetStyle:
    """Resolved set of planet style controls."""

    def __init__(self, controls=None):
        values = dict(STYLE_DEFAULTS)
        values.update(controls or {})
        for name in STYLE_ORDER:
            setattr(self, name, values[name])

        if self.radius <= 0:
            raise ValueError(
                f"Margin {self.margin} leaves no room for a disc on a "
                f"{self.canvas_size}px canvas."
            )
        if not self.diagonal_weight > 0:
            raise ValueError(
                f"Style control '{STYLE_DIAGONAL_WEIGHT}' must be positive, "
                f"got {self.diagonal_weight!r}."
            )

    @property
    def width(self):
        return self.canvas_size

    @property
    def height(self):
        return self.canvas_size

    @property
    def radius(self):
        """Disc radius: half the canvas minus the edge margin, in pixels."""
        return float(self.canvas_size // 2 - self.margin)

    def as_dict(self):
        return {name: getattr(self, name) for name in STYLE_ORDER}

    def __eq__(self, other):
        if not isinstance(other, PlanetStyle):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self):
        fields = ", ".join(f"{name}={getattr(self, name)!r}" for name in STYLE_ORDER)
        return f"PlanetStyle({fields})"


def resolve_planet_style(settings=None, **overrides):
    """
    Resolve style controls from explicit args first, then settings, then defaults.

    :param settings: Optional mapping keyed by ``STYLE_KEYS`` values
    :param overrides: Explicit control values keyed by control name
    :return: PlanetStyle
    """
    unknown = sorted(set(overrides) - set(STYLE_ORDER))
    if unknown:
        raise ValueError(f"Unknown style control(s): {', '.join(unknown)}")

    controls = {}
    for name in STYLE_ORDER:
        default = STYLE_DEFAULTS[name]
        provided = overrides.get(name)
        if provided is not None:
            try:
                controls[name] = _coerce(name, provided)
            except (TypeError, ValueError):
                raise ValueError(f"Invalid value for style control '{name}': {provided!r}")
            continue

        if settings is not None:
            stored = settings.get(STYLE_KEYS[name], default)
            try:
                controls[name] = _coerce(name, stored)
            except (TypeError, ValueError):
                controls[name] = default
            continue

        controls[name] = default

    return PlanetStyle(controls)


def save_planet_style(settings, style):
    """Persist style controls into a settings mapping."""
    if settings is None:
        return
    for name, value in style.as_dict().items():
        settings[STYLE_KEYS[name]] = value
