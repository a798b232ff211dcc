# -*- coding: utf-8 -*-
"""
PlanetIcon - Color Converter
Provides HSL to RGB conversion and channel arithmetic for planet icons.

All arithmetic runs in single precision (numpy.float32) so that a given
seed renders the same bytes on every platform.
"""

import numpy as np

F32 = np.float32

CHANNEL_MAX = F32(255.0)
ONE = F32(1.0)
ONE_THIRD = F32(1.0) / F32(3.0)
TWO_THIRDS = F32(2.0) / F32(3.0)


class ColorConverter:
    """Color conversion utilities for planet icons."""

    @staticmethod
    def channel_to_unit(value):
        """Map an 8-bit channel to [0, 1]."""
        return F32(value) / CHANNEL_MAX

    @staticmethod
    def unit_to_channel(value):
        """Scale a unit value to 0..255, truncating (not rounding)."""
        return int(ColorConverter.units_to_channels(value))

    @staticmethod
    def units_to_channels(values):
        """
        Array form of unit_to_channel.

        :param values: Scalar or array of unit values
        :return: uint8 array of the same shape, saturated to 0..255
        """
        scaled = np.asarray(values, dtype=F32) * CHANNEL_MAX
        return np.clip(np.trunc(scaled), 0, 255).astype(np.uint8)

    @staticmethod
    def bound_ratio(ratio):
        """Wrap a hue ratio into [0, 1] by whole turns."""
        n = F32(ratio)
        while n < 0.0 or n > 1.0:
            if n < 0.0:
                n = n + ONE
            else:
                n = n - ONE
        return n

    @staticmethod
    def _calc_rgb_unit(unit, temp1, temp2):
        if F32(6.0) * unit < 1.0:
            return temp2 + (temp1 - temp2) * F32(6.0) * unit
        if F32(2.0) * unit < 1.0:
            return temp1
        if F32(3.0) * unit < 2.0:
            return temp2 + (temp1 - temp2) * (TWO_THIRDS - unit) * F32(6.0)
        return temp2

    @staticmethod
    def hsl_to_rgb(h, s, l):
        """
        Convert a hue/saturation/lightness triple to an opaque RGBA color.

        :param h: Hue in degrees
        :param s: Saturation (0 to 1)
        :param l: Lightness (0 to 1)
        :return: (r, g, b, 255) tuple of ints
        """
        hue = F32(h) / F32(360.0)
        s = F32(s)
        l = F32(l)

        if s == 0.0:
            v = ColorConverter.unit_to_channel(l)
            return (v, v, v, 255)

        if l < 0.5:
            temp1 = l * (ONE + s)
        else:
            temp1 = l + s - l * s
        temp2 = F32(2.0) * l - temp1

        channels = []
        for offset in (ONE_THIRD, F32(0.0), -ONE_THIRD):
            ratio = ColorConverter.bound_ratio(hue + offset)
            unit = ColorConverter._calc_rgb_unit(ratio, temp1, temp2)
            channels.append(ColorConverter.unit_to_channel(unit))

        return (channels[0], channels[1], channels[2], 255)

    @staticmethod
    def mix(color1, color2, t):
        """
        Linearly interpolate the RGB channels of two colors.

        ``t`` may be a scalar or an array, in which case each channel of the
        result is a uint8 array of the same shape. Alpha is always opaque.
        """
        t = np.asarray(t, dtype=F32)
        inverse = ONE - t
        mixed = []
        for channel in range(3):
            start = ColorConverter.channel_to_unit(color1[channel])
            end = ColorConverter.channel_to_unit(color2[channel])
            mixed.append(ColorConverter.units_to_channels(start * inverse + end * t))
        mixed.append(np.full(t.shape, 255, dtype=np.uint8))
        return mixed

    @staticmethod
    def composite(dst, src):
        """
        Alpha-composite ``src`` over ``dst`` (src-over).

        Both arguments are RGBA uint8 arrays whose last axis has length 4;
        a single pixel and a whole canvas are handled alike.

        :return: uint8 array with the composited pixels
        """
        dst = np.asarray(dst, dtype=np.uint8)
        src = np.asarray(src, dtype=np.uint8)

        bg = dst.astype(F32) / CHANNEL_MAX
        fg = src.astype(F32) / CHANNEL_MAX
        bg_a = bg[..., 3]
        fg_a = fg[..., 3]

        alpha_final = bg_a + fg_a - bg_a * fg_a
        divisor = np.where(alpha_final == 0.0, ONE, alpha_final)

        premultiplied = (
            fg[..., :3] * fg_a[..., None]
            + bg[..., :3] * bg_a[..., None] * (ONE - fg_a)[..., None]
        )
        blended = np.empty(np.broadcast(dst, src).shape, dtype=np.uint8)
        blended[..., :3] = ColorConverter.units_to_channels(premultiplied / divisor[..., None])
        blended[..., 3] = ColorConverter.units_to_channels(alpha_final)

        src_alpha = src[..., 3]
        result = np.where((src_alpha == 255)[..., None], src, blended)
        keep = (src_alpha == 0) | (alpha_final == 0.0)
        return np.where(keep[..., None], dst, result).astype(np.uint8)
