# -*- coding: utf-8 -*-
"""
PlanetIcon - Icon Writer
Encodes planet buffers with Pillow and writes them to disk.
"""

import logging
import os

import numpy as np
from PIL import Image

from .defaults import ICON_FORMAT
from .generators.planet_generator import generate_planet

logger = logging.getLogger(__name__)


class IconExistsError(FileExistsError):
    """Raised when an icon is already present and overwriting is off."""

    def __init__(self, path):
        super().__init__(
            f"The icon file already exists: {path}. Pass overwrite=True to replace it."
        )
        self.filename = path


class IconWriter:
    """Writer for generated planet icons."""

    def __init__(self, style=None):
        self.style = style

    @staticmethod
    def to_image(buffer):
        """
        Wrap an RGBA buffer in a Pillow image.

        :param buffer: (height, width, 4) uint8 array
        :return: PIL.Image.Image in RGBA mode
        """
        array = np.ascontiguousarray(buffer, dtype=np.uint8)
        if array.ndim != 3 or array.shape[2] != 4:
            raise ValueError(f"Expected an RGBA buffer, got shape {array.shape}.")
        return Image.fromarray(array)

    def save(self, buffer, path, overwrite=False):
        """
        Save a buffer as a PNG file.

        :param buffer: RGBA buffer from the planet generator
        :param path: Destination file path
        :param overwrite: Replace an existing file instead of refusing
        :return: The path written
        """
        path = os.fspath(path)
        image = self.to_image(buffer)

        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)

        # "x" refuses an existing file in the same call that creates it
        try:
            stream = open(path, "wb" if overwrite else "xb")
        except FileExistsError:
            raise IconExistsError(path)
        with stream:
            image.save(stream, ICON_FORMAT)
        logger.info("Generated icon: %s", path)
        return path

    def write_icon(self, seed, path, overwrite=False):
        """Generate the icon for ``seed`` and save it to ``path``."""
        buffer = generate_planet(seed, style=self.style)
        return self.save(buffer, path, overwrite=overwrite)
