"""Color palettes sampled over the unit interval."""

from __future__ import annotations

import math
from typing import Tuple

from PIL import Image

ColorA = Tuple[float, float, float, float]


class ColorPalette:
    """A mapping from a position t in [0, 1] to an RGBA color."""

    def color(self, t: float) -> ColorA:
        """Color at position ``t``; the base palette is always transparent red."""
        return (1.0, 0.0, 0.0, 0.0)

    def color_clamped(self, t: float) -> ColorA:
        """Color at ``t`` clamped to [0, 1]."""
        return self.color(min(max(t, 0.0), 1.0))

    def color_wrapped(self, t: float) -> ColorA:
        """Color at ``t`` wrapped into [0, 1]."""
        if t > 1.0:
            t = t - math.floor(t)
        elif t < 0.0:
            t = 1.0 + (t - math.ceil(t))
        return self.color(t)


class SurfacePalette(ColorPalette):
    """Palette read from the first row of an image."""

    def __init__(self, image: Image.Image) -> None:
        self.set_surface(image)

    def set_surface(self, image: Image.Image) -> None:
        self._image = image.convert("RGBA")

    def color(self, t: float) -> ColorA:
        width = self._image.width
        x = math.floor(t * (width - 1) + 0.5)
        x = min(max(x, 0), width - 1)
        r, g, b, a = self._image.getpixel((x, 0))
        return (r / 255.0, g / 255.0, b / 255.0, a / 255.0)