"""2D sprite, sprite sheet, image packing and animation helpers."""

__version__ = "0.1.0"