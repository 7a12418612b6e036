"""Sprite sheets: a bitmap plus a description of the sprites it holds."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Tuple, Union

from PIL import Image, ImageChops

from pockets.animation import lerp
from pockets.collection_utils import map_keys
from pockets.geometry import Rect, Vec2
from pockets.sprite import Sprite, SpriteData

NameDataPair = Tuple[str, SpriteData]
ParseFunction = Callable[[Mapping[str, Any]], List[NameDataPair]]


@dataclass(frozen=True)
class Quad:
    """A textured rectangle: where it goes and which part of the texture it shows."""

    positions: Rect
    tex_coords: Rect

    def strip(self) -> List[Tuple[Vec2, Vec2]]:
        """Position and texture coordinate pairs in triangle-strip order."""
        p, t = self.positions, self.tex_coords
        return [
            (p.upper_right, t.upper_right),
            (p.upper_left, t.upper_left),
            (p.lower_right, t.lower_right),
            (p.lower_left, t.lower_left),
        ]


def premultiply(image: Image.Image) -> Image.Image:
    """Return an RGBA copy of ``image`` with color channels multiplied by alpha."""
    rgba = image.convert("RGBA")
    r, g, b, a = rgba.split()
    channels = tuple(ImageChops.multiply(c, a) for c in (r, g, b))
    return Image.merge("RGBA", channels + (a,))


def default_parse_function(description: Mapping[str, Any]) -> List[NameDataPair]:
    """Parse the sheet format written by the image packer."""
    try:
        meta = description["meta"]
        width, height = int(meta["width"]), int(meta["height"])
        result: List[NameDataPair] = []
        for child in description["sprites"]:
            x1, y1 = int(child["x1"]), int(child["y1"])
            x2, y2 = int(child["x2"]), int(child["y2"])
            bounds = Rect(x1, y1, x2, y2)
            registration = Vec2(int(float(child["rx"])), int(float(child["ry"])))
            sprite = SpriteData(
                size=bounds.size,
                texture_bounds=Rect(x1 / width, y1 / height, x2 / width, y2 / height),
                registration_point=registration,
            )
            result.append((str(child["id"]), sprite))
        return result
    except (KeyError, TypeError, ValueError, ZeroDivisionError) as exc:
        raise ValueError(f"malformed sprite sheet description: {exc!r}") from exc


SpriteRef = Union[str, SpriteData]


class SpriteSheet:
    """A bitmap of sprites addressed by id.

    Duplicate ids overwrite each other. The image should be premultiplied.
    """

    def __init__(self, image: Image.Image, description: Mapping[str, Any],
                 parse: ParseFunction = default_parse_function) -> None:
        self.image = image
        self._sprite_data: Dict[str, SpriteData] = {}
        for name, data in parse(description):
            self._sprite_data[name] = data

    @staticmethod
    def load(base_path: Union[str, os.PathLike], content_scale: float = 1.0) -> "SpriteSheet":
        """Load ``<stem>.json`` and ``<stem>.png`` next to ``base_path``.

        With a content scale above 1 the ``@2x`` files are used. The bitmap is
        premultiplied for clean edges.
        """
        base = Path(base_path)
        suffix = "@2x" if content_scale > 1.0 else ""
        json_path = base.parent / f"{base.stem}{suffix}.json"
        png_path = base.parent / f"{base.stem}{suffix}.png"
        with open(json_path, encoding="utf-8") as handle:
            description = json.load(handle)
        with Image.open(png_path) as source:
            image = premultiply(source)
        return SpriteSheet(image, description)

    def sprite_names(self) -> List[str]:
        return map_keys(self._sprite_data)

    def sprite_data(self, sprite_name: str) -> SpriteData:
        """Data for the named sprite; an unknown name gets (and stores) a default."""
        return self._sprite_data.setdefault(sprite_name, SpriteData())

    def sprite(self, sprite_name: str) -> Sprite:
        return Sprite(self.sprite_data(sprite_name))

    def _resolve(self, sprite: SpriteRef) -> SpriteData:
        return self.sprite_data(sprite) if isinstance(sprite, str) else sprite

    def draw(self, sprite: SpriteRef, loc: Vec2) -> Quad:
        """The sprite with its registration point at ``loc``."""
        data = self._resolve(sprite)
        rect = Rect.from_corners(loc, loc + data.size)
        return Quad(rect - data.registration_point, data.texture_bounds)

    def draw_scrolled(self, sprite: SpriteRef, loc: Vec2, offsets: Vec2) -> Quad:
        """The sprite with its texture slid by ``offsets`` within its own bounds."""
        data = self._resolve(sprite)
        coords = data.texture_bounds
        rect = Rect.from_corners(loc, loc + data.size)
        cx1, cy1, cx2, cy2 = coords.x1, coords.y1, coords.x2, coords.y2
        rx1, ry1, rx2, ry2 = rect.x1, rect.y1, rect.x2, rect.y2
        size = data.size
        if offsets.x < 0:
            cx1 = lerp(coords.x1, coords.x2, -offsets.x)
            rx2 = loc.x + size.x * (1 + offsets.x)
        elif offsets.x > 0:
            cx2 = lerp(coords.x1, coords.x2, 1 - offsets.x)
            rx1 = loc.x + size.x * offsets.x
        if offsets.y < 0:
            cy1 = lerp(coords.y1, coords.y2, -offsets.y)
            ry2 = loc.y + size.y * (1 + offsets.y)
        elif offsets.y > 0:
            cy2 = lerp(coords.y1, coords.y2, 1 - offsets.y)
            ry1 = loc.y + size.y * offsets.y
        return Quad(Rect(rx1, ry1, rx2, ry2) - data.registration_point,
                    Rect(cx1, cy1, cx2, cy2))

    def draw_in_rect(self, sprite: SpriteRef, loc: Vec2, bounding_rect: Rect) -> Quad:
        """The part of the sprite at ``loc`` that lies inside ``bounding_rect``."""
        data = self._resolve(sprite)
        size, reg = data.size, data.registration_point
        sprite_bounds = Rect.from_size(size).translated(loc - reg)
        clipped = sprite_bounds.clip_by(bounding_rect).translated(reg - loc)
        portion = Rect(clipped.x1 / size.x, clipped.y1 / size.y,
                       clipped.x2 / size.x, clipped.y2 / size.y)
        return self.draw_portion(data, loc, portion)

    def draw_portion(self, sprite: SpriteRef, loc: Vec2, portion: Rect) -> Quad:
        """The normalized ``portion`` of the sprite, placed at ``loc``."""
        data = self._resolve(sprite)
        tex = data.texture_bounds
        tex_coords = Rect(lerp(tex.x1, tex.x2, portion.x1),
                          lerp(tex.y1, tex.y2, portion.y1),
                          lerp(tex.x1, tex.x2, portion.x2),
                          lerp(tex.y1, tex.y2, portion.y2))
        br = loc + data.size
        positions = Rect(lerp(loc.x, br.x, portion.x1),
                         lerp(loc.y, br.y, portion.y1),
                         lerp(loc.x, br.x, portion.x2),
                         lerp(loc.y, br.y, portion.y2))
        return Quad(positions - data.registration_point, tex_coords)