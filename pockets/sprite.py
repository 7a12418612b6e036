"""Sprite data describing a graphic on a sheet, and a renderable sprite."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import List, Tuple

from pockets.animation import lerp
from pockets.geometry import Rect, Vec2
from pockets.locus import Locus2d
from pockets.simple_renderer import Renderable
from pockets.triangle_renderer import TriangleRenderable, Vertex

ColorA = Tuple[float, float, float, float]


def _to_color8(color: ColorA) -> Tuple[int, int, int, int]:
    return tuple(int(round(min(max(c, 0.0), 1.0) * 255)) for c in color)  # type: ignore[return-value]


@dataclass
class SpriteData:
    """Pixel size, normalized texture bounds and registration point of a sprite."""

    size: Vec2 = field(default_factory=lambda: Vec2(48, 48))
    texture_bounds: Rect = field(default_factory=lambda: Rect(0.0, 0.0, 1.0, 1.0))
    registration_point: Vec2 = field(default_factory=Vec2)


class Sprite(Renderable, TriangleRenderable):
    """A textured rectangle built from :class:`SpriteData`.

    Local vertices are kept in triangle-strip order: upper right, upper left,
    lower right, lower left.
    """

    def __init__(self, data: SpriteData | None = None) -> None:
        self._data = dataclasses.replace(data) if data is not None else SpriteData()
        self._locus = Locus2d()
        self._tint: ColorA = (1.0, 1.0, 1.0, 1.0)
        self._vertices: List[Vertex] = [Vertex() for _ in range(4)]
        self._transformed: List[Vertex] = list(self._vertices)
        self._dirty = True
        self.set_tint((1.0, 1.0, 1.0, 1.0))
        self._update_positions(Rect.from_size(self._data.size))
        self._update_tex_coords(self._data.texture_bounds)

    @property
    def data(self) -> SpriteData:
        return self._data

    @property
    def size(self) -> Vec2:
        return self._data.size

    @property
    def registration_point(self) -> Vec2:
        return self._data.registration_point

    @property
    def tint(self) -> ColorA:
        return self._tint

    @property
    def loc(self) -> Vec2:
        return self._locus.loc

    @loc.setter
    def loc(self, value: Vec2) -> None:
        self._dirty = True
        self._locus.loc = value

    @property
    def locus(self) -> Locus2d:
        """The sprite's locus; accessing it assumes a change is coming."""
        self._dirty = True
        return self._locus

    def set_layer(self, layer: int) -> None:
        """Set the draw layer used by both renderer kinds."""
        self.layer = layer

    def set_tint(self, color: ColorA) -> None:
        self._tint = tuple(color)  # type: ignore[assignment]
        color8 = _to_color8(self._tint)
        self._vertices = [dataclasses.replace(v, color=color8) for v in self._vertices]
        self._dirty = True

    def set_registration_point(self, point: Vec2) -> None:
        """Move the registration point; resets the visible region to the full sprite."""
        self._data.registration_point = point
        self._update_positions(Rect.from_size(self._data.size))

    def local_bounds(self) -> Rect:
        """Bounds in local coordinates."""
        return Rect.from_size(self._data.size) - self._data.registration_point

    def contains(self, point: Vec2) -> bool:
        """True if the world-space ``point`` lies on the sprite."""
        local = self.locus.transform().inverted().transform_point(point)
        return self.local_bounds().contains(local)

    def clip_by(self, rect: Rect) -> None:
        """Show only the part of the sprite inside ``rect``."""
        size = self._data.size
        reg = self._data.registration_point
        sprite_bounds = Rect.from_size(size).translated(self.loc - reg)
        clipped = sprite_bounds.clip_by(rect).translated(reg - self.loc)
        portion = Rect(clipped.x1 / size.x, clipped.y1 / size.y,
                       clipped.x2 / size.x, clipped.y2 / size.y)
        self.set_region(portion)

    def set_region(self, portion: Rect) -> None:
        """Render the normalized ``portion`` of the sprite's texture."""
        tex = self._data.texture_bounds
        tex_coords = Rect(lerp(tex.x1, tex.x2, portion.x1),
                          lerp(tex.y1, tex.y2, portion.y1),
                          lerp(tex.x1, tex.x2, portion.x2),
                          lerp(tex.y1, tex.y2, portion.y2))
        size = self._data.size
        positions = Rect(lerp(0.0, size.x, portion.x1),
                         lerp(0.0, size.y, portion.y1),
                         lerp(0.0, size.x, portion.x2),
                         lerp(0.0, size.y, portion.y2))
        self._update_positions(positions)
        self._update_tex_coords(tex_coords)

    def vertices(self) -> List[Vertex]:
        """Vertices transformed into world space, tinted."""
        self._update_transformed_vertices()
        return list(self._transformed)

    def draw(self) -> List[Vertex]:
        """Local vertices, without transform applied."""
        return list(self._vertices)

    def render(self) -> List[Vertex]:
        """Vertices with transform and tint applied."""
        return self.vertices()

    def _update_positions(self, positions: Rect) -> None:
        rect = positions - self._data.registration_point
        corners = (rect.upper_right, rect.upper_left, rect.lower_right, rect.lower_left)
        self._vertices = [dataclasses.replace(v, position=p)
                          for v, p in zip(self._vertices, corners)]
        self._dirty = True

    def _update_tex_coords(self, tex: Rect) -> None:
        corners = (tex.upper_right, tex.upper_left, tex.lower_right, tex.lower_left)
        self._vertices = [dataclasses.replace(v, tex_coord=t)
                          for v, t in zip(self._vertices, corners)]
        self._dirty = True

    def _update_transformed_vertices(self) -> None:
        if not self._dirty:
            return
        matrix = self._locus.transform()
        self._transformed = [dataclasses.replace(v, position=matrix.transform_point(v.position))
                             for v in self._vertices]
        self._dirty = False