"""A textured line between two points, expanded into a triangle strip."""

from __future__ import annotations

from typing import List, Tuple

from pockets.geometry import Rect, Vec2
from pockets.simple_renderer import Renderable
from pockets.sprite import SpriteData


class ExpandedLine2d(Renderable):
    """A line of given width with rounded-off caps, as eight strip vertices."""

    def __init__(self, begin: Vec2, end: Vec2) -> None:
        self._begin = begin
        self._ray = end - begin
        self.width = 6.0
        self._scale = 1.0
        self._positions: List[Vec2] = [Vec2() for _ in range(8)]
        self._tex_coords: List[Vec2] = [Vec2() for _ in range(8)]
        self._build_tex_coords()
        self._build_outline(begin, end)

    @property
    def positions(self) -> Tuple[Vec2, ...]:
        return tuple(self._positions)

    @property
    def tex_coords(self) -> Tuple[Vec2, ...]:
        return tuple(self._tex_coords)

    @property
    def scale(self) -> float:
        return self._scale

    def set_end_points(self, begin: Vec2, end: Vec2) -> None:
        """Reset the line's end points."""
        self._begin = begin
        self._ray = end - begin
        self._build_outline(begin, end)

    def scale_length(self, scale: float) -> None:
        """Draw the line from its start for ``scale`` of its full length."""
        self._scale = scale
        self._build_outline(self._begin, self._begin + self._ray * scale)

    def scale_length_inverse(self, scale: float) -> None:
        """Draw the last ``scale`` of the line, ending at its end point."""
        self._scale = scale
        end = self._begin + self._ray
        self._build_outline(end - self._ray * scale, end)

    def match_sprite(self, sprite: SpriteData) -> None:
        """Take width and texture coordinates from a sprite."""
        self.width = sprite.size.y / 2
        self._build_tex_coords(sprite.texture_bounds)

    def length(self) -> float:
        """Total length of the line, ignoring scaling."""
        return self._ray.length()

    def render(self) -> List[Tuple[Vec2, Vec2]]:
        """Position and texture-coordinate pairs to draw; empty when scaled to nothing."""
        if self._scale > 0:
            return list(zip(self._positions, self._tex_coords))
        return []

    def _build_outline(self, begin: Vec2, end: Vec2) -> None:
        cap = self._ray.normalized() * self.width
        north = Vec2(-cap.y, cap.x)
        south = -north
        north_west = north - cap
        north_east = north + cap
        south_east = -north_west
        south_west = -north_east
        self._positions = [
            begin + south_west,
            begin + north_west,
            begin + south,
            begin + north,
            end + south,
            end + north,
            end + south_east,
            end + north_east,
        ]

    def _build_tex_coords(self, bounds: Rect = Rect(0.0, 0.0, 1.0, 1.0)) -> None:
        mid_s = bounds.x1 + bounds.width * 0.5
        self._tex_coords = [
            Vec2(bounds.x1, bounds.y2),
            Vec2(bounds.x1, bounds.y1),
            Vec2(mid_s, bounds.y2),
            Vec2(mid_s, bounds.y1),
            Vec2(mid_s, bounds.y2),
            Vec2(mid_s, bounds.y1),
            Vec2(bounds.x2, bounds.y2),
            Vec2(bounds.x2, bounds.y1),
        ]