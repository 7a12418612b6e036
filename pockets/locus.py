"""Nestable 2D position and orientation."""

from __future__ import annotations

from typing import Optional

from pockets.geometry import Affine2, Vec2


class Locus2d:
    """A position and rotation in 2D space that may inherit a parent's transform.

    Parents know nothing about their children. The local transform is cached and
    recomputed only after one of its inputs has changed.
    """

    def __init__(self, loc: Vec2 = Vec2(), rotation: float = 0.0,
                 registration_point: Vec2 = Vec2()) -> None:
        self._loc = loc
        self._rotation = rotation
        self._registration_point = registration_point
        self._parent: Optional[Locus2d] = None
        self._transform = Affine2.identity()
        self._dirty = True

    @property
    def loc(self) -> Vec2:
        return self._loc

    @loc.setter
    def loc(self, value: Vec2) -> None:
        self._loc = value
        self.set_dirty()

    @property
    def rotation(self) -> float:
        """Local rotation in radians."""
        return self._rotation

    @rotation.setter
    def rotation(self, radians: float) -> None:
        self._rotation = radians
        self.set_dirty()

    @property
    def registration_point(self) -> Vec2:
        """The point around which rotation occurs, in local coordinates."""
        return self._registration_point

    @registration_point.setter
    def registration_point(self, value: Vec2) -> None:
        self._registration_point = value
        self.set_dirty()

    @property
    def parent(self) -> Optional["Locus2d"]:
        return self._parent

    def accumulated_rotation(self) -> float:
        """Rotation including every ancestor's rotation."""
        if self._parent is not None:
            return self._parent.accumulated_rotation() + self._rotation
        return self._rotation

    def transform(self) -> Affine2:
        """Local transform preceded by the parent's full transform, if any."""
        local = self.local_transform()
        if self._parent is not None:
            return self._parent.transform() @ local
        return local

    def local_transform(self) -> Affine2:
        """This locus' own transform, ignoring any parent."""
        if self._dirty:
            self.calculate_transform()
        return self._transform

    def calculate_transform(self) -> None:
        """Recompute the cached local transform."""
        reg = self._registration_point
        self._transform = (Affine2.identity()
                           .translated(self._loc + reg)
                           .rotated(self._rotation)
                           .translated(-reg))
        self._dirty = False

    def set_parent(self, parent: "Locus2d") -> None:
        """Inherit transformations from ``parent``."""
        self._parent = parent

    def unset_parent(self) -> None:
        self._parent = None

    def set_dirty(self) -> None:
        """Mark the cached transform as out of date."""
        self._dirty = True