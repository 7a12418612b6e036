"""Small 2D value types: vectors, rectangles and affine transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

Number = Union[int, float]


@dataclass(frozen=True, slots=True)
class Vec2:
    """An immutable two-component vector."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def zero(cls) -> "Vec2":
        return cls(0.0, 0.0)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def __mul__(self, other: Union["Vec2", Number]) -> "Vec2":
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        return Vec2(self.x * other, self.y * other)

    __rmul__ = __mul__

    def __truediv__(self, other: Union["Vec2", Number]) -> "Vec2":
        if isinstance(other, Vec2):
            return Vec2(self.x / other.x, self.y / other.y)
        return Vec2(self.x / other, self.y / other)

    def dot(self, other: "Vec2") -> float:
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalized(self) -> "Vec2":
        """Unit vector in the same direction; the zero vector stays zero."""
        size = self.length()
        if size == 0.0:
            return Vec2(0.0, 0.0)
        return Vec2(self.x / size, self.y / size)

    def distance(self, other: "Vec2") -> float:
        return (self - other).length()

    def distance_squared(self, other: "Vec2") -> float:
        delta = self - other
        return delta.dot(delta)

    def rotated(self, radians: float) -> "Vec2":
        cos_a, sin_a = math.cos(radians), math.sin(radians)
        return Vec2(self.x * cos_a - self.y * sin_a, self.x * sin_a + self.y * cos_a)


@dataclass(frozen=True, slots=True)
class Rect:
    """An axis-aligned rectangle given by its two corners."""

    x1: float = 0.0
    y1: float = 0.0
    x2: float = 0.0
    y2: float = 0.0

    @classmethod
    def from_corners(cls, a: Vec2, b: Vec2) -> "Rect":
        """Rectangle spanning two points, with x1 <= x2 and y1 <= y2."""
        return cls(min(a.x, b.x), min(a.y, b.y), max(a.x, b.x), max(a.y, b.y))

    @classmethod
    def from_size(cls, size: Vec2) -> "Rect":
        return cls(0.0, 0.0, size.x, size.y)

    @property
    def width(self) -> float:
        return self.x2 - self.x1

    @property
    def height(self) -> float:
        return self.y2 - self.y1

    @property
    def size(self) -> Vec2:
        return Vec2(self.width, self.height)

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def upper_left(self) -> Vec2:
        return Vec2(self.x1, self.y1)

    @property
    def upper_right(self) -> Vec2:
        return Vec2(self.x2, self.y1)

    @property
    def lower_left(self) -> Vec2:
        return Vec2(self.x1, self.y2)

    @property
    def lower_right(self) -> Vec2:
        return Vec2(self.x2, self.y2)

    @property
    def center(self) -> Vec2:
        return Vec2((self.x1 + self.x2) / 2, (self.y1 + self.y2) / 2)

    def contains(self, point: Vec2) -> bool:
        """True if the point lies inside or on the edge."""
        return self.x1 <= point.x <= self.x2 and self.y1 <= point.y <= self.y2

    def intersects(self, other: "Rect") -> bool:
        """True if the rectangles overlap; touching edges count."""
        if self.x1 > other.x2 or self.x2 < other.x1:
            return False
        if self.y1 > other.y2 or self.y2 < other.y1:
            return False
        return True

    def clip_by(self, other: "Rect") -> "Rect":
        """The part of this rectangle inside ``other``; empty if disjoint."""
        x1 = min(max(self.x1, other.x1), other.x2)
        y1 = min(max(self.y1, other.y1), other.y2)
        x2 = max(min(self.x2, other.x2), x1)
        y2 = max(min(self.y2, other.y2), y1)
        return Rect(x1, y1, x2, y2)

    def inflated(self, amount: Vec2) -> "Rect":
        """Grow each side outward by ``amount`` (negative shrinks)."""
        return Rect(self.x1 - amount.x, self.y1 - amount.y,
                    self.x2 + amount.x, self.y2 + amount.y)

    def translated(self, delta: Vec2) -> "Rect":
        return Rect(self.x1 + delta.x, self.y1 + delta.y,
                    self.x2 + delta.x, self.y2 + delta.y)

    def __add__(self, delta: Vec2) -> "Rect":
        return self.translated(delta)

    def __sub__(self, delta: Vec2) -> "Rect":
        return self.translated(-delta)


@dataclass(frozen=True, slots=True)
class Affine2:
    """A 2D affine transform mapping (x, y) to (m00*x + m01*y + m02, m10*x + m11*y + m12)."""

    m00: float = 1.0
    m01: float = 0.0
    m02: float = 0.0
    m10: float = 0.0
    m11: float = 1.0
    m12: float = 0.0

    @staticmethod
    def identity() -> "Affine2":
        return Affine2()

    @staticmethod
    def translation(delta: Vec2) -> "Affine2":
        return Affine2(1.0, 0.0, delta.x, 0.0, 1.0, delta.y)

    @staticmethod
    def rotation(radians: float) -> "Affine2":
        cos_a, sin_a = math.cos(radians), math.sin(radians)
        return Affine2(cos_a, -sin_a, 0.0, sin_a, cos_a, 0.0)

    def __matmul__(self, other: "Affine2") -> "Affine2":
        """Compose: the result applies ``other`` first, then ``self``."""
        return Affine2(
            self.m00 * other.m00 + self.m01 * other.m10,
            self.m00 * other.m01 + self.m01 * other.m11,
            self.m00 * other.m02 + self.m01 * other.m12 + self.m02,
            self.m10 * other.m00 + self.m11 * other.m10,
            self.m10 * other.m01 + self.m11 * other.m11,
            self.m10 * other.m02 + self.m11 * other.m12 + self.m12,
        )

    def translated(self, delta: Vec2) -> "Affine2":
        """This transform followed in local space by a translation."""
        return self @ Affine2.translation(delta)

    def rotated(self, radians: float) -> "Affine2":
        """This transform followed in local space by a rotation."""
        return self @ Affine2.rotation(radians)

    def transform_point(self, point: Vec2) -> Vec2:
        return Vec2(self.m00 * point.x + self.m01 * point.y + self.m02,
                    self.m10 * point.x + self.m11 * point.y + self.m12)

    def inverted(self) -> "Affine2":
        det = self.m00 * self.m11 - self.m01 * self.m10
        if det == 0.0:
            raise ValueError("transform is singular and cannot be inverted")
        i00 = self.m11 / det
        i01 = -self.m01 / det
        i10 = -self.m10 / det
        i11 = self.m00 / det
        return Affine2(
            i00, i01, -(i00 * self.m02 + i01 * self.m12),
            i10, i11, -(i10 * self.m02 + i11 * self.m12),
        )