"""Interpolation helpers for numbers, colors and rotations."""

from __future__ import annotations

import colorsys
import math
from dataclasses import dataclass
from typing import Iterable, Tuple

ColorA = Tuple[float, float, float, float]

_EPSILON = 4.37114e-05


def lerp(a, b, t):
    """Linear interpolation from ``a`` to ``b``."""
    return a + (b - a) * t


def quantize(f: float, steps: float) -> float:
    """Round ``f`` to a precision of 1/steps (0.31 with 5 steps gives 0.4)."""
    return math.floor(f * steps + 0.5) / steps


def wrap_lerp(a: float, b: float, w: float, t: float) -> float:
    """Lerp from ``a`` to ``b`` around a circle where ``w`` equals zero."""
    if abs(b - a) > w / 2.0:
        a += w if a < b else -w
    return a + (b - a) * t


def lerp_hsva(start: ColorA, finish: ColorA, time: float) -> ColorA:
    """Interpolate RGBA colors through HSV space, wrapping hue over [0, 1]."""
    if time == 0.0:
        return start
    if time == 1.0:
        return finish
    sh, ss, sv = colorsys.rgb_to_hsv(start[0], start[1], start[2])
    fh, fs, fv = colorsys.rgb_to_hsv(finish[0], finish[1], finish[2])
    hue = wrap_lerp(sh, fh, 1.0, time) % 1.0
    r, g, b = colorsys.hsv_to_rgb(hue, lerp(ss, fs, time), lerp(sv, fv, time))
    return (r, g, b, lerp(start[3], finish[3], time))


def is_finite(vec: Iterable[float]) -> bool:
    """True if every component is finite."""
    return all(math.isfinite(c) for c in vec)


@dataclass(frozen=True, slots=True)
class Quaternion:
    """A rotation quaternion with scalar part ``w``."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @staticmethod
    def identity() -> "Quaternion":
        return Quaternion(1.0, 0.0, 0.0, 0.0)

    @staticmethod
    def from_axis_angle(axis: Tuple[float, float, float], radians: float) -> "Quaternion":
        size = math.sqrt(sum(c * c for c in axis))
        if size == 0.0:
            raise ValueError("rotation axis must be non-zero")
        s = math.sin(radians / 2) / size
        return Quaternion(math.cos(radians / 2), axis[0] * s, axis[1] * s, axis[2] * s)

    def __add__(self, other: "Quaternion") -> "Quaternion":
        return Quaternion(self.w + other.w, self.x + other.x,
                          self.y + other.y, self.z + other.z)

    def __mul__(self, scale: float) -> "Quaternion":
        return Quaternion(self.w * scale, self.x * scale, self.y * scale, self.z * scale)

    __rmul__ = __mul__

    def dot(self, other: "Quaternion") -> float:
        return self.w * other.w + self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalized(self) -> "Quaternion":
        """Unit quaternion; a (near) zero quaternion becomes the identity."""
        size = self.length()
        if size <= _EPSILON:
            return Quaternion.identity()
        return self * (1.0 / size)

    def axis(self) -> Tuple[float, float, float]:
        """Rotation axis; non-finite when the rotation angle is zero."""
        s = 1.0 - self.w * self.w
        if s <= 0.0:
            return (math.nan, math.nan, math.nan)
        inv = 1.0 / math.sqrt(s)
        return (self.x * inv, self.y * inv, self.z * inv)

    def slerp(self, time: float, end: "Quaternion") -> "Quaternion":
        """Spherical interpolation toward ``end``."""
        cos_theta = self.dot(end)
        if cos_theta >= _EPSILON:
            if 1.0 - cos_theta > _EPSILON:
                theta = math.acos(min(cos_theta, 1.0))
                inv_sin = 1.0 / math.sin(theta)
                start_w = math.sin((1.0 - time) * theta) * inv_sin
                end_w = math.sin(time * theta) * inv_sin
            else:
                start_w, end_w = 1.0 - time, time
        else:
            if 1.0 + cos_theta > _EPSILON:
                theta = math.acos(max(-cos_theta, -1.0))
                inv_sin = 1.0 / math.sin(theta)
                start_w = math.sin((time - 1.0) * theta) * inv_sin
                end_w = math.sin(time * theta) * inv_sin
            else:
                start_w, end_w = time - 1.0, time
        return self * start_w + end * end_w


def lerp_quaternion(start: Quaternion, end: Quaternion, time: float) -> Quaternion:
    """Normalized slerp; falls back to identity when the axis is degenerate."""
    value = start.slerp(time, end).normalized()
    return value if is_finite(value.axis()) else Quaternion.identity()