"""Smooth curves through points and arc-length reparameterization of curves."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Protocol, Sequence, Tuple, TypeVar

from pockets.geometry import Vec2

Point = Tuple[float, ...]
P = TypeVar("P")

# Five-point Gauss-Legendre nodes and weights on [-1, 1].
_GL_NODES = (
    0.0,
    -0.5384693101056831,
    0.5384693101056831,
    -0.9061798459386640,
    0.9061798459386640,
)
_GL_WEIGHTS = (
    0.5688888888888889,
    0.4786286704993665,
    0.4786286704993665,
    0.2369268850561891,
    0.2369268850561891,
)
_SUBDIVISIONS = 8


def _as_point(p: Iterable[float]) -> Point:
    return tuple(float(c) for c in p)


def _like(values: Point, template: object):
    return Vec2(*values) if isinstance(template, Vec2) else values


def _add(a: Point, b: Point) -> Point:
    return tuple(x + y for x, y in zip(a, b))


def _sub(a: Point, b: Point) -> Point:
    return tuple(x - y for x, y in zip(a, b))


def _scale(a: Point, s: float) -> Point:
    return tuple(x * s for x in a)


def curve_through(points: Sequence[P]) -> List[P]:
    """Bezier control points for a smooth curve passing through ``points``.

    The result holds one group of four points (start, control, control, end)
    for each pair of neighbouring input points. Points may be :class:`Vec2`
    or sequences of any one dimension; ``Vec2`` input gives ``Vec2`` output,
    anything else gives tuples. At least three points are needed.
    """
    if len(points) <= 2:
        raise ValueError("curve_through needs more than two points")
    template = points[0]
    pts = [_as_point(p) for p in points]
    if len({len(p) for p in pts}) != 1:
        raise ValueError("all points must have the same dimension")

    result: List[Point] = []

    def segment(p1: Point, b1: Point, b2: Point, p2: Point) -> None:
        result.extend((p1, b1, b2, p2))

    p1, p2, p3 = pts[0], pts[1], pts[2]
    segment(p1,
            _add(p1, _scale(_sub(p2, p1), 1 / 6.0)),
            _sub(p2, _scale(_sub(p3, p1), 1 / 6.0)),
            p2)

    for p0, p1, p2, p3 in zip(pts, pts[1:], pts[2:], pts[3:]):
        segment(p1,
                _add(p1, _scale(_sub(p2, p0), 1 / 6.0)),
                _sub(p2, _scale(_sub(p3, p1), 1 / 6.0)),
                p2)

    p0, p1, p2 = pts[-3], pts[-2], pts[-1]
    segment(p1,
            _add(p1, _scale(_sub(p2, p0), 1 / 6.0)),
            _sub(p2, _scale(_sub(p2, p1), 1 / 6.0)),
            p2)

    return [_like(p, template) for p in result]


class Curve(Protocol):
    """What the arc-length parameterizer needs from a curve."""

    def position(self, t: float) -> Point: ...

    def length(self, t0: float, t1: float) -> float: ...

    def time(self, arc_length: float) -> float: ...


class BezierPath:
    """A chain of cubic Bezier segments, parameterized by t in [0, 1].

    Control points come in groups of four, as produced by :func:`curve_through`.
    Each segment covers an equal share of the parameter range.
    """

    def __init__(self, control_points: Sequence[Iterable[float]]) -> None:
        pts = [_as_point(p) for p in control_points]
        if not pts or len(pts) % 4 != 0:
            raise ValueError("control points must come in groups of four")
        if len({len(p) for p in pts}) != 1:
            raise ValueError("all control points must have the same dimension")
        self._segments = [tuple(pts[i:i + 4]) for i in range(0, len(pts), 4)]

    @property
    def segment_count(self) -> int:
        return len(self._segments)

    def _locate(self, t: float) -> Tuple[int, float]:
        t = min(max(t, 0.0), 1.0)
        u = t * len(self._segments)
        index = min(int(u), len(self._segments) - 1)
        return index, u - index

    def position(self, t: float) -> Point:
        """Point on the path at parameter ``t`` (clamped to [0, 1])."""
        index, u = self._locate(t)
        a, b, c, d = self._segments[index]
        v = 1.0 - u
        return tuple(v * v * v * pa + 3 * v * v * u * pb + 3 * v * u * u * pc + u * u * u * pd
                     for pa, pb, pc, pd in zip(a, b, c, d))

    def _speed(self, t: float) -> float:
        index, u = self._locate(t)
        a, b, c, d = self._segments[index]
        v = 1.0 - u
        n = len(self._segments)
        derivative = [n * 3 * (v * v * (pb - pa) + 2 * v * u * (pc - pb) + u * u * (pd - pc))
                      for pa, pb, pc, pd in zip(a, b, c, d)]
        return math.sqrt(sum(x * x for x in derivative))

    def _integrate(self, t0: float, t1: float) -> float:
        total = 0.0
        step = (t1 - t0) / _SUBDIVISIONS
        for k in range(_SUBDIVISIONS):
            lo = t0 + k * step
            mid = lo + step / 2
            half = step / 2
            total += half * sum(w * self._speed(mid + half * x)
                                for x, w in zip(_GL_NODES, _GL_WEIGHTS))
        return total

    def length(self, t0: float = 0.0, t1: float = 1.0) -> float:
        """Arc length between parameters ``t0`` and ``t1``."""
        if t1 < t0:
            return -self.length(t1, t0)
        t0 = min(max(t0, 0.0), 1.0)
        t1 = min(max(t1, 0.0), 1.0)
        n = len(self._segments)
        bounds = [t0] + [k / n for k in range(1, n) if t0 < k / n < t1] + [t1]
        return sum(self._integrate(a, b) for a, b in zip(bounds, bounds[1:]) if b > a)

    def time(self, arc_length: float) -> float:
        """Parameter at which the arc length from the start equals ``arc_length``."""
        total = self.length(0.0, 1.0)
        if arc_length <= 0.0 or total <= 0.0:
            return 0.0
        if arc_length >= total:
            return 1.0
        tolerance = 1e-9 * max(total, 1.0)
        lo, hi = 0.0, 1.0
        t = arc_length / total
        for _ in range(100):
            error = self.length(0.0, t) - arc_length
            if abs(error) < tolerance:
                break
            if error > 0:
                hi = t
            else:
                lo = t
            speed = self._speed(t)
            candidate = t - error / speed if speed > 0 else (lo + hi) / 2
            if not lo < candidate < hi:
                candidate = (lo + hi) / 2
            t = candidate
        return t


@dataclass
class _Sample:
    t: float = 0.0
    s: float = 0.0
    slope: float = 0.0  # dt/ds between the previous sample and this one


class SplineArcLengthParameterizer:
    """Cache turning normalized arc length into curve time.

    Allows travel at constant speed along a curve at interactive rates.
    """

    def __init__(self) -> None:
        self._samples: List[_Sample] = []
        self._arc_length = 0.0
        self._spline: Curve | None = None

    @property
    def arc_length(self) -> float:
        return self._arc_length

    def sample_curve(self, spline: Curve, num_samples: int = 64) -> None:
        """Record the time/arc-length relationship of ``spline``."""
        if num_samples < 2:
            raise ValueError("at least two samples are needed")
        arc_length = spline.length(0.0, 1.0)
        if arc_length <= 0.0:
            raise ValueError("curve has no length to sample")
        samples = [_Sample()]
        for i in range(1, num_samples):
            previous = samples[-1]
            s = arc_length * i / (num_samples - 1.0)
            t = spline.time(s)
            samples.append(_Sample(t, s, (t - previous.t) / (s - previous.s)))
        self._spline = spline
        self._arc_length = arc_length
        self._samples = samples

    def time(self, s: float) -> float:
        """Curve time at normalized arc length ``s`` in [0, 1]."""
        if not self._samples:
            raise ValueError("no curve has been sampled")
        if s <= 0:
            return self._samples[0].t
        if s >= 1:
            return self._samples[-1].t
        index = int(s * (len(self._samples) - 1))
        sample = self._samples[index]
        following = self._samples[index + 1]
        return sample.t + following.slope * (s * self._arc_length - sample.s)

    def position(self, s: float) -> Point:
        """Curve position at normalized arc length ``s`` in [0, 1]."""
        t = self.time(s)
        assert self._spline is not None
        return self._spline.position(t)