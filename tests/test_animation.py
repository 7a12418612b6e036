import colorsys
import math

import pytest

from pockets.animation import (
    Quaternion,
    is_finite,
    lerp,
    lerp_hsva,
    lerp_quaternion,
    quantize,
    wrap_lerp,
)


def test_lerp_endpoints_and_midpoint():
    assert lerp(2.0, 8.0, 0.0) == 2.0
    assert lerp(2.0, 8.0, 1.0) == 8.0
    assert lerp(2.0, 8.0, 0.5) == pytest.approx((2.0 + 8.0) / 2)


def test_quantize_documented_examples():
    assert quantize(0.31, 5) == pytest.approx(0.4)
    assert quantize(0.31, 10) == pytest.approx(0.3)


def test_wrap_lerp_without_wrap_matches_lerp():
    assert wrap_lerp(0.2, 0.4, 1.0, 0.3) == pytest.approx(lerp(0.2, 0.4, 0.3))


def test_wrap_lerp_wraps_start_around():
    assert wrap_lerp(0.9, 0.1, 1.0, 0.0) == pytest.approx(0.9 - 1.0)
    assert wrap_lerp(0.9, 0.1, 1.0, 1.0) == pytest.approx(0.1)
    assert wrap_lerp(0.1, 0.9, 1.0, 0.0) == pytest.approx(0.1 + 1.0)


def test_lerp_hsva_endpoints_are_exact():
    a = (0.2, 0.4, 0.6, 1.0)
    b = (0.9, 0.1, 0.3, 0.0)
    assert lerp_hsva(a, b, 0.0) is a
    assert lerp_hsva(a, b, 1.0) is b


def test_lerp_hsva_interpolates_alpha():
    a = (1.0, 0.0, 0.0, 0.2)
    b = (1.0, 0.0, 0.0, 0.6)
    result = lerp_hsva(a, b, 0.5)
    assert result[3] == pytest.approx(lerp(0.2, 0.6, 0.5))
    assert result[:3] == pytest.approx(a[:3])


def test_lerp_hsva_wraps_hue_through_red():
    a = colorsys.hsv_to_rgb(0.9, 1.0, 1.0) + (1.0,)
    b = colorsys.hsv_to_rgb(0.1, 1.0, 1.0) + (1.0,)
    r, g, bl, _ = lerp_hsva(a, b, 0.5)
    hue, _, _ = colorsys.rgb_to_hsv(r, g, bl)
    assert min(hue, 1.0 - hue) < 0.05


def test_is_finite():
    assert is_finite((1.0, 2.0, 3.0))
    assert not is_finite((1.0, math.nan, 3.0))
    assert not is_finite((math.inf, 0.0, 0.0))


def test_normalized_unit_length_and_zero_becomes_identity():
    assert Quaternion(2, 1, -1, 3).normalized().length() == pytest.approx(1.0)
    assert Quaternion(0, 0, 0, 0).normalized() == Quaternion.identity()


def test_axis_of_rotation():
    q = Quaternion.from_axis_angle((0.0, 0.0, 2.0), 0.8)
    assert q.axis() == pytest.approx((0.0, 0.0, 1.0))
    assert not is_finite(Quaternion.identity().axis())


def test_slerp_endpoints():
    a = Quaternion.from_axis_angle((1.0, 0.0, 0.0), 0.3)
    b = Quaternion.from_axis_angle((0.0, 1.0, 0.0), 1.2)
    start = a.slerp(0.0, b)
    end = a.slerp(1.0, b)
    assert (start.w, start.x, start.y, start.z) == pytest.approx((a.w, a.x, a.y, a.z))
    assert (end.w, end.x, end.y, end.z) == pytest.approx((b.w, b.x, b.y, b.z))


def test_slerp_stays_on_unit_sphere():
    a = Quaternion.from_axis_angle((1.0, 0.0, 0.0), 0.3)
    b = Quaternion.from_axis_angle((0.0, 0.0, 1.0), 2.0)
    for t in (0.25, 0.5, 0.75):
        assert a.slerp(t, b).length() == pytest.approx(1.0)


def test_lerp_quaternion_degenerate_axis_gives_identity():
    i = Quaternion.identity()
    assert lerp_quaternion(i, i, 0.5) == Quaternion.identity()


def test_lerp_quaternion_keeps_axis():
    a = Quaternion.from_axis_angle((0.0, 1.0, 0.0), 0.2)
    b = Quaternion.from_axis_angle((0.0, 1.0, 0.0), 1.0)
    mid = lerp_quaternion(a, b, 0.5)
    assert mid.axis() == pytest.approx(a.axis())
    assert mid.length() == pytest.approx(1.0)