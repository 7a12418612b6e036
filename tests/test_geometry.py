import math

import pytest

from pockets.geometry import Affine2, Rect, Vec2


def approx_vec(v):
    return pytest.approx((v.x, v.y), abs=1e-9)


def test_vec_length_pythagorean():
    assert Vec2(3, 4).length() == pytest.approx(5.0)


def test_normalized_has_unit_length():
    v = Vec2(-7.5, 2.25).normalized()
    assert v.length() == pytest.approx(1.0)


def test_normalized_zero_stays_zero():
    assert Vec2(0, 0).normalized() == Vec2(0, 0)


def test_distance_matches_squared():
    a, b = Vec2(1, 2), Vec2(-4, 6)
    assert a.distance(b) ** 2 == pytest.approx(a.distance_squared(b))
    assert a.distance(b) == pytest.approx(b.distance(a))


def test_rotation_preserves_length_and_half_turn_negates():
    v = Vec2(2, -3)
    assert v.rotated(1.1).length() == pytest.approx(v.length())
    assert tuple(v.rotated(math.pi)) == approx_vec(-v)


def test_vec_arithmetic():
    a, b = Vec2(1, 2), Vec2(3, 5)
    assert a + b - b == a
    assert a * 2 == a + a
    assert (a * b) / b == a


def test_rect_contains_corners_and_rejects_outside():
    r = Rect(0, 0, 10, 5)
    for corner in (r.upper_left, r.upper_right, r.lower_left, r.lower_right):
        assert r.contains(corner)
    assert not r.contains(Vec2(11, 2))
    assert not r.contains(Vec2(5, -1))


def test_from_corners_canonicalises():
    r = Rect.from_corners(Vec2(4, 9), Vec2(1, 2))
    assert (r.x1, r.y1, r.x2, r.y2) == (1, 2, 4, 9)


def test_intersects_including_touching():
    a = Rect(0, 0, 2, 2)
    assert a.intersects(Rect(2, 2, 4, 4))
    assert not a.intersects(Rect(3, 0, 4, 2))


def test_clip_by_lies_in_both():
    a = Rect(0, 0, 10, 10)
    b = Rect(5, -3, 20, 7)
    c = a.clip_by(b)
    for p in (c.upper_left, c.lower_right):
        assert a.contains(p) and b.contains(p)
    assert c == b.clip_by(a)


def test_clip_by_disjoint_is_empty():
    c = Rect(0, 0, 1, 1).clip_by(Rect(5, 5, 6, 6))
    assert c.area == 0


def test_inflate_round_trip():
    r = Rect(1, 2, 3, 4)
    amount = Vec2(0.5, 2)
    assert r.inflated(amount).inflated(-amount) == r
    assert r.inflated(amount).width == pytest.approx(r.width + 2 * amount.x)


def test_translate_round_trip():
    r = Rect(1, 2, 3, 4)
    d = Vec2(7, -2)
    assert (r + d) - d == r
    assert r.translated(d).size == r.size


def test_affine_identity_leaves_points():
    p = Vec2(3.5, -1)
    assert Affine2.identity().transform_point(p) == p


def test_affine_translation_then_rotation():
    d = Vec2(4, 1)
    p = Vec2(2, 3)
    m = Affine2.identity().translated(d).rotated(0.7)
    assert tuple(m.transform_point(p)) == approx_vec(d + p.rotated(0.7))


def test_affine_inverse_round_trip():
    m = Affine2.identity().translated(Vec2(3, -2)).rotated(0.4).translated(Vec2(-1, 5))
    p = Vec2(9, 8)
    assert tuple(m.inverted().transform_point(m.transform_point(p))) == approx_vec(p)


def test_affine_singular_raises():
    with pytest.raises(ValueError):
        Affine2(0, 0, 1, 0, 0, 1).inverted()