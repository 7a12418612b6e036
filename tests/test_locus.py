import math

import pytest

from pockets.geometry import Affine2, Vec2
from pockets.locus import Locus2d


def _xy(v: Vec2):
    return (v.x, v.y)


def test_default_transform_is_identity():
    locus = Locus2d()
    assert locus.transform() == Affine2.identity()


def test_translation_moves_origin_to_loc():
    locus = Locus2d()
    locus.loc = Vec2(3.0, -4.0)
    moved = locus.transform().transform_point(Vec2.zero())
    assert _xy(moved) == pytest.approx((3.0, -4.0), abs=1e-9)


def test_rotation_quarter_turn():
    locus = Locus2d()
    locus.rotation = math.pi / 2
    moved = locus.transform().transform_point(Vec2(1.0, 0.0))
    assert _xy(moved) == pytest.approx((0.0, 1.0), abs=1e-9)


def test_registration_point_is_fixed_by_rotation():
    locus = Locus2d(loc=Vec2(10.0, 5.0), rotation=1.3, registration_point=Vec2(2.0, 7.0))
    moved = locus.transform().transform_point(Vec2(2.0, 7.0))
    assert _xy(moved) == pytest.approx((12.0, 12.0), abs=1e-9)


def test_cached_transform_updates_after_change():
    locus = Locus2d()
    first = locus.transform()
    locus.loc = Vec2(1.0, 2.0)
    second = locus.transform()
    assert first != second
    assert _xy(second.transform_point(Vec2.zero())) == pytest.approx((1.0, 2.0), abs=1e-9)


def test_parent_transform_is_composed():
    parent = Locus2d(loc=Vec2(5.0, 0.0), rotation=0.7)
    child = Locus2d(loc=Vec2(1.0, 2.0), rotation=0.4)
    child.set_parent(parent)
    point = Vec2(3.0, -1.0)
    expected = parent.transform().transform_point(child.local_transform().transform_point(point))
    result = child.transform().transform_point(point)
    assert _xy(result) == pytest.approx(_xy(expected), abs=1e-9)


def test_accumulated_rotation_sums_ancestors():
    grand = Locus2d(rotation=0.25)
    parent = Locus2d(rotation=0.5)
    child = Locus2d(rotation=1.0)
    parent.set_parent(grand)
    child.set_parent(parent)
    assert child.accumulated_rotation() == pytest.approx(1.75)


def test_unset_parent_restores_local_transform():
    parent = Locus2d(loc=Vec2(9.0, 9.0))
    child = Locus2d(loc=Vec2(1.0, 1.0))
    child.set_parent(parent)
    assert child.transform() != child.local_transform()
    child.unset_parent()
    assert child.parent is None
    assert child.transform() == child.local_transform()


def test_inverse_round_trip():
    locus = Locus2d(loc=Vec2(4.0, -2.0), rotation=2.1, registration_point=Vec2(1.0, 1.0))
    point = Vec2(0.3, 8.0)
    t = locus.transform()
    back = t.inverted().transform_point(t.transform_point(point))
    assert _xy(back) == pytest.approx((0.3, 8.0), abs=1e-9)