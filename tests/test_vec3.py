import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from pyrastermath.types import Vec2, Vec3, clamp, cross, dot, normalize


def test_length():
    assert Vec3(3, 4, 0).length() == 5.0


def test_normalize():
    n = normalize(Vec3(3, 4, 0))
    assert n.raw() == pytest.approx((0.6, 0.8, 0.0))


def test_normalize_zero_vector_does_not_raise():
    v = Vec3(0, 0, 0)
    assert v.normalize() == Vec3(0, 0, 0)


@pytest.mark.parametrize("v", [
    Vec3(1, 2, 3), Vec3(-5, 0.25, 9), Vec3(1e-3, 0, 0), Vec3(1e6, -1e6, 3),
])
def test_normalize_has_unit_length(v):
    assert normalize(v).length() == pytest.approx(1.0)


@pytest.mark.parametrize("v", [Vec3(1, 2, 3), Vec3(-0.5, 4, 7.25)])
def test_dot_with_self_is_length_squared(v):
    assert dot(v, v) == pytest.approx(v.length() ** 2)


def test_abs():
    v = Vec3(-1, 2, -3)
    assert abs(v) == Vec3(1, 2, 3)
    assert v == Vec3(-1, 2, -3)
    assert v.abs() is v
    assert v == Vec3(1, 2, 3)


def test_clamp():
    assert Vec3(-0.5, 0.5, 2).clamp() == Vec3(0.0, 0.5, 1.0)


def test_clamp_is_idempotent():
    once = clamp(Vec3(-3, 0.3, 7))
    assert clamp(once) == once


def test_cross_basis():
    assert cross(Vec3(1, 0, 0), Vec3(0, 1, 0)) == Vec3(0, 0, 1)


@pytest.mark.parametrize("a,b", [
    (Vec3(1, 2, 3), Vec3(4, 5, 6)),
    (Vec3(-2, 0.5, 1), Vec3(3, 3, -1)),
])
def test_cross_properties(a, b):
    c = cross(a, b)
    assert c.is_close(cross(b, a) * -1)
    assert dot(a, c) == pytest.approx(0.0)
    assert dot(b, c) == pytest.approx(0.0)


def test_cross_in_place_reads_original_left():
    a = Vec3(1, 2, 3)
    assert a.cross(Vec3(4, 5, 6)) is a
    assert a == Vec3(-3, 6, -3)


def test_multiply_vec():
    assert Vec3(1, 2, 3).multiply_vec(Vec3(2, 2, 2)) == Vec3(2, 4, 6)


def test_divide_by_zero():
    v = Vec3(1, 2, 3)
    with pytest.raises(ZeroDivisionError):
        v / 0
    with pytest.raises(ZeroDivisionError):
        v.divide(0.0)
    assert v == Vec3(1, 2, 3)


def test_color_int():
    assert Vec3(1, 0, 0).to_color_int() == 0xFF0000
    assert Vec3(0, 1, 0).to_color_int() == 0x00FF00
    assert Vec3(1, 1, 1).to_color_int() == 0xFFFFFF
    assert Vec3(0.5, 0.5, 0.5).to_color_int() == 0x7F7F7F


def test_color_int_masks_out_of_range_channels():
    # -127.5 truncates to -127, masked to 0x81
    assert Vec3(-0.5, 0, 0).to_color_int() == 0x810000
    # 2 * 255 = 510 keeps only its low byte
    assert Vec3(0, 0, 2).to_color_int() == 0xFE


def test_color_int_non_finite_channel_packs_zero():
    assert Vec3(float("nan"), 1, float("inf")).to_color_int() == 0x00FF00


def test_from_vec2():
    assert Vec3.from_vec2(Vec2(1, 2)) == Vec3(1, 2, 0)


def test_from_vec2_rejects_other_types():
    with pytest.raises(TypeError):
        Vec3.from_vec2(Vec3(1, 2, 3))


def test_copy_is_independent():
    v = Vec3(1, 2, 3)
    c = v.copy()
    c.x = 10
    assert v.x == 1.0
    assert c == Vec3(10, 2, 3)


def test_raw_and_iteration():
    v = Vec3(1, 2, 3)
    assert v.raw() == (1.0, 2.0, 3.0)
    x, y, z = v
    assert (x, y, z) == v.raw()


def test_str_and_repr():
    assert str(Vec3(1, 2.5, 3)) == "Vec3(1.0, 2.5, 3.0)"
    assert repr(Vec3(1, 2, 3)) == "Vec3(x=1.0, y=2.0, z=3.0)"
