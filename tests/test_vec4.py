import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from pyrastermath.settings import Settings
from pyrastermath.types import Vec2, Vec3, Vec4


def test_from_vec3_appends_w_of_one():
    assert Vec4.from_vec3(Vec3(1, 2, 3)) == Vec4(1, 2, 3, 1)


def test_from_vec2_appends_zeros():
    assert Vec4.from_vec2(Vec2(1, 2)) == Vec4(1, 2, 0, 0)


def test_widening_defaults_come_from_settings(monkeypatch):
    monkeypatch.setattr(Settings, "FROM_VEC3_W", 0)
    assert Vec4.from_vec3(Vec3(1, 2, 3)).w == 0.0


def test_normalize_and_length():
    v = Vec4(1, 1, 1, 1)
    assert v.length() == 2.0
    assert v.normalize().raw() == pytest.approx((0.5, 0.5, 0.5, 0.5))


def test_abs_clamp_multiply_vec():
    assert Vec4(-1, 2, -3, 4).abs() == Vec4(1, 2, 3, 4)
    assert Vec4(-1, 0.25, 3, 1).clamp() == Vec4(0, 0.25, 1, 1)
    assert Vec4(1, 2, 3, 4).multiply_vec(Vec4(2, 2, 2, 0.5)) == Vec4(2, 4, 6, 2)


def test_distance():
    assert Vec4(1, 1, 1, 1).distance(Vec4(0, 0, 0, 0)) == 2.0


def test_color_int_is_32_bits():
    assert Vec4(1, 0, 0, 1).to_color_int() == 0xFF0000FF
    assert Vec4(1, 1, 1, 1).to_color_int() == 0xFFFFFFFF


def test_divide_by_zero():
    v = Vec4(1, 2, 3, 4)
    with pytest.raises(ZeroDivisionError):
        v.divide(0)
    assert v == Vec4(1, 2, 3, 4)


def test_no_cross():
    assert not hasattr(Vec4, "cross")
