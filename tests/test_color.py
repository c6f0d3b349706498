"""Tests for HSV / RGB conversion."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from leatherman.color import hsv_to_rgb, hue_to_color, msg_hsv_to_rgb, msg_rgb_to_hsv, rgb_to_hsv
from leatherman.config import VizConfig
from leatherman.core.messages import ColorRGBA

unit = st.floats(min_value=0.0, max_value=1.0, allow_nan=False)


@pytest.mark.parametrize("hue, rgb", [
    (0.0, (1.0, 0.0, 0.0)),
    (60.0, (1.0, 1.0, 0.0)),
    (120.0, (0.0, 1.0, 0.0)),
    (180.0, (0.0, 1.0, 1.0)),
    (240.0, (0.0, 0.0, 1.0)),
    (300.0, (1.0, 0.0, 1.0)),
    (360.0, (1.0, 0.0, 0.0)),
    (-120.0, (0.0, 0.0, 1.0)),
])
def test_hsv_to_rgb_sectors(hue, rgb):
    assert hsv_to_rgb(hue, 1.0, 1.0) == pytest.approx(rgb)


def test_hsv_to_rgb_grey():
    """Zero saturation ignores the hue."""
    assert hsv_to_rgb(123.0, 0.0, 0.4) == (0.4, 0.4, 0.4)


def test_rgb_to_hsv():
    assert rgb_to_hsv(0.0, 0.0, 1.0) == pytest.approx((240.0, 1.0, 1.0))
    assert rgb_to_hsv(1.0, 0.0, 1.0) == pytest.approx((300.0, 1.0, 1.0))
    assert rgb_to_hsv(0.5, 0.5, 0.5) == (0.0, 0.0, 0.5)
    assert rgb_to_hsv(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)


@given(unit, unit, unit)
@settings(deadline=None)
def test_rgb_roundtrip(r, g, b):
    assert hsv_to_rgb(*rgb_to_hsv(r, g, b)) == pytest.approx((r, g, b), abs=1e-9)


def test_message_conversions():
    color = msg_hsv_to_rgb(120.0, 1.0, 0.5, alpha=0.3)
    assert color == ColorRGBA(r=0.0, g=0.5, b=0.0, a=0.3)
    assert msg_rgb_to_hsv(color) == pytest.approx((120.0, 1.0, 0.5))


def test_hue_to_color():
    assert hue_to_color(240.0) == ColorRGBA(r=0.0, g=0.0, b=1.0, a=1.0)
    faded = hue_to_color(0.0, VizConfig(value=0.5, alpha=0.25))
    assert (faded.r, faded.g, faded.b, faded.a) == pytest.approx((0.5, 0.0, 0.0, 0.25))
