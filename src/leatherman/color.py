"""HSV / RGB color conversion."""

import math
from typing import Optional, Tuple

from .config import DEFAULT_VIZ_CONFIG, VizConfig
from .core.messages import ColorRGBA


def hsv_to_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """Convert an (H, S, V) triplet to (R, G, B).

    Args:
        h: The hue in degrees, taken modulo 360
        s: The saturation in range [0, 1]
        v: The value in range [0, 1]

    Returns:
        (r, g, b) in range [0, 1]
    """
    if s == 0:
        return v, v, v

    h = math.fmod(h, 360.0)
    if h < 0:
        h += 360.0
    h /= 60.0
    i = int(math.floor(h))
    f = h - i
    p = v * (1 - s)
    q = v * (1 - s * f)
    t = v * (1 - s * (1 - f))

    if i == 0:
        return v, t, p
    if i == 1:
        return q, v, p
    if i == 2:
        return p, v, t
    if i == 3:
        return p, q, v
    if i == 4:
        return t, p, v
    return v, p, q


def rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert (R, G, B) in [0, 1] to (H, S, V); hue in [0, 360), 0 for greys."""
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    v = max_c
    s = 0.0 if max_c == 0 else delta / max_c
    if delta == 0:
        return 0.0, s, v

    if max_c == r:
        h = 60.0 * ((g - b) / delta)
    elif max_c == g:
        h = 60.0 * ((b - r) / delta + 2.0)
    else:
        h = 60.0 * ((r - g) / delta + 4.0)

    if h < 0:
        h += 360.0
    return h, s, v


def msg_rgb_to_hsv(color: ColorRGBA) -> Tuple[float, float, float]:
    return rgb_to_hsv(color.r, color.g, color.b)


def msg_hsv_to_rgb(h: float, s: float, v: float, alpha: float = 1.0) -> ColorRGBA:
    r, g, b = hsv_to_rgb(h, s, v)
    return ColorRGBA(r=r, g=g, b=b, a=alpha)


def hue_to_color(hue: float, config: Optional[VizConfig] = None) -> ColorRGBA:
    """Marker color for a hue, using the configured saturation, value and alpha."""
    config = config or DEFAULT_VIZ_CONFIG
    return msg_hsv_to_rgb(hue, config.saturation, config.value, config.alpha)
