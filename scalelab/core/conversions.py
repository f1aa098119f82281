#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/core/conversions.py

import functools
import math
import re
from typing import Optional, Tuple

from . import config as c
from scalelab.shared.clamping import _clamp01

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def parse_hex(value: str) -> Optional[Tuple[int, int, int]]:
    """Parse '#rgb', '#rgba', '#rrggbb' or '#rrggbbaa' into 8-bit channels, ignoring alpha."""
    if not isinstance(value, str):
        return None
    match = _HEX_RE.match(value.strip())
    if not match:
        return None
    digits = match.group(1)
    if len(digits) <= 4:
        digits = "".join(ch * 2 for ch in digits)
    return tuple(int(digits[i : i + 2], 16) for i in (0, 2, 4))


def hex_to_rgb(hex_code: str) -> Tuple[int, int, int]:
    """Convert hex string to RGB tuple, black when unparseable."""
    rgb = parse_hex(hex_code)
    return rgb if rgb is not None else (0, 0, 0)


def hex_to_srgb(hex_code: str) -> Optional[Tuple[float, float, float]]:
    """Convert hex string to gamma-encoded sRGB floats in [0, 1]."""
    rgb = parse_hex(hex_code)
    if rgb is None:
        return None
    return tuple(ch / c.RGB_MAX for ch in rgb)


def srgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert gamma-encoded sRGB floats to a lowercase '#rrggbb' string."""
    r_i = int(round(_clamp01(r) * c.RGB_MAX))
    g_i = int(round(_clamp01(g) * c.RGB_MAX))
    b_i = int(round(_clamp01(b) * c.RGB_MAX))
    return f"#{r_i:02x}{g_i:02x}{b_i:02x}"


def _srgb_to_linear(color_comp: float) -> float:
    """Linearize a gamma-encoded sRGB component, sign preserving."""
    abs_c = abs(color_comp)
    if abs_c <= c.SRGB_TO_LINEAR_TH:
        return color_comp / c.SRGB_SLOPE
    return math.copysign(((abs_c + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA, color_comp)


def _linear_to_srgb(l_val: float) -> float:
    """Apply sRGB gamma to a linear component, sign preserving."""
    abs_l = abs(l_val)
    if abs_l <= c.LINEAR_TO_SRGB_TH:
        return c.SRGB_SLOPE * l_val
    return math.copysign(c.SRGB_DIVISOR * (abs_l ** (c.UNIT / c.SRGB_GAMMA)) - c.SRGB_OFFSET, l_val)


def srgb_to_linear_srgb(r: float, g: float, b: float) -> Tuple[float, float, float]:
    return _srgb_to_linear(r), _srgb_to_linear(g), _srgb_to_linear(b)


def linear_srgb_to_srgb(r: float, g: float, b: float) -> Tuple[float, float, float]:
    return _linear_to_srgb(r), _linear_to_srgb(g), _linear_to_srgb(b)


def linear_srgb_to_xyz(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert linear sRGB to CIE XYZ (D65, Y of white = 1)."""
    x = r * c.M_SRGB_XYZ_X[0] + g * c.M_SRGB_XYZ_X[1] + b * c.M_SRGB_XYZ_X[2]
    y = r * c.M_SRGB_XYZ_Y[0] + g * c.M_SRGB_XYZ_Y[1] + b * c.M_SRGB_XYZ_Y[2]
    z = r * c.M_SRGB_XYZ_Z[0] + g * c.M_SRGB_XYZ_Z[1] + b * c.M_SRGB_XYZ_Z[2]
    return x, y, z


def xyz_to_linear_srgb(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """Convert CIE XYZ (D65) to linear sRGB, unclamped."""
    r = x * c.M_XYZ_SRGB_R[0] + y * c.M_XYZ_SRGB_R[1] + z * c.M_XYZ_SRGB_R[2]
    g = x * c.M_XYZ_SRGB_G[0] + y * c.M_XYZ_SRGB_G[1] + z * c.M_XYZ_SRGB_G[2]
    b = x * c.M_XYZ_SRGB_B[0] + y * c.M_XYZ_SRGB_B[1] + z * c.M_XYZ_SRGB_B[2]
    return r, g, b


def srgb_to_xyz(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert gamma-encoded sRGB to CIE XYZ."""
    return linear_srgb_to_xyz(*srgb_to_linear_srgb(r, g, b))


def _xyz_f(t: float) -> float:
    """CIE companding of a white-relative value, the cube root above LAB_E."""
    return t**c.LAB_POW if t > c.LAB_E else (c.LAB_KAPPA * t + c.LAB_L_SUB) / c.LAB_L_MULT


def _xyz_f_inv(t: float) -> float:
    """Inverse of _xyz_f."""
    cubed = t**3
    return cubed if cubed > c.LAB_E else (c.LAB_L_MULT * t - c.LAB_L_SUB) / c.LAB_KAPPA


def y_to_lstar(y: float) -> float:
    """CIE L* of a relative luminance Y in [0, 1]."""
    return c.LAB_L_MULT * _xyz_f(y / c.D65_Y) - c.LAB_L_SUB


def lstar_to_y(lstar: float) -> float:
    """Relative luminance Y of a CIE L* value."""
    return _xyz_f_inv((lstar + c.LAB_L_SUB) / c.LAB_L_MULT) * c.D65_Y


def _cbrt(v: float) -> float:
    return math.copysign(abs(v) ** c.OKLAB_CUBE_ROOT_EXP, v)


def linear_srgb_to_oklab(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert linear sRGB to OKLab."""
    m1 = c.M1_OKLAB
    l_ = _cbrt(m1[0][0] * r + m1[0][1] * g + m1[0][2] * b)
    m_ = _cbrt(m1[1][0] * r + m1[1][1] * g + m1[1][2] * b)
    s_ = _cbrt(m1[2][0] * r + m1[2][1] * g + m1[2][2] * b)

    m2 = c.M2_OKLAB
    ok_l = m2[0][0] * l_ + m2[0][1] * m_ + m2[0][2] * s_
    ok_a = m2[1][0] * l_ + m2[1][1] * m_ + m2[1][2] * s_
    ok_b = m2[2][0] * l_ + m2[2][1] * m_ + m2[2][2] * s_
    return ok_l, ok_a, ok_b


def oklab_to_linear_srgb(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert OKLab to linear sRGB, unclamped."""
    inv = c.M2_OKLAB_INV_AB
    l_lin = (L + inv[0][0] * a + inv[0][1] * b) ** 3
    m_lin = (L + inv[1][0] * a + inv[1][1] * b) ** 3
    s_lin = (L + inv[2][0] * a + inv[2][1] * b) ** 3

    m1 = c.M1_OKLAB_INV
    r_lin = m1[0][0] * l_lin + m1[0][1] * m_lin + m1[0][2] * s_lin
    g_lin = m1[1][0] * l_lin + m1[1][1] * m_lin + m1[1][2] * s_lin
    b_lin = m1[2][0] * l_lin + m1[2][1] * m_lin + m1[2][2] * s_lin
    return r_lin, g_lin, b_lin


def srgb_to_oklab(r: float, g: float, b: float) -> Tuple[float, float, float]:
    return linear_srgb_to_oklab(*srgb_to_linear_srgb(r, g, b))


def oklab_to_srgb(L: float, a: float, b: float) -> Tuple[float, float, float]:
    return linear_srgb_to_srgb(*oklab_to_linear_srgb(L, a, b))


def oklab_to_oklch(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert OKLab to OKLCH, hue 0 for achromatic colors."""
    chroma = math.hypot(a, b)
    if chroma < c.ACHROMATIC_EPS:
        return L, chroma, 0.0
    hue = math.degrees(math.atan2(b, a)) % c.HUE_MAX
    return L, chroma, hue


def rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert gamma-encoded sRGB floats to HSL (hue 0 when achromatic)."""
    cmax = max(r, g, b)
    cmin = min(r, g, b)
    delta = cmax - cmin
    L = (cmax + cmin) / c.DIV_2
    if delta < c.EPS:
        return (0.0, 0.0, L)
    denom = c.UNIT - abs(c.DIV_2 * L - c.UNIT)
    s = 0.0 if abs(denom) < c.EPS else delta / denom
    if cmax == r:
        h = c.HUE_SECTOR * (((g - b) / delta) % c.HSL_HUE_MOD)
    elif cmax == g:
        h = c.HUE_SECTOR * ((b - r) / delta + c.DIV_2)
    else:
        h = c.HUE_SECTOR * ((r - g) / delta + 4.0)
    return (h % c.HUE_MAX, s, L)


def hsl_to_rgb(h: float, s: float, L: float) -> Tuple[float, float, float]:
    """Convert HSL to gamma-encoded sRGB floats in [0, 1]."""
    h = h % c.HUE_MAX
    if s == 0:
        return _clamp01(L), _clamp01(L), _clamp01(L)
    chroma = (c.UNIT - abs(c.DIV_2 * L - c.UNIT)) * s
    x = chroma * (c.UNIT - abs(((h / c.HUE_SECTOR) % c.DIV_2) - c.UNIT))
    m = L - chroma / c.DIV_2
    if 0 <= h < 60:
        r_p, g_p, b_p = chroma, x, 0
    elif 60 <= h < 120:
        r_p, g_p, b_p = x, chroma, 0
    elif 120 <= h < 180:
        r_p, g_p, b_p = 0, chroma, x
    elif 180 <= h < 240:
        r_p, g_p, b_p = 0, x, chroma
    elif 240 <= h < 300:
        r_p, g_p, b_p = x, 0, chroma
    else:
        r_p, g_p, b_p = chroma, 0, x
    return _clamp01(r_p + m), _clamp01(g_p + m), _clamp01(b_p + m)


def normalize_hue(h: float) -> float:
    """Wrap a hue angle into [0, 360)."""
    h = h % c.HUE_MAX
    # -1e-20 % 360 rounds up to 360.0
    return 0.0 if h >= c.HUE_MAX else h


# Apply LRU caching to all functions in this module
for _name, _obj in list(globals().items()):
    if callable(_obj) and getattr(_obj, "__module__", None) == __name__:
        globals()[_name] = functools.lru_cache(maxsize=c.LRU_CACHE_SIZE)(_obj)
