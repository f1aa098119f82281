#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/core/okhsl.py
#
# OKHsl <-> sRGB after Björn Ottosson, "Okhsv and Okhsl":
# https://bottosson.github.io/posts/colorpicker/

import functools
import math
from typing import Optional, Tuple

from . import config as c
from . import conversions as conv


def toe(x: float) -> float:
    """Map OKLab L to OKHsl lightness."""
    k3x_k1 = c.TOE_K3 * x - c.TOE_K1
    return 0.5 * (k3x_k1 + math.sqrt(k3x_k1 * k3x_k1 + 4.0 * c.TOE_K2 * c.TOE_K3 * x))


def toe_inv(x: float) -> float:
    """Map OKHsl lightness back to OKLab L."""
    return (x * x + c.TOE_K1 * x) / (c.TOE_K3 * (x + c.TOE_K2))


def _lms_prime_slopes(a: float, b: float) -> Tuple[float, float, float]:
    inv = c.M2_OKLAB_INV_AB
    return (
        inv[0][0] * a + inv[0][1] * b,
        inv[1][0] * a + inv[1][1] * b,
        inv[2][0] * a + inv[2][1] * b,
    )


def compute_max_saturation(a: float, b: float) -> float:
    """
    Maximum saturation S = C / L that stays inside sRGB for the unit hue
    vector (a, b). A polynomial estimate is refined with one Halley step.
    """
    if c.MAX_SAT_RED_TEST[0] * a + c.MAX_SAT_RED_TEST[1] * b > 1:
        k, w = c.MAX_SAT_RED_K, c.M1_OKLAB_INV[0]
    elif c.MAX_SAT_GREEN_TEST[0] * a + c.MAX_SAT_GREEN_TEST[1] * b > 1:
        k, w = c.MAX_SAT_GREEN_K, c.M1_OKLAB_INV[1]
    else:
        k, w = c.MAX_SAT_BLUE_K, c.M1_OKLAB_INV[2]

    sat = k[0] + k[1] * a + k[2] * b + k[3] * a * a + k[4] * a * b

    k_l, k_m, k_s = _lms_prime_slopes(a, b)
    l_ = 1.0 + sat * k_l
    m_ = 1.0 + sat * k_m
    s_ = 1.0 + sat * k_s

    l_val, m_val, s_val = l_ ** 3, m_ ** 3, s_ ** 3
    l_ds, m_ds, s_ds = 3.0 * k_l * l_ * l_, 3.0 * k_m * m_ * m_, 3.0 * k_s * s_ * s_
    l_ds2, m_ds2, s_ds2 = 6.0 * k_l * k_l * l_, 6.0 * k_m * k_m * m_, 6.0 * k_s * k_s * s_

    f = w[0] * l_val + w[1] * m_val + w[2] * s_val
    f1 = w[0] * l_ds + w[1] * m_ds + w[2] * s_ds
    f2 = w[0] * l_ds2 + w[1] * m_ds2 + w[2] * s_ds2

    return sat - f * f1 / (f1 * f1 - 0.5 * f * f2)


def find_cusp(a: float, b: float) -> Tuple[float, float]:
    """(L, C) of the most saturated in-gamut color along hue (a, b)."""
    s_cusp = compute_max_saturation(a, b)
    rgb_at_max = conv.oklab_to_linear_srgb(1.0, s_cusp * a, s_cusp * b)
    l_cusp = (1.0 / max(rgb_at_max)) ** (1.0 / 3.0)
    return l_cusp, l_cusp * s_cusp


def find_gamut_intersection(
    a: float, b: float, l1: float, c1: float, l0: float, cusp: Tuple[float, float]
) -> float:
    """
    Parameter t where the line from (l0, 0) to (l1, c1) leaves the sRGB
    gamut for hue (a, b). The upper half is refined with one Halley step
    per channel.
    """
    cusp_l, cusp_c = cusp

    if ((l1 - l0) * cusp_c - (cusp_l - l0) * c1) <= 0.0:
        # Lower half, the gamut boundary is a straight line to black
        return cusp_c * l0 / (c1 * cusp_l + cusp_c * (l0 - l1))

    t = cusp_c * (l0 - 1.0) / (c1 * (cusp_l - 1.0) + cusp_c * (l0 - l1))

    d_l = l1 - l0
    d_c = c1
    k_l, k_m, k_s = _lms_prime_slopes(a, b)
    l_dt = d_l + d_c * k_l
    m_dt = d_l + d_c * k_m
    s_dt = d_l + d_c * k_s

    L = l0 * (1.0 - t) + t * l1
    C = t * c1
    l_ = L + C * k_l
    m_ = L + C * k_m
    s_ = L + C * k_s

    lms = (l_ ** 3, m_ ** 3, s_ ** 3)
    lms_dt = (3.0 * l_dt * l_ * l_, 3.0 * m_dt * m_ * m_, 3.0 * s_dt * s_ * s_)
    lms_dt2 = (6.0 * l_dt * l_dt * l_, 6.0 * m_dt * m_dt * m_, 6.0 * s_dt * s_dt * s_)

    step = math.inf
    for w in c.M1_OKLAB_INV:
        val = w[0] * lms[0] + w[1] * lms[1] + w[2] * lms[2] - 1.0
        d1 = w[0] * lms_dt[0] + w[1] * lms_dt[1] + w[2] * lms_dt[2]
        d2 = w[0] * lms_dt2[0] + w[1] * lms_dt2[1] + w[2] * lms_dt2[2]
        u = d1 / (d1 * d1 - 0.5 * val * d2)
        if u >= 0.0:
            step = min(step, -val * u)

    return t + step


def get_st_mid(a: float, b: float) -> Tuple[float, float]:
    """Smooth approximation of the (S, T) triangle slopes at mid saturation."""
    ks = c.ST_MID_S_FIT
    s_mid = c.ST_MID_S_BASE + 1.0 / (
        ks[0] + ks[1] * b
        + a * (ks[2] + ks[3] * b
            + a * (ks[4] + ks[5] * b
                + a * (ks[6] + ks[7] * b + ks[8] * a)))
    )
    kt = c.ST_MID_T_FIT
    t_mid = c.ST_MID_T_BASE + 1.0 / (
        kt[0] + kt[1] * b
        + a * (kt[2] + kt[3] * b
            + a * (kt[4] + kt[5] * b
                + a * (kt[6] + kt[7] * b + kt[8] * a)))
    )
    return s_mid, t_mid


def get_cs(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Chroma anchors (C_0, C_mid, C_max) for OKLab lightness L and hue (a, b)."""
    cusp = find_cusp(a, b)
    c_max = find_gamut_intersection(a, b, L, 1.0, L, cusp)

    st_max_s = cusp[1] / cusp[0]
    st_max_t = cusp[1] / (1.0 - cusp[0])
    # Compensates for the curved part of the gamut shape
    k = c_max / min(L * st_max_s, (1.0 - L) * st_max_t)

    st_mid_s, st_mid_t = get_st_mid(a, b)
    c_a = L * st_mid_s
    c_b = (1.0 - L) * st_mid_t
    c_mid = c.OKHSL_C_MID_SCALE * k * math.sqrt(math.sqrt(
        1.0 / (1.0 / (c_a ** 4) + 1.0 / (c_b ** 4))
    ))

    c_a = L * c.OKHSL_C0_S
    c_b = (1.0 - L) * c.OKHSL_C0_T
    c_0 = math.sqrt(1.0 / (1.0 / (c_a * c_a) + 1.0 / (c_b * c_b)))

    return c_0, c_mid, c_max


def okhsl_to_oklab(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """Convert OKHsl (hue in degrees) to OKLab."""
    if l >= 1.0:
        return 1.0, 0.0, 0.0
    if l <= 0.0:
        return 0.0, 0.0, 0.0

    L = toe_inv(l)
    if s <= 0.0:
        return L, 0.0, 0.0

    hue = math.radians(conv.normalize_hue(h))
    a_ = math.cos(hue)
    b_ = math.sin(hue)
    c_0, c_mid, c_max = get_cs(L, a_, b_)

    if s < c.OKHSL_MID:
        t = c.OKHSL_MID_INV * s
        k_1 = c.OKHSL_MID * c_0
        k_2 = 1.0 - k_1 / c_mid
        chroma = t * k_1 / (1.0 - k_2 * t)
    else:
        t = (s - c.OKHSL_MID) / (1.0 - c.OKHSL_MID)
        k_0 = c_mid
        k_1 = (1.0 - c.OKHSL_MID) * c_mid * c_mid * c.OKHSL_MID_INV * c.OKHSL_MID_INV / c_0
        k_2 = 1.0 - k_1 / (c_max - c_mid)
        chroma = k_0 + t * k_1 / (1.0 - k_2 * t)

    return L, chroma * a_, chroma * b_


def oklab_to_okhsl(L: float, a: float, b: float) -> Tuple[Optional[float], float, float]:
    """
    Convert OKLab to OKHsl. The hue is None when the color is achromatic
    (including pure black and white), saturation is then 0.
    """
    l = toe(L)
    chroma = math.hypot(a, b)
    if chroma < c.ACHROMATIC_EPS or L <= c.EPS or L >= 1.0:
        return None, 0.0, l

    a_ = a / chroma
    b_ = b / chroma
    h = conv.normalize_hue(math.degrees(math.atan2(b, a)))
    c_0, c_mid, c_max = get_cs(L, a_, b_)

    if chroma < c_mid:
        k_1 = c.OKHSL_MID * c_0
        k_2 = 1.0 - k_1 / c_mid
        t = chroma / (k_1 + k_2 * chroma)
        s = t * c.OKHSL_MID
    else:
        k_0 = c_mid
        k_1 = (1.0 - c.OKHSL_MID) * c_mid * c_mid * c.OKHSL_MID_INV * c.OKHSL_MID_INV / c_0
        k_2 = 1.0 - k_1 / (c_max - c_mid)
        t = (chroma - k_0) / (k_1 + k_2 * (chroma - k_0))
        s = c.OKHSL_MID + (1.0 - c.OKHSL_MID) * t

    return h, s, l


def okhsl_to_srgb(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """Convert OKHsl to gamma-encoded sRGB floats (in gamut up to rounding)."""
    return conv.oklab_to_srgb(*okhsl_to_oklab(h, s, l))


def srgb_to_okhsl(r: float, g: float, b: float) -> Tuple[Optional[float], float, float]:
    """Convert gamma-encoded sRGB floats to OKHsl."""
    return oklab_to_okhsl(*conv.srgb_to_oklab(r, g, b))


def xyz_to_okhsl(x: float, y: float, z: float) -> Tuple[Optional[float], float, float]:
    """Convert CIE XYZ (D65) to OKHsl through linear sRGB and OKLab."""
    return oklab_to_okhsl(*conv.linear_srgb_to_oklab(*conv.xyz_to_linear_srgb(x, y, z)))


def okhsl_to_hex(h: float, s: float, l: float) -> str:
    """Direct OKHsl to Hex."""
    return conv.srgb_to_hex(*okhsl_to_srgb(h, s, l))


# Apply LRU caching to all functions in this module
for _name, _obj in list(globals().items()):
    if callable(_obj) and getattr(_obj, "__module__", None) == __name__:
        globals()[_name] = functools.lru_cache(maxsize=c.LRU_CACHE_SIZE)(_obj)
