#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Max size for conversion cache
LRU_CACHE_SIZE = 1024

EPS = 1e-12                        # Floating-point precision and division-by-zero safety
ACHROMATIC_EPS = 1e-7              # Chroma below which a color has no defined hue (grays carry ~4e-8 from the rounded OKLab matrices)

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
RGB_MAX = 255.0                    # 8-bit color depth limit
HUE_MAX = 360.0                    # Full circle degrees
HUE_SECTOR = 60.0                  # Degrees per HSL sector
HSL_HUE_MOD = 6.0                  # Hue sector divisor for HSL
PERCENT = 100.0                    # Factor between decimal and percentage values

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for switching from linear to non-linear sRGB
LINEAR_TO_SRGB_TH = 0.0031308      # Threshold for switching from linear to sRGB space

# XYZ D65 Reference White, Y normalized to 1 (Source: ASTM E308-01 / CIE D65)
D65_X = 0.95047                    # X coordinate for D65 illuminant (2-degree observer)
D65_Y = 1.0                        # Y coordinate (Luminance) for D65 illuminant
D65_Z = 1.08883                    # Z coordinate for D65 illuminant

# Linear sRGB to XYZ D65 Matrix (Source: sRGB primaries, IEC 61966-2-1 chromaticities)
M_SRGB_XYZ_X = (0.4123907992659593, 0.357584339383878, 0.1804807884018343)
M_SRGB_XYZ_Y = (0.2126390058715102, 0.715168678767756, 0.0721923153607337)
M_SRGB_XYZ_Z = (0.0193308187155918, 0.119194779794626, 0.9505321522496607)

# XYZ D65 to Linear sRGB Matrix (inverse of the above)
M_XYZ_SRGB_R = (3.2409699419045226, -1.537383177570094, -0.4986107602930034)
M_XYZ_SRGB_G = (-0.9692436362808796, 1.8759675015077204, 0.0415550574071756)
M_XYZ_SRGB_B = (0.0556300796969936, -0.2039769588889765, 1.0569715142428784)

# CIELAB Constants (Source: CIE 15:2004, exact rational form)
LAB_E = 216.0 / 24389.0            # Threshold between the linear and cube-root segments
LAB_KAPPA = 24389.0 / 27.0         # Slope of the linear segment, in L* units
LAB_L_MULT = 116.0                 # Multiplier for Lightness (L*) calculation
LAB_L_SUB = 16.0                   # Subtraction constant for Lightness (L*) calculation
LAB_POW = 1.0 / 3.0                # Cube-root exponent

# Constants for OKLab color space conversions (Source: https://bottosson.github.io/posts/oklab/)
OKLAB_CUBE_ROOT_EXP = 1.0 / 3.0    # Power exponent for perceptual LMS non-linearity

# Linear sRGB to LMS matrix (Source: Björn Ottosson, 2020)
M1_OKLAB = (
    (0.4122214708, 0.5363325363, 0.0514459929),
    (0.2119034982, 0.6806995451, 0.1073969566),
    (0.0883024619, 0.2817188376, 0.6299787005),
)

# LMS' to Lab matrix (perceptual lightness and opponency)
M2_OKLAB = (
    (0.2104542553, 0.7936177850, -0.0040720468),
    (1.9779984951, -2.4285922050, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.8086757660),
)

# Lab to LMS' matrix, the L column is implicitly 1 (inverse stage part 1)
M2_OKLAB_INV_AB = (
    (0.3963377774, 0.2158037573),
    (-0.1055613458, -0.0638541728),
    (-0.0894841775, -1.2914855480),
)

# LMS to Linear sRGB matrix (inverse stage part 2)
M1_OKLAB_INV = (
    (4.0767416621, -3.3077115913, 0.2309699292),
    (-1.2684380046, 2.6097574011, -0.3413193965),
    (-0.0041960863, -0.7034186147, 1.7076147010),
)

# ==========================================
# OKHsl (Source: https://bottosson.github.io/posts/colorpicker/)
# ==========================================

# Toe function, remaps OKLab L to perceived lightness
TOE_K1 = 0.206
TOE_K2 = 0.03
TOE_K3 = (1.0 + TOE_K1) / (1.0 + TOE_K2)

# Saturation interpolation breakpoints
OKHSL_MID = 0.8
OKHSL_MID_INV = 1.25

# Hue-independent approximations of the ST triangle used for C_0
OKHSL_C0_S = 0.4
OKHSL_C0_T = 0.8
OKHSL_C_MID_SCALE = 0.9

# Which sRGB channel clips first, decided by a linear test on (a, b)
MAX_SAT_RED_TEST = (-1.88170328, -0.80936493)
MAX_SAT_GREEN_TEST = (1.81444104, -1.19445276)

# Polynomial fit of the maximum saturation, per clipping channel (k0..k4)
MAX_SAT_RED_K = (1.19086277, 1.76576728, 0.59662641, 0.75515197, 0.56771245)
MAX_SAT_GREEN_K = (0.73956515, -0.45954404, 0.08285427, 0.12541070, 0.14503204)
MAX_SAT_BLUE_K = (1.35733652, -0.00915799, -1.15130210, -0.50559606, 0.00692167)

# Rational fits for the mid-saturation ST pair
ST_MID_S_BASE = 0.11516993
ST_MID_S_FIT = (7.44778970, 4.15901240, -2.19557347, 1.75198401, -2.13704948,
                -10.02301043, -4.24894561, 5.38770819, 4.69891013)
ST_MID_T_BASE = 0.11239642
ST_MID_T_FIT = (1.61320320, -0.68124379, 0.40370612, 0.90148123, -0.27087943,
                0.61223990, 0.00299215, -0.45399568, -0.14661872)

# ==========================================
# Luminance & Contrast
# ==========================================

# WCAG Contrast Thresholds (Source: https://www.w3.org/TR/WCAG21/#contrast-minimum)
WCAG_AA_LARGE = 3.0                # Minimum contrast for large text (Level AA)
WCAG_AA_NORMAL = 4.5               # Minimum contrast for normal text (Level AA)
WCAG_AAA_LARGE = 4.5               # Enhanced contrast for large text (Level AAA)
WCAG_AAA_NORMAL = 7.0              # Enhanced contrast for normal text (Level AAA)
WCAG_LUMINANCE_OFFSET = 0.05       # Standard offset constant in the (L + 0.05) contrast formula

DEFAULT_LUMINANCE = 1.0            # Luminance assumed for unparseable colors (white)
OVERLAY_LUMINANCE_TH = 0.179       # Equal-contrast crossover between black and white text
OVERLAY_DARK = "#000000"
OVERLAY_LIGHT = "#FFFFFF"

# ==========================================
# Hue Bridge
# ==========================================

HUE_BRIDGE_SATURATION = 0.8        # Reference saturation held in the source model
HUE_BRIDGE_LIGHTNESS = 0.5         # Reference lightness held in the source model
HUE_BRIDGE_ITERATIONS = 50         # Bisection halvings for the inverse mapping

# ==========================================
# Palette Generation
# ==========================================

SCALES = (5, 10, 20, 30, 40, 50, 60, 70, 80, 90, 95)
SCALE_DIVISOR = 100.0              # Maps a scale to its position n in (0, 1)

CONTRAST_CURVE_K = 3.04            # r(n) = e^(k * n), 50 scale steps apart land at >= 4.5:1
LIGHT_BACKGROUND_TH = 0.18         # Background luminance above which the palette darkens with scale

DEFAULT_BASE_HUE = 180.0
DEFAULT_BACKGROUND = "#FFFFFF"
HUE_SHIFT_MIN = 0.0
HUE_SHIFT_MAX = 20.0
SATURATION_MIN = 0.0
SATURATION_MAX = 100.0

# Presets from the color type selector: (hue_shift, max_saturation, min_saturation)
PALETTE_PRESETS = {
    "color": (5.0, 100.0, 0.0),
    "neutral": (0.0, 20.0, 0.0),
}
DEFAULT_PALETTE_TYPE = "color"

# ==========================================
# Export
# ==========================================

EXPORT_FORMATS = ["hex", "oklch", "hsl", "rgb"]
DEFAULT_EXPORT_FORMAT = "oklch"
DEFAULT_EXPORT_NAME = "color"

OKLCH_LC_DECIMALS = 2              # Lightness and chroma precision
OKLCH_H_DECIMALS = 0               # Hue precision
HSL_DECIMALS = 1                   # Hue and percentage precision

# ==========================================
# CLI UI & Data Structures
# ==========================================

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"
