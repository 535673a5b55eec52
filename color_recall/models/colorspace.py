# Copyright (c) 2026 Color Recall
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chains:
    sRGB → Linear RGB → CIEXYZ → CIELAB → CIELCH
    sRGB ↔ HSV
    sRGB ↔ HSL

References:
- sRGB: IEC 61966-2-1
- CIELAB: CIE 15:2004, reference white D65
- HSV/HSL: https://en.wikipedia.org/wiki/HSL_and_HSV

All functions accept arrays of shape (..., 3) and are pure NumPy.
Nothing is clipped: out-of-gamut and out-of-range values pass through
every transform and stay finite, so chains roundtrip on the full real line.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert sRGB values to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    # Keep the power branch away from negative bases; np.where evaluates both
    safe = np.maximum(srgb, 0.04045)
    return np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((safe + 0.055) / 1.055, 2.4),
    )


def linear_to_srgb(linear: ArrayLike) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB values.

    Inverse of srgb_to_linear. Values below the linear threshold (including
    negative ones) use the linear segment.
    """
    linear = np.asarray(linear, dtype=np.float64)
    safe = np.maximum(linear, 0.0031308)
    return np.where(
        linear <= 0.0031308,
        linear * 12.92,
        1.055 * np.power(safe, 1.0 / 2.4) - 0.055,
    )


# =============================================================================
# Linear RGB ↔ CIEXYZ
# =============================================================================

# sRGB primaries, D65 white
_RGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
], dtype=np.float64)

_XYZ_TO_RGB = np.linalg.inv(_RGB_TO_XYZ)

# D65 reference white (2° observer)
WHITE_D65 = np.array([0.95047, 1.0, 1.08883], dtype=np.float64)


def linear_rgb_to_xyz(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert linear RGB to CIEXYZ.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with XYZ values (Y = 1.0 for white)
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    return np.einsum('...j,ij->...i', rgb, _RGB_TO_XYZ)


def xyz_to_linear_rgb(xyz: ArrayLike) -> NDArray[np.float64]:
    """
    Convert CIEXYZ to linear RGB.

    Args:
        xyz: Array of shape (..., 3) with XYZ values

    Returns:
        Array of shape (..., 3) with linear RGB values (not gamut mapped)
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    return np.einsum('...j,ij->...i', xyz, _XYZ_TO_RGB)


def srgb_to_xyz(srgb: ArrayLike) -> NDArray[np.float64]:
    """sRGB → Linear RGB → XYZ."""
    return linear_rgb_to_xyz(srgb_to_linear(srgb))


def xyz_to_srgb(xyz: ArrayLike) -> NDArray[np.float64]:
    """XYZ → Linear RGB → sRGB."""
    return linear_to_srgb(xyz_to_linear_rgb(xyz))


# =============================================================================
# CIEXYZ ↔ CIELAB
# =============================================================================

# CIE constants, exact rational forms
_EPSILON = 216.0 / 24389.0
_KAPPA = 24389.0 / 27.0


def _lab_f(t: NDArray[np.float64]) -> NDArray[np.float64]:
    return np.where(t > _EPSILON, np.cbrt(t), (_KAPPA * t + 16.0) / 116.0)


def xyz_to_lab(xyz: ArrayLike) -> NDArray[np.float64]:
    """
    Convert CIEXYZ to CIELAB (D65).

    Args:
        xyz: Array of shape (..., 3) with XYZ values

    Returns:
        Array of shape (..., 3) with Lab values
        - L: Lightness [0, 100] for in-gamut colors
        - a, b: opponent axes, roughly [-128, 128]
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    f = _lab_f(xyz / WHITE_D65)

    L = 116.0 * f[..., 1] - 16.0
    a = 500.0 * (f[..., 0] - f[..., 1])
    b = 200.0 * (f[..., 1] - f[..., 2])

    return np.stack([L, a, b], axis=-1)


def lab_to_xyz(lab: ArrayLike) -> NDArray[np.float64]:
    """
    Convert CIELAB (D65) to CIEXYZ.

    Inverse of xyz_to_lab.
    """
    lab = np.asarray(lab, dtype=np.float64)

    L = lab[..., 0]
    fy = (L + 16.0) / 116.0
    fx = fy + lab[..., 1] / 500.0
    fz = fy - lab[..., 2] / 200.0

    fx3 = fx ** 3
    fz3 = fz ** 3
    x = np.where(fx3 > _EPSILON, fx3, (116.0 * fx - 16.0) / _KAPPA)
    y = np.where(L > _KAPPA * _EPSILON, fy ** 3, L / _KAPPA)
    z = np.where(fz3 > _EPSILON, fz3, (116.0 * fz - 16.0) / _KAPPA)

    return np.stack([x, y, z], axis=-1) * WHITE_D65


# =============================================================================
# CIELAB ↔ CIELCH
# =============================================================================


def lab_to_lch(lab: ArrayLike) -> NDArray[np.float64]:
    """
    Convert CIELAB to CIELCH (cylindrical coordinates).

    Returns:
        Array of shape (..., 3) with LCH values (L, C, H)
        H is in degrees [0, 360)
    """
    lab = np.asarray(lab, dtype=np.float64)

    L = lab[..., 0]
    a = lab[..., 1]
    b = lab[..., 2]

    C = np.sqrt(a**2 + b**2)
    H = np.degrees(np.arctan2(b, a)) % 360.0

    return np.stack([L, C, H], axis=-1)


def lch_to_lab(lch: ArrayLike) -> NDArray[np.float64]:
    """Convert CIELCH (H in degrees) to CIELAB."""
    lch = np.asarray(lch, dtype=np.float64)

    L = lch[..., 0]
    C = lch[..., 1]
    H_rad = np.radians(lch[..., 2])

    return np.stack([L, C * np.cos(H_rad), C * np.sin(H_rad)], axis=-1)


# =============================================================================
# sRGB ↔ HSV / HSL
# =============================================================================


def _hue_chroma(rgb: NDArray[np.float64]):
    """Shared hexcone terms: hue in degrees [0, 360), max, min, chroma."""
    r = rgb[..., 0]
    g = rgb[..., 1]
    b = rgb[..., 2]

    c_max = np.max(rgb, axis=-1)
    c_min = np.min(rgb, axis=-1)
    chroma = c_max - c_min

    safe = np.where(chroma == 0.0, 1.0, chroma)
    hue = np.where(
        c_max == r,
        ((g - b) / safe) % 6.0,
        np.where(c_max == g, (b - r) / safe + 2.0, (r - g) / safe + 4.0),
    )
    hue = np.where(chroma == 0.0, 0.0, hue * 60.0) % 360.0
    return hue, c_max, c_min, chroma


def _hue_to_rgb(
    hue: NDArray[np.float64],
    chroma: NDArray[np.float64],
    m: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Rebuild RGB from hue, chroma and the minimum channel offset."""
    h = (hue % 360.0) / 60.0
    x = chroma * (1.0 - np.abs(h % 2.0 - 1.0))
    zero = np.zeros_like(chroma)

    sector = np.floor(h).astype(np.int64) % 6
    r = np.choose(sector, [chroma, x, zero, zero, x, chroma])
    g = np.choose(sector, [x, chroma, chroma, x, zero, zero])
    b = np.choose(sector, [zero, zero, x, chroma, chroma, x])

    return np.stack([r + m, g + m, b + m], axis=-1)


def srgb_to_hsv(srgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert sRGB to HSV.

    Returns:
        Array of shape (..., 3) with (H, S, V)
        - H: degrees [0, 360), 0 for achromatic colors
        - S: chroma / value, 0 when value is 0
        - V: max channel
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    hue, c_max, _, chroma = _hue_chroma(srgb)

    safe = np.where(c_max == 0.0, 1.0, c_max)
    saturation = np.where(c_max == 0.0, 0.0, chroma / safe)

    return np.stack([hue, saturation, c_max], axis=-1)


def hsv_to_srgb(hsv: ArrayLike) -> NDArray[np.float64]:
    """Convert HSV (H in degrees) to sRGB."""
    hsv = np.asarray(hsv, dtype=np.float64)
    value = hsv[..., 2]
    chroma = value * hsv[..., 1]
    return _hue_to_rgb(hsv[..., 0], chroma, value - chroma)


def srgb_to_hsl(srgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert sRGB to HSL.

    Returns:
        Array of shape (..., 3) with (H, S, L)
        - H: degrees [0, 360), 0 for achromatic colors
        - S: chroma / (1 - |2L - 1|), 0 when chroma is 0
        - L: mid-range of the channels
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    hue, c_max, c_min, chroma = _hue_chroma(srgb)

    lightness = (c_max + c_min) / 2.0
    denom = 1.0 - np.abs(2.0 * lightness - 1.0)
    safe = np.where(denom == 0.0, 1.0, denom)
    saturation = np.where((chroma == 0.0) | (denom == 0.0), 0.0, chroma / safe)

    return np.stack([hue, saturation, lightness], axis=-1)


def hsl_to_srgb(hsl: ArrayLike) -> NDArray[np.float64]:
    """Convert HSL (H in degrees) to sRGB."""
    hsl = np.asarray(hsl, dtype=np.float64)
    lightness = hsl[..., 2]
    chroma = (1.0 - np.abs(2.0 * lightness - 1.0)) * hsl[..., 1]
    return _hue_to_rgb(hsl[..., 0], chroma, lightness - chroma / 2.0)


# =============================================================================
# Convenience: sRGB ↔ CIELAB / CIELCH (full chain)
# =============================================================================


def srgb_to_lab(srgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert sRGB to CIELAB.

    Full chain: sRGB → Linear RGB → XYZ → Lab
    """
    return xyz_to_lab(srgb_to_xyz(srgb))


def lab_to_srgb(lab: ArrayLike) -> NDArray[np.float64]:
    """
    Convert CIELAB to sRGB.

    Full chain: Lab → XYZ → Linear RGB → sRGB. Not gamut mapped.
    """
    return xyz_to_srgb(lab_to_xyz(lab))


def srgb_to_lch(srgb: ArrayLike) -> NDArray[np.float64]:
    """sRGB → Lab → LCH."""
    return lab_to_lch(srgb_to_lab(srgb))


def lch_to_srgb(lch: ArrayLike) -> NDArray[np.float64]:
    """LCH → Lab → sRGB. Not gamut mapped."""
    return lab_to_srgb(lch_to_lab(lch))
