# Copyright (c) 2026 Color Recall
# SPDX-License-Identifier: MIT

"""
ΔE distance (perceptual color difference) in CIELAB.

References:
- CIEDE2000: Sharma, Wu, Dalal (2005), "The CIEDE2000 Color-Difference
  Formula: Implementation Notes, Supplementary Test Data, and Mathematical
  Observations"
- Improved CIEDE2000: Huang et al. (2015), "Power functions improving the
  performance of color-difference formulas", ΔE'' = 1.43 * ΔE00^0.7

Reference thresholds (CIEDE2000, 0-100 scale):
- ΔE ≈ 1: just noticeable difference
- ΔE ≈ 2-10: perceptible at a glance
- ΔE ≈ 50+: opposite colors
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

_25_POW_7 = 25.0 ** 7


def ciede2000(lab1: ArrayLike, lab2: ArrayLike) -> NDArray[np.float64]:
    """
    Vectorized CIEDE2000 color difference.

    Args:
        lab1: Array of shape (..., 3) with Lab values
        lab2: Array of shape (..., 3) with Lab values (broadcast against lab1)

    Returns:
        Array of shape (...) with ΔE00 values. A 0-d array for single colors.
    """
    lab1 = np.asarray(lab1, dtype=np.float64)
    lab2 = np.asarray(lab2, dtype=np.float64)

    L1, a1, b1 = lab1[..., 0], lab1[..., 1], lab1[..., 2]
    L2, a2, b2 = lab2[..., 0], lab2[..., 1], lab2[..., 2]

    # 1. Adjusted a' and chroma
    c_bar = (np.hypot(a1, b1) + np.hypot(a2, b2)) / 2.0
    c_bar7 = c_bar ** 7
    g = 0.5 * (1.0 - np.sqrt(c_bar7 / (c_bar7 + _25_POW_7)))

    a1p = (1.0 + g) * a1
    a2p = (1.0 + g) * a2
    c1p = np.hypot(a1p, b1)
    c2p = np.hypot(a2p, b2)

    # atan2(0, 0) is 0, which is the convention for achromatic hues
    h1p = np.degrees(np.arctan2(b1, a1p)) % 360.0
    h2p = np.degrees(np.arctan2(b2, a2p)) % 360.0

    # 2. Differences
    delta_lp = L2 - L1
    delta_cp = c2p - c1p

    cp_prod = c1p * c2p
    dh = h2p - h1p
    delta_hp = np.where(
        cp_prod == 0.0,
        0.0,
        np.where(dh > 180.0, dh - 360.0, np.where(dh < -180.0, dh + 360.0, dh)),
    )
    delta_Hp = 2.0 * np.sqrt(cp_prod) * np.sin(np.radians(delta_hp) / 2.0)

    # 3. Means and weighting functions
    l_bar = (L1 + L2) / 2.0
    cp_bar = (c1p + c2p) / 2.0

    h_sum = h1p + h2p
    h_bar = np.where(
        cp_prod == 0.0,
        h_sum,
        np.where(
            np.abs(h1p - h2p) <= 180.0,
            h_sum / 2.0,
            np.where(h_sum < 360.0, (h_sum + 360.0) / 2.0, (h_sum - 360.0) / 2.0),
        ),
    )

    t = (
        1.0
        - 0.17 * np.cos(np.radians(h_bar - 30.0))
        + 0.24 * np.cos(np.radians(2.0 * h_bar))
        + 0.32 * np.cos(np.radians(3.0 * h_bar + 6.0))
        - 0.20 * np.cos(np.radians(4.0 * h_bar - 63.0))
    )

    delta_theta = 30.0 * np.exp(-(((h_bar - 275.0) / 25.0) ** 2))
    cp_bar7 = cp_bar ** 7
    r_c = 2.0 * np.sqrt(cp_bar7 / (cp_bar7 + _25_POW_7))
    l_term = (l_bar - 50.0) ** 2
    s_l = 1.0 + 0.015 * l_term / np.sqrt(20.0 + l_term)
    s_c = 1.0 + 0.045 * cp_bar
    s_h = 1.0 + 0.015 * cp_bar * t
    r_t = -np.sin(np.radians(2.0 * delta_theta)) * r_c

    # 4. Combine (kL = kC = kH = 1)
    dl = delta_lp / s_l
    dc = delta_cp / s_c
    dh_term = delta_Hp / s_h

    return np.sqrt(dl ** 2 + dc ** 2 + dh_term ** 2 + r_t * dc * dh_term)


def improved_ciede2000(lab1: ArrayLike, lab2: ArrayLike) -> NDArray[np.float64]:
    """
    Improved CIEDE2000 color difference: 1.43 * ΔE00^0.7.

    Same ordering as ciede2000 (it is a monotonic transform) with better
    agreement to visual judgements for large differences.
    """
    return 1.43 * np.power(ciede2000(lab1, lab2), 0.7)


def delta_e(lab1: ArrayLike, lab2: ArrayLike) -> float:
    """
    Scalar perceptual distance between two Lab colors.

    This is the score used by the game: lower = more similar, 0 = match.
    """
    return float(improved_ciede2000(lab1, lab2))
