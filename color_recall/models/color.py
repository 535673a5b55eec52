# Copyright (c) 2026 Color Recall
# SPDX-License-Identifier: MIT

"""
Canonical color value types.

RGB is the lingua franca for cross-model conversion; XYZ and Lab are
derived perceptual coordinates used for scoring. All types are frozen
dataclasses and carry out-of-range values without clipping.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import numpy as np
from numpy.typing import ArrayLike, NDArray

from color_recall.models import colorspace


class SupportsLab(Protocol):
    """Anything that can be expressed in CIELAB."""

    def to_lab(self) -> Lab: ...


@dataclass(frozen=True, slots=True)
class RGB:
    """
    An sRGB color.

    Attributes:
        red, green, blue: Gamma-encoded channels, nominally 0.0-1.0
    """
    red: float
    green: float
    blue: float

    def as_array(self) -> NDArray[np.float64]:
        return np.array([self.red, self.green, self.blue], dtype=np.float64)

    @classmethod
    def from_array(cls, values: ArrayLike) -> RGB:
        r, g, b = np.asarray(values, dtype=np.float64).reshape(3)
        return cls(float(r), float(g), float(b))

    def to_xyz(self) -> XYZ:
        return XYZ.from_array(colorspace.srgb_to_xyz(self.as_array()))

    def to_lab(self) -> Lab:
        return Lab.from_array(colorspace.srgb_to_lab(self.as_array()))

    def to_hsv(self) -> tuple[float, float, float]:
        """(hue in degrees, saturation, value)."""
        h, s, v = colorspace.srgb_to_hsv(self.as_array())
        return float(h), float(s), float(v)

    def to_hsl(self) -> tuple[float, float, float]:
        """(hue in degrees, saturation, lightness)."""
        h, s, l = colorspace.srgb_to_hsl(self.as_array())
        return float(h), float(s), float(l)


BLACK = RGB(0.0, 0.0, 0.0)


@dataclass(frozen=True, slots=True)
class XYZ:
    """A CIEXYZ color, D65 white has Y = 1.0."""
    x: float
    y: float
    z: float

    def as_array(self) -> NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_array(cls, values: ArrayLike) -> XYZ:
        x, y, z = np.asarray(values, dtype=np.float64).reshape(3)
        return cls(float(x), float(y), float(z))

    def to_xyz(self) -> XYZ:
        return self

    def to_lab(self) -> Lab:
        return Lab.from_array(colorspace.xyz_to_lab(self.as_array()))

    def to_rgb(self) -> RGB:
        return RGB.from_array(colorspace.xyz_to_srgb(self.as_array()))


@dataclass(frozen=True, slots=True)
class Lab:
    """
    A CIELAB color (D65).

    Attributes:
        l: Lightness (0 = black, 100 = white)
        a: Green (-) to red (+)
        b: Blue (-) to yellow (+)
    """
    l: float
    a: float
    b: float

    def as_array(self) -> NDArray[np.float64]:
        return np.array([self.l, self.a, self.b], dtype=np.float64)

    @classmethod
    def from_array(cls, values: ArrayLike) -> Lab:
        l, a, b = np.asarray(values, dtype=np.float64).reshape(3)
        return cls(float(l), float(a), float(b))

    def to_xyz(self) -> XYZ:
        return XYZ.from_array(colorspace.lab_to_xyz(self.as_array()))

    def to_lab(self) -> Lab:
        return self

    def to_rgb(self) -> RGB:
        return RGB.from_array(colorspace.lab_to_srgb(self.as_array()))
