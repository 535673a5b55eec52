# Copyright (c) 2026 Color Recall
# SPDX-License-Identifier: MIT

"""
Color model adapters.

Each adapter is a stateless strategy over a fixed layout of three Controls:

- initial_controls(): default controls for the model
- to_rgb(controls): model → canonical sRGB
- from_rgb(rgb): canonical sRGB → fresh controls for the model
- to_xyz(controls) / to_lab(controls): model-native perceptual coordinates

Invariant: to_rgb(c).to_xyz() and to_rgb(c).to_lab() agree with
to_xyz(c) and to_lab(c) to floating-point tolerance, for every adapter.

Model ids:
    srgb  RGBModel     R, G, B        [0, 1]
    hsv   HSVModel     H [0, 360], S, V [0, 1]
    hsl   HSLModel     H [0, 360], S, L [0, 1]
    lab   LabModel     L [0, 100], a, b [-128, 128]
    xyz   XYZModel     x, y, z        [0, 1]
    lch   LCHModel     L [0, 100], C [0, 128], H [0, 360]
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from color_recall.models import colorspace
from color_recall.models.color import RGB, XYZ, Lab
from color_recall.models.control import Control


@dataclass(frozen=True, slots=True)
class ControlSpec:
    """Fixed name, default and bounds of one control in a model's layout."""
    name: str
    default: float
    min: float
    max: float

    def build(self, value: float) -> Control:
        return Control(self.name, value, self.min, self.max)


@dataclass(frozen=True, slots=True)
class ModelMeta:
    """Display metadata for a color model."""
    key: str
    name: str
    info_link: str
    control_labels: tuple[str, str, str]


class ColorModel(ABC):
    """
    Adapter contract shared by all color models.

    Subclasses declare ``meta`` and ``layout`` and implement the two
    array-level transforms ``_to_srgb`` and ``_from_srgb``. Models whose
    native space is perceptual override ``to_xyz``/``to_lab`` to skip the
    sRGB hop.
    """

    meta: ModelMeta
    layout: tuple[ControlSpec, ControlSpec, ControlSpec]

    @property
    def key(self) -> str:
        return self.meta.key

    def initial_controls(self) -> list[Control]:
        return [slot.build(slot.default) for slot in self.layout]

    def to_rgb(self, controls: Sequence[Control]) -> RGB:
        return RGB.from_array(self._to_srgb(self._values(controls)))

    def from_rgb(self, rgb: RGB) -> list[Control]:
        values = self._from_srgb(rgb.as_array())
        return [slot.build(float(v)) for slot, v in zip(self.layout, values)]

    def to_xyz(self, controls: Sequence[Control]) -> XYZ:
        return self.to_rgb(controls).to_xyz()

    def to_lab(self, controls: Sequence[Control]) -> Lab:
        return self.to_rgb(controls).to_lab()

    @staticmethod
    def _values(controls: Sequence[Control]) -> NDArray[np.float64]:
        return np.array([c.value for c in controls[:3]], dtype=np.float64)

    @abstractmethod
    def _to_srgb(self, values: NDArray[np.float64]) -> NDArray[np.float64]:
        ...

    @abstractmethod
    def _from_srgb(self, srgb: NDArray[np.float64]) -> NDArray[np.float64]:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class RGBModel(ColorModel):
    meta = ModelMeta(
        key="srgb",
        name="sRGB",
        info_link="https://en.wikipedia.org/wiki/SRGB",
        control_labels=("Red", "Green", "Blue"),
    )
    layout = (
        ControlSpec("R", 0.5, 0.0, 1.0),
        ControlSpec("G", 0.5, 0.0, 1.0),
        ControlSpec("B", 0.5, 0.0, 1.0),
    )

    def _to_srgb(self, values):
        return values

    def _from_srgb(self, srgb):
        return srgb


class HSVModel(ColorModel):
    meta = ModelMeta(
        key="hsv",
        name="HSV",
        info_link="https://en.wikipedia.org/wiki/HSL_and_HSV",
        control_labels=("Hue", "Saturation", "Value"),
    )
    layout = (
        ControlSpec("H", 180.0, 0.0, 360.0),
        ControlSpec("S", 0.5, 0.0, 1.0),
        ControlSpec("V", 0.5, 0.0, 1.0),
    )

    def _to_srgb(self, values):
        return colorspace.hsv_to_srgb(values)

    def _from_srgb(self, srgb):
        return colorspace.srgb_to_hsv(srgb)


class HSLModel(ColorModel):
    meta = ModelMeta(
        key="hsl",
        name="HSL",
        info_link="https://en.wikipedia.org/wiki/HSL_and_HSV",
        control_labels=("Hue", "Saturation", "Lightness"),
    )
    layout = (
        ControlSpec("H", 180.0, 0.0, 360.0),
        ControlSpec("S", 0.5, 0.0, 1.0),
        ControlSpec("L", 0.5, 0.0, 1.0),
    )

    def _to_srgb(self, values):
        return colorspace.hsl_to_srgb(values)

    def _from_srgb(self, srgb):
        return colorspace.srgb_to_hsl(srgb)


class LabModel(ColorModel):
    meta = ModelMeta(
        key="lab",
        name="CIELAB",
        info_link="https://en.wikipedia.org/wiki/CIELAB_color_space",
        control_labels=("Lightness", "A", "B"),
    )
    layout = (
        ControlSpec("L", 50.0, 0.0, 100.0),
        ControlSpec("a", 64.0, -128.0, 128.0),
        ControlSpec("b", 64.0, -128.0, 128.0),
    )

    def _to_srgb(self, values):
        return colorspace.lab_to_srgb(values)

    def _from_srgb(self, srgb):
        return colorspace.srgb_to_lab(srgb)

    def to_xyz(self, controls: Sequence[Control]) -> XYZ:
        return XYZ.from_array(colorspace.lab_to_xyz(self._values(controls)))

    def to_lab(self, controls: Sequence[Control]) -> Lab:
        return Lab.from_array(self._values(controls))


class XYZModel(ColorModel):
    meta = ModelMeta(
        key="xyz",
        name="CIEXYZ",
        info_link="https://en.wikipedia.org/wiki/CIE_1931_color_space",
        control_labels=("X", "Y", "Z"),
    )
    layout = (
        ControlSpec("x", 0.5, 0.0, 1.0),
        ControlSpec("y", 0.5, 0.0, 1.0),
        ControlSpec("z", 0.5, 0.0, 1.0),
    )

    def _to_srgb(self, values):
        return colorspace.xyz_to_srgb(values)

    def _from_srgb(self, srgb):
        return colorspace.srgb_to_xyz(srgb)

    def to_xyz(self, controls: Sequence[Control]) -> XYZ:
        return XYZ.from_array(self._values(controls))

    def to_lab(self, controls: Sequence[Control]) -> Lab:
        return Lab.from_array(colorspace.xyz_to_lab(self._values(controls)))


class LCHModel(ColorModel):
    meta = ModelMeta(
        key="lch",
        name="CIELCH",
        info_link=(
            "https://en.wikipedia.org/wiki/CIELAB_color_space"
            "#Cylindrical_representation:_CIELCh_or_CIEHLC"
        ),
        control_labels=("Lightness", "Chroma", "Hue"),
    )
    layout = (
        ControlSpec("L", 50.0, 0.0, 100.0),
        ControlSpec("C", 64.0, 0.0, 128.0),
        ControlSpec("H", 180.0, 0.0, 360.0),
    )

    def _to_srgb(self, values):
        return colorspace.lch_to_srgb(values)

    def _from_srgb(self, srgb):
        return colorspace.srgb_to_lch(srgb)

    def to_xyz(self, controls: Sequence[Control]) -> XYZ:
        lab = colorspace.lch_to_lab(self._values(controls))
        return XYZ.from_array(colorspace.lab_to_xyz(lab))

    def to_lab(self, controls: Sequence[Control]) -> Lab:
        return Lab.from_array(colorspace.lch_to_lab(self._values(controls)))


# =============================================================================
# Registry
# =============================================================================

ADAPTERS: dict[str, ColorModel] = {
    model.key: model
    for model in (RGBModel(), HSVModel(), HSLModel(), LabModel(), XYZModel(), LCHModel())
}


def get_adapter(key: str) -> ColorModel:
    """
    Look up the shared adapter instance for a model id.

    Raises:
        KeyError: If the id is not a known color model
    """
    try:
        return ADAPTERS[key]
    except KeyError:
        raise KeyError(f"Unknown color model: {key!r}") from None
