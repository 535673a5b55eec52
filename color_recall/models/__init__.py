# Copyright (c) 2026 Color Recall
# SPDX-License-Identifier: MIT

"""
Color models and conversion engine.

Pure, stateless numeric code: color value types, per-model adapters,
cross-model conversion and perceptual distance.
"""

from color_recall.models.adapters import (
    ADAPTERS,
    ColorModel,
    ControlSpec,
    HSLModel,
    HSVModel,
    LabModel,
    LCHModel,
    ModelMeta,
    RGBModel,
    XYZModel,
    get_adapter,
)
from color_recall.models.color import BLACK, RGB, XYZ, Lab, SupportsLab
from color_recall.models.control import Control
from color_recall.models.convert import convert
from color_recall.models.difference import ciede2000, delta_e, improved_ciede2000

__all__ = [
    # Value types
    "RGB",
    "XYZ",
    "Lab",
    "BLACK",
    "SupportsLab",
    "Control",
    # Adapters
    "ColorModel",
    "ControlSpec",
    "ModelMeta",
    "RGBModel",
    "HSVModel",
    "HSLModel",
    "LabModel",
    "XYZModel",
    "LCHModel",
    "ADAPTERS",
    "get_adapter",
    # Conversion and distance
    "convert",
    "ciede2000",
    "improved_ciede2000",
    "delta_e",
]
