# Copyright (c) 2026 Color Recall
# SPDX-License-Identifier: MIT

"""
Color Recall -- color-matching game core.

A random target color is drawn, the player reproduces it with the controls
of one of several color models (sRGB, HSV, HSL, CIELAB, CIEXYZ, CIELCH),
and the attempt is scored with an improved CIEDE2000 distance.

Quick start::

    from color_recall import GameSession

    session = GameSession()
    session.update_controls("hsv", [30.0, 0.6, 0.7])
    session.compute_score()   # lower is better
"""

from __future__ import annotations

__version__ = "1.0.0"

from color_recall.game import (
    Challenge,
    ExcludeReason,
    ExclusionConfig,
    GameSession,
    SessionConfig,
)
from color_recall.models import (
    ADAPTERS,
    RGB,
    XYZ,
    ColorModel,
    Control,
    Lab,
    convert,
    get_adapter,
)
from color_recall.runtime import GameHandle

__all__ = [
    # Core API
    "GameSession",
    "GameHandle",
    "Challenge",
    "convert",
    # Types (commonly needed)
    "RGB",
    "XYZ",
    "Lab",
    "Control",
    "ColorModel",
    "ExcludeReason",
    # Configuration
    "SessionConfig",
    "ExclusionConfig",
    # Registry
    "ADAPTERS",
    "get_adapter",
    # Version
    "__version__",
]
