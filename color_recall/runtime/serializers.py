# Copyright (c) 2026 Color Recall
# SPDX-License-Identifier: MIT

"""
Serializers for handing session state to a UI.

Colors become CSS/hex strings, controls become plain dicts, and a whole
session becomes a JSON snapshot. Serializers read state, never modify it.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Optional

import numpy as np

from color_recall.game.challenge import ExcludeReason
from color_recall.game.session import GameSession
from color_recall.models.color import RGB
from color_recall.models.control import Control


class SerializerFormat(Enum):
    """Output format for JSON serializers."""

    JSON = "json"
    JSON_PRETTY = "json_pretty"


def to_css(rgb: RGB) -> str:
    """
    Format a color as a CSS ``rgb(r, g, b)`` string.

    Channels are scaled to 0-255 and truncated, saturating out-of-range
    values at the ends. NaN channels become 0.
    """
    scaled = np.nan_to_num(rgb.as_array() * 255.0, nan=0.0)
    channels = np.clip(np.trunc(scaled), 0, 255).astype(int)
    r, g, b = channels
    return f"rgb({r}, {g}, {b})"


def to_hex(rgb: RGB) -> str:
    """Format a color as ``#RRGGBB`` (rounded, clipped to gamut, NaN as 0)."""
    srgb = np.nan_to_num(rgb.as_array(), nan=0.0)
    r, g, b = (np.clip(srgb, 0.0, 1.0) * 255).round().astype(int)
    return f"#{r:02X}{g:02X}{b:02X}"


def control_to_dict(control: Control) -> dict:
    """Serialize a control for rendering."""
    return {
        "name": control.name,
        "min": control.min,
        "max": control.max,
        "value": control.value,
    }


def acceptability_label(reason: Optional[ExcludeReason]) -> str:
    """``"none"`` for acceptable colors, else the reason id (e.g. ``"too_dark"``)."""
    return "none" if reason is None else reason.value


def session_to_dict(session: GameSession) -> dict:
    """Snapshot of everything a UI needs to draw a session."""
    models = {}
    for key in session.available_models():
        color = session.current_color(key)
        models[key] = {
            "name": session.model_name(key),
            "info_link": session.model_info_link(key),
            "labels": list(session.model_control_labels(key)),
            "css": to_css(color),
            "hex": to_hex(color),
            "controls": [control_to_dict(c) for c in session.model_controls(key)],
        }

    target = session.target_color()
    return {
        "target": {"css": to_css(target), "hex": to_hex(target)},
        "authoritative": session.authoritative,
        "score": round(session.compute_score(), 4),
        "acceptable": acceptability_label(session.color_acceptable()),
        "models": models,
    }


def session_to_json(
    session: GameSession,
    *,
    format: SerializerFormat = SerializerFormat.JSON,
) -> str:
    """Serialize a session snapshot as JSON."""
    data = session_to_dict(session)
    if format == SerializerFormat.JSON_PRETTY:
        return json.dumps(data, indent=2)
    return json.dumps(data, separators=(",", ":"))
