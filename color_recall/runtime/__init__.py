# Copyright (c) 2026 Color Recall
# SPDX-License-Identifier: MIT

"""
UI boundary runtime for Color Recall.

1. GameHandle -- lifecycle and locking around one GameSession
2. Serializers -- CSS/hex strings, control dicts, JSON snapshots

The boundary never changes game semantics; it only guards and formats.
"""

from color_recall.runtime.boundary import (
    GameHandle,
    ReadWriteLock,
    SessionNotInitializedError,
)
from color_recall.runtime.serializers import (
    SerializerFormat,
    acceptability_label,
    control_to_dict,
    session_to_dict,
    session_to_json,
    to_css,
    to_hex,
)

__all__ = [
    "GameHandle",
    "ReadWriteLock",
    "SessionNotInitializedError",
    "SerializerFormat",
    "to_css",
    "to_hex",
    "control_to_dict",
    "acceptability_label",
    "session_to_dict",
    "session_to_json",
]
