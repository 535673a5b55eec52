# Copyright (c) 2026 Color Recall
# SPDX-License-Identifier: MIT

"""
Game layer: target challenge and the session that keeps models in sync.
"""

from color_recall.game.challenge import (
    Challenge,
    ExcludeReason,
    ExclusionConfig,
    is_excluded,
)
from color_recall.game.session import DEFAULT_MODELS, GameSession, SessionConfig

__all__ = [
    "Challenge",
    "ExcludeReason",
    "ExclusionConfig",
    "is_excluded",
    "GameSession",
    "SessionConfig",
    "DEFAULT_MODELS",
]
