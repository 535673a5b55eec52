# Copyright (c) 2026 Color Recall
# SPDX-License-Identifier: MIT

"""
Target color generation and scoring.

A Challenge holds one random sRGB target. Degenerate targets (near black,
near white, near gray, or neon) are rejected and redrawn.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np

from color_recall.models.color import RGB, SupportsLab
from color_recall.models.difference import delta_e

logger = logging.getLogger(__name__)


class ExcludeReason(Enum):
    """Why a color is not acceptable as a target."""

    TOO_DARK = "too_dark"
    TOO_BRIGHT = "too_bright"
    LOW_SATURATION = "low_saturation"
    HIGH_SATURATION = "high_saturation"

    @property
    def label(self) -> str:
        """Human-readable form, e.g. "Too dark"."""
        return self.value.replace("_", " ").capitalize()


@dataclass(frozen=True)
class ExclusionConfig:
    """Thresholds for rejecting target colors."""

    # Channel sum (0-3) below which a color is too dark: 0.08 per channel
    dark_sum: float = 0.24

    # Channel sum above which a color is too bright: 0.92 per channel
    bright_sum: float = 2.76

    # HSV saturation bounds
    min_saturation: float = 0.15
    max_saturation: float = 0.9

    def __post_init__(self) -> None:
        if self.dark_sum > self.bright_sum:
            raise ValueError(
                f"dark_sum must be <= bright_sum, got {self.dark_sum} > {self.bright_sum}"
            )
        if self.min_saturation > self.max_saturation:
            raise ValueError(
                f"min_saturation must be <= max_saturation, "
                f"got {self.min_saturation} > {self.max_saturation}"
            )


DEFAULT_EXCLUSION = ExclusionConfig()


def is_excluded(
    color: RGB,
    config: Optional[ExclusionConfig] = None,
) -> Optional[ExcludeReason]:
    """
    Classify a color against the exclusion thresholds.

    Checks run in order and the first hit wins: darkness, brightness,
    then HSV saturation (low before high).

    Returns:
        The reason the color is excluded, or None if it is acceptable.
    """
    cfg = config or DEFAULT_EXCLUSION

    total = color.red + color.green + color.blue
    if total < cfg.dark_sum:
        return ExcludeReason.TOO_DARK
    if total > cfg.bright_sum:
        return ExcludeReason.TOO_BRIGHT

    _, saturation, _ = color.to_hsv()
    if saturation < cfg.min_saturation:
        return ExcludeReason.LOW_SATURATION
    if saturation > cfg.max_saturation:
        return ExcludeReason.HIGH_SATURATION
    return None


class Challenge:
    """
    One round of the game: an immutable target color plus scoring.

    Create with ``Challenge.new(rng)`` to draw a random acceptable target,
    or ``Challenge(target)`` to fix one.
    """

    __slots__ = ("_target",)

    def __init__(self, target: RGB) -> None:
        self._target = target

    @classmethod
    def new(
        cls,
        rng: Optional[np.random.Generator] = None,
        config: Optional[ExclusionConfig] = None,
    ) -> Challenge:
        """
        Draw a uniformly random target from the accepted region.

        Candidates are three uniform channels in [0, 1). Excluded candidates
        are discarded and redrawn until one is accepted.

        Args:
            rng: Randomness provider (default: fresh ``np.random.default_rng()``)
            config: Exclusion thresholds (uses defaults if None)
        """
        if rng is None:
            rng = np.random.default_rng()

        attempts = 0
        while True:
            attempts += 1
            target = RGB.from_array(rng.random(3))
            reason = is_excluded(target, config)
            if reason is None:
                break
            logger.debug("Rejected target %s: %s", target, reason.label)

        logger.info("New challenge after %d draw(s): %s", attempts, target)
        return cls(target)

    @property
    def target(self) -> RGB:
        return self._target

    def target_color(self) -> RGB:
        return self._target

    is_excluded = staticmethod(is_excluded)

    def compute_distance(self, color: SupportsLab) -> float:
        """
        Perceptual distance from the target (improved CIEDE2000).

        Args:
            color: Any color with ``to_lab()`` (RGB, XYZ, Lab)

        Returns:
            ΔE value, lower is better, 0 for a perceptual match
        """
        return delta_e(self._target.to_lab().as_array(), color.to_lab().as_array())

    def __repr__(self) -> str:
        return f"Challenge(target={self._target!r})"
