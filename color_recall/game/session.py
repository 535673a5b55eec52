# Copyright (c) 2026 Color Recall
# SPDX-License-Identifier: MIT

"""
Game session: one challenge plus synchronized controls for every model.

All enabled models describe the same sRGB color at all times, except that
the authoritative model (the one last edited or switched to) holds the
player's verbatim values and is the source every other model is derived
from.

Unknown model ids never raise here: color queries fall back to black,
metadata to placeholder strings, and mutations are ignored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

import numpy as np

from color_recall.game.challenge import (
    Challenge,
    ExcludeReason,
    ExclusionConfig,
    is_excluded,
)
from color_recall.models.adapters import ColorModel, get_adapter
from color_recall.models.color import BLACK, RGB
from color_recall.models.control import Control
from color_recall.models.convert import convert

logger = logging.getLogger(__name__)

DEFAULT_MODELS = ("srgb", "hsv", "hsl", "lab", "xyz")


@dataclass(frozen=True)
class SessionConfig:
    """Configuration for a game session."""

    # Enabled model ids, in display order. The first one starts authoritative.
    models: tuple[str, ...] = DEFAULT_MODELS

    # Thresholds for target generation and acceptability queries
    exclusion: ExclusionConfig = field(default_factory=ExclusionConfig)

    def __post_init__(self) -> None:
        """Validate model ids are known and unique."""
        if not self.models:
            raise ValueError("At least one color model must be enabled")
        if len(set(self.models)) != len(self.models):
            raise ValueError(f"Duplicate color models: {self.models}")
        for key in self.models:
            get_adapter(key)


class GameSession:
    """
    Mutable state of one game: the challenge and each model's controls.

    Not thread-safe. Wrap in ``color_recall.runtime.GameHandle`` when calls
    may interleave.
    """

    def __init__(
        self,
        challenge: Optional[Challenge] = None,
        config: Optional[SessionConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.config = config or SessionConfig()
        self.challenge = challenge or Challenge.new(rng, self.config.exclusion)

        self._models: dict[str, tuple[ColorModel, list[Control]]] = {}
        for key in self.config.models:
            adapter = get_adapter(key)
            self._models[key] = (adapter, adapter.initial_controls())

        # Every other model starts from the first model's defaults
        self._authoritative = self.config.models[0]
        self._propagate(self._authoritative)
        logger.info("Session created with models %s", ", ".join(self.config.models))

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def authoritative(self) -> str:
        """Id of the model every other model is derived from."""
        return self._authoritative

    def target_color(self) -> RGB:
        return self.challenge.target_color()

    def available_models(self) -> list[str]:
        return list(self._models)

    def current_color(self, model: str) -> RGB:
        """sRGB color of a model's controls, black for unknown ids."""
        pair = self._models.get(model)
        if pair is None:
            return BLACK
        adapter, controls = pair
        return adapter.to_rgb(controls)

    def model_name(self, model: str) -> str:
        pair = self._models.get(model)
        return pair[0].meta.name if pair else "Unknown"

    def model_info_link(self, model: str) -> str:
        pair = self._models.get(model)
        return pair[0].meta.info_link if pair else ""

    def model_control_labels(self, model: str) -> tuple[str, ...]:
        """Long control names ("Hue", "Saturation", ...), empty for unknown ids."""
        pair = self._models.get(model)
        return pair[0].meta.control_labels if pair else ()

    def model_controls(self, model: str) -> Optional[list[Control]]:
        """Copies of a model's controls, or None for unknown ids."""
        pair = self._models.get(model)
        if pair is None:
            return None
        return [c.copy() for c in pair[1]]

    def color_acceptable(self) -> Optional[ExcludeReason]:
        """Exclusion verdict for the authoritative color (None = acceptable)."""
        return is_excluded(self.current_color(self._authoritative), self.config.exclusion)

    def compute_score(self) -> float:
        """Distance from the target to the authoritative color, lower is better."""
        adapter, controls = self._models[self._authoritative]
        return self.challenge.compute_distance(adapter.to_lab(controls))

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def switch_model(self, model: str) -> None:
        """
        Make ``model`` authoritative and re-derive every other model from it.

        Switching to the model that is already authoritative leaves all
        controls unchanged. Unknown ids are ignored.
        """
        if model not in self._models:
            logger.debug("Ignoring switch to unknown model %r", model)
            return
        self._authoritative = model
        self._propagate(model)

    def update_controls(self, model: str, values: Sequence[float]) -> None:
        """
        Write new control values to a model, then propagate from it.

        Values are positional and written verbatim (no clamping). Extra
        values are ignored; controls without a value keep their current one.
        Unknown ids are ignored.
        """
        pair = self._models.get(model)
        if pair is None:
            logger.debug("Ignoring update for unknown model %r", model)
            return

        for control, value in zip(pair[1], values):
            control.value = float(value)

        self._authoritative = model
        self._propagate(model)

    def _propagate(self, source_key: str) -> None:
        source, source_controls = self._models[source_key]
        for key, (dest, dest_controls) in self._models.items():
            if key == source_key:
                continue
            convert(source, source_controls, dest, dest_controls)
        logger.debug("Propagated %s to %d model(s)", source_key, len(self._models) - 1)
