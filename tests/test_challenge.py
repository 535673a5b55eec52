# Copyright (c) 2026 Color Recall
# SPDX-License-Identifier: MIT

"""Tests for target generation, exclusion and scoring."""

import logging

import numpy as np
import pytest

from color_recall.game.challenge import (
    Challenge,
    ExcludeReason,
    ExclusionConfig,
    is_excluded,
)
from color_recall.models import ADAPTERS, RGB


class _ScriptedRng:
    """Randomness provider replaying fixed draws."""

    def __init__(self, draws):
        self._draws = iter(draws)
        self.calls = 0

    def random(self, size):
        self.calls += 1
        return np.array(next(self._draws), dtype=np.float64)


class TestIsExcluded:

    @pytest.mark.parametrize("color,expected", [
        (RGB(0.01, 0.01, 0.01), ExcludeReason.TOO_DARK),
        (RGB(0.99, 0.99, 0.99), ExcludeReason.TOO_BRIGHT),
        (RGB(0.5, 0.5, 0.5), ExcludeReason.LOW_SATURATION),
        (RGB(1.0, 0.0, 0.0), ExcludeReason.HIGH_SATURATION),
        (RGB(0.6, 0.3, 0.3), None),
    ])
    def test_boundaries(self, color, expected):
        assert is_excluded(color) is expected

    def test_dark_checked_before_saturation(self):
        """A dark saturated color is too dark, not high saturation."""
        assert is_excluded(RGB(0.2, 0.0, 0.0)) is ExcludeReason.TOO_DARK

    def test_bright_checked_before_saturation(self):
        assert is_excluded(RGB(1.0, 1.0, 0.95)) is ExcludeReason.TOO_BRIGHT

    def test_custom_thresholds(self):
        config = ExclusionConfig(max_saturation=1.01)
        assert is_excluded(RGB(1.0, 0.0, 0.0), config) is None

    def test_invalid_config(self):
        with pytest.raises(ValueError, match="min_saturation"):
            ExclusionConfig(min_saturation=0.9, max_saturation=0.1)

    def test_static_on_challenge(self):
        assert Challenge.is_excluded(RGB(0.01, 0.01, 0.01)) is ExcludeReason.TOO_DARK


class TestExcludeReason:

    def test_values_are_boundary_labels(self):
        assert [r.value for r in ExcludeReason] == [
            "too_dark", "too_bright", "low_saturation", "high_saturation",
        ]

    def test_display_label(self):
        assert ExcludeReason.TOO_DARK.label == "Too dark"
        assert ExcludeReason.HIGH_SATURATION.label == "High saturation"


class TestChallengeNew:

    def test_generated_targets_never_excluded(self):
        for seed in range(200):
            challenge = Challenge.new(np.random.default_rng(seed))
            assert is_excluded(challenge.target_color()) is None

    def test_deterministic_for_seed(self):
        a = Challenge.new(np.random.default_rng(123))
        b = Challenge.new(np.random.default_rng(123))
        assert a.target == b.target

    def test_redraws_until_accepted(self):
        rng = _ScriptedRng([
            [0.01, 0.01, 0.01],  # too dark
            [0.5, 0.5, 0.5],     # low saturation
            [1.0, 0.0, 0.0],     # high saturation
            [0.6, 0.3, 0.3],     # accepted
        ])
        challenge = Challenge.new(rng)
        assert rng.calls == 4
        assert challenge.target == RGB(0.6, 0.3, 0.3)

    def test_many_rejections_do_not_recurse(self):
        rejected = [[0.0, 0.0, 0.0]] * 5000
        rng = _ScriptedRng(rejected + [[0.6, 0.3, 0.3]])
        assert Challenge.new(rng).target == RGB(0.6, 0.3, 0.3)

    def test_logs_rejections(self, caplog):
        rng = _ScriptedRng([[0.0, 0.0, 0.0], [0.6, 0.3, 0.3]])
        with caplog.at_level(logging.DEBUG, logger="color_recall.game.challenge"):
            Challenge.new(rng)
        assert "Too dark" in caplog.text

    def test_default_rng(self):
        assert is_excluded(Challenge.new().target) is None


class TestComputeDistance:

    @pytest.mark.parametrize("adapter", list(ADAPTERS.values()), ids=list(ADAPTERS))
    def test_target_against_itself_is_zero(self, adapter):
        challenge = Challenge(RGB(0.6, 0.3, 0.3))
        controls = adapter.from_rgb(challenge.target)
        assert challenge.compute_distance(adapter.to_lab(controls)) == pytest.approx(0.0, abs=1e-3)

    def test_accepts_rgb_and_xyz(self):
        challenge = Challenge(RGB(0.2, 0.5, 0.7))
        assert challenge.compute_distance(challenge.target) == 0.0
        assert challenge.compute_distance(challenge.target.to_xyz()) == pytest.approx(0.0, abs=1e-3)

    def test_farther_color_scores_higher(self):
        challenge = Challenge(RGB(0.2, 0.5, 0.7))
        near = challenge.compute_distance(RGB(0.22, 0.5, 0.7))
        far = challenge.compute_distance(RGB(0.9, 0.2, 0.1))
        assert 0.0 < near < far

    def test_target_is_minimal(self):
        challenge = Challenge(RGB(0.2, 0.5, 0.7))
        best = challenge.compute_distance(challenge.target)
        for color in np.random.default_rng(9).random((20, 3)):
            assert challenge.compute_distance(RGB.from_array(color)) >= best
