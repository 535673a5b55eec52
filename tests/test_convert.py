# Copyright (c) 2026 Color Recall
# SPDX-License-Identifier: MIT

"""Tests for cross-model conversion."""

import itertools

import numpy as np
import pytest

from color_recall.models import ADAPTERS, RGB, HSVModel, RGBModel, convert

PAIRS = list(itertools.permutations(ADAPTERS.values(), 2))
PAIR_IDS = [f"{a.key}->{b.key}" for a, b in PAIRS]


class TestConvert:

    @pytest.mark.parametrize("source,dest", PAIRS, ids=PAIR_IDS)
    def test_destination_describes_same_color(self, source, dest):
        rng = np.random.default_rng(5)
        for _ in range(10):
            controls = source.from_rgb(RGB.from_array(rng.random(3)))
            dest_controls = dest.initial_controls()

            convert(source, controls, dest, dest_controls)

            np.testing.assert_allclose(
                dest.to_rgb(dest_controls).as_array(),
                source.to_rgb(controls).as_array(),
                atol=1e-6,
            )

    @pytest.mark.parametrize("source,dest", PAIRS, ids=PAIR_IDS)
    def test_in_bounds_controls_out_of_gamut(self, source, dest):
        """Any in-bounds controls convert, even when they decode outside sRGB."""
        rng = np.random.default_rng(17)
        for _ in range(50):
            controls = source.initial_controls()
            for c in controls:
                c.value = float(rng.uniform(c.min, c.max))
            dest_controls = dest.initial_controls()

            convert(source, controls, dest, dest_controls)

            np.testing.assert_allclose(
                dest.to_rgb(dest_controls).as_array(),
                source.to_rgb(controls).as_array(),
                rtol=1e-6,
                atol=1e-6,
            )

    @pytest.mark.parametrize("source,dest", PAIRS, ids=PAIR_IDS)
    def test_keeps_destination_layout(self, source, dest):
        dest_controls = dest.initial_controls()
        convert(source, source.initial_controls(), dest, dest_controls)
        assert [(c.name, c.min, c.max) for c in dest_controls] == [
            (c.name, c.min, c.max) for c in dest.initial_controls()
        ]

    def test_overwrites_in_place(self):
        dest_controls = HSVModel().initial_controls()
        container_id = id(dest_controls)
        convert(RGBModel(), RGBModel().initial_controls(), HSVModel(), dest_controls)
        assert id(dest_controls) == container_id
        np.testing.assert_allclose([c.value for c in dest_controls], [0.0, 0.0, 0.5])

    def test_returns_canonical_color(self):
        source = RGBModel()
        controls = source.from_rgb(RGB(0.1, 0.2, 0.3))
        rgb = convert(source, controls, HSVModel(), HSVModel().initial_controls())
        assert rgb == RGB(0.1, 0.2, 0.3)

    def test_source_untouched(self):
        source = HSVModel()
        controls = source.initial_controls()
        convert(source, controls, RGBModel(), RGBModel().initial_controls())
        assert [c.value for c in controls] == [180.0, 0.5, 0.5]

    def test_hue_seam_within_tolerance(self):
        """Hue 360 and hue 0 describe the same color."""
        source = HSVModel()
        controls = source.initial_controls()
        for c, v in zip(controls, [360.0, 0.6, 0.8]):
            c.value = v
        dest = RGBModel().initial_controls()
        convert(source, controls, RGBModel(), dest)

        back = HSVModel().initial_controls()
        convert(RGBModel(), dest, HSVModel(), back)
        assert back[0].value == pytest.approx(0.0, abs=1e-9)
        np.testing.assert_allclose(
            HSVModel().to_rgb(back).as_array(), source.to_rgb(controls).as_array(), atol=1e-12
        )
