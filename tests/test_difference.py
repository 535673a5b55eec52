# Copyright (c) 2026 Color Recall
# SPDX-License-Identifier: MIT

"""Tests for CIEDE2000 and the improved power-law variant."""

import numpy as np
import pytest

from color_recall.models.difference import ciede2000, improved_ciede2000, delta_e


# Selected pairs from Sharma, Wu, Dalal (2005) supplementary test data
SHARMA_PAIRS = [
    ((50.0, 2.6772, -79.7751), (50.0, 0.0, -82.7485), 2.0425),
    ((50.0, 3.1571, -77.2803), (50.0, 0.0, -82.7485), 2.8615),
    ((50.0, 2.8361, -74.0200), (50.0, 0.0, -82.7485), 3.4412),
    ((50.0, -1.3802, -84.2814), (50.0, 0.0, -82.7485), 1.0000),
    ((50.0, 0.0, 0.0), (50.0, -1.0, 2.0), 2.3669),
    ((50.0, 2.5, 0.0), (73.0, 25.0, -18.0), 27.1492),
    ((50.0, 2.5, 0.0), (61.0, -5.0, 29.0), 22.8977),
]


class TestCIEDE2000:

    @pytest.mark.parametrize("lab1,lab2,expected", SHARMA_PAIRS)
    def test_reference_pairs(self, lab1, lab2, expected):
        assert float(ciede2000(lab1, lab2)) == pytest.approx(expected, abs=1e-4)

    @pytest.mark.parametrize("lab1,lab2,expected", SHARMA_PAIRS)
    def test_symmetric(self, lab1, lab2, expected):
        assert float(ciede2000(lab2, lab1)) == pytest.approx(expected, abs=1e-4)

    def test_identical_colors_zero(self):
        assert float(ciede2000([60.0, 20.0, -30.0], [60.0, 20.0, -30.0])) == 0.0

    def test_achromatic_pair(self):
        """Grays differ only in lightness; hue terms must not produce NaN."""
        de = float(ciede2000([40.0, 0.0, 0.0], [60.0, 0.0, 0.0]))
        assert np.isfinite(de)
        assert de > 10.0

    def test_batch_matches_scalar(self):
        lab1 = np.array([p[0] for p in SHARMA_PAIRS])
        lab2 = np.array([p[1] for p in SHARMA_PAIRS])
        batch = ciede2000(lab1, lab2)
        assert batch.shape == (len(SHARMA_PAIRS),)
        for i, (a, b, _) in enumerate(SHARMA_PAIRS):
            assert batch[i] == pytest.approx(float(ciede2000(a, b)), abs=1e-12)


class TestImprovedCIEDE2000:

    def test_power_law(self):
        lab1, lab2, expected = SHARMA_PAIRS[-1]
        assert float(improved_ciede2000(lab1, lab2)) == pytest.approx(
            1.43 * expected ** 0.7, abs=1e-3
        )

    def test_identical_colors_zero(self):
        assert delta_e([50.0, 10.0, 10.0], [50.0, 10.0, 10.0]) == 0.0

    def test_preserves_ordering(self):
        near = delta_e([50.0, 0.0, 0.0], [51.0, 0.0, 0.0])
        far = delta_e([50.0, 0.0, 0.0], [70.0, 0.0, 0.0])
        assert 0.0 < near < far

    def test_delta_e_returns_float(self):
        assert isinstance(delta_e([50.0, 0.0, 0.0], [55.0, 5.0, 5.0]), float)
