# Copyright (c) 2026 Color Recall
# SPDX-License-Identifier: MIT

"""
Cross-model conversion.

Every conversion round-trips through canonical sRGB, so the destination
describes the same color as the source. Hue-based models are only equal
within floating tolerance at the 0/360 seam.
"""

from __future__ import annotations

from typing import MutableSequence, Sequence

from color_recall.models.adapters import ColorModel
from color_recall.models.color import RGB
from color_recall.models.control import Control


def convert(
    source: ColorModel,
    source_controls: Sequence[Control],
    dest: ColorModel,
    dest_controls: MutableSequence[Control],
) -> RGB:
    """
    Overwrite ``dest_controls`` in place with the equivalent of the source.

    Args:
        source: Adapter that owns ``source_controls``
        source_controls: Controls to read
        dest: Adapter that owns ``dest_controls``
        dest_controls: Controls to overwrite (count and order are kept)

    Returns:
        The canonical sRGB color both control sets now describe.
    """
    rgb = source.to_rgb(source_controls)
    dest_controls[:] = dest.from_rgb(rgb)
    return rgb
