# Copyright (c) 2026 Color Recall
# SPDX-License-Identifier: MIT

"""A single adjustable axis of a color model."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(slots=True)
class Control:
    """
    A named, bounded, continuous scalar.

    Mutable: ``value`` is overwritten by player input and by cross-model
    propagation. ``min <= value <= max`` is the intended range but writes
    are not clamped.

    Attributes:
        name: Short label ("R", "H", "a", ...)
        value: Current value
        min: Lower bound of the intended range
        max: Upper bound of the intended range
    """
    name: str
    value: float
    min: float
    max: float

    def __post_init__(self) -> None:
        """Validate the bounds are ordered."""
        if self.min > self.max:
            raise ValueError(
                f"Control {self.name!r} min must be <= max, got {self.min} > {self.max}"
            )

    def copy(self) -> Control:
        return replace(self)

    @property
    def in_range(self) -> bool:
        return self.min <= self.value <= self.max
