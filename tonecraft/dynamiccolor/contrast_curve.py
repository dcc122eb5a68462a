# Copyright (c) 2026 Tonecraft
# SPDX-License-Identifier: MIT

"""
Contrast curves: contrast level → target contrast ratio.
"""

from __future__ import annotations

from dataclasses import dataclass

from tonecraft.hct.colorspace import lerp


@dataclass(frozen=True, slots=True)
class ContrastCurve:
    """
    Target contrast ratio as a function of the scheme's contrast level.

    Four calibration points, interpolated linearly in between. Levels below
    -1 use `low`; levels above 1 use `high`.

    Some surface roles reuse the same interpolation for tones rather than
    ratios, so values are not range-checked.

    Attributes:
        low: Value at contrast level -1 (reduced contrast)
        normal: Value at contrast level 0 (standard)
        medium: Value at contrast level 0.5
        high: Value at contrast level 1 (maximum contrast)
    """
    low: float
    normal: float
    medium: float
    high: float

    def value_at(self, contrast_level: float) -> float:
        """
        Value of the curve at a contrast level.

        Args:
            contrast_level: Typically in [-1, 1]; values outside are clamped
        """
        if contrast_level <= -1.0:
            return self.low
        if contrast_level < 0.0:
            return lerp(self.low, self.normal, contrast_level + 1.0)
        if contrast_level < 0.5:
            return lerp(self.normal, self.medium, contrast_level / 0.5)
        if contrast_level < 1.0:
            return lerp(self.medium, self.high, (contrast_level - 0.5) / 0.5)
        return self.high
