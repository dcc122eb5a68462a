# Copyright (c) 2026 Tonecraft
# SPDX-License-Identifier: MIT

"""
Perceptual color model for Tonecraft.

HCT (hue, chroma, tone) conversions, gamut clipping and contrast math.
All operations are deterministic and pure NumPy.
"""

from tonecraft.hct.contrast import (
    darker,
    darker_unsafe,
    lighter,
    lighter_unsafe,
    ratio_of_tones,
)
from tonecraft.hct.hct import Hct

__all__ = [
    "Hct",
    "ratio_of_tones",
    "lighter",
    "darker",
    "lighter_unsafe",
    "darker_unsafe",
]
