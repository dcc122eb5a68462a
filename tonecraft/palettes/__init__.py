# Copyright (c) 2026 Tonecraft
# SPDX-License-Identifier: MIT

"""
Tonal palettes for Tonecraft.

A palette is a hue and chroma; sampling it at a tone yields a color.
"""

from tonecraft.palettes.tonal_palette import TonalPalette, find_key_color

__all__ = ["TonalPalette", "find_key_color"]
