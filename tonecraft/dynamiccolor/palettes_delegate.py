# Copyright (c) 2026 Tonecraft
# SPDX-License-Identifier: MIT

"""
Scheme palette generation.

A scheme samples six tonal palettes: primary, secondary, tertiary, neutral,
neutral variant and error. Each ruleset version derives them from the
source color differently. The 2025 ruleset picks tertiary and error hues
from piecewise tables over the source hue instead of reusing it.
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from tonecraft.dynamiccolor.color_spec import SpecVersion
from tonecraft.hct.colorspace import sanitize_degrees
from tonecraft.hct.hct import Hct
from tonecraft.palettes.tonal_palette import TonalPalette


# Error palette used when a version does not define one
DEFAULT_ERROR_HUE = 25.0
DEFAULT_ERROR_CHROMA = 84.0


# =============================================================================
# Hue Tables
# =============================================================================


def get_piecewise_hue(
    source_color_hct: Hct,
    hue_breakpoints: Sequence[float],
    hues: Sequence[float],
) -> float:
    """
    Look up a hue from a piecewise table over the source hue.

    Interval i is [hue_breakpoints[i], hue_breakpoints[i + 1]) and maps to
    hues[i].

    Returns:
        The mapped hue, or the source hue when no interval matches
    """
    size = min(len(hue_breakpoints) - 1, len(hues))
    source_hue = source_color_hct.hue
    for i in range(size):
        if hue_breakpoints[i] <= source_hue < hue_breakpoints[i + 1]:
            return sanitize_degrees(hues[i])
    return source_hue


def get_rotated_hue(
    source_color_hct: Hct,
    hue_breakpoints: Sequence[float],
    rotations: Sequence[float],
) -> float:
    """
    Rotate the source hue by an amount looked up from a piecewise table.

    Returns:
        Source hue plus the rotation, wrapped to [0, 360)
    """
    rotation = get_piecewise_hue(source_color_hct, hue_breakpoints, rotations)
    if min(len(hue_breakpoints) - 1, len(rotations)) <= 0:
        rotation = 0.0
    return sanitize_degrees(source_color_hct.hue + rotation)


TERTIARY_HUE_BREAKPOINTS = (0, 38, 105, 161, 204, 278, 333, 360)
TERTIARY_HUE_ROTATIONS = (-32, 26, 10, -39, 24, -15, -32)

ERROR_HUE_BREAKPOINTS = (0, 3, 13, 23, 33, 43, 153, 273, 360)
ERROR_HUES = (12, 22, 32, 12, 22, 32, 22, 12)


# =============================================================================
# Delegates
# =============================================================================


class PalettesDelegate(Protocol):
    """Generates the six scheme palettes for one ruleset version."""

    def primary_palette(self, source: Hct, is_dark: bool, contrast_level: float) -> TonalPalette: ...

    def secondary_palette(self, source: Hct, is_dark: bool, contrast_level: float) -> TonalPalette: ...

    def tertiary_palette(self, source: Hct, is_dark: bool, contrast_level: float) -> TonalPalette: ...

    def neutral_palette(self, source: Hct, is_dark: bool, contrast_level: float) -> TonalPalette: ...

    def neutral_variant_palette(self, source: Hct, is_dark: bool, contrast_level: float) -> TonalPalette: ...

    def error_palette(self, source: Hct, is_dark: bool, contrast_level: float) -> Optional[TonalPalette]: ...


class Palettes2021:
    """Source hue everywhere, fixed chromas, no error palette."""

    def primary_palette(self, source: Hct, is_dark: bool, contrast_level: float) -> TonalPalette:
        return TonalPalette.from_hue_and_chroma(source.hue, 12.0)

    def secondary_palette(self, source: Hct, is_dark: bool, contrast_level: float) -> TonalPalette:
        return TonalPalette.from_hue_and_chroma(source.hue, 8.0)

    def tertiary_palette(self, source: Hct, is_dark: bool, contrast_level: float) -> TonalPalette:
        return TonalPalette.from_hue_and_chroma(source.hue, 16.0)

    def neutral_palette(self, source: Hct, is_dark: bool, contrast_level: float) -> TonalPalette:
        return TonalPalette.from_hue_and_chroma(source.hue, 2.0)

    def neutral_variant_palette(self, source: Hct, is_dark: bool, contrast_level: float) -> TonalPalette:
        return TonalPalette.from_hue_and_chroma(source.hue, 2.0)

    def error_palette(self, source: Hct, is_dark: bool, contrast_level: float) -> Optional[TonalPalette]:
        return None


class Palettes2025:
    """
    Lower accent chroma (higher for blues), rotated tertiary hue and a
    table-driven error hue.
    """

    def primary_palette(self, source: Hct, is_dark: bool, contrast_level: float) -> TonalPalette:
        return TonalPalette.from_hue_and_chroma(
            source.hue, 12.0 if Hct.is_blue(source.hue) else 8.0
        )

    def secondary_palette(self, source: Hct, is_dark: bool, contrast_level: float) -> TonalPalette:
        return TonalPalette.from_hue_and_chroma(
            source.hue, 6.0 if Hct.is_blue(source.hue) else 4.0
        )

    def tertiary_palette(self, source: Hct, is_dark: bool, contrast_level: float) -> TonalPalette:
        hue = get_rotated_hue(source, TERTIARY_HUE_BREAKPOINTS, TERTIARY_HUE_ROTATIONS)
        return TonalPalette.from_hue_and_chroma(hue, 20.0)

    def neutral_palette(self, source: Hct, is_dark: bool, contrast_level: float) -> TonalPalette:
        return TonalPalette.from_hue_and_chroma(source.hue, 1.4)

    def neutral_variant_palette(self, source: Hct, is_dark: bool, contrast_level: float) -> TonalPalette:
        return TonalPalette.from_hue_and_chroma(source.hue, 1.4 * 2.2)

    def error_palette(self, source: Hct, is_dark: bool, contrast_level: float) -> Optional[TonalPalette]:
        hue = get_piecewise_hue(source, ERROR_HUE_BREAKPOINTS, ERROR_HUES)
        return TonalPalette.from_hue_and_chroma(hue, 50.0)


_DELEGATES: dict[SpecVersion, PalettesDelegate] = {
    SpecVersion.SPEC_2021: Palettes2021(),
    SpecVersion.SPEC_2025: Palettes2025(),
}


def get_palettes_delegate(version: SpecVersion) -> PalettesDelegate:
    """The palette generator for a ruleset version."""
    return _DELEGATES[SpecVersion.parse(version)]


def default_error_palette() -> TonalPalette:
    """Error palette for versions that do not generate one."""
    return TonalPalette.from_hue_and_chroma(DEFAULT_ERROR_HUE, DEFAULT_ERROR_CHROMA)
