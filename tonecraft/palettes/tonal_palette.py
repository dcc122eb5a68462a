# Copyright (c) 2026 Tonecraft
# SPDX-License-Identifier: MIT

"""
Tonal palettes.

A tonal palette fixes hue and chroma and lets tone vary: it is a function
from tone to a renderable color. Colors in one palette read as "the same
color, lighter or darker", which is what the role catalogs sample.

Each palette carries a key color: the color at the requested hue and chroma
whose tone is closest to 50, found by searching the gamut boundary.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from tonecraft.hct.colorspace import average_argb
from tonecraft.hct.hct import Hct


log = logging.getLogger(__name__)


# =============================================================================
# Key Color Search
# =============================================================================

# Chroma requested when probing the gamut boundary at a tone
_MAX_CHROMA_PROBE = 200.0

_PIVOT_TONE = 50
_TONE_STEP = 1
_CHROMA_EPSILON = 0.01


def find_key_color(hue: float, requested_chroma: float) -> Hct:
    """
    Find the key color of a palette.

    The key color has the palette's hue, and tone as close to 50 as possible
    while the requested chroma is still renderable. Maximum renderable chroma
    is unimodal in tone, so integer tones are binary searched: move toward
    the pivot while chroma suffices, otherwise toward the chroma peak.

    Args:
        hue: Palette hue in degrees
        requested_chroma: Palette chroma

    Returns:
        Hct at the hue, requested chroma (clipped if needed) and found tone
    """
    chroma_at_tone: dict[int, float] = {}

    def max_chroma(tone: int) -> float:
        if tone not in chroma_at_tone:
            chroma_at_tone[tone] = Hct.from_hct(hue, _MAX_CHROMA_PROBE, tone).chroma
        return chroma_at_tone[tone]

    lower_tone = 0
    upper_tone = 100
    while lower_tone < upper_tone:
        mid_tone = (lower_tone + upper_tone) // 2
        is_ascending = max_chroma(mid_tone) < max_chroma(mid_tone + _TONE_STEP)
        sufficient_chroma = max_chroma(mid_tone) >= requested_chroma - _CHROMA_EPSILON

        if sufficient_chroma:
            # Either range works; keep the half closer to the pivot
            if abs(lower_tone - _PIVOT_TONE) < abs(upper_tone - _PIVOT_TONE):
                upper_tone = mid_tone
            else:
                if lower_tone == mid_tone:
                    return Hct.from_hct(hue, requested_chroma, lower_tone)
                lower_tone = mid_tone
        else:
            # Not enough chroma here: climb toward the peak
            if is_ascending:
                lower_tone = mid_tone + _TONE_STEP
            else:
                upper_tone = mid_tone

    return Hct.from_hct(hue, requested_chroma, lower_tone)


# =============================================================================
# Tonal Palette
# =============================================================================


@dataclass(frozen=True, slots=True)
class TonalPalette:
    """
    Hue and chroma, with tone left free.

    Attributes:
        hue: Hue in degrees [0, 360)
        chroma: Requested chroma (>= 0); individual tones may render with
            less when the request is out of gamut
        key_color: Representative color of the palette (see find_key_color)
    """
    hue: float
    chroma: float
    key_color: Hct

    def __post_init__(self) -> None:
        if self.chroma < 0:
            raise ValueError(f"Palette chroma must be non-negative, got {self.chroma}")

    @classmethod
    def from_int(cls, argb: int) -> TonalPalette:
        """Palette with the hue and chroma of an ARGB color."""
        return cls.from_hct(Hct.from_int(argb))

    @classmethod
    def from_hct(cls, hct: Hct) -> TonalPalette:
        """Palette with the hue and chroma of a color, which becomes the key color."""
        return cls(hue=hct.hue, chroma=hct.chroma, key_color=hct)

    @classmethod
    def from_hue_and_chroma(cls, hue: float, chroma: float) -> TonalPalette:
        """Palette from a hue and chroma; the key color is searched for."""
        key_color = find_key_color(hue, chroma)
        log.debug(
            "Palette hue=%.1f chroma=%.1f: key tone %.1f",
            hue, chroma, key_color.tone,
        )
        return cls(hue=hue, chroma=chroma, key_color=key_color)

    @property
    def key_tone(self) -> float:
        """Tone of the key color."""
        return self.key_color.tone

    def tone(self, tone: float) -> int:
        """
        ARGB color of this palette at a tone.

        Yellows at tone 99 are averaged from tones 98 and 100; the direct
        solution reads as a greenish off-white.
        """
        if tone == 99 and Hct.is_yellow(self.hue):
            return average_argb(self.tone(98), self.tone(100))
        return Hct.from_hct(self.hue, self.chroma, tone).to_int()

    sample = tone  # alias

    def get_hct(self, tone: float) -> Hct:
        """HCT color of this palette at a tone."""
        return Hct.from_int(self.tone(tone))
