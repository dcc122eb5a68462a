# Copyright (c) 2026 Tonecraft
# SPDX-License-Identifier: MIT

"""
Chroma-tone search.

Maximum renderable chroma at a hue depends on tone: saturated yellows only
exist at high tones, saturated blues at low ones. Accent roles that want
the most colorful version of their palette search tone space for it.

The search is a local hill-climb from one end of the tone range. It assumes
the chroma-vs-tone curve of a hue is unimodal, which holds for the sRGB
gamut.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tonecraft.hct.colorspace import clamp
from tonecraft.hct.hct import Hct

if TYPE_CHECKING:
    from tonecraft.palettes.tonal_palette import TonalPalette


log = logging.getLogger(__name__)


def find_best_tone_for_chroma(
    hue: float,
    chroma: float,
    tone: float,
    by_decreasing_tone: bool,
) -> float:
    """
    Walk from `tone` toward the other end until `chroma` is renderable.

    Steps one tone unit at a time. A new tone is kept only when its sampled
    chroma strictly beats the best seen so far. The walk ends once the best
    chroma reaches the request or the tone leaves [0, 100].

    Args:
        hue: Hue in degrees
        chroma: Chroma to reach
        tone: Starting tone
        by_decreasing_tone: Walk downward (True) or upward (False)

    Returns:
        Best tone found; the starting tone if nothing improved on it
    """
    answer = tone
    best = Hct.from_hct(hue, chroma, answer)
    step = -1.0 if by_decreasing_tone else 1.0

    while best.chroma < chroma:
        if tone < 0 or tone > 100:
            break
        tone += step
        candidate = Hct.from_hct(hue, chroma, tone)
        if best.chroma < candidate.chroma:
            best = candidate
            answer = tone

    return answer


def t_max_c(
    palette: TonalPalette,
    lower_bound: float = 0.0,
    upper_bound: float = 100.0,
    chroma_multiplier: float = 1.0,
) -> float:
    """
    Highest tone at which the palette reaches its chroma.

    Searches downward from tone 100, then clamps to [lower_bound, upper_bound].
    """
    answer = find_best_tone_for_chroma(
        palette.hue, palette.chroma * chroma_multiplier, 100.0, True
    )
    result = clamp(lower_bound, upper_bound, answer)
    if result != answer:
        log.debug("t_max_c %.1f clamped to %.1f", answer, result)
    return result


def t_min_c(
    palette: TonalPalette,
    lower_bound: float = 0.0,
    upper_bound: float = 100.0,
) -> float:
    """
    Lowest tone at which the palette reaches its chroma.

    Searches upward from tone 0, then clamps to [lower_bound, upper_bound].
    """
    answer = find_best_tone_for_chroma(palette.hue, palette.chroma, 0.0, False)
    result = clamp(lower_bound, upper_bound, answer)
    if result != answer:
        log.debug("t_min_c %.1f clamped to %.1f", answer, result)
    return result
