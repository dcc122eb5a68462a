# Copyright (c) 2026 Tonecraft
# SPDX-License-Identifier: MIT

"""
Contrast ratios between tones.

Contrast ratio is the WCAG measure (L1 + 5) / (L2 + 5) computed on relative
luminance Y (0-100 scale). Since HCT tone is L*, and Y is a monotonic
function of L*, contrast between two colors depends only on their tones.

Ratios range from 1 (same tone) to 21 (black on white). Because contrast
grows monotonically with tone distance on either side of a background, the
tone meeting a target ratio is found in closed form rather than by search.
"""

from __future__ import annotations

from tonecraft.hct.colorspace import clamp, lstar_from_y, y_from_lstar


def ratio_of_ys(y1: float, y2: float) -> float:
    """Contrast ratio of two relative luminances (0-100 scale)."""
    lighter = max(y1, y2)
    darker = y2 if lighter == y1 else y1
    return (lighter + 5.0) / (darker + 5.0)


def ratio_of_tones(tone_a: float, tone_b: float) -> float:
    """
    Contrast ratio of two tones.

    Tones are clamped to [0, 100] first.

    Returns:
        Ratio in [1, 21]
    """
    tone_a = clamp(0.0, 100.0, tone_a)
    tone_b = clamp(0.0, 100.0, tone_b)
    return ratio_of_ys(float(y_from_lstar(tone_a)), float(y_from_lstar(tone_b)))


def lighter(tone: float, ratio: float) -> float:
    """
    The darkest tone lighter than `tone` with at least `ratio` contrast.

    The answer is nudged 0.4 L* past the exact solution so the rounded color
    still meets the ratio.

    Returns:
        Tone in [0, 100], or -1 if the ratio cannot be reached
    """
    if tone < 0.0 or tone > 100.0:
        return -1.0

    dark_y = float(y_from_lstar(tone))
    light_y = ratio * (dark_y + 5.0) - 5.0
    real_contrast = ratio_of_ys(light_y, dark_y)
    delta = abs(real_contrast - ratio)
    if real_contrast < ratio and delta > 0.04:
        return -1.0

    answer = float(lstar_from_y(light_y)) + 0.4
    if answer < 0.0 or answer > 100.0:
        return -1.0
    return answer


def darker(tone: float, ratio: float) -> float:
    """
    The lightest tone darker than `tone` with at least `ratio` contrast.

    Returns:
        Tone in [0, 100], or -1 if the ratio cannot be reached
    """
    if tone < 0.0 or tone > 100.0:
        return -1.0

    light_y = float(y_from_lstar(tone))
    dark_y = ((light_y + 5.0) / ratio) - 5.0
    real_contrast = ratio_of_ys(light_y, dark_y)
    delta = abs(real_contrast - ratio)
    if real_contrast < ratio and delta > 0.04:
        return -1.0

    answer = float(lstar_from_y(dark_y)) - 0.4
    if answer < 0.0 or answer > 100.0:
        return -1.0
    return answer


def lighter_unsafe(tone: float, ratio: float) -> float:
    """Like lighter(), but returns 100 (white) when the ratio is unreachable."""
    answer = lighter(tone, ratio)
    return 100.0 if answer < 0.0 else answer


def darker_unsafe(tone: float, ratio: float) -> float:
    """Like darker(), but returns 0 (black) when the ratio is unreachable."""
    answer = darker(tone, ratio)
    return 0.0 if answer < 0.0 else answer
