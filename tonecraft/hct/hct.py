# Copyright (c) 2026 Tonecraft
# SPDX-License-Identifier: MIT

"""
HCT: hue, chroma, tone.

Hue and chroma come from CAM16; tone is CIELAB L*. Tone maps directly to
contrast (see tonecraft.hct.contrast), which is what makes HCT useful for
building accessible color schemes.

Solving HCT → ARGB:
    For a requested (hue, chroma, tone), the luminance Y is fixed by the
    tone. The solver evaluates a grid of chroma candidates at once: for each
    candidate, CAM16 lightness J is bisected until the color hits Y exactly,
    then the candidate is kept if it falls inside the sRGB gamut. The highest
    in-gamut chroma is refined with a second, finer grid. When the requested
    chroma is not renderable, the most chromatic in-gamut color at that hue
    and tone is returned (gamut clipping by chroma reduction).
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

import numpy as np
from numpy.typing import NDArray

from tonecraft.hct.cam16 import cam16_from_argb, xyz_from_jch
from tonecraft.hct.colorspace import (
    argb_from_lstar,
    argb_from_xyz,
    hex_from_argb,
    lstar_from_argb,
    lstar_from_y,
    sanitize_degrees,
    xyz_to_linear_rgb,
    y_from_lstar,
)


# =============================================================================
# Solver
# =============================================================================

# Chroma candidates evaluated per pass (coarse pass, then one refinement)
_CHROMA_STEPS = 33
_REFINEMENT_PASSES = 1

# Bisection steps on J in [0, 100]; 24 steps resolve J to ~6e-6
_J_ITERATIONS = 24

# Linear RGB tolerance (0-100 scale) when testing gamut membership
_GAMUT_EPSILON = 1e-3

# Maximum L* error for a candidate to count as "at the requested tone"
_TONE_EPSILON = 0.2


def _solve_candidates(
    hue: float,
    chromas: NDArray[np.float64],
    tone: float,
) -> tuple[NDArray[np.float64], NDArray[np.bool_]]:
    """
    Find XYZ for each chroma candidate at (hue, tone).

    Returns:
        Tuple of (XYZ array of shape (N, 3), boolean validity mask of shape (N,))
    """
    y_target = float(y_from_lstar(tone))
    low = np.zeros_like(chromas)
    high = np.full_like(chromas, 100.0)

    for _ in range(_J_ITERATIONS):
        mid = (low + high) / 2.0
        y = xyz_from_jch(mid, chromas, hue)[..., 1]
        below = y < y_target
        low = np.where(below, mid, low)
        high = np.where(below, high, mid)

    xyz = xyz_from_jch((low + high) / 2.0, chromas, hue)
    with np.errstate(invalid="ignore"):
        linear = xyz_to_linear_rgb(xyz)
        in_gamut = np.all(
            (linear >= -_GAMUT_EPSILON) & (linear <= 100.0 + _GAMUT_EPSILON),
            axis=-1,
        )
        on_tone = np.abs(lstar_from_y(xyz[..., 1]) - tone) < _TONE_EPSILON
    return xyz, in_gamut & on_tone


@lru_cache(maxsize=16384)
def solve_to_argb(hue: float, chroma: float, tone: float) -> int:
    """
    Solve an HCT request to the closest renderable ARGB color.

    The result has the requested hue and tone; chroma is the requested
    chroma when it is renderable, otherwise the maximum renderable chroma.

    Args:
        hue: Hue in degrees (any value, wrapped to [0, 360))
        chroma: Requested chroma (>= 0)
        tone: Requested tone, L* in [0, 100]

    Returns:
        Opaque ARGB integer
    """
    if chroma < 0.0001 or tone < 0.0001 or tone > 99.9999:
        return argb_from_lstar(tone)

    hue = sanitize_degrees(hue)
    candidates = np.linspace(0.0, chroma, _CHROMA_STEPS)
    xyz, valid = _solve_candidates(hue, candidates, tone)

    for _ in range(_REFINEMENT_PASSES):
        hits = np.flatnonzero(valid)
        if len(hits) == 0 or hits[-1] == len(candidates) - 1:
            break
        best = hits[-1]
        candidates = np.linspace(candidates[best], candidates[best + 1], _CHROMA_STEPS)
        xyz, valid = _solve_candidates(hue, candidates, tone)

    hits = np.flatnonzero(valid)
    if len(hits) == 0:
        return argb_from_lstar(tone)
    return argb_from_xyz(xyz[hits[-1]])


@lru_cache(maxsize=16384)
def _hct_components(argb: int) -> tuple[float, float, float]:
    hue, chroma, _ = cam16_from_argb(argb)
    return hue, chroma, lstar_from_argb(argb)


# =============================================================================
# HCT Color
# =============================================================================


@dataclass(frozen=True, slots=True)
class Hct:
    """
    A renderable color expressed in HCT.

    Always constructed from a concrete ARGB value, so hue/chroma/tone describe
    the color that will actually be displayed (after gamut clipping and 8-bit
    quantization), not the request.

    Attributes:
        argb: Opaque 0xAARRGGBB integer
        hue: CAM16 hue in degrees [0, 360)
        chroma: CAM16 chroma (>= 0; ~0 for grays)
        tone: L* in [0, 100]
    """
    argb: int
    hue: float
    chroma: float
    tone: float

    @classmethod
    def from_hct(cls, hue: float, chroma: float, tone: float) -> Hct:
        """
        Create the closest renderable color to a hue/chroma/tone request.

        Chroma is reduced if the request is outside the sRGB gamut.
        """
        return cls.from_int(solve_to_argb(float(hue), float(chroma), float(tone)))

    @classmethod
    def from_int(cls, argb: int) -> Hct:
        """Create from an ARGB integer."""
        argb = int(argb) & 0xFFFFFFFF
        hue, chroma, tone = _hct_components(argb)
        return cls(argb=argb, hue=hue, chroma=chroma, tone=tone)

    def to_int(self) -> int:
        """ARGB integer of this color."""
        return self.argb

    @property
    def hex(self) -> str:
        """Hex string like "#3941C8"."""
        return hex_from_argb(self.argb)

    def __str__(self) -> str:
        return f"HCT({self.hue:.0f}, {self.chroma:.0f}, {self.tone:.0f})"

    # -------------------------------------------------------------------------
    # Hue families
    # -------------------------------------------------------------------------

    @staticmethod
    def is_blue(hue: float) -> bool:
        """Blue hues appear darker than other hues at the same tone."""
        return 250.0 <= hue < 270.0

    @staticmethod
    def is_yellow(hue: float) -> bool:
        """Yellow hues appear brighter than other hues at the same tone."""
        return 105.0 <= hue < 125.0

    @staticmethod
    def is_cyan(hue: float) -> bool:
        return 170.0 <= hue < 207.0
