# Copyright (c) 2026 Tonecraft
# SPDX-License-Identifier: MIT

"""
CAM16 color appearance model.

HCT takes its hue and chroma from CAM16 and its tone from CIELAB L*.
Only the parts needed by HCT are implemented:

- Viewing conditions (default: D65, ~11.7 cd/m² adapting field, L*=50 background)
- Forward transform XYZ → (hue, chroma, J)
- Inverse transform (J, chroma, hue) → XYZ, vectorized over J and chroma

References:
- Li et al., "Comprehensive color solutions: CAM16, CAT16, and CAM16-UCS" (2017)
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray

from tonecraft.hct.colorspace import (
    WHITE_POINT_D65,
    clamp,
    lerp,
    sanitize_degrees,
    xyz_from_argb,
    y_from_lstar,
)


# XYZ to CAT16 cone-like space
_XYZ_TO_CAM16RGB = np.array([
    [0.401288, 0.650173, -0.051461],
    [-0.250268, 1.204414, 0.045854],
    [-0.002079, 0.048952, 0.953127],
], dtype=np.float64)

_CAM16RGB_TO_XYZ = np.array([
    [1.8620678, -1.0112547, 0.14918678],
    [0.38752654, 0.62144744, -0.00897398],
    [-0.0158415, -0.03412294, 1.0499644],
], dtype=np.float64)


# =============================================================================
# Viewing Conditions
# =============================================================================


@dataclass(frozen=True, eq=False)
class ViewingConditions:
    """
    Precomputed CAM16 parameters for one viewing environment.

    Attributes mirror the CAM16 paper: n (background induction), aw
    (achromatic response of white), nbb/ncb (induction factors), c (surround
    exponent), nc (chromatic induction), rgb_d (discounting factors per
    channel), fl (luminance adaptation), fl_root (fl ** 0.25), z (base
    exponent).
    """
    n: float
    aw: float
    nbb: float
    ncb: float
    c: float
    nc: float
    rgb_d: NDArray[np.float64]
    fl: float
    fl_root: float
    z: float

    @classmethod
    def make(
        cls,
        white_point: ArrayLike = WHITE_POINT_D65,
        adapting_luminance: float = -1.0,
        background_lstar: float = 50.0,
        surround: float = 2.0,
        discounting_illuminant: bool = False,
    ) -> ViewingConditions:
        """
        Build viewing conditions.

        Args:
            white_point: XYZ of the adopted white (0-100)
            adapting_luminance: cd/m² of the adapting field; <= 0 uses the
                default of a 200 lux environment at L* 50
            background_lstar: L* of the background
            surround: 0 (dark) to 2 (average)
            discounting_illuminant: Assume full adaptation when True
        """
        white_point = np.asarray(white_point, dtype=np.float64)
        if adapting_luminance <= 0.0:
            adapting_luminance = (200.0 / math.pi) * float(y_from_lstar(50.0)) / 100.0
        background_lstar = max(0.1, background_lstar)

        rgb_w = _XYZ_TO_CAM16RGB @ white_point

        f = 0.8 + surround / 10.0
        if f >= 0.9:
            c = lerp(0.59, 0.69, (f - 0.9) * 10.0)
        else:
            c = lerp(0.525, 0.59, (f - 0.8) * 10.0)

        if discounting_illuminant:
            d = 1.0
        else:
            d = f * (1.0 - (1.0 / 3.6) * math.exp((-adapting_luminance - 42.0) / 92.0))
        d = clamp(0.0, 1.0, d)

        rgb_d = d * (100.0 / rgb_w) + 1.0 - d

        k = 1.0 / (5.0 * adapting_luminance + 1.0)
        k4 = k ** 4
        k4f = 1.0 - k4
        fl = k4 * adapting_luminance + 0.1 * k4f * k4f * (5.0 * adapting_luminance) ** (1.0 / 3.0)

        n = float(y_from_lstar(background_lstar)) / float(white_point[1])
        z = 1.48 + math.sqrt(n)
        nbb = 0.725 / n ** 0.2

        rgb_a_factors = np.power(fl * rgb_d * rgb_w / 100.0, 0.42)
        rgb_a = 400.0 * rgb_a_factors / (rgb_a_factors + 27.13)
        aw = float((2.0 * rgb_a[0] + rgb_a[1] + 0.05 * rgb_a[2]) * nbb)

        return cls(
            n=n,
            aw=aw,
            nbb=nbb,
            ncb=nbb,
            c=c,
            nc=f,
            rgb_d=rgb_d,
            fl=fl,
            fl_root=fl ** 0.25,
            z=z,
        )


DEFAULT_VIEWING_CONDITIONS = ViewingConditions.make()


# =============================================================================
# Forward: XYZ → CAM16
# =============================================================================


def cam16_from_xyz(
    xyz: ArrayLike,
    vc: ViewingConditions = DEFAULT_VIEWING_CONDITIONS,
) -> tuple[float, float, float]:
    """
    CAM16 hue, chroma and lightness J of a single XYZ color.

    Returns:
        Tuple of (hue in degrees [0, 360), chroma >= 0, J >= 0)
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    rgb_c = _XYZ_TO_CAM16RGB @ xyz
    rgb_d = vc.rgb_d * rgb_c

    af = np.power(vc.fl * np.abs(rgb_d) / 100.0, 0.42)
    r_a, g_a, b_a = (np.sign(rgb_d) * 400.0 * af / (af + 27.13)).tolist()

    # Opponent dimensions
    a = (11.0 * r_a + -12.0 * g_a + b_a) / 11.0
    b = (r_a + g_a - 2.0 * b_a) / 9.0
    u = (20.0 * r_a + 20.0 * g_a + 21.0 * b_a) / 20.0
    p2 = (40.0 * r_a + 20.0 * g_a + b_a) / 20.0

    hue = sanitize_degrees(math.degrees(math.atan2(b, a)))

    ac = p2 * vc.nbb
    j = 100.0 * math.pow(max(ac, 0.0) / vc.aw, vc.c * vc.z)

    hue_prime = hue + 360.0 if hue < 20.14 else hue
    e_hue = 0.25 * (math.cos(math.radians(hue_prime) + 2.0) + 3.8)
    p1 = 50000.0 / 13.0 * e_hue * vc.nc * vc.ncb
    t = p1 * math.hypot(a, b) / (u + 0.305)
    alpha = math.pow(t, 0.9) * math.pow(1.64 - math.pow(0.29, vc.n), 0.73)
    chroma = alpha * math.sqrt(j / 100.0)

    return hue, chroma, j


def cam16_from_argb(
    argb: int,
    vc: ViewingConditions = DEFAULT_VIEWING_CONDITIONS,
) -> tuple[float, float, float]:
    """CAM16 hue, chroma and J of an ARGB color."""
    return cam16_from_xyz(xyz_from_argb(argb), vc)


# =============================================================================
# Inverse: CAM16 → XYZ (vectorized)
# =============================================================================


def xyz_from_jch(
    j: ArrayLike,
    chroma: ArrayLike,
    hue: float,
    vc: ViewingConditions = DEFAULT_VIEWING_CONDITIONS,
) -> NDArray[np.float64]:
    """
    Convert CAM16 (J, chroma) pairs at one hue to XYZ.

    J and chroma broadcast against each other, so a whole grid of candidates
    can be evaluated at once.

    Returns:
        Array of shape broadcast(j, chroma).shape + (3,) with X, Y, Z.
        Entries may be NaN or inf for impossible combinations.
    """
    j = np.asarray(j, dtype=np.float64)
    chroma = np.asarray(chroma, dtype=np.float64)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        alpha = np.where(
            (chroma == 0.0) | (j == 0.0),
            0.0,
            chroma / np.sqrt(j / 100.0),
        )
        t = np.power(alpha / math.pow(1.64 - math.pow(0.29, vc.n), 0.73), 1.0 / 0.9)

        h_rad = math.radians(hue)
        e_hue = 0.25 * (math.cos(h_rad + 2.0) + 3.8)
        ac = vc.aw * np.power(j / 100.0, 1.0 / vc.c / vc.z)
        p1 = e_hue * (50000.0 / 13.0) * vc.nc * vc.ncb
        p2 = ac / vc.nbb

        h_sin = math.sin(h_rad)
        h_cos = math.cos(h_rad)

        gamma = 23.0 * (p2 + 0.305) * t / (23.0 * p1 + 11.0 * t * h_cos + 108.0 * t * h_sin)
        a = gamma * h_cos
        b = gamma * h_sin

        r_a = (460.0 * p2 + 451.0 * a + 288.0 * b) / 1403.0
        g_a = (460.0 * p2 - 891.0 * a - 261.0 * b) / 1403.0
        b_a = (460.0 * p2 - 220.0 * a - 6300.0 * b) / 1403.0
        rgb_a = np.stack(np.broadcast_arrays(r_a, g_a, b_a), axis=-1)

        base = np.maximum(0.0, 27.13 * np.abs(rgb_a) / (400.0 - np.abs(rgb_a)))
        rgb_c = np.sign(rgb_a) * (100.0 / vc.fl) * np.power(base, 1.0 / 0.42)
        rgb_f = rgb_c / vc.rgb_d

        return np.einsum('...j,ij->...i', rgb_f, _CAM16RGB_TO_XYZ)
