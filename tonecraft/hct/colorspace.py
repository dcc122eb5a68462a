# Copyright (c) 2026 Tonecraft
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chain: ARGB (8-bit sRGB) → Linear RGB → XYZ → L*

Linear RGB and XYZ are on a 0-100 scale, matching CAM16 conventions.
L* is CIELAB lightness, which HCT uses as "tone".

All conversions are pure NumPy for determinism and no external dependencies.
Functions accept scalars or arrays; scalar callers wrap results in float().
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray


# =============================================================================
# Scalar Helpers
# =============================================================================


def clamp(lower: float, upper: float, value: float) -> float:
    """Clamp value to [lower, upper]."""
    if value < lower:
        return lower
    if value > upper:
        return upper
    return value


def lerp(start: float, stop: float, amount: float) -> float:
    """Linear interpolation: start at amount=0, stop at amount=1."""
    return (1.0 - amount) * start + amount * stop


def sanitize_degrees(degrees: float) -> float:
    """Wrap an angle into [0, 360)."""
    degrees = degrees % 360.0
    if degrees < 0.0:
        degrees += 360.0
    return degrees


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB [0,1].

    sRGB uses a piecewise gamma curve:
    - For values <= 0.040449936: linear/12.92
    - Otherwise: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    linear = np.where(
        srgb <= 0.040449936,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4)
    )
    return linear


def linear_to_srgb(linear: ArrayLike) -> NDArray[np.float64]:
    """
    Convert linear RGB [0,1] to sRGB values [0,1].

    Inverse of srgb_to_linear. Out-of-gamut values are clipped.
    """
    linear = np.asarray(linear, dtype=np.float64)
    # Clip negative values to avoid NaN in power function
    linear_safe = np.maximum(linear, 0.0)
    srgb = np.where(
        linear_safe <= 0.0031308,
        linear_safe * 12.92,
        1.055 * np.power(linear_safe, 1.0 / 2.4) - 0.055
    )
    return np.clip(srgb, 0.0, 1.0)


def linearized(components: ArrayLike) -> NDArray[np.float64]:
    """8-bit sRGB components [0,255] to linear RGB on a 0-100 scale."""
    return srgb_to_linear(np.asarray(components, dtype=np.float64) / 255.0) * 100.0


def delinearized(linear: ArrayLike) -> NDArray[np.int64]:
    """Linear RGB on a 0-100 scale to rounded 8-bit sRGB components."""
    srgb = linear_to_srgb(np.asarray(linear, dtype=np.float64) / 100.0)
    return np.round(srgb * 255.0).astype(np.int64)


# =============================================================================
# Linear RGB ↔ XYZ (D65)
# =============================================================================

SRGB_TO_XYZ = np.array([
    [0.41233895, 0.35762064, 0.18051042],
    [0.2126, 0.7152, 0.0722],
    [0.01932141, 0.11916382, 0.95034478],
], dtype=np.float64)

XYZ_TO_SRGB = np.array([
    [3.2413774792388685, -1.5376652402851851, -0.49885366846268053],
    [-0.9691452513005321, 1.8758853451067872, 0.04156585616912061],
    [0.05562093689691305, -0.20395524564742123, 1.0571799111220335],
], dtype=np.float64)

WHITE_POINT_D65 = np.array([95.047, 100.0, 108.883], dtype=np.float64)


def linear_rgb_to_xyz(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert linear RGB (0-100) to XYZ (0-100).

    Args:
        rgb: Array of shape (..., 3)

    Returns:
        Array of shape (..., 3) with X, Y, Z
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    return np.einsum('...j,ij->...i', rgb, SRGB_TO_XYZ)


def xyz_to_linear_rgb(xyz: ArrayLike) -> NDArray[np.float64]:
    """Convert XYZ (0-100) to linear RGB (0-100). No clipping."""
    xyz = np.asarray(xyz, dtype=np.float64)
    return np.einsum('...j,ij->...i', xyz, XYZ_TO_SRGB)


# =============================================================================
# Y ↔ L* (CIELAB lightness, HCT tone)
# =============================================================================

_EPSILON = 216.0 / 24389.0
_KAPPA = 24389.0 / 27.0


def y_from_lstar(lstar: ArrayLike) -> NDArray[np.float64]:
    """
    Convert L* [0,100] to relative luminance Y [0,100].

    L* is perceptually linear; Y is physically linear.
    """
    ft = (np.asarray(lstar, dtype=np.float64) + 16.0) / 116.0
    ft3 = ft * ft * ft
    return 100.0 * np.where(ft3 > _EPSILON, ft3, (116.0 * ft - 16.0) / _KAPPA)


def lstar_from_y(y: ArrayLike) -> NDArray[np.float64]:
    """Convert relative luminance Y [0,100] to L* [0,100]."""
    t = np.asarray(y, dtype=np.float64) / 100.0
    f = np.where(t > _EPSILON, np.cbrt(t), (_KAPPA * t + 16.0) / 116.0)
    return 116.0 * f - 16.0


# =============================================================================
# ARGB Integers
# =============================================================================


def argb_from_rgb(red: int, green: int, blue: int) -> int:
    """Pack 8-bit components into an opaque 0xAARRGGBB integer."""
    return (0xFF << 24) | ((red & 0xFF) << 16) | ((green & 0xFF) << 8) | (blue & 0xFF)


def rgb_from_argb(argb: int) -> tuple[int, int, int]:
    """Unpack the red, green and blue components of an ARGB integer."""
    return (argb >> 16) & 0xFF, (argb >> 8) & 0xFF, argb & 0xFF


def argb_from_linear_rgb(linear: ArrayLike) -> int:
    """Convert linear RGB (0-100) to ARGB, clipping to the sRGB gamut."""
    r, g, b = delinearized(linear)
    return argb_from_rgb(int(r), int(g), int(b))


def argb_from_xyz(xyz: ArrayLike) -> int:
    """Convert XYZ (0-100) to ARGB, clipping to the sRGB gamut."""
    return argb_from_linear_rgb(xyz_to_linear_rgb(xyz))


def xyz_from_argb(argb: int) -> NDArray[np.float64]:
    """Convert ARGB to XYZ (0-100)."""
    return linear_rgb_to_xyz(linearized(rgb_from_argb(argb)))


def argb_from_lstar(lstar: float) -> int:
    """The gray with the given L*."""
    component = delinearized(y_from_lstar(lstar))
    c = int(component)
    return argb_from_rgb(c, c, c)


def lstar_from_argb(argb: int) -> float:
    """L* (tone) of an ARGB color."""
    return float(lstar_from_y(xyz_from_argb(argb)[1]))


def average_argb(argb1: int, argb2: int) -> int:
    """Channel-wise average of two colors, rounded."""
    rgb1 = rgb_from_argb(argb1)
    rgb2 = rgb_from_argb(argb2)
    r, g, b = (round((c1 + c2) / 2.0) for c1, c2 in zip(rgb1, rgb2))
    return argb_from_rgb(r, g, b)


# =============================================================================
# Hex Strings
# =============================================================================


def hex_from_argb(argb: int) -> str:
    """
    Convert an ARGB integer to a hex color string.

    Returns:
        Hex color string like "#3941C8" (alpha dropped)
    """
    r, g, b = rgb_from_argb(argb)
    return f"#{r:02X}{g:02X}{b:02X}"


def argb_from_hex(hex_color: str) -> int:
    """
    Convert a hex color string to an opaque ARGB integer.

    Args:
        hex_color: Hex string like "#3941C8", "3941C8" or "#39C"

    Raises:
        ValueError: If the string is not a 3- or 6-digit hex color
    """
    # Strip # if present
    digits = hex_color.strip().lstrip("#")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) != 6:
        raise ValueError(f"Hex color must have 3 or 6 digits, got {hex_color!r}")
    try:
        value = int(digits, 16)
    except ValueError:
        raise ValueError(f"Invalid hex color {hex_color!r}") from None
    return 0xFF000000 | value
