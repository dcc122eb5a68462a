# Copyright (c) 2026 Tonecraft
# SPDX-License-Identifier: MIT

"""
2021 color spec: the baseline role catalog.

Surfaces come from the neutral palettes at fixed tones (interpolated over
contrast level for the container surfaces). Accents and their containers
are kept 10 tones apart by "nearer" delta pairs; fixed colors are kept 10
tones apart and on the same side of the 50-59 band.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Mapping

from tonecraft.dynamiccolor.color_spec import ROLE_NAMES, SpecVersion, lookup_role
from tonecraft.dynamiccolor.contrast_curve import ContrastCurve
from tonecraft.dynamiccolor.dynamic_color import DynamicColor
from tonecraft.dynamiccolor.tone_delta_pair import ToneDeltaPair, TonePolarity

if TYPE_CHECKING:
    from tonecraft.dynamiccolor.dynamic_scheme import DynamicScheme
    from tonecraft.palettes.tonal_palette import TonalPalette


def _palette(attr: str) -> Callable[[DynamicScheme], TonalPalette]:
    return lambda s: getattr(s, attr)


def _curve_tone(dark: ContrastCurve | float, light: ContrastCurve | float):
    """Tone rule picking a fixed tone or a contrast-interpolated tone per mode."""

    def tone(s: DynamicScheme) -> float:
        value = dark if s.is_dark else light
        if isinstance(value, ContrastCurve):
            return value.value_at(s.contrast_level)
        return value

    return tone


# Contrast curves shared by several roles
_ACCENT_CURVE = ContrastCurve(3.0, 4.5, 7.0, 7.0)
_CONTAINER_CURVE = ContrastCurve(1.0, 1.0, 3.0, 4.5)
_ON_ACCENT_CURVE = ContrastCurve(4.5, 7.0, 11.0, 21.0)
_ON_CONTAINER_CURVE = ContrastCurve(3.0, 4.5, 7.0, 11.0)


class ColorSpec2021:
    """Role catalog of the 2021 ruleset."""

    version = SpecVersion.SPEC_2021

    def __init__(self) -> None:
        self._catalog: Mapping[str, Callable[[], DynamicColor]] = MappingProxyType(
            {name: getattr(self, name) for name in ROLE_NAMES}
        )

    @property
    def catalog(self) -> Mapping[str, Callable[[], DynamicColor]]:
        return self._catalog

    def get(self, name: str) -> DynamicColor:
        return lookup_role(self, name)

    def highest_surface(self, scheme: DynamicScheme) -> DynamicColor:
        return self.surface_bright() if scheme.is_dark else self.surface_dim()

    # =========================================================================
    # Palette Key Colors
    # =========================================================================

    def _key_color(self, name: str, attr: str) -> DynamicColor:
        return DynamicColor.from_palette(
            name=name,
            palette=_palette(attr),
            tone=lambda s: getattr(s, attr).key_color.tone,
        )

    def primary_palette_key_color(self) -> DynamicColor:
        return self._key_color("primary_palette_key_color", "primary_palette")

    def secondary_palette_key_color(self) -> DynamicColor:
        return self._key_color("secondary_palette_key_color", "secondary_palette")

    def tertiary_palette_key_color(self) -> DynamicColor:
        return self._key_color("tertiary_palette_key_color", "tertiary_palette")

    def neutral_palette_key_color(self) -> DynamicColor:
        return self._key_color("neutral_palette_key_color", "neutral_palette")

    def neutral_variant_palette_key_color(self) -> DynamicColor:
        return self._key_color("neutral_variant_palette_key_color", "neutral_variant_palette")

    def error_palette_key_color(self) -> DynamicColor:
        return self._key_color("error_palette_key_color", "error_palette")

    # =========================================================================
    # Surfaces
    # =========================================================================

    def _neutral_surface(self, name: str, dark, light) -> DynamicColor:
        return DynamicColor.from_palette(
            name=name,
            palette=_palette("neutral_palette"),
            tone=_curve_tone(dark, light),
            is_background=True,
        )

    def background(self) -> DynamicColor:
        return self._neutral_surface("background", 6.0, 98.0)

    def on_background(self) -> DynamicColor:
        return DynamicColor.from_palette(
            name="on_background",
            palette=_palette("neutral_palette"),
            tone=lambda s: 90.0 if s.is_dark else 10.0,
            background=lambda s: self.background(),
            contrast_curve=lambda s: ContrastCurve(3.0, 3.0, 4.5, 7.0),
        )

    def surface(self) -> DynamicColor:
        return self._neutral_surface("surface", 6.0, 98.0)

    def surface_dim(self) -> DynamicColor:
        return self._neutral_surface(
            "surface_dim", 6.0, ContrastCurve(87.0, 87.0, 80.0, 75.0)
        )

    def surface_bright(self) -> DynamicColor:
        return self._neutral_surface(
            "surface_bright", ContrastCurve(24.0, 24.0, 29.0, 34.0), 98.0
        )

    def surface_container_lowest(self) -> DynamicColor:
        return self._neutral_surface(
            "surface_container_lowest", ContrastCurve(4.0, 4.0, 2.0, 0.0), 100.0
        )

    def surface_container_low(self) -> DynamicColor:
        return self._neutral_surface(
            "surface_container_low",
            ContrastCurve(10.0, 10.0, 11.0, 12.0),
            ContrastCurve(96.0, 96.0, 96.0, 95.0),
        )

    def surface_container(self) -> DynamicColor:
        return self._neutral_surface(
            "surface_container",
            ContrastCurve(12.0, 12.0, 16.0, 20.0),
            ContrastCurve(94.0, 94.0, 92.0, 90.0),
        )

    def surface_container_high(self) -> DynamicColor:
        return self._neutral_surface(
            "surface_container_high",
            ContrastCurve(17.0, 17.0, 21.0, 25.0),
            ContrastCurve(92.0, 92.0, 88.0, 85.0),
        )

    def surface_container_highest(self) -> DynamicColor:
        return self._neutral_surface(
            "surface_container_highest",
            ContrastCurve(22.0, 22.0, 26.0, 30.0),
            ContrastCurve(90.0, 90.0, 84.0, 80.0),
        )

    def on_surface(self) -> DynamicColor:
        return DynamicColor.from_palette(
            name="on_surface",
            palette=_palette("neutral_palette"),
            tone=lambda s: 90.0 if s.is_dark else 10.0,
            background=self.highest_surface,
            contrast_curve=lambda s: _ON_ACCENT_CURVE,
        )

    def surface_variant(self) -> DynamicColor:
        return DynamicColor.from_palette(
            name="surface_variant",
            palette=_palette("neutral_variant_palette"),
            tone=lambda s: 30.0 if s.is_dark else 90.0,
            is_background=True,
        )

    def on_surface_variant(self) -> DynamicColor:
        return DynamicColor.from_palette(
            name="on_surface_variant",
            palette=_palette("neutral_variant_palette"),
            tone=lambda s: 80.0 if s.is_dark else 30.0,
            background=self.highest_surface,
            contrast_curve=lambda s: _ON_CONTAINER_CURVE,
        )

    def inverse_surface(self) -> DynamicColor:
        return DynamicColor.from_palette(
            name="inverse_surface",
            palette=_palette("neutral_palette"),
            tone=lambda s: 90.0 if s.is_dark else 20.0,
            is_background=True,
        )

    def inverse_on_surface(self) -> DynamicColor:
        return DynamicColor.from_palette(
            name="inverse_on_surface",
            palette=_palette("neutral_palette"),
            tone=lambda s: 20.0 if s.is_dark else 95.0,
            background=lambda s: self.inverse_surface(),
            contrast_curve=lambda s: _ON_ACCENT_CURVE,
        )

    def outline(self) -> DynamicColor:
        return DynamicColor.from_palette(
            name="outline",
            palette=_palette("neutral_variant_palette"),
            tone=lambda s: 60.0 if s.is_dark else 50.0,
            background=self.highest_surface,
            contrast_curve=lambda s: ContrastCurve(1.5, 3.0, 4.5, 7.0),
        )

    def outline_variant(self) -> DynamicColor:
        return DynamicColor.from_palette(
            name="outline_variant",
            palette=_palette("neutral_variant_palette"),
            tone=lambda s: 30.0 if s.is_dark else 80.0,
            background=self.highest_surface,
            contrast_curve=lambda s: _CONTAINER_CURVE,
        )

    def shadow(self) -> DynamicColor:
        return DynamicColor.from_palette(
            name="shadow",
            palette=_palette("neutral_palette"),
            tone=lambda s: 0.0,
        )

    def scrim(self) -> DynamicColor:
        return DynamicColor.from_palette(
            name="scrim",
            palette=_palette("neutral_palette"),
            tone=lambda s: 0.0,
        )

    def surface_tint(self) -> DynamicColor:
        return DynamicColor.from_palette(
            name="surface_tint",
            palette=_palette("primary_palette"),
            tone=lambda s: 80.0 if s.is_dark else 40.0,
            is_background=True,
        )

    # =========================================================================
    # Accents (primary, secondary, tertiary, error)
    # =========================================================================

    def _accent(self, family: str) -> DynamicColor:
        return DynamicColor.from_palette(
            name=family,
            palette=_palette(f"{family}_palette"),
            tone=lambda s: 80.0 if s.is_dark else 40.0,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=lambda s: _ACCENT_CURVE,
            tone_delta_pair=lambda s: self._accent_pair(family),
        )

    def _on_accent(self, family: str) -> DynamicColor:
        return DynamicColor.from_palette(
            name=f"on_{family}",
            palette=_palette(f"{family}_palette"),
            tone=lambda s: 20.0 if s.is_dark else 100.0,
            background=lambda s: self.get(family),
            contrast_curve=lambda s: _ON_ACCENT_CURVE,
        )

    def _container(self, family: str) -> DynamicColor:
        return DynamicColor.from_palette(
            name=f"{family}_container",
            palette=_palette(f"{family}_palette"),
            tone=lambda s: 30.0 if s.is_dark else 90.0,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=lambda s: _CONTAINER_CURVE,
            tone_delta_pair=lambda s: self._accent_pair(family),
        )

    def _on_container(self, family: str) -> DynamicColor:
        return DynamicColor.from_palette(
            name=f"on_{family}_container",
            palette=_palette(f"{family}_palette"),
            tone=lambda s: 90.0 if s.is_dark else 30.0,
            background=lambda s: self.get(f"{family}_container"),
            contrast_curve=lambda s: _ON_CONTAINER_CURVE,
        )

    def _accent_pair(self, family: str) -> ToneDeltaPair:
        return ToneDeltaPair(
            self.get(f"{family}_container"),
            self.get(family),
            10.0,
            TonePolarity.NEARER,
            stay_together=False,
        )

    def primary(self) -> DynamicColor:
        return self._accent("primary")

    def on_primary(self) -> DynamicColor:
        return self._on_accent("primary")

    def primary_container(self) -> DynamicColor:
        return self._container("primary")

    def on_primary_container(self) -> DynamicColor:
        return self._on_container("primary")

    def inverse_primary(self) -> DynamicColor:
        return DynamicColor.from_palette(
            name="inverse_primary",
            palette=_palette("primary_palette"),
            tone=lambda s: 40.0 if s.is_dark else 80.0,
            background=lambda s: self.inverse_surface(),
            contrast_curve=lambda s: _ACCENT_CURVE,
        )

    def secondary(self) -> DynamicColor:
        return self._accent("secondary")

    def on_secondary(self) -> DynamicColor:
        return self._on_accent("secondary")

    def secondary_container(self) -> DynamicColor:
        return self._container("secondary")

    def on_secondary_container(self) -> DynamicColor:
        return self._on_container("secondary")

    def tertiary(self) -> DynamicColor:
        return self._accent("tertiary")

    def on_tertiary(self) -> DynamicColor:
        return self._on_accent("tertiary")

    def tertiary_container(self) -> DynamicColor:
        return self._container("tertiary")

    def on_tertiary_container(self) -> DynamicColor:
        return self._on_container("tertiary")

    def error(self) -> DynamicColor:
        return self._accent("error")

    def on_error(self) -> DynamicColor:
        return self._on_accent("error")

    def error_container(self) -> DynamicColor:
        return self._container("error")

    def on_error_container(self) -> DynamicColor:
        return self._on_container("error")

    # =========================================================================
    # Fixed Colors
    # =========================================================================

    def _fixed(self, family: str, tone: float, suffix: str = "") -> DynamicColor:
        return DynamicColor.from_palette(
            name=f"{family}_fixed{suffix}",
            palette=_palette(f"{family}_palette"),
            tone=lambda s: tone,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=lambda s: _CONTAINER_CURVE,
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.get(f"{family}_fixed"),
                self.get(f"{family}_fixed_dim"),
                10.0,
                TonePolarity.LIGHTER,
                stay_together=True,
            ),
        )

    def _on_fixed(self, family: str, tone: float, curve: ContrastCurve, suffix: str = "") -> DynamicColor:
        return DynamicColor.from_palette(
            name=f"on_{family}_fixed{suffix}",
            palette=_palette(f"{family}_palette"),
            tone=lambda s: tone,
            background=lambda s: self.get(f"{family}_fixed_dim"),
            second_background=lambda s: self.get(f"{family}_fixed"),
            contrast_curve=lambda s: curve,
        )

    def primary_fixed(self) -> DynamicColor:
        return self._fixed("primary", 90.0)

    def primary_fixed_dim(self) -> DynamicColor:
        return self._fixed("primary", 80.0, "_dim")

    def on_primary_fixed(self) -> DynamicColor:
        return self._on_fixed("primary", 10.0, _ON_ACCENT_CURVE)

    def on_primary_fixed_variant(self) -> DynamicColor:
        return self._on_fixed("primary", 30.0, _ON_CONTAINER_CURVE, "_variant")

    def secondary_fixed(self) -> DynamicColor:
        return self._fixed("secondary", 90.0)

    def secondary_fixed_dim(self) -> DynamicColor:
        return self._fixed("secondary", 80.0, "_dim")

    def on_secondary_fixed(self) -> DynamicColor:
        return self._on_fixed("secondary", 10.0, _ON_ACCENT_CURVE)

    def on_secondary_fixed_variant(self) -> DynamicColor:
        return self._on_fixed("secondary", 30.0, _ON_CONTAINER_CURVE, "_variant")

    def tertiary_fixed(self) -> DynamicColor:
        return self._fixed("tertiary", 90.0)

    def tertiary_fixed_dim(self) -> DynamicColor:
        return self._fixed("tertiary", 80.0, "_dim")

    def on_tertiary_fixed(self) -> DynamicColor:
        return self._on_fixed("tertiary", 10.0, _ON_ACCENT_CURVE)

    def on_tertiary_fixed_variant(self) -> DynamicColor:
        return self._on_fixed("tertiary", 30.0, _ON_CONTAINER_CURVE, "_variant")
