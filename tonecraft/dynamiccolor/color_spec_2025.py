# Copyright (c) 2026 Tonecraft
# SPDX-License-Identifier: MIT

"""
2025 color spec: the revised role catalog.

Differences from 2021:

- Surfaces are darker in dark mode, brighter for yellow hues in light mode,
  and container surfaces pick up more chroma (chroma multipliers).
- Content roles start from their background's tone and rely entirely on
  contrast curves, drawn from one table (get_curve).
- Accents are placed at the tone of maximum (or minimum) chroma, and each
  accent gains a "dim" variant.
- background, on_background, surface_variant and surface_tint become
  aliases of surface, on_surface, surface_container_highest and primary.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Mapping

from tonecraft.dynamiccolor.color_spec import (
    ALL_ROLE_NAMES,
    SpecVersion,
    lookup_role,
)
from tonecraft.dynamiccolor.contrast_curve import ContrastCurve
from tonecraft.dynamiccolor.dynamic_color import (
    DynamicColor,
    get_initial_tone_from_background,
)
from tonecraft.dynamiccolor.tone_delta_pair import (
    DeltaConstraint,
    ToneDeltaPair,
    TonePolarity,
)
from tonecraft.dynamiccolor.tone_search import t_max_c, t_min_c
from tonecraft.hct.hct import Hct

if TYPE_CHECKING:
    from tonecraft.dynamiccolor.dynamic_scheme import DynamicScheme
    from tonecraft.palettes.tonal_palette import TonalPalette


# Standard contrast ratio → full curve
_CURVES = {
    1.5: ContrastCurve(1.5, 1.5, 3.0, 4.5),
    3.0: ContrastCurve(3.0, 3.0, 4.5, 7.0),
    4.5: ContrastCurve(4.5, 4.5, 7.0, 11.0),
    6.0: ContrastCurve(6.0, 6.0, 7.0, 11.0),
    7.0: ContrastCurve(7.0, 7.0, 11.0, 21.0),
    9.0: ContrastCurve(9.0, 9.0, 11.0, 21.0),
    11.0: ContrastCurve(11.0, 11.0, 21.0, 21.0),
    21.0: ContrastCurve(21.0, 21.0, 21.0, 21.0),
}


def get_curve(default_contrast: float) -> ContrastCurve:
    """
    Contrast curve whose standard-contrast ratio is `default_contrast`.

    Ratios outside the table rise to 7 at medium and 21 at high contrast.
    """
    curve = _CURVES.get(default_contrast)
    if curve is None:
        return ContrastCurve(default_contrast, default_contrast, 7.0, 21.0)
    return curve


def _palette(attr: str) -> Callable[[DynamicScheme], TonalPalette]:
    return lambda s: getattr(s, attr)


def _surface_tone(dark: float, light: float, light_yellow: float):
    def tone(s: DynamicScheme) -> float:
        if s.is_dark:
            return dark
        return light_yellow if Hct.is_yellow(s.neutral_palette.hue) else light

    return tone


def _raised_contrast_curve(s: DynamicScheme):
    # Containers and fixed colors only enforce contrast above standard
    return get_curve(1.5) if s.contrast_level > 0 else None


class ColorSpec2025:
    """Role catalog of the 2025 ruleset."""

    version = SpecVersion.SPEC_2025

    def __init__(self) -> None:
        self._catalog: Mapping[str, Callable[[], DynamicColor]] = MappingProxyType(
            {name: getattr(self, name) for name in ALL_ROLE_NAMES}
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

    def _neutral_surface(self, name: str, tone, chroma_multiplier=None) -> DynamicColor:
        return DynamicColor.from_palette(
            name=name,
            palette=_palette("neutral_palette"),
            tone=tone,
            is_background=True,
            chroma_multiplier=chroma_multiplier,
        )

    def surface(self) -> DynamicColor:
        return self._neutral_surface("surface", _surface_tone(4.0, 98.0, 99.0))

    def surface_dim(self) -> DynamicColor:
        return self._neutral_surface(
            "surface_dim",
            _surface_tone(4.0, 87.0, 90.0),
            lambda s: 1.0 if s.is_dark else 2.5,
        )

    def surface_bright(self) -> DynamicColor:
        return self._neutral_surface(
            "surface_bright",
            _surface_tone(18.0, 98.0, 99.0),
            lambda s: 2.5 if s.is_dark else 1.0,
        )

    def surface_container_lowest(self) -> DynamicColor:
        return self._neutral_surface(
            "surface_container_lowest", lambda s: 0.0 if s.is_dark else 100.0
        )

    def surface_container_low(self) -> DynamicColor:
        return self._neutral_surface(
            "surface_container_low", _surface_tone(6.0, 96.0, 98.0), lambda s: 1.3
        )

    def surface_container(self) -> DynamicColor:
        return self._neutral_surface(
            "surface_container", _surface_tone(9.0, 94.0, 96.0), lambda s: 1.6
        )

    def surface_container_high(self) -> DynamicColor:
        return self._neutral_surface(
            "surface_container_high", _surface_tone(12.0, 92.0, 94.0), lambda s: 1.9
        )

    def surface_container_highest(self) -> DynamicColor:
        return self._neutral_surface(
            "surface_container_highest", _surface_tone(15.0, 90.0, 92.0), lambda s: 2.2
        )

    def on_surface(self) -> DynamicColor:
        return DynamicColor.from_palette(
            name="on_surface",
            palette=_palette("neutral_palette"),
            tone=get_initial_tone_from_background(self.highest_surface),
            chroma_multiplier=lambda s: 2.2,
            background=self.highest_surface,
            contrast_curve=lambda s: get_curve(11.0) if s.is_dark else get_curve(9.0),
        )

    def on_surface_variant(self) -> DynamicColor:
        return DynamicColor.from_palette(
            name="on_surface_variant",
            palette=_palette("neutral_palette"),
            chroma_multiplier=lambda s: 2.2,
            background=self.highest_surface,
            contrast_curve=lambda s: get_curve(6.0) if s.is_dark else get_curve(4.5),
        )

    def outline(self) -> DynamicColor:
        return DynamicColor.from_palette(
            name="outline",
            palette=_palette("neutral_palette"),
            chroma_multiplier=lambda s: 2.2,
            background=self.highest_surface,
            contrast_curve=lambda s: get_curve(3.0),
        )

    def outline_variant(self) -> DynamicColor:
        return DynamicColor.from_palette(
            name="outline_variant",
            palette=_palette("neutral_palette"),
            chroma_multiplier=lambda s: 2.2,
            background=self.highest_surface,
            contrast_curve=lambda s: get_curve(1.5),
        )

    def inverse_surface(self) -> DynamicColor:
        return self._neutral_surface(
            "inverse_surface", lambda s: 98.0 if s.is_dark else 4.0
        )

    def inverse_on_surface(self) -> DynamicColor:
        return DynamicColor.from_palette(
            name="inverse_on_surface",
            palette=_palette("neutral_palette"),
            background=lambda s: self.inverse_surface(),
            contrast_curve=lambda s: get_curve(7.0),
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

    # =========================================================================
    # Accents (primary, secondary, tertiary, error)
    # =========================================================================

    def _accent(self, family: str, tone) -> DynamicColor:
        return DynamicColor.from_palette(
            name=family,
            palette=_palette(f"{family}_palette"),
            tone=tone,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=lambda s: get_curve(4.5),
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.get(f"{family}_container"),
                self.get(family),
                5.0,
                TonePolarity.RELATIVE_LIGHTER,
                stay_together=True,
                constraint=DeltaConstraint.FARTHER,
            ),
        )

    def _dim(self, family: str, tone) -> DynamicColor:
        return DynamicColor.from_palette(
            name=f"{family}_dim",
            palette=_palette(f"{family}_palette"),
            tone=tone,
            is_background=True,
            background=lambda s: self.surface_container_high(),
            contrast_curve=lambda s: get_curve(4.5),
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.get(f"{family}_dim"),
                self.get(family),
                5.0,
                TonePolarity.DARKER,
                stay_together=True,
                constraint=DeltaConstraint.FARTHER,
            ),
        )

    def _on_accent(self, family: str) -> DynamicColor:
        return DynamicColor.from_palette(
            name=f"on_{family}",
            palette=_palette(f"{family}_palette"),
            background=lambda s: self.get(family),
            contrast_curve=lambda s: get_curve(6.0),
        )

    def _container(self, family: str, tone) -> DynamicColor:
        return DynamicColor.from_palette(
            name=f"{family}_container",
            palette=_palette(f"{family}_palette"),
            tone=tone,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=_raised_contrast_curve,
        )

    def _on_container(self, family: str, ratio: float = 6.0) -> DynamicColor:
        return DynamicColor.from_palette(
            name=f"on_{family}_container",
            palette=_palette(f"{family}_palette"),
            background=lambda s: self.get(f"{family}_container"),
            contrast_curve=lambda s: get_curve(ratio),
        )

    def primary(self) -> DynamicColor:
        return self._accent("primary", lambda s: 80.0 if s.is_dark else 40.0)

    def primary_dim(self) -> DynamicColor:
        return self._dim("primary", lambda s: 85.0)

    def on_primary(self) -> DynamicColor:
        return self._on_accent("primary")

    def primary_container(self) -> DynamicColor:
        return self._container("primary", lambda s: 30.0 if s.is_dark else 90.0)

    def on_primary_container(self) -> DynamicColor:
        return self._on_container("primary")

    def inverse_primary(self) -> DynamicColor:
        return DynamicColor.from_palette(
            name="inverse_primary",
            palette=_palette("primary_palette"),
            tone=lambda s: t_max_c(s.primary_palette),
            background=lambda s: self.inverse_surface(),
            contrast_curve=lambda s: get_curve(6.0),
        )

    def secondary(self) -> DynamicColor:
        return self._accent(
            "secondary",
            lambda s: (
                t_min_c(s.secondary_palette, 0.0, 98.0)
                if s.is_dark
                else t_max_c(s.secondary_palette)
            ),
        )

    def secondary_dim(self) -> DynamicColor:
        return self._dim("secondary", lambda s: 85.0)

    def on_secondary(self) -> DynamicColor:
        return self._on_accent("secondary")

    def secondary_container(self) -> DynamicColor:
        return self._container("secondary", lambda s: 25.0 if s.is_dark else 90.0)

    def on_secondary_container(self) -> DynamicColor:
        return self._on_container("secondary")

    def tertiary(self) -> DynamicColor:
        return self._accent(
            "tertiary",
            lambda s: (
                t_max_c(s.tertiary_palette, 0.0, 98.0)
                if s.is_dark
                else t_max_c(s.tertiary_palette)
            ),
        )

    def tertiary_dim(self) -> DynamicColor:
        return self._dim("tertiary", lambda s: t_max_c(s.tertiary_palette))

    def on_tertiary(self) -> DynamicColor:
        return self._on_accent("tertiary")

    def tertiary_container(self) -> DynamicColor:
        return self._container(
            "tertiary",
            lambda s: (
                t_max_c(s.tertiary_palette, 0.0, 93.0)
                if s.is_dark
                else t_max_c(s.tertiary_palette, 0.0, 96.0)
            ),
        )

    def on_tertiary_container(self) -> DynamicColor:
        return self._on_container("tertiary")

    def error(self) -> DynamicColor:
        return self._accent(
            "error",
            lambda s: (
                t_min_c(s.error_palette, 0.0, 98.0)
                if s.is_dark
                else t_max_c(s.error_palette)
            ),
        )

    def error_dim(self) -> DynamicColor:
        return self._dim("error", lambda s: t_min_c(s.error_palette))

    def on_error(self) -> DynamicColor:
        return self._on_accent("error")

    def error_container(self) -> DynamicColor:
        return self._container(
            "error",
            lambda s: (
                t_min_c(s.error_palette, 30.0, 93.0)
                if s.is_dark
                else t_max_c(s.error_palette, 0.0, 90.0)
            ),
        )

    def on_error_container(self) -> DynamicColor:
        return self._on_container("error", 4.5)

    # =========================================================================
    # Fixed Colors
    # =========================================================================

    def _fixed(self, family: str) -> DynamicColor:
        def tone(s: DynamicScheme) -> float:
            # Same in both modes: the container tone of a standard light scheme
            light = s.derive(is_dark=False, contrast_level=0.0)
            return self.get(f"{family}_container").get_tone(light)

        return DynamicColor.from_palette(
            name=f"{family}_fixed",
            palette=_palette(f"{family}_palette"),
            tone=tone,
            is_background=True,
            background=self.highest_surface,
            contrast_curve=_raised_contrast_curve,
        )

    def _fixed_dim(self, family: str) -> DynamicColor:
        return DynamicColor.from_palette(
            name=f"{family}_fixed_dim",
            palette=_palette(f"{family}_palette"),
            tone=lambda s: self.get(f"{family}_fixed").get_tone(s),
            is_background=True,
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.get(f"{family}_fixed_dim"),
                self.get(f"{family}_fixed"),
                5.0,
                TonePolarity.DARKER,
                stay_together=True,
                constraint=DeltaConstraint.EXACT,
            ),
        )

    def _on_fixed(self, family: str, ratio: float, suffix: str = "") -> DynamicColor:
        return DynamicColor.from_palette(
            name=f"on_{family}_fixed{suffix}",
            palette=_palette(f"{family}_palette"),
            background=lambda s: self.get(f"{family}_fixed_dim"),
            contrast_curve=lambda s: get_curve(ratio),
        )

    def primary_fixed(self) -> DynamicColor:
        return self._fixed("primary")

    def primary_fixed_dim(self) -> DynamicColor:
        return self._fixed_dim("primary")

    def on_primary_fixed(self) -> DynamicColor:
        return self._on_fixed("primary", 7.0)

    def on_primary_fixed_variant(self) -> DynamicColor:
        return self._on_fixed("primary", 4.5, "_variant")

    def secondary_fixed(self) -> DynamicColor:
        return self._fixed("secondary")

    def secondary_fixed_dim(self) -> DynamicColor:
        return self._fixed_dim("secondary")

    def on_secondary_fixed(self) -> DynamicColor:
        return self._on_fixed("secondary", 7.0)

    def on_secondary_fixed_variant(self) -> DynamicColor:
        return self._on_fixed("secondary", 4.5, "_variant")

    def tertiary_fixed(self) -> DynamicColor:
        return self._fixed("tertiary")

    def tertiary_fixed_dim(self) -> DynamicColor:
        return self._fixed_dim("tertiary")

    def on_tertiary_fixed(self) -> DynamicColor:
        return self._on_fixed("tertiary", 7.0)

    def on_tertiary_fixed_variant(self) -> DynamicColor:
        return self._on_fixed("tertiary", 4.5, "_variant")

    # =========================================================================
    # Remapped Roles
    # =========================================================================

    def surface_variant(self) -> DynamicColor:
        return self.surface_container_highest().renamed("surface_variant")

    def surface_tint(self) -> DynamicColor:
        return self.primary().renamed("surface_tint")

    def background(self) -> DynamicColor:
        return self.surface().renamed("background")

    def on_background(self) -> DynamicColor:
        return self.on_surface().renamed("on_background")
