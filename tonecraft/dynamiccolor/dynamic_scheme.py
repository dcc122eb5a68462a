# Copyright (c) 2026 Tonecraft
# SPDX-License-Identifier: MIT

"""
Dynamic schemes: the context roles resolve against.

A scheme fixes the theme parameters (source color, light/dark, contrast
level, ruleset version), generates the six tonal palettes once, and binds
the role catalog of its version. Schemes are immutable; derive() returns a
new scheme with some parameters changed and the palettes shared.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Optional, Union

from tonecraft.dynamiccolor.color_spec import (
    ColorSpecDelegate,
    SpecVersion,
    get_spec,
)
from tonecraft.dynamiccolor.dynamic_color import DynamicColor
from tonecraft.dynamiccolor.palettes_delegate import (
    default_error_palette,
    get_palettes_delegate,
    get_piecewise_hue,
    get_rotated_hue,
)
from tonecraft.hct.hct import Hct
from tonecraft.palettes.tonal_palette import TonalPalette

if TYPE_CHECKING:
    from tonecraft.schema.theme import ResolvedColor


log = logging.getLogger(__name__)


PALETTE_NAMES = (
    "primary_palette",
    "secondary_palette",
    "tertiary_palette",
    "neutral_palette",
    "neutral_variant_palette",
    "error_palette",
)

RoleRef = Union[str, DynamicColor]


@dataclass(frozen=True)
class DynamicScheme:
    """
    Theme parameters, palettes and the role catalog of one version.

    Palettes left as None are generated from the source color by the
    version's palette generator.

    Attributes:
        source_color_hct: Seed color of the theme
        is_dark: Dark mode
        contrast_level: -1 (reduced) to 1 (maximum); 0 is standard
        spec_version: Ruleset version ("2021" or "2025")
        primary_palette: Accent palette for primary roles
        secondary_palette: Accent palette for secondary roles
        tertiary_palette: Accent palette for tertiary roles
        neutral_palette: Palette for surfaces and content on them
        neutral_variant_palette: Palette for outlines and variant surfaces
        error_palette: Palette for error roles
        colors: Role catalog bound at construction
    """
    source_color_hct: Hct
    is_dark: bool
    contrast_level: float = 0.0
    spec_version: SpecVersion = SpecVersion.SPEC_2021
    primary_palette: Optional[TonalPalette] = None
    secondary_palette: Optional[TonalPalette] = None
    tertiary_palette: Optional[TonalPalette] = None
    neutral_palette: Optional[TonalPalette] = None
    neutral_variant_palette: Optional[TonalPalette] = None
    error_palette: Optional[TonalPalette] = None
    colors: ColorSpecDelegate = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not -1.0 <= self.contrast_level <= 1.0:
            raise ValueError(
                f"Contrast level must be in [-1, 1], got {self.contrast_level}"
            )
        version = SpecVersion.parse(self.spec_version)
        object.__setattr__(self, "spec_version", version)
        object.__setattr__(self, "colors", get_spec(version))

        generator = get_palettes_delegate(version)
        generated = []
        for name in PALETTE_NAMES:
            if getattr(self, name) is not None:
                continue
            make = getattr(generator, name)
            palette = make(self.source_color_hct, self.is_dark, self.contrast_level)
            if palette is None:
                palette = default_error_palette()
            object.__setattr__(self, name, palette)
            generated.append(name)

        if generated:
            log.debug("Generated %s for %s", ", ".join(generated), self)

    def __str__(self) -> str:
        return (
            f"Scheme: mode={'dark' if self.is_dark else 'light'}, "
            f"contrast_level={self.contrast_level:.1f}, "
            f"seed={self.source_color_hct}, "
            f"spec_version={self.spec_version.value}"
        )

    @property
    def source_color_argb(self) -> int:
        """ARGB integer of the source color."""
        return self.source_color_hct.to_int()

    def derive(
        self,
        *,
        is_dark: Optional[bool] = None,
        contrast_level: Optional[float] = None,
    ) -> DynamicScheme:
        """
        The same theme with a different mode or contrast level.

        Palettes are shared with this scheme rather than regenerated.
        """
        return replace(
            self,
            is_dark=self.is_dark if is_dark is None else is_dark,
            contrast_level=self.contrast_level if contrast_level is None else contrast_level,
        )

    # -------------------------------------------------------------------------
    # Hue Tables
    # -------------------------------------------------------------------------

    get_piecewise_hue = staticmethod(get_piecewise_hue)
    get_rotated_hue = staticmethod(get_rotated_hue)

    # -------------------------------------------------------------------------
    # Roles
    # -------------------------------------------------------------------------

    def role(self, name: str) -> DynamicColor:
        """
        The DynamicColor for a role name in this scheme's version.

        Raises:
            ConfigurationError: If the role does not exist in this version
        """
        return self.colors.get(name)

    def _as_color(self, color: RoleRef) -> DynamicColor:
        return self.role(color) if isinstance(color, str) else color

    def get_tone(self, color: RoleRef) -> float:
        """Resolved tone of a role."""
        return self._as_color(color).get_tone(self)

    def get_hct(self, color: RoleRef) -> Hct:
        """Resolved color of a role."""
        return self._as_color(color).get_hct(self)

    def get_argb(self, color: RoleRef) -> int:
        """Resolved ARGB color of a role."""
        return self._as_color(color).get_argb(self)

    def resolve(self, color: RoleRef) -> ResolvedColor:
        """Resolve a role into an immutable record."""
        return self._as_color(color).resolve(self)

    def resolve_all(self) -> tuple[ResolvedColor, ...]:
        """Resolve every role of this scheme's version, in catalog order."""
        return tuple(self.resolve(name) for name in self.colors.catalog)
