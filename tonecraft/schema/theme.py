# Copyright (c) 2026 Tonecraft
# SPDX-License-Identifier: MIT

"""
ResolvedScheme v1.0: resolved theme records.

Design principles:
- Immutable: All types are frozen dataclasses
- Deterministic: Same theme parameters → same record
- Self-contained: No reference back to palettes or role rules
- Serializable: JSON-ready, with CSS and XML renderings

HCT values:
- hue: CAM16 hue in degrees [0, 360)
- chroma: CAM16 chroma (0 = gray; ~100+ for the most vivid sRGB colors)
- tone: L* lightness [0, 100]; contrast between two roles depends on tone only
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Optional


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0"

SPEC_VERSIONS = ("2021", "2025")


# =============================================================================
# Resolved Color
# =============================================================================


@dataclass(frozen=True, slots=True)
class ResolvedColor:
    """
    The resolved color of one role.

    Attributes:
        name: Role name, e.g. "on_primary_container"
        hue: Hue of the rendered color in degrees [0, 360)
        chroma: Chroma of the rendered color (>= 0)
        tone: Resolved tone [0, 100] that contrast was computed with
        argb: Rendered color as an opaque 0xAARRGGBB integer
    """
    name: str
    hue: float
    chroma: float
    tone: float
    argb: int

    def __post_init__(self) -> None:
        """Validate color values are within expected ranges."""
        if not self.name:
            raise ValueError("Role name must not be empty")
        if not 0.0 <= self.hue < 360.0:
            raise ValueError(f"Hue must be 0-360, got {self.hue}")
        if self.chroma < 0.0:
            raise ValueError(f"Chroma must be >= 0, got {self.chroma}")
        if not 0.0 <= self.tone <= 100.0:
            raise ValueError(f"Tone must be 0-100, got {self.tone}")
        if not 0 <= self.argb <= 0xFFFFFFFF:
            raise ValueError(f"ARGB must be a 32-bit value, got {self.argb}")

    @property
    def hex(self) -> str:
        """Hex color string like "#3941C8"."""
        r, g, b = (self.argb >> 16) & 0xFF, (self.argb >> 8) & 0xFF, self.argb & 0xFF
        return f"#{r:02X}{g:02X}{b:02X}"

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "name": self.name,
            "hex": self.hex,
            "hue": self.hue,
            "chroma": self.chroma,
            "tone": self.tone,
        }

    @classmethod
    def from_dict(cls, data: dict) -> ResolvedColor:
        """Deserialize from dictionary."""
        # Import here to avoid circular imports
        from tonecraft.hct.colorspace import argb_from_hex
        return cls(
            name=data["name"],
            hue=data["hue"],
            chroma=data["chroma"],
            tone=data["tone"],
            argb=argb_from_hex(data["hex"]),
        )


# =============================================================================
# Top-Level Theme Container
# =============================================================================


@dataclass(frozen=True, slots=True)
class ResolvedScheme:
    """
    Every resolved role of one theme.

    This is the top-level record produced by tonecraft.generate_theme().

    Attributes:
        source_hex: Seed color of the theme
        is_dark: Dark mode
        contrast_level: Contrast level in [-1, 1]
        spec_version: Ruleset version the roles were resolved with
        colors: Resolved roles, in catalog order
        version: Schema version (e.g., "1.0")

    Usage:
        theme = generate_theme("#6750A4", is_dark=True)
        theme.get("on_primary").hex
        theme.to_css(selector=":root[data-theme=dark]")
    """
    source_hex: str
    is_dark: bool
    contrast_level: float
    spec_version: str
    colors: tuple[ResolvedColor, ...]
    version: str = field(default=SCHEMA_VERSION)

    def __post_init__(self) -> None:
        """Validate theme structure."""
        if not self.colors:
            raise ValueError("Theme must contain at least one color")
        names = [c.name for c in self.colors]
        if len(set(names)) != len(names):
            raise ValueError("Theme color names must be unique")
        if not -1.0 <= self.contrast_level <= 1.0:
            raise ValueError(f"Contrast level must be in [-1, 1], got {self.contrast_level}")
        if self.spec_version not in SPEC_VERSIONS:
            raise ValueError(
                f"Spec version must be one of {SPEC_VERSIONS}, got {self.spec_version!r}"
            )

    @property
    def names(self) -> tuple[str, ...]:
        """Role names, in order."""
        return tuple(c.name for c in self.colors)

    def get(self, name: str) -> Optional[ResolvedColor]:
        """
        Look up a role by name.

        Accepts snake_case, camelCase and kebab-case names.

        Returns:
            The resolved color, or None if the theme has no such role
        """
        # Import here to avoid circular imports
        from tonecraft.dynamiccolor.color_spec import normalize_role_name
        key = normalize_role_name(name)
        for color in self.colors:
            if color.name == key:
                return color
        return None

    def __getitem__(self, name: str) -> ResolvedColor:
        color = self.get(name)
        if color is None:
            raise KeyError(name)
        return color

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def __len__(self) -> int:
        return len(self.colors)

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON output."""
        return {
            "version": self.version,
            "source": self.source_hex,
            "is_dark": self.is_dark,
            "contrast_level": self.contrast_level,
            "spec_version": self.spec_version,
            "colors": [c.to_dict() for c in self.colors],
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def to_css(self, selector: str = ":root", prefix: str = "--color-") -> str:
        """
        Serialize to CSS custom properties.

        Example output:
            :root {
              --color-primary: #6750A4;
              ...
            }
        """
        # Import here to avoid circular imports
        from tonecraft.runtime.serializers.css import to_css_variables
        return to_css_variables(self, selector=selector, prefix=prefix)

    def to_xml(self) -> str:
        """
        Serialize to XML block format.

        Example output:
            <color_scheme version="1.0" source="#6750A4" mode="light" ...>
              <color name="primary" hex="#6750A4" hue="282.7" chroma="48.0" tone="40.0"/>
              ...
            </color_scheme>
        """
        # Import here to avoid circular imports
        from tonecraft.runtime.serializers.block import BlockFormat, to_context_block
        return to_context_block(self, format=BlockFormat.XML)

    @classmethod
    def from_dict(cls, data: dict) -> ResolvedScheme:
        """Deserialize from dictionary."""
        return cls(
            version=data.get("version", SCHEMA_VERSION),
            source_hex=data["source"],
            is_dark=data["is_dark"],
            contrast_level=data["contrast_level"],
            spec_version=data["spec_version"],
            colors=tuple(ResolvedColor.from_dict(c) for c in data["colors"]),
        )

    @classmethod
    def from_json(cls, json_str: str) -> ResolvedScheme:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))
