# Copyright (c) 2026 Tonecraft
# SPDX-License-Identifier: MIT

"""
Main theme generation API.

This is the primary entry point for Tonecraft: seed color in, every
resolved role out.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from tonecraft.dynamiccolor import DynamicScheme, SpecVersion
from tonecraft.hct.colorspace import argb_from_hex
from tonecraft.hct.hct import Hct
from tonecraft.schema import ResolvedScheme


log = logging.getLogger(__name__)


SourceColor = Union[str, int, Hct]


@dataclass(frozen=True)
class SchemeConfig:
    """Configuration for theme generation."""

    # Seed color as a hex string ("#6750A4"); may instead be passed to
    # generate_theme() directly
    source_color: Optional[str] = None

    is_dark: bool = False

    # -1 = reduced, 0 = standard, 0.5 = medium, 1 = high
    contrast_level: float = 0.0

    # Ruleset version: "2021" or "2025"
    spec_version: str = "2021"

    # Roles to resolve, in order; None resolves the whole catalog
    roles: Optional[tuple[str, ...]] = None

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.source_color is not None:
            argb_from_hex(self.source_color)
        if not -1.0 <= self.contrast_level <= 1.0:
            raise ValueError(
                f"Contrast level must be in [-1, 1], got {self.contrast_level}"
            )
        object.__setattr__(
            self, "spec_version", SpecVersion.parse(self.spec_version).value
        )
        if self.roles is not None:
            object.__setattr__(self, "roles", tuple(self.roles))

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        d = {
            "source_color": self.source_color,
            "is_dark": self.is_dark,
            "contrast_level": self.contrast_level,
            "spec_version": self.spec_version,
        }
        if self.roles is not None:
            d["roles"] = list(self.roles)
        return d

    @classmethod
    def from_dict(cls, data: dict) -> SchemeConfig:
        """Deserialize from dictionary. Missing keys take their defaults."""
        roles = data.get("roles")
        return cls(
            source_color=data.get("source_color"),
            is_dark=data.get("is_dark", False),
            contrast_level=data.get("contrast_level", 0.0),
            spec_version=str(data.get("spec_version", "2021")),
            roles=tuple(roles) if roles is not None else None,
        )


def source_to_hct(source: SourceColor) -> Hct:
    """
    Convert a seed color given as hex, ARGB integer or Hct.

    Raises:
        ValueError: If a hex string is malformed
        TypeError: If the value is none of the supported types
    """
    if isinstance(source, Hct):
        return source
    if isinstance(source, str):
        return Hct.from_int(argb_from_hex(source))
    if isinstance(source, int) and not isinstance(source, bool):
        return Hct.from_int(source)
    raise TypeError(
        f"Source color must be a hex string, ARGB int or Hct, got {type(source).__name__}"
    )


def generate_theme(
    source: Optional[SourceColor] = None,
    *,
    is_dark: Optional[bool] = None,
    contrast_level: Optional[float] = None,
    spec_version: Optional[Union[str, SpecVersion]] = None,
    roles: Optional[tuple[str, ...]] = None,
    config: Optional[SchemeConfig] = None,
) -> ResolvedScheme:
    """
    Resolve every role of a theme.

    Keyword arguments override the matching `config` values; anything left
    unset falls back to the config, then to SchemeConfig defaults.

    Args:
        source: Seed color as "#RRGGBB", ARGB integer or Hct. Defaults to
            config.source_color.
        is_dark: Dark mode (default: False)
        contrast_level: -1 (reduced) to 1 (high); 0 is standard
        spec_version: Ruleset version, "2021" (default) or "2025"
        roles: Role names to resolve, in order (default: all roles of the
            version). camelCase names are accepted.
        config: Base configuration

    Returns:
        ResolvedScheme with one ResolvedColor per role

    Raises:
        ConfigurationError: If a role or the spec version is unknown
        ValueError: If the source color or contrast level is invalid

    Example:
        >>> from tonecraft import generate_theme
        >>> theme = generate_theme("#6750A4", spec_version="2025")
        >>> theme.get("primary").tone
        40.0
    """
    config = config if config is not None else SchemeConfig()

    if source is None:
        source = config.source_color
    if source is None:
        raise ValueError("No source color given (pass one or set config.source_color)")

    source_hct = source_to_hct(source)
    scheme = DynamicScheme(
        source_color_hct=source_hct,
        is_dark=config.is_dark if is_dark is None else is_dark,
        contrast_level=config.contrast_level if contrast_level is None else contrast_level,
        spec_version=SpecVersion.parse(
            config.spec_version if spec_version is None else spec_version
        ),
    )

    names = roles if roles is not None else config.roles
    if names is None:
        names = tuple(scheme.colors.catalog)

    log.debug("Resolving %d roles for %s", len(names), scheme)
    colors = tuple(scheme.resolve(name) for name in names)

    return ResolvedScheme(
        source_hex=source_hct.hex,
        is_dark=scheme.is_dark,
        contrast_level=scheme.contrast_level,
        spec_version=scheme.spec_version.value,
        colors=colors,
    )
