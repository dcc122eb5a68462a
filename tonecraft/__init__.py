# Copyright (c) 2026 Tonecraft
# SPDX-License-Identifier: MIT

"""
Tonecraft -- Dynamic color theme resolution.

Turns a single seed color into a full set of named color roles whose
contrast relationships hold in light and dark mode at any contrast level.

Quick start::

    from tonecraft import generate_theme

    theme = generate_theme("#6750A4", is_dark=True)
    theme.get("primary").hex   # "#RRGGBB"
    theme.to_css()             # CSS custom properties
    theme.to_xml()             # Structured XML block
    theme.to_json()            # JSON record
"""

from __future__ import annotations

__version__ = "1.0.0"

from tonecraft.dynamiccolor import (
    ConfigurationError,
    DynamicColor,
    DynamicScheme,
    SpecVersion,
)
from tonecraft.hct import Hct
from tonecraft.palettes import TonalPalette
from tonecraft.schema import ResolvedColor, ResolvedScheme
from tonecraft.theme import SchemeConfig, generate_theme

__all__ = [
    # Core API
    "generate_theme",
    "SchemeConfig",
    "ResolvedScheme",
    "ResolvedColor",
    # Engine (commonly needed)
    "DynamicScheme",
    "DynamicColor",
    "SpecVersion",
    "TonalPalette",
    "Hct",
    # Errors
    "ConfigurationError",
    # Version
    "__version__",
]
