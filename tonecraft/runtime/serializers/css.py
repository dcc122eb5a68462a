# Copyright (c) 2026 Tonecraft
# SPDX-License-Identifier: MIT

"""
CSS custom property serializer.

Emits one custom property per role, with kebab-case names:

    :root {
      --color-primary: #6750A4;
      --color-on-primary-container: #21005D;
    }
"""

from __future__ import annotations

import re

from tonecraft.runtime.serializers.base import mode_name
from tonecraft.schema import ResolvedScheme


_PROPERTY_PREFIX_RE = re.compile(r"^--[A-Za-z0-9_-]*$")


def css_property_name(role: str, prefix: str = "--color-") -> str:
    """Custom property name of a role, e.g. "--color-on-primary"."""
    return prefix + role.replace("_", "-")


def to_css_variables(
    theme: ResolvedScheme,
    *,
    selector: str = ":root",
    prefix: str = "--color-",
    include_comment: bool = True,
) -> str:
    """Serialize a ResolvedScheme as a CSS rule of custom properties.

    Args:
        theme: The ResolvedScheme to serialize.
        selector: Selector the properties are declared on.
        prefix: Custom property prefix; must start with "--".
        include_comment: Lead with a comment naming the theme parameters.

    Returns:
        CSS text.

    Raises:
        ValueError: If the prefix is not a valid custom property prefix
    """
    if not _PROPERTY_PREFIX_RE.match(prefix):
        raise ValueError(f"CSS custom property prefix must start with '--', got {prefix!r}")

    lines = []
    if include_comment:
        lines.append(
            f"/* source {theme.source_hex}, {mode_name(theme.is_dark)}, "
            f"contrast {theme.contrast_level:.1f}, spec {theme.spec_version} */"
        )
    lines.append(f"{selector} {{")
    for color in theme.colors:
        lines.append(f"  {css_property_name(color.name, prefix)}: {color.hex};")
    lines.append("}")
    return "\n".join(lines)
