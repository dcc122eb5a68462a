# Copyright (c) 2026 Tonecraft
# SPDX-License-Identifier: MIT

"""
Design token serializer.

Formats a ResolvedScheme as a flat role → color map that design tools and
build pipelines can consume directly.
"""

from __future__ import annotations

from tonecraft.runtime.serializers.base import SerializerFormat, dump_json, mode_name
from tonecraft.schema import ResolvedScheme


def to_tokens(
    theme: ResolvedScheme,
    *,
    format: SerializerFormat = SerializerFormat.JSON,
    camel_case: bool = False,
    include_meta: bool = False,
    hex_only: bool = True,
) -> str:
    """Serialize a ResolvedScheme as design tokens.

    Args:
        theme: The ResolvedScheme to serialize.
        format: Output format (JSON or JSON_PRETTY).
        camel_case: Use camelCase role names ("onPrimary").
        include_meta: Wrap tokens with the theme parameters.
        hex_only: Map roles to hex strings. When False, each role maps to
            ``{"hex": ..., "hct": "H282/C48/T40"}``.

    Returns:
        JSON string.

    Example (include_meta=True)::

        {
          "source": "#6750A4",
          "mode": "light",
          "contrast_level": 0.0,
          "spec_version": "2021",
          "tokens": {
            "primary": "#6750A4",
            "on_primary": "#FFFFFF"
          }
        }
    """
    tokens = {}
    for color in theme.colors:
        key = _camel(color.name) if camel_case else color.name
        if hex_only:
            tokens[key] = color.hex
        else:
            tokens[key] = {"hex": color.hex, "hct": _format_hct(color)}

    data: dict = tokens
    if include_meta:
        data = {
            "source": theme.source_hex,
            "mode": mode_name(theme.is_dark),
            "contrast_level": theme.contrast_level,
            "spec_version": theme.spec_version,
            "tokens": tokens,
        }

    return dump_json(data, format)


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _format_hct(color) -> str:
    """Compact HCT string like "H282/C48/T40"."""
    return f"H{color.hue:.0f}/C{color.chroma:.0f}/T{color.tone:.0f}"
