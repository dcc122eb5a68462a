# Copyright (c) 2026 Tonecraft
# SPDX-License-Identifier: MIT

"""
Context block serializer.

Formats a ResolvedScheme as a structured block (XML, JSON, or Markdown)
that can be embedded in documents, prompts or design handoff notes.
"""

from __future__ import annotations

from enum import Enum

from tonecraft.runtime.serializers.base import SerializerFormat, dump_json, mode_name
from tonecraft.schema import ResolvedScheme


class BlockFormat(Enum):
    """Block format options."""

    XML = "xml"
    JSON = "json"
    MARKDOWN = "markdown"


def to_context_block(
    theme: ResolvedScheme,
    *,
    format: BlockFormat = BlockFormat.XML,
    include_hct: bool = True,
    tag_name: str = "color_scheme",
) -> str:
    """Serialize a ResolvedScheme as a block.

    Args:
        theme: The ResolvedScheme to serialize.
        format: Block format (XML, JSON, or MARKDOWN).
        include_hct: Include hue/chroma/tone next to each hex value.
        tag_name: XML/markdown tag name for the block.

    Returns:
        Formatted block string.

    Example (XML)::

        <color_scheme version="1.0" source="#6750A4" mode="light" contrast="0.0" spec="2021">
          <color name="primary" hex="#6750A4" hue="282.7" chroma="48.0" tone="40.0"/>
          <color name="on_primary" hex="#FFFFFF" hue="209.5" chroma="2.9" tone="100.0"/>
        </color_scheme>
    """
    if format == BlockFormat.XML:
        return _to_xml(theme, include_hct, tag_name)
    elif format == BlockFormat.JSON:
        return _to_json(theme, include_hct, tag_name)
    else:
        return _to_markdown(theme, include_hct, tag_name)


def _to_xml(
    theme: ResolvedScheme,
    include_hct: bool,
    tag_name: str,
) -> str:
    """Generate XML block."""
    lines = [
        f'<{tag_name} version="{theme.version}" source="{theme.source_hex}" '
        f'mode="{mode_name(theme.is_dark)}" contrast="{theme.contrast_level:.1f}" '
        f'spec="{theme.spec_version}">'
    ]

    for color in theme.colors:
        hct_attrs = ""
        if include_hct:
            hct_attrs = (
                f' hue="{color.hue:.1f}" chroma="{color.chroma:.1f}" '
                f'tone="{color.tone:.1f}"'
            )
        lines.append(f'  <color name="{color.name}" hex="{color.hex}"{hct_attrs}/>')

    lines.append(f"</{tag_name}>")
    return "\n".join(lines)


def _block_data(theme: ResolvedScheme, include_hct: bool) -> dict:
    data = theme.to_dict()
    if not include_hct:
        data["colors"] = {c.name: c.hex for c in theme.colors}
    return data


def _to_json(
    theme: ResolvedScheme,
    include_hct: bool,
    tag_name: str,
) -> str:
    """Generate JSON block with wrapper."""
    wrapped = {tag_name: _block_data(theme, include_hct)}
    return dump_json(wrapped, SerializerFormat.JSON_PRETTY)


def _to_markdown(
    theme: ResolvedScheme,
    include_hct: bool,
    tag_name: str,
) -> str:
    """Generate markdown block with code fence."""
    lines = [
        f"<!-- {tag_name} -->",
        "```json",
        dump_json(_block_data(theme, include_hct), SerializerFormat.JSON_PRETTY),
        "```",
        f"<!-- /{tag_name} -->",
    ]
    return "\n".join(lines)
