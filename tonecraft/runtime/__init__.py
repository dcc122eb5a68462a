# Copyright (c) 2026 Tonecraft
# SPDX-License-Identifier: MIT

"""
Output runtime for Tonecraft.

Serialization of resolved themes for their consumers:

1. Context Block -- XML, JSON or Markdown block
2. CSS -- Custom properties for stylesheets
3. Tokens -- Flat role → color map for design tooling

The output layer never modifies resolved colors.
"""

from tonecraft.runtime.serializers import (
    SerializerFormat,
    BlockFormat,
    to_context_block,
    to_css_variables,
    to_tokens,
)

__all__ = [
    "to_context_block",
    "to_css_variables",
    "to_tokens",
    "SerializerFormat",
    "BlockFormat",
]
