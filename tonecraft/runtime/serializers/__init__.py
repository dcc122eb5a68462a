# Copyright (c) 2026 Tonecraft
# SPDX-License-Identifier: MIT

"""
Serializers for ResolvedScheme delivery.

Each serializer formats a ResolvedScheme for a specific consumer.
All serializers preserve the resolved colors exactly.
"""

from tonecraft.runtime.serializers.base import SerializerFormat
from tonecraft.runtime.serializers.block import to_context_block, BlockFormat
from tonecraft.runtime.serializers.css import css_property_name, to_css_variables
from tonecraft.runtime.serializers.tokens import to_tokens

__all__ = [
    "SerializerFormat",
    "BlockFormat",
    "to_context_block",
    "to_css_variables",
    "css_property_name",
    "to_tokens",
]
