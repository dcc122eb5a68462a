# Copyright (c) 2026 Tonecraft
# SPDX-License-Identifier: MIT

"""Shared helpers for theme serializers."""

import json
from enum import Enum


class SerializerFormat(Enum):
    """JSON layout for serializers that emit JSON."""

    JSON = "json"  # Compact, no whitespace
    JSON_PRETTY = "json_pretty"  # Two-space indent


def dump_json(data, format: SerializerFormat = SerializerFormat.JSON) -> str:
    """Encode data in the given JSON layout."""
    if format == SerializerFormat.JSON_PRETTY:
        return json.dumps(data, indent=2)
    return json.dumps(data, separators=(",", ":"))


def mode_name(is_dark: bool) -> str:
    """Mode name of a theme: "dark" or "light"."""
    return "dark" if is_dark else "light"
