# Copyright (c) 2026 Tonecraft
# SPDX-License-Identifier: MIT

"""
Schema definitions for resolved themes.

All types in this module are immutable (frozen dataclasses).
Once a theme is resolved, it is a plain record with no link back to the
rules that produced it.
"""

from tonecraft.schema.theme import (
    SCHEMA_VERSION,
    SPEC_VERSIONS,
    ResolvedColor,
    ResolvedScheme,
)

__all__ = [
    # Version
    "SCHEMA_VERSION",
    "SPEC_VERSIONS",
    # Records
    "ResolvedColor",
    "ResolvedScheme",
]
