# Copyright (c) 2026 Tonecraft
# SPDX-License-Identifier: MIT

"""
Dynamic color resolution for Tonecraft.

Role descriptors (DynamicColor), the role catalogs of each ruleset version,
and the scheme they resolve against.
"""

from tonecraft.dynamiccolor.color_spec import (
    ALL_ROLE_NAMES,
    DIM_ROLES,
    ROLE_NAMES,
    ColorSpecDelegate,
    ConfigurationError,
    SpecVersion,
    get_spec,
)
from tonecraft.dynamiccolor.contrast_curve import ContrastCurve
from tonecraft.dynamiccolor.dynamic_color import DynamicColor, foreground_tone
from tonecraft.dynamiccolor.dynamic_scheme import DynamicScheme
from tonecraft.dynamiccolor.tone_delta_pair import (
    DeltaConstraint,
    ToneDeltaPair,
    TonePolarity,
)
from tonecraft.dynamiccolor.tone_search import find_best_tone_for_chroma, t_max_c, t_min_c

__all__ = [
    # Scheme
    "DynamicScheme",
    "SpecVersion",
    # Roles
    "DynamicColor",
    "ColorSpecDelegate",
    "get_spec",
    "ROLE_NAMES",
    "DIM_ROLES",
    "ALL_ROLE_NAMES",
    # Rules
    "ContrastCurve",
    "ToneDeltaPair",
    "TonePolarity",
    "DeltaConstraint",
    "foreground_tone",
    "find_best_tone_for_chroma",
    "t_max_c",
    "t_min_c",
    # Errors
    "ConfigurationError",
]
