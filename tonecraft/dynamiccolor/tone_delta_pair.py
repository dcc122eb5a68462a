# Copyright (c) 2026 Tonecraft
# SPDX-License-Identifier: MIT

"""
Tone-delta pairs: minimum tone separation between two roles.

Some roles are drawn next to each other (a button and its container, a
fixed color and its dim variant). Each may meet its own contrast target
against the background and still be too close to the other to tell apart.
A tone-delta pair keeps the two at least `delta` tone apart.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tonecraft.dynamiccolor.dynamic_color import DynamicColor


class TonePolarity(Enum):
    """
    Which member of the pair sits on which side.

    LIGHTER / DARKER describe role A relative to role B. The relative forms
    flip with the scheme mode: RELATIVE_LIGHTER means lighter in light mode
    and darker in dark mode, i.e. "farther from the surface". NEARER and
    FARTHER name role A's position relative to the background.
    """
    DARKER = "darker"
    LIGHTER = "lighter"
    RELATIVE_DARKER = "relative_darker"
    RELATIVE_LIGHTER = "relative_lighter"
    NEARER = "nearer"
    FARTHER = "farther"


class DeltaConstraint(Enum):
    """
    How strictly the separation is enforced.

    EXACT pins the gap to delta. FARTHER only widens a gap smaller than
    delta. NEARER only narrows a gap larger than delta.
    """
    EXACT = "exact"
    NEARER = "nearer"
    FARTHER = "farther"


@dataclass(frozen=True, slots=True)
class ToneDeltaPair:
    """
    A separation constraint between two roles.

    Attributes:
        role_a: First role of the pair
        role_b: Second role of the pair
        delta: Required tone separation (>= 0)
        polarity: Which side role A sits on
        stay_together: Whether both members may move to keep the pair on
            the same side of the 50-59 tone band
        constraint: How the separation is enforced
    """
    role_a: DynamicColor
    role_b: DynamicColor
    delta: float
    polarity: TonePolarity
    stay_together: bool = False
    constraint: DeltaConstraint = DeltaConstraint.EXACT

    def __post_init__(self) -> None:
        if self.delta < 0:
            raise ValueError(f"Tone delta must be non-negative, got {self.delta}")
        # Accept plain strings for the enums
        if not isinstance(self.polarity, TonePolarity):
            object.__setattr__(self, "polarity", TonePolarity(self.polarity))
        if not isinstance(self.constraint, DeltaConstraint):
            object.__setattr__(self, "constraint", DeltaConstraint(self.constraint))
