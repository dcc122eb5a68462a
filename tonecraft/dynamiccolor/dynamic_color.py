# Copyright (c) 2026 Tonecraft
# SPDX-License-Identifier: MIT

"""
Dynamic colors: role descriptors that resolve against a scheme.

A DynamicColor does not hold a color. It holds rules: which palette to
sample, the tone to start from, which role it is drawn on top of, how much
contrast it needs there, and which partner role it must stay apart from.
Resolving it against a DynamicScheme runs those rules and yields a tone,
then a pixel.

Rules reference other roles through callables that build the other role on
demand, so the role graph is never materialized and cannot form cycles by
accident: every lookup is a fresh recursive call.

Tone resolution differs between ruleset versions:

2021
    Contrast is only improved when insufficient (and always re-solved at
    negative contrast levels). Delta pairs are solved jointly by naming one
    member "nearer" to the background and pushing the other outward.
    Background roles avoid the 50-59 tone band. The pixel is sampled from
    the palette.

2025
    Delta pairs move this role relative to its partner's resolved tone.
    Contrast is then enforced against the background, and background roles
    are pushed out of the 50-64 band. The pixel is solved from the palette
    hue and chroma, scaled by the role's chroma multiplier.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Callable, Optional

from tonecraft.dynamiccolor.color_spec import SpecVersion
from tonecraft.dynamiccolor.contrast_curve import ContrastCurve
from tonecraft.dynamiccolor.tone_delta_pair import ToneDeltaPair, TonePolarity, DeltaConstraint
from tonecraft.hct import contrast
from tonecraft.hct.colorspace import clamp
from tonecraft.hct.hct import Hct

if TYPE_CHECKING:
    from tonecraft.dynamiccolor.dynamic_scheme import DynamicScheme
    from tonecraft.palettes.tonal_palette import TonalPalette
    from tonecraft.schema.theme import ResolvedColor


log = logging.getLogger(__name__)


PaletteSelector = Callable[["DynamicScheme"], "TonalPalette"]
ToneSelector = Callable[["DynamicScheme"], float]
ColorSelector = Callable[["DynamicScheme"], Optional["DynamicColor"]]
CurveSelector = Callable[["DynamicScheme"], Optional[ContrastCurve]]
PairSelector = Callable[["DynamicScheme"], Optional[ToneDeltaPair]]
MultiplierSelector = Callable[["DynamicScheme"], float]


# =============================================================================
# Foreground Tone Helpers
# =============================================================================


def tone_prefers_light_foreground(tone: float) -> bool:
    """
    Whether a background at this tone reads better with a lighter foreground.

    The cut sits at 60 rather than 50: mid tones look darker than their L*
    suggests, so light text on tone 55 is more legible than dark text.
    """
    return round(tone) < 60


def tone_allows_light_foreground(tone: float) -> bool:
    """Whether a background at this tone can carry a light foreground."""
    return round(tone) <= 49


def enable_light_foreground(tone: float) -> float:
    """Darken a background tone just enough to take a light foreground."""
    if tone_prefers_light_foreground(tone) and not tone_allows_light_foreground(tone):
        return 49.0
    return tone


def foreground_tone(bg_tone: float, ratio: float) -> float:
    """
    Tone for a foreground drawn on `bg_tone` that meets `ratio`.

    Tries both sides of the background. The side the background prefers
    wins when it reaches the ratio, or does at least as well as the other
    side; otherwise the other side is used.

    Returns:
        Tone in [0, 100]
    """
    lighter_tone = contrast.lighter_unsafe(bg_tone, ratio)
    darker_tone = contrast.darker_unsafe(bg_tone, ratio)
    lighter_ratio = contrast.ratio_of_tones(lighter_tone, bg_tone)
    darker_ratio = contrast.ratio_of_tones(darker_tone, bg_tone)

    if tone_prefers_light_foreground(bg_tone):
        # Neither side reaches the ratio and they are about equal: stay light
        negligible_difference = (
            abs(lighter_ratio - darker_ratio) < 0.1
            and lighter_ratio < ratio
            and darker_ratio < ratio
        )
        if lighter_ratio >= ratio or lighter_ratio >= darker_ratio or negligible_difference:
            return lighter_tone
        return darker_tone

    if darker_ratio >= ratio or darker_ratio >= lighter_ratio:
        return darker_tone
    return lighter_tone


def get_initial_tone_from_background(
    background: Optional[ColorSelector],
) -> ToneSelector:
    """
    Tone rule that starts from the background's tone (50 without one).

    Contrast resolution then moves the tone off the background.
    """
    if background is None:
        return lambda scheme: 50.0

    def tone(scheme: DynamicScheme) -> float:
        bg = background(scheme)
        return bg.get_tone(scheme) if bg is not None else 50.0

    return tone


# =============================================================================
# Dynamic Color
# =============================================================================


@dataclass(frozen=True, slots=True)
class DynamicColor:
    """
    A named color role and the rules that resolve it.

    Use DynamicColor.from_palette() to build one; it fills in the default
    tone rule.

    Attributes:
        name: Role name, e.g. "on_primary_container"
        palette: Scheme → palette the role is sampled from
        tone: Scheme → starting tone before contrast adjustments
        is_background: Whether other roles are drawn on top of this one
        chroma_multiplier: Scheme → factor applied to palette chroma
        background: Scheme → role this one is drawn on top of
        second_background: Scheme → another role this one must contrast with
        contrast_curve: Scheme → target contrast ratio against the background
        tone_delta_pair: Scheme → separation constraint with a partner role
    """
    name: str
    palette: PaletteSelector
    tone: ToneSelector
    is_background: bool = False
    chroma_multiplier: Optional[MultiplierSelector] = None
    background: Optional[ColorSelector] = None
    second_background: Optional[ColorSelector] = None
    contrast_curve: Optional[CurveSelector] = None
    tone_delta_pair: Optional[PairSelector] = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Dynamic color name must not be empty")
        if self.second_background is not None and self.background is None:
            raise ValueError(
                f"Color {self.name} has a second background but no background"
            )

    @classmethod
    def from_palette(
        cls,
        *,
        name: str,
        palette: PaletteSelector,
        tone: Optional[ToneSelector] = None,
        is_background: bool = False,
        chroma_multiplier: Optional[MultiplierSelector] = None,
        background: Optional[ColorSelector] = None,
        second_background: Optional[ColorSelector] = None,
        contrast_curve: Optional[CurveSelector] = None,
        tone_delta_pair: Optional[PairSelector] = None,
    ) -> DynamicColor:
        """
        Create a dynamic color.

        Without a tone rule, the role starts from its background's tone and
        relies on the contrast curve to move away from it.
        """
        return cls(
            name=name,
            palette=palette,
            tone=tone if tone is not None else get_initial_tone_from_background(background),
            is_background=is_background,
            chroma_multiplier=chroma_multiplier,
            background=background,
            second_background=second_background,
            contrast_curve=contrast_curve,
            tone_delta_pair=tone_delta_pair,
        )

    def renamed(self, name: str) -> DynamicColor:
        """Same rules under another role name."""
        return replace(self, name=name)

    # -------------------------------------------------------------------------
    # Resolution
    # -------------------------------------------------------------------------

    def get_tone(self, scheme: DynamicScheme) -> float:
        """
        Resolved tone of this role in a scheme.

        Returns:
            Tone in [0, 100]
        """
        tone_fn, _ = _CALCULATORS[scheme.spec_version]
        tone = tone_fn(self, scheme)
        clamped = clamp(0.0, 100.0, tone)
        if clamped != tone:
            log.debug("Tone of %s clamped from %.2f to %.2f", self.name, tone, clamped)
        return clamped

    def get_hct(self, scheme: DynamicScheme) -> Hct:
        """Resolved color of this role in a scheme."""
        _, hct_fn = _CALCULATORS[scheme.spec_version]
        return hct_fn(self, scheme)

    def get_argb(self, scheme: DynamicScheme) -> int:
        """Resolved ARGB color of this role in a scheme."""
        return self.get_hct(scheme).to_int()

    def resolve(self, scheme: DynamicScheme) -> ResolvedColor:
        """
        Resolve this role into an immutable record.

        Hue and chroma are those of the rendered pixel; tone is the resolved
        tone that dependent roles compute contrast against.
        """
        # Import here to avoid circular imports
        from tonecraft.schema.theme import ResolvedColor

        hct = self.get_hct(scheme)
        return ResolvedColor(
            name=self.name,
            hue=hct.hue,
            chroma=max(0.0, hct.chroma),
            tone=self.get_tone(scheme),
            argb=hct.argb,
        )

    def _chroma_multiplier(self, scheme: DynamicScheme) -> float:
        if self.chroma_multiplier is None:
            return 1.0
        return self.chroma_multiplier(scheme)


# =============================================================================
# Shared Steps
# =============================================================================


def _background_and_curve(
    color: DynamicColor,
    scheme: DynamicScheme,
) -> tuple[Optional[DynamicColor], Optional[ContrastCurve]]:
    background = color.background(scheme) if color.background is not None else None
    curve = color.contrast_curve(scheme) if color.contrast_curve is not None else None
    return background, curve


def _second_background_tone(
    color: DynamicColor,
    scheme: DynamicScheme,
    answer: float,
    bg_tone: float,
    desired_ratio: float,
) -> float:
    """
    Pick a tone that contrasts with both backgrounds.

    Keeps `answer` when it already does. Otherwise the tone must sit above
    the lighter background or below the darker one; the light side wins
    when either background prefers light foregrounds.
    """
    second = color.second_background(scheme) if color.second_background is not None else None
    if second is None:
        return answer

    second_tone = second.get_tone(scheme)
    upper = max(bg_tone, second_tone)
    lower = min(bg_tone, second_tone)

    if (
        contrast.ratio_of_tones(upper, answer) >= desired_ratio
        and contrast.ratio_of_tones(lower, answer) >= desired_ratio
    ):
        return answer

    light_option = contrast.lighter(upper, desired_ratio)
    dark_option = contrast.darker(lower, desired_ratio)
    available = [option for option in (light_option, dark_option) if option != -1]

    if tone_prefers_light_foreground(bg_tone) or tone_prefers_light_foreground(second_tone):
        return 100.0 if light_option < 0 else light_option
    if len(available) == 1:
        return available[0]
    return 0.0 if dark_option < 0 else dark_option


# =============================================================================
# 2021 Tone Calculation
# =============================================================================


def _tone_2021(color: DynamicColor, scheme: DynamicScheme) -> float:
    decreasing_contrast = scheme.contrast_level < 0
    pair = color.tone_delta_pair(scheme) if color.tone_delta_pair is not None else None

    if pair is not None:
        return _pair_tone_2021(color, scheme, pair, decreasing_contrast)

    answer = color.tone(scheme)
    background, curve = _background_and_curve(color, scheme)
    if background is None or curve is None:
        return answer

    bg_tone = background.get_tone(scheme)
    desired_ratio = curve.value_at(scheme.contrast_level)

    if contrast.ratio_of_tones(bg_tone, answer) < desired_ratio or decreasing_contrast:
        answer = foreground_tone(bg_tone, desired_ratio)

    if color.is_background and 50 <= answer < 60:
        if contrast.ratio_of_tones(49, bg_tone) >= desired_ratio:
            answer = 49.0
        else:
            answer = 60.0

    return _second_background_tone(color, scheme, answer, bg_tone, desired_ratio)


def _pair_tone_2021(
    color: DynamicColor,
    scheme: DynamicScheme,
    pair: ToneDeltaPair,
    decreasing_contrast: bool,
) -> float:
    """
    Solve both members of a delta pair and return this color's tone.

    The member nearer the background keeps its tone where it can; the
    farther one is pushed outward (lighter in dark mode, darker in light
    mode) until the pair is `delta` apart.
    """
    polarity = pair.polarity
    a_is_nearer = (
        polarity is TonePolarity.NEARER
        or (polarity is TonePolarity.LIGHTER and not scheme.is_dark)
        or (polarity is TonePolarity.DARKER and scheme.is_dark)
    )
    nearer = pair.role_a if a_is_nearer else pair.role_b
    farther = pair.role_b if a_is_nearer else pair.role_a
    am_nearer = color.name == nearer.name
    delta = pair.delta
    expansion_dir = 1.0 if scheme.is_dark else -1.0

    n_tone = nearer.tone(scheme)
    f_tone = farther.tone(scheme)

    # 1st round: each member reaches its own contrast target
    background = color.background(scheme) if color.background is not None else None
    n_curve = nearer.contrast_curve(scheme) if nearer.contrast_curve is not None else None
    f_curve = farther.contrast_curve(scheme) if farther.contrast_curve is not None else None
    if background is not None and n_curve is not None and f_curve is not None:
        bg_tone = background.get_tone(scheme)
        n_contrast = n_curve.value_at(scheme.contrast_level)
        f_contrast = f_curve.value_at(scheme.contrast_level)

        if contrast.ratio_of_tones(bg_tone, n_tone) < n_contrast or decreasing_contrast:
            n_tone = foreground_tone(bg_tone, n_contrast)
        if contrast.ratio_of_tones(bg_tone, f_tone) < f_contrast or decreasing_contrast:
            f_tone = foreground_tone(bg_tone, f_contrast)

    # 2nd round: expand the farther member to reach delta
    if (f_tone - n_tone) * expansion_dir < delta:
        f_tone = clamp(0.0, 100.0, n_tone + delta * expansion_dir)
        if (f_tone - n_tone) * expansion_dir < delta:
            n_tone = clamp(0.0, 100.0, f_tone - delta * expansion_dir)

    # 3rd round: leave the awkward 50-59 band
    if 50 <= n_tone < 60:
        if expansion_dir > 0:
            n_tone = 60.0
            f_tone = max(f_tone, n_tone + delta * expansion_dir)
        else:
            n_tone = 49.0
            f_tone = min(f_tone, n_tone + delta * expansion_dir)
    elif 50 <= f_tone < 60:
        if pair.stay_together:
            if expansion_dir > 0:
                n_tone = 60.0
                f_tone = max(f_tone, n_tone + delta * expansion_dir)
            else:
                n_tone = 49.0
                f_tone = min(f_tone, n_tone + delta * expansion_dir)
        else:
            f_tone = 60.0 if expansion_dir > 0 else 49.0

    return n_tone if am_nearer else f_tone


def _hct_2021(color: DynamicColor, scheme: DynamicScheme) -> Hct:
    return color.palette(scheme).get_hct(color.get_tone(scheme))


# =============================================================================
# 2025 Tone Calculation
# =============================================================================


def _contrast_tone_2025(
    color: DynamicColor,
    scheme: DynamicScheme,
    tone: float,
) -> tuple[float, Optional[float], Optional[float]]:
    """
    Enforce the contrast curve against the background.

    Returns:
        Tuple of (tone, background tone, desired ratio); the last two are
        None when the role has no background or no active curve
    """
    background, curve = _background_and_curve(color, scheme)
    if background is None or curve is None:
        return tone, None, None

    bg_tone = background.get_tone(scheme)
    desired_ratio = curve.value_at(scheme.contrast_level)
    if contrast.ratio_of_tones(bg_tone, tone) < desired_ratio or scheme.contrast_level < 0:
        tone = foreground_tone(bg_tone, desired_ratio)
    return tone, bg_tone, desired_ratio


def _background_band_2025(color: DynamicColor, tone: float) -> float:
    """Push background roles out of the 50-64 band."""
    if color.is_background and not color.name.endswith("_fixed_dim"):
        if tone >= 57:
            return clamp(65.0, 100.0, tone)
        return clamp(0.0, 49.0, tone)
    return tone


def _tone_2025(color: DynamicColor, scheme: DynamicScheme) -> float:
    pair = color.tone_delta_pair(scheme) if color.tone_delta_pair is not None else None

    if pair is not None:
        tone = _pair_tone_2025(color, scheme, pair)
        tone, _, _ = _contrast_tone_2025(color, scheme, tone)
        return _background_band_2025(color, tone)

    answer = color.tone(scheme)
    answer, bg_tone, desired_ratio = _contrast_tone_2025(color, scheme, answer)
    if bg_tone is None or desired_ratio is None:
        return answer

    answer = _background_band_2025(color, answer)
    return _second_background_tone(color, scheme, answer, bg_tone, desired_ratio)


def _pair_tone_2025(
    color: DynamicColor,
    scheme: DynamicScheme,
    pair: ToneDeltaPair,
) -> float:
    """
    Place this color relative to its partner's resolved tone.

    The partner is resolved fully; this color's own tone rule is then moved
    so the pair satisfies the constraint. Clamping to [0, 100] wins over
    the separation.
    """
    polarity = pair.polarity
    negative = (
        polarity is TonePolarity.DARKER
        or (polarity is TonePolarity.RELATIVE_LIGHTER and scheme.is_dark)
        or (polarity is TonePolarity.RELATIVE_DARKER and not scheme.is_dark)
    )
    absolute_delta = -pair.delta if negative else pair.delta

    am_role_a = color.name == pair.role_a.name
    self_role = pair.role_a if am_role_a else pair.role_b
    ref_role = pair.role_b if am_role_a else pair.role_a

    self_tone = self_role.tone(scheme)
    ref_tone = ref_role.get_tone(scheme)
    relative_delta = absolute_delta if am_role_a else -absolute_delta
    target = ref_tone + relative_delta

    if pair.constraint is DeltaConstraint.EXACT:
        self_tone = clamp(0.0, 100.0, target)
    elif pair.constraint is DeltaConstraint.NEARER:
        if relative_delta > 0:
            self_tone = clamp(ref_tone, target, self_tone)
        else:
            self_tone = clamp(target, ref_tone, self_tone)
        self_tone = clamp(0.0, 100.0, self_tone)
    elif pair.constraint is DeltaConstraint.FARTHER:
        if relative_delta > 0:
            self_tone = clamp(target, 100.0, self_tone)
        else:
            self_tone = clamp(0.0, target, self_tone)

    return self_tone


def _hct_2025(color: DynamicColor, scheme: DynamicScheme) -> Hct:
    palette = color.palette(scheme)
    tone = color.get_tone(scheme)
    chroma = palette.chroma * color._chroma_multiplier(scheme)
    return Hct.from_hct(palette.hue, chroma, tone)


_CALCULATORS = {
    SpecVersion.SPEC_2021: (_tone_2021, _hct_2021),
    SpecVersion.SPEC_2025: (_tone_2025, _hct_2025),
}
