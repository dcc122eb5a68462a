# Copyright (c) 2026 Tonecraft
# SPDX-License-Identifier: MIT

"""Tests for DynamicColor rules, delta pairs and foreground selection."""

import pytest

from tonecraft.dynamiccolor import (
    ContrastCurve,
    DeltaConstraint,
    DynamicColor,
    DynamicScheme,
    ToneDeltaPair,
    TonePolarity,
    foreground_tone,
)
from tonecraft.dynamiccolor.dynamic_color import (
    enable_light_foreground,
    tone_allows_light_foreground,
    tone_prefers_light_foreground,
)
from tonecraft.hct import Hct, ratio_of_tones


SOURCE = Hct.from_int(0xFF6750A4)


@pytest.fixture(scope="module", params=["2021", "2025"])
def scheme(request):
    return DynamicScheme(SOURCE, is_dark=False, spec_version=request.param)


def _fixed_tone(name, tone, is_background=False):
    return DynamicColor.from_palette(
        name=name,
        palette=lambda s: s.primary_palette,
        tone=lambda s: tone,
        is_background=is_background,
    )


class TestForegroundTone:

    def test_dark_text_on_light_background(self):
        tone = foreground_tone(90.0, 4.5)
        assert tone < 90.0
        assert ratio_of_tones(tone, 90.0) >= 4.5

    def test_light_text_on_dark_background(self):
        tone = foreground_tone(10.0, 4.5)
        assert tone > 10.0
        assert ratio_of_tones(tone, 10.0) >= 4.5

    def test_mid_tone_prefers_light(self):
        # Tone 55 is below the 60 cut
        assert foreground_tone(55.0, 3.0) > 55.0

    def test_falls_back_to_other_side(self):
        # Nothing lighter than 55 reaches 4.5:1, tone 10 does
        tone = foreground_tone(55.0, 4.5)
        assert tone < 55.0
        assert ratio_of_tones(tone, 55.0) >= 4.5

    def test_unreachable_stays_in_range(self):
        tone = foreground_tone(50.0, 21.0)
        assert 0.0 <= tone <= 100.0


class TestLightForegroundHelpers:

    def test_prefers_light_below_60(self):
        assert tone_prefers_light_foreground(59.4)
        assert not tone_prefers_light_foreground(59.6)

    def test_allows_light_up_to_49(self):
        assert tone_allows_light_foreground(49.4)
        assert not tone_allows_light_foreground(50.0)

    def test_enable_light_foreground(self):
        assert enable_light_foreground(55.0) == 49.0
        assert enable_light_foreground(30.0) == 30.0
        assert enable_light_foreground(80.0) == 80.0


class TestDynamicColorConstruction:

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError, match="name"):
            _fixed_tone("", 50.0)

    def test_second_background_requires_background(self):
        with pytest.raises(ValueError, match="second background"):
            DynamicColor.from_palette(
                name="label",
                palette=lambda s: s.primary_palette,
                second_background=lambda s: _fixed_tone("panel", 90.0),
            )

    def test_default_tone_is_background_tone(self, scheme):
        panel = _fixed_tone("panel", 80.0, is_background=True)
        label = DynamicColor.from_palette(
            name="label",
            palette=lambda s: s.primary_palette,
            background=lambda s: panel,
        )
        assert label.tone(scheme) == pytest.approx(80.0)

    def test_default_tone_without_background(self, scheme):
        color = DynamicColor.from_palette(name="plain", palette=lambda s: s.primary_palette)
        assert color.get_tone(scheme) == pytest.approx(50.0)

    def test_renamed_keeps_rules(self, scheme):
        color = _fixed_tone("accent", 35.0)
        alias = color.renamed("accent_alias")
        assert alias.name == "accent_alias"
        assert alias.get_tone(scheme) == color.get_tone(scheme)
        assert alias.get_argb(scheme) == color.get_argb(scheme)


class TestToneResolution:

    def test_plain_tone(self, scheme):
        assert _fixed_tone("accent", 35.0).get_tone(scheme) == pytest.approx(35.0)

    def test_tone_clamped(self, scheme):
        assert _fixed_tone("too_light", 120.0).get_tone(scheme) == 100.0
        assert _fixed_tone("too_dark", -5.0).get_tone(scheme) == 0.0

    def test_contrast_enforced(self, scheme):
        panel = _fixed_tone("panel", 90.0, is_background=True)
        label = DynamicColor.from_palette(
            name="label",
            palette=lambda s: s.primary_palette,
            tone=lambda s: 50.0,
            background=lambda s: panel,
            contrast_curve=lambda s: ContrastCurve(3.0, 4.5, 7.0, 11.0),
        )
        tone = label.get_tone(scheme)
        assert ratio_of_tones(tone, 90.0) >= 4.5

    def test_sufficient_contrast_kept(self, scheme):
        panel = _fixed_tone("panel", 90.0, is_background=True)
        label = DynamicColor.from_palette(
            name="label",
            palette=lambda s: s.primary_palette,
            tone=lambda s: 10.0,
            background=lambda s: panel,
            contrast_curve=lambda s: ContrastCurve(3.0, 4.5, 7.0, 11.0),
        )
        assert label.get_tone(scheme) == pytest.approx(10.0)

    def test_second_background(self, scheme):
        dim = _fixed_tone("panel_dim", 80.0, is_background=True)
        bright = _fixed_tone("panel", 90.0, is_background=True)
        label = DynamicColor.from_palette(
            name="label",
            palette=lambda s: s.primary_palette,
            tone=lambda s: 60.0,
            background=lambda s: dim,
            second_background=lambda s: bright,
            contrast_curve=lambda s: ContrastCurve(4.5, 4.5, 7.0, 11.0),
        )
        tone = label.get_tone(scheme)
        assert ratio_of_tones(tone, 80.0) >= 4.5
        assert ratio_of_tones(tone, 90.0) >= 4.5

    def test_resolve_record(self, scheme):
        resolved = _fixed_tone("accent", 40.0).resolve(scheme)
        assert resolved.name == "accent"
        assert resolved.tone == pytest.approx(40.0)
        assert resolved.argb >> 24 == 0xFF
        assert 0.0 <= resolved.hue < 360.0


class TestPixel:

    def test_2021_samples_palette(self):
        scheme = DynamicScheme(SOURCE, is_dark=False, spec_version="2021")
        color = _fixed_tone("accent", 40.0)
        assert color.get_argb(scheme) == scheme.primary_palette.tone(40.0)

    def test_2025_applies_chroma_multiplier(self):
        scheme = DynamicScheme(SOURCE, is_dark=False, spec_version="2025")
        boosted = DynamicColor.from_palette(
            name="boosted",
            palette=lambda s: s.primary_palette,
            tone=lambda s: 50.0,
            chroma_multiplier=lambda s: 3.0,
        )
        plain = _fixed_tone("plain", 50.0)
        assert boosted.get_hct(scheme).chroma > plain.get_hct(scheme).chroma


class TestToneDeltaPair:

    def test_negative_delta_rejected(self):
        a = _fixed_tone("a", 40.0)
        with pytest.raises(ValueError, match="non-negative"):
            ToneDeltaPair(a, a, -1.0, TonePolarity.DARKER)

    def test_string_enums_accepted(self):
        a = _fixed_tone("a", 40.0)
        b = _fixed_tone("b", 40.0)
        pair = ToneDeltaPair(a, b, 5.0, "relative_lighter", True, "farther")
        assert pair.polarity is TonePolarity.RELATIVE_LIGHTER
        assert pair.constraint is DeltaConstraint.FARTHER

    def test_unknown_polarity_rejected(self):
        a = _fixed_tone("a", 40.0)
        with pytest.raises(ValueError):
            ToneDeltaPair(a, a, 5.0, "sideways")

    def test_defaults(self):
        a = _fixed_tone("a", 40.0)
        pair = ToneDeltaPair(a, a, 5.0, TonePolarity.LIGHTER)
        assert pair.stay_together is False
        assert pair.constraint is DeltaConstraint.EXACT


def _pair(constraint, polarity=TonePolarity.DARKER, delta=10.0, a_tone=60.0):
    """Role `a` constrained against role `b` fixed at tone 50."""
    def make_b():
        return _fixed_tone("b", 50.0)

    def make_a():
        return DynamicColor.from_palette(
            name="a",
            palette=lambda s: s.primary_palette,
            tone=lambda s: a_tone,
            tone_delta_pair=lambda s: ToneDeltaPair(
                make_a(), make_b(), delta, polarity, constraint=constraint
            ),
        )

    return make_a()


class TestDeltaPair2025:
    """2025 pairs move the role relative to its partner's resolved tone."""

    @pytest.fixture(scope="class")
    def scheme_2025(self):
        return DynamicScheme(SOURCE, is_dark=False, spec_version="2025")

    def test_exact(self, scheme_2025):
        assert _pair(DeltaConstraint.EXACT).get_tone(scheme_2025) == pytest.approx(40.0)

    def test_farther_pushes_out(self, scheme_2025):
        # Own tone 60 is on the wrong side: pushed to 50 - 10
        assert _pair(DeltaConstraint.FARTHER).get_tone(scheme_2025) == pytest.approx(40.0)

    def test_farther_keeps_larger_gap(self, scheme_2025):
        color = _pair(DeltaConstraint.FARTHER, a_tone=20.0)
        assert color.get_tone(scheme_2025) == pytest.approx(20.0)

    def test_nearer_pulls_in(self, scheme_2025):
        color = _pair(DeltaConstraint.NEARER, a_tone=20.0)
        assert color.get_tone(scheme_2025) == pytest.approx(40.0)

    def test_nearer_keeps_smaller_gap(self, scheme_2025):
        color = _pair(DeltaConstraint.NEARER, a_tone=45.0)
        assert color.get_tone(scheme_2025) == pytest.approx(45.0)

    def test_lighter(self, scheme_2025):
        color = _pair(DeltaConstraint.EXACT, polarity=TonePolarity.LIGHTER)
        assert color.get_tone(scheme_2025) == pytest.approx(60.0)

    def test_relative_lighter_flips_in_dark(self, scheme_2025):
        color = _pair(DeltaConstraint.EXACT, polarity=TonePolarity.RELATIVE_LIGHTER)
        assert color.get_tone(scheme_2025) == pytest.approx(60.0)
        dark = scheme_2025.derive(is_dark=True)
        assert color.get_tone(dark) == pytest.approx(40.0)

    def test_clamped_to_range(self, scheme_2025):
        color = _pair(DeltaConstraint.EXACT, delta=80.0)
        assert color.get_tone(scheme_2025) == 0.0
