# Copyright (c) 2026 Tonecraft
# SPDX-License-Identifier: MIT

"""Tests for scheme construction and whole-catalog resolution."""

import itertools

import pytest

from tonecraft.dynamiccolor import (
    ALL_ROLE_NAMES,
    DIM_ROLES,
    ROLE_NAMES,
    ConfigurationError,
    DynamicScheme,
    SpecVersion,
    get_spec,
)
from tonecraft.dynamiccolor.palettes_delegate import (
    DEFAULT_ERROR_CHROMA,
    DEFAULT_ERROR_HUE,
)
from tonecraft.hct import Hct, ratio_of_tones
from tonecraft.hct.colorspace import sanitize_degrees
from tonecraft.palettes import TonalPalette


VIOLET = Hct.from_int(0xFF6750A4)

SEEDS = (0xFF6750A4, 0xFFB3261E, 0xFFFFDE3F, 0xFF00A3A3)
VERSIONS = ("2021", "2025")
MODES = (False, True)
LEVELS = (-1.0, 0.0, 0.5, 1.0)


_SCHEMES = {}


def _scheme(seed, version, is_dark, level):
    key = (seed, version, is_dark, level)
    if key not in _SCHEMES:
        _SCHEMES[key] = DynamicScheme(
            Hct.from_int(seed),
            is_dark=is_dark,
            contrast_level=level,
            spec_version=version,
        )
    return _SCHEMES[key]


ALL_SCHEMES = list(itertools.product(SEEDS, VERSIONS, MODES, LEVELS))


def _scheme_id(params):
    seed, version, is_dark, level = params
    return f"{seed & 0xFFFFFF:06X}-{version}-{'dark' if is_dark else 'light'}-{level}"


@pytest.fixture(params=ALL_SCHEMES, ids=[_scheme_id(p) for p in ALL_SCHEMES])
def any_scheme(request):
    return _scheme(*request.param)


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

class TestConstruction:

    def test_defaults(self):
        scheme = DynamicScheme(VIOLET, is_dark=False)
        assert scheme.contrast_level == 0.0
        assert scheme.spec_version is SpecVersion.SPEC_2021

    def test_version_string_parsed(self):
        scheme = DynamicScheme(VIOLET, is_dark=False, spec_version="2025")
        assert scheme.spec_version is SpecVersion.SPEC_2025

    def test_unknown_version(self):
        with pytest.raises(ConfigurationError, match="Unknown spec version"):
            DynamicScheme(VIOLET, is_dark=False, spec_version="2019")

    @pytest.mark.parametrize("level", [-1.5, 1.01])
    def test_contrast_level_range(self, level):
        with pytest.raises(ValueError, match="Contrast level"):
            DynamicScheme(VIOLET, is_dark=False, contrast_level=level)

    def test_all_palettes_generated(self):
        scheme = DynamicScheme(VIOLET, is_dark=False)
        for name in (
            "primary_palette",
            "secondary_palette",
            "tertiary_palette",
            "neutral_palette",
            "neutral_variant_palette",
            "error_palette",
        ):
            assert isinstance(getattr(scheme, name), TonalPalette)

    def test_given_palette_kept(self):
        custom = TonalPalette.from_hue_and_chroma(120.0, 30.0)
        scheme = DynamicScheme(VIOLET, is_dark=False, primary_palette=custom)
        assert scheme.primary_palette is custom

    def test_source_color_argb(self):
        assert DynamicScheme(VIOLET, is_dark=True).source_color_argb == 0xFF6750A4

    def test_str(self):
        text = str(DynamicScheme(VIOLET, is_dark=True, spec_version="2025"))
        assert "mode=dark" in text
        assert "spec_version=2025" in text

    def test_frozen(self):
        scheme = DynamicScheme(VIOLET, is_dark=False)
        with pytest.raises(AttributeError):
            scheme.is_dark = True


class TestPalettes:

    def test_2021_palettes_share_source_hue(self):
        scheme = _scheme(0xFF6750A4, "2021", False, 0.0)
        for palette in (
            scheme.primary_palette,
            scheme.secondary_palette,
            scheme.tertiary_palette,
            scheme.neutral_palette,
            scheme.neutral_variant_palette,
        ):
            assert palette.hue == pytest.approx(VIOLET.hue)

    def test_2021_default_error_palette(self):
        scheme = _scheme(0xFF6750A4, "2021", False, 0.0)
        assert scheme.error_palette.hue == DEFAULT_ERROR_HUE
        assert scheme.error_palette.chroma == DEFAULT_ERROR_CHROMA

    def test_2025_tertiary_hue_rotated(self):
        # Source hue ~283 falls in the [278, 333) interval: rotate by -15
        scheme = _scheme(0xFF6750A4, "2025", False, 0.0)
        expected = sanitize_degrees(VIOLET.hue - 15.0)
        assert scheme.tertiary_palette.hue == pytest.approx(expected)

    def test_2025_error_hue_from_table(self):
        scheme = _scheme(0xFF6750A4, "2025", False, 0.0)
        assert scheme.error_palette.hue == pytest.approx(12.0)
        assert scheme.error_palette.chroma == pytest.approx(50.0)

    def test_piecewise_hue(self):
        assert DynamicScheme.get_piecewise_hue(VIOLET, (0, 180, 360), (10, 20)) == 20.0

    def test_piecewise_hue_no_match(self):
        assert DynamicScheme.get_piecewise_hue(VIOLET, (0, 90), (10,)) == VIOLET.hue

    def test_rotated_hue_wraps(self):
        hue = DynamicScheme.get_rotated_hue(VIOLET, (0, 360), (100,))
        assert hue == pytest.approx(sanitize_degrees(VIOLET.hue + 100.0))
        assert 0.0 <= hue < 360.0


class TestDerive:

    def test_palettes_shared(self):
        scheme = _scheme(0xFF6750A4, "2025", False, 0.0)
        dark = scheme.derive(is_dark=True)
        assert dark.is_dark
        assert dark.primary_palette is scheme.primary_palette
        assert dark.tertiary_palette is scheme.tertiary_palette

    def test_unchanged_fields_kept(self):
        scheme = _scheme(0xFF6750A4, "2025", True, 0.5)
        light = scheme.derive(is_dark=False)
        assert light.contrast_level == 0.5
        assert light.spec_version is SpecVersion.SPEC_2025

    def test_original_untouched(self):
        scheme = _scheme(0xFF6750A4, "2021", False, 0.0)
        scheme.derive(is_dark=True, contrast_level=1.0)
        assert not scheme.is_dark
        assert scheme.contrast_level == 0.0


# ---------------------------------------------------------------------------
# Catalogs
# ---------------------------------------------------------------------------

class TestCatalog:

    def test_2021_catalog(self):
        assert tuple(get_spec("2021").catalog) == ROLE_NAMES

    def test_2025_catalog(self):
        assert tuple(get_spec("2025").catalog) == ALL_ROLE_NAMES

    def test_spec_shared(self):
        assert get_spec("2025") is get_spec(SpecVersion.SPEC_2025)

    @pytest.mark.parametrize("name", DIM_ROLES)
    def test_dim_roles_missing_from_2021(self, name):
        scheme = _scheme(0xFF6750A4, "2021", False, 0.0)
        with pytest.raises(ConfigurationError, match="not defined in spec version 2021"):
            scheme.role(name)

    def test_unknown_role(self):
        scheme = _scheme(0xFF6750A4, "2025", False, 0.0)
        with pytest.raises(ConfigurationError, match="Unknown color role"):
            scheme.get_tone("primary_shade")

    def test_configuration_error_is_value_error(self):
        assert issubclass(ConfigurationError, ValueError)

    @pytest.mark.parametrize("name", ["onPrimaryContainer", "on-primary-container"])
    def test_alternate_name_styles(self, name):
        scheme = _scheme(0xFF6750A4, "2025", False, 0.0)
        assert scheme.get_tone(name) == scheme.get_tone("on_primary_container")
        assert scheme.role(name).name == "on_primary_container"


# ---------------------------------------------------------------------------
# Invariants over every role
# ---------------------------------------------------------------------------

class TestInvariants:

    def test_every_role_resolves_in_range(self, any_scheme):
        colors = any_scheme.resolve_all()
        assert [c.name for c in colors] == list(any_scheme.colors.catalog)
        for color in colors:
            assert 0.0 <= color.tone <= 100.0
            assert color.argb >> 24 == 0xFF
            assert color.chroma >= 0.0

    def test_contrast_law(self, any_scheme):
        """Foregrounds meet their curve against their background when reachable."""
        level = any_scheme.contrast_level
        for name in any_scheme.colors.catalog:
            role = any_scheme.role(name)
            if role.is_background or role.background is None or role.contrast_curve is None:
                continue
            if role.tone_delta_pair is not None and role.tone_delta_pair(any_scheme) is not None:
                continue
            if role.second_background is not None:
                continue
            curve = role.contrast_curve(any_scheme)
            background = role.background(any_scheme)
            if curve is None or background is None:
                continue

            desired = curve.value_at(level)
            bg_tone = background.get_tone(any_scheme)
            reachable = max(ratio_of_tones(bg_tone, 0.0), ratio_of_tones(bg_tone, 100.0))
            if reachable < desired:
                continue

            tone = any_scheme.get_tone(role)
            assert ratio_of_tones(tone, bg_tone) >= desired - 0.05, name

    def test_resolution_is_deterministic(self, any_scheme):
        first = any_scheme.resolve_all()
        again = DynamicScheme(
            any_scheme.source_color_hct,
            is_dark=any_scheme.is_dark,
            contrast_level=any_scheme.contrast_level,
            spec_version=any_scheme.spec_version,
        ).resolve_all()
        assert first == again

    def test_shadow_and_scrim_black(self, any_scheme):
        assert any_scheme.get_argb("shadow") == 0xFF000000
        assert any_scheme.get_argb("scrim") == 0xFF000000


class TestDeltaPairs:

    @pytest.mark.parametrize("family", ["primary", "secondary", "tertiary", "error"])
    @pytest.mark.parametrize("is_dark", MODES)
    @pytest.mark.parametrize("level", LEVELS)
    def test_2021_accent_and_container_apart(self, family, is_dark, level):
        scheme = _scheme(0xFF6750A4, "2021", is_dark, level)
        accent = scheme.get_tone(family)
        container = scheme.get_tone(f"{family}_container")
        if 0.0 < accent < 100.0 and 0.0 < container < 100.0:
            assert abs(accent - container) >= 10.0 - 1e-6

    @pytest.mark.parametrize("family", ["primary", "secondary", "tertiary"])
    @pytest.mark.parametrize("is_dark", MODES)
    @pytest.mark.parametrize("level", LEVELS)
    def test_2021_fixed_dim_below_fixed(self, family, is_dark, level):
        scheme = _scheme(0xFF6750A4, "2021", is_dark, level)
        fixed = scheme.get_tone(f"{family}_fixed")
        fixed_dim = scheme.get_tone(f"{family}_fixed_dim")
        assert fixed - fixed_dim >= 10.0 - 1e-6

    @pytest.mark.parametrize("seed", SEEDS)
    @pytest.mark.parametrize("family", ["primary", "secondary", "tertiary"])
    @pytest.mark.parametrize("is_dark", MODES)
    @pytest.mark.parametrize("level", LEVELS)
    def test_2025_fixed_dim_exactly_darker(self, seed, family, is_dark, level):
        scheme = _scheme(seed, "2025", is_dark, level)
        fixed = scheme.get_tone(f"{family}_fixed")
        fixed_dim = scheme.get_tone(f"{family}_fixed_dim")
        assert fixed_dim == pytest.approx(max(0.0, fixed - 5.0))


class TestAliases2025:

    @pytest.mark.parametrize("alias, target", [
        ("background", "surface"),
        ("on_background", "on_surface"),
        ("surface_variant", "surface_container_highest"),
        ("surface_tint", "primary"),
    ])
    @pytest.mark.parametrize("is_dark", MODES)
    def test_alias_matches_target(self, alias, target, is_dark):
        scheme = _scheme(0xFF6750A4, "2025", is_dark, 0.0)
        assert scheme.get_tone(alias) == scheme.get_tone(target)
        assert scheme.get_argb(alias) == scheme.get_argb(target)

    def test_alias_keeps_its_name(self):
        scheme = _scheme(0xFF6750A4, "2025", False, 0.0)
        assert scheme.resolve("surface_tint").name == "surface_tint"


# ---------------------------------------------------------------------------
# Known tones
# ---------------------------------------------------------------------------

class TestKnownTones2021:

    def test_light(self):
        scheme = _scheme(0xFF6750A4, "2021", False, 0.0)
        assert scheme.get_tone("primary") == pytest.approx(40.0)
        assert scheme.get_tone("primary_container") == pytest.approx(90.0)
        assert scheme.get_tone("surface") == pytest.approx(98.0)
        assert scheme.get_tone("surface_dim") == pytest.approx(87.0)
        assert scheme.get_tone("surface_container_lowest") == pytest.approx(100.0)
        assert scheme.get_tone("primary_fixed") == pytest.approx(90.0)
        assert scheme.get_tone("primary_fixed_dim") == pytest.approx(80.0)

    def test_dark(self):
        scheme = _scheme(0xFF6750A4, "2021", True, 0.0)
        assert scheme.get_tone("primary") == pytest.approx(80.0)
        assert scheme.get_tone("primary_container") == pytest.approx(30.0)
        assert scheme.get_tone("surface") == pytest.approx(6.0)
        assert scheme.get_tone("surface_bright") == pytest.approx(24.0)

    def test_fixed_same_in_both_modes(self):
        light = _scheme(0xFF6750A4, "2021", False, 0.0)
        dark = _scheme(0xFF6750A4, "2021", True, 0.0)
        assert light.get_tone("primary_fixed") == dark.get_tone("primary_fixed")

    def test_high_contrast_surface_dim(self):
        scheme = _scheme(0xFF6750A4, "2021", False, 1.0)
        assert scheme.get_tone("surface_dim") == pytest.approx(75.0)


class TestKnownTones2025:

    def test_light(self):
        scheme = _scheme(0xFF6750A4, "2025", False, 0.0)
        assert scheme.get_tone("primary") == pytest.approx(40.0)
        assert scheme.get_tone("primary_container") == pytest.approx(90.0)
        assert scheme.get_tone("surface") == pytest.approx(98.0)

    def test_dark(self):
        scheme = _scheme(0xFF6750A4, "2025", True, 0.0)
        assert scheme.get_tone("primary") == pytest.approx(80.0)
        assert scheme.get_tone("primary_container") == pytest.approx(30.0)
        assert scheme.get_tone("surface") == pytest.approx(4.0)

    @pytest.mark.parametrize("is_dark", MODES)
    def test_fixed(self, is_dark):
        scheme = _scheme(0xFF6750A4, "2025", is_dark, 0.0)
        assert scheme.get_tone("primary_fixed") == pytest.approx(90.0)
        assert scheme.get_tone("primary_fixed_dim") == pytest.approx(85.0)

    def test_yellow_neutral_surface_brighter(self):
        yellow = Hct.from_hct(110.0, 40.0, 80.0)
        scheme = DynamicScheme(yellow, is_dark=False, spec_version="2025")
        assert Hct.is_yellow(scheme.neutral_palette.hue)
        assert scheme.get_tone("surface") == pytest.approx(99.0)


class TestVersionsDiverge:

    def test_dark_surface(self):
        old = _scheme(0xFF6750A4, "2021", True, 0.0)
        new = _scheme(0xFF6750A4, "2025", True, 0.0)
        assert old.get_tone("surface") == pytest.approx(6.0)
        assert new.get_tone("surface") == pytest.approx(4.0)

    def test_dim_roles_only_in_2025(self):
        new = _scheme(0xFF6750A4, "2025", False, 0.0)
        names = [c.name for c in new.resolve_all()]
        for name in DIM_ROLES:
            assert name in names

    def test_2025_dim_darker_than_accent(self):
        scheme = _scheme(0xFF6750A4, "2025", False, 0.0)
        assert scheme.get_tone("primary_dim") <= scheme.get_tone("primary") - 5.0 + 1e-6


class TestRedSeed:

    def test_light_standard_2021(self):
        scheme = DynamicScheme(Hct.from_hct(0.0, 50.0, 50.0), is_dark=False)
        assert scheme.get_tone("primary") == pytest.approx(40.0)
        assert scheme.get_tone("surface_container_lowest") == pytest.approx(100.0)
