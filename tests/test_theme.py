# Copyright (c) 2026 Tonecraft
# SPDX-License-Identifier: MIT

"""Tests for the generate_theme() entry point and SchemeConfig."""

import pytest

import tonecraft
from tonecraft import (
    ConfigurationError,
    Hct,
    ResolvedScheme,
    SchemeConfig,
    generate_theme,
)
from tonecraft.dynamiccolor import ALL_ROLE_NAMES, ROLE_NAMES


class TestGenerateTheme:

    def test_returns_resolved_scheme(self):
        theme = generate_theme("#6750A4")
        assert isinstance(theme, ResolvedScheme)
        assert theme.source_hex == "#6750A4"
        assert theme.spec_version == "2021"
        assert not theme.is_dark

    def test_2021_roles(self):
        assert generate_theme("#6750A4").names == ROLE_NAMES

    def test_2025_roles(self):
        assert generate_theme("#6750A4", spec_version="2025").names == ALL_ROLE_NAMES

    def test_source_forms_agree(self):
        from_hex = generate_theme("#6750A4", roles=("primary",))
        from_int = generate_theme(0xFF6750A4, roles=("primary",))
        from_hct = generate_theme(Hct.from_int(0xFF6750A4), roles=("primary",))
        assert from_hex == from_int == from_hct

    def test_roles_subset_in_order(self):
        theme = generate_theme("#6750A4", roles=("onPrimary", "primary"))
        assert theme.names == ("on_primary", "primary")

    def test_dark_mode(self):
        theme = generate_theme("#6750A4", is_dark=True)
        assert theme.is_dark
        assert theme["surface"].tone == pytest.approx(6.0)

    def test_contrast_level_recorded(self):
        theme = generate_theme("#6750A4", contrast_level=0.5, roles=("primary",))
        assert theme.contrast_level == 0.5

    def test_missing_source(self):
        with pytest.raises(ValueError, match="No source color"):
            generate_theme()

    def test_bad_source_type(self):
        with pytest.raises(TypeError, match="Source color"):
            generate_theme(1.5)

    def test_bad_hex(self):
        with pytest.raises(ValueError):
            generate_theme("#XYZ123")

    def test_unknown_version(self):
        with pytest.raises(ConfigurationError):
            generate_theme("#6750A4", spec_version="2030")

    def test_unknown_role(self):
        with pytest.raises(ConfigurationError):
            generate_theme("#6750A4", roles=("primary_shade",))

    def test_dim_role_not_in_2021(self):
        with pytest.raises(ConfigurationError, match="not defined"):
            generate_theme("#6750A4", roles=("primary_dim",))

    def test_contrast_out_of_range(self):
        with pytest.raises(ValueError, match="Contrast level"):
            generate_theme("#6750A4", contrast_level=1.5)

    def test_json_roundtrip_of_generated_theme(self):
        theme = generate_theme("#6750A4", roles=("primary", "on_primary"))
        assert ResolvedScheme.from_json(theme.to_json()) == theme


class TestConfig:

    def test_defaults(self):
        config = SchemeConfig()
        assert config.source_color is None
        assert config.is_dark is False
        assert config.contrast_level == 0.0
        assert config.spec_version == "2021"
        assert config.roles is None

    def test_config_used(self):
        config = SchemeConfig(source_color="#6750A4", is_dark=True, spec_version="2025")
        theme = generate_theme(config=config, roles=("surface",))
        assert theme.is_dark
        assert theme.spec_version == "2025"
        assert theme["surface"].tone == pytest.approx(4.0)

    def test_keyword_overrides_config(self):
        config = SchemeConfig(source_color="#6750A4", is_dark=True)
        theme = generate_theme(config=config, is_dark=False, roles=("surface",))
        assert not theme.is_dark

    def test_config_roles(self):
        config = SchemeConfig(roles=["primary", "secondary"])
        theme = generate_theme("#6750A4", config=config)
        assert theme.names == ("primary", "secondary")
        assert config.roles == ("primary", "secondary")

    def test_version_normalized(self):
        assert SchemeConfig(spec_version=2025).spec_version == "2025"

    def test_invalid_version(self):
        with pytest.raises(ConfigurationError):
            SchemeConfig(spec_version="1999")

    def test_invalid_contrast(self):
        with pytest.raises(ValueError, match="Contrast level"):
            SchemeConfig(contrast_level=-2.0)

    def test_invalid_source(self):
        with pytest.raises(ValueError):
            SchemeConfig(source_color="not a color")

    def test_dict_roundtrip(self):
        config = SchemeConfig(
            source_color="#B3261E",
            is_dark=True,
            contrast_level=0.5,
            spec_version="2025",
            roles=("error", "on_error"),
        )
        assert SchemeConfig.from_dict(config.to_dict()) == config

    def test_from_dict_defaults(self):
        assert SchemeConfig.from_dict({}) == SchemeConfig()


class TestPackage:

    def test_version(self):
        assert tonecraft.__version__ == "1.0.0"

    def test_exports(self):
        for name in tonecraft.__all__:
            assert hasattr(tonecraft, name)
