# Copyright (c) 2026 Tonecraft
# SPDX-License-Identifier: MIT

"""Tests for the HCT color model and its gamut-mapping solver."""

import pytest

from tonecraft.hct import Hct
from tonecraft.hct.colorspace import lstar_from_argb


class TestFromInt:
    """ARGB → HCT against known CAM16 values."""

    @pytest.mark.parametrize("argb, hue, chroma, tone", [
        (0xFFFF0000, 27.41, 113.36, 53.24),
        (0xFF0000FF, 282.79, 87.23, 32.30),
        (0xFF00FF00, 142.14, 108.41, 87.74),
    ])
    def test_primaries(self, argb, hue, chroma, tone):
        hct = Hct.from_int(argb)
        assert hct.hue == pytest.approx(hue, abs=0.5)
        assert hct.chroma == pytest.approx(chroma, abs=1.0)
        assert hct.tone == pytest.approx(tone, abs=0.05)

    def test_white(self):
        hct = Hct.from_int(0xFFFFFFFF)
        assert hct.tone == pytest.approx(100.0, abs=0.01)
        assert hct.chroma < 5.0

    def test_black(self):
        hct = Hct.from_int(0xFF000000)
        assert hct.tone == pytest.approx(0.0, abs=0.01)
        assert hct.chroma == pytest.approx(0.0, abs=0.01)

    def test_to_int_and_hex(self):
        hct = Hct.from_int(0xFF6750A4)
        assert hct.to_int() == 0xFF6750A4
        assert hct.hex == "#6750A4"

    def test_hue_range(self):
        for argb in (0xFFFF00FF, 0xFF00FFFF, 0xFFFFFF00, 0xFF123456):
            assert 0.0 <= Hct.from_int(argb).hue < 360.0

    def test_tone_is_lstar(self):
        argb = 0xFF6750A4
        assert Hct.from_int(argb).tone == pytest.approx(lstar_from_argb(argb))


class TestFromHct:
    """HCT → ARGB solving."""

    @pytest.mark.parametrize("tone", [10.0, 30.0, 50.0, 70.0, 90.0])
    def test_tone_is_preserved(self, tone):
        hct = Hct.from_hct(282.0, 16.0, tone)
        assert hct.tone == pytest.approx(tone, abs=0.5)

    def test_in_gamut_request_keeps_hue_and_chroma(self):
        hct = Hct.from_hct(150.0, 20.0, 60.0)
        assert hct.hue == pytest.approx(150.0, abs=2.0)
        assert hct.chroma == pytest.approx(20.0, abs=1.0)

    def test_out_of_gamut_chroma_is_reduced(self):
        hct = Hct.from_hct(27.0, 200.0, 50.0)
        assert hct.chroma < 200.0
        assert hct.chroma > 50.0
        assert hct.tone == pytest.approx(50.0, abs=0.5)

    def test_zero_chroma_is_gray(self):
        hct = Hct.from_hct(120.0, 0.0, 40.0)
        r = (hct.argb >> 16) & 0xFF
        g = (hct.argb >> 8) & 0xFF
        b = hct.argb & 0xFF
        assert r == g == b

    def test_extreme_tones(self):
        assert Hct.from_hct(200.0, 50.0, 0.0).argb == 0xFF000000
        assert Hct.from_hct(200.0, 50.0, 100.0).argb == 0xFFFFFFFF

    def test_roundtrip_existing_color(self):
        source = Hct.from_int(0xFF6750A4)
        again = Hct.from_hct(source.hue, source.chroma, source.tone)
        assert again.tone == pytest.approx(source.tone, abs=0.5)
        assert again.hue == pytest.approx(source.hue, abs=2.0)

    def test_deterministic(self):
        assert Hct.from_hct(300.0, 40.0, 55.0) == Hct.from_hct(300.0, 40.0, 55.0)


class TestHueFamilies:

    def test_blue(self):
        assert Hct.is_blue(260.0)
        assert not Hct.is_blue(282.0)

    def test_yellow(self):
        assert Hct.is_yellow(110.0)
        assert not Hct.is_yellow(125.0)

    def test_cyan(self):
        assert Hct.is_cyan(190.0)
        assert not Hct.is_cyan(207.0)


class TestHctValue:

    def test_frozen(self):
        hct = Hct.from_int(0xFF6750A4)
        with pytest.raises(AttributeError):
            hct.tone = 50.0

    def test_str(self):
        text = str(Hct.from_int(0xFF0000FF))
        assert text.startswith("HCT(")
        assert text.count(",") == 2
