"""Unit tests for Color and Albedo.

Tests cover:
- Channel composition through the albedo weights
- 8-bit quantization with max-channel rescaling
- Color arithmetic keeps the Color type
"""

import numpy as np
import pytest

from core.color import Albedo, Color
from core.vector import Vector3


class TestAlbedo:
    """Tests for Albedo accessors."""

    def test_channels(self):
        a = Albedo(0.6, 0.3, 0.1, 0.0)
        assert a.diffuse == pytest.approx(0.6)
        assert a.specular == pytest.approx(0.3)
        assert a.reflective == pytest.approx(0.1)
        assert a.refractive == 0.0


class TestApplyAlbedo:
    """Tests for weighted channel composition."""

    def test_weighted_sum(self):
        result = Color.apply_albedo(
            Color(1.0, 0.0, 0.0),
            Color(0.0, 1.0, 0.0),
            Color(0.0, 0.0, 1.0),
            Color(1.0, 1.0, 1.0),
            Albedo(0.5, 0.25, 0.125, 0.1),
        )
        assert isinstance(result, Color)
        assert result.x == pytest.approx(0.6)
        assert result.y == pytest.approx(0.35)
        assert result.z == pytest.approx(0.225)

    def test_single_channel_passes_through(self):
        bg = Color(0.6, 0.8, 0.4)
        result = Color.apply_albedo(Color.RED, Color.WHITE, bg, Color.BLUE, Albedo(0, 0, 1, 0))
        assert result.is_close(bg)

    def test_may_exceed_one(self):
        result = Color.apply_albedo(Color.WHITE, Color.WHITE, Color.BLACK, Color.BLACK,
                                    Albedo(1, 1, 0, 0))
        assert result.x == pytest.approx(2.0)


class TestQuantization:
    """Tests for Color -> 8-bit conversion."""

    def test_round_trip_preserves_ratios(self):
        for c in (Color(0.2, 0.4, 0.6), Color(0.9, 0.1, 0.5), Color(1.0, 1.0, 1.0)):
            back = Color.from_rgb8(c.to_rgb8())
            for original, restored in zip(c, back):
                assert abs(original - restored) <= 1.0 / 255.0

    def test_bright_color_is_rescaled(self):
        rgb = Color(2.0, 1.0, 0.5).to_rgb8()
        assert rgb == (255, 127, 63)

    def test_max_channel_hits_255(self):
        for c in (Color(3.7, 0.2, 1.1), Color(0.1, 1.3, 0.7), Color(0.0, 0.0, 42.0)):
            assert max(c.to_rgb8()) == 255

    def test_negative_channels_clamp_to_zero(self):
        assert Color(-0.5, 0.5, 0.0).to_rgb8() == (0, 127, 0)

    def test_black_and_white(self):
        assert Color.BLACK.to_rgb8() == (0, 0, 0)
        assert Color.WHITE.to_rgb8() == (255, 255, 255)


class TestColorArithmetic:
    """Tests for Color operators."""

    def test_numpy_scalars_scale(self):
        c = Color(0.1, 0.2, 0.3)
        assert (c * np.int64(2)).is_close(Color(0.2, 0.4, 0.6))
        assert isinstance(c * np.float32(0.5), Color)
        assert (Vector3(1, 2, 3) * np.int32(3)) == Vector3(3, 6, 9)

    def test_operators_return_colors(self):
        c = Color(0.1, 0.2, 0.3) + Color(0.1, 0.1, 0.1)
        assert isinstance(c, Color)
        assert isinstance(c * 2.0, Color)
        assert isinstance(c / 2.0, Color)
        assert isinstance(c.apply_intensity(0.5), Color)
        assert (c * 2.0).is_close(Color(0.4, 0.6, 0.8))
