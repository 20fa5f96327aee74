# -*- coding: utf-8 -*-
"""
Colour Remap Tests - Grayscale, contrast, and brightness operators.

Checks the conversion formulas against hand-computed values, the
round-then-clamp storage rule, alpha preservation, method fallback, and
level validation.

Dependencies
------------
pytest

License
-------
MIT License
Copyright (c) 2026 rasterfx contributors
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

import logging

import numpy as np
import pytest

from rasterfx.exceptions import (
    InvalidInputError,
    InvalidParameterError,
    UnsupportedMethodError,
)
from rasterfx.image_processing.color import (
    BrightnessAdjustment,
    ContrastAdjustment,
    Grayscale,
    adjust_brightness,
    adjust_contrast,
    contrast_factor,
    remap,
    to_grayscale,
    validate_level,
    validate_method,
)
from rasterfx.raster import RasterBuffer
from rasterfx.vocabulary import ConversionMethod


def _single(r, g, b, a=255):
    return RasterBuffer(1, 1, [r, g, b, a])


# ---------------------------------------------------------------------------
# Grayscale
# ---------------------------------------------------------------------------

class TestGrayscale:
    """Grayscale conversion formulas."""

    def test_luminance_matches_rounded_formula(self, random_buffer):
        result = to_grayscale(random_buffer, 'luminance')
        src = random_buffer.as_array().astype(np.float64)
        expected = np.rint(0.299 * src[..., 0] + 0.587 * src[..., 1]
                           + 0.114 * src[..., 2])
        out = result.as_array()
        for c in range(3):
            np.testing.assert_array_equal(out[..., c], expected)
        np.testing.assert_array_equal(out[..., 3], random_buffer.as_array()[..., 3])

    def test_luminance_single_pixel(self):
        # 0.299*10 + 0.587*200 + 0.114*50 = 126.09
        out = to_grayscale(_single(10, 200, 50, 77))
        assert out.pixel(0, 0) == (126, 126, 126, 77)

    def test_average_ramp(self, ramp_4x4):
        result = to_grayscale(ramp_4x4, 'average')
        src = ramp_4x4.as_array().astype(np.float64)
        for y in range(4):
            for x in range(4):
                r, g, b = src[y, x, :3]
                gray = round((r + g + b) / 3)
                assert result.pixel(x, y) == (gray, gray, gray, 255)

    def test_average_first_row(self, ramp_4x4):
        # Row 0: R = [0, 85, 170, 255], G = 40, B = 0
        result = remap(ramp_4x4, 'average')
        row = [result.pixel(x, 0)[0] for x in range(4)]
        assert row == [13, 42, 70, 98]

    def test_lightness(self):
        out = to_grayscale(_single(200, 10, 90), 'lightness')
        assert out.pixel(0, 0)[:3] == (105, 105, 105)

    def test_lightness_ties_round_to_even(self):
        assert to_grayscale(_single(1, 0, 0), 'lightness').pixel(0, 0)[0] == 0
        assert to_grayscale(_single(3, 0, 0), 'lightness').pixel(0, 0)[0] == 2

    def test_enum_method(self):
        out = Grayscale(method=ConversionMethod.AVERAGE).apply(_single(3, 6, 9))
        assert out.pixel(0, 0)[:3] == (6, 6, 6)

    def test_method_case_insensitive(self):
        out = to_grayscale(_single(3, 6, 9), '  Average ')
        assert out.pixel(0, 0)[:3] == (6, 6, 6)

    def test_unknown_method_falls_back_to_luminance(self, random_buffer, caplog):
        with caplog.at_level(logging.WARNING, logger='rasterfx.image_processing.color'):
            result = to_grayscale(random_buffer, 'sepia')
        assert result == to_grayscale(random_buffer, 'luminance')
        assert "sepia" in caplog.text

    def test_none_method_is_luminance(self, random_buffer, caplog):
        with caplog.at_level(logging.WARNING, logger='rasterfx.image_processing.color'):
            result = remap(random_buffer)
        assert result == to_grayscale(random_buffer, 'luminance')
        assert caplog.text == ''

    def test_source_not_modified(self, random_buffer):
        before = random_buffer.to_bytes()
        to_grayscale(random_buffer)
        assert random_buffer.to_bytes() == before

    def test_none_buffer_raises(self):
        with pytest.raises(InvalidInputError):
            to_grayscale(None)

    def test_runtime_override(self):
        gray = Grayscale(method='luminance')
        out = gray.apply(_single(200, 10, 90), method='lightness')
        assert out.pixel(0, 0)[0] == 105


class TestValidateMethod:

    def test_strict_raises(self):
        with pytest.raises(UnsupportedMethodError, match="bogus"):
            validate_method('bogus', strict=True)

    def test_unsupported_method_is_value_error(self):
        with pytest.raises(ValueError):
            validate_method(42, strict=True)

    def test_non_string_falls_back(self):
        assert validate_method(42) is ConversionMethod.LUMINANCE


# ---------------------------------------------------------------------------
# Contrast
# ---------------------------------------------------------------------------

class TestContrastFactor:

    def test_zero_is_unity(self):
        assert contrast_factor(0) == 1.0

    def test_level_fifty(self):
        assert contrast_factor(50) == pytest.approx(259 * 305 / (255 * 209))

    def test_denominator_guard(self):
        with pytest.raises(InvalidParameterError):
            contrast_factor(259)
        with pytest.raises(InvalidParameterError):
            contrast_factor(300)

    def test_non_finite_raises(self):
        with pytest.raises(InvalidParameterError):
            contrast_factor(float('nan'))

    def test_non_number_raises(self):
        with pytest.raises(InvalidParameterError):
            contrast_factor('50')


class TestContrast:
    """Contrast adjustment around mid-gray."""

    def test_level_zero_is_identity(self, random_buffer):
        assert adjust_contrast(random_buffer, 0) == random_buffer

    def test_level_fifty_on_100(self):
        # factor ~1.48222; 1.48222 * (100 - 128) + 128 = 86.498
        out = adjust_contrast(_single(100, 128, 200, 9), 50)
        assert out.pixel(0, 0) == (86, 128, 235, 9)

    def test_positive_level_stretches_away_from_mid_gray(self):
        src = _single(100, 150, 128)
        out = adjust_contrast(src, 30).pixel(0, 0)
        assert out[0] < 100
        assert out[1] > 150
        assert out[2] == 128

    def test_negative_level_flattens(self):
        out = adjust_contrast(_single(0, 255, 128), -100).pixel(0, 0)
        assert 0 < out[0] < 128 < out[1] < 255
        assert out[2] == 128

    def test_saturates(self):
        out = adjust_contrast(_single(0, 255, 10), 100).pixel(0, 0)
        assert out[:3] == (0, 255, 0)

    def test_monotonic_in_level(self):
        values = [adjust_contrast(_single(200, 0, 0), lvl).pixel(0, 0)[0]
                  for lvl in (0, 10, 20, 40)]
        assert values == sorted(values)

    def test_remap_with_number_selects_contrast(self, random_buffer):
        assert remap(random_buffer, 40) == adjust_contrast(random_buffer, 40)

    @pytest.mark.parametrize("level", [-101, 100.5, 259, True, '10', None])
    def test_invalid_level_raises(self, random_buffer, level):
        with pytest.raises(InvalidParameterError):
            adjust_contrast(random_buffer, level)

    def test_float_level_accepted(self, random_buffer):
        out = ContrastAdjustment(level=12.5).apply(random_buffer)
        assert (out.width, out.height) == (random_buffer.width, random_buffer.height)

    @pytest.mark.parametrize("level", [np.int64(50), np.int32(50), np.float32(50.0), np.float64(50.0)])
    def test_numpy_scalar_level(self, random_buffer, level):
        assert adjust_contrast(random_buffer, level) == adjust_contrast(random_buffer, 50)

    def test_remap_with_numpy_scalar_selects_contrast(self, random_buffer):
        assert remap(random_buffer, np.float32(50.0)) == adjust_contrast(random_buffer, 50)

    def test_numpy_scalar_level_on_processor(self, random_buffer):
        out = ContrastAdjustment(level=np.float32(12.5)).apply(random_buffer)
        assert (out.width, out.height) == (random_buffer.width, random_buffer.height)

    def test_numpy_scalar_out_of_range(self, random_buffer):
        with pytest.raises(InvalidParameterError):
            adjust_contrast(random_buffer, np.int64(150))


# ---------------------------------------------------------------------------
# Brightness
# ---------------------------------------------------------------------------

class TestBrightness:

    def test_shift(self):
        # 20 * 255 / 100 = 51
        out = adjust_brightness(_single(10, 100, 250, 3), 20)
        assert out.pixel(0, 0) == (61, 151, 255, 3)

    def test_negative_full_scale_is_black(self, random_buffer):
        out = adjust_brightness(random_buffer, -100)
        assert np.all(out.as_array()[..., :3] == 0)
        np.testing.assert_array_equal(out.as_array()[..., 3],
                                      random_buffer.as_array()[..., 3])

    def test_zero_is_identity(self, random_buffer):
        assert BrightnessAdjustment().apply(random_buffer) == random_buffer

    def test_out_of_range(self, random_buffer):
        with pytest.raises(InvalidParameterError):
            adjust_brightness(random_buffer, 150)

    def test_numpy_scalar_level(self, random_buffer):
        assert adjust_brightness(random_buffer, np.int64(20)) == adjust_brightness(random_buffer, 20)
        assert adjust_brightness(random_buffer, np.float32(-15.0)) == adjust_brightness(random_buffer, -15)


class TestValidateLevel:

    def test_bounds_inclusive(self):
        validate_level('level', -100)
        validate_level('level', 100)

    def test_message_names_parameter(self):
        with pytest.raises(InvalidParameterError, match="Brightness level"):
            validate_level('Brightness level', 101)

    def test_returns_python_float(self):
        level = validate_level('level', np.int64(-40))
        assert type(level) is float
        assert level == -40.0
