# -*- coding: utf-8 -*-
"""
Kernel Factory Tests - Kernel value type and intensity-derived weights.

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

import numpy as np
import pytest

from rasterfx.exceptions import InvalidParameterError
from rasterfx.image_processing.kernels import (
    Kernel,
    blur_kernel,
    edge_detect_kernel,
    kernel_for,
    sharpen_kernel,
    strength_for,
    validate_intensity,
)
from rasterfx.vocabulary import FilterKind


class TestKernel:
    """Kernel construction and accessors."""

    def test_row_major_indexing(self):
        k = Kernel(range(9))
        assert k.weight(-1, -1) == 0.0
        assert k.weight(1, -1) == 2.0
        assert k.weight(-1, 0) == 3.0
        assert k.weight(0, 0) == 4.0
        assert k.weight(1, 1) == 8.0

    def test_matrix_input(self):
        k = Kernel(np.arange(9).reshape(3, 3))
        assert k == Kernel(range(9))
        np.testing.assert_array_equal(k.as_matrix()[2], [6, 7, 8])

    def test_identity(self):
        assert Kernel.identity().weights == (0, 0, 0, 0, 1, 0, 0, 0, 0)

    def test_total(self):
        assert Kernel([0, -1, 0, -1, 5, -1, 0, -1, 0]).total == 1.0

    @pytest.mark.parametrize("weights", [
        [1] * 8,
        [1] * 10,
        None,
        ['a'] * 9,
        [0, 0, 0, 0, float('nan'), 0, 0, 0, 0],
        [0, 0, 0, 0, float('inf'), 0, 0, 0, 0],
    ])
    def test_invalid_weights(self, weights):
        with pytest.raises(InvalidParameterError):
            Kernel(weights)

    def test_weights_are_read_only(self):
        with pytest.raises(ValueError):
            Kernel.identity().as_matrix()[1, 1] = 2.0

    def test_offset_out_of_range(self):
        with pytest.raises(IndexError):
            Kernel.identity().weight(2, 0)

    def test_hashable(self):
        assert len({Kernel.identity(), Kernel.identity()}) == 1


class TestIntensity:

    def test_strength(self):
        assert strength_for(50) == 1.0
        assert strength_for(100) == 2.0
        assert strength_for(1) == pytest.approx(0.02)

    @pytest.mark.parametrize("value", [0, 101, -5, 50.0, True, '50', None])
    def test_invalid(self, value):
        with pytest.raises(InvalidParameterError):
            validate_intensity(value)

    def test_numpy_integer_accepted(self):
        assert validate_intensity(np.int64(70)) == 70


class TestSharpenKernel:

    def test_unit_strength(self):
        assert sharpen_kernel(50).weights == (0, -1, 0, -1, 5, -1, 0, -1, 0)

    def test_half_strength(self):
        assert sharpen_kernel(25).weights == (0, -0.5, 0, -0.5, 3, -0.5, 0, -0.5, 0)

    def test_double_strength(self):
        assert sharpen_kernel(100).weights == (0, -2, 0, -2, 9, -2, 0, -2, 0)

    @pytest.mark.parametrize("intensity", [1, 17, 50, 99, 100])
    def test_sums_to_one(self, intensity):
        assert sharpen_kernel(intensity).total == pytest.approx(1.0)


class TestBlurKernel:

    def test_unit_strength_is_binomial(self):
        expected = np.array([1, 2, 1, 2, 4, 2, 1, 2, 1]) / 16.0
        np.testing.assert_allclose(blur_kernel(50).weights, expected)

    def test_double_strength_is_box(self):
        np.testing.assert_allclose(blur_kernel(100).weights, np.full(9, 1 / 9))

    @pytest.mark.parametrize("intensity", range(1, 101, 7))
    def test_non_negative_and_normalized(self, intensity):
        k = blur_kernel(intensity)
        assert min(k.weights) >= 0.0
        assert k.total == pytest.approx(1.0)

    def test_center_weight_decreases(self):
        centers = [blur_kernel(i).weight(0, 0) for i in (1, 25, 50, 75, 100)]
        assert centers == sorted(centers, reverse=True)


class TestEdgeKernel:

    def test_unit_strength(self):
        assert edge_detect_kernel(50).weights == (-1, -1, -1, -1, 8, -1, -1, -1, -1)

    @pytest.mark.parametrize("intensity", [1, 33, 50, 100])
    def test_sums_to_zero(self, intensity):
        assert edge_detect_kernel(intensity).total == pytest.approx(0.0, abs=1e-12)


class TestKernelFor:

    def test_dispatch(self):
        assert kernel_for(FilterKind.SHARPEN, 60) == sharpen_kernel(60)
        assert kernel_for('blur', 30) == blur_kernel(30)
        assert kernel_for('edge-detection') == edge_detect_kernel(50)

    def test_colour_filter_rejected(self):
        with pytest.raises(InvalidParameterError, match="not a convolution"):
            kernel_for(FilterKind.GRAYSCALE)

    def test_unknown_name_rejected(self):
        with pytest.raises(InvalidParameterError, match="Unknown"):
            kernel_for('emboss')
