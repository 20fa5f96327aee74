# -*- coding: utf-8 -*-
"""
Shared fixtures for rasterfx tests.

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

from rasterfx.raster import RasterBuffer


@pytest.fixture
def gray_3x3():
    """3x3 image, every pixel (128, 128, 128, 255)."""
    return RasterBuffer.blank(3, 3, fill=(128, 128, 128, 255))


@pytest.fixture
def ramp_4x4():
    """4x4 image with a red ramp [0, 85, 170, 255] along each row."""
    array = np.zeros((4, 4, 4), dtype=np.uint8)
    array[..., 0] = np.array([0, 85, 170, 255], dtype=np.uint8)
    array[..., 1] = 40
    array[..., 2] = np.arange(4, dtype=np.uint8)[:, np.newaxis] * 60
    array[..., 3] = 255
    return RasterBuffer.from_array(array)


@pytest.fixture
def random_buffer():
    """37x23 image with random colour and alpha."""
    rng = np.random.default_rng(1234)
    array = rng.integers(0, 256, size=(23, 37, 4), dtype=np.uint8)
    return RasterBuffer.from_array(array)
