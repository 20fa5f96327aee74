# -*- coding: utf-8 -*-
"""
rasterfx - Pixel transforms for in-memory RGBA rasters.

Turns a source ``RasterBuffer`` and a filter request into a new buffer of
the same size. Colour remaps (grayscale, contrast, brightness) work pixel
by pixel; sharpen, blur, and edge detection run a 3x3 convolution whose
kernel is derived from an intensity setting.

Dependencies
------------
numpy
scipy
Pillow (``rasterfx.IO`` only)

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

__version__ = "0.1.0"

from rasterfx.exceptions import (
    RasterFxError,
    InvalidInputError,
    InvalidParameterError,
    UnsupportedMethodError,
    ProcessorError,
    DependencyError,
)
from rasterfx.vocabulary import (
    ProcessorCategory,
    ConversionMethod,
    FilterKind,
    PipelineState,
    OutputFormat,
)
from rasterfx.raster import RasterBuffer

__all__ = [
    'RasterFxError',
    'InvalidInputError',
    'InvalidParameterError',
    'UnsupportedMethodError',
    'ProcessorError',
    'DependencyError',
    'ProcessorCategory',
    'ConversionMethod',
    'FilterKind',
    'PipelineState',
    'OutputFormat',
    'RasterBuffer',
]
